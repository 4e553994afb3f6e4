"""Project service - owner-scoped project CRUD."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.budget.core.exceptions import InvalidBodyError, NotFoundError
from src.budget.core.logging import get_logger
from src.budget.core.validators import parse_record_id
from src.budget.models import Project
from src.budget.repositories import ExpenseRepository, ProjectRepository
from src.budget.schemas.project import ProjectCreate, ProjectUpdate

logger = get_logger(__name__)


class ProjectService:
    """Project CRUD, always scoped to the requesting user.

    A project that exists but belongs to someone else is reported exactly
    like one that does not exist.
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        expense_repo: ExpenseRepository,
        session: AsyncSession,
    ):
        self.project_repo = project_repo
        self.expense_repo = expense_repo
        self.session = session

    async def get_owned(self, project_id: str | UUID, user_id: UUID) -> Project:
        """Load a project owned by `user_id` or raise NotFoundError."""
        parsed = parse_record_id(project_id)
        project = None
        if parsed is not None:
            project = await self.project_repo.get_owned(parsed, user_id)
        if project is None:
            raise NotFoundError(f"Project {project_id} not found")
        return project

    async def create(self, user_id: UUID, data: ProjectCreate) -> Project:
        """Create a project owned by `user_id`.

        Raises:
            InvalidBodyError: name or budget missing or falsy (a zero budget is rejected).
        """
        if not data.name or not data.budget:
            raise InvalidBodyError("name and budget are required")

        project = Project(name=data.name, budget=data.budget, user_id=user_id)
        self.project_repo.add(project)
        try:
            await self.session.commit()
            await self.session.refresh(project)
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Project created", project_id=str(project.id), budget=project.budget)
        return project

    async def list_for_user(self, user_id: UUID) -> list[Project]:
        return await self.project_repo.list_by_user(user_id)

    async def get(self, project_id: str | UUID, user_id: UUID) -> Project:
        return await self.get_owned(project_id, user_id)

    async def update(self, project_id: str | UUID, user_id: UUID, data: ProjectUpdate) -> Project:
        """Apply the provided fields.

        `name` only when non-empty (an empty name leaves it unchanged);
        `budget` whenever the key was sent, including 0.
        """
        project = await self.get_owned(project_id, user_id)

        if "budget" in data.model_fields_set and data.budget is None:
            raise InvalidBodyError("budget cannot be null")

        if data.name:
            project.name = data.name
        if "budget" in data.model_fields_set:
            project.budget = data.budget  # type: ignore[assignment]

        project.touch()

        try:
            await self.session.commit()
            await self.session.refresh(project)
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Project updated", project_id=str(project.id))
        return project

    async def delete(self, project_id: str | UUID, user_id: UUID) -> None:
        """Delete a project together with all of its expenses.

        Both deletes share one transaction, so a failure leaves no orphaned
        expenses behind.
        """
        project = await self.get_owned(project_id, user_id)

        try:
            removed = await self.expense_repo.delete_by_project(project.id)
            await self.project_repo.delete(project)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Project deleted", project_id=str(project.id), expenses_removed=removed)
