"""Expense service - CRUD scoped through project ownership."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.budget.core.exceptions import InvalidBodyError, NotFoundError
from src.budget.core.logging import get_logger
from src.budget.core.validators import parse_record_id
from src.budget.models import DEFAULT_CATEGORY, Expense
from src.budget.models.base import utc_now
from src.budget.repositories import ExpenseRepository, ProjectRepository
from src.budget.schemas.expense import ExpenseCreate, ExpenseUpdate

logger = get_logger(__name__)


class ExpenseService:
    """Expense CRUD.

    Expenses carry no owner of their own: every operation loads the owning
    project and requires it to belong to the caller.
    """

    def __init__(
        self,
        expense_repo: ExpenseRepository,
        project_repo: ProjectRepository,
        session: AsyncSession,
    ):
        self.expense_repo = expense_repo
        self.project_repo = project_repo
        self.session = session

    async def _require_project(self, project_id: str | UUID | None, user_id: UUID) -> UUID:
        parsed = parse_record_id(project_id)
        if parsed is None or await self.project_repo.get_owned(parsed, user_id) is None:
            raise NotFoundError(f"Project {project_id} not found")
        return parsed

    async def get_owned(self, expense_id: str | UUID, user_id: UUID) -> Expense:
        """Load an expense whose project is owned by `user_id` or raise NotFoundError."""
        parsed = parse_record_id(expense_id)
        expense = await self.expense_repo.get_by_id(parsed) if parsed is not None else None
        if expense is None:
            raise NotFoundError(f"Expense {expense_id} not found")

        project = await self.project_repo.get_owned(expense.project_id, user_id)
        if project is None:
            raise NotFoundError(f"Expense {expense_id} not found")
        return expense

    async def create(self, user_id: UUID, data: ExpenseCreate) -> Expense:
        """Record an expense against one of the caller's projects.

        Raises:
            InvalidBodyError: project_id or amount missing or falsy.
            NotFoundError: the project is absent or owned by someone else.
        """
        if not data.project_id or not data.amount:
            raise InvalidBodyError("projectId and amount are required")

        project_id = await self._require_project(data.project_id, user_id)

        expense = Expense(
            project_id=project_id,
            amount=data.amount,
            category=data.category or DEFAULT_CATEGORY,
            description=data.description or "",
            date=utc_now(),
        )
        self.expense_repo.add(expense)
        try:
            await self.session.commit()
            await self.session.refresh(expense)
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "Expense created",
            expense_id=str(expense.id),
            project_id=str(project_id),
            amount=expense.amount,
        )
        return expense

    async def list_by_project(self, project_id: str | UUID, user_id: UUID) -> list[Expense]:
        parsed = await self._require_project(project_id, user_id)
        return await self.expense_repo.list_by_project(parsed)

    async def get(self, expense_id: str | UUID, user_id: UUID) -> Expense:
        return await self.get_owned(expense_id, user_id)

    async def update(self, expense_id: str | UUID, user_id: UUID, data: ExpenseUpdate) -> Expense:
        """Apply every field whose key is present, falsy values included."""
        expense = await self.get_owned(expense_id, user_id)
        fields = data.model_fields_set

        if "amount" in fields and data.amount is None:
            raise InvalidBodyError("amount cannot be null")

        if "amount" in fields:
            expense.amount = data.amount  # type: ignore[assignment]
        if "category" in fields:
            expense.category = data.category or ""
        if "description" in fields:
            expense.description = data.description or ""

        expense.touch()

        try:
            await self.session.commit()
            await self.session.refresh(expense)
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Expense updated", expense_id=str(expense.id), fields=sorted(fields))
        return expense

    async def delete(self, expense_id: str | UUID, user_id: UUID) -> None:
        expense = await self.get_owned(expense_id, user_id)

        try:
            await self.expense_repo.delete(expense)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Expense deleted", expense_id=str(expense.id))
