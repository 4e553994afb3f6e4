"""Repository for Project entity (owner-scoped)."""

from uuid import UUID

from sqlmodel import select

from src.budget.models import Project
from src.budget.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project entity.

    Every lookup a caller can reach goes through `get_owned`, which matches
    on id and owner together.
    """

    model = Project

    async def get_owned(self, project_id: UUID, user_id: UUID) -> Project | None:
        """Get a project only if `user_id` owns it."""
        result = await self.session.execute(
            select(Project).where(Project.id == project_id, Project.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def list_by_user(self, user_id: UUID) -> list[Project]:
        """List a user's projects, newest first."""
        result = await self.session.execute(
            select(Project)
            .where(Project.user_id == user_id)
            .order_by(Project.created_at.desc())  # type: ignore[attr-defined]
        )
        return list(result.scalars().all())
