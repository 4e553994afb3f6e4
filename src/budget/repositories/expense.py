"""Repository for Expense entity."""

from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select

from src.budget.models import Expense
from src.budget.repositories.base import BaseRepository


class ExpenseRepository(BaseRepository[Expense]):
    model = Expense

    async def list_by_project(self, project_id: UUID) -> list[Expense]:
        """List a project's expenses, most recent `date` first."""
        result = await self.session.execute(
            select(Expense)
            .where(Expense.project_id == project_id)
            .order_by(Expense.date.desc())  # type: ignore[attr-defined]
        )
        return list(result.scalars().all())

    async def delete_by_project(self, project_id: UUID) -> int:
        """Bulk-delete a project's expenses (no commit). Returns rows removed."""
        result = await self.session.execute(
            delete(Expense).where(Expense.project_id == project_id)  # type: ignore[arg-type]
        )
        return result.rowcount or 0
