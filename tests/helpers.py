"""Test helper functions for common data creation patterns."""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.budget.core.security import create_access_token
from src.budget.models import Expense, Project, User
from tests.factories import ExpenseFactory, ProjectFactory


def bearer(user: User) -> dict[str, str]:
    """Authorization header for `user`."""
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


async def create_project_with_expenses(
    session: AsyncSession,
    user: User,
    amounts: list[float],
    **project_kwargs,
) -> tuple[Project, list[Expense]]:
    """Create a project owned by `user` with one expense per amount.

    Args:
        session: Database session
        user: Owner of the project
        amounts: Expense amounts to record
        **project_kwargs: Additional args passed to ProjectFactory

    Returns:
        Tuple of (project, expenses)
    """
    project = ProjectFactory.build(user_id=user.id, **project_kwargs)
    session.add(project)

    expenses = [ExpenseFactory.build(project_id=project.id, amount=amount) for amount in amounts]
    session.add_all(expenses)
    await session.commit()

    return project, expenses


async def count_expenses(session: AsyncSession, project_id: UUID) -> int:
    result = await session.execute(
        select(func.count()).select_from(Expense).where(Expense.project_id == project_id)
    )
    return result.scalar_one()
