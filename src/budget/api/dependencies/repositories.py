"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.budget.api.dependencies.db import DBSession
from src.budget.repositories import ExpenseRepository, ProjectRepository, UserRepository


def get_user_repository(session: DBSession) -> UserRepository:
    return UserRepository(session)


def get_project_repository(session: DBSession) -> ProjectRepository:
    return ProjectRepository(session)


def get_expense_repository(session: DBSession) -> ExpenseRepository:
    return ExpenseRepository(session)


UserRepo = Annotated[UserRepository, Depends(get_user_repository)]
ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
ExpenseRepo = Annotated[ExpenseRepository, Depends(get_expense_repository)]
