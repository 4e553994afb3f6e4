"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.budget.api.dependencies.db import DBSession
from src.budget.api.dependencies.repositories import ExpenseRepo, ProjectRepo, UserRepo
from src.budget.services import AuthService, ExpenseService, ProjectService, UserService


def get_user_service(user_repo: UserRepo) -> UserService:
    return UserService(user_repo)


def get_auth_service(user_repo: UserRepo, session: DBSession) -> AuthService:
    return AuthService(user_repo, session)


def get_project_service(
    project_repo: ProjectRepo,
    expense_repo: ExpenseRepo,
    session: DBSession,
) -> ProjectService:
    """Get project service (needs expenses for cascade delete)."""
    return ProjectService(project_repo, expense_repo, session)


def get_expense_service(
    expense_repo: ExpenseRepo,
    project_repo: ProjectRepo,
    session: DBSession,
) -> ExpenseService:
    """Get expense service (needs projects for the ownership check)."""
    return ExpenseService(expense_repo, project_repo, session)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
ExpenseServiceDep = Annotated[ExpenseService, Depends(get_expense_service)]
