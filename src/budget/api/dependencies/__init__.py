"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenient imports.
"""

# Auth
from src.budget.api.dependencies.auth import CurrentUser, RequireUser, get_current_user

# Database
from src.budget.api.dependencies.db import DBSession, get_db_session

# Repositories
from src.budget.api.dependencies.repositories import (
    ExpenseRepo,
    ProjectRepo,
    UserRepo,
    get_expense_repository,
    get_project_repository,
    get_user_repository,
)

# Services
from src.budget.api.dependencies.services import (
    AuthServiceDep,
    ExpenseServiceDep,
    ProjectServiceDep,
    UserServiceDep,
    get_auth_service,
    get_expense_service,
    get_project_service,
    get_user_service,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Auth
    "CurrentUser",
    "RequireUser",
    "get_current_user",
    # Repositories
    "ExpenseRepo",
    "ProjectRepo",
    "UserRepo",
    "get_expense_repository",
    "get_project_repository",
    "get_user_repository",
    # Services
    "AuthServiceDep",
    "ExpenseServiceDep",
    "ProjectServiceDep",
    "UserServiceDep",
    "get_auth_service",
    "get_expense_service",
    "get_project_service",
    "get_user_service",
]
