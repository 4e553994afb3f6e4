"""Repository layer - data access abstraction."""

from src.budget.repositories.base import BaseRepository
from src.budget.repositories.expense import ExpenseRepository
from src.budget.repositories.project import ProjectRepository
from src.budget.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "ExpenseRepository",
    "ProjectRepository",
    "UserRepository",
]
