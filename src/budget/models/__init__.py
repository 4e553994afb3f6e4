"""Model exports.

Import from here: `from src.budget.models import Project, Expense`
"""

from src.budget.models.expense import DEFAULT_CATEGORY, Expense
from src.budget.models.project import Project
from src.budget.models.user import User

__all__ = [
    "DEFAULT_CATEGORY",
    "Expense",
    "Project",
    "User",
]
