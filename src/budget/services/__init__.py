from src.budget.services.auth_service import AuthService
from src.budget.services.expense_service import ExpenseService
from src.budget.services.project_service import ProjectService
from src.budget.services.user_service import UserService

__all__ = ["AuthService", "ExpenseService", "ProjectService", "UserService"]
