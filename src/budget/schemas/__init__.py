from src.budget.schemas.auth import AuthResult, SigninRequest, SignupRequest
from src.budget.schemas.envelope import Ack, CamelModel, Envelope, ErrorEnvelope
from src.budget.schemas.expense import ExpenseCreate, ExpenseRead, ExpenseUpdate
from src.budget.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from src.budget.schemas.user import UserRead

__all__ = [
    "Ack",
    "AuthResult",
    "CamelModel",
    "Envelope",
    "ErrorEnvelope",
    "ExpenseCreate",
    "ExpenseRead",
    "ExpenseUpdate",
    "ProjectCreate",
    "ProjectRead",
    "ProjectUpdate",
    "SigninRequest",
    "SignupRequest",
    "UserRead",
]
