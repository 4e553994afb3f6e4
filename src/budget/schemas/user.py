from datetime import datetime
from uuid import UUID

from pydantic import EmailStr

from src.budget.schemas.envelope import CamelModel


class UserRead(CamelModel):
    id: UUID
    email: EmailStr
    name: str
    is_active: bool
    created_at: datetime
