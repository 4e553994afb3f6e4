"""User model - the identities bearer tokens resolve to."""

from uuid import UUID, uuid4

from sqlmodel import Field

from src.budget.models.base import TimestampedModel


class User(TimestampedModel, table=True):
    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(max_length=255, unique=True, index=True)
    hashed_password: str = Field(max_length=255)
    name: str = Field(max_length=100)
    is_active: bool = Field(default=True)
