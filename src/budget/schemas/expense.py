"""Expense schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import field_validator

from src.budget.schemas.envelope import CamelModel


class ExpenseCreate(CamelModel):
    """Schema for creating an expense.

    `project_id` stays a string so a malformed id surfaces as NOT_FOUND
    rather than a validation error.
    """

    project_id: str | None = None
    amount: float | None = None
    category: str | None = None
    description: str | None = None

    @field_validator("project_id", "category", "description")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return v.strip() if isinstance(v, str) else v


class ExpenseUpdate(CamelModel):
    """Schema for updating an expense.

    Every field is applied iff its key is present in the request, so `0`
    and `""` overwrite the stored value.
    """

    amount: float | None = None
    category: str | None = None
    description: str | None = None

    @field_validator("category", "description")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return v.strip() if isinstance(v, str) else v


class ExpenseRead(CamelModel):
    """Schema for reading an expense."""

    id: UUID
    project_id: UUID
    amount: float
    category: str
    description: str
    date: datetime
    created_at: datetime
    updated_at: datetime
