"""Expense model - a single spend record attributed to a project."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field

from src.budget.models.base import TimestampedModel, utc_now

DEFAULT_CATEGORY = "Uncategorized"


class Expense(TimestampedModel, table=True):
    """Spend record.

    Note: `project_id` carries no foreign key. Ownership is transitive through
    the project and is checked by the service layer, which also deletes a
    project's expenses when the project goes.
    """

    __tablename__ = "expenses"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project_id: UUID = Field(index=True)
    amount: float
    category: str = Field(default=DEFAULT_CATEGORY)
    description: str = Field(default="")
    date: datetime = Field(default_factory=utc_now, index=True)
