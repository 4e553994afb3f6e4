"""Project model - a budget owned by exactly one user."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field

from src.budget.models.base import TimestampedModel, utc_now


class Project(TimestampedModel, table=True):
    """Budgeted unit of spend.

    `user_id` is set from the authenticated identity at creation and never
    changes; every read and write is scoped by it.
    """

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=200)
    budget: float
    user_id: UUID = Field(index=True)
    # Indexed for newest-first listing
    created_at: datetime = Field(default_factory=utc_now, index=True)
