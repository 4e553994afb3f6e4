"""Project schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from src.budget.schemas.envelope import CamelModel

# Matches the width of the projects.name column
PROJECT_NAME_MAX_LENGTH = 200


def _strip(v: str | None) -> str | None:
    return v.strip() if isinstance(v, str) else v


class ProjectCreate(CamelModel):
    """Schema for creating a project.

    Both fields are optional at the schema level; the service rejects
    missing or falsy values with INVALID_BODY.
    """

    name: str | None = Field(default=None, max_length=PROJECT_NAME_MAX_LENGTH)
    budget: float | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        return _strip(v)


class ProjectUpdate(CamelModel):
    """Schema for updating a project.

    `name` is applied only when non-empty; `budget` whenever the key is sent.
    """

    name: str | None = Field(default=None, max_length=PROJECT_NAME_MAX_LENGTH)
    budget: float | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        return _strip(v)


class ProjectRead(CamelModel):
    """Schema for reading a project."""

    id: UUID
    name: str
    budget: float
    user_id: UUID
    created_at: datetime
    updated_at: datetime
