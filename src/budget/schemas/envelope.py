"""Response envelope shared by every endpoint.

Success: `{"ok": true, "data": ...}` or a bare `{"ok": true}` acknowledgment.
Failure: `{"ok": false, "code": ..., "error"?: ...}` (see core.exceptions).
"""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.budget.core.exceptions import ErrorCode

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base for record schemas: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Envelope(BaseModel, Generic[T]):
    """Successful response carrying a payload."""

    ok: Literal[True] = True
    data: T


class Ack(BaseModel):
    """Successful response with no payload (deletes)."""

    ok: Literal[True] = True


class ErrorEnvelope(BaseModel):
    """Failed response. `error` is only present for SERVER_ERROR."""

    ok: Literal[False] = False
    code: ErrorCode
    error: str | None = None
