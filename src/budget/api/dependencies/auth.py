"""Authentication guard.

Attached at router level, so every route under a protected router runs it
before the handler; handlers that need the identity declare `CurrentUser`
and receive the same cached result.
"""

from typing import Annotated, Any
from uuid import UUID

from fastapi import Depends, Header, HTTPException, status

from src.budget.api.dependencies.services import UserServiceDep
from src.budget.core.logging import bind_user_context
from src.budget.core.security import ACCESS_TOKEN_TYPE, decode_token
from src.budget.models import User

_UNAUTHORIZED_HEADERS = {"WWW-Authenticate": "Bearer"}


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers=_UNAUTHORIZED_HEADERS,
    )


def _validate_access_token(authorization: str | None) -> dict[str, Any]:
    """Validate header format, token signature/expiry and token type."""
    if not authorization or not authorization.startswith("Bearer "):
        raise _unauthorized("Missing or invalid authorization header")

    payload = decode_token(authorization[7:])
    if payload is None:
        raise _unauthorized("Invalid or expired token")

    if payload.get("type") != ACCESS_TOKEN_TYPE:
        raise _unauthorized("Invalid token type")

    return payload


async def get_current_user(
    user_service: UserServiceDep,
    authorization: Annotated[str | None, Header()] = None,
) -> User:
    """Validate the bearer token and return the active user it names."""
    payload = _validate_access_token(authorization)

    user_id = payload.get("sub")
    if not user_id:
        raise _unauthorized("Invalid token payload")

    try:
        user_uuid = UUID(user_id)
    except ValueError as e:
        raise _unauthorized("Invalid user_id in token") from e

    user = await user_service.get_active(user_uuid)
    if user is None:
        raise _unauthorized("User not found or inactive")

    bind_user_context(user.id, user.email)
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]

# Router-level guard: `APIRouter(dependencies=RequireUser)`
RequireUser = [Depends(get_current_user)]
