"""User endpoints - account creation, sign-in and profile."""

from fastapi import APIRouter, HTTPException, status

from src.budget.api.dependencies import AuthServiceDep, CurrentUser
from src.budget.schemas import AuthResult, Envelope, ErrorEnvelope, SigninRequest, SignupRequest, UserRead

router = APIRouter(prefix="/user", tags=["users"])


@router.post(
    "/signup",
    response_model=Envelope[AuthResult],
    responses={
        200: {
            "description": "Account created and signed in",
            "content": {
                "application/json": {
                    "example": {
                        "ok": True,
                        "data": {
                            "user": {
                                "id": "7c9e6679-7425-40de-944b-e07fc1f90ae7",
                                "email": "user@example.com",
                                "name": "Jane Doe",
                                "isActive": True,
                                "createdAt": "2024-01-15T10:30:00Z",
                            },
                            "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                            "tokenType": "bearer",
                        },
                    }
                }
            },
        },
        400: {"model": ErrorEnvelope, "description": "Invalid body or email already registered"},
    },
)
async def signup(data: SignupRequest, service: AuthServiceDep) -> Envelope[AuthResult]:
    """Create an account and return a bearer token for it."""
    result = await service.signup(data)
    return Envelope(data=result)


@router.post(
    "/signin",
    response_model=Envelope[AuthResult],
    responses={401: {"description": "Invalid credentials"}},
)
async def signin(data: SigninRequest, service: AuthServiceDep) -> Envelope[AuthResult]:
    """Exchange email and password for a bearer token."""
    result = await service.authenticate(data.email, data.password)
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return Envelope(data=result)


@router.get(
    "/me",
    response_model=Envelope[UserRead],
    responses={401: {"description": "Not authenticated"}},
)
async def get_me(current_user: CurrentUser) -> Envelope[UserRead]:
    """Get current authenticated user."""
    return Envelope(data=UserRead.model_validate(current_user))
