"""Authentication service - signup and signin, issuing bearer tokens."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.budget.core.exceptions import InvalidBodyError
from src.budget.core.logging import get_logger
from src.budget.core.security import (
    DUMMY_PASSWORD_HASH,
    create_access_token,
    hash_password,
    verify_password,
)
from src.budget.models import User
from src.budget.repositories import UserRepository
from src.budget.schemas.auth import AuthResult, SignupRequest
from src.budget.schemas.user import UserRead

logger = get_logger(__name__)


class AuthService:
    """Creates accounts and exchanges credentials for access tokens."""

    def __init__(self, user_repo: UserRepository, session: AsyncSession):
        self.user_repo = user_repo
        self.session = session

    @staticmethod
    def _issue(user: User) -> AuthResult:
        return AuthResult(user=UserRead.model_validate(user), token=create_access_token(user.id))

    async def signup(self, data: SignupRequest) -> AuthResult:
        """Create a user and sign them in.

        Raises:
            InvalidBodyError: the email is already registered.
        """
        email = data.email.lower()
        if await self.user_repo.exists_by_email(email):
            raise InvalidBodyError("Email already registered")

        user = User(email=email, hashed_password=hash_password(data.password), name=data.name)
        self.user_repo.add(user)
        try:
            await self.session.commit()
            await self.session.refresh(user)
        except IntegrityError as e:
            # Fallback in case of race condition
            await self.session.rollback()
            raise InvalidBodyError("Email already registered") from e
        except Exception:
            await self.session.rollback()
            raise

        logger.info("User signed up", user_id=str(user.id))
        return self._issue(user)

    async def authenticate(self, email: str, password: str) -> AuthResult | None:
        """Return a token for valid credentials, None otherwise."""
        user = await self.user_repo.get_by_email(email.lower())

        # Always perform password verification to prevent timing attacks
        # that could reveal whether an email exists in the system
        password_hash = user.hashed_password if user else DUMMY_PASSWORD_HASH
        password_valid = verify_password(password, password_hash)

        if user is None or not password_valid or not user.is_active:
            return None

        logger.info("User signed in", user_id=str(user.id))
        return self._issue(user)
