from uuid import UUID

from src.budget.models import User
from src.budget.repositories import UserRepository


class UserService:
    """User lookups for the authentication guard."""

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def get_active(self, user_id: UUID) -> User | None:
        """Get user by ID, or None when missing or deactivated."""
        user = await self.user_repo.get_by_id(user_id)
        if user is None or not user.is_active:
            return None
        return user
