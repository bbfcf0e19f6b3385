"""User repository using base repository pattern."""
from typing import Optional

from api.features.auth.entities.user import User
from api.shared.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for user entities."""

    model = User

    async def get_by_username(self, username: str) -> Optional[User]:
        entities = await self.get_by_field("username", username, limit=1)
        return entities[0] if entities else None

    async def create_user(
        self, *, username: str, password_hash: str, email: Optional[str] = None
    ) -> User:
        return await self.create(
            User(username=username, password=password_hash, email=email)
        )
