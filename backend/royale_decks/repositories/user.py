"""User repository for CRUD operations."""

from __future__ import annotations

from sqlalchemy import func, select

from royale_decks.models.user import User
from royale_decks.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Encapsulates persistence logic for User entities."""

    async def create(self, *, name: str, email: str, password_hash: str) -> User:
        user = User(name=name, email=email, password_hash=password_hash)
        await self.add(user)
        await self.session.refresh(user)
        return user

    async def get(self, user_id: int) -> User | None:
        return await self.session.get(User, user_id)

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(User).where(func.lower(User.email) == email.lower())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_password_hash(self, user: User, password_hash: str) -> None:
        user.password_hash = password_hash
        await self.session.flush()


__all__ = ["UserRepository"]
