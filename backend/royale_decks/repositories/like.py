"""Like ledger persistence: one row per (deck, user) plus the denormalized counter."""

from __future__ import annotations

from sqlalchemy import delete, func, select, update

from royale_decks.models.deck import Deck, DeckLike
from royale_decks.repositories.base import BaseRepository


class LikeRepository(BaseRepository[DeckLike]):
    async def exists(self, deck_id: int, user_id: int) -> bool:
        stmt = select(DeckLike.id).where(DeckLike.deck_id == deck_id, DeckLike.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def create(self, deck_id: int, user_id: int) -> DeckLike:
        return await self.add(DeckLike(deck_id=deck_id, user_id=user_id))

    async def count_likes(self, deck_id: int) -> int:
        stmt = select(func.count()).select_from(DeckLike).where(DeckLike.deck_id == deck_id)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def increment_likes(self, deck_id: int) -> int:
        """Atomically bump the deck counter and return the new value."""
        await self.session.execute(
            update(Deck)
            .where(Deck.id == deck_id)
            .values(likes=Deck.likes + 1)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(select(Deck.likes).where(Deck.id == deck_id))
        return int(result.scalar_one())

    async def purge_for_deck(self, deck_id: int) -> None:
        await self.session.execute(delete(DeckLike).where(DeckLike.deck_id == deck_id))


__all__ = ["LikeRepository"]
