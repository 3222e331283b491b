"""Like ledger: one like per user per public deck."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from royale_decks.core.errors import ErrorCode, ValidationError
from royale_decks.repositories.like import LikeRepository
from royale_decks.services.deck import DeckService

logger = logging.getLogger("royale_decks.services.likes")

ALREADY_LIKED_MESSAGE = "Already liked"


class LikeService:
    """Record likes and keep the deck's counter in step with the ledger."""

    def __init__(self, like_repo: LikeRepository, deck_service: DeckService) -> None:
        self.like_repo = like_repo
        self.deck_service = deck_service

    @property
    def session(self) -> AsyncSession:
        """Expose shared session for transaction control."""
        return self.like_repo.session

    async def like_deck(self, deck_id: int, user_id: int) -> int:
        """
        Like a public deck once and return the new like count.

        Raises:
            NotFoundError: the deck is missing or private
            ValidationError: the user already liked this deck
        """
        await self.deck_service.get_shared_deck(deck_id)

        if await self.like_repo.exists(deck_id, user_id):
            raise ValidationError(ALREADY_LIKED_MESSAGE, code=ErrorCode.ALREADY_LIKED)

        try:
            await self.like_repo.create(deck_id, user_id)
        except IntegrityError as exc:
            await self.session.rollback()
            raise ValidationError(ALREADY_LIKED_MESSAGE, code=ErrorCode.ALREADY_LIKED) from exc

        likes = await self.like_repo.increment_likes(deck_id)
        logger.info("Deck liked", extra={"deck_id": deck_id, "user_id": user_id, "likes": likes})
        return likes

    async def count_likes(self, deck_id: int) -> int:
        return await self.like_repo.count_likes(deck_id)


__all__ = ["ALREADY_LIKED_MESSAGE", "LikeService"]
