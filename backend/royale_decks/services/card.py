"""Read-only access to the card catalog."""

from __future__ import annotations

from collections.abc import Sequence

from royale_decks.core.errors import ErrorCode, NotFoundError
from royale_decks.models.card import Card, CardType, Rarity
from royale_decks.repositories.card import CardRepository

CARD_NOT_FOUND_MESSAGE = "Card not found"


class CardService:
    """High-level operations for the static card catalog."""

    def __init__(self, repository: CardRepository) -> None:
        self.repository = repository

    async def list_cards(
        self,
        *,
        rarity: Rarity | None = None,
        card_type: CardType | None = None,
        elixir: int | None = None,
    ) -> list[Card]:
        """Return cards ordered by rarity desc, elixir asc, name asc."""
        return await self.repository.list_cards(
            rarity=rarity,
            card_type=card_type,
            elixir=elixir,
        )

    async def get_card_by_id(self, card_id: int) -> Card:
        card = await self.repository.get(card_id)
        if card is None:
            raise NotFoundError(CARD_NOT_FOUND_MESSAGE, code=ErrorCode.CARD_NOT_FOUND)
        return card

    async def get_card_by_name(self, name: str) -> Card:
        card = await self.repository.get_by_name(name)
        if card is None:
            raise NotFoundError(CARD_NOT_FOUND_MESSAGE, code=ErrorCode.CARD_NOT_FOUND)
        return card

    async def get_cards_by_names(self, names: Sequence[str]) -> list[Card]:
        """Resolve names to cards, preserving input order and skipping unknowns."""
        found = {card.name: card for card in await self.repository.list_by_names(names)}
        return [found[name] for name in names if name in found]

    async def get_stats(self) -> dict[str, object]:
        """Return total plus per-rarity and per-type counts, zero-filled."""
        total = await self.repository.count()
        by_rarity = await self.repository.count_by_rarity()
        by_type = await self.repository.count_by_type()
        return {
            "total": total,
            "by_rarity": {rarity: by_rarity.get(rarity, 0) for rarity in Rarity},
            "by_type": {card_type: by_type.get(card_type, 0) for card_type in CardType},
        }


__all__ = ["CARD_NOT_FOUND_MESSAGE", "CardService"]
