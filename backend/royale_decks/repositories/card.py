"""Read-only queries over the card catalog."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import Select, case, func, select

from royale_decks.models.card import Card, CardType, Rarity
from royale_decks.repositories.base import BaseRepository

# Enum columns are stored as strings; rank them in declaration order.
RARITY_RANK = case({rarity: rarity.rank for rarity in Rarity}, value=Card.rarity)


class CardRepository(BaseRepository[Card]):
    """Query helpers for Card entities."""

    async def list_cards(
        self,
        *,
        rarity: Rarity | None = None,
        card_type: CardType | None = None,
        elixir: int | None = None,
    ) -> list[Card]:
        stmt: Select[tuple[Card]] = select(Card).order_by(
            RARITY_RANK.desc(),
            Card.elixir.asc(),
            Card.name.asc(),
        )
        if rarity is not None:
            stmt = stmt.where(Card.rarity == rarity)
        if card_type is not None:
            stmt = stmt.where(Card.type == card_type)
        if elixir is not None:
            stmt = stmt.where(Card.elixir == elixir)

        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def get(self, card_id: int) -> Card | None:
        return await self.session.get(Card, card_id)

    async def get_by_name(self, name: str) -> Card | None:
        result = await self.session.execute(select(Card).where(Card.name == name))
        return result.scalar_one_or_none()

    async def list_by_names(self, names: Sequence[str]) -> list[Card]:
        if not names:
            return []
        result = await self.session.execute(select(Card).where(Card.name.in_(names)))
        return list(result.scalars())

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(Card))
        return int(result.scalar_one())

    async def count_by_rarity(self) -> dict[Rarity, int]:
        stmt = select(Card.rarity, func.count()).group_by(Card.rarity)
        result = await self.session.execute(stmt)
        return {rarity: int(total) for rarity, total in result.all()}

    async def count_by_type(self) -> dict[CardType, int]:
        stmt = select(Card.type, func.count()).group_by(Card.type)
        result = await self.session.execute(stmt)
        return {card_type: int(total) for card_type, total in result.all()}


__all__ = ["RARITY_RANK", "CardRepository"]
