"""Repository helpers for Deck entities."""

from __future__ import annotations

from sqlalchemy import Select, func, select
from sqlalchemy.orm import selectinload

from royale_decks.models.card import Card
from royale_decks.models.deck import Deck, DeckCard
from royale_decks.repositories.base import BaseRepository


def _with_relations(stmt: Select[tuple[Deck]]) -> Select[tuple[Deck]]:
    return stmt.options(
        selectinload(Deck.cards).selectinload(DeckCard.card),
        selectinload(Deck.owner),
    )


class DeckRepository(BaseRepository[Deck]):
    """Persistence primitives for Deck objects."""

    async def list_decks(
        self,
        *,
        only_public: bool = False,
        owner_id: int | None = None,
        limit: int,
        offset: int = 0,
    ) -> list[Deck]:
        stmt = _with_relations(select(Deck)).order_by(
            Deck.likes.desc(),
            Deck.created_at.desc(),
            Deck.id.desc(),
        )
        if only_public:
            stmt = stmt.where(Deck.is_public.is_(True))
        if owner_id is not None:
            stmt = stmt.where(Deck.owner_id == owner_id)

        result = await self.session.execute(stmt.limit(limit).offset(offset))
        return list(result.scalars().unique())

    async def get(self, deck_id: int) -> Deck | None:
        """Load a deck with its ordered cards and owner, refreshing stale state."""
        stmt = (
            _with_relations(select(Deck))
            .where(Deck.id == deck_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_in_slot(
        self,
        owner_id: int,
        slot: int,
        *,
        exclude_id: int | None = None,
    ) -> Deck | None:
        stmt = select(Deck).where(Deck.owner_id == owner_id, Deck.slot == slot)
        if exclude_id is not None:
            stmt = stmt.where(Deck.id != exclude_id)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def replace_cards(self, deck: Deck, cards: list[Card]) -> None:
        """Swap the deck's card rows for ``cards`` in the given order.

        The deck must have been loaded with its ``cards`` relationship.
        Old rows are flushed out first so positions can be reused.
        """
        deck.cards.clear()
        await self.session.flush()
        deck.cards.extend(
            DeckCard(card_id=card.id, card=card, position=position)
            for position, card in enumerate(cards)
        )
        await self.session.flush()

    async def count(self, *, only_public: bool = False) -> int:
        stmt = select(func.count()).select_from(Deck)
        if only_public:
            stmt = stmt.where(Deck.is_public.is_(True))
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def average_elixir(self) -> float | None:
        result = await self.session.execute(select(func.avg(Deck.avg_elixir)))
        value = result.scalar_one_or_none()
        return float(value) if value is not None else None


__all__ = ["DeckRepository"]
