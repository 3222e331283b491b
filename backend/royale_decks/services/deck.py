"""Business logic for the deck lifecycle: slots, card lists and sharing."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from royale_decks.core.errors import ConflictError, ErrorCode, NotFoundError, ValidationError
from royale_decks.models.card import Card
from royale_decks.models.deck import CARDS_PER_DECK, Deck, DeckCard
from royale_decks.repositories.card import CardRepository
from royale_decks.repositories.deck import DeckRepository
from royale_decks.repositories.like import LikeRepository
from royale_decks.schemas.deck import DeckCreate, DeckUpdate

logger = logging.getLogger("royale_decks.services.decks")

DECK_NOT_FOUND_MESSAGE = "Deck not found"
DEFAULT_LIST_LIMIT = 50
MAX_LIST_LIMIT = 100

_ONE_DECIMAL = Decimal("0.1")


def round_half_up(value: float | Decimal) -> float:
    """Round to one decimal place, halves away from zero."""
    return float(Decimal(str(value)).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def calculate_avg_elixir(elixirs: Iterable[int]) -> float:
    """Average elixir of a full deck, rounded to one decimal."""
    return round_half_up(Decimal(sum(elixirs)) / Decimal(CARDS_PER_DECK))


def _slot_conflict(slot: int) -> ConflictError:
    return ConflictError(f"Slot {slot} already occupied", code=ErrorCode.SLOT_OCCUPIED)


class DeckService:
    """High-level operations for deck management."""

    def __init__(
        self,
        deck_repo: DeckRepository,
        card_repo: CardRepository,
        like_repo: LikeRepository,
        *,
        reset_likes_on_card_change: bool = False,
        default_list_limit: int = DEFAULT_LIST_LIMIT,
        max_list_limit: int = MAX_LIST_LIMIT,
    ) -> None:
        self.deck_repo = deck_repo
        self.card_repo = card_repo
        self.like_repo = like_repo
        self.reset_likes_on_card_change = reset_likes_on_card_change
        self.default_list_limit = default_list_limit
        self.max_list_limit = max_list_limit

    @property
    def session(self) -> AsyncSession:
        """Expose shared session for transaction control."""
        return self.deck_repo.session

    async def list_public_decks(
        self,
        *,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Deck]:
        """Public decks, most liked first, then newest."""
        return await self.deck_repo.list_decks(
            only_public=True,
            limit=self._clamp_limit(limit),
            offset=max(offset, 0),
        )

    async def list_owned_decks(
        self,
        owner_id: int,
        *,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Deck]:
        """All decks of one owner, public or not."""
        return await self.deck_repo.list_decks(
            owner_id=owner_id,
            limit=self._clamp_limit(limit),
            offset=max(offset, 0),
        )

    async def get_deck_by_id(self, deck_id: int, owner_id: int | None = None) -> Deck:
        """Fetch a deck; a foreign deck is reported exactly like a missing one."""
        deck = await self.deck_repo.get(deck_id)
        if deck is None or (owner_id is not None and deck.owner_id != owner_id):
            raise NotFoundError(DECK_NOT_FOUND_MESSAGE, code=ErrorCode.DECK_NOT_FOUND)
        return deck

    async def get_shared_deck(self, deck_id: int) -> Deck:
        """Public view of a deck. Private and missing decks are indistinguishable."""
        deck = await self.deck_repo.get(deck_id)
        if deck is None or not deck.is_public:
            raise NotFoundError(DECK_NOT_FOUND_MESSAGE, code=ErrorCode.DECK_NOT_FOUND)
        return deck

    async def create_deck(self, data: DeckCreate, owner_id: int) -> Deck:
        """
        Validate and persist a new deck with its eight positioned cards.

        Checks run in order: slot free, card count, distinct names, names known.

        Raises:
            ConflictError: the owner already has a deck in the slot
            ValidationError: the card list is not eight distinct known cards
        """
        if await self.deck_repo.find_in_slot(owner_id, data.slot) is not None:
            raise _slot_conflict(data.slot)

        cards = await self._resolve_cards(data.card_names)
        deck = Deck(
            owner_id=owner_id,
            name=data.name,
            description=data.description,
            slot=data.slot,
            is_public=data.is_public,
            likes=0,
            avg_elixir=calculate_avg_elixir(card.elixir for card in cards),
        )
        deck.cards = [
            DeckCard(card_id=card.id, card=card, position=position)
            for position, card in enumerate(cards)
        ]

        try:
            await self.deck_repo.add(deck)
        except IntegrityError as exc:
            await self.session.rollback()
            logger.info(
                "Slot taken concurrently",
                extra={"owner_id": owner_id, "slot": data.slot},
            )
            raise _slot_conflict(data.slot) from exc

        logger.info(
            "Deck created",
            extra={"deck_id": deck.id, "owner_id": owner_id, "slot": data.slot},
        )
        return await self.get_deck_by_id(deck.id)

    async def update_deck(self, deck_id: int, data: DeckUpdate, owner_id: int) -> Deck:
        """Replace the card list or patch the provided scalar fields."""
        deck = await self.get_deck_by_id(deck_id, owner_id)

        if data.slot is not None and data.slot != deck.slot:
            clash = await self.deck_repo.find_in_slot(owner_id, data.slot, exclude_id=deck.id)
            if clash is not None:
                raise _slot_conflict(data.slot)

        cards: list[Card] | None = None
        if data.card_names is not None:
            cards = await self._resolve_cards(data.card_names)

        if data.name is not None:
            deck.name = data.name
        if data.description is not None:
            deck.description = data.description
        if data.slot is not None:
            deck.slot = data.slot
        if data.is_public is not None:
            deck.is_public = data.is_public

        try:
            if cards is not None:
                await self.deck_repo.replace_cards(deck, cards)
                deck.avg_elixir = calculate_avg_elixir(card.elixir for card in cards)
                if self.reset_likes_on_card_change:
                    await self.like_repo.purge_for_deck(deck.id)
                    deck.likes = 0
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            if data.slot is None:
                raise
            raise _slot_conflict(data.slot) from exc

        logger.info(
            "Deck updated",
            extra={"deck_id": deck_id, "owner_id": owner_id, "cards_replaced": cards is not None},
        )
        return await self.get_deck_by_id(deck_id)

    async def delete_deck(self, deck_id: int, owner_id: int) -> None:
        deck = await self.get_deck_by_id(deck_id, owner_id)
        await self.deck_repo.delete(deck)
        logger.info("Deck deleted", extra={"deck_id": deck_id, "owner_id": owner_id})

    async def get_stats(self) -> dict[str, int | float]:
        total_decks = await self.deck_repo.count()
        public_decks = await self.deck_repo.count(only_public=True)
        total_cards = await self.card_repo.count()
        average = await self.deck_repo.average_elixir()
        return {
            "total_decks": total_decks,
            "public_decks": public_decks,
            "private_decks": total_decks - public_decks,
            "total_cards": total_cards,
            "avg_deck_elixir": round_half_up(average) if average is not None else 0.0,
        }

    async def _resolve_cards(self, names: Sequence[str]) -> list[Card]:
        if len(names) != CARDS_PER_DECK:
            raise ValidationError(
                f"Need exactly {CARDS_PER_DECK} cards",
                code=ErrorCode.INVALID_CARD_COUNT,
            )
        if len(set(names)) != CARDS_PER_DECK:
            raise ValidationError("No duplicate cards allowed", code=ErrorCode.DUPLICATE_CARDS)

        found = {card.name: card for card in await self.card_repo.list_by_names(names)}
        if len(found) != CARDS_PER_DECK:
            missing = [name for name in names if name not in found]
            raise ValidationError(
                f"Only found {len(found)}/{CARDS_PER_DECK} cards",
                code=ErrorCode.UNKNOWN_CARDS,
                details={"missing": missing},
            )
        return [found[name] for name in names]

    def _clamp_limit(self, limit: int | None) -> int:
        if limit is None:
            return self.default_list_limit
        return max(1, min(limit, self.max_list_limit))


__all__ = [
    "DECK_NOT_FOUND_MESSAGE",
    "DeckService",
    "calculate_avg_elixir",
    "round_half_up",
]
