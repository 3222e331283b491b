"""
In-memory view model for building decks across the five slots.

The view keeps the catalog and the owner's slots locally, and persists a slot
through the API as soon as it holds a full deck. Sharing names the slot's deck
and sets its visibility through the same create-or-update call.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Literal, Protocol

from royale_decks.client.api_client import ApiError
from royale_decks.models.deck import CARDS_PER_DECK, SLOT_COUNT
from royale_decks.schemas.card import CardResponse
from royale_decks.schemas.deck import DeckResponse
from royale_decks.services.deck import round_half_up

logger = logging.getLogger("royale_decks.client.deck_builder")

SortKey = Literal["rarity", "name", "elixir"]
SortOrder = Literal["asc", "desc"]

_SORT_KEYS: dict[str, Callable[[CardResponse], object]] = {
    "rarity": lambda card: card.rarity.rank,
    "name": lambda card: card.name.casefold(),
    "elixir": lambda card: card.elixir,
}


class DeckApi(Protocol):
    async def list_cards(self) -> list[CardResponse]: ...

    async def list_my_decks(self) -> list[DeckResponse]: ...

    async def create_deck(self, payload: dict[str, object]) -> DeckResponse: ...

    async def update_deck(self, deck_id: int, payload: dict[str, object]) -> DeckResponse: ...

    async def delete_deck(self, deck_id: int) -> None: ...


@dataclass
class DeckSlot:
    cards: list[CardResponse] = field(default_factory=list)
    deck_id: int | None = None
    name: str | None = None
    description: str | None = None
    is_public: bool = False

    @property
    def is_full(self) -> bool:
        return len(self.cards) >= CARDS_PER_DECK


class DeckBuilderView:
    """State and actions behind the deck-building screen."""

    def __init__(self, api: DeckApi) -> None:
        self.api = api
        self.catalog: list[CardResponse] = []
        self.slots: list[DeckSlot] = [DeckSlot() for _ in range(SLOT_COUNT)]
        self.active_slot = 0
        self.selected_card: CardResponse | None = None
        self.replace_mode = False
        self.sort_key: SortKey = "rarity"
        self.sort_order: SortOrder = "desc"
        self.last_error: str | None = None

    @property
    def current(self) -> DeckSlot:
        return self.slots[self.active_slot]

    async def load(self) -> None:
        """Fetch the catalog and place the owner's decks into their slots."""
        self.catalog = await self.api.list_cards()
        by_name = {card.name: card for card in self.catalog}

        slots = [DeckSlot() for _ in range(SLOT_COUNT)]
        for deck in await self.api.list_my_decks():
            if not 0 <= deck.slot < SLOT_COUNT:
                continue
            ordered = sorted(deck.cards, key=lambda entry: entry.position)
            cards = [by_name[entry.card.name] for entry in ordered if entry.card.name in by_name]
            slots[deck.slot] = DeckSlot(
                cards=cards,
                deck_id=deck.id,
                name=deck.name,
                description=deck.description,
                is_public=deck.is_public,
            )
        self.slots = slots

    def in_current_deck(self, card: CardResponse) -> bool:
        return any(existing.id == card.id for existing in self.current.cards)

    def select_card(self, card: CardResponse) -> bool:
        """Select a catalog card. Cards already in the active deck cannot be picked."""
        if self.in_current_deck(card):
            return False
        self.selected_card = card
        self.replace_mode = False
        return True

    async def use_card(self, card: CardResponse | None = None) -> None:
        """Add a card to the active slot, or enter replace mode when it is full."""
        card = card or self.selected_card
        if card is None or self.in_current_deck(card):
            return

        slot = self.current
        if slot.is_full:
            self.selected_card = card
            self.replace_mode = True
            return

        slot.cards = [*slot.cards, card]
        self.selected_card = None
        if len(slot.cards) == CARDS_PER_DECK:
            await self._save(self.active_slot)

    async def replace_card(self, target: CardResponse) -> bool:
        """Swap ``target`` for the selected card. Only valid in replace mode."""
        if not self.replace_mode or self.selected_card is None:
            return False

        replacement = self.selected_card
        slot = self.current
        slot.cards = [replacement if card.id == target.id else card for card in slot.cards]
        self.selected_card = None
        self.replace_mode = False
        await self._save(self.active_slot)
        return True

    def remove_card(self, card: CardResponse) -> None:
        slot = self.current
        slot.cards = [existing for existing in slot.cards if existing.id != card.id]
        self.selected_card = None

    async def clear_slot(self) -> None:
        """Empty the active slot and delete its persisted deck, if any."""
        index = self.active_slot
        slot = self.slots[index]
        slot.cards = []
        if slot.deck_id is None:
            return
        try:
            await self.api.delete_deck(slot.deck_id)
        except ApiError as exc:
            self._record_failure("delete", index, exc)
            return
        self.slots[index] = DeckSlot()

    async def share_slot(
        self,
        name: str,
        description: str = "",
        is_public: bool = True,
        *,
        index: int | None = None,
    ) -> int | None:
        """
        Name, describe and publish a full slot, creating or updating its deck.

        Returns the deck id to build a share link from, or None when the slot
        is not full, the name is blank or the API rejects the save.
        """
        index = self.active_slot if index is None else index
        slot = self.slots[index]
        if len(slot.cards) != CARDS_PER_DECK:
            self.last_error = f"Need exactly {CARDS_PER_DECK} cards"
            return None
        if not name.strip():
            self.last_error = "Please enter a deck name"
            return None

        slot.name = name
        slot.description = description or None
        slot.is_public = is_public
        return await self._save(index)

    def switch_slot(self, index: int) -> None:
        if not 0 <= index < SLOT_COUNT:
            raise IndexError(f"slot must be between 0 and {SLOT_COUNT - 1}")
        self.active_slot = index
        self.selected_card = None
        self.replace_mode = False

    def set_sort(self, key: SortKey, order: SortOrder | None = None) -> None:
        self.sort_key = key
        if order is not None:
            self.sort_order = order

    def sorted_cards(self) -> list[CardResponse]:
        """Catalog sorted by the current key; ties keep catalog order."""
        return sorted(self.catalog, key=_SORT_KEYS[self.sort_key], reverse=self.sort_order == "desc")

    def average_elixir(self) -> float:
        """Average elixir of the active slot's cards, 0.0 when empty."""
        cards = self.current.cards
        if not cards:
            return 0.0
        return round_half_up(sum(card.elixir for card in cards) / len(cards))

    async def _save(self, index: int) -> int | None:
        slot = self.slots[index]
        if len(slot.cards) != CARDS_PER_DECK:
            return None

        # name, description and visibility carry over so edits never unpublish
        payload: dict[str, object] = {
            "name": slot.name or f"Deck {index + 1}",
            "description": slot.description or f"Deck slot {index + 1}",
            "cardNames": [card.name for card in slot.cards],
            "slot": index,
            "isPublic": slot.is_public,
        }
        try:
            if slot.deck_id is not None:
                await self.api.update_deck(slot.deck_id, payload)
            else:
                deck = await self.api.create_deck(payload)
                slot.deck_id = deck.id
        except ApiError as exc:
            self._record_failure("save", index, exc)
            return None
        self.last_error = None
        return slot.deck_id

    def _record_failure(self, action: str, index: int, exc: ApiError) -> None:
        logger.warning(
            "Deck %s failed",
            action,
            extra={"slot": index, "status_code": exc.status_code},
        )
        self.last_error = exc.message


__all__ = ["DeckBuilderView", "DeckSlot"]
