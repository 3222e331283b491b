"""Client-side API wrapper and deck-builder view model."""

from royale_decks.client.api_client import ApiError, DeckBuilderApiClient
from royale_decks.client.deck_builder import DeckBuilderView, DeckSlot

__all__ = ["ApiError", "DeckBuilderApiClient", "DeckBuilderView", "DeckSlot"]
