"""Database models shared across the backend."""

from royale_decks.models.base import Base
from royale_decks.models.card import Card, CardType, Rarity
from royale_decks.models.deck import Deck, DeckCard, DeckLike
from royale_decks.models.user import User

__all__ = [
    "Base",
    "Card",
    "CardType",
    "Deck",
    "DeckCard",
    "DeckLike",
    "Rarity",
    "User",
]
