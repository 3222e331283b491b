"""Business logic services."""

from royale_decks.services.auth import AuthService
from royale_decks.services.card import CardService
from royale_decks.services.deck import DeckService
from royale_decks.services.like import LikeService

__all__ = ["AuthService", "CardService", "DeckService", "LikeService"]
