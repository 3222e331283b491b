"""Repository layer exposing persistence helpers."""

from royale_decks.repositories.card import CardRepository
from royale_decks.repositories.deck import DeckRepository
from royale_decks.repositories.like import LikeRepository
from royale_decks.repositories.user import UserRepository

__all__ = ["CardRepository", "DeckRepository", "LikeRepository", "UserRepository"]
