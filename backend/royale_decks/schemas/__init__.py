"""Public exports for Pydantic schemas."""

from __future__ import annotations

from .auth import AuthResponse, CurrentUserResponse, LoginRequest, RegisterRequest, UserResponse
from .card import CardDetailResponse, CardListResponse, CardResponse, CardStatsResponse
from .deck import (
    DeckCreate,
    DeckDetailResponse,
    DeckListResponse,
    DeckResponse,
    DeckStatsResponse,
    DeckUpdate,
    LikeResponse,
)

__all__ = [
    "AuthResponse",
    "CardDetailResponse",
    "CardListResponse",
    "CardResponse",
    "CardStatsResponse",
    "CurrentUserResponse",
    "DeckCreate",
    "DeckDetailResponse",
    "DeckListResponse",
    "DeckResponse",
    "DeckStatsResponse",
    "DeckUpdate",
    "LikeResponse",
    "LoginRequest",
    "RegisterRequest",
    "UserResponse",
]
