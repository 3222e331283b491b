"""Pydantic schemas describing deck endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import ConfigDict, Field

from royale_decks.models.deck import MAX_DESCRIPTION_LENGTH, MAX_NAME_LENGTH, SLOT_COUNT
from royale_decks.schemas.card import CardResponse
from royale_decks.schemas.common import CamelModel, SuccessEnvelope


class DeckCreate(CamelModel):
    """Request body for POST /api/decks.

    The card count and uniqueness are checked by the deck service so that the
    caller receives the domain error message.
    """

    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    description: str = Field(default="", max_length=MAX_DESCRIPTION_LENGTH)
    card_names: list[str]
    slot: int = Field(..., ge=0, lt=SLOT_COUNT)
    is_public: bool = False

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Deck 1",
                "description": "Deck slot 1",
                "cardNames": [
                    "Knight",
                    "Archers",
                    "Arrows",
                    "Giant",
                    "Musketeer",
                    "Zap",
                    "Valkyrie",
                    "Skeletons",
                ],
                "slot": 0,
                "isPublic": False,
            }
        }
    )


class DeckUpdate(CamelModel):
    """Request body for PUT /api/decks/{deck_id}. Omitted fields stay unchanged."""

    name: str | None = Field(default=None, min_length=1, max_length=MAX_NAME_LENGTH)
    description: str | None = Field(default=None, max_length=MAX_DESCRIPTION_LENGTH)
    card_names: list[str] | None = None
    slot: int | None = Field(default=None, ge=0, lt=SLOT_COUNT)
    is_public: bool | None = None


class OwnerSummary(CamelModel):
    id: int
    name: str


class DeckCardResponse(CamelModel):
    position: int
    card: CardResponse


class DeckResponse(CamelModel):
    """Full deck representation with ordered cards and owner summary."""

    id: int
    name: str
    description: str
    avg_elixir: float
    is_public: bool
    likes: int
    slot: int
    owner_id: int
    owner: OwnerSummary
    cards: list[DeckCardResponse]
    created_at: datetime
    updated_at: datetime


class DeckListResponse(SuccessEnvelope):
    """Response body for GET /api/decks."""

    results: int
    data: list[DeckResponse]


class DeckDetailResponse(SuccessEnvelope):
    data: DeckResponse


class DeckStats(CamelModel):
    total_decks: int
    public_decks: int
    private_decks: int
    total_cards: int
    avg_deck_elixir: float


class DeckStatsResponse(SuccessEnvelope):
    data: DeckStats


class LikeData(CamelModel):
    likes: int


class LikeResponse(SuccessEnvelope):
    data: LikeData


__all__ = [
    "DeckCardResponse",
    "DeckCreate",
    "DeckDetailResponse",
    "DeckListResponse",
    "DeckResponse",
    "DeckStats",
    "DeckStatsResponse",
    "DeckUpdate",
    "LikeData",
    "LikeResponse",
    "OwnerSummary",
]
