"""Pydantic schemas describing card catalog endpoints."""

from __future__ import annotations

from pydantic import Field

from royale_decks.models.card import CardType, Rarity
from royale_decks.schemas.common import CamelModel, SuccessEnvelope


class CardResponse(CamelModel):
    id: int
    name: str
    elixir: int
    rarity: Rarity
    type: CardType
    description: str
    icon_url: str


class CardListData(CamelModel):
    cards: list[CardResponse]


class CardListResponse(SuccessEnvelope):
    """Response body for GET /api/cards."""

    data: CardListData
    count: int


class CardData(CamelModel):
    card: CardResponse


class CardDetailResponse(SuccessEnvelope):
    """Response body for GET /api/cards/{card_id}."""

    data: CardData


class CardStats(CamelModel):
    total: int
    by_rarity: dict[Rarity, int] = Field(default_factory=dict)
    by_type: dict[CardType, int] = Field(default_factory=dict)


class CardStatsResponse(SuccessEnvelope):
    data: CardStats


__all__ = [
    "CardData",
    "CardDetailResponse",
    "CardListData",
    "CardListResponse",
    "CardResponse",
    "CardStats",
    "CardStatsResponse",
]
