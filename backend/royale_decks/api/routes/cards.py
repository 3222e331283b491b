"""Card catalog endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from royale_decks.core.db import get_session
from royale_decks.models.card import MAX_ELIXIR, MIN_ELIXIR, CardType, Rarity
from royale_decks.repositories.card import CardRepository
from royale_decks.schemas.card import (
    CardData,
    CardDetailResponse,
    CardListData,
    CardListResponse,
    CardResponse,
    CardStats,
    CardStatsResponse,
)
from royale_decks.services.card import CardService

router = APIRouter(prefix="/cards", tags=["cards"])


async def get_card_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CardService:
    return CardService(CardRepository(session))


@router.get("", response_model=CardListResponse, summary="List catalog cards")
async def list_cards(
    rarity: Annotated[Rarity | None, Query(description="Filter by rarity.")] = None,
    card_type: Annotated[
        CardType | None,
        Query(alias="type", description="Filter by card type."),
    ] = None,
    elixir: Annotated[
        int | None,
        Query(ge=MIN_ELIXIR, le=MAX_ELIXIR, description="Filter by exact elixir cost."),
    ] = None,
    service: CardService = Depends(get_card_service),  # noqa: B008
) -> CardListResponse:
    cards = await service.list_cards(rarity=rarity, card_type=card_type, elixir=elixir)
    items = [CardResponse.model_validate(card) for card in cards]
    return CardListResponse(data=CardListData(cards=items), count=len(items))


@router.get("/stats", response_model=CardStatsResponse, summary="Catalog statistics")
async def card_stats(
    service: CardService = Depends(get_card_service),  # noqa: B008
) -> CardStatsResponse:
    stats = await service.get_stats()
    return CardStatsResponse(data=CardStats.model_validate(stats))


@router.get("/{card_id}", response_model=CardDetailResponse, summary="Get a card by id")
async def get_card(
    card_id: int,
    service: CardService = Depends(get_card_service),  # noqa: B008
) -> CardDetailResponse:
    card = await service.get_card_by_id(card_id)
    return CardDetailResponse(data=CardData(card=CardResponse.model_validate(card)))


__all__ = ["get_card_service", "router"]
