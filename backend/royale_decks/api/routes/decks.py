"""Deck endpoints: owner CRUD, public listing, sharing and likes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from royale_decks.core.auth import get_current_user, get_optional_user
from royale_decks.core.config import Settings
from royale_decks.core.db import get_session
from royale_decks.core.errors import AuthenticationError, ErrorCode
from royale_decks.models.deck import Deck
from royale_decks.models.user import User
from royale_decks.repositories.card import CardRepository
from royale_decks.repositories.deck import DeckRepository
from royale_decks.repositories.like import LikeRepository
from royale_decks.schemas.deck import (
    DeckCreate,
    DeckDetailResponse,
    DeckListResponse,
    DeckResponse,
    DeckStats,
    DeckStatsResponse,
    DeckUpdate,
    LikeData,
    LikeResponse,
)
from royale_decks.services.deck import DeckService
from royale_decks.services.like import LikeService

router = APIRouter(prefix="/decks", tags=["decks"])


async def get_deck_service(
    request: Request,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> DeckService:
    settings: Settings = request.app.state.settings
    return DeckService(
        DeckRepository(session),
        CardRepository(session),
        LikeRepository(session),
        reset_likes_on_card_change=settings.reset_likes_on_card_change,
        default_list_limit=settings.deck_list_default_limit,
        max_list_limit=settings.deck_list_max_limit,
    )


async def get_like_service(
    session: Annotated[AsyncSession, Depends(get_session)],
    deck_service: Annotated[DeckService, Depends(get_deck_service)],
) -> LikeService:
    return LikeService(LikeRepository(session), deck_service)


def _deck_response(deck: Deck) -> DeckDetailResponse:
    return DeckDetailResponse(data=DeckResponse.model_validate(deck))


@router.get("", response_model=DeckListResponse, summary="List public or own decks")
async def list_decks(
    only_public: Annotated[
        bool,
        Query(alias="onlyPublic", description="List public decks instead of your own."),
    ] = False,
    limit: Annotated[int | None, Query(ge=1)] = None,
    offset: Annotated[int, Query(ge=0)] = 0,
    user: User | None = Depends(get_optional_user),  # noqa: B008
    service: DeckService = Depends(get_deck_service),  # noqa: B008
) -> DeckListResponse:
    if only_public:
        decks = await service.list_public_decks(limit=limit, offset=offset)
    elif user is not None:
        decks = await service.list_owned_decks(user.id, limit=limit, offset=offset)
    else:
        raise AuthenticationError("Login required", code=ErrorCode.LOGIN_REQUIRED)

    data = [DeckResponse.model_validate(deck) for deck in decks]
    return DeckListResponse(results=len(data), data=data)


@router.get("/stats", response_model=DeckStatsResponse, summary="Deck statistics")
async def deck_stats(
    service: DeckService = Depends(get_deck_service),  # noqa: B008
) -> DeckStatsResponse:
    stats = await service.get_stats()
    return DeckStatsResponse(data=DeckStats.model_validate(stats))


@router.get(
    "/shared/{deck_id}",
    response_model=DeckDetailResponse,
    summary="Public view of a shared deck",
)
async def get_shared_deck(
    deck_id: int,
    service: DeckService = Depends(get_deck_service),  # noqa: B008
) -> DeckDetailResponse:
    deck = await service.get_shared_deck(deck_id)
    return _deck_response(deck)


@router.get("/{deck_id}", response_model=DeckDetailResponse, summary="Get one of your decks")
async def get_deck(
    deck_id: int,
    user: User = Depends(get_current_user),  # noqa: B008
    service: DeckService = Depends(get_deck_service),  # noqa: B008
) -> DeckDetailResponse:
    deck = await service.get_deck_by_id(deck_id, user.id)
    return _deck_response(deck)


@router.post(
    "",
    response_model=DeckDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a deck in a free slot",
)
async def create_deck(
    payload: DeckCreate,
    user: User = Depends(get_current_user),  # noqa: B008
    service: DeckService = Depends(get_deck_service),  # noqa: B008
) -> DeckDetailResponse:
    deck = await service.create_deck(payload, user.id)
    await service.session.commit()
    return _deck_response(deck)


@router.put("/{deck_id}", response_model=DeckDetailResponse, summary="Update one of your decks")
async def update_deck(
    deck_id: int,
    payload: DeckUpdate,
    user: User = Depends(get_current_user),  # noqa: B008
    service: DeckService = Depends(get_deck_service),  # noqa: B008
) -> DeckDetailResponse:
    deck = await service.update_deck(deck_id, payload, user.id)
    await service.session.commit()
    return _deck_response(deck)


@router.delete(
    "/{deck_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete one of your decks",
)
async def delete_deck(
    deck_id: int,
    user: User = Depends(get_current_user),  # noqa: B008
    service: DeckService = Depends(get_deck_service),  # noqa: B008
) -> Response:
    await service.delete_deck(deck_id, user.id)
    await service.session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{deck_id}/like", response_model=LikeResponse, summary="Like a public deck")
async def like_deck(
    deck_id: int,
    user: User = Depends(get_current_user),  # noqa: B008
    service: LikeService = Depends(get_like_service),  # noqa: B008
) -> LikeResponse:
    likes = await service.like_deck(deck_id, user.id)
    await service.session.commit()
    return LikeResponse(data=LikeData(likes=likes))


__all__ = ["get_deck_service", "get_like_service", "router"]
