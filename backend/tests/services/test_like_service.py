from __future__ import annotations

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from royale_decks.core.errors import ErrorCode, NotFoundError, ValidationError
from royale_decks.repositories.card import CardRepository
from royale_decks.repositories.deck import DeckRepository
from royale_decks.repositories.like import LikeRepository
from royale_decks.services.deck import DeckService
from royale_decks.services.like import LikeService
from tests.helpers import create_deck, create_user


def _service(session: AsyncSession) -> LikeService:
    likes = LikeRepository(session)
    decks = DeckService(DeckRepository(session), CardRepository(session), likes)
    return LikeService(likes, decks)


@pytest.mark.asyncio
async def test_like_increments_counter(seeded_session: AsyncSession) -> None:
    owner = await create_user(seeded_session)
    fan = await create_user(seeded_session, email="fan@example.com")
    deck = await create_deck(seeded_session, owner, is_public=True)
    service = _service(seeded_session)

    assert await service.like_deck(deck.id, fan.id) == 1
    assert await service.like_deck(deck.id, owner.id) == 2
    assert await service.count_likes(deck.id) == 2


@pytest.mark.asyncio
async def test_second_like_from_same_user_rejected(seeded_session: AsyncSession) -> None:
    owner = await create_user(seeded_session)
    deck = await create_deck(seeded_session, owner, is_public=True)
    service = _service(seeded_session)
    await service.like_deck(deck.id, owner.id)

    with pytest.raises(ValidationError) as exc_info:
        await service.like_deck(deck.id, owner.id)

    assert exc_info.value.message == "Already liked"
    assert exc_info.value.code == ErrorCode.ALREADY_LIKED
    refreshed = await DeckRepository(seeded_session).get(deck.id)
    assert refreshed is not None
    assert refreshed.likes == 1


@pytest.mark.asyncio
async def test_concurrent_duplicate_like_caught_by_constraint(
    seeded_session: AsyncSession, monkeypatch: pytest.MonkeyPatch
) -> None:
    owner = await create_user(seeded_session)
    fan = await create_user(seeded_session, email="fan@example.com")
    deck = await create_deck(seeded_session, owner, is_public=True)
    deck_id, fan_id = deck.id, fan.id
    service = _service(seeded_session)
    await service.like_deck(deck_id, fan_id)
    await seeded_session.commit()

    async def _not_liked_yet(*_: object) -> bool:
        return False

    monkeypatch.setattr(service.like_repo, "exists", _not_liked_yet)

    with pytest.raises(ValidationError) as exc_info:
        await service.like_deck(deck_id, fan_id)

    assert exc_info.value.code == ErrorCode.ALREADY_LIKED
    refreshed = await DeckRepository(seeded_session).get(deck_id)
    assert refreshed is not None
    assert refreshed.likes == 1
    assert await service.count_likes(deck_id) == 1


@pytest.mark.asyncio
async def test_private_and_missing_decks_cannot_be_liked(seeded_session: AsyncSession) -> None:
    owner = await create_user(seeded_session)
    private = await create_deck(seeded_session, owner)
    service = _service(seeded_session)

    with pytest.raises(NotFoundError):
        await service.like_deck(private.id, owner.id)
    with pytest.raises(NotFoundError):
        await service.like_deck(9999, owner.id)
    assert await service.count_likes(private.id) == 0


@pytest.mark.asyncio
async def test_counter_matches_ledger(seeded_session: AsyncSession) -> None:
    owner = await create_user(seeded_session)
    deck = await create_deck(seeded_session, owner, is_public=True)
    service = _service(seeded_session)
    for index in range(3):
        fan = await create_user(seeded_session, email=f"fan{index}@example.com")
        await service.like_deck(deck.id, fan.id)

    refreshed = await DeckRepository(seeded_session).get(deck.id)

    assert refreshed is not None
    assert refreshed.likes == await service.count_likes(deck.id) == 3
