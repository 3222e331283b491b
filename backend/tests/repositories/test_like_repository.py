from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from royale_decks.repositories.like import LikeRepository
from tests.helpers import create_deck, create_user


@pytest.mark.asyncio
async def test_create_and_count_likes(seeded_session: AsyncSession) -> None:
    owner = await create_user(seeded_session)
    fan = await create_user(seeded_session, email="fan@example.com")
    deck = await create_deck(seeded_session, owner, is_public=True)
    repository = LikeRepository(seeded_session)

    assert await repository.exists(deck.id, fan.id) is False
    await repository.create(deck.id, fan.id)

    assert await repository.exists(deck.id, fan.id) is True
    assert await repository.count_likes(deck.id) == 1


@pytest.mark.asyncio
async def test_duplicate_like_rejected_by_store(seeded_session: AsyncSession) -> None:
    owner = await create_user(seeded_session)
    deck = await create_deck(seeded_session, owner, is_public=True)
    repository = LikeRepository(seeded_session)
    await repository.create(deck.id, owner.id)

    with pytest.raises(IntegrityError):
        await repository.create(deck.id, owner.id)
    await seeded_session.rollback()


@pytest.mark.asyncio
async def test_increment_likes_returns_new_value(seeded_session: AsyncSession) -> None:
    owner = await create_user(seeded_session)
    deck = await create_deck(seeded_session, owner, is_public=True, likes=2)
    repository = LikeRepository(seeded_session)

    assert await repository.increment_likes(deck.id) == 3
    assert await repository.increment_likes(deck.id) == 4


@pytest.mark.asyncio
async def test_purge_for_deck_removes_only_that_deck(seeded_session: AsyncSession) -> None:
    owner = await create_user(seeded_session)
    first = await create_deck(seeded_session, owner, slot=0, is_public=True)
    second = await create_deck(seeded_session, owner, slot=1, is_public=True)
    repository = LikeRepository(seeded_session)
    await repository.create(first.id, owner.id)
    await repository.create(second.id, owner.id)

    await repository.purge_for_deck(first.id)

    assert await repository.count_likes(first.id) == 0
    assert await repository.count_likes(second.id) == 1
