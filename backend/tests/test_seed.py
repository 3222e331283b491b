from __future__ import annotations

import logging

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from royale_decks.catalog import CARD_CATALOG, IMAGE_BASE_URL, card_image_url
from royale_decks.core.db import Database
from royale_decks.core.security import PasswordHasher
from royale_decks.models.card import Card, Rarity
from royale_decks.seed import DEV_USER_EMAIL, build_parser, ensure_dev_user, run, seed_cards


@pytest.mark.parametrize(
    ("name", "slug"),
    [
        ("Knight", "knight"),
        ("Mini P.E.K.K.A.", "mini-pekka"),
        ("Royal Giant", "royal-giant"),
        ("X-Bow", "x-bow"),
    ],
)
def test_card_image_url(name: str, slug: str) -> None:
    assert card_image_url(name) == f"{IMAGE_BASE_URL}/{slug}.png"


def test_catalog_is_consistent() -> None:
    names = [seed.name for seed in CARD_CATALOG]

    assert len(CARD_CATALOG) == 84
    assert len(set(names)) == len(names)
    assert all(0 <= seed.elixir <= 9 for seed in CARD_CATALOG)
    assert {seed.rarity for seed in CARD_CATALOG} == set(Rarity)


@pytest.mark.asyncio
async def test_seed_cards_is_idempotent(db_session: AsyncSession) -> None:
    assert await seed_cards(db_session) == (84, 0)
    assert await seed_cards(db_session) == (0, 0)

    result = await db_session.execute(select(Card))
    assert len(result.scalars().all()) == 84


@pytest.mark.asyncio
async def test_seed_cards_reset_rewrites_attributes(db_session: AsyncSession) -> None:
    await seed_cards(db_session)
    knight = (await db_session.execute(select(Card).where(Card.name == "Knight"))).scalar_one()
    knight.elixir = 9
    knight.description = "tampered"
    await db_session.flush()

    created, updated = await seed_cards(db_session, reset=True)

    assert created == 0
    assert updated == 84
    assert knight.elixir == 3
    assert knight.description != "tampered"


@pytest.mark.asyncio
async def test_ensure_dev_user_created_once(
    db_session: AsyncSession,
    password_hasher: PasswordHasher,
) -> None:
    first = await ensure_dev_user(db_session, password_hasher)
    second = await ensure_dev_user(db_session, password_hasher)

    assert first.id == second.id
    assert first.email == DEV_USER_EMAIL
    assert password_hasher.verify(first.password_hash, "devdev")


@pytest.mark.asyncio
async def test_run_creates_schema_and_cards(
    database: Database, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.INFO, logger="royale_decks.seed"):
        await run(database)

    async with database.session_factory() as session:
        result = await session.execute(select(Card.name))
        assert len(result.scalars().all()) == 84

    summary = next(record for record in caplog.records if record.name == "royale_decks.seed")
    assert summary.cards_created == 84  # type: ignore[attr-defined]
    assert summary.cards_updated == 0  # type: ignore[attr-defined]


def test_parser_flags() -> None:
    args = build_parser().parse_args(["--with-dev-user", "--reset"])

    assert args.with_dev_user is True
    assert args.reset is True
    assert build_parser().parse_args([]).reset is False
