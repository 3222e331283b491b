"""
Populate the card catalog and, optionally, a local development account.

Usage::

    python -m royale_decks.seed [--with-dev-user] [--reset]

Seeding is idempotent: cards are matched by name, so re-running only inserts
what is missing. ``--reset`` additionally rewrites the stored attributes of
existing cards from the bundled catalog.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from royale_decks.catalog import CARD_CATALOG, CardSeed
from royale_decks.core.config import get_settings
from royale_decks.core.db import Database
from royale_decks.core.logging import configure_logging
from royale_decks.core.security import PasswordHasher
from royale_decks.models.card import Card
from royale_decks.models.user import User
from royale_decks.repositories.user import UserRepository

logger = logging.getLogger("royale_decks.seed")

DEV_USER_NAME = "dev"
DEV_USER_EMAIL = "dev@dev.com"
DEV_USER_PASSWORD = "devdev"  # noqa: S105


async def seed_cards(
    session: AsyncSession,
    catalog: Sequence[CardSeed] = CARD_CATALOG,
    *,
    reset: bool = False,
) -> tuple[int, int]:
    """Insert missing catalog cards. Returns (created, updated) counts."""
    result = await session.execute(select(Card))
    existing = {card.name: card for card in result.scalars()}

    created = updated = 0
    for seed in catalog:
        card = existing.get(seed.name)
        if card is None:
            session.add(
                Card(
                    name=seed.name,
                    elixir=seed.elixir,
                    rarity=seed.rarity,
                    type=seed.type,
                    description=seed.description,
                    icon_url=seed.icon_url,
                )
            )
            created += 1
        elif reset:
            card.elixir = seed.elixir
            card.rarity = seed.rarity
            card.type = seed.type
            card.description = seed.description
            card.icon_url = seed.icon_url
            updated += 1

    await session.flush()
    return created, updated


async def ensure_dev_user(session: AsyncSession, password_hasher: PasswordHasher) -> User:
    """Create the development account unless it already exists."""
    repository = UserRepository(session)
    user = await repository.get_by_email(DEV_USER_EMAIL)
    if user is not None:
        return user
    return await repository.create(
        name=DEV_USER_NAME,
        email=DEV_USER_EMAIL,
        password_hash=password_hasher.hash(DEV_USER_PASSWORD),
    )


async def run(database: Database, *, with_dev_user: bool = False, reset: bool = False) -> None:
    await database.create_schema()
    async with database.session_factory() as session:
        created, updated = await seed_cards(session, reset=reset)
        if with_dev_user:
            await ensure_dev_user(session, PasswordHasher())
        await session.commit()

    logger.info(
        "Card catalog seeded",
        extra={
            "cards_created": created,
            "cards_updated": updated,
            "catalog_size": len(CARD_CATALOG),
        },
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Seed the Royale Decks database")
    parser.add_argument(
        "--with-dev-user",
        action="store_true",
        help=f"Also create the {DEV_USER_EMAIL} development account",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Overwrite attributes of existing cards from the bundled catalog",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    database = Database(settings.database_url, echo=settings.sql_echo)

    async def _run() -> None:
        try:
            await run(database, with_dev_user=args.with_dev_user, reset=args.reset)
        finally:
            await database.dispose()

    asyncio.run(_run())


if __name__ == "__main__":
    main()
