from __future__ import annotations

import os
from collections.abc import AsyncIterator
from typing import Final

import pytest
import pytest_asyncio
from argon2 import PasswordHasher as Argon2Hasher
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import StaticPool

_TEST_ENV_VARS: Final[dict[str, str]] = {
    "APP_ENV": "test",
    "DATABASE_URL": "sqlite+aiosqlite:///:memory:",
    "SECRET_KEY": "test-secret",
}

for key, value in _TEST_ENV_VARS.items():
    os.environ.setdefault(key, value)

from royale_decks.core.config import Settings  # noqa: E402
from royale_decks.core.db import Database  # noqa: E402
from royale_decks.core.security import PasswordHasher, TokenService  # noqa: E402
from royale_decks.main import create_app  # noqa: E402
from royale_decks.seed import seed_cards  # noqa: E402


@pytest.fixture(scope="session")
def password_hasher() -> PasswordHasher:
    # Minimal argon2 cost keeps the suite fast.
    return PasswordHasher(Argon2Hasher(time_cost=1, memory_cost=8, parallelism=1))


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        secret_key="test-secret",
        environment="test",
    )


@pytest.fixture()
def token_service(test_settings: Settings) -> TokenService:
    return TokenService.from_settings(test_settings)


@pytest_asyncio.fixture()
async def database() -> AsyncIterator[Database]:
    db = Database("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    await db.create_schema()
    yield db
    await db.dispose()


@pytest_asyncio.fixture()
async def db_session(database: Database) -> AsyncIterator[AsyncSession]:
    async with database.session_factory() as session:
        yield session


@pytest_asyncio.fixture()
async def seeded_session(db_session: AsyncSession) -> AsyncSession:
    """Session over a database holding the full card catalog."""
    await seed_cards(db_session)
    await db_session.commit()
    return db_session


@pytest_asyncio.fixture()
async def app(
    database: Database,
    test_settings: Settings,
    password_hasher: PasswordHasher,
) -> FastAPI:
    async with database.session_factory() as session:
        await seed_cards(session)
        await session.commit()
    return create_app(test_settings, database=database, password_hasher=password_hasher)


@pytest_asyncio.fixture()
async def api_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
