"""Shared helpers for tests."""

from __future__ import annotations

from typing import Any

from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from royale_decks.models.deck import Deck, DeckCard
from royale_decks.models.user import User
from royale_decks.repositories.card import CardRepository

TEST_PASSWORD = "secret123"

# Eight distinct catalog cards; elixir sum 24 -> average 3.0.
STARTER_DECK = [
    "Knight",  # 3
    "Archers",  # 3
    "Goblins",  # 2
    "Bomber",  # 2
    "Minions",  # 3
    "Zap",  # 2
    "Giant",  # 5
    "Musketeer",  # 4
]

# Sum 35 -> 4.375 -> 4.4
HEAVY_DECK = [
    "Golem",  # 8
    "Baby Dragon",  # 4
    "Witch",  # 5
    "Lightning",  # 6
    "Zap",  # 2
    "Mega Minion",  # 3
    "Tornado",  # 3
    "Night Witch",  # 4
]


async def create_user(
    session: AsyncSession,
    *,
    name: str = "Player",
    email: str = "player@example.com",
) -> User:
    user = User(name=name, email=email, password_hash="not-a-real-hash")
    session.add(user)
    await session.flush()
    return user


def deck_payload(
    *,
    slot: int = 0,
    card_names: list[str] | None = None,
    name: str = "Deck 1",
    is_public: bool = False,
) -> dict[str, Any]:
    return {
        "name": name,
        "description": f"Deck slot {slot + 1}",
        "cardNames": list(card_names if card_names is not None else STARTER_DECK),
        "slot": slot,
        "isPublic": is_public,
    }


async def register(
    client: AsyncClient,
    *,
    name: str = "Player",
    email: str = "player@example.com",
    password: str = TEST_PASSWORD,
) -> str:
    """Register through the API and return the bearer token."""
    response = await client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]["token"]


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


async def create_deck(
    session: AsyncSession,
    owner: User,
    *,
    slot: int = 0,
    card_names: list[str] | None = None,
    is_public: bool = False,
    likes: int = 0,
    name: str = "Deck",
) -> Deck:
    """Insert a deck straight through the ORM, bypassing service validation."""
    names = card_names if card_names is not None else STARTER_DECK
    found = {card.name: card for card in await CardRepository(session).list_by_names(names)}
    cards = [found[card_name] for card_name in names]
    deck = Deck(
        owner_id=owner.id,
        name=name,
        description="",
        slot=slot,
        is_public=is_public,
        likes=likes,
        avg_elixir=sum(card.elixir for card in cards) / len(cards),
    )
    deck.cards = [
        DeckCard(card_id=card.id, card=card, position=position)
        for position, card in enumerate(cards)
    ]
    session.add(deck)
    await session.flush()
    return deck
