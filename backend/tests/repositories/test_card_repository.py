from __future__ import annotations

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from royale_decks.catalog import CARD_CATALOG
from royale_decks.models.card import CardType, Rarity
from royale_decks.repositories.card import CardRepository


@pytest.mark.asyncio
async def test_list_cards_orders_by_rarity_desc_elixir_asc_name_asc(
    seeded_session: AsyncSession,
) -> None:
    cards = await CardRepository(seeded_session).list_cards()

    assert len(cards) == len(CARD_CATALOG)
    keys = [(-card.rarity.rank, card.elixir, card.name) for card in cards]
    assert keys == sorted(keys)
    assert cards[0].rarity is Rarity.LEGENDARY
    assert cards[-1].rarity is Rarity.COMMON


@pytest.mark.asyncio
async def test_list_cards_filters_combine(seeded_session: AsyncSession) -> None:
    cards = await CardRepository(seeded_session).list_cards(
        rarity=Rarity.EPIC,
        card_type=CardType.SPELL,
        elixir=4,
    )

    assert {card.name for card in cards} == {"Freeze", "Poison"}


@pytest.mark.asyncio
async def test_list_by_names_skips_unknown(seeded_session: AsyncSession) -> None:
    cards = await CardRepository(seeded_session).list_by_names(["Knight", "Nope", "The Log"])

    assert sorted(card.name for card in cards) == ["Knight", "The Log"]


@pytest.mark.asyncio
async def test_list_by_names_empty_input(seeded_session: AsyncSession) -> None:
    assert await CardRepository(seeded_session).list_by_names([]) == []


@pytest.mark.asyncio
async def test_counts_group_by_rarity_and_type(seeded_session: AsyncSession) -> None:
    repository = CardRepository(seeded_session)

    by_rarity = await repository.count_by_rarity()
    by_type = await repository.count_by_type()

    assert await repository.count() == len(CARD_CATALOG)
    assert sum(by_rarity.values()) == len(CARD_CATALOG)
    assert sum(by_type.values()) == len(CARD_CATALOG)
    expected_legendary = sum(1 for seed in CARD_CATALOG if seed.rarity is Rarity.LEGENDARY)
    assert by_rarity[Rarity.LEGENDARY] == expected_legendary
