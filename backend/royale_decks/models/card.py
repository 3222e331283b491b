"""Card catalog model: static reference data seeded once."""

from __future__ import annotations

import enum

from sqlalchemy import CheckConstraint, Enum, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from royale_decks.models.base import Base

MIN_ELIXIR = 0
MAX_ELIXIR = 9


class Rarity(str, enum.Enum):
    """Card rarity, declared from least to most rare."""

    COMMON = "COMMON"
    RARE = "RARE"
    EPIC = "EPIC"
    LEGENDARY = "LEGENDARY"

    @property
    def rank(self) -> int:
        return list(Rarity).index(self)


class CardType(str, enum.Enum):
    """Broad card category used for filtering."""

    TROOP = "TROOP"
    SPELL = "SPELL"
    BUILDING = "BUILDING"


class Card(Base):
    """Catalog entry. Immutable at runtime."""

    __tablename__ = "cards"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    elixir: Mapped[int] = mapped_column(Integer, nullable=False)
    rarity: Mapped[Rarity] = mapped_column(
        Enum(Rarity, name="card_rarity_enum", native_enum=False, validate_strings=True),
        nullable=False,
    )
    type: Mapped[CardType] = mapped_column(
        Enum(CardType, name="card_type_enum", native_enum=False, validate_strings=True),
        nullable=False,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    icon_url: Mapped[str] = mapped_column(String(500), nullable=False, default="")

    __table_args__ = (
        CheckConstraint(
            f"elixir >= {MIN_ELIXIR} AND elixir <= {MAX_ELIXIR}",
            name="elixir_range",
        ),
        Index("ix_cards_rarity", "rarity"),
        Index("ix_cards_type", "type"),
    )


__all__ = ["MAX_ELIXIR", "MIN_ELIXIR", "Card", "CardType", "Rarity"]
