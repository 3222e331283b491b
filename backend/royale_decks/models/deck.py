"""Deck, its ordered card slots, and per-user likes."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
    func,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from royale_decks.models.base import Base, TimestampMixin, utcnow

CARDS_PER_DECK = 8
SLOT_COUNT = 5
MAX_NAME_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500


class Deck(TimestampMixin, Base):
    """Eight cards placed in one of the owner's five slots."""

    __tablename__ = "decks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    description: Mapped[str] = mapped_column(
        String(MAX_DESCRIPTION_LENGTH),
        nullable=False,
        default="",
        server_default="",
    )
    slot: Mapped[int] = mapped_column(Integer, nullable=False)
    avg_elixir: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        default=0.0,
        server_default=text("0"),
    )
    is_public: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=text("false"),
    )
    likes: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
    )

    owner = relationship("User", back_populates="decks")
    cards = relationship(
        "DeckCard",
        back_populates="deck",
        cascade="all, delete-orphan",
        order_by="DeckCard.position",
        passive_deletes=True,
    )
    like_entries = relationship(
        "DeckLike",
        back_populates="deck",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        UniqueConstraint("owner_id", "slot", name="uq_decks_owner_slot"),
        CheckConstraint(f"slot >= 0 AND slot < {SLOT_COUNT}", name="slot_range"),
        CheckConstraint("likes >= 0", name="likes_non_negative"),
        Index("ix_decks_public_ranking", "is_public", "likes", "created_at"),
    )


class DeckCard(Base):
    """Positioned membership of a card in a deck."""

    __tablename__ = "deck_cards"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    deck_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("decks.id", ondelete="CASCADE"),
        nullable=False,
    )
    card_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("cards.id", ondelete="RESTRICT"),
        nullable=False,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)

    deck = relationship("Deck", back_populates="cards")
    card = relationship("Card")

    __table_args__ = (
        UniqueConstraint("deck_id", "position", name="uq_deck_cards_deck_position"),
        UniqueConstraint("deck_id", "card_id", name="uq_deck_cards_deck_card"),
        CheckConstraint(f"position >= 0 AND position < {CARDS_PER_DECK}", name="position_range"),
    )


class DeckLike(Base):
    """At most one like per (deck, user)."""

    __tablename__ = "deck_likes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    deck_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("decks.id", ondelete="CASCADE"),
        nullable=False,
    )
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )

    deck = relationship("Deck", back_populates="like_entries")
    user = relationship("User", back_populates="deck_likes")

    __table_args__ = (
        UniqueConstraint("deck_id", "user_id", name="uq_deck_likes_deck_user"),
        Index("ix_deck_likes_user_id", "user_id"),
    )


__all__ = [
    "CARDS_PER_DECK",
    "MAX_DESCRIPTION_LENGTH",
    "MAX_NAME_LENGTH",
    "SLOT_COUNT",
    "Deck",
    "DeckCard",
    "DeckLike",
]
