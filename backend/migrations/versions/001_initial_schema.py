"""Create users, cards, decks, deck_cards and deck_likes tables.

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa


revision = "001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None

RARITIES = ("COMMON", "RARE", "EPIC", "LEGENDARY")
CARD_TYPES = ("TROOP", "SPELL", "BUILDING")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )
    op.create_index("ix_users_created_at", "users", ["created_at"])

    op.create_table(
        "cards",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("elixir", sa.Integer(), nullable=False),
        sa.Column(
            "rarity",
            sa.Enum(*RARITIES, name="card_rarity_enum", native_enum=False),
            nullable=False,
        ),
        sa.Column(
            "type",
            sa.Enum(*CARD_TYPES, name="card_type_enum", native_enum=False),
            nullable=False,
        ),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("icon_url", sa.String(length=500), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_cards"),
        sa.UniqueConstraint("name", name="uq_cards_name"),
        sa.CheckConstraint("elixir >= 0 AND elixir <= 9", name="ck_cards_elixir_range"),
    )
    op.create_index("ix_cards_rarity", "cards", ["rarity"])
    op.create_index("ix_cards_type", "cards", ["type"])

    op.create_table(
        "decks",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("owner_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=False, server_default=""),
        sa.Column("slot", sa.Integer(), nullable=False),
        sa.Column("avg_elixir", sa.Float(), nullable=False, server_default=sa.text("0")),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("likes", sa.Integer(), nullable=False, server_default=sa.text("0")),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_decks"),
        sa.ForeignKeyConstraint(
            ["owner_id"],
            ["users.id"],
            name="fk_decks_owner_id_users",
            ondelete="CASCADE",
        ),
        # One deck per (owner, slot).
        sa.UniqueConstraint("owner_id", "slot", name="uq_decks_owner_slot"),
        sa.CheckConstraint("slot >= 0 AND slot < 5", name="ck_decks_slot_range"),
        sa.CheckConstraint("likes >= 0", name="ck_decks_likes_non_negative"),
    )
    op.create_index("ix_decks_public_ranking", "decks", ["is_public", "likes", "created_at"])

    op.create_table(
        "deck_cards",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("deck_id", sa.Integer(), nullable=False),
        sa.Column("card_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_deck_cards"),
        sa.ForeignKeyConstraint(
            ["deck_id"],
            ["decks.id"],
            name="fk_deck_cards_deck_id_decks",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["card_id"],
            ["cards.id"],
            name="fk_deck_cards_card_id_cards",
            ondelete="RESTRICT",
        ),
        sa.UniqueConstraint("deck_id", "position", name="uq_deck_cards_deck_position"),
        sa.UniqueConstraint("deck_id", "card_id", name="uq_deck_cards_deck_card"),
        sa.CheckConstraint("position >= 0 AND position < 8", name="ck_deck_cards_position_range"),
    )

    op.create_table(
        "deck_likes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("deck_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint("id", name="pk_deck_likes"),
        sa.ForeignKeyConstraint(
            ["deck_id"],
            ["decks.id"],
            name="fk_deck_likes_deck_id_decks",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["users.id"],
            name="fk_deck_likes_user_id_users",
            ondelete="CASCADE",
        ),
        sa.UniqueConstraint("deck_id", "user_id", name="uq_deck_likes_deck_user"),
    )
    op.create_index("ix_deck_likes_user_id", "deck_likes", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_deck_likes_user_id", table_name="deck_likes")
    op.drop_table("deck_likes")
    op.drop_table("deck_cards")
    op.drop_index("ix_decks_public_ranking", table_name="decks")
    op.drop_table("decks")
    op.drop_index("ix_cards_type", table_name="cards")
    op.drop_index("ix_cards_rarity", table_name="cards")
    op.drop_table("cards")
    op.drop_index("ix_users_created_at", table_name="users")
    op.drop_table("users")
