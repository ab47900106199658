"""create companies, locations, users and custom_fields tables

Revision ID: 20261018_0001
Revises:
Create Date: 2026-10-18 09:00:00
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261018_0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "companies",
        sa.Column("client_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("client_name", sa.String(length=200), nullable=False),
        sa.Column("client_type", sa.String(length=50), nullable=False),
        sa.Column("search_help", sa.String(length=255), nullable=False),
        sa.Column("broker_id", sa.Integer(), nullable=True, comment="Owning broker (tenant) id"),
        sa.Column("client_phone", sa.String(length=40), nullable=True),
        sa.Column("industry", sa.String(length=100), nullable=True),
        sa.Column("company_size", sa.String(length=20), nullable=True),
        sa.Column("producer", sa.String(length=100), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *[sa.Column(f"custom{n}", sa.String(length=255), nullable=True) for n in range(1, 11)],
        *_timestamps(),
        sa.PrimaryKeyConstraint("client_id", name="pk_companies"),
    )
    op.create_index("ix_companies_client_name", "companies", ["client_name"], unique=False)
    op.create_index("ix_companies_broker_id", "companies", ["broker_id"], unique=False)

    op.create_table(
        "locations",
        sa.Column("location_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("client_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=True),
        sa.Column("address", sa.String(length=255), nullable=True),
        sa.Column("city", sa.String(length=100), nullable=True),
        sa.Column("state", sa.String(length=50), nullable=True),
        sa.Column("zip", sa.String(length=20), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["client_id"],
            ["companies.client_id"],
            name="fk_locations_client_id_companies",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("location_id", name="pk_locations"),
    )
    op.create_index("ix_locations_client_id", "locations", ["client_id"], unique=False)

    op.create_table(
        "users",
        sa.Column("user_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("user_name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=40), nullable=True),
        sa.Column("client_id", sa.Integer(), nullable=True),
        sa.Column("broker_id", sa.Integer(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["client_id"],
            ["companies.client_id"],
            name="fk_users_client_id_companies",
            ondelete="SET NULL",
        ),
        sa.PrimaryKeyConstraint("user_id", name="pk_users"),
        sa.UniqueConstraint("user_name", name="uq_users_user_name"),
    )
    op.create_index("ix_users_client_id", "users", ["client_id"], unique=False)
    op.create_index("ix_users_broker_id", "users", ["broker_id"], unique=False)

    op.create_table(
        "custom_fields",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("broker_id", sa.Integer(), nullable=False),
        sa.Column("field_type", sa.String(length=20), nullable=False),
        sa.Column("display_label", sa.String(length=255), nullable=False, comment="CSV header expected for this field"),
        sa.Column(
            "field_column",
            sa.String(length=10),
            nullable=False,
            comment="Suffix of the custom<N> column the value is stored in",
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_custom_fields"),
        sa.UniqueConstraint(
            "broker_id",
            "field_type",
            "display_label",
            name="uq_custom_fields_broker_type_label",
        ),
    )
    op.create_index("ix_custom_fields_broker_type", "custom_fields", ["broker_id", "field_type"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_custom_fields_broker_type", table_name="custom_fields")
    op.drop_table("custom_fields")
    op.drop_index("ix_users_broker_id", table_name="users")
    op.drop_index("ix_users_client_id", table_name="users")
    op.drop_table("users")
    op.drop_index("ix_locations_client_id", table_name="locations")
    op.drop_table("locations")
    op.drop_index("ix_companies_broker_id", table_name="companies")
    op.drop_index("ix_companies_client_name", table_name="companies")
    op.drop_table("companies")
