"""Create containers table

Revision ID: 0001_create_containers
Revises:
Create Date: 2026-10-19

Creates the containers table: one row per tracked shipment, scoped by the
identity-service user id.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001_create_containers"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create containers table."""
    op.create_table(
        "containers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(length=255), nullable=False),
        sa.Column("container_number", sa.String(length=255), nullable=False),
        sa.Column("departure_port", sa.String(length=255), nullable=False),
        sa.Column("arrival_port", sa.String(length=255), nullable=False),
        sa.Column("departure_date", sa.String(length=64), nullable=True),
        sa.Column("expected_arrival_date", sa.String(length=64), nullable=True),
        sa.Column("actual_arrival_date", sa.String(length=64), nullable=True),
        sa.Column(
            "status",
            sa.Enum(
                "pending",
                "departed",
                "in_transit",
                "arrived",
                "delayed",
                name="container_status_enum",
                native_enum=False,
                create_constraint=True,
            ),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("cargo_description", sa.Text(), nullable=True),
        sa.Column("tracking_number", sa.String(length=255), nullable=True),
        sa.Column("shipping_line", sa.String(length=255), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("product_images", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_containers_user_id"), "containers", ["user_id"], unique=False)
    op.create_index(
        "ix_containers_user_expected_arrival",
        "containers",
        ["user_id", "expected_arrival_date"],
        unique=False,
    )


def downgrade() -> None:
    """Drop containers table."""
    op.drop_index("ix_containers_user_expected_arrival", table_name="containers")
    op.drop_index(op.f("ix_containers_user_id"), table_name="containers")
    op.drop_table("containers")
