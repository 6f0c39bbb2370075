"""add_members_table

Revision ID: 3f2a9c1d7b40
Revises:
Create Date: 2026-10-17 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create members table."""
    op.create_table(
        "members",
        # Primary key and timestamps from BaseMutableModel
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "email",
            sa.String(length=191),
            nullable=False,
            comment="Member email address (unique, lowercase)",
        ),
        sa.Column(
            "name",
            sa.String(length=191),
            nullable=True,
            comment="Member display name",
        ),
        sa.Column(
            "note",
            sa.Text(),
            nullable=True,
            comment="Staff note about the member",
        ),
        sa.Column(
            "subscribed",
            sa.Boolean(),
            nullable=False,
            comment="Newsletter subscription flag",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    # The member import counts duplicates by this constraint
    op.create_index("ix_members_email", "members", ["email"], unique=True)


def downgrade() -> None:
    """Drop members table."""
    op.drop_index("ix_members_email", table_name="members")
    op.drop_table("members")
