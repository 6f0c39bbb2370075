"""Member database model.

Stores newsletter/site members. The unique index on ``email`` is the only
duplicate guard the member import relies on.
"""

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.core.constants import EMAIL_MAX_LENGTH, NAME_MAX_LENGTH
from src.infrastructure.persistence.base import BaseMutableModel


class MemberModel(BaseMutableModel):
    """Member model.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at: Timestamp when member was created (from BaseMutableModel)
        updated_at: Timestamp when member last updated (from BaseMutableModel)
        email: Unique email address (lowercase, indexed)
        name: Optional display name
        note: Optional staff note
        subscribed: Newsletter subscription flag

    Indexes:
        - ix_members_email: (email) unique
    """

    __tablename__ = "members"

    email: Mapped[str] = mapped_column(
        String(EMAIL_MAX_LENGTH),
        nullable=False,
        unique=True,
        index=True,
        comment="Member email address (unique, lowercase)",
    )

    name: Mapped[str | None] = mapped_column(
        String(NAME_MAX_LENGTH),
        nullable=True,
        default=None,
        comment="Member display name",
    )

    note: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        default=None,
        comment="Staff note about the member",
    )

    subscribed: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        comment="Newsletter subscription flag",
    )

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            str: Human-readable representation of member.
        """
        return f"<Member(id={self.id}, email={self.email!r}, subscribed={self.subscribed})>"
