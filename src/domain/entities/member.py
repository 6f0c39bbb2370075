"""Member domain entity.

Pure business logic, no framework dependencies.

A member is a newsletter/site subscriber identified by email address. Email
uniqueness is enforced by persistence, not by the entity.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class Member:
    """Member domain entity.

    Attributes:
        id: Unique member identifier (UUID v7).
        email: Normalized (lowercase) email address. Unique across members.
        name: Optional display name.
        note: Optional free-form note visible to staff.
        subscribed: Whether the member receives newsletters.
        created_at: Timestamp when the member was created.
        updated_at: Timestamp when the member was last updated.

    Example:
        >>> member = Member(
        ...     id=uuid7(),
        ...     email="reader@example.com",
        ...     name="Avid Reader",
        ...     note=None,
        ...     subscribed=True,
        ...     created_at=datetime.now(UTC),
        ...     updated_at=datetime.now(UTC),
        ... )
        >>> member.update_profile(subscribed=False)
        >>> member.subscribed
        False
    """

    id: UUID
    email: str
    name: str | None
    note: str | None
    subscribed: bool
    created_at: datetime
    updated_at: datetime

    def update_profile(
        self,
        *,
        name: str | None = None,
        note: str | None = None,
        subscribed: bool | None = None,
    ) -> None:
        """Apply a partial profile update.

        Only arguments that are not None are applied. Email is immutable.

        Args:
            name: New display name.
            note: New staff note.
            subscribed: New subscription flag.
        """
        if name is not None:
            self.name = name
        if note is not None:
            self.note = note
        if subscribed is not None:
            self.subscribed = subscribed
        self.updated_at = datetime.now(UTC)
