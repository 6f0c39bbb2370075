"""MemberRepository protocol for member persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.core.result import Result
from src.domain.entities.member import Member
from src.domain.errors import MemberPersistenceError


class MemberRepository(Protocol):
    """Member repository protocol (port).

    Writes report failures as structured MemberPersistenceError values
    instead of leaking driver exceptions, so callers can tell a uniqueness
    violation from any other failure without inspecting message text.

    Methods:
        find_by_id: Retrieve member by ID
        find_by_email: Retrieve member by email
        list_members: Page through members
        count: Count members
        list_all: Every member (export)
        save: Create new member
        update: Update existing member
        delete: Delete member
    """

    async def find_by_id(self, member_id: UUID) -> Member | None:
        """Find member by ID.

        Args:
            member_id: Member's unique identifier.

        Returns:
            Member if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> Member | None:
        """Find member by email address (case-insensitive).

        Args:
            email: Member's email address.

        Returns:
            Member if found, None otherwise.
        """
        ...

    async def list_members(
        self,
        *,
        limit: int,
        offset: int,
        newest_first: bool = True,
        email_contains: str | None = None,
    ) -> list[Member]:
        """Return one page of members ordered by creation time.

        Args:
            limit: Maximum members to return.
            offset: Members to skip.
            newest_first: Order by created_at descending when True.
            email_contains: Optional case-insensitive email substring filter.

        Returns:
            List of members (possibly empty).
        """
        ...

    async def count(self, *, email_contains: str | None = None) -> int:
        """Count members matching the optional filter.

        Args:
            email_contains: Optional case-insensitive email substring filter.

        Returns:
            Number of matching members.
        """
        ...

    async def list_all(self) -> list[Member]:
        """Return every member, oldest first.

        Returns:
            List of all members.
        """
        ...

    async def save(self, member: Member) -> Result[None, MemberPersistenceError]:
        """Create new member.

        Args:
            member: Member entity to persist.

        Returns:
            Success(None) when stored.
            Failure(MemberPersistenceError) with code UNIQUE_CONSTRAINT_VIOLATED
            when the email already exists, PERSISTENCE_FAILED otherwise.
        """
        ...

    async def update(self, member: Member) -> Result[None, MemberPersistenceError]:
        """Update existing member.

        Args:
            member: Member entity with updated fields.

        Returns:
            Success(None) or Failure(MemberPersistenceError).
        """
        ...

    async def delete(self, member_id: UUID) -> bool:
        """Delete member.

        Args:
            member_id: Member's unique identifier.

        Returns:
            True if a member was deleted, False if none existed.
        """
        ...
