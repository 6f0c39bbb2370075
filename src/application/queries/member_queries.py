"""Member queries (CQRS read operations).

Queries are immutable dataclasses with question-like names. Handlers fetch
and return DTOs; queries never change state.
"""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID

from src.core.constants import DEFAULT_PAGE_SIZE


class MemberOrder(str, Enum):
    """Sort order for member browsing."""

    NEWEST_FIRST = "created_at desc"
    OLDEST_FIRST = "created_at asc"


@dataclass(frozen=True, kw_only=True)
class GetMember:
    """Get a single member by ID or by email.

    Exactly one of member_id/email is expected; member_id wins when both are
    given.

    Attributes:
        member_id: Member identifier.
        email: Member email address (case-insensitive).
    """

    member_id: UUID | None = None
    email: str | None = None


@dataclass(frozen=True, kw_only=True)
class ListMembers:
    """Browse members one page at a time.

    Attributes:
        limit: Page size (1-100).
        page: 1-based page number.
        order: Creation-time ordering.
        email_contains: Optional case-insensitive email filter.

    Example:
        >>> query = ListMembers(limit=15, page=2, email_contains="@example.com")
    """

    limit: int = DEFAULT_PAGE_SIZE
    page: int = 1
    order: MemberOrder = MemberOrder.NEWEST_FIRST
    email_contains: str | None = None


@dataclass(frozen=True, kw_only=True)
class ExportMembers:
    """Export every member as CSV, oldest first."""
