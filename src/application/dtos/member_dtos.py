"""Member DTOs (Data Transfer Objects).

Result dataclasses carried from member handlers to the presentation layer.

DTOs:
    - MemberResult: One member
    - MemberListResult: One page of members with pagination totals
    - MembersCsvExport: CSV export payload
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.entities.member import Member


@dataclass(frozen=True, kw_only=True)
class MemberResult:
    """Single member view.

    Attributes:
        id: Member identifier.
        email: Normalized email address.
        name: Display name.
        note: Staff note.
        subscribed: Subscription flag.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    id: UUID
    email: str
    name: str | None
    note: str | None
    subscribed: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, member: Member) -> "MemberResult":
        return cls(
            id=member.id,
            email=member.email,
            name=member.name,
            note=member.note,
            subscribed=member.subscribed,
            created_at=member.created_at,
            updated_at=member.updated_at,
        )


@dataclass(frozen=True, kw_only=True)
class MemberListResult:
    """One page of members.

    Attributes:
        members: Members on this page.
        total: Members matching the query across all pages.
        page: Current 1-based page.
        limit: Page size.
        pages: Total page count (at least 1).
    """

    members: list[MemberResult]
    total: int
    page: int
    limit: int
    pages: int

    @property
    def next_page(self) -> int | None:
        return self.page + 1 if self.page < self.pages else None

    @property
    def prev_page(self) -> int | None:
        return self.page - 1 if self.page > 1 else None


@dataclass(frozen=True, kw_only=True)
class MembersCsvExport:
    """CSV export payload.

    Attributes:
        file_name: Suggested download name (members.YYYY-MM-DD.csv).
        content: CSV text including header row.
        row_count: Number of exported members.
    """

    file_name: str
    content: str
    row_count: int
