"""In-memory doubles for member persistence, email and logging.

InMemoryMemberRepository mimics the SQLAlchemy adapter's contract: emails are
unique across every repository bound to the same MemberStore, and a
duplicate insert returns Failure(MemberPersistenceError) with code
UNIQUE_CONSTRAINT_VIOLATED instead of raising.
"""

import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Any, AsyncIterator
from unittest.mock import MagicMock
from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.handlers.create_member_handler import (
    CreateMemberHandler,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.member import Member
from src.domain.enums import EmailType
from src.domain.errors import MemberPersistenceError


def make_member(
    email: str = "reader@example.com",
    name: str | None = "Avid Reader",
    note: str | None = None,
    subscribed: bool = True,
    created_at: datetime | None = None,
) -> Member:
    """Build a Member with sensible defaults."""
    now = created_at or datetime.now(UTC)
    return Member(
        id=uuid7(),
        email=email,
        name=name,
        note=note,
        subscribed=subscribed,
        created_at=now,
        updated_at=now,
    )


@dataclass
class MemberStore:
    """Shared table contents for every repository bound to it."""

    members: dict[UUID, Member] = field(default_factory=dict)


class InMemoryMemberRepository:
    """MemberRepository protocol implementation backed by a MemberStore."""

    def __init__(self, store: MemberStore) -> None:
        self.store = store

    async def find_by_id(self, member_id: UUID) -> Member | None:
        member = self.store.members.get(member_id)
        return replace(member) if member else None

    async def find_by_email(self, email: str) -> Member | None:
        wanted = email.strip().lower()
        for member in self.store.members.values():
            if member.email.lower() == wanted:
                return replace(member)
        return None

    async def list_members(
        self,
        *,
        limit: int,
        offset: int,
        newest_first: bool = True,
        email_contains: str | None = None,
    ) -> list[Member]:
        members = self._filtered(email_contains)
        members.sort(key=lambda m: (m.created_at, m.id), reverse=newest_first)
        return members[offset : offset + limit]

    async def count(self, *, email_contains: str | None = None) -> int:
        return len(self._filtered(email_contains))

    async def list_all(self) -> list[Member]:
        return sorted(self.store.members.values(), key=lambda m: (m.created_at, m.id))

    async def save(self, member: Member) -> Result[None, MemberPersistenceError]:
        # Yield first so concurrent attempts interleave like real I/O
        await asyncio.sleep(0)
        if any(m.email == member.email for m in self.store.members.values()):
            return Failure(
                error=MemberPersistenceError(
                    code=ErrorCode.UNIQUE_CONSTRAINT_VIOLATED,
                    message="UNIQUE constraint failed: members.email",
                    db_code="gkpj",
                )
            )
        self.store.members[member.id] = replace(member)
        return Success(value=None)

    async def update(self, member: Member) -> Result[None, MemberPersistenceError]:
        self.store.members[member.id] = replace(member)
        return Success(value=None)

    async def delete(self, member_id: UUID) -> bool:
        return self.store.members.pop(member_id, None) is not None

    def _filtered(self, email_contains: str | None) -> list[Member]:
        members = list(self.store.members.values())
        if email_contains:
            needle = email_contains.lower()
            members = [m for m in members if needle in m.email.lower()]
        return members


class RecordingEmailService:
    """EmailProtocol double that records every send."""

    def __init__(self, fail: bool = False) -> None:
        self.sent: list[tuple[str, EmailType]] = []
        self._fail = fail

    async def send_member_email(self, to_email: str, email_type: EmailType) -> None:
        if self._fail:
            raise ConnectionError("SMTP unavailable")
        self.sent.append((to_email, email_type))


class TrackingCreationScope:
    """Creation scope that builds a fresh handler per attempt.

    Records how many scopes were opened and the peak number open at once.
    """

    def __init__(
        self,
        store: MemberStore,
        email_service: RecordingEmailService | None = None,
        logger: Any | None = None,
    ) -> None:
        self.store = store
        self.email_service = email_service or RecordingEmailService()
        self.logger = logger or MagicMock()
        self.opened = 0
        self.in_flight = 0
        self.peak_in_flight = 0
        self.handlers: list[CreateMemberHandler] = []

    @asynccontextmanager
    async def __call__(self) -> AsyncIterator[CreateMemberHandler]:
        self.opened += 1
        self.in_flight += 1
        self.peak_in_flight = max(self.peak_in_flight, self.in_flight)
        try:
            handler = CreateMemberHandler(
                member_repo=InMemoryMemberRepository(self.store),
                email_service=self.email_service,
                logger=self.logger,
            )
            self.handlers.append(handler)
            yield handler
        finally:
            self.in_flight -= 1
