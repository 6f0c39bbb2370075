"""MemberRepository - SQLAlchemy implementation of MemberRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Member entities and database MemberModel, and translates
driver failures on writes into structured MemberPersistenceError values.
"""

from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.member import Member
from src.domain.errors import MemberPersistenceError
from src.infrastructure.persistence.models.member import MemberModel

# PostgreSQL SQLSTATE for unique_violation
_PG_UNIQUE_VIOLATION = "23505"

# sqlite3 extended error names (Python 3.11+ exposes them on the exception)
_SQLITE_UNIQUE_VIOLATIONS = frozenset(
    {"SQLITE_CONSTRAINT_UNIQUE", "SQLITE_CONSTRAINT_PRIMARYKEY"}
)


def _is_unique_violation(error: IntegrityError) -> bool:
    """Recognize a uniqueness violation from driver metadata.

    Args:
        error: IntegrityError raised on flush/commit.

    Returns:
        True when the driver reports a unique/primary key violation.
    """
    orig = error.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate == _PG_UNIQUE_VIOLATION:
        return True
    return getattr(orig, "sqlite_errorname", None) in _SQLITE_UNIQUE_VIOLATIONS


def _to_persistence_error(error: SQLAlchemyError) -> MemberPersistenceError:
    """Translate a SQLAlchemy failure into a domain error value.

    Args:
        error: Failure raised by the session.

    Returns:
        MemberPersistenceError carrying the driver message and error code.
    """
    orig = getattr(error, "orig", None)
    message = str(orig) if orig is not None else str(error)

    if isinstance(error, IntegrityError) and _is_unique_violation(error):
        code = ErrorCode.UNIQUE_CONSTRAINT_VIOLATED
    else:
        code = ErrorCode.PERSISTENCE_FAILED

    return MemberPersistenceError(code=code, message=message, db_code=error.code)


class MemberRepository:
    """SQLAlchemy implementation of MemberRepository protocol.

    This class does NOT inherit from MemberRepository protocol (Protocol uses
    structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = MemberRepository(session)
        ...     member = await repo.find_by_email("reader@example.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, member_id: UUID) -> Member | None:
        """Find member by ID.

        Args:
            member_id: Member's unique identifier.

        Returns:
            Domain Member entity if found, None otherwise.
        """
        stmt = select(MemberModel).where(MemberModel.id == member_id)
        result = await self.session.execute(stmt)
        member_model = result.scalar_one_or_none()

        if member_model is None:
            return None

        return self._to_domain(member_model)

    async def find_by_email(self, email: str) -> Member | None:
        """Find member by email address.

        Emails are stored lowercase; the lookup lowercases both sides so
        legacy mixed-case rows still match.

        Args:
            email: Member's email address (case-insensitive).

        Returns:
            Domain Member entity if found, None otherwise.
        """
        stmt = select(MemberModel).where(
            func.lower(MemberModel.email) == email.strip().lower()
        )
        result = await self.session.execute(stmt)
        member_model = result.scalar_one_or_none()

        if member_model is None:
            return None

        return self._to_domain(member_model)

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
            List of domain Member entities.
        """
        stmt = select(MemberModel)
        if email_contains:
            stmt = stmt.where(MemberModel.email.icontains(email_contains, autoescape=True))

        # id (uuid7) breaks created_at ties between rows inserted in one batch
        if newest_first:
            stmt = stmt.order_by(MemberModel.created_at.desc(), MemberModel.id.desc())
        else:
            stmt = stmt.order_by(MemberModel.created_at.asc(), MemberModel.id.asc())

        stmt = stmt.limit(limit).offset(offset)
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def count(self, *, email_contains: str | None = None) -> int:
        """Count members matching the optional filter.

        Args:
            email_contains: Optional case-insensitive email substring filter.

        Returns:
            Number of matching members.
        """
        stmt = select(func.count()).select_from(MemberModel)
        if email_contains:
            stmt = stmt.where(MemberModel.email.icontains(email_contains, autoescape=True))
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def list_all(self) -> list[Member]:
        """Return every member, oldest first.

        Returns:
            List of domain Member entities.
        """
        stmt = select(MemberModel).order_by(
            MemberModel.created_at.asc(), MemberModel.id.asc()
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, member: Member) -> Result[None, MemberPersistenceError]:
        """Create new member in database.

        Args:
            member: Domain Member entity to persist.

        Returns:
            Success(None) when committed.
            Failure(MemberPersistenceError) when the insert fails; code is
            UNIQUE_CONSTRAINT_VIOLATED for duplicate emails.
        """
        self.session.add(self._to_model(member))
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            return Failure(error=_to_persistence_error(e))
        return Success(value=None)

    async def update(self, member: Member) -> Result[None, MemberPersistenceError]:
        """Update existing member in database.

        Args:
            member: Domain Member entity with updated fields.

        Returns:
            Success(None) or Failure(MemberPersistenceError).
        """
        try:
            stmt = select(MemberModel).where(MemberModel.id == member.id)
            result = await self.session.execute(stmt)
            member_model = result.scalar_one()

            member_model.name = member.name
            member_model.note = member.note
            member_model.subscribed = member.subscribed
            member_model.updated_at = member.updated_at

            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            return Failure(error=_to_persistence_error(e))
        return Success(value=None)

    async def delete(self, member_id: UUID) -> bool:
        """Delete member.

        Args:
            member_id: Member's unique identifier.

        Returns:
            True if a member was deleted, False if none existed.
        """
        stmt = delete(MemberModel).where(MemberModel.id == member_id)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return bool(result.rowcount)

    def _to_domain(self, member_model: MemberModel) -> Member:
        """Convert database model to domain entity.

        Args:
            member_model: SQLAlchemy MemberModel instance.

        Returns:
            Domain Member entity.
        """
        return Member(
            id=member_model.id,
            email=member_model.email,
            name=member_model.name,
            note=member_model.note,
            subscribed=member_model.subscribed,
            created_at=member_model.created_at,
            updated_at=member_model.updated_at,
        )

    def _to_model(self, member: Member) -> MemberModel:
        """Convert domain entity to database model.

        Args:
            member: Domain Member entity.

        Returns:
            SQLAlchemy MemberModel instance.
        """
        return MemberModel(
            id=member.id,
            email=member.email,
            name=member.name,
            note=member.note,
            subscribed=member.subscribed,
            created_at=member.created_at,
            updated_at=member.updated_at,
        )
