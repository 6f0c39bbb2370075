"""Member domain errors.

Typed errors returned (never raised) by member handlers, the member
repository and the member import record source.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Extend the core DomainError hierarchy so callers can dispatch on type

Usage:
    from src.domain.errors import MemberAlreadyExistsError
    from src.core.result import Failure

    return Failure(error=MemberAlreadyExistsError())
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError


class MemberError:
    """Member error message constants."""

    MEMBER_ALREADY_EXISTS = "Member already exists"
    MEMBER_NOT_FOUND = "Member not found"
    INVALID_EMAIL = "A valid email address is required"
    SOURCE_UNREADABLE = "Import file could not be read"


@dataclass(frozen=True, slots=True, kw_only=True)
class MemberAlreadyExistsError(ConflictError):
    """A member with the same email is already stored.

    Distinct from generic validation failures: the import counts these as
    duplicates rather than invalid rows.
    """

    code: ErrorCode = ErrorCode.MEMBER_ALREADY_EXISTS
    message: str = MemberError.MEMBER_ALREADY_EXISTS
    resource_type: str = "Member"
    conflicting_field: str | None = "email"


@dataclass(frozen=True, slots=True, kw_only=True)
class MemberPersistenceError(DomainError):
    """Failure reported by the member persistence adapter.

    Attributes:
        code: UNIQUE_CONSTRAINT_VIOLATED when the adapter recognized a
            uniqueness violation, PERSISTENCE_FAILED otherwise.
        message: Driver/database message.
        db_code: Driver's machine-readable error code, when one exists.
    """

    db_code: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class SourceUnreadableError(DomainError):
    """Raw import input could not be parsed into rows at all."""

    code: ErrorCode = ErrorCode.SOURCE_UNREADABLE
