"""Domain errors package.

Exports all domain-level error classes for convenient importing.

Usage:
    from src.domain.errors import MemberAlreadyExistsError, SourceUnreadableError
"""

from src.domain.errors.member_error import (
    MemberAlreadyExistsError,
    MemberError,
    MemberPersistenceError,
    SourceUnreadableError,
)

__all__ = [
    "MemberAlreadyExistsError",
    "MemberError",
    "MemberPersistenceError",
    "SourceUnreadableError",
]
