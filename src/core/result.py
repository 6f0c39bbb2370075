"""Result types for railway-oriented programming.

Operations that can fail return a Result instead of raising. Handlers,
repositories and parsers all speak this type, which is what lets the member
import inspect every creation attempt without one failure aborting the rest.

Usage:
    async def create(cmd: CreateMember) -> Result[MemberResult, DomainError]:
        if not cmd.email:
            return Failure(error=ValidationError(...))
        return Success(value=member_result)

    result = await handler.handle(cmd)
    match result:
        case Success(value=member):
            print(f"Created: {member.email}")
        case Failure(error=error):
            print(f"Error: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result: TypeAlias = Success[T] | Failure[E]
