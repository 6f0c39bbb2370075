"""Application layer error types.

This module defines application-level errors that wrap domain errors and add
application-specific context (CQRS command/query execution failures).

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum

from src.core.errors import ConflictError, NotFoundError, ValidationError
from src.core.errors.domain_error import DomainError
from src.domain.errors import SourceUnreadableError


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    These codes represent failures at the application layer (command/query
    handlers), typically wrapping domain errors with additional context.
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    QUERY_VALIDATION_FAILED = "query_validation_failed"
    QUERY_FAILED = "query_failed"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    PAYLOAD_TOO_LARGE = "payload_too_large"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Wraps domain errors with application-specific context. Used by routers to
    hand structured error information to ErrorResponseBuilder.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        domain_error: Original domain error (if error originated from domain layer)
        details: Additional context as key-value pairs

    Examples:
        >>> error = ApplicationError.from_domain_error(MemberAlreadyExistsError())
        >>> error.code
        <ApplicationErrorCode.CONFLICT: 'conflict'>
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None

    @classmethod
    def from_domain_error(
        cls,
        error: DomainError,
        *,
        query: bool = False,
    ) -> "ApplicationError":
        """Wrap a domain error with the matching application code.

        Args:
            error: Domain error returned by a handler.
            query: True when the error came from a query handler.

        Returns:
            ApplicationError carrying the original domain error.
        """
        if isinstance(error, NotFoundError):
            code = ApplicationErrorCode.NOT_FOUND
        elif isinstance(error, ConflictError):
            code = ApplicationErrorCode.CONFLICT
        elif isinstance(error, (ValidationError, SourceUnreadableError)):
            code = (
                ApplicationErrorCode.QUERY_VALIDATION_FAILED
                if query
                else ApplicationErrorCode.COMMAND_VALIDATION_FAILED
            )
        else:
            code = (
                ApplicationErrorCode.QUERY_FAILED
                if query
                else ApplicationErrorCode.COMMAND_EXECUTION_FAILED
            )

        return cls(code=code, message=error.message, domain_error=error)
