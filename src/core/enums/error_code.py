"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS, *_VIOLATED)
- Persistence errors (PERSISTENCE_*)
- Import errors (SOURCE_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_EMAIL = "invalid_email"
    INVALID_INPUT = "invalid_input"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    MEMBER_NOT_FOUND = "member_not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"

    # Conflict errors
    MEMBER_ALREADY_EXISTS = "member_already_exists"
    UNIQUE_CONSTRAINT_VIOLATED = "unique_constraint_violated"
    RESOURCE_CONFLICT = "resource_conflict"

    # Persistence errors
    PERSISTENCE_FAILED = "persistence_failed"

    # Import errors
    SOURCE_UNREADABLE = "source_unreadable"
