"""Member creation error classification.

Decides whether a failed member creation is a benign duplicate (the email
already belongs to a member) or a genuine failure. Both the single add
endpoint and the CSV import go through CreateMemberHandler, which applies
this rule, so duplicates are recognized identically everywhere.

Usage:
    result = await repo.save(member)
    if isinstance(result, Failure):
        return Failure(error=classify_member_creation_error(result.error))
"""

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.domain.errors import MemberAlreadyExistsError, MemberPersistenceError

_UNIQUE_MARKER = "unique"


def classify_member_creation_error(error: DomainError) -> DomainError:
    """Map a creation failure to MemberAlreadyExistsError when it is a duplicate.

    Detection order:
        1. Structured conflict code set by the repository
           (UNIQUE_CONSTRAINT_VIOLATED).
        2. A persistence error that carries a driver code and whose message
           mentions "unique". This depends on driver wording and only covers
           adapters that do not report a structured code.

    Args:
        error: Failure produced while creating a member.

    Returns:
        MemberAlreadyExistsError for duplicates, otherwise the same error
        object unchanged.
    """
    if error.code is ErrorCode.UNIQUE_CONSTRAINT_VIOLATED:
        return MemberAlreadyExistsError()

    if (
        isinstance(error, MemberPersistenceError)
        and error.db_code is not None
        and _UNIQUE_MARKER in error.message.lower()
    ):
        return MemberAlreadyExistsError()

    return error
