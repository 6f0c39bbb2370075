"""ListMembers query handler.

Pages through members ordered by creation time, optionally filtered by an
email substring.
"""

import math

from src.application.dtos.member_dtos import MemberListResult, MemberResult
from src.application.queries.member_queries import ListMembers, MemberOrder
from src.core.constants import MAX_PAGE_SIZE
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.protocols import MemberRepository


class ListMembersHandler:
    """Handler for ListMembers query.

    Returns:
        Result[MemberListResult, ValidationError]
    """

    def __init__(self, member_repo: MemberRepository) -> None:
        self._member_repo = member_repo

    async def handle(
        self, query: ListMembers
    ) -> Result[MemberListResult, ValidationError]:
        """Handle ListMembers query.

        Args:
            query: ListMembers query.

        Returns:
            Success(MemberListResult): Requested page (empty past the last page).
            Failure(ValidationError): limit or page out of range.
        """
        if not 1 <= query.limit <= MAX_PAGE_SIZE:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_INPUT,
                    message=f"limit must be between 1 and {MAX_PAGE_SIZE}",
                    field="limit",
                )
            )
        if query.page < 1:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_INPUT,
                    message="page must be at least 1",
                    field="page",
                )
            )

        email_contains = (query.email_contains or "").strip() or None

        total = await self._member_repo.count(email_contains=email_contains)
        members = await self._member_repo.list_members(
            limit=query.limit,
            offset=(query.page - 1) * query.limit,
            newest_first=query.order is MemberOrder.NEWEST_FIRST,
            email_contains=email_contains,
        )

        return Success(
            value=MemberListResult(
                members=[MemberResult.from_entity(m) for m in members],
                total=total,
                page=query.page,
                limit=query.limit,
                pages=max(1, math.ceil(total / query.limit)),
            )
        )
