"""GetMember query handler.

Looks a member up by ID or by email address.
"""

from src.application.dtos.member_dtos import MemberResult
from src.application.queries.member_queries import GetMember
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.errors import MemberError
from src.domain.protocols import MemberRepository


class GetMemberHandler:
    """Handler for GetMember query."""

    def __init__(self, member_repo: MemberRepository) -> None:
        self._member_repo = member_repo

    async def handle(self, query: GetMember) -> Result[MemberResult, NotFoundError]:
        """Handle GetMember query.

        Args:
            query: GetMember query (member_id or email).

        Returns:
            Success(MemberResult) if found.
            Failure(NotFoundError) otherwise.
        """
        if query.member_id is not None:
            member = await self._member_repo.find_by_id(query.member_id)
            lookup = str(query.member_id)
        elif query.email:
            member = await self._member_repo.find_by_email(query.email)
            lookup = query.email
        else:
            member, lookup = None, ""

        if member is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.MEMBER_NOT_FOUND,
                    message=MemberError.MEMBER_NOT_FOUND,
                    resource_type="Member",
                    resource_id=lookup,
                )
            )

        return Success(value=MemberResult.from_entity(member))
