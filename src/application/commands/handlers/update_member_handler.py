"""UpdateMember command handler.

Applies a partial profile edit (name, note, subscribed) to an existing member.
"""

from src.application.commands.member_commands import UpdateMember
from src.application.dtos.member_dtos import MemberResult
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.errors import MemberError
from src.domain.protocols import MemberRepository


class UpdateMemberHandler:
    """Handler for UpdateMember command."""

    def __init__(self, member_repo: MemberRepository) -> None:
        self._member_repo = member_repo

    async def handle(self, cmd: UpdateMember) -> Result[MemberResult, DomainError]:
        """Handle UpdateMember command.

        Args:
            cmd: UpdateMember command.

        Returns:
            Success(MemberResult) with the edited member.
            Failure(NotFoundError) if the member does not exist.
            Failure(MemberPersistenceError) if the update could not be stored.
        """
        member = await self._member_repo.find_by_id(cmd.member_id)
        if member is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.MEMBER_NOT_FOUND,
                    message=MemberError.MEMBER_NOT_FOUND,
                    resource_type="Member",
                    resource_id=str(cmd.member_id),
                )
            )

        member.update_profile(
            name=cmd.name,
            note=cmd.note,
            subscribed=cmd.subscribed,
        )

        update_result = await self._member_repo.update(member)
        if isinstance(update_result, Failure):
            return Failure(error=update_result.error)

        return Success(value=MemberResult.from_entity(member))
