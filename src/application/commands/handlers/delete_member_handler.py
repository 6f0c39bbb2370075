"""DeleteMember command handler."""

from src.application.commands.member_commands import DeleteMember
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.errors import MemberError
from src.domain.protocols import LoggerProtocol, MemberRepository


class DeleteMemberHandler:
    """Handler for DeleteMember command (hard delete)."""

    def __init__(self, member_repo: MemberRepository, logger: LoggerProtocol) -> None:
        self._member_repo = member_repo
        self._logger = logger

    async def handle(self, cmd: DeleteMember) -> Result[None, NotFoundError]:
        """Handle DeleteMember command.

        Args:
            cmd: DeleteMember command.

        Returns:
            Success(None) when the member was removed.
            Failure(NotFoundError) if no such member exists.
        """
        deleted = await self._member_repo.delete(cmd.member_id)
        if not deleted:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.MEMBER_NOT_FOUND,
                    message=MemberError.MEMBER_NOT_FOUND,
                    resource_type="Member",
                    resource_id=str(cmd.member_id),
                )
            )

        self._logger.info("member_deleted", member_id=str(cmd.member_id))
        return Success(value=None)
