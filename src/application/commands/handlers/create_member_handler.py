"""CreateMember command handler.

Single-record creation used by the add endpoint and by every row of a CSV
import.

Flow:
    1. Validate and normalize the email (Email value object)
    2. Build the Member entity
    3. Save through the repository (returns Result, never raises for
       constraint violations)
    4. Reclassify failures so duplicates surface as MemberAlreadyExistsError
    5. Optionally send the requested member email
    6. Return Success(MemberResult)

Architecture:
    - Application layer ONLY imports from domain layer (entities, protocols)
    - Repository and email service are injected via protocols
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.member_commands import CreateMember
from src.application.dtos.member_dtos import MemberResult
from src.application.services.member_error_classifier import (
    classify_member_creation_error,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.member import Member
from src.domain.errors import MemberError, MemberPersistenceError
from src.domain.protocols import EmailProtocol, LoggerProtocol, MemberRepository
from src.domain.value_objects import Email


class CreateMemberHandler:
    """Handler for CreateMember command.

    Expected failures are returned, not raised:
        - ValidationError: email missing or malformed
        - MemberAlreadyExistsError: email already belongs to a member
        - MemberPersistenceError: any other storage failure
    """

    def __init__(
        self,
        member_repo: MemberRepository,
        email_service: EmailProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            member_repo: Member repository for persistence.
            email_service: Member email delivery.
            logger: Structured logger.
        """
        self._member_repo = member_repo
        self._email_service = email_service
        self._logger = logger

    async def handle(self, cmd: CreateMember) -> Result[MemberResult, DomainError]:
        """Handle CreateMember command.

        Args:
            cmd: CreateMember command.

        Returns:
            Success(MemberResult) when the member was created.
            Failure(DomainError) otherwise.
        """
        try:
            email = Email(cmd.email)
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_EMAIL,
                    message=f"{MemberError.INVALID_EMAIL}: {e}",
                    field="email",
                )
            )

        now = datetime.now(UTC)
        member = Member(
            id=uuid7(),
            email=email.value,
            name=cmd.name,
            note=cmd.note,
            subscribed=cmd.subscribed,
            created_at=now,
            updated_at=now,
        )

        try:
            save_result = await self._member_repo.save(member)
        except Exception as e:
            # Adapters are expected to return Failure; treat a raise the same way
            save_result = Failure(
                error=MemberPersistenceError(
                    code=ErrorCode.PERSISTENCE_FAILED,
                    message=str(e),
                    db_code=getattr(e, "code", None),
                )
            )

        if isinstance(save_result, Failure):
            return Failure(error=classify_member_creation_error(save_result.error))

        if cmd.send_email:
            await self._send_member_email(member, cmd)

        return Success(value=MemberResult.from_entity(member))

    async def _send_member_email(self, member: Member, cmd: CreateMember) -> None:
        """Send the requested member email; delivery failures are logged only."""
        try:
            await self._email_service.send_member_email(
                to_email=member.email,
                email_type=cmd.email_type,
            )
        except Exception as e:
            self._logger.error(
                "member_email_failed",
                error=e,
                member_id=str(member.id),
                email_type=cmd.email_type.value,
            )
