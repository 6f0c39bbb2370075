"""ExportMembers query handler.

Renders every member as CSV. The header row uses the same column names the
import recognizes, so an export can be re-imported as-is.
"""

import csv
import io
from datetime import UTC, datetime

from src.application.dtos.member_dtos import MembersCsvExport
from src.application.queries.member_queries import ExportMembers
from src.core.result import Result, Success
from src.domain.protocols import LoggerProtocol, MemberRepository

EXPORT_COLUMNS = ("id", "email", "name", "note", "subscribed", "created_at")


class ExportMembersHandler:
    """Handler for ExportMembers query."""

    def __init__(self, member_repo: MemberRepository, logger: LoggerProtocol) -> None:
        self._member_repo = member_repo
        self._logger = logger

    async def handle(self, query: ExportMembers) -> Result[MembersCsvExport, None]:
        """Handle ExportMembers query.

        Args:
            query: ExportMembers query.

        Returns:
            Success(MembersCsvExport) with all members, oldest first.
        """
        members = await self._member_repo.list_all()

        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(EXPORT_COLUMNS)
        for member in members:
            writer.writerow(
                [
                    str(member.id),
                    member.email,
                    member.name or "",
                    member.note or "",
                    "true" if member.subscribed else "false",
                    member.created_at.isoformat(),
                ]
            )

        file_name = f"members.{datetime.now(UTC).date().isoformat()}.csv"
        self._logger.info("members_exported", row_count=len(members))

        return Success(
            value=MembersCsvExport(
                file_name=file_name,
                content=buffer.getvalue(),
                row_count=len(members),
            )
        )
