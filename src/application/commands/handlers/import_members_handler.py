"""ImportMembers command handler.

Reconciles a CSV upload against the member list: every row becomes an
independent CreateMember attempt and the outcomes are folded into one report.

Flow:
    1. Read rows from the upload (RecordSourceProtocol); an unreadable file
       fails the whole import with SourceUnreadableError
    2. Build one CreateMember command per row (send_email always False)
    3. Run the attempts concurrently, at most `concurrency` in flight, each
       through a freshly resolved CreateMemberHandler with its own session
    4. Tag each attempt IMPORTED / DUPLICATE / INVALID
    5. Fold the tags into an ImportTally after all attempts finished
    6. Return Success(MemberImportReport)

A row never aborts the batch: failures, including unexpected exceptions,
are counted as invalid. There is no cross-row transaction, so a partially
processed batch keeps the members it created.
"""

import asyncio
import re
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import TypeAlias

from src.application.commands.handlers.create_member_handler import (
    CreateMemberHandler,
)
from src.application.commands.member_commands import CreateMember, ImportMembers
from src.application.dtos.import_dtos import (
    ImportTally,
    MemberImportOutcome,
    MemberImportReport,
)
from src.application.dtos.member_dtos import MemberResult
from src.application.services.member_import_report import assemble_import_report
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.errors import MemberAlreadyExistsError, SourceUnreadableError
from src.domain.protocols import (
    ColumnSpec,
    LoggerProtocol,
    MemberRow,
    RecordSourceProtocol,
)

# Provides a CreateMemberHandler bound to its own unit of work for one attempt
MemberCreationScope: TypeAlias = Callable[
    [], AbstractAsyncContextManager[CreateMemberHandler]
]

MEMBER_IMPORT_COLUMNS: tuple[ColumnSpec, ...] = (
    ColumnSpec(name="email", lookup=re.compile("email", re.IGNORECASE)),
    ColumnSpec(name="name", lookup=re.compile("name", re.IGNORECASE)),
)


def classify_attempt(
    result: Result[MemberResult, DomainError],
) -> MemberImportOutcome:
    """Tag one creation result.

    Args:
        result: Result returned by CreateMemberHandler.

    Returns:
        IMPORTED on success, DUPLICATE for MemberAlreadyExistsError,
        INVALID for any other failure.
    """
    match result:
        case Success():
            return MemberImportOutcome.IMPORTED
        case Failure(error=MemberAlreadyExistsError()):
            return MemberImportOutcome.DUPLICATE
        case _:
            return MemberImportOutcome.INVALID


class ImportMembersHandler:
    """Handler for ImportMembers command.

    Dependencies (injected via constructor):
        - RecordSourceProtocol: Parses the upload into rows
        - MemberCreationScope: Resolves a fresh CreateMemberHandler per attempt
        - LoggerProtocol: Structured logging
        - concurrency: Maximum attempts in flight (1 = sequential)
    """

    def __init__(
        self,
        record_source: RecordSourceProtocol,
        creation_scope: MemberCreationScope,
        logger: LoggerProtocol,
        concurrency: int = 10,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            record_source: Parser for the uploaded file.
            creation_scope: Factory of per-attempt CreateMemberHandler scopes.
            logger: Structured logger.
            concurrency: Maximum attempts in flight.

        Raises:
            ValueError: If concurrency is below 1.
        """
        if concurrency < 1:
            raise ValueError("concurrency must be at least 1")
        self._record_source = record_source
        self._creation_scope = creation_scope
        self._logger = logger
        self._concurrency = concurrency

    async def handle(
        self, cmd: ImportMembers
    ) -> Result[MemberImportReport, SourceUnreadableError]:
        """Handle ImportMembers command.

        Args:
            cmd: ImportMembers command with the uploaded file.

        Returns:
            Success(MemberImportReport) once every row was attempted.
            Failure(SourceUnreadableError) if the file could not be read.
        """
        log = self._logger.bind(file_name=cmd.file_name)

        rows_result = self._record_source.read_rows(
            cmd.file_content, MEMBER_IMPORT_COLUMNS
        )
        if isinstance(rows_result, Failure):
            log.warning("member_import_unreadable", reason=rows_result.error.message)
            return Failure(error=rows_result.error)

        rows = rows_result.value
        log.info(
            "member_import_started",
            row_count=len(rows),
            concurrency=self._concurrency,
        )

        semaphore = asyncio.Semaphore(self._concurrency)
        outcomes = await asyncio.gather(
            *(self._attempt(row, semaphore, log) for row in rows)
        )

        tally = ImportTally()
        for outcome in outcomes:
            tally.record(outcome)

        report = assemble_import_report(tally)
        log.info(
            "member_import_completed",
            imported=report.imported,
            duplicates=report.duplicates,
            invalid=report.invalid,
        )
        return Success(value=report)

    async def _attempt(
        self,
        row: MemberRow,
        semaphore: asyncio.Semaphore,
        log: LoggerProtocol,
    ) -> MemberImportOutcome:
        """Run one row through CreateMemberHandler.

        Never raises; anything unexpected is tagged INVALID.
        """
        command = CreateMember(email=row.email, name=row.name, send_email=False)

        async with semaphore:
            try:
                async with self._creation_scope() as create_handler:
                    result = await create_handler.handle(command)
            except Exception as e:
                log.warning(
                    "member_import_row_failed",
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                return MemberImportOutcome.INVALID

        return classify_attempt(result)
