"""Unit tests for ImportMembersHandler.

Tests cover:
- Clean batch: every row imported
- Conservation: imported + duplicates + invalid == row count
- Duplicates within one batch and against existing members
- Rows without a usable email counted as invalid
- Import never sends member emails
- Unreadable source fails the whole import
- Unexpected exceptions in one attempt do not abort the batch
- Fresh creation scope per row and bounded concurrency
"""

from unittest.mock import MagicMock, Mock

import pytest

from src.application.commands.handlers.import_members_handler import (
    MEMBER_IMPORT_COLUMNS,
    ImportMembersHandler,
    classify_attempt,
)
from src.application.commands.member_commands import ImportMembers
from src.application.dtos import MemberImportOutcome, MemberImportReport
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Success
from src.domain.enums import EmailType
from src.domain.errors import MemberAlreadyExistsError, SourceUnreadableError
from src.domain.protocols import MemberRow
from src.infrastructure.imports import CsvRecordSource
from tests.utils.member_doubles import (
    MemberStore,
    RecordingEmailService,
    TrackingCreationScope,
    make_member,
)


class StaticRecordSource:
    """Record source returning preset rows (or a preset failure)."""

    def __init__(self, rows=None, error=None):
        self._rows = rows or []
        self._error = error
        self.calls = []

    def read_rows(self, content, columns):
        self.calls.append((content, tuple(columns)))
        if self._error is not None:
            return Failure(error=self._error)
        return Success(value=list(self._rows))


def _rows(*emails: str) -> list[MemberRow]:
    return [MemberRow(email=email) for email in emails]


def _handler(source, scope, concurrency=10, logger=None) -> ImportMembersHandler:
    return ImportMembersHandler(
        record_source=source,
        creation_scope=scope,
        logger=logger or MagicMock(),
        concurrency=concurrency,
    )


def _stats(report: MemberImportReport) -> tuple[int, int, int]:
    return report.imported, report.duplicates, report.invalid


@pytest.mark.unit
class TestClassifyAttempt:
    """Test tagging of single creation results."""

    def test_success_is_imported(self):
        assert classify_attempt(Success(value=None)) is MemberImportOutcome.IMPORTED

    def test_member_already_exists_is_duplicate(self):
        result = Failure(error=MemberAlreadyExistsError())

        assert classify_attempt(result) is MemberImportOutcome.DUPLICATE

    def test_other_failure_is_invalid(self):
        result = Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_EMAIL,
                message="A valid email address is required",
            )
        )

        assert classify_attempt(result) is MemberImportOutcome.INVALID


@pytest.mark.unit
class TestImportMembersHandlerCounts:
    """Test reconciliation counts."""

    @pytest.mark.asyncio
    async def test_clean_batch_imports_every_row(self):
        # Arrange
        store = MemberStore()
        source = StaticRecordSource(_rows("a@example.com", "b@example.com"))
        handler = _handler(source, TrackingCreationScope(store))

        # Act
        result = await handler.handle(ImportMembers(file_content=b"ignored"))

        # Assert
        assert isinstance(result, Success)
        assert _stats(result.value) == (2, 0, 0)
        assert sorted(m.email for m in store.members.values()) == [
            "a@example.com",
            "b@example.com",
        ]

    @pytest.mark.asyncio
    async def test_mixed_batch_counts_duplicates_and_invalid(self):
        # Arrange
        store = MemberStore()
        source = StaticRecordSource(
            _rows("a@example.com", "a@example.com", "", "b@example.com")
        )
        handler = _handler(source, TrackingCreationScope(store))

        # Act
        result = await handler.handle(ImportMembers(file_content=b"ignored"))

        # Assert
        assert isinstance(result, Success)
        assert _stats(result.value) == (2, 1, 1)
        assert len(store.members) == 2

    @pytest.mark.asyncio
    async def test_rerun_counts_existing_members_as_duplicates(self):
        # Arrange
        store = MemberStore()
        source = StaticRecordSource(
            _rows("a@example.com", "a@example.com", "", "b@example.com")
        )
        handler = _handler(source, TrackingCreationScope(store))
        await handler.handle(ImportMembers(file_content=b"ignored"))

        # Act
        result = await handler.handle(ImportMembers(file_content=b"ignored"))

        # Assert
        assert _stats(result.value) == (0, 3, 1)
        assert len(store.members) == 2

    @pytest.mark.asyncio
    async def test_case_variants_of_existing_email_are_duplicates(self):
        store = MemberStore()
        existing = make_member(email="reader@example.com")
        store.members[existing.id] = existing
        source = StaticRecordSource(_rows("Reader@Example.com", "READER@EXAMPLE.COM"))
        handler = _handler(source, TrackingCreationScope(store))

        result = await handler.handle(ImportMembers(file_content=b"ignored"))

        assert _stats(result.value) == (0, 2, 0)

    @pytest.mark.asyncio
    async def test_empty_batch_returns_zero_report(self):
        store = MemberStore()
        scope = TrackingCreationScope(store)
        handler = _handler(StaticRecordSource([]), scope)

        result = await handler.handle(ImportMembers(file_content=b"email\n"))

        assert isinstance(result, Success)
        assert _stats(result.value) == (0, 0, 0)
        assert scope.opened == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("concurrency", [1, 3, 50])
    async def test_counts_add_up_to_row_count_under_concurrency(self, concurrency):
        # Arrange: 60 rows over 20 distinct addresses plus 10 invalid rows
        emails = [f"user{i % 20}@example.com" for i in range(60)] + [""] * 10
        store = MemberStore()
        source = StaticRecordSource(_rows(*emails))
        handler = _handler(source, TrackingCreationScope(store), concurrency)

        # Act
        result = await handler.handle(ImportMembers(file_content=b"ignored"))

        # Assert
        report = result.value
        assert report.imported + report.duplicates + report.invalid == 70
        assert _stats(report) == (20, 40, 10)
        assert len(store.members) == 20


@pytest.mark.unit
class TestImportMembersHandlerIsolation:
    """Test per-row isolation and scoping."""

    @pytest.mark.asyncio
    async def test_each_row_gets_a_fresh_creation_scope(self):
        store = MemberStore()
        scope = TrackingCreationScope(store)
        source = StaticRecordSource(_rows("a@example.com", "b@example.com", "c@x.io"))
        handler = _handler(source, scope)

        await handler.handle(ImportMembers(file_content=b"ignored"))

        assert scope.opened == 3
        assert len({id(h) for h in scope.handlers}) == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize("concurrency", [1, 4])
    async def test_attempts_in_flight_never_exceed_concurrency(self, concurrency):
        store = MemberStore()
        scope = TrackingCreationScope(store)
        emails = [f"user{i}@example.com" for i in range(25)]
        handler = _handler(StaticRecordSource(_rows(*emails)), scope, concurrency)

        await handler.handle(ImportMembers(file_content=b"ignored"))

        assert 1 <= scope.peak_in_flight <= concurrency

    @pytest.mark.asyncio
    async def test_scope_exception_counts_row_as_invalid(self):
        # Arrange: the scope fails for one specific row
        store = MemberStore()
        inner = TrackingCreationScope(store)
        calls = {"count": 0}

        def flaky_scope():
            calls["count"] += 1
            if calls["count"] == 2:
                raise RuntimeError("pool exhausted")
            return inner()

        source = StaticRecordSource(
            _rows("a@example.com", "b@example.com", "c@example.com")
        )
        logger = MagicMock()
        handler = _handler(source, flaky_scope, concurrency=1, logger=logger)

        # Act
        result = await handler.handle(ImportMembers(file_content=b"ignored"))

        # Assert
        assert _stats(result.value) == (2, 0, 1)
        logger.bind.return_value.warning.assert_any_call(
            "member_import_row_failed",
            error_type="RuntimeError",
            error_message="pool exhausted",
        )

    @pytest.mark.asyncio
    async def test_handler_exception_counts_row_as_invalid(self):
        class ExplodingHandler:
            async def handle(self, cmd):
                raise ValueError("boom")

        class ExplodingScope:
            async def __aenter__(self):
                return ExplodingHandler()

            async def __aexit__(self, *exc_info):
                return False

        source = StaticRecordSource(_rows("a@example.com", "b@example.com"))
        handler = _handler(source, ExplodingScope)

        result = await handler.handle(ImportMembers(file_content=b"ignored"))

        assert _stats(result.value) == (0, 0, 2)


@pytest.mark.unit
class TestImportMembersHandlerEmail:
    """Test that imports never email members."""

    @pytest.mark.asyncio
    async def test_import_does_not_send_email_even_when_requested(self):
        # Arrange
        store = MemberStore()
        email_service = RecordingEmailService()
        scope = TrackingCreationScope(store, email_service=email_service)
        source = StaticRecordSource(_rows("a@example.com", "b@example.com"))
        handler = _handler(source, scope)

        # Act
        result = await handler.handle(
            ImportMembers(
                file_content=b"ignored",
                send_email=True,
                email_type=EmailType.SIGNIN,
            )
        )

        # Assert
        assert result.value.imported == 2
        assert email_service.sent == []


@pytest.mark.unit
class TestImportMembersHandlerSource:
    """Test record source integration."""

    @pytest.mark.asyncio
    async def test_unreadable_source_fails_import(self):
        # Arrange
        error = SourceUnreadableError(message="CSV file is empty")
        scope = TrackingCreationScope(MemberStore())
        handler = _handler(StaticRecordSource(error=error), scope)

        # Act
        result = await handler.handle(ImportMembers(file_content=b""))

        # Assert
        assert isinstance(result, Failure)
        assert result.error is error
        assert scope.opened == 0

    @pytest.mark.asyncio
    async def test_source_receives_content_and_member_columns(self):
        source = StaticRecordSource([])
        handler = _handler(source, TrackingCreationScope(MemberStore()))

        await handler.handle(ImportMembers(file_content=b"email\n"))

        assert source.calls == [(b"email\n", MEMBER_IMPORT_COLUMNS)]

    @pytest.mark.asyncio
    async def test_csv_upload_end_to_end(self):
        # Arrange
        content = (
            b"Email Address,Full Name\n"
            b"a@example.com,Ann\n"
            b"a@example.com,Ann Again\n"
            b",Nameless\n"
            b"b@example.com,\n"
        )
        store = MemberStore()
        handler = _handler(CsvRecordSource(), TrackingCreationScope(store))

        # Act
        result = await handler.handle(ImportMembers(file_content=content))

        # Assert
        assert _stats(result.value) == (2, 1, 1)
        names = {m.email: m.name for m in store.members.values()}
        assert names["b@example.com"] is None
        assert names["a@example.com"] in {"Ann", "Ann Again"}


@pytest.mark.unit
class TestImportMembersHandlerConstruction:
    def test_concurrency_below_one_is_rejected(self):
        with pytest.raises(ValueError, match="concurrency"):
            ImportMembersHandler(
                record_source=StaticRecordSource(),
                creation_scope=TrackingCreationScope(MemberStore()),
                logger=Mock(),
                concurrency=0,
            )
