"""CSV record source for member imports.

Turns an uploaded CSV file into MemberRow values. Headers are matched by
case-insensitive pattern, so exports from other tools ("Email Address",
"Full Name", ...) import without renaming columns.

Architecture:
    CsvRecordSource reads the whole upload before returning anything:
    - Undecodable bytes, empty input or a missing header row fail the source
    - Rows never fail individually; a missing column yields empty values
"""

import csv
import io
from collections.abc import Sequence

import structlog

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import SourceUnreadableError
from src.domain.protocols.record_source_protocol import ColumnSpec, MemberRow

logger = structlog.get_logger(__name__)


def _unreadable(message: str) -> Failure[SourceUnreadableError]:
    return Failure(
        error=SourceUnreadableError(
            code=ErrorCode.SOURCE_UNREADABLE,
            message=message,
        )
    )


class CsvRecordSource:
    """Parser for member CSV uploads.

    Stateless; one instance can serve every request.

    Example:
        >>> source = CsvRecordSource()
        >>> result = source.read_rows(b"email,name\\na@example.com,Ann\\n", columns)
        >>> match result:
        ...     case Success(value=rows):
        ...         print(len(rows))
        ...     case Failure(error=error):
        ...         print(error.message)
    """

    def read_rows(
        self,
        content: bytes,
        columns: Sequence[ColumnSpec],
    ) -> Result[list[MemberRow], SourceUnreadableError]:
        """Parse CSV bytes into member rows.

        Args:
            content: Raw uploaded bytes (UTF-8, BOM tolerated).
            columns: Fields to extract, each located by header pattern.

        Returns:
            Success(rows) in file order.
            Failure(SourceUnreadableError) if the file cannot be read at all.
        """
        try:
            text = content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            logger.warning("csv_decode_failed", error=str(e))
            return _unreadable(f"CSV file is not valid UTF-8: {e.reason}")

        if not text.strip():
            logger.warning("csv_empty")
            return _unreadable("CSV file is empty")

        try:
            raw_rows = list(csv.reader(io.StringIO(text, newline="")))
        except csv.Error as e:
            logger.warning("csv_parse_failed", error=str(e))
            return _unreadable(f"Failed to parse CSV file: {e}")

        # Leading blank lines are not a header
        raw_rows = [row for row in raw_rows if any(cell.strip() for cell in row)]
        if not raw_rows:
            return _unreadable("CSV file has no header row")

        header, *records = raw_rows
        positions = self._locate_columns(header, columns)

        rows = [self._to_row(record, positions) for record in records]

        logger.info(
            "csv_parse_succeeded",
            row_count=len(rows),
            matched_columns={name: idx is not None for name, idx in positions.items()},
        )
        return Success(value=rows)

    def _locate_columns(
        self,
        header: list[str],
        columns: Sequence[ColumnSpec],
    ) -> dict[str, int | None]:
        """Map each requested field to the first header matching its pattern."""
        positions: dict[str, int | None] = {}
        for column in columns:
            positions[column.name] = next(
                (
                    idx
                    for idx, title in enumerate(header)
                    if column.lookup.search(title.strip())
                ),
                None,
            )
        return positions

    def _to_row(
        self,
        record: list[str],
        positions: dict[str, int | None],
    ) -> MemberRow:
        values: dict[str, str] = {}
        for name, idx in positions.items():
            if idx is None or idx >= len(record):
                values[name] = ""
            else:
                values[name] = record[idx].strip()

        return MemberRow(
            email=values.get("email", ""),
            name=values.get("name") or None,
        )
