"""RecordSourceProtocol - Port for turning raw import input into rows.

The member import reads uploaded files through this port. Implementations
fail atomically (the whole input is unreadable) and never per row.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from src.core.result import Result
from src.domain.errors import SourceUnreadableError


@dataclass(frozen=True, kw_only=True)
class ColumnSpec:
    """Named field to extract from raw input.

    Attributes:
        name: Field name on the produced row (e.g. "email").
        lookup: Pattern matched against input headers; the first matching
            header supplies the field.
    """

    name: str
    lookup: re.Pattern[str]


@dataclass(frozen=True, kw_only=True)
class MemberRow:
    """One structured record extracted from an import file.

    Attributes:
        email: Identity field; empty string when the input had none.
        name: Optional display name.
    """

    email: str
    name: str | None = None


class RecordSourceProtocol(Protocol):
    """Record source protocol (port)."""

    def read_rows(
        self,
        content: bytes,
        columns: Sequence[ColumnSpec],
    ) -> Result[list[MemberRow], SourceUnreadableError]:
        """Parse raw input into member rows.

        Args:
            content: Raw uploaded bytes.
            columns: Fields to extract by header pattern.

        Returns:
            Success(rows) in input order.
            Failure(SourceUnreadableError) if the input cannot be parsed at all.
        """
        ...
