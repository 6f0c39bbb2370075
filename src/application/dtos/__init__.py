"""Application DTOs (Data Transfer Objects).

Result dataclasses returned by command and query handlers.
"""

from src.application.dtos.import_dtos import (
    ImportTally,
    MemberImportOutcome,
    MemberImportReport,
)
from src.application.dtos.member_dtos import (
    MemberListResult,
    MemberResult,
    MembersCsvExport,
)

__all__ = [
    # Import DTOs
    "ImportTally",
    "MemberImportOutcome",
    "MemberImportReport",
    # Member DTOs
    "MemberListResult",
    "MemberResult",
    "MembersCsvExport",
]
