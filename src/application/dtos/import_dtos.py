"""Member import DTOs.

Types produced while reconciling a CSV import against the member list.

DTOs:
    - MemberImportOutcome: Result tag of one creation attempt
    - ImportTally: Running counters folded from outcomes
    - MemberImportReport: Final report returned to the caller
"""

from dataclasses import dataclass
from enum import Enum


class MemberImportOutcome(Enum):
    """Outcome of one row's creation attempt."""

    IMPORTED = "imported"
    DUPLICATE = "duplicate"
    INVALID = "invalid"


@dataclass(kw_only=True)
class ImportTally:
    """Counters for one import run.

    Only the import handler mutates a tally, after every attempt finished.

    Attributes:
        imported: Rows that created a member.
        duplicates: Rows whose email already belonged to a member.
        invalid: Rows that failed for any other reason.
    """

    imported: int = 0
    duplicates: int = 0
    invalid: int = 0

    @property
    def total(self) -> int:
        return self.imported + self.duplicates + self.invalid

    def record(self, outcome: MemberImportOutcome) -> None:
        """Count one attempt outcome.

        Args:
            outcome: Classified result of one row.
        """
        match outcome:
            case MemberImportOutcome.IMPORTED:
                self.imported += 1
            case MemberImportOutcome.DUPLICATE:
                self.duplicates += 1
            case MemberImportOutcome.INVALID:
                self.invalid += 1


@dataclass(frozen=True, kw_only=True)
class MemberImportReport:
    """Aggregate result of a member import.

    Attributes:
        imported: Members created.
        duplicates: Rows skipped because the member already existed.
        invalid: Rows that could not be imported.
    """

    imported: int
    duplicates: int
    invalid: int

    def to_dict(self) -> dict[str, dict[str, int]]:
        """Return the stable report shape: {"stats": {...}}."""
        return {
            "stats": {
                "imported": self.imported,
                "duplicates": self.duplicates,
                "invalid": self.invalid,
            }
        }
