"""Assembles the final report of a member import."""

from src.application.dtos.import_dtos import ImportTally, MemberImportReport


def assemble_import_report(tally: ImportTally) -> MemberImportReport:
    """Freeze a finished tally into the caller-facing report.

    Args:
        tally: Counters folded from every row outcome.

    Returns:
        MemberImportReport with the same counts.
    """
    return MemberImportReport(
        imported=tally.imported,
        duplicates=tally.duplicates,
        invalid=tally.invalid,
    )
