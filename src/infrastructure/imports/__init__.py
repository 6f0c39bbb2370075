"""Record sources for bulk member imports."""

from src.infrastructure.imports.csv_record_source import CsvRecordSource

__all__ = [
    "CsvRecordSource",
]
