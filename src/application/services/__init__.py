"""Application services shared by member handlers."""

from src.application.services.member_error_classifier import (
    classify_member_creation_error,
)
from src.application.services.member_import_report import assemble_import_report

__all__ = [
    "assemble_import_report",
    "classify_member_creation_error",
]
