"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from src.domain.protocols import MemberRepository, EmailProtocol
"""

from src.domain.protocols.email_protocol import EmailProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.member_repository import MemberRepository
from src.domain.protocols.record_source_protocol import (
    ColumnSpec,
    MemberRow,
    RecordSourceProtocol,
)

__all__ = [
    "ColumnSpec",
    "EmailProtocol",
    "LoggerProtocol",
    "MemberRepository",
    "MemberRow",
    "RecordSourceProtocol",
]
