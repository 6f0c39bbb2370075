"""Queries - Read operations that fetch data.

Queries represent a request for information. They are immutable dataclasses
with question-like names (GetMember, ListMembers).

Each query has a corresponding handler that fetches and returns the requested
data. Queries NEVER change state.
"""

from src.application.queries.member_queries import (
    ExportMembers,
    GetMember,
    ListMembers,
    MemberOrder,
)

__all__ = [
    "ExportMembers",
    "GetMember",
    "ListMembers",
    "MemberOrder",
]
