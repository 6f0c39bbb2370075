"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import MemberCreateRequest, MemberImportResponse
"""

from src.schemas.member_schemas import (
    ImportStats,
    MemberCreate,
    MemberCreateRequest,
    MemberImportMeta,
    MemberImportResponse,
    MemberListMeta,
    MemberListResponse,
    MemberResponse,
    MembersResponse,
    MemberUpdate,
    MemberUpdateRequest,
    PaginationMeta,
)

__all__ = [
    "ImportStats",
    "MemberCreate",
    "MemberCreateRequest",
    "MemberImportMeta",
    "MemberImportResponse",
    "MemberListMeta",
    "MemberListResponse",
    "MemberResponse",
    "MembersResponse",
    "MemberUpdate",
    "MemberUpdateRequest",
    "PaginationMeta",
]
