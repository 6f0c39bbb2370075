"""Member schemas for the members API.

Request and response schemas for member endpoints. Bodies wrap members in a
"members" array, and browse/import results carry their extras under "meta".
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from src.application.dtos import MemberImportReport, MemberListResult, MemberResult
from src.core.constants import EMAIL_MAX_LENGTH, NAME_MAX_LENGTH, NOTE_MAX_LENGTH


class MemberCreate(BaseModel):
    """Fields accepted when adding a member.

    Email is validated by the handler so invalid addresses produce the same
    domain error as in the CSV import.
    """

    email: str = Field(description="Member email address", max_length=EMAIL_MAX_LENGTH)
    name: str | None = Field(
        default=None, description="Display name", max_length=NAME_MAX_LENGTH
    )
    note: str | None = Field(
        default=None, description="Staff note", max_length=NOTE_MAX_LENGTH
    )
    subscribed: bool = Field(default=True, description="Newsletter subscription")


class MemberCreateRequest(BaseModel):
    """Request body for POST /members."""

    members: list[MemberCreate] = Field(min_length=1, max_length=1)

    model_config = {
        "json_schema_extra": {
            "example": {
                "members": [
                    {
                        "email": "reader@example.com",
                        "name": "Avid Reader",
                        "subscribed": True,
                    }
                ]
            }
        }
    }


class MemberUpdate(BaseModel):
    """Editable member fields; omitted fields are left unchanged."""

    name: str | None = Field(default=None, max_length=NAME_MAX_LENGTH)
    note: str | None = Field(default=None, max_length=NOTE_MAX_LENGTH)
    subscribed: bool | None = None


class MemberUpdateRequest(BaseModel):
    """Request body for PUT /members/{id}."""

    members: list[MemberUpdate] = Field(min_length=1, max_length=1)


class MemberResponse(BaseModel):
    """Single member representation."""

    id: UUID
    email: str
    name: str | None
    note: str | None
    subscribed: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_result(cls, result: MemberResult) -> "MemberResponse":
        return cls(
            id=result.id,
            email=result.email,
            name=result.name,
            note=result.note,
            subscribed=result.subscribed,
            created_at=result.created_at,
            updated_at=result.updated_at,
        )


class MembersResponse(BaseModel):
    """Response for read/add/edit: one member wrapped in "members"."""

    members: list[MemberResponse]


class PaginationMeta(BaseModel):
    """Pagination block of a browse response."""

    page: int
    limit: int
    pages: int
    total: int
    next: int | None
    prev: int | None


class MemberListMeta(BaseModel):
    pagination: PaginationMeta


class MemberListResponse(BaseModel):
    """Response for GET /members."""

    members: list[MemberResponse]
    meta: MemberListMeta

    @classmethod
    def from_result(cls, result: MemberListResult) -> "MemberListResponse":
        """Create response from a page of members.

        Args:
            result: Handler result.

        Returns:
            MemberListResponse instance.
        """
        return cls(
            members=[MemberResponse.from_result(m) for m in result.members],
            meta=MemberListMeta(
                pagination=PaginationMeta(
                    page=result.page,
                    limit=result.limit,
                    pages=result.pages,
                    total=result.total,
                    next=result.next_page,
                    prev=result.prev_page,
                )
            ),
        )


class ImportStats(BaseModel):
    """Counters of one CSV import."""

    imported: int = Field(description="Members created")
    duplicates: int = Field(description="Rows whose email already belonged to a member")
    invalid: int = Field(description="Rows that could not be imported")


class MemberImportMeta(BaseModel):
    stats: ImportStats


class MemberImportResponse(BaseModel):
    """Response schema for POST /members/csv.

    Attributes:
        meta: Import statistics under "stats".
    """

    meta: MemberImportMeta

    @classmethod
    def from_report(cls, report: MemberImportReport) -> "MemberImportResponse":
        """Create response from the import report.

        Args:
            report: Handler result.

        Returns:
            MemberImportResponse instance.
        """
        return cls.model_validate({"meta": report.to_dict()})

    model_config = {
        "json_schema_extra": {
            "example": {
                "meta": {"stats": {"imported": 2, "duplicates": 1, "invalid": 1}}
            }
        }
    }
