"""Members resource handlers.

Browse, read, add, edit and destroy members, plus CSV export and import.

Endpoints:
    GET    /members                    - Browse members (paginated)
    GET    /members/csv                - Export all members as CSV
    POST   /members/csv                - Import members from CSV
    GET    /members/by-email/{email}   - Read member by email
    GET    /members/{member_id}        - Read member by ID
    POST   /members                    - Add member
    PUT    /members/{member_id}        - Edit member
    DELETE /members/{member_id}        - Destroy member
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, File, Query, Request, UploadFile, status
from fastapi.responses import JSONResponse, Response

from src.application.commands.handlers.create_member_handler import (
    CreateMemberHandler,
)
from src.application.commands.handlers.delete_member_handler import (
    DeleteMemberHandler,
)
from src.application.commands.handlers.import_members_handler import (
    ImportMembersHandler,
)
from src.application.commands.handlers.update_member_handler import (
    UpdateMemberHandler,
)
from src.application.commands.member_commands import (
    CreateMember,
    DeleteMember,
    ImportMembers,
    UpdateMember,
)
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.queries.handlers.export_members_handler import (
    ExportMembersHandler,
)
from src.application.queries.handlers.get_member_handler import GetMemberHandler
from src.application.queries.handlers.list_members_handler import (
    ListMembersHandler,
)
from src.application.queries.member_queries import (
    ExportMembers,
    GetMember,
    ListMembers,
    MemberOrder,
)
from src.core.config import settings
from src.core.constants import DEFAULT_PAGE_SIZE, EMAIL_MAX_LENGTH, MAX_PAGE_SIZE
from src.core.container import (
    get_create_member_handler,
    get_delete_member_handler,
    get_export_members_handler,
    get_get_member_handler,
    get_import_members_handler,
    get_list_members_handler,
    get_update_member_handler,
)
from src.core.errors import DomainError
from src.core.result import Failure
from src.domain.enums import EmailType
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.member_schemas import (
    MemberCreateRequest,
    MemberImportResponse,
    MemberListResponse,
    MemberResponse,
    MembersResponse,
    MemberUpdateRequest,
)

router = APIRouter(prefix="/members", tags=["Members"])

CSV_MEDIA_TYPE = "text/csv"


def _error_response(
    request: Request,
    error: DomainError,
    *,
    query: bool = False,
) -> JSONResponse:
    """Render a handler failure as RFC 9457 Problem Details."""
    return ErrorResponseBuilder.from_application_error(
        error=ApplicationError.from_domain_error(error, query=query),
        request=request,
        trace_id=get_trace_id() or "",
    )


# =============================================================================
# Browse / export
# =============================================================================


@router.get("", response_model=MemberListResponse)
async def browse_members(
    request: Request,
    limit: Annotated[int, Query(ge=1, le=MAX_PAGE_SIZE)] = DEFAULT_PAGE_SIZE,
    page: Annotated[int, Query(ge=1)] = 1,
    order: MemberOrder = MemberOrder.NEWEST_FIRST,
    email_contains: Annotated[str | None, Query(max_length=EMAIL_MAX_LENGTH)] = None,
    handler: ListMembersHandler = Depends(get_list_members_handler),
) -> MemberListResponse | JSONResponse:
    """Browse members one page at a time.

    GET /api/v1/members → 200 OK
    """
    result = await handler.handle(
        ListMembers(
            limit=limit,
            page=page,
            order=order,
            email_contains=email_contains,
        )
    )

    if isinstance(result, Failure):
        return _error_response(request, result.error, query=True)

    return MemberListResponse.from_result(result.value)


@router.get("/csv", response_class=Response)
async def export_members(
    handler: ExportMembersHandler = Depends(get_export_members_handler),
) -> Response:
    """Download every member as a CSV attachment.

    GET /api/v1/members/csv → 200 OK (text/csv)
    """
    result = await handler.handle(ExportMembers())
    export = result.value

    return Response(
        content=export.content,
        media_type=CSV_MEDIA_TYPE,
        headers={
            "Content-Disposition": f'attachment; filename="{export.file_name}"'
        },
    )


@router.post(
    "/csv",
    response_model=MemberImportResponse,
    status_code=status.HTTP_201_CREATED,
)
async def import_members(
    request: Request,
    membersfile: Annotated[UploadFile, File(description="Members CSV file")],
    handler: ImportMembersHandler = Depends(get_import_members_handler),
) -> MemberImportResponse | JSONResponse:
    """Import members from an uploaded CSV file.

    POST /api/v1/members/csv → 201 Created

    Each row is created independently; the response reports how many rows
    were imported, skipped as duplicates, or rejected as invalid.
    """
    file_name = membersfile.filename or "members.csv"
    if not file_name.lower().endswith(".csv"):
        return ErrorResponseBuilder.from_application_error(
            error=ApplicationError(
                code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                message=f"Unsupported file type: {file_name}. Upload a .csv file",
            ),
            request=request,
            trace_id=get_trace_id() or "",
        )

    file_content = await membersfile.read(settings.member_import_max_bytes + 1)
    if len(file_content) > settings.member_import_max_bytes:
        return ErrorResponseBuilder.from_application_error(
            error=ApplicationError(
                code=ApplicationErrorCode.PAYLOAD_TOO_LARGE,
                message=(
                    f"CSV file exceeds {settings.member_import_max_bytes} bytes"
                ),
            ),
            request=request,
            trace_id=get_trace_id() or "",
        )

    result = await handler.handle(
        ImportMembers(file_content=file_content, file_name=file_name)
    )

    if isinstance(result, Failure):
        return _error_response(request, result.error)

    return MemberImportResponse.from_report(result.value)


# =============================================================================
# Read
# =============================================================================


@router.get("/by-email/{email}", response_model=MembersResponse)
async def read_member_by_email(
    request: Request,
    email: str,
    handler: GetMemberHandler = Depends(get_get_member_handler),
) -> MembersResponse | JSONResponse:
    """GET /api/v1/members/by-email/{email} → 200 OK"""
    result = await handler.handle(GetMember(email=email))

    if isinstance(result, Failure):
        return _error_response(request, result.error, query=True)

    return MembersResponse(members=[MemberResponse.from_result(result.value)])


@router.get("/{member_id}", response_model=MembersResponse)
async def read_member(
    request: Request,
    member_id: UUID,
    handler: GetMemberHandler = Depends(get_get_member_handler),
) -> MembersResponse | JSONResponse:
    """GET /api/v1/members/{member_id} → 200 OK"""
    result = await handler.handle(GetMember(member_id=member_id))

    if isinstance(result, Failure):
        return _error_response(request, result.error, query=True)

    return MembersResponse(members=[MemberResponse.from_result(result.value)])


# =============================================================================
# Add / edit / destroy
# =============================================================================


@router.post(
    "",
    response_model=MembersResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_member(
    request: Request,
    data: MemberCreateRequest,
    send_email: bool = False,
    email_type: EmailType = EmailType.SIGNUP,
    handler: CreateMemberHandler = Depends(get_create_member_handler),
) -> MembersResponse | JSONResponse:
    """Add a member.

    POST /api/v1/members → 201 Created

    Query options send_email/email_type trigger a signin, signup or
    subscribe email after the member is created.
    """
    member = data.members[0]
    result = await handler.handle(
        CreateMember(
            email=member.email,
            name=member.name,
            note=member.note,
            subscribed=member.subscribed,
            send_email=send_email,
            email_type=email_type,
        )
    )

    if isinstance(result, Failure):
        return _error_response(request, result.error)

    return MembersResponse(members=[MemberResponse.from_result(result.value)])


@router.put("/{member_id}", response_model=MembersResponse)
async def edit_member(
    request: Request,
    member_id: UUID,
    data: MemberUpdateRequest,
    handler: UpdateMemberHandler = Depends(get_update_member_handler),
) -> MembersResponse | JSONResponse:
    """PUT /api/v1/members/{member_id} → 200 OK"""
    changes = data.members[0]
    result = await handler.handle(
        UpdateMember(
            member_id=member_id,
            name=changes.name,
            note=changes.note,
            subscribed=changes.subscribed,
        )
    )

    if isinstance(result, Failure):
        return _error_response(request, result.error)

    return MembersResponse(members=[MemberResponse.from_result(result.value)])


@router.delete(
    "/{member_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def destroy_member(
    request: Request,
    member_id: UUID,
    handler: DeleteMemberHandler = Depends(get_delete_member_handler),
) -> Response:
    """DELETE /api/v1/members/{member_id} → 204 No Content"""
    result = await handler.handle(DeleteMember(member_id=member_id))

    if isinstance(result, Failure):
        return _error_response(request, result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
