"""Member handler dependency factories.

Request-scoped command/query handlers for member operations, plus the
per-attempt creation scope used by the CSV import.
"""

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterator

from fastapi import Depends

from src.core.config import settings
from src.core.container.infrastructure import (
    get_database,
    get_email_service,
    get_logger,
    get_record_source,
)
from src.core.container.repositories import get_member_repository
from src.domain.protocols import MemberRepository

if TYPE_CHECKING:
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
    from src.application.queries.handlers.export_members_handler import (
        ExportMembersHandler,
    )
    from src.application.queries.handlers.get_member_handler import GetMemberHandler
    from src.application.queries.handlers.list_members_handler import (
        ListMembersHandler,
    )


# ============================================================================
# Command Handler Factories (Request-Scoped)
# ============================================================================


async def get_create_member_handler(
    member_repo: MemberRepository = Depends(get_member_repository),
) -> "CreateMemberHandler":
    """Get CreateMember command handler (request-scoped).

    Returns:
        CreateMemberHandler bound to the request session.
    """
    from src.application.commands.handlers.create_member_handler import (
        CreateMemberHandler,
    )

    return CreateMemberHandler(
        member_repo=member_repo,
        email_service=get_email_service(),
        logger=get_logger(),
    )


async def get_update_member_handler(
    member_repo: MemberRepository = Depends(get_member_repository),
) -> "UpdateMemberHandler":
    """Get UpdateMember command handler (request-scoped)."""
    from src.application.commands.handlers.update_member_handler import (
        UpdateMemberHandler,
    )

    return UpdateMemberHandler(member_repo=member_repo)


async def get_delete_member_handler(
    member_repo: MemberRepository = Depends(get_member_repository),
) -> "DeleteMemberHandler":
    """Get DeleteMember command handler (request-scoped)."""
    from src.application.commands.handlers.delete_member_handler import (
        DeleteMemberHandler,
    )

    return DeleteMemberHandler(
        member_repo=member_repo,
        logger=get_logger(),
    )


@asynccontextmanager
async def member_creation_scope() -> AsyncIterator["CreateMemberHandler"]:
    """Resolve a CreateMemberHandler with its own session for one attempt.

    Import attempts run concurrently and an AsyncSession must not be shared
    between concurrent tasks, so every attempt opens and closes its own.

    Yields:
        CreateMemberHandler bound to a fresh session.
    """
    from src.application.commands.handlers.create_member_handler import (
        CreateMemberHandler,
    )
    from src.infrastructure.persistence.repositories import MemberRepository

    async with get_database().get_session() as session:
        yield CreateMemberHandler(
            member_repo=MemberRepository(session=session),
            email_service=get_email_service(),
            logger=get_logger(),
        )


def get_import_members_handler() -> "ImportMembersHandler":
    """Get ImportMembers command handler.

    Not bound to the request session: each row resolves its own creation
    handler through member_creation_scope().

    Returns:
        ImportMembersHandler configured from settings.
    """
    from src.application.commands.handlers.import_members_handler import (
        ImportMembersHandler,
    )

    return ImportMembersHandler(
        record_source=get_record_source(),
        creation_scope=member_creation_scope,
        logger=get_logger(),
        concurrency=settings.member_import_concurrency,
    )


# ============================================================================
# Query Handler Factories (Request-Scoped)
# ============================================================================


async def get_get_member_handler(
    member_repo: MemberRepository = Depends(get_member_repository),
) -> "GetMemberHandler":
    """Get GetMember query handler (request-scoped)."""
    from src.application.queries.handlers.get_member_handler import GetMemberHandler

    return GetMemberHandler(member_repo=member_repo)


async def get_list_members_handler(
    member_repo: MemberRepository = Depends(get_member_repository),
) -> "ListMembersHandler":
    """Get ListMembers query handler (request-scoped)."""
    from src.application.queries.handlers.list_members_handler import (
        ListMembersHandler,
    )

    return ListMembersHandler(member_repo=member_repo)


async def get_export_members_handler(
    member_repo: MemberRepository = Depends(get_member_repository),
) -> "ExportMembersHandler":
    """Get ExportMembers query handler (request-scoped)."""
    from src.application.queries.handlers.export_members_handler import (
        ExportMembersHandler,
    )

    return ExportMembersHandler(
        member_repo=member_repo,
        logger=get_logger(),
    )
