"""Repository dependency factories.

Request-scoped repository instances for domain entity persistence.
Each request gets a fresh repository bound to the request session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import MemberRepository


async def get_member_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "MemberRepository":
    """Get member repository (request-scoped).

    Args:
        session: Database session for request duration.
            Injected via Depends(get_db_session).

    Returns:
        MemberRepository instance.

    Usage:
        # Presentation Layer (FastAPI Depends)
        @router.get("/members/{member_id}")
        async def get_member(
            member_repo: MemberRepository = Depends(get_member_repository),
        ):
            return await member_repo.find_by_id(member_id)
    """
    from src.infrastructure.persistence.repositories import MemberRepository

    return MemberRepository(session=session)
