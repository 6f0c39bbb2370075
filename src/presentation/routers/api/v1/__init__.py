"""API v1 routers.

RESTful resource-based endpoints.

Resources:
    /api/v1/members        - Member management
    /api/v1/members/csv    - Member CSV export/import
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.members import router as members_router

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(members_router)

__all__ = [
    "v1_router",
]
