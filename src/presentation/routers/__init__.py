"""External-facing routers.

Routes that are external-facing but not part of the versioned API contract
(system endpoints) live here beside the versioned api/ package.
"""

from src.presentation.routers.system import system_router

__all__ = ["system_router"]
