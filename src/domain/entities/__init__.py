"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.member import Member

__all__ = [
    "Member",
]
