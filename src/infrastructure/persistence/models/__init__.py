"""Database models for persistence layer.

These are infrastructure concerns and should not be imported by the domain
layer. Domain entities live in src/domain/entities/ and are mapped to these
models by repositories.

Models Organization:
    - member.py: Member model
"""

from src.infrastructure.persistence.models.member import MemberModel

__all__ = [
    "MemberModel",
]
