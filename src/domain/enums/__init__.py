"""Domain enums for business logic.

Available Enums:
    - EmailType: Member email variants (signin, signup, subscribe)
"""

from src.domain.enums.email_type import EmailType

__all__ = [
    "EmailType",
]
