"""EmailProtocol - Port for member email delivery.

Defines the interface for sending member emails.
Infrastructure layer provides concrete implementations (StubEmailService).
"""

from typing import Protocol

from src.domain.enums import EmailType


class EmailProtocol(Protocol):
    """Email service protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Example Implementation:
        >>> class StubEmailService:
        ...     async def send_member_email(
        ...         self,
        ...         to_email: str,
        ...         email_type: EmailType,
        ...     ) -> None:
        ...         print(f"[STUB] {email_type.value} email to {to_email}")
    """

    async def send_member_email(
        self,
        to_email: str,
        email_type: EmailType,
    ) -> None:
        """Send a signin/signup/subscribe email to a member.

        Args:
            to_email: Recipient email address.
            email_type: Which member email to send.

        Raises:
            Exception: Delivery failures propagate; callers decide whether
                they are fatal.
        """
        ...
