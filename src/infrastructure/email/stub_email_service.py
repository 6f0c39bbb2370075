"""Stub email service for development and testing.

Logs member emails instead of delivering them. Production wiring can swap in
a real provider behind EmailProtocol without touching handlers.
"""

from src.core.config import settings
from src.domain.enums import EmailType
from src.domain.protocols.logger_protocol import LoggerProtocol

_SUBJECTS: dict[EmailType, str] = {
    EmailType.SIGNIN: "Your sign-in link",
    EmailType.SIGNUP: "Complete your signup",
    EmailType.SUBSCRIBE: "Confirm your subscription",
}


class StubEmailService:
    """Email service that writes member emails to the structured log.

    Attributes:
        logger: Structured logger used as the delivery channel.
        signin_url: Base URL embedded in every member email.
    """

    def __init__(
        self,
        logger: LoggerProtocol,
        signin_url: str | None = None,
    ) -> None:
        self.logger = logger
        self.signin_url = signin_url or settings.member_signin_url

    async def send_member_email(
        self,
        to_email: str,
        email_type: EmailType,
    ) -> None:
        """Log a signin/signup/subscribe email.

        Args:
            to_email: Recipient email address.
            email_type: Which member email to send.
        """
        self.logger.info(
            "Member email sent (stub)",
            to_email=to_email,
            email_type=email_type.value,
            subject=_SUBJECTS[email_type],
            url=f"{self.signin_url}?action={email_type.value}",
        )
