"""Member commands (CQRS write operations).

Commands represent intent to change the member list. They are immutable
dataclasses with imperative names; handlers execute them and return Result
types instead of raising.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import EmailType


@dataclass(frozen=True, kw_only=True)
class CreateMember:
    """Create a single member.

    Shared by the HTTP add endpoint and the CSV import. The import always
    issues this command with send_email=False.

    Attributes:
        email: Raw email address (validated and normalized by the handler).
        name: Optional display name.
        note: Optional staff note.
        subscribed: Newsletter subscription flag.
        send_email: Send a member email after a successful create.
        email_type: Which member email to send when send_email is set.

    Example:
        >>> command = CreateMember(
        ...     email="reader@example.com",
        ...     name="Avid Reader",
        ...     send_email=True,
        ...     email_type=EmailType.SUBSCRIBE,
        ... )
    """

    email: str
    name: str | None = None
    note: str | None = None
    subscribed: bool = True
    send_email: bool = False
    email_type: EmailType = EmailType.SIGNUP


@dataclass(frozen=True, kw_only=True)
class UpdateMember:
    """Edit a member's profile.

    Fields left as None are not changed. Email cannot be edited.

    Attributes:
        member_id: Member to edit.
        name: New display name.
        note: New staff note.
        subscribed: New subscription flag.
    """

    member_id: UUID
    name: str | None = None
    note: str | None = None
    subscribed: bool | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteMember:
    """Permanently remove a member.

    Attributes:
        member_id: Member to remove.
    """

    member_id: UUID


@dataclass(frozen=True, kw_only=True)
class ImportMembers:
    """Import members from an uploaded CSV file.

    Every row becomes an independent CreateMember attempt; row failures are
    counted, never raised.

    Attributes:
        file_content: Raw file bytes.
        file_name: Original filename (for logging).
        send_email: Accepted with the same options as the add endpoint but
            never honored; imported members are not emailed.
        email_type: Ignored for the same reason.

    Example:
        >>> command = ImportMembers(
        ...     file_content=await upload.read(),
        ...     file_name="members.csv",
        ... )
    """

    file_content: bytes
    file_name: str = "members.csv"
    send_email: bool = False
    email_type: EmailType = EmailType.SIGNUP
