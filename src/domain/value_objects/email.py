"""Email value object with validation.

Immutable value object that validates and normalizes member email addresses.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email


@dataclass(frozen=True)
class Email:
    """Email value object with format validation.

    Uses email-validator library for RFC-compliant validation. The stored
    value is lowercased so that case variants of one address collide on the
    members.email unique index.

    Attributes:
        value: The email address string (validated, lowercase)

    Raises:
        ValueError: If email format is invalid

    Example:
        >>> str(Email("Reader@Example.com"))
        'reader@example.com'
        >>> Email("")
        Traceback (most recent call last):
        ...
        ValueError: Invalid email: ...
    """

    value: str

    def __post_init__(self) -> None:
        """Validate and normalize email after initialization.

        Raises:
            ValueError: If email format is invalid.
        """
        try:
            # No deliverability (DNS) check: imports validate thousands of rows
            validated = validate_email(self.value.strip(), check_deliverability=False)
            object.__setattr__(self, "value", validated.normalized.lower())
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email: {e}") from e

    def __str__(self) -> str:
        """Return email address as string."""
        return self.value
