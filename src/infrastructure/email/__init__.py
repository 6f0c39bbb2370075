"""Email service implementations.

This package contains email service adapters:
- StubEmailService: Structured log output for development/testing
"""

from src.infrastructure.email.stub_email_service import StubEmailService

__all__ = [
    "StubEmailService",
]
