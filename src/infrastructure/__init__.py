"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- Database repositories
- Record sources for bulk imports
- Email and logging adapters

Structure:
- persistence/: Database adapters (SQLAlchemy models and repositories)
- imports/: CSV record source
- email/: Member email delivery
- logging/: structlog adapters

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
