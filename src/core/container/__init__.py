"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_create_member_handler, ...

The container is organized into modules:
- infrastructure: Core services (db, logging, email, record source)
- repositories: Repository factories
- member_handlers: Member command/query handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_email_service,
    get_logger,
    get_record_source,
)

# Repositories
from src.core.container.repositories import get_member_repository

# Member handlers
from src.core.container.member_handlers import (
    get_create_member_handler,
    get_delete_member_handler,
    get_export_members_handler,
    get_get_member_handler,
    get_import_members_handler,
    get_list_members_handler,
    get_update_member_handler,
    member_creation_scope,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_email_service",
    "get_logger",
    "get_record_source",
    # Repositories
    "get_member_repository",
    # Member handlers
    "get_create_member_handler",
    "get_delete_member_handler",
    "get_export_members_handler",
    "get_get_member_handler",
    "get_import_members_handler",
    "get_list_members_handler",
    "get_update_member_handler",
    "member_creation_scope",
]
