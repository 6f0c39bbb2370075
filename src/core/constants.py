"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `src/core/config.py` instead.

Categories:
- Column limits: Sizes shared by the members table and request schemas
- Pagination: Browse defaults and bounds

Example:
    >>> from src.core.constants import MAX_PAGE_SIZE
    >>> limit = min(requested, MAX_PAGE_SIZE)
"""

# =============================================================================
# Column Limits
# =============================================================================

EMAIL_MAX_LENGTH: int = 191
"""Longest stored email address (fits a utf8mb4 unique index)."""

NAME_MAX_LENGTH: int = 191
"""Longest stored member display name."""

NOTE_MAX_LENGTH: int = 2000
"""Longest accepted staff note."""


# =============================================================================
# Pagination
# =============================================================================

DEFAULT_PAGE_SIZE: int = 15
"""Members per page when the client does not ask for a limit."""

MAX_PAGE_SIZE: int = 100
"""Largest page a browse request may ask for."""
