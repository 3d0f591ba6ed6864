"""
Application-level constants for hardcoded business logic.

These values represent core catalog behavior and should NEVER be changed
via environment variables or configuration.

For configurable values (database URL, logging, request limits, etc.),
see catalog/settings.py where values can be overridden via environment variables.
"""

# ============================================================================
# Field Limits
# ============================================================================

# Maximum length of an author's first or family name
NAME_MAX_LENGTH = 100


# ============================================================================
# Dashboard
# ============================================================================

# Labels of the dashboard counts, in display order
DASHBOARD_LABELS = (
    "Books",
    "Copies",
    "Copies available",
    "Authors",
    "Genres",
)


# ============================================================================
# Logging
# ============================================================================

# Upper bound of a single JSON log line written to the error log
MAX_LOG_SIZE_BYTES = 65536
