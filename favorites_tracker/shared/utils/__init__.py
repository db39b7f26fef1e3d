# 📄 File: favorites_tracker/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# Helpful tools other parts of the app use for common tasks, currently structured logging.

# 🧪 Purpose (Technical Summary):
# Initializes the utilities package and re-exports the logging helpers.

# 🔗 Dependencies:
# - logging: Structured logging utilities

# 🔄 Connected Modules / Calls From:
# Used by: container, repository provider, repositories, application context

from .logging import (
    get_logger,
    setup_logging,
    log_context,
    log_startup_event,
    log_shutdown_event,
    StructuredLogger,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "log_context",
    "log_startup_event",
    "log_shutdown_event",
    "StructuredLogger",
]
