# 📄 File: favorites_tracker/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# Keeps a diary of what FavoritesTracker does: which repository was called, how long it took,
# whether it failed, and for which signed-in user, either as readable lines or as JSON.

# 🧪 Purpose (Technical Summary):
# Root logger configuration (text or python-json-logger JSON output), a StructuredLogger
# wrapper that nests keyword fields under record.extra_fields, context variables for user and
# correlation ids, repository call timing records and lifecycle events.

# 🔗 Dependencies:
# - python-json-logger: JSON records
# - logging / contextvars: stdlib plumbing
# - favorites_tracker.shared.config.settings: LOG_LEVEL, LOG_FORMAT, LOG_FILE

# 🔄 Connected Modules / Calls From:
# Service container, repository provider, Supabase repositories, in-memory fakes,
# favorites_tracker.main (startup / shutdown)

import logging
import os
import socket
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional
from uuid import uuid4

from pythonjsonlogger.json import JsonFormatter

from favorites_tracker.shared.config.settings import Settings, get_settings

SERVICE_NAME = 'favorites-tracker'
TEXT_FORMAT = '%(timestamp)s - %(name)s - %(levelname)s - %(message)s'

# Keyword arguments handed straight to logging.Logger.log
_LOGGING_KWARGS = ('exc_info', 'stack_info', 'stacklevel')

# Loggers from client libraries that are too chatty below WARNING
_QUIET_LOGGERS = ('httpx', 'httpcore', 'hpack', 'aiohttp', 'asyncio', 'PIL')

user_id_var: ContextVar[str] = ContextVar('user_id', default='')
correlation_id_var: ContextVar[str] = ContextVar('correlation_id', default='')

_configured = False
_installed_handlers: List[logging.Handler] = []


def _hostname() -> str:
    try:
        return socket.gethostname()
    except OSError:
        return 'unknown'


def _context_fields() -> Dict[str, str]:
    """Current user / correlation ids, omitting unset ones."""
    fields = {}
    if user_id_var.get():
        fields['user_id'] = user_id_var.get()
    if correlation_id_var.get():
        fields['correlation_id'] = correlation_id_var.get()
    return fields


# =============================================================================
# FORMATTERS
# =============================================================================

class ContextualFormatter(logging.Formatter):
    """
    Plain-text formatter.

    Makes timestamp, service, hostname, user_id and correlation_id available to the
    format string, and flattens StructuredLogger fields onto the record so they can be
    referenced as %(field)s too.
    """

    def __init__(self, fmt: str = TEXT_FORMAT, **kwargs):
        super().__init__(fmt, **kwargs)
        self.hostname = _hostname()

    def format(self, record: logging.LogRecord) -> str:
        stamp = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'service': SERVICE_NAME,
            'hostname': self.hostname,
            'user_id': user_id_var.get(),
            'correlation_id': correlation_id_var.get(),
        }
        stamp.update(getattr(record, 'extra_fields', None) or {})
        record.__dict__.update(stamp)
        return super().format(record)


class StructuredJSONFormatter(JsonFormatter):
    """One JSON object per record; StructuredLogger fields land under "extra"."""

    def __init__(self):
        super().__init__('%(levelname)s %(name)s %(message)s')
        self.hostname = _hostname()

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]):
        super().add_fields(log_record, record, message_dict)

        nested = log_record.pop('extra_fields', None)
        log_record.update(
            timestamp=datetime.now(timezone.utc).isoformat(),
            level=record.levelname,
            logger=record.name,
            location=f"{record.module}.{record.funcName}:{record.lineno}",
            service=SERVICE_NAME,
            hostname=self.hostname,
            **_context_fields()
        )
        if nested:
            log_record['extra'] = nested


# =============================================================================
# STRUCTURED LOGGER
# =============================================================================

class StructuredLogger:
    """
    Thin wrapper over a stdlib logger.

    Every keyword argument other than exc_info / stack_info / stacklevel becomes a
    structured field, e.g. ``logger.info("Item created", item_id=item.id)``.
    """

    def __init__(self, name: str):
        self.name = name
        self.logger = logging.getLogger(name)

    def log(self, level: int, message: str, extra: Optional[Dict] = None, **kwargs):
        fields = dict(extra or {})
        passthrough = {}
        for key, value in kwargs.items():
            if key in _LOGGING_KWARGS:
                passthrough[key] = value
            else:
                fields[key] = value

        if fields:
            passthrough['extra'] = {'extra_fields': fields}
        self.logger.log(level, message, **passthrough)

    def debug(self, message: str, extra: Optional[Dict] = None, **kwargs):
        self.log(logging.DEBUG, message, extra, **kwargs)

    def info(self, message: str, extra: Optional[Dict] = None, **kwargs):
        self.log(logging.INFO, message, extra, **kwargs)

    def warning(self, message: str, extra: Optional[Dict] = None, **kwargs):
        self.log(logging.WARNING, message, extra, **kwargs)

    def error(self, message: str, extra: Optional[Dict] = None, exc_info: bool = False, **kwargs):
        self.log(logging.ERROR, message, extra, exc_info=exc_info, **kwargs)

    def critical(self, message: str, extra: Optional[Dict] = None, exc_info: bool = False, **kwargs):
        self.log(logging.CRITICAL, message, extra, exc_info=exc_info, **kwargs)

    def log_repository_call(
        self,
        repository: str,
        operation: str,
        duration_ms: float,
        outcome: str = 'success',
        extra: Optional[Dict] = None
    ):
        """
        Record one repository operation.

        Successful calls go out at DEBUG; any other outcome (an ErrorKind value)
        at WARNING.
        """
        fields = {
            'event_type': 'repository_call',
            'repository': repository,
            'operation': operation,
            'duration_ms': round(duration_ms, 2),
            'outcome': outcome,
        }
        fields.update(extra or {})

        level = logging.DEBUG if outcome == 'success' else logging.WARNING
        self.log(level, f"{repository}.{operation} - {outcome} - {duration_ms:.2f}ms", fields)


@lru_cache(maxsize=None)
def get_logger(name: str) -> StructuredLogger:
    """
    Get the StructuredLogger for a module.

    Args:
        name: Logger name, normally __name__

    Returns:
        Cached StructuredLogger
    """
    return StructuredLogger(name)


# =============================================================================
# CONFIGURATION
# =============================================================================

def _build_handlers(
    formatter: logging.Formatter,
    level: int,
    log_file: Optional[str],
    enable_console: bool
) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    if enable_console:
        handlers.append(logging.StreamHandler(sys.stdout))
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def setup_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    log_file: Optional[str] = None,
    enable_console: bool = True,
    force: bool = False
) -> logging.Logger:
    """
    Configure the root logger.

    Runs once per process; later calls are no-ops unless ``force`` is set, in which case
    only the handlers installed by the previous call are swapped out.
    Explicit arguments win over the LOG_LEVEL / LOG_FORMAT / LOG_FILE settings.

    Returns:
        The "startup" logger
    """
    global _configured

    if _configured and not force:
        return logging.getLogger('startup')

    settings = settings or get_settings()
    level_name = (log_level or settings.LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    if (log_format or settings.LOG_FORMAT).lower() == 'json':
        formatter: logging.Formatter = StructuredJSONFormatter()
    else:
        formatter = ContextualFormatter()

    root = logging.getLogger()
    for stale in _installed_handlers:
        root.removeHandler(stale)
        stale.close()

    _installed_handlers[:] = _build_handlers(formatter, level, log_file or settings.LOG_FILE, enable_console)
    for handler in _installed_handlers:
        root.addHandler(handler)
    root.setLevel(level)

    for noisy in _QUIET_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    _configured = True
    return logging.getLogger('startup')


# =============================================================================
# CONTEXT AND LIFECYCLE EVENTS
# =============================================================================

@contextmanager
def log_context(user_id: Optional[str] = None, correlation_id: Optional[str] = None) -> Iterator[Dict[str, Any]]:
    """
    Bind a user id and correlation id to every record logged inside the block.

    A correlation id is generated when none is given.
    """
    correlation_id = correlation_id or str(uuid4())
    tokens = [
        (user_id_var, user_id_var.set(user_id or '')),
        (correlation_id_var, correlation_id_var.set(correlation_id)),
    ]
    try:
        yield {'user_id': user_id, 'correlation_id': correlation_id}
    finally:
        for var, token in reversed(tokens):
            var.reset(token)


def _log_lifecycle(event_type: str, message: str, fields: Dict[str, Any]):
    get_logger('lifecycle').info(message, extra={'event_type': event_type, 'pid': os.getpid(), **fields})


def log_startup_event(service_name: str, version: str, extra: Optional[Dict] = None):
    _log_lifecycle(
        'service_startup',
        f"{service_name} {version} starting",
        {'service_name': service_name, 'version': version, **(extra or {})}
    )


def log_shutdown_event(service_name: str, extra: Optional[Dict] = None):
    _log_lifecycle(
        'service_shutdown',
        f"{service_name} stopping",
        {'service_name': service_name, **(extra or {})}
    )
