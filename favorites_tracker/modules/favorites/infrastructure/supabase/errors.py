# 📄 File: favorites_tracker/modules/favorites/infrastructure/supabase/errors.py
# 🧭 Purpose (Layman Explanation):
# Turns the many different error types the Supabase libraries can throw into the app's own
# small set of errors (not found, bad data, not signed in, backend down), and times each call.
# 🧪 Purpose (Technical Summary):
# Backend exception translation (PostgREST APIError, Supabase Auth errors, StorageException,
# httpx and aiohttp transport errors) into the RepositoryError hierarchy, plus the
# backend_call context manager that logs timing and outcome of every repository call.
# 🔗 Dependencies:
# supabase, postgrest, httpx, aiohttp, favorites_tracker.shared.core.exceptions, shared.utils.logging
# 🔄 Connected Modules / Calls From:
# Every Supabase repository implementation

import asyncio
import time
from contextlib import contextmanager
from typing import Optional

import aiohttp
import httpx
from postgrest import APIError
from supabase import AuthError, AuthRetryableError, StorageException

from favorites_tracker.shared.core.exceptions import (
    AuthenticationError,
    FavoritesTrackerException,
    NotFoundError,
    RepositoryError,
    ServiceUnavailableError,
    ValidationError,
)
from favorites_tracker.shared.utils.logging import get_logger

logger = get_logger(__name__)

# Exception classes raised by the backend client libraries
BACKEND_ERRORS = (
    APIError,
    AuthError,
    StorageException,
    httpx.HTTPError,
    aiohttp.ClientError,
    asyncio.TimeoutError,
)

# PostgreSQL / PostgREST codes
POSTGREST_VALIDATION_CODES = {"23505", "23503", "23502", "23514", "22P02"}
POSTGREST_AUTH_CODES = {"42501", "PGRST301", "PGRST302", "PGRST303"}

# Supabase Auth error codes that describe bad input rather than bad credentials
AUTH_VALIDATION_CODES = {
    "user_already_exists",
    "email_exists",
    "weak_password",
    "validation_failed",
    "email_address_invalid",
}


def _status_error(status: int, message: str, service: str, **kwargs) -> RepositoryError:
    if status == 404:
        return NotFoundError(message=message, **kwargs)
    if status in (401, 403):
        return AuthenticationError(message=message, **kwargs)
    if status >= 500:
        return ServiceUnavailableError(message=message, service=service, **kwargs)
    return RepositoryError(message=message, **kwargs)


def translate_backend_error(
    exc: Exception,
    operation: Optional[str] = None,
    resource_type: Optional[str] = None
) -> RepositoryError:
    """
    Map a backend library exception to a typed repository error.

    The backend's own message text is preserved in details["backend_message"].

    Args:
        exc: Exception raised by supabase/postgrest/httpx/aiohttp
        operation: Repository operation name
        resource_type: Entity kind involved

    Returns:
        RepositoryError subclass instance (not raised)
    """
    backend_message = getattr(exc, "message", None) or str(exc)
    common = {"operation": operation, "backend_message": backend_message}

    if isinstance(exc, AuthError):
        code = getattr(exc, "code", None)
        if code in AUTH_VALIDATION_CODES:
            return ValidationError(message=backend_message, constraint=code, **common)
        if isinstance(exc, AuthRetryableError):
            return ServiceUnavailableError(
                message="Authentication service unreachable",
                service="supabase_auth",
                **common
            )
        return AuthenticationError(message=backend_message, **common)

    if isinstance(exc, APIError):
        code = exc.code or ""
        if code in POSTGREST_VALIDATION_CODES:
            constraint = "unique" if code == "23505" else code
            return ValidationError(message=backend_message, constraint=constraint, **common)
        if code in POSTGREST_AUTH_CODES:
            return AuthenticationError(message=backend_message, **common)
        return RepositoryError(
            message=f"Database operation failed: {backend_message}",
            resource_type=resource_type,
            details={"code": code} if code else None,
            **common
        )

    if isinstance(exc, StorageException):
        payload = exc.args[0] if exc.args and isinstance(exc.args[0], dict) else {}
        message = str(payload.get("message") or backend_message)
        common["backend_message"] = message
        status = payload.get("statusCode")
        if str(status) == "404" or "not found" in message.lower():
            return NotFoundError(message=message, resource_type=resource_type or "file", **common)
        try:
            status_code = int(status)
        except (TypeError, ValueError):
            status_code = 0
        if status_code:
            return _status_error(status_code, message, "supabase_storage", **common)
        return RepositoryError(message=f"Storage operation failed: {message}", **common)

    if isinstance(exc, httpx.HTTPStatusError):
        return _status_error(exc.response.status_code, backend_message, "supabase", **common)

    if isinstance(exc, httpx.TransportError):
        return ServiceUnavailableError(message="Backend unreachable", service="supabase", **common)

    if isinstance(exc, aiohttp.ClientResponseError):
        return _status_error(exc.status, exc.message or backend_message, "image_download", **common)

    if isinstance(exc, (aiohttp.ClientConnectionError, asyncio.TimeoutError)):
        return ServiceUnavailableError(message="Backend unreachable", service="image_download", **common)

    return RepositoryError(message=f"Backend operation failed: {backend_message}", **common)


@contextmanager
def backend_call(repository: str, operation: str, resource_type: Optional[str] = None):
    """
    Wrap a backend call: translate library errors and log timing and outcome.

    Typed errors raised inside the block pass through unchanged.
    """
    start = time.perf_counter()
    try:
        yield
    except FavoritesTrackerException as e:
        logger.log_repository_call(
            repository, operation, (time.perf_counter() - start) * 1000, outcome=e.kind.value
        )
        raise
    except BACKEND_ERRORS as e:
        error = translate_backend_error(e, operation=operation, resource_type=resource_type)
        logger.log_repository_call(
            repository,
            operation,
            (time.perf_counter() - start) * 1000,
            outcome=error.kind.value,
            extra={"backend_error": type(e).__name__}
        )
        raise error from e
    else:
        logger.log_repository_call(repository, operation, (time.perf_counter() - start) * 1000)
