# 📄 File: favorites_tracker/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# Defines the special error types FavoritesTracker uses to say exactly what went wrong
# (missing record, bad data, not signed in, backend down) instead of generic failures.
# 🧪 Purpose (Technical Summary):
# Typed exception hierarchy keyed by ErrorKind, carrying error codes, details and
# dictionary serialization. Every repository and container failure is one of these.
# 🔗 Dependencies:
# typing, enum
# 🔄 Connected Modules / Calls From:
# Service container, repository contracts, Supabase repositories, in-memory fakes

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Error taxonomy shared by the container and every repository"""
    NOT_CONFIGURED = "not_configured"        # Wiring bug, fatal
    NOT_FOUND = "not_found"
    VALIDATION_FAILED = "validation_failed"
    UNAUTHORIZED = "unauthorized"
    UNAVAILABLE = "unavailable"              # Backend unreachable, caller may retry
    UNSPECIFIED = "unspecified"


class FavoritesTrackerException(Exception):
    """
    Base exception class for FavoritesTracker.
    All custom exceptions should inherit from this class.
    """

    kind: ErrorKind = ErrorKind.UNSPECIFIED

    def __init__(
        self,
        message: str,
        kind: Optional[ErrorKind] = None,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        if kind is not None:
            self.kind = kind
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": {
                "code": self.error_code,
                "kind": self.kind.value,
                "message": self.message,
                "details": self.details,
            }
        }


# =============================================================================
# CONTAINER EXCEPTIONS
# =============================================================================

class NotConfiguredError(FavoritesTrackerException):
    """
    Raised when a capability is resolved but was never registered.
    Indicates a wiring bug; callers are not expected to recover from it.
    """

    kind = ErrorKind.NOT_CONFIGURED

    def __init__(
        self,
        message: str = "Dependency not configured",
        capability: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if capability:
            details["capability"] = capability

        super().__init__(
            message=message,
            details=details,
            error_code="NOT_CONFIGURED"
        )


class ContainerFrozenError(FavoritesTrackerException):
    """Raised when registering into a container after its initialization phase ended."""

    kind = ErrorKind.NOT_CONFIGURED

    def __init__(self, capability: Optional[str] = None):
        details = {"capability": capability} if capability else {}
        super().__init__(
            message=f"Container is frozen; cannot register {capability or 'capability'}",
            details=details,
            error_code="CONTAINER_FROZEN"
        )


# =============================================================================
# REPOSITORY EXCEPTIONS
# =============================================================================

class RepositoryError(FavoritesTrackerException):
    """
    Base exception for repository operation failures.
    Backend-provided message text is kept in details["backend_message"].
    """

    def __init__(
        self,
        message: str = "Repository operation failed",
        operation: Optional[str] = None,
        resource_type: Optional[str] = None,
        backend_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        kind: Optional[ErrorKind] = None,
        error_code: Optional[str] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation
        if resource_type:
            details["resource_type"] = resource_type
        if backend_message:
            details["backend_message"] = backend_message

        super().__init__(
            message=message,
            kind=kind,
            details=details,
            error_code=error_code or "REPOSITORY_ERROR"
        )


class NotFoundError(RepositoryError):
    """
    Exception raised when requested resource is not found.
    Used for missing entities and missing stored files.
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        if not details:
            details = {}
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(
            message=message,
            resource_type=resource_type,
            details=details,
            error_code="NOT_FOUND",
            **kwargs
        )


class ValidationError(RepositoryError):
    """
    Exception raised for malformed or out-of-policy entity data.
    """

    kind = ErrorKind.VALIDATION_FAILED

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
        errors: Optional[list] = None,
        details: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        if constraint:
            details["constraint"] = constraint
        if errors:
            details["errors"] = list(errors)

        super().__init__(
            message=message,
            details=details,
            error_code="VALIDATION_ERROR",
            **kwargs
        )


class AuthenticationError(RepositoryError):
    """
    Exception raised for authentication failures.
    Used when credentials are invalid or no valid session exists.
    """

    kind = ErrorKind.UNAUTHORIZED

    def __init__(
        self,
        message: str = "Authentication failed",
        user_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        if not details:
            details = {}
        if user_id:
            details["user_id"] = user_id

        super().__init__(
            message=message,
            details=details,
            error_code="AUTHENTICATION_ERROR",
            **kwargs
        )


class ServiceUnavailableError(RepositoryError):
    """
    Exception raised when the backend cannot be reached.
    Callers may retry; nothing in this package retries on their behalf.
    """

    kind = ErrorKind.UNAVAILABLE

    def __init__(
        self,
        message: str = "Service unavailable",
        service: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        if not details:
            details = {}
        if service:
            details["service"] = service

        super().__init__(
            message=message,
            details=details,
            error_code="SERVICE_UNAVAILABLE",
            **kwargs
        )


class InjectedFaultError(RepositoryError):
    """Default fault raised by in-memory repositories when error injection is on."""

    kind = ErrorKind.UNSPECIFIED

    def __init__(self, message: str = "Mock not configured", **kwargs):
        super().__init__(message=message, error_code="INJECTED_FAULT", **kwargs)


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def exception_to_dict(exception: Exception) -> Dict[str, Any]:
    """
    Convert any exception to dictionary format.

    Args:
        exception: Exception to convert

    Returns:
        Dict representation of the exception
    """
    if isinstance(exception, FavoritesTrackerException):
        return exception.to_dict()

    return {
        "error": {
            "code": "INTERNAL_ERROR",
            "kind": ErrorKind.UNSPECIFIED.value,
            "message": str(exception),
            "details": {"type": exception.__class__.__name__},
        }
    }


def is_recoverable(exception: Exception) -> bool:
    """Check whether the caller can reasonably handle the error (anything but wiring bugs)."""
    if not isinstance(exception, FavoritesTrackerException):
        return False
    return exception.kind != ErrorKind.NOT_CONFIGURED
