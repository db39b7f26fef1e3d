"""
Core utilities package for FavoritesTracker.
Provides the typed exception taxonomy and the service container.
"""

from .exceptions import (
    ErrorKind,
    FavoritesTrackerException,
    NotConfiguredError,
    ContainerFrozenError,
    RepositoryError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    ServiceUnavailableError,
    InjectedFaultError,
    exception_to_dict,
    is_recoverable,
)

from .container import (
    ServiceContainer,
    Binding,
    BindingKind,
    Inject,
    get_container,
)

__all__ = [
    "ErrorKind",
    "FavoritesTrackerException",
    "NotConfiguredError",
    "ContainerFrozenError",
    "RepositoryError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "ServiceUnavailableError",
    "InjectedFaultError",
    "exception_to_dict",
    "is_recoverable",
    "ServiceContainer",
    "Binding",
    "BindingKind",
    "Inject",
    "get_container",
]
