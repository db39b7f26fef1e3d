# 📄 File: favorites_tracker/shared/core/container.py
# 🧭 Purpose (Layman Explanation):
# The app's "phone book" of services: at startup we write down which object answers for
# each job (items, collections, sign-in, ...) and everything else looks them up here.
# 🧪 Purpose (Technical Summary):
# Service locator mapping a capability key (normally an abstract repository class) to a
# singleton instance or a zero-argument factory. Single-writer setup phase guarded by an
# RLock with optional freezing; many concurrent readers afterwards.
# 🔗 Dependencies:
# threading, dataclasses, enum, favorites_tracker.shared.core.exceptions, shared.utils.logging
# 🔄 Connected Modules / Calls From:
# favorites_tracker.main (ApplicationContext), favorites_tracker.modules.favorites.assembly,
# any call site using Inject(...) or get_container()

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from threading import RLock
from typing import Any, Callable, Dict, Hashable, List, Optional

from favorites_tracker.shared.utils.logging import get_logger

from .exceptions import ContainerFrozenError, NotConfiguredError

logger = get_logger(__name__)


def capability_name(capability: Hashable) -> str:
    """Readable name for a capability key."""
    return getattr(capability, "__qualname__", None) or repr(capability)


class BindingKind(Enum):
    """How a capability is provided."""
    SINGLETON = "singleton"
    FACTORY = "factory"


@dataclass(frozen=True)
class Binding:
    """A single registry entry: either a shared instance or a factory."""
    kind: BindingKind
    instance: Any = None
    factory: Optional[Callable[[], Any]] = None

    def provide(self) -> Any:
        if self.kind is BindingKind.FACTORY:
            return self.factory()
        return self.instance


class ServiceContainer:
    """
    Registry resolving capabilities to concrete providers.

    Registration is expected to happen from one initialization path (application
    startup or test setup). Resolution is safe from many threads once setup is done.
    The container holds no business logic and never special-cases a capability.
    """

    def __init__(self, name: str = "default"):
        self.name = name
        self._bindings: Dict[Hashable, Binding] = {}
        self._lock = RLock()
        self._frozen = False

    # =========================================================================
    # REGISTRATION
    # =========================================================================

    def register(
        self,
        capability: Hashable,
        instance: Any = None,
        *,
        factory: Optional[Callable[[], Any]] = None
    ) -> None:
        """
        Bind a capability to a singleton instance or to a factory.

        Any earlier binding for the capability is replaced, whatever its kind.

        Args:
            capability: Capability key, normally the abstract contract class
            instance: Shared value returned by every resolve
            factory: Zero-argument callable invoked on every resolve

        Raises:
            ValueError: If both or neither of instance and factory are given
            ContainerFrozenError: If the container has been frozen
        """
        if (instance is None) == (factory is None):
            raise ValueError("Provide exactly one of instance or factory")
        if factory is not None and not callable(factory):
            raise ValueError("factory must be callable")

        if factory is not None:
            binding = Binding(kind=BindingKind.FACTORY, factory=factory)
        else:
            binding = Binding(kind=BindingKind.SINGLETON, instance=instance)

        name = capability_name(capability)
        with self._lock:
            if self._frozen:
                logger.error(
                    f"Registration of {name} rejected: container '{self.name}' is frozen",
                    capability=name,
                    container=self.name
                )
                raise ContainerFrozenError(name)

            replaced = self._bindings.get(capability)
            self._bindings[capability] = binding

        if replaced is not None:
            logger.debug(
                f"Replaced {replaced.kind.value} binding for {name} with {binding.kind.value}",
                capability=name,
                binding=binding.kind.value
            )
        else:
            logger.debug(
                f"Registered {binding.kind.value} binding for {name}",
                capability=name,
                binding=binding.kind.value
            )

    def register_factory(self, capability: Hashable, factory: Callable[[], Any]) -> None:
        """Shorthand for register(capability, factory=factory)."""
        self.register(capability, factory=factory)

    # =========================================================================
    # RESOLUTION
    # =========================================================================

    def _lookup(self, capability: Hashable) -> Optional[Binding]:
        with self._lock:
            return self._bindings.get(capability)

    def resolve(self, capability: Hashable) -> Any:
        """
        Resolve a capability.

        Returns the bound singleton, or the result of a fresh factory call.

        Raises:
            NotConfiguredError: If nothing is bound. This is a wiring bug, not a
                runtime condition to recover from.
        """
        binding = self._lookup(capability)
        if binding is None:
            name = capability_name(capability)
            logger.critical(
                f"Dependency {name} not registered in container '{self.name}'",
                capability=name,
                container=self.name
            )
            raise NotConfiguredError(
                message=f"Dependency {name} not registered",
                capability=name
            )
        # Factories run outside the lock so they may resolve other capabilities
        return binding.provide()

    def resolve_optional(self, capability: Hashable) -> Optional[Any]:
        """Resolve a capability, returning None when it is not bound."""
        binding = self._lookup(capability)
        if binding is None:
            return None
        return binding.provide()

    def is_registered(self, capability: Hashable) -> bool:
        return self._lookup(capability) is not None

    def registered_capabilities(self) -> List[str]:
        """Names of every bound capability, for debugging."""
        with self._lock:
            return sorted(capability_name(c) for c in self._bindings)

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def freeze(self) -> None:
        """End the initialization phase; later registrations raise."""
        with self._lock:
            self._frozen = True
        logger.info(
            f"Container '{self.name}' frozen with {len(self._bindings)} bindings",
            container=self.name
        )

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def clear(self) -> None:
        """Remove every binding and unfreeze. Used to reset state between test runs."""
        with self._lock:
            count = len(self._bindings)
            self._bindings.clear()
            self._frozen = False
        logger.debug(f"Cleared {count} bindings from container '{self.name}'", container=self.name)

    def __contains__(self, capability: Hashable) -> bool:
        return self.is_registered(capability)

    def __len__(self) -> int:
        with self._lock:
            return len(self._bindings)


class Inject:
    """
    Descriptor resolving a capability lazily on attribute access.

    Example:
        class CollectionScreen:
            items = Inject(ItemRepository)

    Resolves from the given container, or from the process default container.
    """

    def __init__(self, capability: Hashable, container: Optional[ServiceContainer] = None):
        self.capability = capability
        self.container = container
        self.attr_name: Optional[str] = None

    def __set_name__(self, owner, name):
        self.attr_name = name

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        container = self.container if self.container is not None else get_container()
        return container.resolve(self.capability)


@lru_cache()
def get_container() -> ServiceContainer:
    """
    Get the process default container.

    Returns:
        ServiceContainer: Singleton container shared by Inject and the application context
    """
    return ServiceContainer(name="default")
