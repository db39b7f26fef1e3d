# 📄 File: favorites_tracker/modules/favorites/infrastructure/memory/base.py
# 🧭 Purpose (Layman Explanation):
# The shared machinery behind the pretend (in-memory) repositories used in tests: it counts
# every call, remembers what was passed, can fake slow networks and can fake failures.
# 🧪 Purpose (Technical Summary):
# Base class for in-memory test doubles: ordered backing store, per-operation call counters
# and last-argument capture, fault injection (should_throw_error / error_to_throw) and
# latency injection (delay, awaited with asyncio.sleep), plus reset().
# 🔗 Dependencies:
# asyncio, collections, favorites_tracker.shared.core.exceptions, shared.utils.logging
# 🔄 Connected Modules / Calls From:
# memory/repositories.py, service assembly (test registrations), unit tests

import asyncio
from collections import Counter
from typing import Any, Dict, Generic, Iterator, List, Optional, TypeVar

from pydantic import BaseModel

from favorites_tracker.shared.core.exceptions import InjectedFaultError
from favorites_tracker.shared.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def detach(entity):
    if isinstance(entity, BaseModel):
        return entity.model_copy(deep=True)
    return entity


class InMemoryRepository(Generic[T]):
    """
    Common behaviour of every in-memory fake.

    Each operation goes through ``_begin`` which, in order:
    1. counts the call and captures its arguments (always, even if it later fails)
    2. suspends for ``delay`` seconds when delay > 0
    3. raises the configured error when ``should_throw_error`` is set

    Only then does the operation touch the backing store, so a faulted call never
    mutates state. Controls are plain attributes on the instance.

    Records go in and come out as deep copies, so editing a returned entity in place
    never reaches the store.
    """

    repository_name = "InMemoryRepository"

    def __init__(self):
        self.should_throw_error: bool = False
        self.error_to_throw: Optional[Exception] = None
        self.delay: float = 0.0
        self.call_counts: Counter = Counter()
        self.last_arguments: Dict[str, Dict[str, Any]] = {}
        self._store: Dict[str, T] = {}

    # =========================================================================
    # TEST CONTROLS
    # =========================================================================

    def reset(self) -> None:
        """Clear the store, counters, captured arguments and test controls."""
        self.should_throw_error = False
        self.error_to_throw = None
        self.delay = 0.0
        self.call_counts.clear()
        self.last_arguments.clear()
        self._store.clear()

    def call_count(self, operation: str) -> int:
        return self.call_counts[operation]

    def total_calls(self) -> int:
        return sum(self.call_counts.values())

    def seed(self, *entities: T) -> None:
        """Put entities in the store directly, without counting a call."""
        for entity in entities:
            self._put(entity.id, entity)

    @property
    def stored(self) -> List[T]:
        """Snapshot of the backing store in insertion order."""
        return [detach(entity) for entity in self._store.values()]

    # =========================================================================
    # STORE ACCESS
    # =========================================================================

    def _put(self, key: str, entity: T) -> T:
        self._store[key] = detach(entity)
        return entity

    def _get(self, key: str) -> Optional[T]:
        return detach(self._store.get(key))

    def _values(self) -> Iterator[T]:
        for entity in self._store.values():
            yield detach(entity)

    # =========================================================================
    # OPERATION PIPELINE
    # =========================================================================

    def _record(self, operation: str, arguments: Dict[str, Any]) -> None:
        self.call_counts[operation] += 1
        self.last_arguments[operation] = arguments

    async def _begin(self, operation: str, **arguments) -> None:
        self._record(operation, arguments)

        if self.delay > 0:
            await asyncio.sleep(self.delay)

        if self.should_throw_error:
            error = self.error_to_throw or InjectedFaultError(operation=operation)
            logger.debug(
                f"Injected fault in {self.repository_name}.{operation}",
                repository=self.repository_name,
                operation=operation,
                error=type(error).__name__
            )
            raise error
