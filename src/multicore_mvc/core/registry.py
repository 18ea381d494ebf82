"""Keyed singleton ("multiton") registry.

One ``InstanceRegistry`` exists per managed type (Model, View,
Controller, Facade) inside a :class:`~multicore_mvc.core.cores.Cores`
context.  The registry is the only place where instances are stored;
kernel constructors consult it to refuse duplicate construction.

Creation happens in two steps.  The factory builds the object, the
registry stores it, and only then does the optional ``initialize``
callback run.  Initialization code on the building thread may therefore
look the key up again and receive the stored instance.  Other threads
asking for the same key wait until initialization has finished; keys
that are not being built are never blocked.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from .errors import DuplicateInstanceError, MultitonError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class _Construction:
    """In-flight creation of one key."""

    owner: int
    done: threading.Event = field(default_factory=threading.Event)


class InstanceRegistry(Generic[T]):
    """Thread-safe ``key -> instance`` store with create-if-absent.

    Parameters
    ----------
    kind:
        Human-readable name of the managed type, used in errors and logs.
    """

    def __init__(self, kind: str) -> None:
        self._kind = kind
        # Guards the two maps only; never held while user code runs.
        self._lock = threading.Lock()
        self._instances: dict[str, T] = {}
        self._pending: dict[str, _Construction] = {}

    @property
    def kind(self) -> str:
        return self._kind

    def get_or_create(
        self,
        key: str,
        factory: Callable[[str], T],
        initialize: Callable[[T], None] | None = None,
    ) -> T:
        """Return the instance for *key*, building it with *factory* once.

        Concurrent callers for the same key all observe the instance
        produced by the single winning factory call, after *initialize*
        has run on it.  If the factory or *initialize* raises, nothing is
        stored and the next caller builds afresh.
        """
        me = threading.get_ident()
        while True:
            with self._lock:
                instance = self._instances.get(key)
                pending = self._pending.get(key)
                if pending is None:
                    if instance is not None:
                        return instance
                    pending = _Construction(owner=me)
                    self._pending[key] = pending
                    break
                if pending.owner == me:
                    if instance is not None:
                        return instance
                    raise MultitonError(
                        f"{self._kind} for multiton key {key!r} requested while "
                        "it is still being constructed"
                    )
            pending.done.wait()

        instance = None
        try:
            instance = factory(key)
            with self._lock:
                if key in self._instances:
                    raise DuplicateInstanceError(self._kind, key)
                self._instances[key] = instance
            if initialize is not None:
                initialize(instance)
        except BaseException:
            with self._lock:
                if instance is not None and self._instances.get(key) is instance:
                    del self._instances[key]
            raise
        finally:
            with self._lock:
                del self._pending[key]
            pending.done.set()

        logger.debug("%s created for key=%s", self._kind, key)
        return instance

    def get(self, key: str) -> T | None:
        with self._lock:
            return self._instances.get(key)

    def has(self, key: str) -> bool:
        with self._lock:
            return key in self._instances

    def remove(self, key: str) -> T | None:
        """Drop the instance for *key* without calling any hook on it."""
        with self._lock:
            instance = self._instances.pop(key, None)
        if instance is not None:
            logger.debug("%s removed for key=%s", self._kind, key)
        return instance

    def ensure_vacant(self, key: str) -> None:
        """Raise :class:`DuplicateInstanceError` if *key* is already live."""
        if self.has(key):
            raise DuplicateInstanceError(self._kind, key)

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._instances)

    def __len__(self) -> int:
        with self._lock:
            return len(self._instances)
