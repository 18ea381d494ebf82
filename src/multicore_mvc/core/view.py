"""View: per-core observer table and mediator registry.

Owns notification fan-out.  ``notify_observers`` always dispatches over a
copy of the observer list taken under the lock, so callbacks may register
or remove observers (directly, or through commands they trigger) without
affecting the dispatch in progress.

Invariant: a notification name with no observers is never kept as a key
in the observer map.
"""

from __future__ import annotations

import logging
import threading

from multicore_mvc.observability.logger import core_scope

from .cores import Cores, resolve_cores
from .interfaces import IMediator, INotification, IObserver

logger = logging.getLogger(__name__)


class View:
    """Observer table and mediator registry for one core.

    Parameters
    ----------
    key:
        Multiton key of the owning core.
    cores:
        Registry context; ``default_cores`` when omitted.
    """

    def __init__(self, key: str, cores: Cores | None = None) -> None:
        self._cores = resolve_cores(cores)
        self._cores.views.ensure_vacant(key)
        self.multiton_key = key
        self._lock = threading.Lock()
        self._observer_map: dict[str, list[IObserver]] = {}
        self._mediator_map: dict[str, IMediator] = {}
        self._mediator_interests: dict[str, tuple[str, ...]] = {}
        self._registering: set[str] = set()

    @classmethod
    def get_instance(cls, key: str, cores: Cores | None = None) -> View:
        resolved = resolve_cores(cores)
        return resolved.views.get_or_create(
            key, lambda k: cls(k, resolved), cls.initialize_view
        )

    @staticmethod
    def remove_view(key: str, cores: Cores | None = None) -> None:
        resolve_cores(cores).views.remove(key)

    @property
    def cores(self) -> Cores:
        return self._cores

    def initialize_view(self) -> None:
        """Subclass hook run once, after the instance is registered."""

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def register_observer(self, notification_name: str, observer: IObserver) -> None:
        """Append *observer* to the list for *notification_name*."""
        with self._lock:
            self._observer_map.setdefault(notification_name, []).append(observer)

    def notify_observers(self, notification: INotification) -> None:
        """Call every observer of ``notification.name`` in registration order."""
        with self._lock:
            observers = self._observer_map.get(notification.name)
            if not observers:
                return
            snapshot = list(observers)

        with core_scope(self.multiton_key):
            for observer in snapshot:
                observer.notify_observer(notification)

    def remove_observer(self, notification_name: str, notify_context: object) -> None:
        """Remove the observer whose context is *notify_context*.

        Unknown names and contexts are ignored.
        """
        with self._lock:
            self._detach(notification_name, notify_context)

    def _detach(self, notification_name: str, notify_context: object) -> None:
        # Caller holds self._lock.
        observers = self._observer_map.get(notification_name)
        if observers is None:
            logger.debug(
                "No observers for %s (key=%s); nothing to remove",
                notification_name, self.multiton_key,
            )
            return

        for i, observer in enumerate(observers):
            if observer.compare_notify_context(notify_context):
                del observers[i]
                break

        if not observers:
            del self._observer_map[notification_name]

    def has_observers(self, notification_name: str) -> bool:
        with self._lock:
            return notification_name in self._observer_map

    def observer_count(self, notification_name: str) -> int:
        with self._lock:
            return len(self._observer_map.get(notification_name, ()))

    # ------------------------------------------------------------------
    # Mediators
    # ------------------------------------------------------------------

    def register_mediator(self, mediator: IMediator) -> None:
        """Register *mediator* unless one with the same name exists.

        The mediator becomes visible to ``has_mediator`` and
        ``remove_mediator`` together with its observers, in one step.
        """
        from multicore_mvc.patterns.observer import Observer

        name = mediator.mediator_name
        with self._lock:
            if name in self._mediator_map or name in self._registering:
                logger.debug(
                    "Mediator %s already registered (key=%s); ignoring",
                    name, self.multiton_key,
                )
                return
            self._registering.add(name)

        try:
            mediator.initialize_notifier(self.multiton_key, self._cores)
            interests = tuple(mediator.list_notification_interests())
        except BaseException:
            with self._lock:
                self._registering.discard(name)
            raise

        # One observer shared by every interest of this mediator.
        observer = Observer(mediator.handle_notification, mediator)
        with self._lock:
            self._registering.discard(name)
            self._mediator_map[name] = mediator
            self._mediator_interests[name] = interests
            for interest in interests:
                self._observer_map.setdefault(interest, []).append(observer)

        logger.debug(
            "Mediator registered: %s interests=%s (key=%s)",
            name, list(interests), self.multiton_key,
        )
        mediator.on_register()

    def retrieve_mediator(self, mediator_name: str) -> IMediator | None:
        with self._lock:
            return self._mediator_map.get(mediator_name)

    def has_mediator(self, mediator_name: str) -> bool:
        with self._lock:
            return mediator_name in self._mediator_map

    def remove_mediator(self, mediator_name: str) -> IMediator | None:
        """Remove and return the named mediator, or ``None`` if absent.

        Observers are detached and the map entry is gone before
        ``on_remove`` runs.
        """
        with self._lock:
            mediator = self._mediator_map.pop(mediator_name, None)
            if mediator is None:
                return None
            for interest in self._mediator_interests.pop(mediator_name, ()):
                self._detach(interest, mediator)

        logger.debug("Mediator removed: %s (key=%s)", mediator_name, self.multiton_key)
        mediator.on_remove()
        return mediator
