"""Controller: per-core command registry.

Maps notification names to command factories.  The first registration
for a name subscribes the controller's own ``execute_command`` on the
View; later registrations only swap the factory.
"""

from __future__ import annotations

import logging
import threading

from .cores import Cores, resolve_cores
from .interfaces import CommandFactory, INotification
from .view import View

logger = logging.getLogger(__name__)


class Controller:
    """Command registry for one core.

    Parameters
    ----------
    key:
        Multiton key of the owning core.
    cores:
        Registry context; ``default_cores`` when omitted.
    """

    def __init__(self, key: str, cores: Cores | None = None) -> None:
        self._cores = resolve_cores(cores)
        self._cores.controllers.ensure_vacant(key)
        self.multiton_key = key
        self._lock = threading.Lock()
        self._command_map: dict[str, CommandFactory] = {}
        self.view: View | None = None

    @classmethod
    def get_instance(cls, key: str, cores: Cores | None = None) -> Controller:
        resolved = resolve_cores(cores)
        return resolved.controllers.get_or_create(
            key, lambda k: cls(k, resolved), cls.initialize_controller
        )

    @staticmethod
    def remove_controller(key: str, cores: Cores | None = None) -> None:
        resolve_cores(cores).controllers.remove(key)

    @property
    def cores(self) -> Cores:
        return self._cores

    def initialize_controller(self) -> None:
        """Resolve the View of this core, creating it if needed.

        Subclasses overriding this must still set ``self.view``.
        """
        self.view = View.get_instance(self.multiton_key, self._cores)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def execute_command(self, notification: INotification) -> None:
        """Build a fresh command for ``notification.name`` and run it."""
        with self._lock:
            factory = self._command_map.get(notification.name)
        if factory is None:
            return

        command = factory()
        command.initialize_notifier(self.multiton_key, self._cores)
        command.execute(notification)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_command(self, notification_name: str, factory: CommandFactory) -> None:
        """Map *notification_name* to *factory*, replacing any previous one."""
        from multicore_mvc.patterns.observer import Observer

        with self._lock:
            if notification_name not in self._command_map:
                self.view.register_observer(
                    notification_name, Observer(self.execute_command, self)
                )
            self._command_map[notification_name] = factory
        logger.debug("Command registered: %s (key=%s)", notification_name, self.multiton_key)

    def has_command(self, notification_name: str) -> bool:
        with self._lock:
            return notification_name in self._command_map

    def remove_command(self, notification_name: str) -> None:
        with self._lock:
            if notification_name not in self._command_map:
                return
            self.view.remove_observer(notification_name, self)
            del self._command_map[notification_name]
        logger.debug("Command removed: %s (key=%s)", notification_name, self.multiton_key)
