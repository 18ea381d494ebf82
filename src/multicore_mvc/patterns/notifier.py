"""Base class for everything that sends notifications.

A notifier is unusable until the kernel (or the facade) binds it to a
core with :meth:`Notifier.initialize_notifier`.  Commands, mediators and
proxies are usually constructed before they know their core, which is
why binding is a separate step.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from multicore_mvc.core.cores import Cores, resolve_cores
from multicore_mvc.core.errors import NotifierNotInitializedError

if TYPE_CHECKING:
    from .facade import Facade


class Notifier:
    """Holds a multiton key and reaches the matching Facade."""

    multiton_key: str | None = None
    _cores: Cores | None = None

    def initialize_notifier(self, key: str, cores: Cores | None = None) -> None:
        self.multiton_key = key
        self._cores = resolve_cores(cores)

    @property
    def facade(self) -> Facade:
        """The Facade of the bound core.

        Raises
        ------
        NotifierNotInitializedError
            If :meth:`initialize_notifier` has not been called.
        """
        if self.multiton_key is None:
            raise NotifierNotInitializedError(
                f"multiton key for {type(self).__name__} not yet initialized"
            )
        from .facade import Facade

        return Facade.get_instance(self.multiton_key, cores=self._cores)

    def send_notification(
        self,
        notification_name: str,
        body: Any = None,
        type: str | None = None,
    ) -> None:
        self.facade.send_notification(notification_name, body, type)
