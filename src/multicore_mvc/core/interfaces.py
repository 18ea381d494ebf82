"""Protocol interfaces for the MVC kernel.

The kernel never depends on concrete command, mediator or proxy classes;
it only calls the capabilities declared here.  The base classes in
``multicore_mvc.patterns`` satisfy these protocols, but any object with
the same methods can be registered.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .cores import Cores


# ---------------------------------------------------------------------------
# Notifications
# ---------------------------------------------------------------------------

@runtime_checkable
class INotification(Protocol):
    """Named event envelope with optional body and type."""

    @property
    def name(self) -> str: ...

    @property
    def body(self) -> Any: ...

    @property
    def type(self) -> str | None: ...


@runtime_checkable
class IObserver(Protocol):
    """Callback plus an identity token used for removal."""

    def notify_observer(self, notification: INotification) -> None: ...

    def compare_notify_context(self, obj: object) -> bool: ...


NotifyMethod = Callable[[INotification], None]


# ---------------------------------------------------------------------------
# Participants
# ---------------------------------------------------------------------------

@runtime_checkable
class INotifier(Protocol):
    """Anything the kernel binds to a core before use."""

    def initialize_notifier(self, key: str, cores: Cores | None = None) -> None: ...


@runtime_checkable
class ICommand(INotifier, Protocol):
    """Handler instantiated fresh for every matching notification."""

    def execute(self, notification: INotification) -> None: ...


CommandFactory = Callable[[], ICommand]


@runtime_checkable
class IMediator(INotifier, Protocol):
    """Named component that reacts to a fixed set of notifications."""

    @property
    def mediator_name(self) -> str: ...

    def list_notification_interests(self) -> list[str]: ...

    def handle_notification(self, notification: INotification) -> None: ...

    def on_register(self) -> None: ...

    def on_remove(self) -> None: ...


@runtime_checkable
class IProxy(INotifier, Protocol):
    """Named data holder with registration lifecycle hooks."""

    @property
    def proxy_name(self) -> str: ...

    def on_register(self) -> None: ...

    def on_remove(self) -> None: ...
