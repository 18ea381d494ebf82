"""Mediator base class."""

from __future__ import annotations

from typing import Any

from multicore_mvc.core.interfaces import INotification

from .notifier import Notifier


class Mediator(Notifier):
    """Named component bridging a view component and the core.

    Override :meth:`list_notification_interests` and
    :meth:`handle_notification` to react to notifications.
    """

    NAME = "Mediator"

    def __init__(self, mediator_name: str | None = None, view_component: Any = None) -> None:
        self._mediator_name = mediator_name if mediator_name is not None else self.NAME
        self._view_component = view_component

    @property
    def mediator_name(self) -> str:
        return self._mediator_name

    @property
    def view_component(self) -> Any:
        return self._view_component

    @view_component.setter
    def view_component(self, value: Any) -> None:
        self._view_component = value

    def list_notification_interests(self) -> list[str]:
        return []

    def handle_notification(self, notification: INotification) -> None:
        pass

    def on_register(self) -> None:
        pass

    def on_remove(self) -> None:
        pass
