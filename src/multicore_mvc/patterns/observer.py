"""Dispatch primitives: the notification envelope and the observer.

``Notification`` is a Pydantic model like every other event type in the
framework.  Observers are compared by the *identity* of their context,
never by value, so two distinct mediators with equal state never remove
each other's subscriptions.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from multicore_mvc.core.interfaces import INotification, NotifyMethod


class Notification(BaseModel):
    """Named event with an optional untyped body and a type discriminator.

    Senders build it once; subscribers treat it as read-only.  Field
    assignment stays possible for code that fills a notification in
    several steps before sending it.
    """

    name: str
    body: Any = None
    type: str | None = None

    def __init__(
        self,
        name: str,
        body: Any = None,
        type: str | None = None,
        **data: Any,
    ) -> None:
        super().__init__(name=name, body=body, type=type, **data)

    def __str__(self) -> str:
        return (
            f"Notification Name: {self.name}\n"
            f"Body:{self.body!r}\n"
            f"Type:{self.type}"
        )


class Observer:
    """A ``(notify_method, notify_context)`` pair.

    ``notify_context`` is only an identity token; it is never called.
    """

    __slots__ = ("notify_method", "notify_context")

    def __init__(self, notify_method: NotifyMethod, notify_context: object) -> None:
        self.notify_method = notify_method
        self.notify_context = notify_context

    def notify_observer(self, notification: INotification) -> None:
        self.notify_method(notification)

    def compare_notify_context(self, obj: object) -> bool:
        return obj is self.notify_context

    def __repr__(self) -> str:
        method = getattr(self.notify_method, "__qualname__", repr(self.notify_method))
        return f"Observer(method={method}, context={type(self.notify_context).__name__})"
