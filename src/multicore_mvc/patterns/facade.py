"""Facade: single entry point to one core.

The facade owns nothing itself; it resolves the Model, Controller and
View registered under its key in its :class:`~multicore_mvc.core.cores.Cores`
and forwards to them.  ``has_core`` / ``remove_core`` manage whole cores.

Usage::

    facade = Facade.get_instance("core-1")
    facade.register_command("LOAD", LoadCommand)
    facade.register_proxy(Proxy("user", data={}))
    facade.send_notification("LOAD", {"id": 42})
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from multicore_mvc.core.controller import Controller
from multicore_mvc.core.cores import Cores, resolve_cores
from multicore_mvc.core.errors import MultitonError
from multicore_mvc.core.interfaces import (
    CommandFactory,
    IMediator,
    INotification,
    IProxy,
)
from multicore_mvc.core.model import Model
from multicore_mvc.core.view import View

from .notifier import Notifier
from .observer import Notification

logger = logging.getLogger(__name__)


class Facade(Notifier):
    """Per-core aggregator over Model, Controller and View.

    Parameters
    ----------
    key:
        Multiton key of the core.
    cores:
        Registry context; ``default_cores`` when omitted.
    """

    def __init__(self, key: str, cores: Cores | None = None) -> None:
        resolved = resolve_cores(cores)
        resolved.facades.ensure_vacant(key)
        self.initialize_notifier(key, resolved)
        self._model: Model | None = None
        self._controller: Controller | None = None
        self._view: View | None = None

    # ------------------------------------------------------------------
    # Factory
    # ------------------------------------------------------------------

    @classmethod
    def get_instance(
        cls,
        key: str,
        factory: Callable[[str, Cores], Facade] | None = None,
        cores: Cores | None = None,
    ) -> Facade:
        """Return the facade for *key*, building it on first use.

        *factory* receives the key and the resolved :class:`Cores` and must
        build its facade in that context; by default it calls ``cls``.
        ``initialize_facade`` runs once the facade is registered, so hooks
        may already reach it through ``Notifier.facade``.
        """
        resolved = resolve_cores(cores)
        build = factory or cls

        def create(k: str) -> Facade:
            facade = build(k, resolved)
            if facade.cores is not resolved:
                raise MultitonError(
                    f"Facade factory for multiton key {k!r} built its facade "
                    "in a different Cores context"
                )
            return facade

        return resolved.facades.get_or_create(
            key, create, lambda facade: facade.initialize_facade()
        )

    @staticmethod
    def has_core(key: str, cores: Cores | None = None) -> bool:
        return resolve_cores(cores).facades.has(key)

    @staticmethod
    def remove_core(key: str, cores: Cores | None = None) -> None:
        """Forget every kernel object of *key*. No lifecycle hooks run."""
        resolved = resolve_cores(cores)
        if not resolved.facades.has(key):
            return
        Model.remove_model(key, resolved)
        View.remove_view(key, resolved)
        Controller.remove_controller(key, resolved)
        resolved.facades.remove(key)
        logger.info("Core removed: %s", key)

    # ------------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------------

    def initialize_facade(self) -> None:
        self.initialize_model()
        self.initialize_controller()
        self.initialize_view()

    def initialize_model(self) -> None:
        if self._model is None:
            self._model = Model.get_instance(self.multiton_key, self._cores)

    def initialize_controller(self) -> None:
        if self._controller is None:
            self._controller = Controller.get_instance(self.multiton_key, self._cores)

    def initialize_view(self) -> None:
        if self._view is None:
            self._view = View.get_instance(self.multiton_key, self._cores)

    # An init hook may reach the facade before every actor is resolved,
    # e.g. a proxy registered from initialize_model that sends a
    # notification.  The accessors resolve missing actors on demand
    # without re-running subclass hooks.

    @property
    def cores(self) -> Cores:
        return self._cores

    @property
    def model(self) -> Model:
        if self._model is None:
            Facade.initialize_model(self)
        return self._model

    @model.setter
    def model(self, model: Model) -> None:
        self._model = model

    @property
    def controller(self) -> Controller:
        if self._controller is None:
            Facade.initialize_controller(self)
        return self._controller

    @controller.setter
    def controller(self, controller: Controller) -> None:
        self._controller = controller

    @property
    def view(self) -> View:
        if self._view is None:
            Facade.initialize_view(self)
        return self._view

    @view.setter
    def view(self, view: View) -> None:
        self._view = view

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def register_command(self, notification_name: str, factory: CommandFactory) -> None:
        self.controller.register_command(notification_name, factory)

    def remove_command(self, notification_name: str) -> None:
        self.controller.remove_command(notification_name)

    def has_command(self, notification_name: str) -> bool:
        return self.controller.has_command(notification_name)

    # ------------------------------------------------------------------
    # Proxies
    # ------------------------------------------------------------------

    def register_proxy(self, proxy: IProxy) -> None:
        self.model.register_proxy(proxy)

    def retrieve_proxy(self, proxy_name: str) -> IProxy | None:
        return self.model.retrieve_proxy(proxy_name)

    def remove_proxy(self, proxy_name: str) -> IProxy | None:
        return self.model.remove_proxy(proxy_name)

    def has_proxy(self, proxy_name: str) -> bool:
        return self.model.has_proxy(proxy_name)

    # ------------------------------------------------------------------
    # Mediators
    # ------------------------------------------------------------------

    def register_mediator(self, mediator: IMediator) -> None:
        self.view.register_mediator(mediator)

    def retrieve_mediator(self, mediator_name: str) -> IMediator | None:
        return self.view.retrieve_mediator(mediator_name)

    def remove_mediator(self, mediator_name: str) -> IMediator | None:
        return self.view.remove_mediator(mediator_name)

    def has_mediator(self, mediator_name: str) -> bool:
        return self.view.has_mediator(mediator_name)

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    def send_notification(
        self,
        notification_name: str,
        body: Any = None,
        type: str | None = None,
    ) -> None:
        self.notify_observers(Notification(notification_name, body, type))

    def notify_observers(self, notification: INotification) -> None:
        self.view.notify_observers(notification)
