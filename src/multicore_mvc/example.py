"""Sample application wired on top of the framework.

A startup macro prepares the model and the view, then announces that
the core is ready; a mediator records the announcement.  Every step
writes to the ``journal`` proxy so callers can see what ran and in which
order.
"""

from __future__ import annotations

from typing import Any

from .core.cores import Cores
from .core.interfaces import INotification
from .observability.logger import get_logger
from .patterns.command import MacroCommand, SimpleCommand
from .patterns.facade import Facade
from .patterns.mediator import Mediator
from .patterns.proxy import Proxy

logger = get_logger(__name__)

STARTUP = "startup"
STATUS = "status"


class JournalProxy(Proxy):
    NAME = "journal"

    def __init__(self) -> None:
        super().__init__(self.NAME, [])

    def record(self, line: str) -> None:
        self.data.append(line)
        logger.info("journal", line=line)


def _journal(notifier: Any) -> JournalProxy:
    return notifier.facade.retrieve_proxy(JournalProxy.NAME)


class PrepareModelCommand(SimpleCommand):
    def execute(self, notification: INotification) -> None:
        self.facade.register_proxy(Proxy("session", notification.body))
        _journal(self).record(f"model prepared (session={notification.body})")


class PrepareViewCommand(SimpleCommand):
    def execute(self, notification: INotification) -> None:
        self.facade.register_mediator(StatusMediator())
        _journal(self).record("view prepared")


class AnnounceReadyCommand(SimpleCommand):
    def execute(self, notification: INotification) -> None:
        self.send_notification(STATUS, "ready", "startup")


class StartupCommand(MacroCommand):
    def initialize_macro_command(self) -> None:
        self.add_sub_command(PrepareModelCommand)
        self.add_sub_command(PrepareViewCommand)
        self.add_sub_command(AnnounceReadyCommand)


class StatusMediator(Mediator):
    NAME = "status"

    def list_notification_interests(self) -> list[str]:
        return [STATUS]

    def handle_notification(self, notification: INotification) -> None:
        _journal(self).record(f"status: {notification.body} ({notification.type})")


def build_example_core(
    key: str, cores: Cores | None = None
) -> tuple[Facade, JournalProxy]:
    """Create (or reuse) core *key* with the startup command registered."""
    facade = Facade.get_instance(key, cores=cores)
    journal = JournalProxy()
    facade.register_proxy(journal)
    facade.register_command(STARTUP, StartupCommand)
    return facade, journal
