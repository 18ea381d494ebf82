"""Command base classes.

``SimpleCommand`` is the single-step handler.  ``MacroCommand`` runs a
FIFO queue of sub-command factories, one after another, on the caller's
thread and with the same notification.
"""

from __future__ import annotations

import logging
from collections import deque

from multicore_mvc.core.interfaces import CommandFactory, INotification

from .notifier import Notifier

logger = logging.getLogger(__name__)


class SimpleCommand(Notifier):
    """Override :meth:`execute` with the command's business logic."""

    def execute(self, notification: INotification) -> None:
        pass


class MacroCommand(Notifier):
    """Composite command executing sub-commands in the order added.

    Subclasses call :meth:`add_sub_command` from
    :meth:`initialize_macro_command`.  The queue is consumed by
    :meth:`execute`, so each instance runs its sub-commands once.
    """

    def __init__(self) -> None:
        self._sub_commands: deque[CommandFactory] = deque()
        self.initialize_macro_command()

    def initialize_macro_command(self) -> None:
        """Hook for registering sub-commands."""

    def add_sub_command(self, factory: CommandFactory) -> None:
        self._sub_commands.append(factory)

    def execute(self, notification: INotification) -> None:
        while self._sub_commands:
            factory = self._sub_commands.popleft()
            command = factory()
            command.initialize_notifier(self.multiton_key, self._cores)
            logger.debug(
                "Macro sub-command %s for %s (key=%s)",
                type(command).__name__, notification.name, self.multiton_key,
            )
            command.execute(notification)
