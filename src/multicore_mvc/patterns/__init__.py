"""Base classes users extend: commands, mediators, proxies, the facade."""

from multicore_mvc.patterns.command import MacroCommand, SimpleCommand
from multicore_mvc.patterns.facade import Facade
from multicore_mvc.patterns.mediator import Mediator
from multicore_mvc.patterns.notifier import Notifier
from multicore_mvc.patterns.observer import Notification, Observer
from multicore_mvc.patterns.proxy import Proxy

__all__ = [
    "Facade",
    "MacroCommand",
    "Mediator",
    "Notification",
    "Notifier",
    "Observer",
    "Proxy",
    "SimpleCommand",
]
