"""Proxy base class."""

from __future__ import annotations

from typing import Any

from .notifier import Notifier


class Proxy(Notifier):
    """Named holder for a piece of application data."""

    NAME = "Proxy"

    def __init__(self, proxy_name: str | None = None, data: Any = None) -> None:
        self._proxy_name = proxy_name if proxy_name is not None else self.NAME
        self._data = data

    @property
    def proxy_name(self) -> str:
        return self._proxy_name

    @property
    def data(self) -> Any:
        return self._data

    @data.setter
    def data(self, value: Any) -> None:
        self._data = value

    def on_register(self) -> None:
        pass

    def on_remove(self) -> None:
        pass
