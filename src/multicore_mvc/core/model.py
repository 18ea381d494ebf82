"""Model: per-core proxy registry.

A keyed store of :class:`~multicore_mvc.core.interfaces.IProxy` objects.
Registration overwrites silently; removal fires ``on_remove`` only after
the proxy has left the map.
"""

from __future__ import annotations

import logging
import threading

from .cores import Cores, resolve_cores
from .interfaces import IProxy

logger = logging.getLogger(__name__)


class Model:
    """Proxy registry for one core.

    Parameters
    ----------
    key:
        Multiton key of the owning core.
    cores:
        Registry context; ``default_cores`` when omitted.
    """

    def __init__(self, key: str, cores: Cores | None = None) -> None:
        self._cores = resolve_cores(cores)
        self._cores.models.ensure_vacant(key)
        self.multiton_key = key
        self._lock = threading.Lock()
        self._proxy_map: dict[str, IProxy] = {}

    @classmethod
    def get_instance(cls, key: str, cores: Cores | None = None) -> Model:
        resolved = resolve_cores(cores)
        return resolved.models.get_or_create(
            key, lambda k: cls(k, resolved), cls.initialize_model
        )

    @staticmethod
    def remove_model(key: str, cores: Cores | None = None) -> None:
        resolve_cores(cores).models.remove(key)

    @property
    def cores(self) -> Cores:
        return self._cores

    def initialize_model(self) -> None:
        """Subclass hook run once, after the instance is registered."""

    # ------------------------------------------------------------------
    # Proxies
    # ------------------------------------------------------------------

    def register_proxy(self, proxy: IProxy) -> None:
        proxy.initialize_notifier(self.multiton_key, self._cores)
        with self._lock:
            self._proxy_map[proxy.proxy_name] = proxy
        logger.debug("Proxy registered: %s (key=%s)", proxy.proxy_name, self.multiton_key)
        proxy.on_register()

    def retrieve_proxy(self, proxy_name: str) -> IProxy | None:
        with self._lock:
            return self._proxy_map.get(proxy_name)

    def has_proxy(self, proxy_name: str) -> bool:
        with self._lock:
            return proxy_name in self._proxy_map

    def remove_proxy(self, proxy_name: str) -> IProxy | None:
        """Remove and return the named proxy, or ``None`` if absent."""
        with self._lock:
            proxy = self._proxy_map.pop(proxy_name, None)
        if proxy is None:
            return None
        logger.debug("Proxy removed: %s (key=%s)", proxy_name, self.multiton_key)
        proxy.on_remove()
        return proxy
