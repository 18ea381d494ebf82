"""Logging helpers shared by the kernel and applications built on it."""

from multicore_mvc.observability.logger import (
    core_scope,
    get_core_key,
    get_logger,
    setup_logging,
)

__all__ = ["core_scope", "get_core_key", "get_logger", "setup_logging"]
