"""Custom exception hierarchy for the MVC kernel."""


class KernelError(Exception):
    """Base exception for all kernel errors."""


# --- Configuration ---
class ConfigError(KernelError):
    """Invalid or unreadable configuration."""


# --- Multiton ---
class MultitonError(KernelError):
    """Keyed-instance lifecycle violation."""


class DuplicateInstanceError(MultitonError):
    """A registry-managed instance was constructed twice for one key."""

    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(
            f"{kind} instance for multiton key {key!r} already constructed"
        )


# --- Notifier ---
class NotifierNotInitializedError(KernelError):
    """A notifier was used before being bound to a multiton key."""
