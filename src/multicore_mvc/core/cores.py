"""Application-owned set of multiton registries.

A :class:`Cores` object replaces process-wide static instance maps: every
Model, View, Controller and Facade lives in exactly one ``Cores`` and
looks up its siblings there.  ``default_cores`` serves callers that only
have a string key.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .registry import InstanceRegistry

if TYPE_CHECKING:
    from .controller import Controller
    from .model import Model
    from .view import View


class Cores:
    """Registries for all cores of one application."""

    def __init__(self) -> None:
        self.models: InstanceRegistry[Model] = InstanceRegistry("Model")
        self.views: InstanceRegistry[View] = InstanceRegistry("View")
        self.controllers: InstanceRegistry[Controller] = InstanceRegistry(
            "Controller"
        )
        # Typed loosely: the Facade lives in the patterns layer.
        self.facades: InstanceRegistry[Any] = InstanceRegistry("Facade")

    def registries(self) -> list[InstanceRegistry[Any]]:
        return [self.models, self.views, self.controllers, self.facades]

    def describe(self, key: str) -> dict[str, bool]:
        """Return ``{kind: present}`` for *key* across all registries."""
        return {r.kind: r.has(key) for r in self.registries()}


default_cores = Cores()


def resolve_cores(cores: Cores | None) -> Cores:
    return cores if cores is not None else default_cores
