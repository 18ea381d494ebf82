"""Kernel: multiton registries, observer table, command and proxy maps."""

from multicore_mvc.core.controller import Controller
from multicore_mvc.core.cores import Cores, default_cores
from multicore_mvc.core.model import Model
from multicore_mvc.core.registry import InstanceRegistry
from multicore_mvc.core.view import View

__all__ = [
    "Controller",
    "Cores",
    "InstanceRegistry",
    "Model",
    "View",
    "default_cores",
]
