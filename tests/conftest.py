"""Shared fixtures for the multicore-mvc test suite.

Every fixture builds on a private ``Cores`` so tests never touch the
process-wide ``default_cores``.
"""

from __future__ import annotations

import pytest

from multicore_mvc.core.controller import Controller
from multicore_mvc.core.cores import Cores
from multicore_mvc.core.model import Model
from multicore_mvc.core.view import View
from multicore_mvc.patterns.facade import Facade

CORE_KEY = "test-core"


@pytest.fixture
def cores() -> Cores:
    """Return an empty, isolated registry context."""
    return Cores()


@pytest.fixture
def view(cores) -> View:
    return View.get_instance(CORE_KEY, cores)


@pytest.fixture
def controller(cores) -> Controller:
    return Controller.get_instance(CORE_KEY, cores)


@pytest.fixture
def model(cores) -> Model:
    return Model.get_instance(CORE_KEY, cores)


@pytest.fixture
def facade(cores) -> Facade:
    return Facade.get_instance(CORE_KEY, cores=cores)
