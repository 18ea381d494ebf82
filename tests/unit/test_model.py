"""Tests for the Model proxy registry."""

from __future__ import annotations

import pytest

from multicore_mvc.core.errors import DuplicateInstanceError
from multicore_mvc.core.model import Model
from multicore_mvc.patterns.proxy import Proxy


class HookProxy(Proxy):
    def __init__(self, name, data=None, model=None):
        super().__init__(name, data)
        self.model = model
        self.events: list[tuple[str, bool]] = []

    def on_register(self):
        self.events.append(("register", self.model.has_proxy(self.proxy_name)))

    def on_remove(self):
        self.events.append(("remove", self.model.has_proxy(self.proxy_name)))


class TestRegisterProxy:
    def test_register_and_retrieve(self, model):
        proxy = Proxy("user", {"id": 7})
        model.register_proxy(proxy)

        assert model.has_proxy("user")
        assert model.retrieve_proxy("user") is proxy
        assert model.retrieve_proxy("user").data == {"id": 7}

    def test_register_binds_to_core(self, cores, model):
        proxy = Proxy("user")
        model.register_proxy(proxy)
        assert proxy.multiton_key == model.multiton_key
        assert proxy._cores is cores

    def test_on_register_sees_itself_registered(self, model):
        proxy = HookProxy("p", model=model)
        model.register_proxy(proxy)
        assert proxy.events == [("register", True)]

    def test_same_name_overwrites(self, model):
        first = Proxy("p", 1)
        second = Proxy("p", 2)
        model.register_proxy(first)
        model.register_proxy(second)
        assert model.retrieve_proxy("p") is second

    def test_missing_lookup(self, model):
        assert model.retrieve_proxy("nope") is None
        assert model.has_proxy("nope") is False


class TestRemoveProxy:
    def test_remove_returns_proxy(self, model):
        proxy = Proxy("p")
        model.register_proxy(proxy)
        assert model.remove_proxy("p") is proxy
        assert not model.has_proxy("p")

    def test_on_remove_sees_itself_absent(self, model):
        proxy = HookProxy("p", model=model)
        model.register_proxy(proxy)
        model.remove_proxy("p")
        assert proxy.events == [("register", True), ("remove", False)]

    def test_remove_unknown_returns_none(self, model):
        assert model.remove_proxy("missing") is None


class TestModelMultiton:
    def test_direct_construction_for_live_key_raises(self, cores):
        Model.get_instance("k", cores)
        with pytest.raises(DuplicateInstanceError, match="Model"):
            Model("k", cores)

    def test_initialize_model_hook_runs_once(self, cores):
        class Seeded(Model):
            def initialize_model(self):
                self.register_proxy(Proxy("seed", "value"))

        model = Seeded.get_instance("seeded", cores)
        assert Seeded.get_instance("seeded", cores) is model
        assert model.retrieve_proxy("seed").data == "value"
