"""Tests for SimpleCommand and MacroCommand."""

from __future__ import annotations

import pytest

from multicore_mvc.patterns.command import MacroCommand, SimpleCommand
from multicore_mvc.patterns.observer import Notification


def _step(label: str, log: list):
    class Step(SimpleCommand):
        def execute(self, notification):
            log.append((label, self.multiton_key, notification.body))

    Step.__name__ = f"Step_{label}"
    return Step


class TestSimpleCommand:
    def test_execute_is_noop(self):
        SimpleCommand().execute(Notification("E"))


class TestMacroCommand:
    def test_sub_commands_run_fifo(self, cores):
        log = []

        class Macro(MacroCommand):
            def initialize_macro_command(self):
                self.add_sub_command(_step("a", log))
                self.add_sub_command(_step("b", log))
                self.add_sub_command(_step("c", log))

        macro = Macro()
        macro.initialize_notifier("core-1", cores)
        macro.execute(Notification("GO", body="payload"))

        assert log == [
            ("a", "core-1", "payload"),
            ("b", "core-1", "payload"),
            ("c", "core-1", "payload"),
        ]

    def test_sub_commands_bound_to_macro_cores(self, cores):
        seen = []

        class Probe(SimpleCommand):
            def execute(self, notification):
                seen.append(self._cores)

        class Macro(MacroCommand):
            def initialize_macro_command(self):
                self.add_sub_command(Probe)

        macro = Macro()
        macro.initialize_notifier("k", cores)
        macro.execute(Notification("GO"))

        assert seen == [cores]

    def test_empty_macro_is_noop(self, cores):
        macro = MacroCommand()
        macro.initialize_notifier("k", cores)
        macro.execute(Notification("GO"))

    def test_sub_commands_are_sequential(self, cores):
        log = []

        class Slow(SimpleCommand):
            def execute(self, notification):
                log.append("slow-start")
                log.append("slow-end")

        class Fast(SimpleCommand):
            def execute(self, notification):
                log.append("fast")

        class Macro(MacroCommand):
            def initialize_macro_command(self):
                self.add_sub_command(Slow)
                self.add_sub_command(Fast)

        macro = Macro()
        macro.initialize_notifier("k", cores)
        macro.execute(Notification("GO"))

        assert log == ["slow-start", "slow-end", "fast"]

    def test_queue_consumed_by_execute(self, cores):
        log = []

        class Macro(MacroCommand):
            def initialize_macro_command(self):
                self.add_sub_command(_step("only", log))

        macro = Macro()
        macro.initialize_notifier("k", cores)
        macro.execute(Notification("GO"))
        macro.execute(Notification("GO"))

        assert len(log) == 1

    def test_failing_sub_command_stops_macro(self, cores):
        log = []

        class Failing(SimpleCommand):
            def execute(self, notification):
                raise RuntimeError("step failed")

        class Macro(MacroCommand):
            def initialize_macro_command(self):
                self.add_sub_command(_step("before", log))
                self.add_sub_command(Failing)
                self.add_sub_command(_step("after", log))

        macro = Macro()
        macro.initialize_notifier("k", cores)
        with pytest.raises(RuntimeError, match="step failed"):
            macro.execute(Notification("GO"))

        assert [entry[0] for entry in log] == ["before"]

    def test_macro_registered_on_facade(self, facade):
        log = []

        class Macro(MacroCommand):
            def initialize_macro_command(self):
                self.add_sub_command(_step("x", log))
                self.add_sub_command(_step("y", log))

        facade.register_command("GO", Macro)
        facade.send_notification("GO", 1)
        facade.send_notification("GO", 2)

        assert [(label, body) for label, _, body in log] == [
            ("x", 1), ("y", 1), ("x", 2), ("y", 2),
        ]
