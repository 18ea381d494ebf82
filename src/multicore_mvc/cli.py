"""CLI entry point for the MVC framework."""

from __future__ import annotations

import click

from .core.config import load_settings


@click.group()
def main() -> None:
    """Multi-instance MVC notification framework."""


@main.command()
@click.option("--config", default=None, help="TOML config file path")
@click.option("--key", default=None, help="Multiton key of the demo core")
@click.option("--log-level", default=None, help="Log level override")
@click.option("--remove", is_flag=True, help="Remove the core after the run")
def demo(config: str | None, key: str | None, log_level: str | None, remove: bool) -> None:
    """Build a sample core, send one notification and report what ran."""
    from .core.cores import default_cores
    from .example import STARTUP, build_example_core
    from .observability.logger import setup_logging
    from .patterns.facade import Facade

    overrides: dict = {}
    if key:
        overrides["core_key"] = key
    if log_level:
        overrides["observability"] = {"log_level": log_level}
    settings = load_settings(config, overrides)
    setup_logging(
        level=settings.observability.log_level,
        format=settings.observability.log_format,
    )

    core_key = settings.core_key
    facade, journal = build_example_core(core_key)
    facade.send_notification(STARTUP, {"requested_by": "cli"})

    click.echo(f"core: {core_key}")
    for line in journal.data:
        click.echo(f"  {line}")

    if remove:
        Facade.remove_core(core_key)
    for kind, present in default_cores.describe(core_key).items():
        click.echo(f"{kind:<11} {'live' if present else 'removed'}")
