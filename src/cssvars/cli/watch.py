"""CLI command: cssvars watch -- regenerate whenever the source changes."""

from __future__ import annotations

import time
from pathlib import Path

import click

from cssvars.cli.options import build_config, output_options, source_options
from cssvars.engine import RegenerationController
from cssvars.events import RegenerationFailed, RegenerationSucceeded
from cssvars.model.config import DEFAULT_DEBOUNCE_SECONDS
from cssvars.watch import FileWatcher


@click.command()
@source_options
@output_options
@click.option(
    "--debounce", type=float, default=DEFAULT_DEBOUNCE_SECONDS, show_default=True,
    help="Seconds to wait for further changes before regenerating.",
)
@click.option(
    "--interval", type=float, default=0.25, show_default=True,
    help="Polling interval in seconds.",
)
def watch(
    source: Path,
    constant_name: str,
    output: Path,
    prefix: str,
    classifier: str,
    prettier_config: Path | None,
    eslint_config: Path | None,
    no_format: bool,
    debounce: float,
    interval: float,
) -> None:
    """Generate the stylesheet, then regenerate on every change to SOURCE.

    Runs until interrupted with Ctrl-C.
    """
    config = build_config(
        source, constant_name, output, prefix, classifier,
        prettier_config, eslint_config, no_format, debounce=debounce,
    )
    controller = RegenerationController(config)
    controller.bus.subscribe(
        RegenerationSucceeded,
        lambda e: click.echo(f"Updated {e.output_path} ({e.variable_count} variables)"),
    )
    controller.bus.subscribe(
        RegenerationFailed,
        lambda e: click.echo(f"Failed ({e.kind}): {e.error}", err=True),
    )

    controller.start()
    watcher = FileWatcher(config.source_path, controller.handle_event, interval=interval)
    watcher.start()
    click.echo(f"Watching {config.source_path} (Ctrl-C to stop)")
    try:
        while True:
            time.sleep(0.5)
    except KeyboardInterrupt:
        click.echo("Stopped.")
    finally:
        watcher.stop()
        controller.close()
