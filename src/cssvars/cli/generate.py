"""CLI command: cssvars generate -- run one regeneration cycle."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cssvars.cli.options import build_config, output_options, source_options
from cssvars.engine import RegenerationController


@click.command()
@source_options
@output_options
def generate(
    source: Path,
    constant_name: str,
    output: Path,
    prefix: str,
    classifier: str,
    prettier_config: Path | None,
    eslint_config: Path | None,
    no_format: bool,
) -> None:
    """Extract a constant from SOURCE and write its stylesheet.

    Exits with code 0 on success, or code 1 if the constant cannot be
    found, evaluated, or written.
    """
    config = build_config(
        source, constant_name, output, prefix, classifier,
        prettier_config, eslint_config, no_format,
    )
    outcome = RegenerationController(config).start()

    if outcome.failed:
        click.echo(f"Error ({outcome.error_kind}): {outcome.error}", err=True)
        sys.exit(1)
    click.echo(f"Wrote {outcome.variable_count} variable(s) to {outcome.output_path}")
