"""CLI command: cssvars inspect -- print the mapping extracted from a source file."""

from __future__ import annotations

import json
import sys
from dataclasses import asdict
from pathlib import Path

import click

from cssvars.cli.options import DEFAULT_CLASSIFIER, load_classifier, source_options
from cssvars.errors import CssVarsError
from cssvars.extraction import read_source, extract_mapping
from cssvars.model.target import ExtractionTarget
from cssvars.stylesheet import build_descriptors


@click.command()
@source_options
@click.option("--prefix", "-p", default="", help="Variable prefix, e.g. 'app'.")
@click.option(
    "--classifier", default=DEFAULT_CLASSIFIER, show_default=True,
    help="Syntax classifier as 'module:function'.",
)
@click.option(
    "--descriptors", is_flag=True, default=False,
    help="Print css name, value and syntax for every entry.",
)
def inspect(
    source: Path, constant_name: str, prefix: str, classifier: str, descriptors: bool
) -> None:
    """Print the key/value mapping extracted from SOURCE as JSON."""
    try:
        target = ExtractionTarget(source, constant_name)
        mapping = extract_mapping(
            read_source(target.file_path), target.constant_name, str(target.file_path)
        )
        if descriptors:
            data: object = [
                asdict(d) for d in build_descriptors(mapping, prefix, load_classifier(classifier))
            ]
        else:
            data = mapping
    except CssVarsError as exc:
        click.echo(f"Error ({exc.kind}): {exc}", err=True)
        sys.exit(1)

    click.echo(json.dumps(data, indent=2))
