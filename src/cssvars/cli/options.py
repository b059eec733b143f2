"""Options shared by every CLI command and the config they build."""

from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Callable

import click

from cssvars.classifiers import guess_syntax
from cssvars.errors import ConfigError
from cssvars.model.config import DEFAULT_DEBOUNCE_SECONDS, Classifier, GeneratorConfig

DEFAULT_CLASSIFIER = "cssvars.classifiers:guess_syntax"


def load_classifier(spec: str) -> Classifier:
    """Import a classifier given as ``package.module:function``."""
    if spec == DEFAULT_CLASSIFIER:
        return guess_syntax
    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigError(f"Classifier must look like 'module:function', got {spec!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigError(f"Cannot import classifier module {module_name!r}: {exc}") from exc
    classifier = getattr(module, attr, None)
    if not callable(classifier):
        raise ConfigError(f"{spec!r} is not a callable classifier")
    return classifier


def source_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Source file argument and ``--name``."""
    func = click.option(
        "--name", "-n", "constant_name", required=True,
        help="Name of the constant holding the object literal.",
    )(func)
    func = click.argument("source", type=click.Path(dir_okay=False, path_type=Path))(func)
    return func


def output_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Output, prefix, classifier and formatter options."""
    for decorator in reversed(
        [
            click.option(
                "--output", "-o", "output", required=True,
                type=click.Path(dir_okay=False, path_type=Path),
                help="Stylesheet to write.",
            ),
            click.option("--prefix", "-p", default="", help="Variable prefix, e.g. 'app'."),
            click.option(
                "--classifier", default=DEFAULT_CLASSIFIER, show_default=True,
                help="Syntax classifier as 'module:function'.",
            ),
            click.option(
                "--prettier-config", type=click.Path(dir_okay=False, path_type=Path),
                default=None, help="Prettier config file.",
            ),
            click.option(
                "--eslint-config", type=click.Path(dir_okay=False, path_type=Path),
                default=None, help="ESLint config file.",
            ),
            click.option(
                "--no-format", is_flag=True, default=False,
                help="Skip the external formatters.",
            ),
        ]
    ):
        func = decorator(func)
    return func


def build_config(
    source: Path,
    constant_name: str,
    output: Path,
    prefix: str,
    classifier: str,
    prettier_config: Path | None,
    eslint_config: Path | None,
    no_format: bool,
    debounce: float = DEFAULT_DEBOUNCE_SECONDS,
) -> GeneratorConfig:
    """Build a resolved GeneratorConfig from CLI option values."""
    try:
        return GeneratorConfig(
            source_path=source,
            constant_name=constant_name,
            output_path=output,
            prefix=prefix,
            classifier=load_classifier(classifier),
            prettier_config_path=prettier_config,
            eslint_config_path=eslint_config,
            debounce_seconds=debounce,
            format_output=not no_format,
        ).resolve()
    except ConfigError as exc:
        raise click.BadParameter(str(exc)) from exc
