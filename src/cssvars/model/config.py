"""Generator configuration: every knob of a regeneration cycle."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable

from cssvars.errors import ConfigError
from cssvars.model.target import ExtractionTarget, is_identifier

Classifier = Callable[[str, str], str]

DEFAULT_DEBOUNCE_SECONDS = 0.1


@dataclass(frozen=True)
class GeneratorConfig:
    """Configuration surface for generating a stylesheet from a source constant.

    Attributes:
        source_path: File containing the object literal.
        constant_name: Name the literal is bound to.
        output_path: Stylesheet to (over)write.
        prefix: Variable prefix, ``"app"`` yields ``--app-*``. May be empty.
        classifier: ``(key, value) -> syntax`` used for every ``@property`` block.
        prettier_config_path: Explicit prettier config, otherwise discovered.
        eslint_config_path: Explicit eslint config, otherwise discovered.
        debounce_seconds: Quiet window before a change event triggers a cycle.
        format_output: Run the external formatters after writing.
    """

    source_path: Path
    constant_name: str
    output_path: Path
    prefix: str
    classifier: Classifier
    prettier_config_path: Path | None = None
    eslint_config_path: Path | None = None
    debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS
    format_output: bool = True

    def __post_init__(self) -> None:
        if not is_identifier(self.constant_name):
            raise ConfigError(f"Invalid constant name: {self.constant_name!r}")
        if not callable(self.classifier):
            raise ConfigError("classifier must be callable")
        if self.debounce_seconds < 0:
            raise ConfigError("debounce_seconds must not be negative")

    @property
    def target(self) -> ExtractionTarget:
        return ExtractionTarget(self.source_path, self.constant_name)

    def resolve(self, cwd: Path | None = None) -> GeneratorConfig:
        """Return a copy with every path made absolute against *cwd*."""
        base = cwd or Path.cwd()

        def _abs(path: Path | None) -> Path | None:
            if path is None:
                return None
            return (base / Path(path)).resolve()

        return replace(
            self,
            source_path=_abs(self.source_path),
            output_path=_abs(self.output_path),
            prettier_config_path=_abs(self.prettier_config_path),
            eslint_config_path=_abs(self.eslint_config_path),
        )
