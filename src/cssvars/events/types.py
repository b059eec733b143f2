"""Event types emitted by the regeneration controller."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RegenerationStarted:
    source_path: Path
    trigger: str


@dataclass(frozen=True)
class RegenerationSucceeded:
    output_path: Path
    variable_count: int


@dataclass(frozen=True)
class RegenerationFailed:
    error: str
    kind: str


@dataclass(frozen=True)
class FormattingFailed:
    output_path: Path
    error: str
