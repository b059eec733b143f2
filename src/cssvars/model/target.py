"""Extraction target: which constant to pull out of which source file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from cssvars.errors import ConfigError

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def is_identifier(name: str) -> bool:
    """True if *name* is usable as a JavaScript binding name."""
    return bool(_IDENTIFIER_RE.match(name))


@dataclass(frozen=True)
class ExtractionTarget:
    """A source file and the name of the object literal constant inside it."""

    file_path: Path
    constant_name: str

    def __post_init__(self) -> None:
        if not is_identifier(self.constant_name):
            raise ConfigError(f"Invalid constant name: {self.constant_name!r}")
