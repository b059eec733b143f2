"""External formatting tools: prettier and eslint run as subprocesses.

Tools are discovered once (executable plus config file) and then reused for
every regeneration. A missing tool simply disables that step.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence

from cssvars.errors import FormatterError

__all__ = [
    "ESLINT_CONFIG_NAMES",
    "PRETTIER_CONFIG_NAMES",
    "Formatter",
    "FormattingTools",
    "NullFormatter",
    "find_config_file",
    "format_file",
    "load_formatting_tools",
]

logger = logging.getLogger(__name__)

PRETTIER_CONFIG_NAMES = (
    "prettier.config.cjs",
    "prettier.config.js",
    ".prettierrc.cjs",
    ".prettierrc.js",
    ".prettierrc",
)

ESLINT_CONFIG_NAMES = (
    "eslint.config.js",
    "eslint.config.mjs",
    ".eslintrc.js",
    ".eslintrc.cjs",
)


class Formatter(Protocol):
    """Rewrites a generated file in place. Raises FormatterError on failure."""

    def format(self, path: Path) -> None: ...


class NullFormatter:
    """Formatter that leaves files untouched."""

    def format(self, path: Path) -> None:
        return None


def find_config_file(directory: Path, names: Sequence[str]) -> Path | None:
    """Return the first of *names* that exists in *directory*."""
    for name in names:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def _find_executable(name: str, cwd: Path) -> str | None:
    local = cwd / "node_modules" / ".bin" / name
    if local.is_file() and os.access(local, os.X_OK):
        return str(local)
    return shutil.which(name)


def _resolve_config(
    explicit: Path | None, cwd: Path, names: Sequence[str], tool: str
) -> Path | None:
    if explicit is None:
        return find_config_file(cwd, names)
    path = Path(explicit).resolve()
    if not path.is_file():
        logger.warning("Failed to load %s config: %s does not exist", tool, path)
        return None
    return path


@dataclass(frozen=True)
class FormattingTools:
    """Resolved formatter commands. ``None`` means the step is skipped."""

    prettier: tuple[str, ...] | None = None
    eslint: tuple[str, ...] | None = None
    cwd: Path | None = None

    @property
    def enabled(self) -> bool:
        return self.prettier is not None or self.eslint is not None

    def format(self, path: Path) -> None:
        format_file(path, self)


def load_formatting_tools(
    prettier_config_path: Path | None = None,
    eslint_config_path: Path | None = None,
    cwd: Path | None = None,
) -> FormattingTools:
    """Discover prettier and eslint executables and their config files.

    Explicit config paths win; otherwise the working directory is searched
    for the conventional config file names.
    """
    base = cwd or Path.cwd()

    prettier: tuple[str, ...] | None = None
    executable = _find_executable("prettier", base)
    config = _resolve_config(prettier_config_path, base, PRETTIER_CONFIG_NAMES, "Prettier")
    if executable and config:
        prettier = (executable, "--config", str(config), "--write")
    elif config and not executable:
        logger.warning("Prettier config %s found but prettier is not installed", config)

    eslint: tuple[str, ...] | None = None
    executable = _find_executable("eslint", base)
    config = _resolve_config(eslint_config_path, base, ESLINT_CONFIG_NAMES, "ESLint")
    if executable and config:
        eslint = (executable, "--config", str(config), "--fix")
    elif config and not executable:
        logger.warning("ESLint config %s found but eslint is not installed", config)

    return FormattingTools(prettier=prettier, eslint=eslint, cwd=base)


def _run(command: tuple[str, ...], path: Path, cwd: Path | None, ok_codes: tuple[int, ...]) -> None:
    try:
        result = subprocess.run(
            [*command, str(path)],
            capture_output=True, text=True, cwd=str(cwd) if cwd else None,
        )
    except OSError as exc:
        raise FormatterError(f"{command[0]}: {exc}") from exc
    if result.returncode not in ok_codes:
        detail = (result.stderr or result.stdout).strip()
        raise FormatterError(f"{Path(command[0]).name} exited with {result.returncode}: {detail}")


def format_file(path: Path, tools: FormattingTools) -> None:
    """Run prettier, then eslint; re-run prettier if eslint changed the file."""
    if tools.prettier:
        _run(tools.prettier, path, tools.cwd, ok_codes=(0,))

    if tools.eslint:
        before = path.read_text(encoding="utf-8")
        # eslint exits 1 when unfixable problems remain; the fixes are still written.
        _run(tools.eslint, path, tools.cwd, ok_codes=(0, 1))
        if tools.prettier and path.read_text(encoding="utf-8") != before:
            _run(tools.prettier, path, tools.cwd, ok_codes=(0,))
