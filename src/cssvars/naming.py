"""Naming helpers shared by the normalizer and the stylesheet generator."""

from __future__ import annotations

import re

__all__ = ["css_variable_name", "kebab_case"]

# An uppercase letter that follows something other than a hyphen.
_UPPER_RE = re.compile(r"(?<=[^-])([A-Z])")


def kebab_case(name: str) -> str:
    """Convert camelCase to kebab-case: ``backgroundColor`` -> ``background-color``.

    Already kebab-cased names are returned unchanged.
    """
    return _UPPER_RE.sub(r"-\1", name).lower()


def css_variable_name(key: str, prefix: str = "") -> str:
    """Return the custom property name for *key*, e.g. ``--app-primary-color``."""
    if prefix:
        return f"--{prefix}-{kebab_case(key)}"
    return f"--{kebab_case(key)}"
