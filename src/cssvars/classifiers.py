"""Built-in syntax classifier for ``@property`` declarations.

Used when no classifier is supplied on the command line. Anything it cannot
recognize is declared with the universal syntax ``*``.
"""

from __future__ import annotations

import re

__all__ = ["guess_syntax"]

_NUMBER = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"

_LENGTH_UNITS = (
    "px|em|rem|ex|ch|vw|vh|vmin|vmax|svh|lvh|dvh|svw|lvw|dvw|cm|mm|q|in|pt|pc|lh|rlh"
)

_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"^#(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.I), "<color>"),
    (re.compile(r"^(?:rgba?|hsla?|hwb|lab|lch|oklab|oklch|color)\(.*\)$", re.I), "<color>"),
    (re.compile(rf"^{_NUMBER}(?:{_LENGTH_UNITS})$", re.I), "<length>"),
    (re.compile(rf"^{_NUMBER}%$"), "<percentage>"),
    (re.compile(rf"^{_NUMBER}(?:ms|s)$", re.I), "<time>"),
    (re.compile(rf"^{_NUMBER}(?:deg|grad|rad|turn)$", re.I), "<angle>"),
    (re.compile(r"^[+-]?\d+$"), "<integer>"),
    (re.compile(rf"^{_NUMBER}$"), "<number>"),
]

_NAMED_COLORS = frozenset(
    {
        "transparent", "currentcolor", "black", "white", "red", "green", "blue",
        "yellow", "orange", "purple", "pink", "gray", "grey", "silver", "maroon",
        "olive", "lime", "aqua", "teal", "navy", "fuchsia", "cyan", "magenta",
    }
)


def guess_syntax(key: str, value: str) -> str:
    """Return a CSS syntax descriptor for *value*; *key* is accepted for signature parity."""
    text = value.strip()
    if text.lower() in _NAMED_COLORS:
        return "<color>"
    for pattern, syntax in _RULES:
        if pattern.match(text):
            return syntax
    return "*"
