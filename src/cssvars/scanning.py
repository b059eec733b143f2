"""Character scanners shared by the locator and the evaluator.

Both walk JavaScript text while treating strings, template literals and
comments as opaque.
"""

from __future__ import annotations

__all__ = ["find_closing_bracket", "skip_string"]

_CLOSING = {"{": "}", "(": ")", "[": "]"}


def skip_string(text: str, start: int) -> int:
    """Return the index just past the string literal opening at *start*."""
    quote = text[start]
    i = start + 1
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        if ch == "\n" and quote != "`":
            # Unterminated single-line string: resume scanning on the next line.
            return i
        i += 1
    return len(text)


def find_closing_bracket(text: str, open_index: int) -> int | None:
    """Return the index of the bracket closing the one at *open_index*.

    The character at *open_index* must be ``{``, ``(`` or ``[``. Returns None
    when the brackets never balance.
    """
    opening = text[open_index]
    closing = _CLOSING[opening]
    depth = 0
    i = open_index
    n = len(text)
    while i < n:
        ch = text[i]
        if ch in "\"'`":
            i = skip_string(text, i)
            continue
        if text.startswith("//", i):
            newline = text.find("\n", i)
            i = n if newline == -1 else newline
            continue
        if text.startswith("/*", i):
            end = text.find("*/", i + 2)
            i = n if end == -1 else end + 2
            continue
        if ch == opening:
            depth += 1
        elif ch == closing:
            depth -= 1
            if depth == 0:
                return i
        i += 1
    return None
