"""Lark Transformer that turns normalized literal text into a ConfigMapping.

Nothing in the literal is executed. Function members are masked out before
parsing and dropped along with nested objects and arrays. Remaining values are
rendered the way JavaScript's ``String()`` would render them.
"""

from __future__ import annotations

import logging
import math
import re
from decimal import Decimal
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from cssvars.errors import InvalidLiteralError
from cssvars.evaluator.functions import mask_functions

__all__ = ["evaluate_literal", "js_number_string"]

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
    "\n": "",
}

_ESCAPE_RE = re.compile(
    r"\\(?:u\{(?P<code_point>[0-9a-fA-F]+)\}|u(?P<unicode>[0-9a-fA-F]{4})"
    r"|x(?P<hex>[0-9a-fA-F]{2})|(?P<char>[\s\S]))"
)

_PREFIXED_INT_RE = re.compile(r"^[+-]?0[xXbBoO]")

_SURROGATE_RE = re.compile("[\ud800-\udfff]")

# Largest array index per ECMAScript: 2**32 - 2.
_MAX_INDEX = 2**32 - 2


class _Function:
    """Marker for a member whose value is a function."""


_FUNCTION = _Function()


def _unescape(body: str) -> str:
    def _replace(match: re.Match[str]) -> str:
        if match.group("code_point"):
            return chr(int(match.group("code_point"), 16))
        if match.group("unicode"):
            return chr(int(match.group("unicode"), 16))
        if match.group("hex"):
            return chr(int(match.group("hex"), 16))
        char = match.group("char")
        return _ESCAPES.get(char, char)

    text = _ESCAPE_RE.sub(_replace, body)
    if not _SURROGATE_RE.search(text):
        return text
    # Join UTF-16 surrogate pairs; a lone surrogate becomes U+FFFD.
    return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")


def _parse_number(raw: str) -> float:
    if _PREFIXED_INT_RE.match(raw):
        value = int(raw, 0)
        try:
            return float(value)
        except OverflowError:
            return math.copysign(math.inf, value)
    return float(raw)


def js_number_string(number: float) -> str:
    """Render a number the way JavaScript's ``String(number)`` does."""
    number = float(number)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0:
        return "0"
    if 1e-6 <= abs(number) < 1e21:
        digits = Decimal(repr(number))
        if number.is_integer():
            digits = digits.to_integral_value()
        return format(digits, "f")
    mantissa, exponent = repr(number).split("e")
    exp = int(exponent)
    return f"{mantissa}e{'+' if exp > 0 else '-'}{abs(exp)}"


class LiteralTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into Python values.

    Objects become lists of ``(key, value)`` pairs so the caller decides
    ordering and duplicate handling. Functions become the ``_FUNCTION`` marker.
    """

    # ---- scalars ----

    def string(self, items: list[Token]) -> str:
        return _unescape(str(items[0])[1:-1])

    def number(self, items: list[Token]) -> int | float:
        return _parse_number(str(items[0]))

    def true(self, items: list[Token]) -> bool:
        return True

    def false(self, items: list[Token]) -> bool:
        return False

    def null(self, items: list[Token]) -> None:
        return None

    def undefined(self, items: list[Token]) -> str:
        return "undefined"

    def function(self, items: list[Token]) -> _Function:
        return _FUNCTION

    # ---- keys ----

    def string_key(self, items: list[Token]) -> str:
        return _unescape(str(items[0])[1:-1])

    def number_key(self, items: list[Token]) -> str:
        return js_number_string(_parse_number(str(items[0])))

    # ---- structural ----

    def pair(self, items: list[object]) -> tuple[str, object]:
        return (str(items[0]), items[1])

    def object(self, items: list[tuple[str, object]]) -> list[tuple[str, object]]:
        return list(items)

    def array(self, items: list[object]) -> list[object]:
        return list(items)

    def start(self, items: list[object]) -> object:
        return items[0]


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(encoding="utf-8"), parser="lalr", start="start")


def _is_index(key: str) -> bool:
    if not key.isdigit() or (len(key) > 1 and key.startswith("0")):
        return False
    return int(key) <= _MAX_INDEX


def _own_keys(members: list[tuple[str, object]]) -> dict[str, object]:
    """Collapse members into a dict using JavaScript own-property order.

    Integer-like keys come first in ascending order, then string keys in
    insertion order. A repeated key keeps its first position and last value.
    """
    merged: dict[str, object] = {}
    for key, value in members:
        merged[key] = value
    indices = sorted((k for k in merged if _is_index(k)), key=int)
    names = [k for k in merged if not _is_index(k)]
    return {k: merged[k] for k in indices + names}


def _stringify(value: object) -> str:
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    if isinstance(value, (int, float)):
        return js_number_string(value)
    return str(value)


def evaluate_literal(text: str, constant_name: str = "") -> dict[str, str]:
    """Materialize normalized literal *text* into an ordered ``key -> value`` mapping.

    Function members and nested objects or arrays are skipped with a warning.
    Raises InvalidLiteralError if the text does not parse, or if every member
    had to be skipped.
    """
    try:
        tree = _parser().parse(mask_functions(text))
        members = LiteralTransformer().transform(tree)
    except LarkError as exc:
        line = getattr(exc, "line", None)
        column = getattr(exc, "column", None)
        raise InvalidLiteralError(str(exc), line=line, column=column) from exc
    except RecursionError as exc:
        raise InvalidLiteralError("Literal is nested too deeply") from exc

    label = constant_name or "literal"
    result: dict[str, str] = {}
    skipped = 0
    for key, value in _own_keys(members).items():
        if isinstance(value, _Function):
            logger.warning("Function found in %s.%s - skipping", label, key)
            skipped += 1
            continue
        if isinstance(value, list):
            logger.warning("Nested value found in %s.%s - skipping", label, key)
            skipped += 1
            continue
        result[key] = _stringify(value)

    if skipped and not result:
        raise InvalidLiteralError(f"{label} contains no primitive members")
    return result
