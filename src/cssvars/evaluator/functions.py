"""Replace function-valued members with an opaque marker before parsing.

Function bodies are arbitrary code, so the grammar never sees them. Each
function expression in value position (``function``, arrow with a block or an
expression body) and each method shorthand member is found with a balanced
scan and replaced by ``FUNCTION_MARKER``. Method shorthand becomes
``"name": FUNCTION_MARKER`` so that it still reads as a member.
"""

from __future__ import annotations

import json
import re

from cssvars.scanning import find_closing_bracket, skip_string

__all__ = ["FUNCTION_MARKER", "mask_functions"]

FUNCTION_MARKER = "@function"

_FUNCTION_HEAD = re.compile(
    r"(?:async\s+)?function\b\s*(?:\*\s*)?(?:[A-Za-z_$][\w$]*)?\s*(?=\()"
)
_ARROW_IDENT = re.compile(r"(?:async\s+)?[A-Za-z_$][\w$]*\s*=>")
_ARROW_PARAMS = re.compile(r"(?:async\s*)?(?=\()")
_ARROW = re.compile(r"\s*=>")
_METHOD_HEAD = re.compile(r"(?:async\s+)?(?:\*\s*)?(?P<name>[A-Za-z_$][\w$]*)\s*(?=\()")
_SPACE = re.compile(r"\s*")

_CLOSERS = ")]}"


def _block_end(text: str, index: int) -> int | None:
    """Return the index past the ``{...}`` block starting after whitespace at *index*."""
    index = _SPACE.match(text, index).end()
    if index >= len(text) or text[index] != "{":
        return None
    close = find_closing_bracket(text, index)
    return None if close is None else close + 1


def _expression_end(text: str, index: int) -> int:
    """Return the index of the ``,`` or closing bracket that ends an expression."""
    depth = 0
    n = len(text)
    while index < n:
        ch = text[index]
        if ch in "\"'`":
            index = skip_string(text, index)
            continue
        if ch in "([{":
            depth += 1
        elif ch in _CLOSERS:
            if depth == 0:
                return index
            depth -= 1
        elif ch == "," and depth == 0:
            return index
        index += 1
    return n


def _params_end(text: str, index: int) -> int | None:
    close = find_closing_bracket(text, index)
    return None if close is None else close + 1


def _function_value_end(text: str, index: int) -> int | None:
    """Return the end of a function expression starting at *index*, or None."""
    head = _FUNCTION_HEAD.match(text, index)
    if head:
        params = _params_end(text, head.end())
        return None if params is None else _block_end(text, params)

    arrow = _ARROW_IDENT.match(text, index)
    if arrow:
        body = arrow.end()
    else:
        paren = _ARROW_PARAMS.match(text, index)
        if not paren:
            return None
        params = _params_end(text, paren.end())
        if params is None:
            return None
        arrow = _ARROW.match(text, params)
        if not arrow:
            return None
        body = arrow.end()

    body = _SPACE.match(text, body).end()
    if text.startswith("{", body):
        return _block_end(text, body)
    return _expression_end(text, body)


def _method_end(text: str, head: re.Match[str]) -> int | None:
    params = _params_end(text, head.end())
    return None if params is None else _block_end(text, params)


def mask_functions(text: str) -> str:
    """Return *text* with every function member replaced by ``FUNCTION_MARKER``.

    Text that is not a recognizable function is left as is, for the parser to
    accept or reject.
    """
    out: list[str] = []
    containers: list[str] = []
    expect: str | None = None
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch.isspace():
            out.append(ch)
            i += 1
            continue

        if expect == "value":
            end = _function_value_end(text, i)
            if end is not None:
                out.append(FUNCTION_MARKER)
                i = end
                expect = None
                continue
        elif expect == "member":
            head = _METHOD_HEAD.match(text, i)
            end = _method_end(text, head) if head else None
            if end is not None:
                out.append(f"{json.dumps(head.group('name'))}: {FUNCTION_MARKER}")
                i = end
                expect = None
                continue
        expect = None

        if ch in "\"'`":
            end = skip_string(text, i)
            out.append(text[i:end])
            i = end
            continue
        if ch in "{[":
            containers.append(ch)
            expect = "member" if ch == "{" else "value"
        elif ch in "}]":
            if containers:
                containers.pop()
        elif ch == ":":
            expect = "value"
        elif ch == ",":
            expect = "member" if containers and containers[-1] == "{" else "value"
        out.append(ch)
        i += 1
    return "".join(out)
