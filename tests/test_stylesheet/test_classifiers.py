"""Tests for the built-in syntax classifier."""

import pytest

from cssvars.classifiers import guess_syntax


@pytest.mark.parametrize(
    "value, expected",
    [
        ("#fff", "<color>"),
        ("#ff0000", "<color>"),
        ("#FF000080", "<color>"),
        ("rgb(0, 0, 0)", "<color>"),
        ("hsla(10, 50%, 50%, 0.5)", "<color>"),
        ("oklch(70% 0.1 200)", "<color>"),
        ("transparent", "<color>"),
        ("Red", "<color>"),
        ("4px", "<length>"),
        ("1.5rem", "<length>"),
        ("-2em", "<length>"),
        ("50%", "<percentage>"),
        ("200ms", "<time>"),
        ("0.3s", "<time>"),
        ("45deg", "<angle>"),
        ("8", "<integer>"),
        ("-3", "<integer>"),
        ("0.5", "<number>"),
        ("var(--colors-primary)", "*"),
        ("'Inter', sans-serif", "*"),
        ("#ggg", "*"),
        ("", "*"),
    ],
)
def test_guess_syntax(value, expected):
    assert guess_syntax("key", value) == expected
