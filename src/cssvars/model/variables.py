"""Variable descriptor: one generated custom property."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VariableDescriptor:
    """A single custom property derived from a mapping entry.

    Attributes:
        css_name: Full property name including the leading ``--`` and prefix.
        value: Property value, used both as initial value and in ``:root``.
        syntax: Syntax descriptor returned by the classifier, e.g. ``<color>``.
    """

    css_name: str
    value: str
    syntax: str

    def declaration(self) -> str:
        return f"{self.css_name}: {self.value};"
