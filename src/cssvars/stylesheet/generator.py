"""Render a ConfigMapping into ``@property`` declarations and a ``:root`` block.

Output shape::

    /* autogenerated by cssvars */

    @property --app-primary-color {
      syntax: '<color>';
      inherits: false;
      initial-value: #ff0000;
    }

    :root {
      --app-primary-color: #ff0000;
    }
"""

from __future__ import annotations

from typing import Mapping

from cssvars.errors import GenerationError
from cssvars.model.config import Classifier
from cssvars.model.variables import VariableDescriptor
from cssvars.naming import css_variable_name

__all__ = ["BANNER", "build_descriptors", "render_stylesheet"]

BANNER = "/* autogenerated by cssvars */"

_INDENT = "  "


def _classify(classifier: Classifier, key: str, value: str) -> str:
    try:
        syntax = classifier(key, value)
    except Exception as exc:
        raise GenerationError(key, str(exc) or type(exc).__name__) from exc
    if not isinstance(syntax, str) or not syntax:
        raise GenerationError(key, f"classifier returned {syntax!r}")
    return syntax


def build_descriptors(
    mapping: Mapping[str, str], prefix: str, classifier: Classifier
) -> list[VariableDescriptor]:
    """Build one VariableDescriptor per mapping entry, in mapping order."""
    return [
        VariableDescriptor(
            css_name=css_variable_name(key, prefix),
            value=value,
            syntax=_classify(classifier, key, value),
        )
        for key, value in mapping.items()
    ]


def _property_block(descriptor: VariableDescriptor) -> str:
    return "\n".join(
        [
            f"@property {descriptor.css_name} {{",
            f"{_INDENT}syntax: '{descriptor.syntax}';",
            f"{_INDENT}inherits: false;",
            f"{_INDENT}initial-value: {descriptor.value};",
            "}",
        ]
    )


def _root_block(descriptors: list[VariableDescriptor]) -> str:
    lines = [":root {"]
    lines.extend(f"{_INDENT}{d.declaration()}" for d in descriptors)
    lines.append("}")
    return "\n".join(lines)


def render_stylesheet(
    mapping: Mapping[str, str], prefix: str, classifier: Classifier
) -> str:
    """Return the full stylesheet text for *mapping*.

    The same inputs always produce byte-identical output.
    """
    descriptors = build_descriptors(mapping, prefix, classifier)
    sections = [BANNER]
    sections.extend(_property_block(d) for d in descriptors)
    sections.append(_root_block(descriptors))
    return "\n\n".join(sections) + "\n"
