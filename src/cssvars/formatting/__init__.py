from cssvars.formatting.tools import (
    ESLINT_CONFIG_NAMES,
    PRETTIER_CONFIG_NAMES,
    Formatter,
    FormattingTools,
    NullFormatter,
    find_config_file,
    format_file,
    load_formatting_tools,
)

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
