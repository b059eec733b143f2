"""Error taxonomy for extraction, generation and output."""

from __future__ import annotations


class CssVarsError(Exception):
    """Base class for every error raised by cssvars."""

    kind = "error"


class ConfigError(CssVarsError):
    """Raised when the generator configuration is unusable."""

    kind = "config"


class ConstantNotFoundError(CssVarsError):
    """Raised when the target constant literal is absent from the source."""

    kind = "not_found"

    def __init__(self, constant_name: str, source_path: str | None = None):
        self.constant_name = constant_name
        self.source_path = source_path
        where = f" in {source_path}" if source_path else ""
        super().__init__(f'Configuration object "{constant_name}" not found{where}')


class InvalidLiteralError(CssVarsError):
    """Raised when literal text cannot be materialized into a mapping."""

    kind = "invalid_literal"

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class CssVarsIOError(CssVarsError):
    """Raised when the source cannot be read or the output cannot be written."""

    kind = "io"

    def __init__(self, message: str, path: str):
        self.path = path
        super().__init__(message)


class SourceReadError(CssVarsIOError):
    pass


class OutputWriteError(CssVarsIOError):
    pass


class GenerationError(CssVarsError):
    """Raised when the syntax classifier fails for a key."""

    kind = "generation"

    def __init__(self, key: str, message: str):
        self.key = key
        super().__init__(f"Cannot classify {key!r}: {message}")


class FormatterError(CssVarsError):
    """Raised when an external formatting tool fails. Never fatal to a cycle."""

    kind = "formatter"
