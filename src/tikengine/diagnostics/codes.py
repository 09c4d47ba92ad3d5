"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "SourceSpan",
]


class ErrorCategory(StrEnum):
    """Error categorization derived from the numeric code range.

    Inherits from ``StrEnum`` so that ``str(category)`` yields the plain
    string (``"structural"``, ``"plural"``, ...) for logs and JSON output.

    Categories:
        STRUCTURAL: Text body, context and brace structure errors
        PLACEHOLDER: Content of a single placeholder is invalid
        PLURAL: Cardinal plural block scoping errors
        CONFIGURATION: Magic constant vocabulary is invalid
    """

    STRUCTURAL = "structural"
    PLACEHOLDER = "placeholder"
    PLURAL = "plural"
    CONFIGURATION = "configuration"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1099: Structural errors (text body, context, braces)
        2000-2099: Placeholder content errors
        3000-3099: Plural scope errors
        4000-4099: Configuration errors (magic constants)
    """

    # Structural errors (1000-1099)
    TEXT_EMPTY = 1001
    CONTEXT_UNCLOSED = 1002
    CONTEXT_EMPTY = 1003
    CONTEXT_INVALID = 1004
    UNCLOSED_PLACEHOLDER = 1005
    UNCLOSED_STRING_PLACEHOLDER = 1006
    UNEXPECTED_CLOSURE = 1007

    # Placeholder content errors (2000-2099)
    UNKNOWN_PLACEHOLDER = 2001
    STRING_PLACEHOLDER_EMPTY = 2002
    STRING_PLACEHOLDER_INVALID_SPACE = 2003
    STRING_PLACEHOLDER_ILLEGAL_CHARS = 2004

    # Plural scope errors (3000-3099)
    NESTED_PLURALIZATION = 3001
    CARDINAL_PLURAL_EMPTY = 3002
    DIRECTIVE_STARTS_CARDINAL_PLURAL = 3003

    # Configuration errors (4000-4099)
    MAGIC_CONSTANT_NON_UNIQUE = 4001
    MAGIC_CONSTANT_INVALID = 4002
    MISSING_DEFAULT = 4003

    @property
    def category(self) -> ErrorCategory:
        """Category of this code, derived from its numeric range."""
        match self.value // 1000:
            case 1:
                return ErrorCategory.STRUCTURAL
            case 2:
                return ErrorCategory.PLACEHOLDER
            case 3:
                return ErrorCategory.PLURAL
            case _:
                return ErrorCategory.CONFIGURATION


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. All offsets produced by the tokenizer use the same unit.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    @classmethod
    def at(cls, source: str, offset: int, length: int = 1) -> "SourceSpan":
        """Build a span covering ``length`` characters at ``offset`` in source.

        The end is clamped to the source length; line and column are
        computed with \\n as the line delimiter.
        """
        offset = max(0, min(offset, len(source)))
        end = min(offset + length, len(source))
        line = source.count("\n", 0, offset) + 1
        last_newline = source.rfind("\n", 0, offset)
        column = offset - last_newline if last_newline >= 0 else offset + 1
        return cls(start=offset, end=end, line=line, column=column)

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1 (both are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools (editors, linters in extraction pipelines).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None for configuration errors)
        hint: Suggestion for fixing the error
        field: Magic constant field name (configuration errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    field: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like the Rust compiler.

        Example output:
            error[UNKNOWN_PLACEHOLDER]: Unknown placeholder '{foo}'
              --> line 1, column 7
              = help: Use a configured magic constant or a quoted text placeholder

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
