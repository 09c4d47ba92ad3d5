"""TIK exception hierarchy with structured diagnostics.

Integrates with diagnostic codes for Rust/Elm-inspired error messages.
All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["TikConfigError", "TikError", "TikSyntaxError"]


class TikError(Exception):
    """Base exception for all TIK errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TikError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class TikSyntaxError(TikError):
    """TIK syntax error located at a single offset in the raw input.

    Parsing is fail-fast: the first violation aborts the whole call and
    no partial token stream is returned.

    Attributes:
        code: Symbolic error kind
        offset: Character offset into the raw input passed to parse
        source: The raw input
    """

    def __init__(self, diagnostic: Diagnostic, source: str) -> None:
        """Initialize TikSyntaxError.

        Args:
            diagnostic: Diagnostic with a SourceSpan
            source: Raw TIK input the span refers to
        """
        super().__init__(diagnostic)
        self.diagnostic: Diagnostic = diagnostic
        self.code: DiagnosticCode = diagnostic.code
        self.offset: int = diagnostic.span.start if diagnostic.span else 0
        self.source = source

    def __reduce__(self) -> tuple[type, tuple[Diagnostic, str]]:
        return (type(self), (self.diagnostic, self.source))

    def format_with_context(self, context_lines: int = 2) -> str:
        """Format the error with the source and a caret under the offending character.

        Args:
            context_lines: Number of lines to show before/after the error line

        Returns:
            Multi-line formatted error with context
        """
        from tikengine.syntax.position import get_error_context  # noqa: PLC0415 - circular

        context = get_error_context(self.source, self.offset, context_lines=context_lines)
        return f"{self}\n\n{context}"


class TikConfigError(TikError):
    """Invalid magic constant configuration.

    Raised by Config.validate(), never during parsing: a validated
    configuration cannot cause a configuration error at parse time.

    Attributes:
        code: Symbolic error kind
        field: Name of the offending configuration field
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        """Initialize TikConfigError.

        Args:
            diagnostic: Diagnostic describing the invalid field
        """
        super().__init__(diagnostic)
        self.diagnostic: Diagnostic = diagnostic
        self.code: DiagnosticCode = diagnostic.code
        self.field: str | None = diagnostic.field

    def __reduce__(self) -> tuple[type, tuple[Diagnostic]]:
        return (type(self), (self.diagnostic,))
