"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


def _excerpt(source: str, offset: int, limit: int = 24) -> str:
    """Return a short single-line excerpt of source starting at offset."""
    text = source[offset : offset + limit]
    newline = text.find("\n")
    if newline != -1:
        text = text[:newline]
    return text


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases

    Syntax templates take the raw TIK source and the offending offset; the
    resulting Diagnostic carries a SourceSpan with line and column.
    """

    # ------------------------------------------------------------------
    # Structural errors
    # ------------------------------------------------------------------

    @staticmethod
    def text_empty(source: str, offset: int) -> Diagnostic:
        """TIK has no text body (empty, whitespace-only, or context-only).

        Args:
            source: Raw TIK source
            offset: Offset where the text body was expected

        Returns:
            Diagnostic for TEXT_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.TEXT_EMPTY,
            message="TIK text is empty",
            span=SourceSpan.at(source, offset, 0),
            hint="A TIK must contain at least one non-whitespace character after the context",
        )

    @staticmethod
    def context_unclosed(source: str, offset: int) -> Diagnostic:
        """Context opened with '[' is never closed.

        Args:
            source: Raw TIK source
            offset: Offset of the opening '['

        Returns:
            Diagnostic for CONTEXT_UNCLOSED
        """
        return Diagnostic(
            code=DiagnosticCode.CONTEXT_UNCLOSED,
            message="Context is missing its closing ']'",
            span=SourceSpan.at(source, offset),
            hint="Close the context with ']' before the text body",
        )

    @staticmethod
    def context_empty(source: str, offset: int) -> Diagnostic:
        """Context brackets enclose only whitespace.

        Args:
            source: Raw TIK source
            offset: Offset of the opening '['

        Returns:
            Diagnostic for CONTEXT_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.CONTEXT_EMPTY,
            message="Context is empty",
            span=SourceSpan.at(source, offset),
            hint="Describe the context inside the brackets or remove them",
        )

    @staticmethod
    def context_invalid(source: str, offset: int) -> Diagnostic:
        """Context contains a reserved character.

        Args:
            source: Raw TIK source
            offset: Offset of the reserved character

        Returns:
            Diagnostic for CONTEXT_INVALID
        """
        char = source[offset]
        return Diagnostic(
            code=DiagnosticCode.CONTEXT_INVALID,
            message=f"Context contains illegal character {char!r}",
            span=SourceSpan.at(source, offset),
            hint="Contexts must not contain '{', '}', '[', ']' or '\\'",
        )

    @staticmethod
    def unclosed_placeholder(source: str, offset: int) -> Diagnostic:
        """Placeholder or plural block opened with '{' is never closed.

        Args:
            source: Raw TIK source
            offset: Offset of the opening '{'

        Returns:
            Diagnostic for UNCLOSED_PLACEHOLDER
        """
        return Diagnostic(
            code=DiagnosticCode.UNCLOSED_PLACEHOLDER,
            message=f"Unclosed placeholder '{_excerpt(source, offset)}'",
            span=SourceSpan.at(source, offset),
            hint="Close the placeholder with '}' or escape the brace as '\\{'",
        )

    @staticmethod
    def unclosed_string_placeholder(source: str, offset: int) -> Diagnostic:
        """Quoted text placeholder reaches the end of input.

        Args:
            source: Raw TIK source
            offset: Offset of the opening '{'

        Returns:
            Diagnostic for UNCLOSED_STRING_PLACEHOLDER
        """
        return Diagnostic(
            code=DiagnosticCode.UNCLOSED_STRING_PLACEHOLDER,
            message=f"Unclosed string placeholder '{_excerpt(source, offset)}'",
            span=SourceSpan.at(source, offset),
            hint='Close the string placeholder with \'"}\'',
        )

    @staticmethod
    def unexpected_closure(source: str, offset: int) -> Diagnostic:
        """Unescaped '}' outside of a plural block.

        Args:
            source: Raw TIK source
            offset: Offset of the '}'

        Returns:
            Diagnostic for UNEXPECTED_CLOSURE
        """
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_CLOSURE,
            message="Unexpected '}'",
            span=SourceSpan.at(source, offset),
            hint="Escape a literal closing brace as '\\}'",
        )

    # ------------------------------------------------------------------
    # Placeholder content errors
    # ------------------------------------------------------------------

    @staticmethod
    def unknown_placeholder(source: str, offset: int, body: str) -> Diagnostic:
        """Placeholder body matches no magic constant.

        Args:
            source: Raw TIK source
            offset: Offset of the opening '{'
            body: Text between the braces

        Returns:
            Diagnostic for UNKNOWN_PLACEHOLDER
        """
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_PLACEHOLDER,
            message=f"Unknown placeholder '{{{body}}}'",
            span=SourceSpan.at(source, offset, len(body) + 2),
            hint='Use a configured magic constant or a quoted text placeholder {"..."}',
        )

    @staticmethod
    def string_placeholder_empty(source: str, offset: int) -> Diagnostic:
        """Quoted text placeholder has an empty body.

        Args:
            source: Raw TIK source
            offset: Offset of the opening '{'

        Returns:
            Diagnostic for STRING_PLACEHOLDER_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.STRING_PLACEHOLDER_EMPTY,
            message="String placeholder text body is empty",
            span=SourceSpan.at(source, offset, 4),
            hint="Put an example value between the quotes",
        )

    @staticmethod
    def string_placeholder_invalid_space(source: str, offset: int) -> Diagnostic:
        """Quoted text placeholder starts or ends with whitespace.

        Args:
            source: Raw TIK source
            offset: Offset of the offending whitespace character

        Returns:
            Diagnostic for STRING_PLACEHOLDER_INVALID_SPACE
        """
        return Diagnostic(
            code=DiagnosticCode.STRING_PLACEHOLDER_INVALID_SPACE,
            message="String placeholder starts or ends with a whitespace character",
            span=SourceSpan.at(source, offset),
            hint="Remove the surrounding whitespace inside the quotes",
        )

    @staticmethod
    def string_placeholder_illegal_chars(source: str, offset: int) -> Diagnostic:
        """Quoted text placeholder contains a reserved character.

        Args:
            source: Raw TIK source
            offset: Offset of the reserved character

        Returns:
            Diagnostic for STRING_PLACEHOLDER_ILLEGAL_CHARS
        """
        char = source[offset]
        return Diagnostic(
            code=DiagnosticCode.STRING_PLACEHOLDER_ILLEGAL_CHARS,
            message=f"String placeholder contains illegal character {char!r}",
            span=SourceSpan.at(source, offset),
            hint="String placeholders must not contain '\\', '{', '}' or '\"'",
        )

    # ------------------------------------------------------------------
    # Plural scope errors
    # ------------------------------------------------------------------

    @staticmethod
    def nested_pluralization(source: str, offset: int) -> Diagnostic:
        """Plural block opened inside another plural block.

        Args:
            source: Raw TIK source
            offset: Offset of the inner block's '{'

        Returns:
            Diagnostic for NESTED_PLURALIZATION
        """
        return Diagnostic(
            code=DiagnosticCode.NESTED_PLURALIZATION,
            message="Nested pluralization",
            span=SourceSpan.at(source, offset),
            hint="Close the enclosing plural block before opening a new one",
        )

    @staticmethod
    def cardinal_plural_empty(source: str, offset: int) -> Diagnostic:
        """Plural block closed without any content.

        Args:
            source: Raw TIK source
            offset: Offset of the closing '}'

        Returns:
            Diagnostic for CARDINAL_PLURAL_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.CARDINAL_PLURAL_EMPTY,
            message="Empty pluralization block",
            span=SourceSpan.at(source, offset),
            hint="Put the pluralized text inside the block, e.g. {# messages}",
        )

    @staticmethod
    def directive_starts_cardinal_plural(source: str, offset: int) -> Diagnostic:
        """Plural block content starts with a directive instead of text.

        Args:
            source: Raw TIK source
            offset: Offset of the directive's '{'

        Returns:
            Diagnostic for DIRECTIVE_STARTS_CARDINAL_PLURAL
        """
        return Diagnostic(
            code=DiagnosticCode.DIRECTIVE_STARTS_CARDINAL_PLURAL,
            message="Pluralization block must start with text, not a placeholder",
            span=SourceSpan.at(source, offset),
            hint="Start the block with the pluralized word, e.g. {# messages from {text}}",
        )

    # ------------------------------------------------------------------
    # Configuration errors
    # ------------------------------------------------------------------

    @staticmethod
    def magic_constant_invalid(field: str, value: str) -> Diagnostic:
        """Magic constant has an invalid shape.

        Args:
            field: Name of the configuration field
            value: The rejected constant

        Returns:
            Diagnostic for MAGIC_CONSTANT_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.MAGIC_CONSTANT_INVALID,
            message=f"Invalid magic constant {value!r} for '{field}'",
            hint=(
                "Magic constants must be non-empty, must not contain '{', '}', '\"' "
                "or '\\' and must not start or end with whitespace"
            ),
            field=field,
        )

    @staticmethod
    def gender_pronouns_empty() -> Diagnostic:
        """No gender pronouns configured.

        Returns:
            Diagnostic for MAGIC_CONSTANT_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.MAGIC_CONSTANT_INVALID,
            message="No gender pronouns configured",
            hint="Configure at least one gender pronoun",
            field="gender_pronouns",
        )

    @staticmethod
    def magic_constant_non_unique(field: str, value: str) -> Diagnostic:
        """Magic constant is already used by another field.

        Args:
            field: Name of the configuration field holding the duplicate
            value: The duplicated constant

        Returns:
            Diagnostic for MAGIC_CONSTANT_NON_UNIQUE
        """
        return Diagnostic(
            code=DiagnosticCode.MAGIC_CONSTANT_NON_UNIQUE,
            message=f"Magic constant {value!r} for '{field}' is not unique",
            hint="Every magic constant must map to a distinct (case-insensitive) string",
            field=field,
        )

    @staticmethod
    def missing_default(field: str) -> Diagnostic:
        """A required default value is missing.

        Args:
            field: Name of the configuration field

        Returns:
            Diagnostic for MISSING_DEFAULT
        """
        return Diagnostic(
            code=DiagnosticCode.MISSING_DEFAULT,
            message=f"Missing default for '{field}'",
            hint="Set the default ICU suffix used for ordinal plurals, e.g. 'th'",
            field=field,
        )
