"""Enumerations for TIKEngine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class TokenType(StrEnum):
    """Type of a TIK lexical token.

    A closed set: every token carries exactly one of these tags.
    StrEnum provides automatic string conversion:
    str(TokenType.CARDINAL_PLURAL_START) == "pluralization"
    """

    CONTEXT = "context"
    """Bracketed namespace prefix: [settings page]"""

    LITERAL = "literal"
    """Plain text run between directives"""

    TEXT = "text"
    """Free-form text placeholder: {text} or {"John"}"""

    TEXT_WITH_GENDER = "text with gender"
    """Free-form text placeholder with grammatical gender: {name}"""

    INTEGER = "integer"
    """Integer placeholder: {integer}"""

    NUMBER = "number"
    """Number placeholder: {number}"""

    CARDINAL_PLURAL_START = "pluralization"
    """Opening of a plural block, including the whitespace after the opener: {# """

    CARDINAL_PLURAL_END = "pluralization block end"
    """Closing brace of a plural block: }"""

    ORDINAL_PLURAL = "ordinal plural"
    """Ordinal placeholder: {ordinal}"""

    GENDER_PRONOUN = "gender pronoun"
    """Gender pronoun: {they}, {their}, {themself}"""

    DATE_FULL = "date full"
    DATE_LONG = "date long"
    DATE_MEDIUM = "date medium"
    DATE_SHORT = "date short"

    TIME_FULL = "time full"
    TIME_LONG = "time long"
    TIME_MEDIUM = "time medium"
    TIME_SHORT = "time short"

    CURRENCY = "currency"
    """Currency amount placeholder: {currency}"""

    @property
    def is_placeholder(self) -> bool:
        """True if tokens of this type consume a positional ICU argument."""
        return self not in _NON_PLACEHOLDER_TYPES


_NON_PLACEHOLDER_TYPES = frozenset(
    {TokenType.CONTEXT, TokenType.LITERAL, TokenType.CARDINAL_PLURAL_END}
)


__all__ = [
    "TokenType",
]
