"""TIK environment configuration.

The directive vocabulary ("magic constants") is data, not a type hierarchy:
each logical placeholder role maps to a customizable literal string that is
matched case-insensitively inside ``{...}``. Localizing the authoring
vocabulary means overriding these strings.

A configuration is validated once and then shared read-only by any number
of parsers and translators.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import dataclasses
import functools
import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from tikengine.constants import MAGIC_CONSTANT_FORBIDDEN_CHARS
from tikengine.diagnostics import ErrorTemplate, TikConfigError
from tikengine.enums import TokenType

__all__ = [
    "DEFAULT_CONFIG",
    "Config",
    "MagicConstants",
    "OrdinalPluralConstant",
    "default_config",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OrdinalPluralConstant:
    """Ordinal plural magic constant and its ICU default.

    Attributes:
        constant: The magic TIK constant, e.g. ``ordinal`` for ``{ordinal}``
        default_icu_suffix: Suffix written into the generated
            ``selectordinal`` ``other`` arm, e.g. ``th`` for ``#th``
    """

    constant: str = "ordinal"
    default_icu_suffix: str = "th"


@dataclass(frozen=True, slots=True)
class MagicConstants:
    """Magic constants used in the configured environment.

    Every field except ``cardinal_plural_start`` is matched against the full
    body of a ``{...}`` directive. ``cardinal_plural_start`` opens a plural
    block and must be followed by whitespace: ``{# messages}``.
    """

    text: str = "text"  # {text}
    text_with_gender: str = "name"  # {name}
    integer: str = "integer"  # {integer}
    number: str = "number"  # {number}
    cardinal_plural_start: str = "#"  # {# ...}
    ordinal_plural: OrdinalPluralConstant = field(default_factory=OrdinalPluralConstant)

    gender_pronouns: tuple[str, ...] = ("they", "them", "their", "theirs", "themself")

    date_full: str = "date-full"
    date_long: str = "date-long"
    date_medium: str = "date-medium"
    date_short: str = "date-short"

    time_full: str = "time-full"
    time_long: str = "time-long"
    time_medium: str = "time-medium"
    time_short: str = "time-short"

    currency: str = "currency"

    def __post_init__(self) -> None:
        # Accept any iterable of pronouns but store an immutable tuple.
        if not isinstance(self.gender_pronouns, tuple):
            object.__setattr__(self, "gender_pronouns", tuple(self.gender_pronouns or ()))

    def scalar_constants(self) -> Iterator[tuple[str, str, TokenType]]:
        """Yield ``(field, constant, token_type)`` for every single-valued constant."""
        yield "text", self.text, TokenType.TEXT
        yield "text_with_gender", self.text_with_gender, TokenType.TEXT_WITH_GENDER
        yield "integer", self.integer, TokenType.INTEGER
        yield "number", self.number, TokenType.NUMBER
        yield "cardinal_plural_start", self.cardinal_plural_start, TokenType.CARDINAL_PLURAL_START
        yield "ordinal_plural", self.ordinal_plural.constant, TokenType.ORDINAL_PLURAL
        yield "date_full", self.date_full, TokenType.DATE_FULL
        yield "date_long", self.date_long, TokenType.DATE_LONG
        yield "date_medium", self.date_medium, TokenType.DATE_MEDIUM
        yield "date_short", self.date_short, TokenType.DATE_SHORT
        yield "time_full", self.time_full, TokenType.TIME_FULL
        yield "time_long", self.time_long, TokenType.TIME_LONG
        yield "time_medium", self.time_medium, TokenType.TIME_MEDIUM
        yield "time_short", self.time_short, TokenType.TIME_SHORT
        yield "currency", self.currency, TokenType.CURRENCY


def _is_valid_magic_constant(value: str) -> bool:
    """Check the shape of a single magic constant."""
    if not value:
        return False
    if any(char in MAGIC_CONSTANT_FORBIDDEN_CHARS for char in value):
        return False
    return not (value[0].isspace() or value[-1].isspace())


@functools.lru_cache(maxsize=32)
def _build_vocabulary(constants: MagicConstants) -> Mapping[str, TokenType]:
    """Build the case-folded directive lookup table for constants.

    The cardinal plural opener is excluded: it is recognized by prefix,
    not by matching the whole directive body.
    """
    vocabulary: dict[str, TokenType] = {}
    for name, value, token_type in constants.scalar_constants():
        if name == "cardinal_plural_start":
            continue
        vocabulary[value.casefold()] = token_type
    for pronoun in constants.gender_pronouns:
        vocabulary[pronoun.casefold()] = TokenType.GENDER_PRONOUN
    return MappingProxyType(vocabulary)


@dataclass(frozen=True, slots=True)
class Config:
    """TIK environment configuration.

    Attributes:
        magic_constants: The directive vocabulary

    Example:
        >>> conf = Config.with_constants(number="n")
        >>> conf.magic_constants.number
        'n'
    """

    magic_constants: MagicConstants = field(default_factory=MagicConstants)

    @classmethod
    def with_constants(cls, **overrides: Any) -> Config:
        """Create a validated configuration overriding default magic constants.

        Args:
            **overrides: MagicConstants field values to replace

        Returns:
            New validated Config

        Raises:
            TikConfigError: If the resulting vocabulary is invalid
            TypeError: If an override names an unknown field
        """
        config = cls(magic_constants=dataclasses.replace(MagicConstants(), **overrides))
        config.validate()
        return config

    def validate(self) -> None:
        """Validate the vocabulary.

        Checks, in order: every single-valued constant (shape, then
        uniqueness), the ordinal default suffix, then the gender pronouns.

        Raises:
            TikConfigError: MAGIC_CONSTANT_INVALID, MAGIC_CONSTANT_NON_UNIQUE
                or MISSING_DEFAULT for the first violation found
        """
        constants = self.magic_constants
        seen: set[str] = set()

        def check(name: str, value: str) -> None:
            if not isinstance(value, str) or not _is_valid_magic_constant(value):
                raise TikConfigError(ErrorTemplate.magic_constant_invalid(name, str(value)))
            key = value.casefold()
            if key in seen:
                raise TikConfigError(ErrorTemplate.magic_constant_non_unique(name, value))
            seen.add(key)

        for name, value, _ in constants.scalar_constants():
            check(name, value)

        if not constants.ordinal_plural.default_icu_suffix:
            raise TikConfigError(
                ErrorTemplate.missing_default("ordinal_plural.default_icu_suffix")
            )

        if not constants.gender_pronouns:
            raise TikConfigError(ErrorTemplate.gender_pronouns_empty())
        for pronoun in constants.gender_pronouns:
            check("gender_pronouns", pronoun)

        logger.debug("Validated magic constants: %d entries", len(seen))

    @property
    def vocabulary(self) -> Mapping[str, TokenType]:
        """Case-folded directive body -> token type lookup (read-only)."""
        return _build_vocabulary(self.magic_constants)

    @property
    def ordinal_suffix(self) -> str:
        """Default ICU suffix for ordinal plurals."""
        return self.magic_constants.ordinal_plural.default_icu_suffix


DEFAULT_CONFIG = Config()
DEFAULT_CONFIG.validate()


def default_config() -> Config:
    """Return the bundled default configuration.

    Config is frozen, so the shared instance is returned rather than a copy.
    """
    return DEFAULT_CONFIG
