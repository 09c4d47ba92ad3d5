"""CLDR plural categories for generated ICU messages.

A translated ICU message must provide one arm per plural category of the
target locale; the generated skeleton only has ``other``. This module tells
downstream tooling which arms each plural argument of a TIK needs.

Requires the optional Babel dependency (``pip install tikengine[babel]``).
"""

import logging
from collections.abc import Mapping

from tikengine.constants import CLDR_PLURAL_CATEGORIES, ICU_ARGUMENT_PREFIX, ICU_PLURAL_SUFFIX
from tikengine.core.babel_compat import get_babel_locale, require_babel
from tikengine.enums import TokenType
from tikengine.syntax.tokens import TIK

from .translator import ICUModifier

__all__ = ["plural_categories", "required_plural_arms"]

logger = logging.getLogger(__name__)


def plural_categories(locale: str, *, ordinal: bool = False) -> tuple[str, ...]:
    """Return the CLDR plural categories of locale in canonical order.

    Args:
        locale: BCP-47 or POSIX locale code, e.g. ``en-US`` or ``pl``
        ordinal: Ordinal (``selectordinal``) instead of cardinal categories

    Returns:
        Categories ordered zero, one, two, few, many, other

    Raises:
        BabelImportError: If Babel is not installed
        ValueError: If the locale is unknown

    Example:
        >>> plural_categories("en")
        ('one', 'other')
        >>> plural_categories("en", ordinal=True)
        ('one', 'two', 'few', 'other')
    """
    require_babel("plural_categories")
    babel_locale = get_babel_locale(locale)
    rule = babel_locale.ordinal_form if ordinal else babel_locale.plural_form
    tags = set(rule.tags) | {"other"}
    return tuple(category for category in CLDR_PLURAL_CATEGORIES if category in tags)


def required_plural_arms(
    tik: TIK,
    locale: str,
    modifiers: Mapping[int, ICUModifier] | None = None,
) -> dict[str, tuple[str, ...]]:
    """Map every plural argument the translator emits for tik to its categories.

    Cardinal plural blocks and ``argN_plural`` modifier wrappers use the
    cardinal categories; ordinal placeholders use the ordinal ones.

    Args:
        tik: Parsed TIK
        locale: Target locale code
        modifiers: The modifiers the TIK is translated with

    Returns:
        Argument name -> required categories, in positional order

    Raises:
        BabelImportError: If Babel is not installed
        ValueError: If the locale is unknown

    Example:
        >>> required_plural_arms(parse("{ordinal} try, {# attempts}"), "en")
        {'arg0': ('one', 'two', 'few', 'other'), 'arg1': ('one', 'other')}
    """
    require_babel("required_plural_arms")
    modifiers = modifiers or {}
    cardinal = plural_categories(locale)
    arms: dict[str, tuple[str, ...]] = {}

    for index, token in tik.placeholders():
        name = f"{ICU_ARGUMENT_PREFIX}{index}"
        modifier = modifiers.get(index)
        if modifier is not None and modifier.plural:
            arms[f"{name}{ICU_PLURAL_SUFFIX}"] = cardinal
        if token.type is TokenType.CARDINAL_PLURAL_START:
            arms[name] = cardinal
        elif token.type is TokenType.ORDINAL_PLURAL:
            arms[name] = plural_categories(locale, ordinal=True)

    logger.debug("TIK needs %d plural arguments for %s", len(arms), locale)
    return arms
