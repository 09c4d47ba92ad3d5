"""Babel compatibility layer for the optional CLDR dependency.

TIKEngine supports two installation modes:
    - Core: `pip install tikengine` (no external dependencies)
    - With CLDR data: `pip install tikengine[babel]` (plural-arm introspection)

The tokenizer, parser and translator never import Babel. Modules that need
CLDR data call :func:`require_babel` at their entry point and import Babel
lazily afterwards, so core installations only fail when such a feature is
actually used.

Usage Pattern:
    from tikengine.core.babel_compat import require_babel

    def plural_categories(locale: str) -> tuple[str, ...]:
        require_babel("plural_categories")  # Raises BabelImportError if missing
        from babel import Locale
        ...

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "BabelImportError",
    "get_babel_locale",
    "get_locale_class",
    "is_babel_available",
    "normalize_locale",
    "require_babel",
]


@functools.lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when a feature needs Babel but it is not installed."""

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install tikengine[babel]"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed and importable (cached)."""
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available.

    Args:
        feature: Name of the feature requiring Babel (for the error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_locale_class() -> type[Locale]:
    """Get the Babel Locale class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_locale_class")
    from babel import Locale  # noqa: PLC0415

    return Locale


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale code to the POSIX form Babel expects.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a cached Babel Locale for a BCP-47 or POSIX locale code.

    Raises:
        BabelImportError: If Babel is not installed
        ValueError: If the locale code is malformed or unknown to CLDR
    """
    locale_class = get_locale_class()
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        return locale_class.parse(normalize_locale(locale_code))
    except UnknownLocaleError as e:
        msg = f"Unknown locale: {locale_code!r}"
        raise ValueError(msg) from e
