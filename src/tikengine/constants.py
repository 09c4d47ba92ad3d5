"""Shared constants for TIKEngine.

This module provides centralized constants used across the syntax and
ICU packages. Placing constants here avoids circular imports and provides
a single source of truth.

Constants are grouped by domain:
- Input limits: DoS prevention via size constraints
- Lexical metacharacters: Characters with meaning in TIK syntax
- ICU generation: Argument naming used by the translator

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_SOURCE_SIZE",
    # Lexical metacharacters
    "CONTEXT_FORBIDDEN_CHARS",
    "MAGIC_CONSTANT_FORBIDDEN_CHARS",
    "STRING_PLACEHOLDER_FORBIDDEN_CHARS",
    # ICU generation
    "ICU_ARGUMENT_PREFIX",
    "ICU_GENDER_SUFFIX",
    "ICU_PLURAL_SUFFIX",
    "CLDR_PLURAL_CATEGORIES",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum TIK size in characters accepted by Parser (1 MiB of code points).
# TIKs are single messages; anything near this size is almost certainly a
# mis-extracted file rather than a translation key.
MAX_SOURCE_SIZE: int = 1024 * 1024

# ============================================================================
# LEXICAL METACHARACTERS
# ============================================================================

# Characters a context body must not contain.
CONTEXT_FORBIDDEN_CHARS: str = "{}[]\\"

# Characters a configured magic constant must not contain.
MAGIC_CONSTANT_FORBIDDEN_CHARS: str = '{}"\\'

# Characters a quoted text placeholder body must not contain.
STRING_PLACEHOLDER_FORBIDDEN_CHARS: str = '\\{}"'

# ============================================================================
# ICU GENERATION
# ============================================================================

# Positional argument names are ICU_ARGUMENT_PREFIX + index: arg0, arg1, ...
ICU_ARGUMENT_PREFIX: str = "arg"

# Suffixes of the modifier overlay arguments: arg0_gender, arg0_plural.
ICU_GENDER_SUFFIX: str = "_gender"
ICU_PLURAL_SUFFIX: str = "_plural"

# Canonical CLDR plural category order.
CLDR_PLURAL_CATEGORIES: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")
