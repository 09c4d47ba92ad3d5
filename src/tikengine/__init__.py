"""TIKEngine - textual internationalization keys to ICU MessageFormat.

A TIK is a source-language message with typed placeholders, written directly
in code: ``"[cart] {name} has {# items} in the cart"``. TIKEngine parses and
validates TIKs and translates them into ICU message skeletons that
translators complete for each locale.

Public API:
    Config - Validated directive vocabulary ("magic constants")
    Parser - Reusable TIK parser
    parse - Parse a TIK with the default configuration
    ICUTranslator - Reusable TIK to ICU translator
    ICUModifier - Per-placeholder gender/plural agreement request
    TIK / Token / TokenType - Parse result types

Exceptions:
    TikError - Base exception class
    TikSyntaxError - Invalid TIK, located at a character offset
    TikConfigError - Invalid configuration

Submodules:
    tikengine.syntax - Tokenizer, parser and position helpers
    tikengine.icu - ICU generation and CLDR plural-arm introspection (Babel)
    tikengine.diagnostics - Diagnostic codes, templates and formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .config import DEFAULT_CONFIG, Config, MagicConstants, OrdinalPluralConstant
from .diagnostics import TikConfigError, TikError, TikSyntaxError
from .enums import TokenType
from .icu import ICUModifier, ICUTranslator
from .syntax import TIK, Parser, Token, parse

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("tikengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_CONFIG",
    "TIK",
    "Config",
    "ICUModifier",
    "ICUTranslator",
    "MagicConstants",
    "OrdinalPluralConstant",
    "Parser",
    "TikConfigError",
    "TikError",
    "TikSyntaxError",
    "Token",
    "TokenType",
    "__version__",
    "parse",
]
