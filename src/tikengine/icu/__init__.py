"""ICU MessageFormat generation from parsed TIKs.

The translator has no external dependencies. Plural-arm introspection
(plural_categories, required_plural_arms) needs Babel; its names are
importable without Babel and raise BabelImportError when called.

Python 3.13+.
"""

from .plurals import plural_categories, required_plural_arms
from .translator import ICUModifier, ICUTranslator, escape_literal

__all__ = [
    "ICUModifier",
    "ICUTranslator",
    "escape_literal",
    "plural_categories",
    "required_plural_arms",
]
