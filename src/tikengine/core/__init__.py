"""Core utilities shared by the syntax and ICU layers.

Exports:
    BabelImportError: Raised when an optional Babel feature is used without Babel
    is_babel_available: Check for the optional Babel dependency
    require_babel: Fail fast when Babel is missing

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel

__all__ = ["BabelImportError", "is_babel_available", "require_babel"]
