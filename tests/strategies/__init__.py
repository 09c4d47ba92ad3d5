"""Hypothesis strategies for TIKEngine property-based testing.

Usage:
    from tests.strategies import literal_texts, tik_sources
"""

from .tik import (
    DEFAULT_DIRECTIVES,
    escapable_texts,
    literal_texts,
    modifier_maps,
    tik_sources,
)

__all__ = [
    "DEFAULT_DIRECTIVES",
    "escapable_texts",
    "literal_texts",
    "modifier_maps",
    "tik_sources",
]
