"""Primitive scanning utilities for the TIK tokenizer.

This module provides the low-level, position-based helpers the tokenizer
is built from: whitespace skipping, backslash escape parity and escape
resolution for token values.

Escape Rule:
    A brace preceded by an odd number of consecutive backslashes is escaped
    (literal content); an even number leaves it live. Each pair of
    backslashes directly before a brace stands for one literal backslash.
    Backslashes not followed by a brace are ordinary text.

    >>> raw = r"\\{not a placeholder\\}"
    >>> unescape(raw, 0, len(raw))
    '{not a placeholder}'
"""

import re

__all__ = [
    "BRACE_PATTERN",
    "count_preceding_backslashes",
    "find_unescaped",
    "is_escaped",
    "skip_whitespace",
    "skip_whitespace_backward",
    "unescape",
]

# Single combined search for the next brace of either kind, so the scan over
# the text body stays one pass regardless of directive density.
BRACE_PATTERN: re.Pattern[str] = re.compile(r"[{}]")

_ESCAPE_RUN_PATTERN: re.Pattern[str] = re.compile(r"\\+")


def skip_whitespace(source: str, pos: int, end: int) -> int:
    """Return the first position in ``[pos, end)`` that is not Unicode whitespace.

    Returns ``end`` if the whole range is whitespace.
    """
    while pos < end and source[pos].isspace():
        pos += 1
    return pos


def skip_whitespace_backward(source: str, start: int, end: int) -> int:
    """Return the end of ``source[start:end]`` with trailing whitespace removed."""
    while end > start and source[end - 1].isspace():
        end -= 1
    return end


def count_preceding_backslashes(source: str, pos: int, floor: int = 0) -> int:
    """Count consecutive backslashes directly before ``pos``, not looking below ``floor``.

    Bounded backward scan: stops at the first non-backslash character.
    """
    i = pos - 1
    while i >= floor and source[i] == "\\":
        i -= 1
    return pos - 1 - i


def is_escaped(source: str, pos: int, floor: int = 0) -> bool:
    """True if the character at ``pos`` is escaped by an odd backslash run."""
    return count_preceding_backslashes(source, pos, floor) % 2 == 1


def find_unescaped(source: str, char: str, start: int, end: int, floor: int = 0) -> int:
    """Find the first live (unescaped) ``char`` in ``source[start:end]``.

    Args:
        source: Text to search
        char: Single character to find
        start: Search start (inclusive)
        end: Search end (exclusive)
        floor: Lowest position a backslash run may extend to

    Returns:
        Position of the character, or -1 if there is none
    """
    pos = source.find(char, start, end)
    while pos != -1 and is_escaped(source, pos, floor):
        pos = source.find(char, pos + 1, end)
    return pos


def unescape(source: str, start: int, end: int) -> str:
    """Resolve brace escapes in ``source[start:end]``.

    The character after a backslash run is looked up in the full source,
    so a run at the very end of the slice that precedes a live brace
    outside of it is also halved.

    Args:
        source: Full raw TIK input
        start: Slice start (inclusive)
        end: Slice end (exclusive)

    Returns:
        Token value with escapes resolved
    """
    text = source[start:end]
    if "\\" not in text:
        return text

    parts: list[str] = []
    last = 0
    for match in _ESCAPE_RUN_PATTERN.finditer(text):
        run_end = start + match.end()
        following = source[run_end] if run_end < len(source) else ""
        if following not in ("{", "}"):
            continue
        parts.append(text[last : match.start()])
        parts.append("\\" * (len(match.group()) // 2))
        last = match.end()
    parts.append(text[last:])
    return "".join(parts)
