"""Position utilities for TIK error reporting.

Token and error offsets are character offsets into the raw input (Python
``str`` indices). These helpers convert them to line/column positions and
render a caret under the offending character.

TIKs are usually single-line, but nothing stops a key from containing
newlines, so lines are split on ``\\n`` only.
"""

__all__ = [
    "column_offset",
    "format_position",
    "get_error_context",
    "get_line_content",
    "line_offset",
]


def _clamp(source: str, pos: int) -> int:
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    return min(pos, len(source))


def line_offset(source: str, pos: int) -> int:
    """Get the 0-based line number of a character offset.

    Args:
        source: Raw TIK input
        pos: Character offset (clamped to the source length)

    Returns:
        0-based line number

    Example:
        >>> line_offset("first\\nsecond", 6)
        1
    """
    return source.count("\n", 0, _clamp(source, pos))


def column_offset(source: str, pos: int) -> int:
    """Get the 0-based column of a character offset.

    Example:
        >>> column_offset("first\\nsecond", 8)
        2
    """
    pos = _clamp(source, pos)
    return pos - source.rfind("\n", 0, pos) - 1


def format_position(source: str, pos: int, zero_based: bool = True) -> str:
    """Format an offset as ``line:column``.

    Example:
        >>> format_position("ab\\ncd", 4, zero_based=False)
        '2:2'
    """
    line = line_offset(source, pos)
    col = column_offset(source, pos)
    if not zero_based:
        line += 1
        col += 1
    return f"{line}:{col}"


def get_line_content(source: str, line_number: int, zero_based: bool = True) -> str:
    """Return one line of source without its newline.

    Raises:
        ValueError: If the line number is negative or out of range
    """
    if not zero_based:
        line_number -= 1
    if line_number < 0:
        msg = f"Line number must be >= 0, got {line_number}"
        raise ValueError(msg)

    lines = source.split("\n")
    if line_number >= len(lines):
        msg = f"Line {line_number} out of range (source has {len(lines)} lines)"
        raise ValueError(msg)
    return lines[line_number]


def get_error_context(source: str, pos: int, context_lines: int = 2, marker: str = "^") -> str:
    """Show the lines around pos with a marker under the offending character.

    Args:
        source: Raw TIK input
        pos: Character offset of the error
        context_lines: Lines to show before and after the error line
        marker: Marker character

    Example:
        >>> print(get_error_context("You have {# }", 12))
        You have {# }
                    ^
    """
    line_num = line_offset(source, pos)
    col_num = column_offset(source, pos)
    lines = source.split("\n")

    first = max(0, line_num - context_lines)
    last = min(len(lines), line_num + context_lines + 1)

    context: list[str] = []
    for i in range(first, last):
        context.append(lines[i])
        if i == line_num:
            context.append(" " * col_num + marker)
    return "\n".join(context)
