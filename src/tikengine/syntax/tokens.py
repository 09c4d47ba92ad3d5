"""TIK token and parsed-TIK value types.

Tokens are spans over the original raw input, not copies of its text:
a token's source text is always ``raw[token.start:token.end]`` and its
value is that slice with brace escapes resolved.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TypeAlias

from tikengine.enums import TokenType

from .primitives import unescape

__all__ = ["TIK", "Token", "Tokens"]


@dataclass(frozen=True, slots=True)
class Token:
    """Lexical TIK token.

    Attributes:
        start: Starting character offset in the raw input (inclusive)
        end: Ending character offset in the raw input (exclusive)
        type: Token type tag

    Example:
        Source: "{text} suffix"
        Tokens: Token(0, 6, TokenType.TEXT), Token(6, 13, TokenType.LITERAL)
    """

    start: int
    end: int
    type: TokenType

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"Token.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Token.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    def text(self, raw: str) -> str:
        """Return the raw source text of this token."""
        return raw[self.start : self.end]

    def value(self, raw: str) -> str:
        """Return the token text with backslash-escaped braces resolved."""
        return unescape(raw, self.start, self.end)


Tokens: TypeAlias = Sequence[Token]
"""Ordered token sequence; order encodes positional argument order."""


@dataclass(frozen=True, slots=True)
class TIK:
    """Parsed and validated textual internationalization key.

    Only produced by a successful parse. Token spans are only meaningful
    relative to this exact ``raw`` string.

    Attributes:
        raw: The original input passed to the parser
        tokens: The token sequence of ``raw``
    """

    raw: str
    tokens: Tokens = ()

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def text(self, token: Token) -> str:
        """Return the raw source text of token."""
        return token.text(self.raw)

    def value(self, token: Token) -> str:
        """Return the unescaped value of token."""
        return token.value(self.raw)

    @property
    def context(self) -> str | None:
        """The stripped context body, or None if the TIK has no context."""
        if self.tokens and self.tokens[0].type is TokenType.CONTEXT:
            token = self.tokens[0]
            return self.raw[token.start + 1 : token.end - 1].strip()
        return None

    def placeholders(self) -> Iterator[tuple[int, Token]]:
        """Iterate over placeholder tokens with their positional index.

        Context, literal and plural block end tokens are skipped; the
        index counts only the yielded tokens: 0, 1, 2, ...

        Example:
            >>> from tikengine.syntax import parse
            >>> tik = parse("[ctx] {text} has {# messages}")
            >>> [(i, t.type.name) for i, t in tik.placeholders()]
            [(0, 'TEXT'), (1, 'CARDINAL_PLURAL_START')]
        """
        index = 0
        for token in self.tokens:
            if not token.type.is_placeholder:
                continue
            yield index, token
            index += 1

    def placeholder_count(self) -> int:
        """Number of positional ICU arguments this TIK needs."""
        return sum(1 for token in self.tokens if token.type.is_placeholder)
