"""TIK parser.

Thin orchestration layer over :class:`~tikengine.syntax.tokenizer.Tokenizer`.
A parser owns one validated configuration and one reusable token buffer and
offers two entry points:

- :meth:`Parser.parse_fn` - zero-copy: the callback receives a TIK whose
  token sequence is the parser's internal buffer. It is only valid for the
  duration of the callback; the buffer is cleared and reused on the next call.
- :meth:`Parser.parse` - copying: returns an independently owned TIK.

A Parser instance is not safe for concurrent use. Configurations are; use one
Parser per worker sharing the same Config.

Security:
    Includes a configurable input size limit, checked before tokenizing.
"""

import logging
from collections.abc import Callable
from typing import TypeVar

from tikengine.config import DEFAULT_CONFIG, Config
from tikengine.constants import MAX_SOURCE_SIZE

from .tokenizer import Tokenizer
from .tokens import TIK, Token

__all__ = ["Parser", "parse"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Parser:
    """TIK parser with a reusable token buffer.

    Attributes:
        config: The validated configuration in use
        max_source_size: Maximum input size in characters (0 disables the check)

    Example:
        >>> parser = Parser()
        >>> tik = parser.parse("[cart] You have {# items}")
        >>> tik.context
        'cart'
        >>> parser.parse_fn("{text} ok", len)
        2
    """

    __slots__ = ("_buffer", "_config", "_max_source_size", "_tokenizer")

    def __init__(self, config: Config | None = None, *, max_source_size: int | None = None) -> None:
        """Initialize the parser.

        Args:
            config: Configuration to use (default: DEFAULT_CONFIG). It is
                validated here, once.
            max_source_size: Maximum input size in characters
                (default: MAX_SOURCE_SIZE). Set to 0 to disable the limit.

        Raises:
            TikConfigError: If config is invalid
        """
        if config is None:
            config = DEFAULT_CONFIG
        else:
            config.validate()
        self._config = config
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._tokenizer = Tokenizer()
        self._buffer: list[Token] = []

    @property
    def config(self) -> Config:
        """The configuration in use."""
        return self._config

    @property
    def max_source_size(self) -> int:
        """Maximum allowed input size in characters."""
        return self._max_source_size

    def _check_size(self, source: str) -> None:
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            msg = (
                f"Source size ({len(source):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in Parser constructor to increase limit."
            )
            raise ValueError(msg)

    def parse_fn(self, source: str, fn: Callable[[TIK], T]) -> T:
        """Parse source and pass the TIK to fn without copying tokens.

        The TIK passed to fn shares the parser's internal buffer and must
        not be retained after fn returns.

        Args:
            source: Raw TIK input
            fn: Callback receiving the parsed TIK

        Returns:
            Whatever fn returns

        Raises:
            TikSyntaxError: If source is not a valid TIK (fn is not called)
            ValueError: If source exceeds max_source_size
        """
        self._check_size(source)
        self._buffer.clear()
        self._tokenizer.tokenize(self._buffer, source, self._config)
        return fn(TIK(source, self._buffer))

    def parse(self, source: str) -> TIK:
        """Parse source into an independently owned TIK.

        Args:
            source: Raw TIK input

        Returns:
            TIK with its own copy of the tokens

        Raises:
            TikSyntaxError: If source is not a valid TIK
            ValueError: If source exceeds max_source_size
        """
        self._check_size(source)
        self._buffer.clear()
        self._tokenizer.tokenize(self._buffer, source, self._config)
        logger.debug("Parsed TIK into %d tokens", len(self._buffer))
        return TIK(source, tuple(self._buffer))


def parse(source: str, config: Config | None = None) -> TIK:
    """Parse a TIK.

    Convenience function for Parser.parse().

    Example:
        >>> from tikengine.syntax import parse
        >>> [t.type.name for t in parse("{integer} left")]
        ['INTEGER', 'LITERAL']
    """
    return Parser(config).parse(source)
