"""Single-pass, escape-aware TIK tokenizer.

Architecture:
    The tokenizer works directly on character offsets of the raw input.
    After trimming surrounding whitespace and reading the optional
    ``[context]``, it either takes the fast path (no braces at all: one
    literal) or scans brace to brace with a single combined search
    (:data:`~tikengine.syntax.primitives.BRACE_PATTERN`). Text between
    directives is never copied; literal tokens are spans.

Directives:
    - ``{"example"}`` - quoted text placeholder (TEXT)
    - ``{<opener> ...}`` - plural block; the opener must be followed by
      whitespace and the block closes at the next live ``}``
    - ``{<magic constant>}`` - any other configured constant, matched
      case-insensitively

Errors:
    Every violation raises :class:`~tikengine.diagnostics.TikSyntaxError`
    at the offending offset. There is no recovery and no partial result.

Python 3.13+. Zero external dependencies.
"""

from typing import NoReturn

from tikengine.config import DEFAULT_CONFIG, Config
from tikengine.constants import CONTEXT_FORBIDDEN_CHARS, STRING_PLACEHOLDER_FORBIDDEN_CHARS
from tikengine.diagnostics import Diagnostic, ErrorTemplate, TikSyntaxError
from tikengine.enums import TokenType

from .primitives import (
    BRACE_PATTERN,
    find_unescaped,
    is_escaped,
    skip_whitespace,
    skip_whitespace_backward,
)
from .tokens import Token

__all__ = ["Tokenizer"]


class _Scan:
    """Mutable state of one tokenize() call."""

    __slots__ = ("body_start", "buffer", "end", "literal_start", "plural_open", "plural_tokens")

    def __init__(self, buffer: list[Token], body_start: int, end: int) -> None:
        self.buffer = buffer
        self.body_start = body_start
        self.end = end
        self.literal_start = body_start
        # Offset of the '{' of the open plural block, or -1.
        self.plural_open = -1
        # len(buffer) right after the CARDINAL_PLURAL_START token.
        self.plural_tokens = 0

    def flush_literal(self, upto: int) -> None:
        """Emit the pending literal run ending at ``upto``, if non-empty."""
        if upto > self.literal_start:
            self.buffer.append(Token(self.literal_start, upto, TokenType.LITERAL))


class Tokenizer:
    """TIK tokenizer.

    Stateless across calls; the caller owns the token buffer, which lets
    high-throughput callers reuse one list for many inputs.

    The configuration must already be validated (see
    :meth:`~tikengine.config.Config.validate`); the tokenizer performs no
    vocabulary checks of its own.

    Example:
        >>> tokens = Tokenizer().tokenize([], "You have {# messages}")
        >>> [t.type.name for t in tokens]
        ['LITERAL', 'CARDINAL_PLURAL_START', 'LITERAL', 'CARDINAL_PLURAL_END']
    """

    __slots__ = ()

    def tokenize(
        self, buffer: list[Token], source: str, config: Config | None = None
    ) -> list[Token]:
        """Append all tokens of source to buffer and return the buffer.

        Args:
            buffer: List to append tokens to (usually empty)
            source: Raw TIK input
            config: Validated configuration (default: DEFAULT_CONFIG)

        Returns:
            ``buffer`` with the tokens appended

        Raises:
            TikSyntaxError: At the first violation. Tokens appended before
                the failure are removed again.
        """
        config = config if config is not None else DEFAULT_CONFIG
        mark = len(buffer)
        try:
            self._tokenize(buffer, source, config)
        except TikSyntaxError:
            del buffer[mark:]
            raise
        return buffer

    def _tokenize(self, buffer: list[Token], source: str, config: Config) -> None:
        start = skip_whitespace(source, 0, len(source))
        end = skip_whitespace_backward(source, start, len(source))
        if start >= end:
            _fail(ErrorTemplate.text_empty(source, 0), source)

        if source[start] == "[":
            start = self._read_context(buffer, source, start, end)

        if BRACE_PATTERN.search(source, start, end) is None:
            # Fast path: no directives at all.
            buffer.append(Token(start, end, TokenType.LITERAL))
            return

        self._scan_directives(_Scan(buffer, start, end), source, config)

    def _read_context(self, buffer: list[Token], source: str, start: int, end: int) -> int:
        """Read ``[context]`` at start and return the offset of the text body."""
        close = source.find("]", start + 1, end)
        if close == -1:
            _fail(ErrorTemplate.context_unclosed(source, start), source)

        body = source[start + 1 : close]
        if not body.strip():
            _fail(ErrorTemplate.context_empty(source, start), source)
        for i, char in enumerate(body):
            if char in CONTEXT_FORBIDDEN_CHARS:
                _fail(ErrorTemplate.context_invalid(source, start + 1 + i), source)

        buffer.append(Token(start, close + 1, TokenType.CONTEXT))

        body_start = skip_whitespace(source, close + 1, end)
        if body_start >= end:
            _fail(ErrorTemplate.text_empty(source, body_start), source)
        return body_start

    def _scan_directives(self, scan: _Scan, source: str, config: Config) -> None:
        pos = scan.body_start
        while (match := BRACE_PATTERN.search(source, pos, scan.end)) is not None:
            at = match.start()
            if is_escaped(source, at, scan.body_start):
                pos = at + 1
                continue

            if source[at] == "}":
                pos = self._close_plural(scan, source, at)
            else:
                scan.flush_literal(at)
                pos = self._read_directive(scan, source, at, config)
            scan.literal_start = pos

        if scan.plural_open != -1:
            _fail(ErrorTemplate.unclosed_placeholder(source, scan.plural_open), source)
        scan.flush_literal(scan.end)

    def _close_plural(self, scan: _Scan, source: str, at: int) -> int:
        """Handle a live '}' in the text body and return the next position."""
        if scan.plural_open == -1:
            _fail(ErrorTemplate.unexpected_closure(source, at), source)
        scan.flush_literal(at)
        if len(scan.buffer) == scan.plural_tokens:
            _fail(ErrorTemplate.cardinal_plural_empty(source, at), source)
        scan.buffer.append(Token(at, at + 1, TokenType.CARDINAL_PLURAL_END))
        scan.plural_open = -1
        return at + 1

    def _read_directive(self, scan: _Scan, source: str, at: int, config: Config) -> int:
        """Read the directive opened by the live '{' at ``at``.

        Returns:
            Position right after the directive (or after the plural opener)
        """
        opener_end = self._match_plural_opener(source, at, scan.end, config)
        if opener_end != -1:
            if scan.plural_open != -1:
                _fail(ErrorTemplate.nested_pluralization(source, at), source)
            body_start = skip_whitespace(source, opener_end, scan.end)
            scan.buffer.append(Token(at, body_start, TokenType.CARDINAL_PLURAL_START))
            scan.plural_open = at
            scan.plural_tokens = len(scan.buffer)
            return body_start

        if scan.plural_open != -1 and len(scan.buffer) == scan.plural_tokens:
            _fail(ErrorTemplate.directive_starts_cardinal_plural(source, at), source)

        if at + 1 < scan.end and source[at + 1] == '"':
            return self._read_string_placeholder(scan, source, at)

        close = find_unescaped(source, "}", at + 1, scan.end, scan.body_start)
        if close == -1:
            _fail(ErrorTemplate.unclosed_placeholder(source, at), source)

        body = source[at + 1 : close]
        token_type = config.vocabulary.get(body.casefold())
        if token_type is None:
            _fail(ErrorTemplate.unknown_placeholder(source, at, body), source)
        scan.buffer.append(Token(at, close + 1, token_type))
        return close + 1

    @staticmethod
    def _match_plural_opener(source: str, at: int, end: int, config: Config) -> int:
        """Return the end of the plural opener after '{' at ``at``, or -1.

        The opener matches case-insensitively and must be followed by
        whitespace inside the text body.
        """
        opener = config.magic_constants.cardinal_plural_start
        opener_end = at + 1 + len(opener)
        if opener_end >= end:
            return -1
        if source[at + 1 : opener_end].casefold() != opener.casefold():
            return -1
        if not source[opener_end].isspace():
            return -1
        return opener_end

    def _read_string_placeholder(self, scan: _Scan, source: str, at: int) -> int:
        """Read a quoted text placeholder ``{"..."}`` starting at ``at``."""
        body_start = at + 2
        i = body_start
        while i < scan.end:
            char = source[i]
            if char == '"':
                break
            if char in STRING_PLACEHOLDER_FORBIDDEN_CHARS:
                _fail(ErrorTemplate.string_placeholder_illegal_chars(source, i), source)
            i += 1
        else:
            _fail(ErrorTemplate.unclosed_string_placeholder(source, at), source)

        quote = i
        if quote + 1 >= scan.end:
            _fail(ErrorTemplate.unclosed_string_placeholder(source, at), source)
        if source[quote + 1] != "}":
            _fail(ErrorTemplate.string_placeholder_illegal_chars(source, quote), source)

        if quote == body_start:
            _fail(ErrorTemplate.string_placeholder_empty(source, at), source)
        if source[body_start].isspace():
            _fail(ErrorTemplate.string_placeholder_invalid_space(source, body_start), source)
        if source[quote - 1].isspace():
            _fail(ErrorTemplate.string_placeholder_invalid_space(source, quote - 1), source)

        scan.buffer.append(Token(at, quote + 2, TokenType.TEXT))
        return quote + 2


def _fail(diagnostic: Diagnostic, source: str) -> NoReturn:
    """Raise TikSyntaxError for diagnostic."""
    raise TikSyntaxError(diagnostic, source)
