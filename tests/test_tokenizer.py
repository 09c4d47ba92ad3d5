"""Tokenizer tests: token spans, escapes, plural blocks and located errors.

Tests for ``tikengine.syntax.tokenizer``:

- Literal fast path and whitespace trimming
- Context prefix
- Magic constant, quoted and plural directives
- Brace escaping
- Every syntax error code with its offset
- Caller-owned buffer semantics
"""

from __future__ import annotations

import pytest

from tikengine.config import Config
from tikengine.diagnostics import DiagnosticCode, TikSyntaxError
from tikengine.enums import TokenType
from tikengine.syntax import TIK, Token, Tokenizer


def tokenize(source: str, config: Config | None = None) -> list[Token]:
    return Tokenizer().tokenize([], source, config)


def kinds(source: str) -> list[TokenType]:
    return [token.type for token in tokenize(source)]


def assert_error(source: str, code: DiagnosticCode, offset: int) -> TikSyntaxError:
    with pytest.raises(TikSyntaxError) as exc_info:
        tokenize(source)
    assert exc_info.value.code is code
    assert exc_info.value.offset == offset
    return exc_info.value


# ============================================================================
# Literals
# ============================================================================


class TestLiterals:
    """Inputs without directives."""

    def test_plain_text_is_one_literal(self) -> None:
        assert tokenize("hello world") == [Token(0, 11, TokenType.LITERAL)]

    def test_surrounding_whitespace_is_trimmed(self) -> None:
        assert tokenize("  hello \n") == [Token(2, 7, TokenType.LITERAL)]

    def test_backslashes_without_braces_stay_literal(self) -> None:
        source = r"C:\path\to"
        tokens = tokenize(source)
        assert tokens == [Token(0, len(source), TokenType.LITERAL)]
        assert tokens[0].value(source) == source

    def test_non_ascii_offsets_are_code_points(self) -> None:
        source = "Grüße {text}"
        assert tokenize(source) == [
            Token(0, 6, TokenType.LITERAL),
            Token(6, 12, TokenType.TEXT),
        ]


# ============================================================================
# Context
# ============================================================================


class TestContext:
    """Optional ``[context]`` prefix."""

    def test_context_token(self) -> None:
        source = "[settings] Save"
        tokens = tokenize(source)
        assert tokens == [
            Token(0, 10, TokenType.CONTEXT),
            Token(11, 15, TokenType.LITERAL),
        ]
        assert TIK(source, tokens).context == "settings"

    def test_context_after_leading_whitespace(self) -> None:
        assert kinds("  [ctx] text") == [TokenType.CONTEXT, TokenType.LITERAL]

    def test_second_bracket_group_is_literal(self) -> None:
        source = "[a] [b] text"
        tokens = tokenize(source)
        assert tokens[1] == Token(4, 12, TokenType.LITERAL)

    def test_context_followed_by_directive(self) -> None:
        assert kinds("[cart] {integer} items") == [
            TokenType.CONTEXT,
            TokenType.INTEGER,
            TokenType.LITERAL,
        ]

    def test_unclosed_context(self) -> None:
        assert_error("[ctx text", DiagnosticCode.CONTEXT_UNCLOSED, 0)

    def test_blank_context(self) -> None:
        assert_error("[   ] text", DiagnosticCode.CONTEXT_EMPTY, 0)

    @pytest.mark.parametrize(
        ("source", "offset"),
        [
            ("[a{b] text", 2),
            ("[a}b] text", 2),
            ("[a[b] text", 2),
            ("[ab\\] text", 3),
        ],
    )
    def test_context_with_illegal_character(self, source: str, offset: int) -> None:
        assert_error(source, DiagnosticCode.CONTEXT_INVALID, offset)

    def test_context_without_text(self) -> None:
        assert_error("[ctx]   ", DiagnosticCode.TEXT_EMPTY, 5)


# ============================================================================
# Directives
# ============================================================================


class TestMagicConstants:
    """``{<magic constant>}`` directives."""

    def test_text_placeholder(self) -> None:
        assert tokenize("{text} suffix") == [
            Token(0, 6, TokenType.TEXT),
            Token(6, 13, TokenType.LITERAL),
        ]

    @pytest.mark.parametrize(
        ("directive", "expected"),
        [
            ("{name}", TokenType.TEXT_WITH_GENDER),
            ("{integer}", TokenType.INTEGER),
            ("{number}", TokenType.NUMBER),
            ("{ordinal}", TokenType.ORDINAL_PLURAL),
            ("{date-full}", TokenType.DATE_FULL),
            ("{date-long}", TokenType.DATE_LONG),
            ("{date-medium}", TokenType.DATE_MEDIUM),
            ("{date-short}", TokenType.DATE_SHORT),
            ("{time-full}", TokenType.TIME_FULL),
            ("{time-long}", TokenType.TIME_LONG),
            ("{time-medium}", TokenType.TIME_MEDIUM),
            ("{time-short}", TokenType.TIME_SHORT),
            ("{currency}", TokenType.CURRENCY),
            ("{they}", TokenType.GENDER_PRONOUN),
            ("{themself}", TokenType.GENDER_PRONOUN),
        ],
    )
    def test_default_vocabulary(self, directive: str, expected: TokenType) -> None:
        assert tokenize(directive) == [Token(0, len(directive), expected)]

    def test_matching_is_case_insensitive(self) -> None:
        assert kinds("{Text} and {DATE-SHORT} by {Their}") == [
            TokenType.TEXT,
            TokenType.LITERAL,
            TokenType.DATE_SHORT,
            TokenType.LITERAL,
            TokenType.GENDER_PRONOUN,
        ]

    def test_adjacent_directives(self) -> None:
        assert tokenize("{text}{integer}") == [
            Token(0, 6, TokenType.TEXT),
            Token(6, 15, TokenType.INTEGER),
        ]

    def test_mixed_message(self) -> None:
        source = "{name} had {# messages} on {date-medium} at {time-full}"
        assert tokenize(source) == [
            Token(0, 6, TokenType.TEXT_WITH_GENDER),
            Token(6, 11, TokenType.LITERAL),
            Token(11, 14, TokenType.CARDINAL_PLURAL_START),
            Token(14, 22, TokenType.LITERAL),
            Token(22, 23, TokenType.CARDINAL_PLURAL_END),
            Token(23, 27, TokenType.LITERAL),
            Token(27, 40, TokenType.DATE_MEDIUM),
            Token(40, 44, TokenType.LITERAL),
            Token(44, 55, TokenType.TIME_FULL),
        ]

    def test_unknown_placeholder(self) -> None:
        error = assert_error("Hi {foo}", DiagnosticCode.UNKNOWN_PLACEHOLDER, 3)
        assert "{foo}" in error.diagnostic.message

    def test_padded_constant_is_unknown(self) -> None:
        assert_error("{ text }", DiagnosticCode.UNKNOWN_PLACEHOLDER, 0)

    def test_unclosed_placeholder(self) -> None:
        assert_error("Hi {text", DiagnosticCode.UNCLOSED_PLACEHOLDER, 3)

    def test_unexpected_closure(self) -> None:
        assert_error("a } b", DiagnosticCode.UNEXPECTED_CLOSURE, 2)

    def test_error_offset_is_relative_to_raw_input(self) -> None:
        assert_error("   }", DiagnosticCode.UNEXPECTED_CLOSURE, 3)

    def test_custom_vocabulary(self) -> None:
        config = Config.with_constants(number="zahl", cardinal_plural_start="viele")
        tokens = tokenize("{zahl} und {viele Sachen}", config)
        assert [t.type for t in tokens] == [
            TokenType.NUMBER,
            TokenType.LITERAL,
            TokenType.CARDINAL_PLURAL_START,
            TokenType.LITERAL,
            TokenType.CARDINAL_PLURAL_END,
        ]


class TestStringPlaceholders:
    """Quoted ``{"..."}`` text placeholders."""

    def test_quoted_placeholder_is_text(self) -> None:
        source = '{"John"} has'
        tokens = tokenize(source)
        assert tokens == [Token(0, 8, TokenType.TEXT), Token(8, 12, TokenType.LITERAL)]

    def test_inner_spaces_are_allowed(self) -> None:
        assert kinds('{"John Doe"}') == [TokenType.TEXT]

    def test_empty(self) -> None:
        assert_error('{""}', DiagnosticCode.STRING_PLACEHOLDER_EMPTY, 0)

    def test_leading_space(self) -> None:
        assert_error('{" John"}', DiagnosticCode.STRING_PLACEHOLDER_INVALID_SPACE, 2)

    def test_trailing_space(self) -> None:
        assert_error('{"John "}', DiagnosticCode.STRING_PLACEHOLDER_INVALID_SPACE, 6)

    @pytest.mark.parametrize(
        ("source", "offset"),
        [
            ('{"Jo{hn"}', 4),
            ('{"Jo}hn"}', 4),
            ('{"Jo\\hn"}', 4),
            ('{"abc }', 6),
        ],
    )
    def test_illegal_characters(self, source: str, offset: int) -> None:
        assert_error(source, DiagnosticCode.STRING_PLACEHOLDER_ILLEGAL_CHARS, offset)

    def test_quote_not_followed_by_brace(self) -> None:
        assert_error('{"John" }', DiagnosticCode.STRING_PLACEHOLDER_ILLEGAL_CHARS, 6)

    @pytest.mark.parametrize("source", ['{"John', '{"', 'x {""'])
    def test_unclosed(self, source: str) -> None:
        assert_error(source, DiagnosticCode.UNCLOSED_STRING_PLACEHOLDER, source.index("{"))


# ============================================================================
# Plural blocks
# ============================================================================


class TestPluralBlocks:
    """``{# ...}`` cardinal plural blocks."""

    def test_plural_block(self) -> None:
        assert tokenize("You have {# messages}") == [
            Token(0, 9, TokenType.LITERAL),
            Token(9, 12, TokenType.CARDINAL_PLURAL_START),
            Token(12, 20, TokenType.LITERAL),
            Token(20, 21, TokenType.CARDINAL_PLURAL_END),
        ]

    def test_start_token_spans_whole_whitespace_run(self) -> None:
        assert tokenize("{#   cats}")[0] == Token(0, 5, TokenType.CARDINAL_PLURAL_START)

    def test_directive_inside_block(self) -> None:
        assert tokenize("{# x {text}}") == [
            Token(0, 3, TokenType.CARDINAL_PLURAL_START),
            Token(3, 5, TokenType.LITERAL),
            Token(5, 11, TokenType.TEXT),
            Token(11, 12, TokenType.CARDINAL_PLURAL_END),
        ]

    def test_consecutive_blocks(self) -> None:
        assert kinds("{# a}{# b}") == [
            TokenType.CARDINAL_PLURAL_START,
            TokenType.LITERAL,
            TokenType.CARDINAL_PLURAL_END,
            TokenType.CARDINAL_PLURAL_START,
            TokenType.LITERAL,
            TokenType.CARDINAL_PLURAL_END,
        ]

    def test_opener_without_whitespace_is_unknown(self) -> None:
        assert_error("{#messages}", DiagnosticCode.UNKNOWN_PLACEHOLDER, 0)

    def test_nested_block(self) -> None:
        assert_error("{# a {# b}}", DiagnosticCode.NESTED_PLURALIZATION, 5)

    def test_nested_block_reported_before_directive_start(self) -> None:
        assert_error("{# {# b}}", DiagnosticCode.NESTED_PLURALIZATION, 3)

    @pytest.mark.parametrize("source", ["{# {text}}", '{# {"x"} y}', "{# {integer} items}"])
    def test_directive_starts_block(self, source: str) -> None:
        assert_error(source, DiagnosticCode.DIRECTIVE_STARTS_CARDINAL_PLURAL, 3)

    def test_empty_block(self) -> None:
        assert_error("{# }", DiagnosticCode.CARDINAL_PLURAL_EMPTY, 3)

    def test_unclosed_block(self) -> None:
        assert_error("You have {# messages", DiagnosticCode.UNCLOSED_PLACEHOLDER, 9)


# ============================================================================
# Escapes
# ============================================================================


class TestEscapes:
    """Backslash escaping of braces."""

    def test_escaped_braces_are_literal(self) -> None:
        source = r"\{text\}"
        tokens = tokenize(source)
        assert tokens == [Token(0, 8, TokenType.LITERAL)]
        assert tokens[0].value(source) == "{text}"

    def test_escaped_backslash_leaves_brace_live(self) -> None:
        source = r"\\{text}"
        tokens = tokenize(source)
        assert tokens == [Token(0, 2, TokenType.LITERAL), Token(2, 8, TokenType.TEXT)]
        assert tokens[0].value(source) == "\\"

    def test_odd_run_escapes(self) -> None:
        source = r"a\\\{b"
        tokens = tokenize(source)
        assert tokens == [Token(0, len(source), TokenType.LITERAL)]
        assert tokens[0].value(source) == r"a\{b"

    def test_escaped_closing_brace_inside_placeholder_body(self) -> None:
        assert_error(r"{text\}", DiagnosticCode.UNCLOSED_PLACEHOLDER, 0)

    def test_escaped_brace_inside_plural_block(self) -> None:
        source = r"{# \{x\} items}"
        tokens = tokenize(source)
        assert [t.type for t in tokens] == [
            TokenType.CARDINAL_PLURAL_START,
            TokenType.LITERAL,
            TokenType.CARDINAL_PLURAL_END,
        ]
        assert tokens[1].value(source) == "{x} items"


# ============================================================================
# Empty input and buffer handling
# ============================================================================


class TestEmptyInput:
    """TEXT_EMPTY is reported at offset 0."""

    @pytest.mark.parametrize("source", ["", "   ", "\n\t "])
    def test_empty(self, source: str) -> None:
        assert_error(source, DiagnosticCode.TEXT_EMPTY, 0)


class TestBuffer:
    """Caller-owned buffer semantics."""

    def test_appends_to_existing_buffer(self) -> None:
        marker = Token(0, 0, TokenType.LITERAL)
        buffer = [marker]
        result = Tokenizer().tokenize(buffer, "{text}")
        assert result is buffer
        assert buffer == [marker, Token(0, 6, TokenType.TEXT)]

    def test_failure_leaves_buffer_unchanged(self) -> None:
        marker = Token(0, 0, TokenType.LITERAL)
        buffer = [marker]
        with pytest.raises(TikSyntaxError):
            Tokenizer().tokenize(buffer, "ok {text} {# }")
        assert buffer == [marker]
