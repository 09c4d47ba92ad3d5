"""ICU translator tests: argument emission, literal quoting and modifier overlays.

Tests for ``tikengine.icu.translator``.
"""

from __future__ import annotations

import io
import logging

import pytest

from tikengine.config import Config, MagicConstants, OrdinalPluralConstant
from tikengine.diagnostics import TikConfigError
from tikengine.icu import ICUModifier, ICUTranslator, escape_literal
from tikengine.syntax import parse

GENDER = ICUModifier(gender=True)
PLURAL = ICUModifier(plural=True)
BOTH = ICUModifier(gender=True, plural=True)


def translate(source: str, modifiers: dict[int, ICUModifier] | None = None) -> str:
    return ICUTranslator().translate(parse(source), modifiers)


class TestPlaceholders:
    """One ICU argument per placeholder, in order."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("hello world", "hello world"),
            ("{text} suffix", "{arg0} suffix"),
            ('{"John"} left', "{arg0} left"),
            ("{name} left", "{arg0} left"),
            ("{integer}", "{arg0, number, integer}"),
            ("{number}", "{arg0, number}"),
            ("{currency}", "{arg0, number, ::currency/auto}"),
            ("{date-full}", "{arg0, date, full}"),
            ("{date-long}", "{arg0, date, long}"),
            ("{date-medium}", "{arg0, date, medium}"),
            ("{date-short}", "{arg0, date, short}"),
            ("{time-full}", "{arg0, time, full}"),
            ("{time-long}", "{arg0, time, long}"),
            ("{time-medium}", "{arg0, time, medium}"),
            ("{time-short}", "{arg0, time, short}"),
            ("{ordinal}", "{arg0, selectordinal, other {#th}}"),
            ("{Their} car", "{arg0, select, other {Their}} car"),
        ],
    )
    def test_emission(self, source: str, expected: str) -> None:
        assert translate(source) == expected

    def test_cardinal_plural_block(self) -> None:
        assert translate("You have {# messages}") == "You have {arg0, plural, other {# messages}}"

    def test_positional_order(self) -> None:
        assert translate("{text} paid {currency} on {date-short}") == (
            "{arg0} paid {arg1, number, ::currency/auto} on {arg2, date, short}"
        )

    def test_placeholder_inside_plural_block(self) -> None:
        assert translate("{text} sent {# messages to {name}}") == (
            "{arg0} sent {arg1, plural, other {# messages to {arg2}}}"
        )

    def test_context_is_dropped(self) -> None:
        assert translate("[cart] {integer} items") == "{arg0, number, integer} items"

    def test_custom_ordinal_suffix(self) -> None:
        config = Config(MagicConstants(ordinal_plural=OrdinalPluralConstant("ord", "e")))
        tik = parse("{ord}", config)
        assert ICUTranslator(config).translate(tik) == "{arg0, selectordinal, other {#e}}"


class TestLiteralQuoting:
    """ICU apostrophe quoting of literal text."""

    def test_apostrophe_is_doubled(self) -> None:
        assert translate("it's {text}'s") == "it''s {arg0}''s"

    def test_escaped_braces_are_quoted(self) -> None:
        assert translate(r"\{x\} and {text}") == "'{'x'}' and {arg0}"

    def test_adjacent_braces_share_one_quote(self) -> None:
        assert translate(r"\{\{ x") == "'{{' x"

    def test_hash_quoted_only_inside_plural_arm(self) -> None:
        assert translate("#1 has {# #2 fans}") == "#1 has {arg0, plural, other {# '#'2 fans}}"

    def test_escape_literal(self) -> None:
        assert escape_literal("a'b{c}") == "a''b'{'c'}'"
        assert escape_literal("#") == "#"
        assert escape_literal("#", in_plural=True) == "'#'"


class TestModifiers:
    """Gender/plural overlay."""

    def test_gender(self) -> None:
        assert translate("{name} did it", {0: GENDER}) == (
            "{arg0_gender, select, other {{arg0}}} did it"
        )

    def test_plural(self) -> None:
        assert translate("{text} left", {0: PLURAL}) == (
            "{arg0_plural, plural, other {{arg0}}} left"
        )

    def test_gender_and_plural(self) -> None:
        assert translate("{text}", {0: BOTH}) == (
            "{arg0_gender, select, other {{arg0_plural, plural, other {{arg0}}}}}"
        )

    def test_overlay_wraps_whole_plural_block(self) -> None:
        assert translate("{# apples} left", {0: GENDER}) == (
            "{arg0_gender, select, other {{arg0, plural, other {# apples}}}} left"
        )

    def test_overlay_inside_plural_block(self) -> None:
        assert translate("{# messages from {name}}", {1: GENDER}) == (
            "{arg0, plural, other {# messages from "
            "{arg1_gender, select, other {{arg1}}}}}"
        )

    def test_modifier_index_follows_placeholders(self) -> None:
        assert translate('[ctx] {"John"} and {"Jane"}', {1: GENDER}) == (
            "{arg0} and {arg1_gender, select, other {{arg1}}}"
        )

    def test_no_flags_is_unmodified(self) -> None:
        source = "{name} had {# messages}"
        assert translate(source, {0: ICUModifier(), 1: ICUModifier()}) == translate(source)

    def test_out_of_range_modifier_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="tikengine.icu.translator"):
            result = translate("{text}", {3: GENDER})
        assert result == "{arg0}"
        assert "positional index 3" in caplog.text


class TestTranslatorReuse:
    """Reusable buffer semantics."""

    def test_translate_fn_passes_buffer(self) -> None:
        translator = ICUTranslator()
        buffers: list[io.StringIO] = []

        def grab(buffer: io.StringIO) -> int:
            buffers.append(buffer)
            return len(buffer.getvalue())

        assert translator.translate_fn(parse("{text}"), grab) == len("{arg0}")
        translator.translate_fn(parse("x"), grab)
        assert buffers[0] is buffers[1]

    def test_buffer_is_reset_between_calls(self) -> None:
        translator = ICUTranslator()
        assert translator.translate(parse("a much longer literal text")) == (
            "a much longer literal text"
        )
        assert translator.translate(parse("short")) == "short"

    def test_invalid_config_rejected(self) -> None:
        with pytest.raises(TikConfigError):
            ICUTranslator(Config(MagicConstants(text="")))
