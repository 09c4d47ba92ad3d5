"""Command-line interface tests.

Tests for ``tikengine.cli``.
"""

from __future__ import annotations

import io
import json

import pytest

from tikengine.cli import build_modifiers, format_tokens, main
from tikengine.icu import ICUModifier
from tikengine.syntax import parse

EXAMPLE = '{"John"} has {# messages} with a similar {"status"}.'


class TestMain:
    """End-to-end runs of main()."""

    def test_translates_argument(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["You have {# messages}"]) == 0
        assert capsys.readouterr().out == "You have {arg0, plural, other {# messages}}\n"

    def test_modifiers(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([EXAMPLE, "--gender", "0", "--plural", "2"]) == 0
        assert capsys.readouterr().out.strip() == (
            "{arg0_gender, select, other {{arg0}}} has "
            "{arg1, plural, other {# messages}} with a similar "
            "{arg2_plural, plural, other {{arg2}}}."
        )

    def test_token_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--tokens", "{text} ok"]) == 0
        out = capsys.readouterr().out
        assert "TOKENS: 2" in out
        assert "0-6: '{text}' (text)" in out
        assert "6-9: ' ok' (literal)" in out

    def test_reads_stdin(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("{integer} left\n"))
        assert main([]) == 0
        assert capsys.readouterr().out == "{arg0, number, integer} left\n"

    def test_syntax_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["You have {# }"]) == 1
        err = capsys.readouterr().err
        assert "error[CARDINAL_PLURAL_EMPTY]" in err
        assert "You have {# }\n            ^" in err

    def test_json_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--error-format", "json", "a } b"]) == 1
        data = json.loads(capsys.readouterr().err)
        assert data["code"] == "UNEXPECTED_CLOSURE"
        assert data["start"] == 2

    def test_simple_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--error-format", "simple", ""]) == 1
        assert capsys.readouterr().err.startswith("TEXT_EMPTY at 1:1: ")

    def test_invalid_error_format(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--error-format", "xml", "x"])
        assert exc_info.value.code == 2


class TestHelpers:
    """Formatting helpers."""

    def test_build_modifiers(self) -> None:
        assert build_modifiers([1], [1, 3]) == {
            1: ICUModifier(gender=True, plural=True),
            3: ICUModifier(plural=True),
        }

    def test_build_modifiers_empty(self) -> None:
        assert build_modifiers([], []) == {}

    def test_format_tokens(self) -> None:
        assert format_tokens(parse("[ctx] hi")) == (
            "0-5: '[ctx]' (context)\n6-8: 'hi' (literal)"
        )
