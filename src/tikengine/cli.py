"""Command-line interface: parse a TIK and print its ICU message.

Usage:
    tikengine '{"John"} has {# messages} with a similar {"status"}.'
    tikengine --gender 0 --plural 2 --tokens '{name} sent {text}'
    echo '{text} arrived' | tikengine

Exit Codes:
    0   TIK translated
    1   Invalid TIK (diagnostic printed to stderr)
    2   Usage error

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from tikengine.diagnostics import DiagnosticFormatter, OutputFormat, TikSyntaxError
from tikengine.icu import ICUModifier, ICUTranslator
from tikengine.syntax import TIK, Parser
from tikengine.syntax.position import get_error_context

__all__ = ["build_modifiers", "format_tokens", "main"]

logger = logging.getLogger(__name__)


def build_modifiers(gender: Sequence[int], plural: Sequence[int]) -> dict[int, ICUModifier]:
    """Combine ``--gender``/``--plural`` indices into a modifier overlay.

    Example:
        >>> build_modifiers([0], [0, 2])
        {0: ICUModifier(gender=True, plural=True), 2: ICUModifier(gender=False, plural=True)}
    """
    genders = set(gender)
    plurals = set(plural)
    return {
        index: ICUModifier(gender=index in genders, plural=index in plurals)
        for index in sorted(genders | plurals)
    }


def format_tokens(tik: TIK) -> str:
    """Render the token table, one ``start-end: 'text' (type)`` line per token."""
    return "\n".join(
        f"{token.start}-{token.end}: {tik.text(token)!r} ({token.type})" for token in tik
    )


def _create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tikengine",
        description="Translate a textual internationalization key (TIK) into an ICU message.",
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="TIK to translate (read from stdin when omitted)",
    )
    parser.add_argument(
        "--gender",
        type=int,
        action="append",
        default=[],
        metavar="N",
        help="Add gender agreement to placeholder N (repeatable)",
    )
    parser.add_argument(
        "--plural",
        type=int,
        action="append",
        default=[],
        metavar="N",
        help="Add plural agreement to placeholder N (repeatable)",
    )
    parser.add_argument(
        "--tokens",
        action="store_true",
        help="Print the token table before the ICU message",
    )
    parser.add_argument(
        "--error-format",
        choices=[fmt.value for fmt in OutputFormat],
        default=OutputFormat.RUST.value,
        help="Diagnostic output style (default: rust)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = _create_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    source = args.text if args.text is not None else sys.stdin.read().rstrip("\n")

    try:
        tik = Parser().parse(source)
    except TikSyntaxError as e:
        formatter = DiagnosticFormatter(output_format=OutputFormat(args.error_format))
        print(formatter.format(e.diagnostic), file=sys.stderr)
        if formatter.output_format is not OutputFormat.JSON:
            print(get_error_context(e.source, e.offset), file=sys.stderr)
        return 1

    if args.tokens:
        print(f"TOKENS: {len(tik)}")
        print(format_tokens(tik))
        print()

    modifiers = build_modifiers(args.gender, args.plural)
    print(ICUTranslator().translate(tik, modifiers))
    return 0


if __name__ == "__main__":
    sys.exit(main())
