"""TIK to ICU MessageFormat translation.

The translator walks the token sequence of a parsed TIK once and writes an
incomplete ICU message: every placeholder becomes a positional argument
(``arg0``, ``arg1``, ...) in the order it appears, and every plural block
becomes the ``other`` arm of an ICU ``plural``. Translators later fill in
the remaining plural/select arms for their locale.

Modifiers:
    Placeholders such as ``{name}`` carry no grammatical information the
    target language may need. Callers can request agreement per positional
    index with :class:`ICUModifier`; the placeholder is then wrapped in
    ``{argN_gender, select, other {...}}`` and/or
    ``{argN_plural, plural, other {...}}`` (gender outermost).

Literal Text:
    ICU apostrophe quoting is applied to literal text: ``'`` is doubled,
    runs of ``{`` and ``}`` are quoted, and inside a plural arm so is ``#``.

Python 3.13+. Zero external dependencies.
"""

import io
import logging
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TypeVar

from tikengine.config import DEFAULT_CONFIG, Config
from tikengine.constants import ICU_ARGUMENT_PREFIX, ICU_GENDER_SUFFIX, ICU_PLURAL_SUFFIX
from tikengine.enums import TokenType
from tikengine.syntax.tokens import TIK, Token

__all__ = ["ICUModifier", "ICUTranslator", "escape_literal"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ICUModifier:
    """Agreement requested for one positional placeholder.

    Attributes:
        gender: Wrap the placeholder in a gender ``select``
        plural: Wrap the placeholder in a cardinal ``plural``
    """

    gender: bool = False
    plural: bool = False


_DATE_TIME_STYLES: dict[TokenType, tuple[str, str]] = {
    TokenType.DATE_FULL: ("date", "full"),
    TokenType.DATE_LONG: ("date", "long"),
    TokenType.DATE_MEDIUM: ("date", "medium"),
    TokenType.DATE_SHORT: ("date", "short"),
    TokenType.TIME_FULL: ("time", "full"),
    TokenType.TIME_LONG: ("time", "long"),
    TokenType.TIME_MEDIUM: ("time", "medium"),
    TokenType.TIME_SHORT: ("time", "short"),
}

_BRACE_RUN_PATTERN = re.compile(r"[{}]+")
_PLURAL_ARM_RUN_PATTERN = re.compile(r"[{}#]+")


def escape_literal(text: str, *, in_plural: bool = False) -> str:
    """Quote text for use as literal content of an ICU message.

    Example:
        >>> escape_literal("it's {fine}")
        "it''s '{'fine'}'"
        >>> escape_literal("#1", in_plural=True)
        "'#'1"
    """
    text = text.replace("'", "''")
    pattern = _PLURAL_ARM_RUN_PATTERN if in_plural else _BRACE_RUN_PATTERN
    return pattern.sub(lambda m: f"'{m.group()}'", text)


class ICUTranslator:
    """Reusable TIK to ICU message translator.

    Holds one output buffer that is reset on every call, so an instance is
    not safe for concurrent use. Use one translator per worker.

    Example:
        >>> from tikengine.syntax import parse
        >>> ICUTranslator().translate(parse("You have {# messages}"))
        'You have {arg0, plural, other {# messages}}'
    """

    __slots__ = ("_buffer", "_config")

    def __init__(self, config: Config | None = None) -> None:
        """Initialize the translator.

        Args:
            config: Configuration (default: DEFAULT_CONFIG); validated here

        Raises:
            TikConfigError: If config is invalid
        """
        if config is None:
            config = DEFAULT_CONFIG
        else:
            config.validate()
        self._config = config
        self._buffer = io.StringIO()

    @property
    def config(self) -> Config:
        """The configuration in use."""
        return self._config

    def translate(self, tik: TIK, modifiers: Mapping[int, ICUModifier] | None = None) -> str:
        """Translate tik into an ICU message skeleton.

        Args:
            tik: Parsed TIK
            modifiers: Optional agreement overlay keyed by positional index

        Returns:
            ICU message string
        """
        return self.translate_fn(tik, lambda buffer: buffer.getvalue(), modifiers)

    def translate_fn(
        self,
        tik: TIK,
        fn: Callable[[io.StringIO], T],
        modifiers: Mapping[int, ICUModifier] | None = None,
    ) -> T:
        """Translate tik into the internal buffer and pass it to fn.

        The buffer is reset on the next call; fn must not retain it.

        Returns:
            Whatever fn returns
        """
        buffer = self._buffer
        buffer.seek(0)
        buffer.truncate()
        self._write(buffer, tik, modifiers or {})
        return fn(buffer)

    def _write(self, out: io.StringIO, tik: TIK, modifiers: Mapping[int, ICUModifier]) -> None:
        index = 0
        in_plural = False
        # Closers of modifier wrappers around an open plural block.
        pending_closers = ""

        for token in tik.tokens:
            match token.type:
                case TokenType.CONTEXT:
                    continue
                case TokenType.LITERAL:
                    out.write(escape_literal(tik.value(token), in_plural=in_plural))
                    continue
                case TokenType.CARDINAL_PLURAL_END:
                    out.write("}}")
                    out.write(pending_closers)
                    pending_closers = ""
                    in_plural = False
                    continue

            name = f"{ICU_ARGUMENT_PREFIX}{index}"
            opening, closing = self._wrappers(name, modifiers.get(index))
            out.write(opening)
            if token.type is TokenType.CARDINAL_PLURAL_START:
                out.write(f"{{{name}, plural, other {{# ")
                pending_closers = closing
                in_plural = True
            else:
                out.write(self._placeholder(tik, token, name))
                out.write(closing)
            index += 1

        self._check_modifiers(modifiers, index)
        logger.debug("Translated TIK with %d positional arguments", index)

    @staticmethod
    def _wrappers(name: str, modifier: ICUModifier | None) -> tuple[str, str]:
        """Return the (opening, closing) text of the modifier overlay for name."""
        if modifier is None:
            return "", ""
        opening = closing = ""
        if modifier.gender:
            opening += f"{{{name}{ICU_GENDER_SUFFIX}, select, other {{"
            closing = "}}" + closing
        if modifier.plural:
            opening += f"{{{name}{ICU_PLURAL_SUFFIX}, plural, other {{"
            closing = "}}" + closing
        return opening, closing

    def _placeholder(self, tik: TIK, token: Token, name: str) -> str:
        """ICU argument for a single-token placeholder."""
        match token.type:
            case TokenType.TEXT | TokenType.TEXT_WITH_GENDER:
                return f"{{{name}}}"
            case TokenType.INTEGER:
                return f"{{{name}, number, integer}}"
            case TokenType.NUMBER:
                return f"{{{name}, number}}"
            case TokenType.CURRENCY:
                return f"{{{name}, number, ::currency/auto}}"
            case TokenType.ORDINAL_PLURAL:
                suffix = escape_literal(self._config.ordinal_suffix, in_plural=True)
                return f"{{{name}, selectordinal, other {{#{suffix}}}}}"
            case TokenType.GENDER_PRONOUN:
                pronoun = escape_literal(tik.text(token)[1:-1])
                return f"{{{name}, select, other {{{pronoun}}}}}"
            case _:
                kind, style = _DATE_TIME_STYLES[token.type]
                return f"{{{name}, {kind}, {style}}}"

    @staticmethod
    def _check_modifiers(modifiers: Mapping[int, ICUModifier], count: int) -> None:
        for index in modifiers:
            if not 0 <= index < count:
                logger.warning(
                    "Modifier for positional index %d ignored: TIK has %d placeholders",
                    index,
                    count,
                )
