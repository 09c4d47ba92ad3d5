"""TIK syntax package.

Provides the tokenizer, the parser and the token/TIK value types.
Separate from ICU generation so tooling (extractors, linters) can parse
TIKs without translating them.

Python 3.13+.
"""

from .parser import Parser, parse
from .tokenizer import Tokenizer
from .tokens import TIK, Token, Tokens

__all__ = [
    "TIK",
    "Parser",
    "Token",
    "Tokenizer",
    "Tokens",
    "parse",
]
