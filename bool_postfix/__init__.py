"""Boolean Postfix - convert boolean-algebra expressions to postfix order."""

from ._version import __version__
from .core import (
    TokenKind, Token, format_tokens,
    ErrorKind, ExpressionError, LexError, ParseError,
    Result, tokenize, to_postfix, parse_expression
)
from .cli import main

__all__ = [
    'main', '__version__',
    'TokenKind', 'Token', 'format_tokens',
    'ErrorKind', 'ExpressionError', 'LexError', 'ParseError',
    'Result', 'tokenize', 'to_postfix', 'parse_expression'
]
