"""Core conversion stages - lexer, postfix converter and shared types."""

from .tokens import TokenKind, Token, format_tokens
from .exceptions import ErrorKind, ExpressionError, LexError, ParseError
from .result import Result
from .lexer import tokenize
from .postfix import to_postfix
from .pipeline import parse_expression

__all__ = [
    'TokenKind', 'Token', 'format_tokens',
    'ErrorKind', 'ExpressionError', 'LexError', 'ParseError',
    'Result', 'tokenize', 'to_postfix', 'parse_expression'
]
