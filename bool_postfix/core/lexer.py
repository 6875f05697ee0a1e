"""
Boolean Expression Lexer
File: bool_postfix/core/lexer.py

Turns raw expression text into an ordered token list and rejects input that
can never form a valid expression.

Architecture:
- Cleanup: all whitespace removed, ASCII letters uppercased
- Classification per character: variable → symbol → constant → error
- Grammar checks over the full list: start, end, adjacent AND/OR, bracket counts
- Fail fast: the first violated rule is the one reported

Only the NUMBER of brackets is checked here. Brackets in the wrong order
(")A.(B") pass the lexer and are reported by the postfix converter.
"""

from string import ascii_lowercase, ascii_uppercase

from bool_postfix.constants import (
    SYMBOL_TOKENS,
    CONSTANT_DIGITS,
    BINARY_OPERATORS,
    INVALID_START_KINDS,
    INVALID_END_KINDS
)
from bool_postfix.core.tokens import Token, TokenKind
from bool_postfix.core.result import Result
from bool_postfix.core.exceptions import LexError


_UPPERCASE = str.maketrans(ascii_lowercase, ascii_uppercase)


#################################################################################################
# Public API functions

def tokenize(text: str) -> Result[list[Token]]:
    """
    Tokenize a boolean expression.

    Variables are single letters (case-insensitive), constants are 0 and 1,
    NOT is '¬' or '!', OR is '+', AND is '.', plus round brackets.

    Returns:
        Result holding the token list, or the LexError for the first problem found
    """
    try:
        tokens = [_classify_character(char) for char in clean_expression(text)]
        _validate_grammar(tokens)
    except LexError as e:
        return Result.fail(e)

    return Result.ok(tokens)


def clean_expression(text: str) -> str:
    """Remove all whitespace and uppercase the letters."""
    return "".join(text.split()).translate(_UPPERCASE)


#################################################################################################
# Private helper functions

def _classify_character(char: str) -> Token:
    if _is_variable(char):
        return Token.variable(char)

    kind = SYMBOL_TOKENS.get(char)
    if kind is not None:
        return Token.operator(kind)

    if char in CONSTANT_DIGITS:
        return Token.constant(char)

    raise LexError.invalid_character(char)


def _is_variable(char: str) -> bool:
    return char in ascii_uppercase


def _validate_grammar(tokens: list[Token]) -> None:
    """Check the rules that do not need a parse, in reporting order."""
    if not tokens:
        raise LexError.empty_expression()

    first = tokens[0].kind
    if first in INVALID_START_KINDS:
        raise LexError.invalid_start(first)

    last = tokens[-1].kind
    if last in INVALID_END_KINDS:
        raise LexError.invalid_end(last)

    # NOT is allowed to repeat (¬¬A), AND/OR are not
    for current, following in zip(tokens, tokens[1:]):
        if current.kind in BINARY_OPERATORS and following.kind in BINARY_OPERATORS:
            raise LexError.adjacent_binary_operators(current.kind, following.kind)

    open_count = sum(1 for token in tokens if token.kind is TokenKind.OPEN_PAREN)
    close_count = sum(1 for token in tokens if token.kind is TokenKind.CLOSE_PAREN)
    if open_count != close_count:
        raise LexError.mismatched_brackets()


# End of file #
