"""
Token model for boolean expressions.
File: bool_postfix/core/tokens.py

A token is the atomic unit of the grammar: a single-letter variable, a 0/1
constant, one of the three operators, or a parenthesis. Tokens are frozen so a
sequence handed from the lexer to the converter can never be altered in place.
"""

from enum import Enum
from typing import Optional
from dataclasses import dataclass


class TokenKind(Enum):
    VARIABLE = "VAR"
    CONSTANT = "CONST"
    AND = "AND"
    OR = "OR"
    NOT = "NOT"
    OPEN_PAREN = "OPENPAR"
    CLOSE_PAREN = "CLOSEPAR"

    def __str__(self) -> str:
        return self.value


# Canonical text for operator and parenthesis kinds
TOKEN_SYMBOLS = {
    TokenKind.AND: '.',
    TokenKind.OR: '+',
    TokenKind.NOT: '¬',
    TokenKind.OPEN_PAREN: '(',
    TokenKind.CLOSE_PAREN: ')',
}


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: Optional[str] = None    # letter for VARIABLE, digit for CONSTANT

    @classmethod
    def variable(cls, letter: str) -> 'Token':
        return cls(TokenKind.VARIABLE, letter)

    @classmethod
    def constant(cls, digit: str) -> 'Token':
        return cls(TokenKind.CONSTANT, digit)

    @classmethod
    def operator(cls, kind: TokenKind) -> 'Token':
        """Build a value-less token (operator or parenthesis)."""
        if kind in (TokenKind.VARIABLE, TokenKind.CONSTANT):
            raise ValueError(f"{kind} tokens need a value")
        return cls(kind)

    @property
    def is_operand(self) -> bool:
        return self.kind in (TokenKind.VARIABLE, TokenKind.CONSTANT)

    @property
    def is_parenthesis(self) -> bool:
        return self.kind in (TokenKind.OPEN_PAREN, TokenKind.CLOSE_PAREN)

    @property
    def symbol(self) -> str:
        """Render the token as it would be written in an expression."""
        if self.is_operand:
            return self.value
        return TOKEN_SYMBOLS[self.kind]

    def __str__(self) -> str:
        if self.is_operand:
            return f"{self.kind}({self.value})"
        return str(self.kind)


def format_tokens(tokens: list[Token], separator: str = " ", use_names: bool = False) -> str:
    """
    Join a token sequence into display text.

    Args:
        tokens: Tokens in the order they should be shown
        separator: Text placed between tokens
        use_names: Show kind names (VAR(A) AND VAR(B)) instead of symbols (A . B)
    """
    if use_names:
        return separator.join(str(token) for token in tokens)
    return separator.join(token.symbol for token in tokens)


# End of file #
