"""
Expression errors for the lexer and postfix converter.
File: bool_postfix/core/exceptions.py
"""

from enum import Enum


class ErrorKind(Enum):
    EMPTY_EXPRESSION = "empty_expression"
    INVALID_CHARACTER = "invalid_character"
    INVALID_START = "invalid_start"
    INVALID_END = "invalid_end"
    ADJACENT_BINARY_OPERATORS = "adjacent_binary_operators"
    MISMATCHED_PARENTHESES = "mismatched_parentheses"
    UNEXPECTED_TOKEN = "unexpected_token"


class ExpressionError(ValueError):
    """
    Raised when an expression cannot be tokenized or converted.

    Carries a discriminable kind alongside the human-readable message so
    callers can either show the message verbatim or map the kind to their
    own text.

    Attributes:
        kind: The ErrorKind describing which rule was violated
        message: Human-readable description
        detail: Offending character or token kind, when there is one
    """

    def __init__(self, kind: ErrorKind, message: str, detail=None):
        self.kind = kind
        self.message = message
        self.detail = detail
        super().__init__(message)


class LexError(ExpressionError):
    """Raised by the lexer for invalid characters and impossible token sequences."""

    @classmethod
    def empty_expression(cls) -> 'LexError':
        return cls(ErrorKind.EMPTY_EXPRESSION, "Expression is empty")

    @classmethod
    def invalid_character(cls, char: str) -> 'LexError':
        return cls(ErrorKind.INVALID_CHARACTER, f"Invalid character found: {char}", char)

    @classmethod
    def invalid_start(cls, kind) -> 'LexError':
        return cls(ErrorKind.INVALID_START, f"Expressions cannot start with: {kind}", kind)

    @classmethod
    def invalid_end(cls, kind) -> 'LexError':
        return cls(ErrorKind.INVALID_END, f"Expressions cannot end with: {kind}", kind)

    @classmethod
    def adjacent_binary_operators(cls, first, second) -> 'LexError':
        return cls(ErrorKind.ADJACENT_BINARY_OPERATORS,
                   f"{first} cannot be next to {second}", first)

    @classmethod
    def mismatched_brackets(cls) -> 'LexError':
        return cls(ErrorKind.MISMATCHED_PARENTHESES, "Mismatched brackets")


class ParseError(ExpressionError):
    """Raised by the postfix converter for structural problems."""

    @classmethod
    def mismatched_parentheses(cls) -> 'ParseError':
        return cls(ErrorKind.MISMATCHED_PARENTHESES, "Mismatched parentheses")

    @classmethod
    def unexpected_token(cls, kind) -> 'ParseError':
        return cls(ErrorKind.UNEXPECTED_TOKEN, f"Unexpected token: {kind}", kind)


# End of file #
