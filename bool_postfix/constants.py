"""Shared constants and configuration."""

from types import MappingProxyType

from bool_postfix.core.tokens import TokenKind


# Console styling
CONSOLE_STYLES = {
    'success': 'green',
    'error': 'red', 
    'warning': 'yellow',
    'info': 'cyan',
    'dim': 'dim'
}

# Operator and parenthesis characters (after whitespace removal and uppercasing)
SYMBOL_TOKENS = MappingProxyType({
    '¬': TokenKind.NOT,
    '!': TokenKind.NOT,
    '+': TokenKind.OR,
    '.': TokenKind.AND,
    '(': TokenKind.OPEN_PAREN,
    ')': TokenKind.CLOSE_PAREN,
})

CONSTANT_DIGITS = frozenset({'0', '1'})

# Low → high. AND/OR ties pop (left-associative), NOT never pops on push.
OPERATOR_PRECEDENCE = MappingProxyType({
    TokenKind.OR: 0,
    TokenKind.AND: 1,
    TokenKind.NOT: 2,
})

BINARY_OPERATORS = frozenset({TokenKind.AND, TokenKind.OR})

# Grammar rules checked by the lexer
INVALID_START_KINDS = frozenset({TokenKind.CLOSE_PAREN, TokenKind.AND, TokenKind.OR})
INVALID_END_KINDS = frozenset({TokenKind.OPEN_PAREN, TokenKind.AND, TokenKind.OR, TokenKind.NOT})

# Prompt words that end an interactive session
QUIT_WORDS = frozenset({'quit', 'exit', 'q'})
