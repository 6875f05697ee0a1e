"""
Infix to Postfix Conversion
File: bool_postfix/core/postfix.py

Operator-precedence (shunting-yard) conversion of a validated token list.

Precedence: parentheses → NOT → AND → OR
- AND and OR are left-associative: an incoming AND/OR pops every stacked
  operator of equal or higher precedence first
- NOT is right-associative and is pushed without popping, so ¬¬A becomes A ¬ ¬
- Parentheses never reach the output
"""

from bool_postfix.constants import OPERATOR_PRECEDENCE, BINARY_OPERATORS
from bool_postfix.core.tokens import Token, TokenKind
from bool_postfix.core.result import Result
from bool_postfix.core.exceptions import ParseError


def to_postfix(tokens: list[Token]) -> Result[list[Token]]:
    """
    Convert tokens from the lexer into postfix order.

    Returns:
        Result holding the postfix token list, or a ParseError for unmatched
        parentheses (or a token kind the converter does not know)
    """
    try:
        return Result.ok(_convert(tokens))
    except ParseError as e:
        return Result.fail(e)


def _convert(tokens: list[Token]) -> list[Token]:
    postfix = []
    op_stack = []

    for token in tokens:
        kind = getattr(token, 'kind', None)

        if kind in (TokenKind.VARIABLE, TokenKind.CONSTANT):
            postfix.append(token)
        elif kind is TokenKind.OPEN_PAREN:
            op_stack.append(token)
        elif kind is TokenKind.CLOSE_PAREN:
            _unwind_to_open_paren(op_stack, postfix)
        elif kind in BINARY_OPERATORS:
            while op_stack and _pops_before(op_stack[-1], kind):
                postfix.append(op_stack.pop())
            op_stack.append(token)
        elif kind is TokenKind.NOT:
            op_stack.append(token)
        else:
            raise ParseError.unexpected_token(kind if kind is not None else token)

    # Whatever is left is emitted in pop order
    while op_stack:
        token = op_stack.pop()
        if token.kind is TokenKind.OPEN_PAREN:
            raise ParseError.mismatched_parentheses()
        postfix.append(token)

    return postfix


def _unwind_to_open_paren(op_stack: list[Token], postfix: list[Token]) -> None:
    """Move operators to the output up to the matching '(' and drop it."""
    while op_stack and op_stack[-1].kind is not TokenKind.OPEN_PAREN:
        postfix.append(op_stack.pop())

    if not op_stack:
        raise ParseError.mismatched_parentheses()

    op_stack.pop()


def _pops_before(top: Token, incoming: TokenKind) -> bool:
    if top.kind not in OPERATOR_PRECEDENCE:
        return False
    return OPERATOR_PRECEDENCE[top.kind] >= OPERATOR_PRECEDENCE[incoming]


# End of file #
