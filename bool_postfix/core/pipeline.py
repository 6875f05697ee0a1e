"""
Expression pipeline: text → tokens → postfix.
File: bool_postfix/core/pipeline.py
"""

from typing import Optional

from bool_postfix.core.tokens import Token
from bool_postfix.core.result import Result
from bool_postfix.core.lexer import tokenize
from bool_postfix.core.postfix import to_postfix


def parse_expression(text: str) -> Optional[Result[list[Token]]]:
    """
    Run both stages on a raw expression.

    Blank input is not an error here: it returns None without reaching the
    lexer, the same as an input box that has just been cleared.
    A lexer failure is returned as-is; otherwise the converter's result is.
    """
    if not text or not text.strip():
        return None

    tokens = tokenize(text)
    if not tokens.success:
        return tokens

    return to_postfix(tokens.value)


# End of file #
