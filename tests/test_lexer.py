#!/usr/bin/env python3
"""
Test module for the boolean expression lexer.
File: tests/test_lexer.py

Usage:  python tests/test_lexer.py
        pytest tests/test_lexer.py
"""

import sys

from pathlib import Path
from rich.console import Console

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bool_postfix.core.lexer import tokenize, clean_expression
from bool_postfix.core.tokens import Token, TokenKind
from bool_postfix.core.exceptions import ErrorKind, LexError


console = Console()

A = Token.variable('A')
B = Token.variable('B')
C = Token.variable('C')
AND = Token.operator(TokenKind.AND)
OR = Token.operator(TokenKind.OR)
NOT = Token.operator(TokenKind.NOT)
OPEN = Token.operator(TokenKind.OPEN_PAREN)
CLOSE = Token.operator(TokenKind.CLOSE_PAREN)


def test_single_variable():
    result = tokenize("A")
    assert result.success
    assert result.value == [A]
    print("✓ 'A' → single VAR token")


def test_simple_and():
    result = tokenize("A.B")
    assert result.success
    assert result.value == [A, AND, B]
    print("✓ 'A.B' → VAR AND VAR")


def test_every_symbol():
    test_cases = [
        ("¬A", [NOT, A]),
        ("!A", [NOT, A]),
        ("A+B", [A, OR, B]),
        ("A.B", [A, AND, B]),
        ("(A)", [OPEN, A, CLOSE]),
        ("1.0", [Token.constant('1'), AND, Token.constant('0')]),
    ]

    for text, expected in test_cases:
        result = tokenize(text)
        assert result.success, f"{text!r} failed: {result.message}"
        assert result.value == expected, f"{text!r}: got {result.value}"
        print(f"✓ '{text}' → {[str(t) for t in result.value]}")


def test_whitespace_and_case_are_ignored():
    result = tokenize("  a . ( b\t+ c )\n")
    assert result.success
    assert result.value == [A, AND, OPEN, B, OR, C, CLOSE]
    assert clean_expression(" a +\tb ") == "A+B"
    print("✓ Whitespace stripped and letters uppercased")


def test_invalid_characters():
    test_cases = ["A&B", "A|B", "2", "A.B*C", "ß", "é"]

    for text in test_cases:
        result = tokenize(text)
        assert not result.success, f"{text!r} should fail"
        assert result.kind is ErrorKind.INVALID_CHARACTER
        assert isinstance(result.error, LexError)
        assert result.message.startswith("Invalid character found: ")
        print(f"✓ '{text}' → {result.message}")


def test_invalid_character_reports_first_offender():
    result = tokenize("A#B$")
    assert result.error.detail == '#'
    assert result.message == "Invalid character found: #"
    print("✓ First invalid character is reported")


def test_empty_expression():
    for text in ["", "   ", "\t\n"]:
        result = tokenize(text)
        assert not result.success
        assert result.kind is ErrorKind.EMPTY_EXPRESSION
    print("✓ Empty and blank input rejected")


def test_invalid_start():
    test_cases = [(")A", TokenKind.CLOSE_PAREN), (".A", TokenKind.AND), ("+A", TokenKind.OR)]

    for text, kind in test_cases:
        result = tokenize(text)
        assert result.kind is ErrorKind.INVALID_START
        assert result.error.detail is kind
        assert result.message == f"Expressions cannot start with: {kind.value}"
        print(f"✓ '{text}' → {result.message}")


def test_invalid_end():
    test_cases = [
        ("A(", TokenKind.OPEN_PAREN),
        ("A.", TokenKind.AND),
        ("A+", TokenKind.OR),
        ("A¬", TokenKind.NOT),
    ]

    for text, kind in test_cases:
        result = tokenize(text)
        assert result.kind is ErrorKind.INVALID_END
        assert result.error.detail is kind
        assert result.message == f"Expressions cannot end with: {kind.value}"
        print(f"✓ '{text}' → {result.message}")


def test_start_is_checked_before_end():
    result = tokenize("+")
    assert result.kind is ErrorKind.INVALID_START
    print("✓ '+' reports the start rule first")


def test_adjacent_binary_operators():
    test_cases = ["A..B", "A++B", "A.+B", "A+.B", "A.B+.C"]

    for text in test_cases:
        result = tokenize(text)
        assert result.kind is ErrorKind.ADJACENT_BINARY_OPERATORS, f"{text!r}: {result}"
        print(f"✓ '{text}' → {result.message}")

    result = tokenize("A.+B")
    assert result.message == "AND cannot be next to OR"


def test_last_adjacent_pair_is_checked():
    # The final pair of a valid-ending expression still has to be scanned
    result = tokenize("(A.+)")
    assert result.kind is ErrorKind.ADJACENT_BINARY_OPERATORS
    print("✓ Adjacent operators caught at the end of the sequence")


def test_not_may_repeat():
    for text in ["¬¬A", "!!!A", "A.¬B", "A+!B", "¬(A)"]:
        result = tokenize(text)
        assert result.success, f"{text!r} failed: {result.message}"
    print("✓ Chained NOT accepted")


def test_bracket_counts():
    result = tokenize("(A.B")
    assert result.kind is ErrorKind.MISMATCHED_PARENTHESES

    result = tokenize("((A.B)")
    assert result.kind is ErrorKind.MISMATCHED_PARENTHESES
    assert result.message == "Mismatched brackets"
    print("✓ Unequal bracket counts rejected")


def test_bracket_order_is_not_checked():
    # Equal counts in the wrong order are left for the postfix converter
    result = tokenize("(A.B)).(C")
    assert result.success

    result = tokenize("A).(B")
    assert result.success
    assert result.value == [A, CLOSE, AND, OPEN, B]
    print("✓ Lexer only counts brackets")


def test_tokenize_is_pure():
    first = tokenize("(A+B).¬C")
    second = tokenize("(A+B).¬C")
    assert first.value == second.value
    assert first.value is not second.value
    print("✓ Same text, same tokens")


def test_unwrap_raises_error():
    result = tokenize("A+")
    try:
        result.unwrap()
    except LexError as e:
        assert e.kind is ErrorKind.INVALID_END
    else:
        raise AssertionError("unwrap() should raise")
    print("✓ unwrap() raises the carried LexError")


def run_all_tests() -> bool:
    tests = [value for name, value in globals().items()
             if name.startswith('test_') and callable(value)]
    passed = 0

    for test in tests:
        try:
            test()
            passed += 1
        except AssertionError as e:
            console.print(f"[red]✗ {test.__name__}: {e}[/red]")

    if passed == len(tests):
        console.print(f"[bold green]All {len(tests)} lexer tests passed! ✓[/bold green]")
        return True
    console.print(f"[bold red]{passed}/{len(tests)} lexer tests passed[/bold red]")
    return False


def main() -> int:
    return 0 if run_all_tests() else 1


if __name__ == "__main__":
    sys.exit(main())
