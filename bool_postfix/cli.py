"""Command-line interface for converting boolean expressions to postfix."""

import sys
import signal
import argparse

from pathlib import Path
from rich.console import Console

from bool_postfix.ui import (
    display_conversion,
    display_summary_table,
    display_token_table,
    prompt_expression
)
from bool_postfix._version import __version__
from bool_postfix.constants import QUIT_WORDS
from bool_postfix.core.lexer import tokenize
from bool_postfix.core.pipeline import parse_expression
from bool_postfix.core.expression_file import ExpressionFileLoader


console = Console()


def setup_signal_handlers():
    """Setup graceful handling of Ctrl+C interruptions."""
    def signal_handler(sig, frame):
        console.print("\n[yellow]Operation interrupted by user[/yellow]")
        sys.exit(130)  # Standard exit code for Ctrl+C

    signal.signal(signal.SIGINT, signal_handler)


epilog_for_argparse = """
Expression Syntax:
    Variables:          A-Z (single letters, case-insensitive)
    Constants:          0  1
    NOT:                ¬A  or  !A     (may be chained: ¬¬A)
    AND:                A.B
    OR:                 A+B
    Grouping:           (A+B).C
    Whitespace is ignored.

Precedence:             parentheses → NOT → AND → OR
                        AND and OR are left-associative, NOT is right-associative

Expression Files (--file):
    One expression per line, blank lines and lines starting with # are ignored.

Examples:
    %(prog)s "A+B.C"                   # → A B C . +
    %(prog)s "(A+B).C" "!!A"           # Several expressions, summary table
    %(prog)s "A.B" --tokens            # Also show the token sequence
    %(prog)s "A.B" --names             # VAR(A) VAR(B) AND
    %(prog)s --file expressions.txt    # Convert every expression in a file
    %(prog)s --interactive             # Prompt until an empty line or 'quit'

Note: No short arguments are provided to ensure clarity.
      Use quotes around expressions containing brackets, '!' or spaces.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bool-postfix",
        description="Boolean Postfix - Convert boolean-algebra expressions to postfix (RPN) order",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog_for_argparse
    )

    parser.add_argument('expressions', nargs='*', metavar='EXPRESSION',
        help='Expression(s) to convert (blank expressions are skipped)')

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}',
        help='Show program version and exit')

    # Input sources
    sources = parser.add_argument_group('input sources')
    sources.add_argument('--file', type=Path, metavar='PATH',
        help='Read expressions from a file, one per line')
    sources.add_argument('--interactive', action='store_true',
        help='Prompt for expressions until an empty line or "quit"')

    # Output options
    output = parser.add_argument_group('output options')
    output.add_argument('--tokens', action='store_true',
        help='Show the token sequence before the postfix form')
    output.add_argument('--names', action='store_true',
        help='Show tokens by kind name (VAR(A) AND) instead of symbols (A .)')
    output.add_argument('--verbose', action='store_true',
        help='Show a table of tokens for every expression')

    return parser


def convert_and_display(expression: str, args: argparse.Namespace):
    """
    Convert one expression and print the outcome.

    Returns:
        The Result, or None when the expression was blank and skipped
    """
    result = parse_expression(expression)
    if result is None:
        console.print("[dim]Skipping blank expression[/dim]")
        return None

    tokens = None
    if args.tokens or args.verbose:
        lexed = tokenize(expression)
        if lexed.success:
            tokens = lexed.value
            if args.verbose:
                display_token_table(tokens)

    display_conversion(expression, result, tokens=tokens if args.tokens else None,
                       use_names=args.names)
    return result


def run_interactive(args: argparse.Namespace, ask=prompt_expression) -> list:
    """Keep converting prompted expressions until an empty line or a quit word."""
    rows = []
    console.print("[cyan]Enter expressions to convert (empty line or 'quit' to finish)[/cyan]")

    while True:
        try:
            expression = ask()
        except EOFError:
            break

        if not expression or not expression.strip() or expression.strip().lower() in QUIT_WORDS:
            break

        result = convert_and_display(expression, args)
        if result is not None:
            rows.append((expression, result))

    return rows


def main(argv=None) -> int:
    """
    Main entry point for Boolean Postfix.

    Returns:
        0 if every expression converted, 1 if any failed or input was missing
    """
    setup_signal_handlers()

    parser = build_parser()
    args = parser.parse_args(argv)

    expressions = list(args.expressions)

    if args.file:
        try:
            expressions.extend(ExpressionFileLoader().load(args.file))
        except ValueError as e:
            console.print(f"[red]Error: {e}[/red]")
            return 1

    if not expressions and not args.interactive:
        console.print("[red]Error: No expressions given (pass EXPRESSION, --file or --interactive)[/red]")
        return 1

    rows = []
    for expression in expressions:
        result = convert_and_display(expression, args)
        if result is not None:
            rows.append((expression, result))

    if args.interactive:
        rows.extend(run_interactive(args))

    if len(rows) > 1:
        console.print()
        display_summary_table(rows, use_names=args.names)

    failed = sum(1 for _, result in rows if not result.success)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
