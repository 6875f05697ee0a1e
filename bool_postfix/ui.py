"""User interface components - prompts, displays, interactions."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.prompt import Prompt

from bool_postfix.constants import CONSOLE_STYLES
from bool_postfix.core.tokens import Token, format_tokens
from bool_postfix.core.result import Result

console = Console()


def styled(text: str, style: str) -> str:
    """Wrap escaped text in the markup for one of the CONSOLE_STYLES entries."""
    tag = CONSOLE_STYLES[style]
    return f"[{tag}]{escape(text)}[/{tag}]"


def display_token_table(tokens: list[Token], title: str = "Tokens"):
    """Display a token sequence as a table, one row per token."""
    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Value", style="magenta")
    table.add_column("Symbol", style="green")

    for position, token in enumerate(tokens, 1):
        table.add_row(
            str(position),
            str(token.kind),
            token.value or "",
            escape(token.symbol)
        )

    console.print(table)


def display_conversion(expression: str, result: Result, tokens: list[Token] = None,
                       use_names: bool = False):
    """Show one converted expression, or why it failed."""
    if tokens is not None:
        console.print(f"{styled('Tokens:', 'info')}  {escape(format_tokens(tokens, use_names=use_names))}",
                      highlight=False)

    if result.success:
        postfix = format_tokens(result.value, use_names=use_names)
        console.print(f"{styled('✓', 'success')} {escape(expression)} → {escape(postfix)}",
                      highlight=False)
    else:
        console.print(f"{styled('✗', 'error')} {escape(expression)} → {styled(result.message, 'error')}",
                      highlight=False)


def display_summary_table(rows: list[tuple[str, Result]], use_names: bool = False,
                          title: str = "Conversion Summary"):
    """Display every processed expression with its postfix form or error."""
    table = Table(title=title)
    table.add_column("Expression", style="cyan", no_wrap=True)
    table.add_column("Postfix / Error")
    table.add_column("Status", style="yellow")

    for expression, result in rows:
        if result.success:
            table.add_row(
                escape(expression),
                escape(format_tokens(result.value, use_names=use_names)),
                styled("✓ ok", 'success')
            )
        else:
            table.add_row(
                escape(expression),
                styled(result.message, 'error'),
                styled(f"✗ {result.kind.value}", 'error')
            )

    console.print(table)


def prompt_expression() -> str:
    """Ask for the next expression (empty input ends the session)."""
    return Prompt.ask("Expression", default="", show_default=False)


# End of file #
