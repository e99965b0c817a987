"""Command-line front end for the calculator.

Usage:
    python -m statecalc press 5 + 3 =          # Press keys, print the display
    python -m statecalc press 9 / 0 = --history
    python -m statecalc eval 7 divide 2        # One-shot calculation
    python -m statecalc eval -5 add 3
    python -m statecalc repl                   # Interactive keypad
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from statecalc.config import Settings, load_settings, parse_log_level
from statecalc.core import CalculatorContext
from statecalc.exceptions import ConfigurationError, InvalidInputError
from statecalc.formatting import format_number, parse_operand
from statecalc.keypad import Keypad
from statecalc.operations import Operation
from statecalc.pipeline import CalculationPipeline

app = typer.Typer(
    name="statecalc",
    help="Four-function keypad calculator",
    no_args_is_help=True,
)
console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

logger = logging.getLogger(__name__)

QUIT_WORDS = frozenset({"q", "quit", "exit"})


def configure_logging(level: str) -> None:
    """Send the package's log records to stderr through rich."""
    package_logger = logging.getLogger("statecalc")
    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)
    package_logger.addHandler(RichHandler(console=err_console, show_path=False))
    package_logger.setLevel(level)


def _settings(ctx: typer.Context) -> Settings:
    if isinstance(ctx.obj, Settings):
        return ctx.obj
    return Settings()


def _render_history(context: CalculatorContext) -> None:
    history = context.history
    if not history:
        err_console.print("[dim]No calculations yet.[/dim]")
        return

    table = Table(title="History", show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Calculation", min_width=20)
    for i, calculation in enumerate(history, start=1):
        table.add_row(str(i), str(calculation))
    console.print(table)


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None, "--log-level", "-l", help="DEBUG, INFO, WARNING, ERROR or CRITICAL"
    ),
) -> None:
    """Load settings and set up logging before any command runs."""
    try:
        settings = load_settings()
        if log_level is not None:
            settings = replace(settings, log_level=parse_log_level(log_level, "--log-level"))
    except ConfigurationError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(2)

    configure_logging(settings.log_level)
    ctx.obj = settings


@app.command("press")
def cmd_press(
    ctx: typer.Context,
    keys: List[str] = typer.Argument(help="Button labels, e.g. 5 + 3 ="),
    show_history: bool = typer.Option(False, "--history", help="Show completed calculations"),
) -> None:
    """Press keys on a fresh calculator and print the display."""
    context = CalculatorContext(settings=_settings(ctx))
    keypad = Keypad(context)
    try:
        display = keypad.press_many(keys)
    except InvalidInputError as e:
        logger.info("Rejected key press: %s", e)
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(2)

    console.print(display)
    if show_history:
        _render_history(context)


@app.command("eval", context_settings={"ignore_unknown_options": True})
def cmd_eval(
    first: str = typer.Argument(help="First operand"),
    operation: str = typer.Argument(help="add, subtract, multiply, divide or a symbol"),
    second: str = typer.Argument(help="Second operand"),
) -> None:
    """Run a single calculation through the pipeline.

    Negative operands are accepted as written (eval -5 add 3).
    """
    try:
        selected = Operation.from_code(operation)
    except InvalidInputError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(2)

    result = CalculationPipeline().calculate(parse_operand(first), parse_operand(second), selected)
    console.print(result if isinstance(result, str) else format_number(result))


@app.command("repl")
def cmd_repl(ctx: typer.Context) -> None:
    """Interactive keypad. Separate keys with spaces; q quits."""
    context = CalculatorContext(settings=_settings(ctx))
    keypad = Keypad(context)
    err_console.print("[bold]statecalc[/bold] keys: 0-9 . + - * / = C, 'history', 'q' to quit")

    while True:
        try:
            line = console.input(f"[cyan]{context.display_text}[/cyan] > ")
        except EOFError:
            break

        words = line.split()
        if words and words[0].lower() in QUIT_WORDS:
            break
        if words == ["history"]:
            _render_history(context)
            continue

        for word in words:
            try:
                keypad.press(word)
            except InvalidInputError as e:
                err_console.print(f"[red]{e}[/red]")
                break

    console.print(context.display_text)
