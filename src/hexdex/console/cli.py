"""CLI entry point for hexdex-console. Uses Click for argument parsing."""

from __future__ import annotations

import logging

import click

from hexdex.console.cell import CURRENT_CURSOR, Position
from hexdex.console.config import ConsoleConfig
from hexdex.console.console import Console
from hexdex.console.editor import Cancelled
from hexdex.console.errors import InputCancelled, ParseError
from hexdex.console.markup import parse_markup
from hexdex.console.terminal import ProcessTerminal


def _open_console(ctx: click.Context) -> tuple[ProcessTerminal, Console]:
    config: ConsoleConfig = ctx.obj["config"]
    terminal = ProcessTerminal(
        escape_timeout=config.escape_timeout,
        write_log_path=config.write_log_path,
    )
    return terminal, Console(terminal, config)


@click.group()
@click.option("--log-file", default=None, type=click.Path(dir_okay=False), help="Write debug logs to this file")
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
)
@click.pass_context
def main(ctx, log_file, log_level):
    """Positional console buffer and line editor."""
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=getattr(logging, log_level.upper()),
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
    ctx.ensure_object(dict)
    ctx.obj["config"] = ConsoleConfig.from_env()


@main.command("read")
@click.option("--int", "as_int", is_flag=True, help="Only accept an integer")
@click.option("--max-length", type=int, default=None, help="Reject longer lines")
@click.option("--x", type=int, default=None, help="Column of the prompt")
@click.option("--y", type=int, default=None, help="Row of the prompt")
@click.pass_context
def read_cmd(ctx, as_int, max_length, x, y):
    """Read one line of input and echo it."""
    if (x is None) != (y is None):
        raise click.UsageError("--x and --y must be given together")

    terminal, console = _open_console(ctx)
    at = Position(x, y) if x is not None and y is not None else CURRENT_CURSOR

    with terminal.session():
        console.clear()
        console.style_print("§(7)Type a line, §(10)Enter§(7) to submit, §(12)Esc§(7) to cancel.", 2)
        try:
            value = console.read_int(at) if as_int else console.read_str(at, max_length=max_length)
        except InputCancelled:
            value = None
        console.clear()

    if value is None:
        click.echo("Cancelled.")
        ctx.exit(1)
    click.echo(value)


@main.command("pick")
@click.option("--low", type=int, default=1, show_default=True)
@click.option("--high", type=int, default=9, show_default=True)
@click.pass_context
def pick_cmd(ctx, low, high):
    """Choose a number with the Up and Down keys."""
    from hexdex.console.widgets import pick_number

    terminal, console = _open_console(ctx)
    with terminal.session():
        console.clear()
        console.print("How many digits do you want?", 2)
        try:
            value = pick_number(console, low=low, high=high)
        except InputCancelled:
            value = None
        console.clear()

    if value is None:
        click.echo("Cancelled.")
        ctx.exit(1)
    click.echo(value)


@main.command("demo")
@click.argument("markup")
@click.option("--breaks", type=int, default=1, show_default=True)
@click.pass_context
def demo_cmd(ctx, markup, breaks):
    """Style-print MARKUP, e.g. '§(7)What is §(9)2A§(7)?'."""
    from hexdex.console.widgets import center_screen

    try:
        parse_markup(markup)
    except ParseError as e:
        raise click.BadParameter(str(e), param_hint="MARKUP") from e

    terminal, console = _open_console(ctx)
    with terminal.session():
        center_screen(console, "HexerDexer", "Press ENTER to continue")
        console.clear()
        console.style_print(markup, breaks)
        console.print("Press ENTER to exit.", 1)
        while isinstance(console.read_line(), Cancelled):
            console.refresh()
        console.clear()


if __name__ == "__main__":
    main()
