"""CLI entry point for ledgerly."""

import typer

from ledgerly.commands.admin import init_command
from ledgerly.commands.menu import run_command

app = typer.Typer(
    name="ledgerly",
    help="ledgerly - A personal finance tracker for incomes, budgets, expenses and reminders",
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """ledgerly - A personal finance tracker for incomes, budgets, expenses and reminders."""
    if ctx.invoked_subcommand is None:
        run_command()


@app.command()
def run(
    no_sample: bool = typer.Option(False, "--no-sample", help="Don't create the sample test account"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging on stderr"),
) -> None:
    """Start an interactive session."""
    run_command(no_sample, verbose)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Initialize ledgerly configuration."""
    init_command(force)


if __name__ == "__main__":
    app()
