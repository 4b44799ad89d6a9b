"""Interactive top-level menu."""

import sys

from rich.console import Console
from rich.markup import escape

from ledgerly.commands.account import login, sign_up
from ledgerly.commands.dashboard import dashboard_loop
from ledgerly.commands.prompts import prompt_line
from ledgerly.config import ConfigError, Settings, load_settings
from ledgerly.domain.directory import Directory
from ledgerly.log import setup_logging
from ledgerly.scheduler import ReminderScheduler
from ledgerly.seed import SAMPLE_CREDENTIAL, SAMPLE_IDENTITY, seed_sample_account

console = Console()

MAIN_MENU = """
1. Sign Up
2. Login
3. Exit"""


def main_loop(directory: Directory, settings: Settings) -> None:
    """Run the top-level menu until the user exits.

    Args:
        directory: Account directory for this process.
        settings: Loaded user settings.
    """
    while True:
        console.print(MAIN_MENU)
        choice = prompt_line("Choice").strip()

        if choice == "1":
            sign_up(directory)
        elif choice == "2":
            session = login(directory)
            if session is not None:
                dashboard_loop(session, settings.currency_symbol)
        elif choice == "3":
            console.print("Thank you for using ledgerly. Goodbye!")
            return
        else:
            console.print("[red]Invalid choice[/red]")


def run_command(no_sample: bool = False, verbose: bool = False) -> None:
    """Start an interactive session."""
    try:
        settings = load_settings()
    except ConfigError as e:
        console.print(f"[red]Config error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    setup_logging(settings.log_level, verbose)

    directory = Directory(scheduler=ReminderScheduler())
    if settings.seed_sample_account and not no_sample:
        seed_sample_account(directory)
        console.print(f"[dim]Sample user created for testing: {SAMPLE_IDENTITY} / {SAMPLE_CREDENTIAL}[/dim]")

    main_loop(directory, settings)
