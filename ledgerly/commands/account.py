"""Sign up and login commands."""

from rich.console import Console
from rich.markup import escape

from ledgerly.commands.prompts import prompt_line
from ledgerly.domain.directory import Directory, Session
from ledgerly.domain.errors import LedgerError

console = Console()


def sign_up(directory: Directory) -> None:
    """Prompt for account details and register a new account.

    The email is checked before asking for the rest, matching the order the
    user sees the prompts.
    """
    email = prompt_line("Enter email")
    if email in directory:
        console.print("[red]Email already registered.[/red]")
        return

    password = prompt_line("Enter password", hide_input=True)
    username = prompt_line("Enter username")

    try:
        directory.register(email, password, username)
    except LedgerError as e:
        console.print(f"[red]{escape(e.user_message)}[/red]")
        return

    console.print("[green]✓ Sign up successful![/green]")


def login(directory: Directory) -> Session | None:
    """Prompt for credentials and open a session.

    Returns:
        Open session, or None if the credentials were rejected.
    """
    email = prompt_line("Enter email")
    password = prompt_line("Enter password", hide_input=True)

    try:
        session = directory.login(email, password)
    except LedgerError as e:
        console.print(f"[red]{escape(e.user_message)}[/red]")
        return None

    console.print(f"[green]Login successful. Welcome {escape(session.account.display_name)}![/green]")
    return session
