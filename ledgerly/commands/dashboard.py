"""Dashboard commands for a logged-in session."""

from rich.console import Console
from rich.markup import escape

from ledgerly.commands.prompts import prompt_line
from ledgerly.commands.summary import format_money, render_summary
from ledgerly.domain.directory import Session
from ledgerly.domain.errors import LedgerError
from ledgerly.domain.ledger import BudgetUpdate, parse_amount

console = Console()

DASHBOARD_MENU = """
Dashboard - Select an option:
1. Track Income
2. Create Budget
3. Set Reminder
4. Track Expense
5. View Summary
6. Logout"""


def track_income(session: Session) -> None:
    """Prompt for an income and record it."""
    source = prompt_line("Enter income source (e.g. salary)")
    amount_text = prompt_line("Enter amount")
    session.add_income(source, amount_text)
    console.print("[green]✓ Income saved and displayed on dashboard.[/green]")


def create_budget(session: Session) -> None:
    """Prompt for a budget and record it."""
    category = prompt_line("Enter budget category (e.g. groceries)")
    amount_text = prompt_line("Enter budget amount")
    session.add_budget(category, amount_text)
    console.print("[green]✓ Budget saved and displayed on dashboard.[/green]")


def set_reminder(session: Session) -> None:
    """Prompt for a reminder and schedule it."""
    task = prompt_line("Enter reminder task (e.g. electricity bill)")
    due_text = prompt_line("Enter date and time (yyyy-MM-dd HH:mm)")
    session.add_reminder(task, due_text)
    console.print("[green]✓ Reminder saved. You will be notified at the specified time.[/green]")


def report_budget_update(update: BudgetUpdate, currency: str) -> None:
    """Print the outcome of applying an expense to its budget.

    Args:
        update: Result of the budget update.
        currency: Currency symbol for amounts.
    """
    if update.remaining is None:
        console.print("[yellow]No budget set for this category.[/yellow]")
        return

    category = escape(update.category)
    console.print(f"Remaining budget for {category}: {format_money(update.remaining, currency)}")
    if update.exceeded:
        console.print(f"[red]Warning: You have exceeded your budget for {category}![/red]")


def track_expense(session: Session, currency: str) -> None:
    """Prompt for an expense, record it and update the matching budget.

    The amount prompt comes before the date prompt and is validated first,
    so a bad amount is reported without asking for a date.
    """
    category = prompt_line("Enter expense category (e.g. groceries)")
    amount_text = prompt_line("Enter expense amount")
    parse_amount(amount_text)
    date_text = prompt_line("Enter date (yyyy-MM-dd)")
    entry = session.add_expense(category, amount_text, date_text)
    report_budget_update(entry.update, currency)
    console.print("[green]✓ Expense saved and budget updated.[/green]")


def view_summary(session: Session, currency: str) -> None:
    """Render the summary of the logged-in account."""
    render_summary(session.summarize(), currency)


def dashboard_loop(session: Session, currency: str = "$") -> None:
    """Run the dashboard menu until the user logs out.

    Ledger errors are reported and the menu continues.

    Args:
        session: Open session; it is logged out when the loop ends.
        currency: Currency symbol for amounts.
    """
    with session:
        while True:
            console.print(DASHBOARD_MENU)
            choice = prompt_line("Choice").strip()

            try:
                if choice == "1":
                    track_income(session)
                elif choice == "2":
                    create_budget(session)
                elif choice == "3":
                    set_reminder(session)
                elif choice == "4":
                    track_expense(session, currency)
                elif choice == "5":
                    view_summary(session, currency)
                elif choice == "6":
                    console.print("Logging out...")
                    return
                else:
                    console.print("[red]Invalid choice[/red]")
            except LedgerError as e:
                console.print(f"[red]{escape(e.user_message)}[/red]")
