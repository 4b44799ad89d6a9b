"""Summary rendering for the dashboard."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ledgerly.dates import format_date, format_datetime
from ledgerly.domain.ledger import BudgetUsage, Summary

console = Console()


def format_money(amount: float, currency: str = "$") -> str:
    """Format an amount with the currency symbol, sign first for negatives."""
    if amount < 0:
        return f"-{currency}{abs(amount):,.2f}"
    return f"{currency}{amount:,.2f}"


def format_used_percentage(usage: BudgetUsage) -> str:
    """Format budget usage with color based on percentage.

    Args:
        usage: Budget usage row.

    Returns:
        Colored string for the used column, "n/a" for zero budgets.
    """
    percentage = usage.used_percentage
    if percentage is None:
        return "[dim]n/a[/dim]"

    text = f"{percentage:.1f}%"
    if percentage > 100:
        return f"[red]{text}[/red]"
    elif percentage > 90:
        return f"[yellow]{text}[/yellow]"
    else:
        return f"[green]{text}[/green]"


def render_summary(summary: Summary, currency: str = "$") -> None:
    """Print the dashboard summary.

    Args:
        summary: Summary computed from the logged-in account.
        currency: Currency symbol for amounts.
    """
    console.print("\n[bold cyan]--- Dashboard Summary ---[/bold cyan]")
    console.print(f"[bold]Total Income:[/bold] {format_money(summary.total_income, currency)}")

    console.print("\n[bold]Incomes:[/bold]")
    if not summary.incomes:
        console.print("  [dim]None[/dim]")
    for income in summary.incomes:
        console.print(f"  {escape(income.source)}: {format_money(income.amount, currency)}")

    if summary.budget_usage:
        table = Table(title="Budgets", title_justify="left")
        table.add_column("Category", style="magenta")
        table.add_column("Budget", justify="right")
        table.add_column("Remaining", justify="right")
        table.add_column("Used", justify="right")

        for usage in summary.budget_usage:
            remaining = format_money(usage.remaining, currency)
            if usage.exceeded:
                remaining = f"[red]{remaining}[/red]"
            table.add_row(
                escape(usage.category),
                format_money(usage.initial, currency),
                remaining,
                format_used_percentage(usage),
            )
        console.print()
        console.print(table)
    else:
        console.print("\n[bold]Budgets:[/bold]")
        console.print("  [dim]None[/dim]")

    console.print(f"\n[bold]Total Expenses:[/bold] {format_money(summary.total_expenses, currency)}")

    console.print("\n[bold]Expenses:[/bold]")
    if not summary.expenses:
        console.print("  [dim]None[/dim]")
    for expense in summary.expenses:
        console.print(
            f"  {escape(expense.category)}: {format_money(expense.amount, currency)} on {format_date(expense.date)}"
        )

    console.print("\n[bold]Reminders:[/bold]")
    if not summary.reminders:
        console.print("  [dim]None[/dim]")
    for reminder in summary.reminders:
        console.print(f"  {escape(reminder.task)} at {format_datetime(reminder.due_at)}")

    net_display = format_money(summary.net_amount, currency)
    if summary.overspent:
        console.print(f"\n[bold]Net Savings:[/bold] [red]{net_display}[/red]")
        console.print("[yellow]Warning: You are spending more than your income![/yellow]")
    else:
        console.print(f"\n[bold]Net Savings:[/bold] [green]{net_display}[/green]")
