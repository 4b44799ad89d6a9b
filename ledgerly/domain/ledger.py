"""Ledger operations on a single account.

Each operation validates its own input, raising a LedgerError subclass on
bad input, and appends to the account's collections. The only in-place
mutation of existing records happens in apply_expense_to_budget.
"""

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ledgerly.dates import parse_date, parse_datetime
from ledgerly.domain.account import Account
from ledgerly.domain.errors import InvalidAmountError
from ledgerly.domain.models import CategoryName, Money
from ledgerly.domain.records import Budget, Expense, Income, Reminder

if TYPE_CHECKING:
    from ledgerly.scheduler import ReminderScheduler


@dataclass(frozen=True)
class BudgetUpdate:
    """Outcome of applying an expense to the account's budgets.

    budget is None when no budget matched the category; the expense is still
    recorded in that case.
    """

    category: CategoryName
    amount: Money
    budget: Budget | None
    remaining: Money | None

    @property
    def matched(self) -> bool:
        return self.budget is not None

    @property
    def exceeded(self) -> bool:
        return self.remaining is not None and self.remaining < 0


@dataclass(frozen=True)
class ExpenseEntry:
    """A recorded expense together with its budget update."""

    expense: Expense
    update: BudgetUpdate


@dataclass(frozen=True)
class BudgetUsage:
    """Snapshot of one budget for the summary."""

    category: CategoryName
    initial: Money
    remaining: Money
    used_percentage: float | None
    exceeded: bool


@dataclass(frozen=True)
class Summary:
    """Read-only view of an account with derived totals."""

    incomes: tuple[Income, ...]
    budgets: tuple[Budget, ...]
    expenses: tuple[Expense, ...]
    reminders: tuple[Reminder, ...]
    total_income: Money
    total_expenses: Money
    net_amount: Money
    budget_usage: tuple[BudgetUsage, ...]

    @property
    def overspent(self) -> bool:
        """True when expenses exceed income."""
        return self.net_amount < 0


def parse_amount(text: str) -> Money:
    """Parse user-supplied amount text.

    Negative amounts are accepted; only non-numeric text is rejected.

    Args:
        text: Amount text, e.g. "12.50".

    Returns:
        Parsed amount.

    Raises:
        InvalidAmountError: If the text is not a finite real number.
    """
    try:
        value = float(text.strip())
    except (AttributeError, ValueError):
        raise InvalidAmountError() from None
    if not math.isfinite(value):
        raise InvalidAmountError()
    return Money(value)


def add_income(account: Account, source: str, amount_text: str) -> Income:
    """Record an income entry."""
    income = Income(source=source, amount=parse_amount(amount_text))
    with account.lock:
        account.incomes.append(income)
    return income


def add_budget(account: Account, category: str, amount_text: str) -> Budget:
    """Create a budget for a category.

    Existing budgets in the same category are not checked; only the first
    one in insertion order is ever updated by expenses.
    """
    budget = Budget(category=CategoryName(category), initial_amount=parse_amount(amount_text))
    with account.lock:
        account.budgets.append(budget)
    return budget


def find_budget(account: Account, category: str) -> Budget | None:
    """Find the first budget matching a category, ignoring case."""
    return next((budget for budget in account.budgets if budget.matches(category)), None)


def apply_expense_to_budget(account: Account, category: str, amount: Money) -> BudgetUpdate:
    """Decrement the first matching budget by an expense amount.

    The remaining amount may go negative; that is reported through
    BudgetUpdate.exceeded rather than raised.

    Args:
        account: Account whose budgets to update.
        category: Expense category (matched case-insensitively).
        amount: Expense amount.

    Returns:
        BudgetUpdate describing the matched budget and its new remaining
        amount, or an unmatched update if no budget exists for the category.
    """
    with account.lock:
        budget = find_budget(account, category)
        if budget is None:
            return BudgetUpdate(category=CategoryName(category), amount=amount, budget=None, remaining=None)

        budget.remaining_amount = Money(budget.remaining_amount - amount)
        return BudgetUpdate(
            category=CategoryName(category),
            amount=amount,
            budget=budget,
            remaining=budget.remaining_amount,
        )


def add_expense(account: Account, category: str, amount_text: str, date_text: str) -> ExpenseEntry:
    """Record an expense and apply it to the matching budget.

    The amount is validated before the date.

    Raises:
        InvalidAmountError: If the amount is not a number.
        InvalidDateError: If the date is not yyyy-MM-dd.
    """
    amount = parse_amount(amount_text)
    expense_date = parse_date(date_text)

    expense = Expense(category=CategoryName(category), amount=amount, date=expense_date)
    with account.lock:
        account.expenses.append(expense)
        update = apply_expense_to_budget(account, category, amount)
    return ExpenseEntry(expense=expense, update=update)


def add_reminder(
    account: Account,
    task: str,
    due_text: str,
    scheduler: "ReminderScheduler | None" = None,
) -> Reminder:
    """Record a reminder and hand it to the scheduler.

    Raises:
        InvalidDateTimeError: If due_text is not yyyy-MM-dd HH:mm.
    """
    reminder = Reminder(task=task, due_at=parse_datetime(due_text))
    with account.lock:
        account.reminders.append(reminder)
    if scheduler is not None:
        scheduler.schedule(reminder)
    return reminder


def summarize(account: Account) -> Summary:
    """Build a read-only summary of an account."""
    with account.lock:
        total_income = account.total_income()
        total_expenses = account.total_expenses()
        usage = tuple(
            BudgetUsage(
                category=budget.category,
                initial=budget.initial_amount,
                remaining=budget.remaining_amount,
                used_percentage=budget.used_percentage,
                exceeded=budget.is_exceeded,
            )
            for budget in account.budgets
        )
        return Summary(
            incomes=tuple(account.incomes),
            budgets=tuple(account.budgets),
            expenses=tuple(account.expenses),
            reminders=tuple(account.reminders),
            total_income=total_income,
            total_expenses=total_expenses,
            net_amount=Money(total_income - total_expenses),
            budget_usage=usage,
        )
