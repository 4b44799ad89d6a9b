"""Record types held by an account.

Incomes, expenses and reminders are immutable once created. A budget keeps
its initial amount fixed and tracks a mutable remaining amount, which is
only ever decremented by recorded expenses.
"""

from dataclasses import dataclass, field
from datetime import date, datetime

from ledgerly.domain.models import CategoryName, Money


@dataclass(frozen=True)
class Income:
    """Immutable income entry."""

    source: str
    amount: Money


@dataclass
class Budget:
    """Spending budget for a category."""

    category: CategoryName
    initial_amount: Money
    remaining_amount: Money = field(init=False)

    def __post_init__(self) -> None:
        self.remaining_amount = self.initial_amount

    @property
    def used_amount(self) -> Money:
        return Money(self.initial_amount - self.remaining_amount)

    @property
    def used_percentage(self) -> float | None:
        """Percentage of the initial amount spent so far.

        Returns:
            Percentage used (can exceed 100), or None for a zero budget where
            the percentage is not applicable.
        """
        if self.initial_amount == 0:
            return None
        return self.used_amount / self.initial_amount * 100

    @property
    def is_exceeded(self) -> bool:
        return self.remaining_amount < 0

    def matches(self, category: str) -> bool:
        """Check whether a category refers to this budget, ignoring case."""
        return self.category.lower() == category.lower()


@dataclass(frozen=True)
class Expense:
    """Immutable expense entry (day granularity)."""

    category: CategoryName
    amount: Money
    date: date


@dataclass(frozen=True)
class Reminder:
    """Immutable reminder; its only effect is a notification at due_at."""

    task: str
    due_at: datetime
