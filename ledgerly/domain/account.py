"""Account: one identity's ledger collections."""

import threading
from dataclasses import dataclass, field

from ledgerly.domain.models import Identity, Money
from ledgerly.domain.records import Budget, Expense, Income, Reminder


@dataclass(eq=False)
class Account:
    """Ordered, append-only collections of a user's records.

    The lock serialises ledger mutations so that several sessions on the
    same account cannot interleave budget updates.
    """

    identity: Identity
    credential: str = field(repr=False)
    display_name: str
    incomes: list[Income] = field(default_factory=list)
    budgets: list[Budget] = field(default_factory=list)
    expenses: list[Expense] = field(default_factory=list)
    reminders: list[Reminder] = field(default_factory=list)
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def total_income(self) -> Money:
        """Sum of all income amounts."""
        return Money(sum(income.amount for income in self.incomes))

    def total_expenses(self) -> Money:
        """Sum of all expense amounts."""
        return Money(sum(expense.amount for expense in self.expenses))

    def check_credential(self, credential: str) -> bool:
        return self.credential == credential
