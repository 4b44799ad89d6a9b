"""Tests for ledgerly.domain.ledger operations."""

from datetime import date, datetime

import pytest

from ledgerly.domain import ledger
from ledgerly.domain.account import Account
from ledgerly.domain.errors import InvalidAmountError, InvalidDateError, InvalidDateTimeError
from ledgerly.domain.models import Identity, Money
from ledgerly.domain.records import Reminder


def make_account() -> Account:
    return Account(identity=Identity("jo@example.com"), credential="pw", display_name="Jo")


class RecordingScheduler:
    """Scheduler double that records what it was given."""

    def __init__(self) -> None:
        self.scheduled: list[Reminder] = []

    def schedule(self, reminder: Reminder) -> None:
        self.scheduled.append(reminder)


class TestParseAmount:
    """Tests for parse_amount."""

    def test_parses_decimal(self) -> None:
        """Should parse a decimal number."""
        assert ledger.parse_amount("12.50") == 12.5

    def test_parses_integer(self) -> None:
        """Should parse an integer."""
        assert ledger.parse_amount("5000") == 5000

    def test_accepts_negative(self) -> None:
        """Should not reject negative amounts."""
        assert ledger.parse_amount("-20") == -20

    def test_ignores_surrounding_whitespace(self) -> None:
        """Should strip whitespace."""
        assert ledger.parse_amount("  42 ") == 42

    def test_rejects_text(self) -> None:
        """Should reject non-numeric text."""
        for text in ["abc", "", "12,50", "$12"]:
            with pytest.raises(InvalidAmountError):
                ledger.parse_amount(text)

    def test_rejects_non_finite(self) -> None:
        """Should reject nan and infinity."""
        for text in ["nan", "inf", "-Infinity"]:
            with pytest.raises(InvalidAmountError):
                ledger.parse_amount(text)


class TestAddIncome:
    """Tests for add_income."""

    def test_appends_income(self) -> None:
        """Should append incomes in insertion order."""
        account = make_account()
        ledger.add_income(account, "Salary", "5000")
        ledger.add_income(account, "Bonus", "1000")

        assert [i.source for i in account.incomes] == ["Salary", "Bonus"]
        assert account.total_income() == 6000

    def test_invalid_amount_records_nothing(self) -> None:
        """Should leave incomes unchanged on bad input."""
        account = make_account()
        with pytest.raises(InvalidAmountError):
            ledger.add_income(account, "Salary", "lots")

        assert account.incomes == []


class TestAddBudget:
    """Tests for add_budget."""

    def test_appends_budget(self) -> None:
        """Should create a budget with remaining equal to initial."""
        account = make_account()
        budget = ledger.add_budget(account, "Groceries", "500")

        assert account.budgets == [budget]
        assert budget.initial_amount == 500
        assert budget.remaining_amount == 500

    def test_allows_duplicate_categories(self) -> None:
        """Should keep both budgets for the same category."""
        account = make_account()
        ledger.add_budget(account, "Groceries", "500")
        ledger.add_budget(account, "groceries", "300")

        assert len(account.budgets) == 2

    def test_invalid_amount(self) -> None:
        """Should raise InvalidAmountError and record nothing."""
        account = make_account()
        with pytest.raises(InvalidAmountError):
            ledger.add_budget(account, "Groceries", "five hundred")

        assert account.budgets == []


class TestApplyExpenseToBudget:
    """Tests for apply_expense_to_budget."""

    def test_decrements_matching_budget(self) -> None:
        """Should subtract the amount from the remaining budget."""
        account = make_account()
        budget = ledger.add_budget(account, "Rent", "1200")

        update = ledger.apply_expense_to_budget(account, "Rent", Money(200))

        assert budget.remaining_amount == 1000
        assert update.matched
        assert update.remaining == 1000
        assert not update.exceeded

    def test_matches_case_insensitively(self) -> None:
        """Should match 'rent' against a 'Rent' budget."""
        account = make_account()
        budget = ledger.add_budget(account, "Rent", "1200")

        update = ledger.apply_expense_to_budget(account, "rent", Money(1200))

        assert update.budget is budget
        assert budget.remaining_amount == 0
        assert not update.exceeded

    def test_over_budget_is_flagged(self) -> None:
        """Should flag a negative remaining amount without raising."""
        account = make_account()
        ledger.add_budget(account, "Groceries", "500")

        update = ledger.apply_expense_to_budget(account, "groceries", Money(600))

        assert update.remaining == -100
        assert update.exceeded

    def test_no_matching_budget(self) -> None:
        """Should leave budgets unchanged when nothing matches."""
        account = make_account()
        budget = ledger.add_budget(account, "Rent", "1200")

        update = ledger.apply_expense_to_budget(account, "Travel", Money(50))

        assert not update.matched
        assert update.remaining is None
        assert not update.exceeded
        assert budget.remaining_amount == 1200

    def test_first_duplicate_wins(self) -> None:
        """Should only update the first budget for a category."""
        account = make_account()
        first = ledger.add_budget(account, "Groceries", "500")
        second = ledger.add_budget(account, "GROCERIES", "300")

        ledger.apply_expense_to_budget(account, "groceries", Money(100))

        assert first.remaining_amount == 400
        assert second.remaining_amount == 300


class TestAddExpense:
    """Tests for add_expense."""

    def test_records_expense_and_updates_budget(self) -> None:
        """Should record the expense and apply it to the budget."""
        account = make_account()
        budget = ledger.add_budget(account, "Groceries", "500")

        entry = ledger.add_expense(account, "groceries", "600", "2025-01-15")

        assert account.expenses == [entry.expense]
        assert entry.expense.amount == 600
        assert entry.expense.date == date(2025, 1, 15)
        assert budget.remaining_amount == -100
        assert entry.update.exceeded

    def test_records_expense_without_budget(self) -> None:
        """Should record expenses even when no budget exists."""
        account = make_account()

        first = ledger.add_expense(account, "Coffee", "100", "2025-01-01")
        second = ledger.add_expense(account, "Books", "200", "2025-01-02")

        assert account.total_expenses() == 300
        assert not first.update.matched
        assert not second.update.matched

    def test_amount_validated_before_date(self) -> None:
        """Should report a bad amount even when the date is also bad."""
        account = make_account()
        with pytest.raises(InvalidAmountError):
            ledger.add_expense(account, "Coffee", "abc", "not a date")

    def test_invalid_date_records_nothing(self) -> None:
        """Should leave expenses and budgets unchanged on a bad date."""
        account = make_account()
        budget = ledger.add_budget(account, "Coffee", "50")

        with pytest.raises(InvalidDateError):
            ledger.add_expense(account, "Coffee", "5", "15/01/2025")

        assert account.expenses == []
        assert budget.remaining_amount == 50


class TestAddReminder:
    """Tests for add_reminder."""

    def test_records_and_schedules(self) -> None:
        """Should append the reminder and hand it to the scheduler."""
        account = make_account()
        scheduler = RecordingScheduler()

        reminder = ledger.add_reminder(account, "Pay rent", "2025-02-01 09:00", scheduler)  # type: ignore[arg-type]

        assert account.reminders == [reminder]
        assert scheduler.scheduled == [reminder]
        assert reminder.due_at == datetime(2025, 2, 1, 9, 0)

    def test_without_scheduler(self) -> None:
        """Should record the reminder when no scheduler is given."""
        account = make_account()
        ledger.add_reminder(account, "Pay rent", "2025-02-01 09:00")

        assert len(account.reminders) == 1

    def test_invalid_datetime(self) -> None:
        """Should reject a date without a time and schedule nothing."""
        account = make_account()
        scheduler = RecordingScheduler()

        with pytest.raises(InvalidDateTimeError):
            ledger.add_reminder(account, "Pay rent", "2025-02-01", scheduler)  # type: ignore[arg-type]

        assert account.reminders == []
        assert scheduler.scheduled == []


class TestSummarize:
    """Tests for summarize."""

    def test_totals_and_net(self) -> None:
        """Should compute totals and net amount."""
        account = make_account()
        ledger.add_income(account, "Salary", "5000")
        ledger.add_income(account, "Bonus", "1000")
        ledger.add_budget(account, "Rent", "1200")
        ledger.add_expense(account, "Rent", "1200", "2025-01-01")

        summary = ledger.summarize(account)

        assert summary.total_income == 6000
        assert summary.total_expenses == 1200
        assert summary.net_amount == 4800
        assert not summary.overspent
        assert summary.budget_usage[0].used_percentage == 100.0

    def test_overspent_flag(self) -> None:
        """Should flag spending above income."""
        account = make_account()
        ledger.add_income(account, "Salary", "100")
        ledger.add_expense(account, "Rent", "150", "2025-01-01")

        summary = ledger.summarize(account)

        assert summary.net_amount == -50
        assert summary.overspent

    def test_zero_budget_usage_not_applicable(self) -> None:
        """Should report None usage for a zero budget."""
        account = make_account()
        ledger.add_budget(account, "Misc", "0")
        ledger.add_expense(account, "Misc", "10", "2025-01-01")

        summary = ledger.summarize(account)

        assert summary.budget_usage[0].used_percentage is None
        assert summary.budget_usage[0].exceeded

    def test_summary_is_a_snapshot(self) -> None:
        """Should not change when the account changes afterwards."""
        account = make_account()
        ledger.add_income(account, "Salary", "100")
        summary = ledger.summarize(account)

        ledger.add_income(account, "Bonus", "50")

        assert len(summary.incomes) == 1
        assert summary.total_income == 100

    def test_summarize_has_no_side_effects(self) -> None:
        """Should leave the account unchanged."""
        account = make_account()
        budget = ledger.add_budget(account, "Rent", "1200")
        ledger.summarize(account)
        ledger.summarize(account)

        assert budget.remaining_amount == 1200
        assert account.expenses == []
