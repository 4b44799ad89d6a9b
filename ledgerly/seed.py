"""Sample account seeded on startup."""

from ledgerly.domain import ledger
from ledgerly.domain.account import Account
from ledgerly.domain.directory import Directory

SAMPLE_IDENTITY = "test@example.com"
SAMPLE_CREDENTIAL = "password"
SAMPLE_DISPLAY_NAME = "TestUser"


def seed_sample_account(directory: Directory) -> Account:
    """Register the sample account with a salary and two budgets.

    Returns the existing account unchanged if it is already registered.
    """
    existing = directory.get(SAMPLE_IDENTITY)
    if existing is not None:
        return existing

    account = directory.register(SAMPLE_IDENTITY, SAMPLE_CREDENTIAL, SAMPLE_DISPLAY_NAME)
    ledger.add_income(account, "Salary", "5000")
    ledger.add_budget(account, "Groceries", "500")
    ledger.add_budget(account, "Rent", "1200")
    return account
