"""Directory of registered accounts and the sessions they log into.

The directory maps identities to accounts. A successful login returns a
Session, which is the only way the CLI reaches ledger operations; once the
session is logged out every operation on it raises NotLoggedInError.
"""

import logging
from types import TracebackType
from typing import TYPE_CHECKING

from ledgerly.domain import ledger
from ledgerly.domain.account import Account
from ledgerly.domain.errors import AlreadyExistsError, InvalidCredentialsError, NotLoggedInError
from ledgerly.domain.models import Identity
from ledgerly.domain.records import Budget, Income, Reminder

if TYPE_CHECKING:
    from ledgerly.scheduler import ReminderScheduler

logger = logging.getLogger(__name__)


class Directory:
    """In-memory registry of accounts keyed by identity."""

    def __init__(self, scheduler: "ReminderScheduler | None" = None) -> None:
        self._accounts: dict[Identity, Account] = {}
        self.scheduler = scheduler

    def __contains__(self, identity: object) -> bool:
        return identity in self._accounts

    def __len__(self) -> int:
        return len(self._accounts)

    def get(self, identity: str) -> Account | None:
        return self._accounts.get(Identity(identity))

    def register(self, identity: str, credential: str, display_name: str) -> Account:
        """Create an empty account for a new identity.

        Raises:
            AlreadyExistsError: If the identity is already registered. The
                existing account is left untouched.
        """
        key = Identity(identity)
        if key in self._accounts:
            raise AlreadyExistsError()

        account = Account(identity=key, credential=credential, display_name=display_name)
        self._accounts[key] = account
        logger.info("Registered account %s", identity)
        return account

    def authenticate(self, identity: str, credential: str) -> Account:
        """Look up an account by identity and exact credential match.

        Raises:
            InvalidCredentialsError: If the identity is unknown or the
                credential does not match.
        """
        account = self._accounts.get(Identity(identity))
        if account is None or not account.check_credential(credential):
            logger.info("Failed login for %s", identity)
            raise InvalidCredentialsError()
        return account

    def login(self, identity: str, credential: str) -> "Session":
        """Authenticate and open a session on the account."""
        account = self.authenticate(identity, credential)
        logger.info("Logged in %s", identity)
        return Session(account, self.scheduler)


class Session:
    """A logged-in user's handle onto their account."""

    def __init__(self, account: Account, scheduler: "ReminderScheduler | None" = None) -> None:
        self._account: Account | None = account
        self._scheduler = scheduler

    def __enter__(self) -> "Session":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.logout()

    @property
    def is_open(self) -> bool:
        return self._account is not None

    @property
    def account(self) -> Account:
        if self._account is None:
            raise NotLoggedInError()
        return self._account

    def logout(self) -> None:
        if self._account is not None:
            logger.info("Logged out %s", self._account.identity)
        self._account = None

    def add_income(self, source: str, amount_text: str) -> Income:
        return ledger.add_income(self.account, source, amount_text)

    def add_budget(self, category: str, amount_text: str) -> Budget:
        return ledger.add_budget(self.account, category, amount_text)

    def add_expense(self, category: str, amount_text: str, date_text: str) -> ledger.ExpenseEntry:
        return ledger.add_expense(self.account, category, amount_text, date_text)

    def add_reminder(self, task: str, due_text: str) -> Reminder:
        return ledger.add_reminder(self.account, task, due_text, self._scheduler)

    def summarize(self) -> ledger.Summary:
        return ledger.summarize(self.account)
