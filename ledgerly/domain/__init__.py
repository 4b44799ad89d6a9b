"""Domain model for ledgerly.

This package contains the in-memory core:
- Record types and the account that owns them
- Ledger operations with input validation
- The directory of accounts and login sessions
- No console I/O
"""

from ledgerly.domain.models import CategoryName, Identity, Money

__all__ = ["CategoryName", "Identity", "Money"]
