"""Domain type definitions for ledgerly.

These NewTypes provide semantic clarity and help with type checking:
- Money: Amount in currency units (e.g. 12.5 means $12.50)
- Identity: Email-like key an account is registered under
- CategoryName: Name of a budget or expense category
"""

from typing import NewType

# Amounts are entered as free-form real numbers, so they stay floats
Money = NewType("Money", float)

# Lookup key into the directory, never validated beyond uniqueness
Identity = NewType("Identity", str)

# Category name shared by budgets and expenses
CategoryName = NewType("CategoryName", str)
