"""Domain model entities for cashbook.

An Account carries a running balance in the smallest currency unit. A
BookEntry applies one signed value to one account; the balance changes once,
when the entry is constructed, so every balance can be rebuilt by folding
the entry history over the imported opening balance.
"""

from dataclasses import dataclass


@dataclass(eq=False)
class Account:
    """Ledger account with a running balance."""

    id: int
    balance: int = 0

    def __post_init__(self):
        self.id = int(self.id)
        self.balance = int(self.balance)

    def update_balance(self, delta: int) -> None:
        """Add a signed delta to the balance."""
        self.balance += int(delta)


@dataclass(frozen=True, eq=False)
class BookEntry:
    """One value posted against one account.

    The referenced account is shared, not owned. Constructing the entry
    updates the account balance.
    """

    account: Account
    value: int

    def __post_init__(self):
        object.__setattr__(self, "value", int(self.value))
        self.account.update_balance(self.value)

    @property
    def account_id(self) -> int:
        return self.account.id

    @property
    def is_withdrawal(self) -> bool:
        return self.value < 0

    def to_row(self) -> str:
        return f"{self.account.id},{self.value}"
