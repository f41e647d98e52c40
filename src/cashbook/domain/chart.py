"""Chart of accounts domain service."""

import logging
from typing import Optional

from cashbook.domain.csv_rows import format_rows, parse_rows
from cashbook.domain.entities import Account
from cashbook.domain.fees import (
    DEFAULT_WITHDRAWAL_FEE,
    Action,
    Condition,
    FeeRule,
    FeeSchedule,
    WithdrawalFeeRule,
)

logger = logging.getLogger(__name__)

BALANCE_FIELDS = ("account id", "balance")


class ChartOfAccounts:
    """Registry of accounts and the fee rules applied to their postings."""

    def __init__(self, fees: Optional[FeeSchedule] = None):
        """Initialize an empty chart.

        Args:
            fees: Fee schedule to own (defaults to an empty one)
        """
        self.accounts: dict[int, Account] = {}
        self.fees = fees if fees is not None else FeeSchedule()

    def add_account(self, account_id: int, balance: int) -> Account:
        """Create an account, replacing any account with the same ID.

        Args:
            account_id: Account ID
            balance: Opening balance in the smallest currency unit

        Returns:
            The new account
        """
        account = Account(account_id, balance)
        if account.id in self.accounts:
            logger.debug("Replacing account %d", account.id)
        self.accounts[account.id] = account
        return account

    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID, or None if it is not in the chart."""
        return self.accounts.get(account_id)

    def add_fee_rule(self, condition: Condition, action: Action) -> FeeRule:
        """Register a fee rule from a condition and an action."""
        return self.fees.add_rule(condition, action)

    def add_default_fee_rule(self, amount: int = DEFAULT_WITHDRAWAL_FEE) -> FeeRule:
        """Register the flat withdrawal fee."""
        return self.fees.add(WithdrawalFeeRule(amount))

    def serialize(self) -> str:
        """Render balances as `id,balance` lines sorted numerically by ID."""
        return format_rows(
            (account.id, account.balance)
            for account in sorted(self.accounts.values(), key=lambda a: a.id)
        )

    @classmethod
    def import_from_text(cls, text: str) -> "ChartOfAccounts":
        """Build a chart from `id,balance` rows.

        Rows are applied in file order, so a repeated ID keeps the last
        balance.

        Args:
            text: Balance table text

        Returns:
            New chart with no fee rules

        Raises:
            ParseError: If a row is not two integer fields
        """
        chart = cls()
        for account_id, balance in parse_rows(text, BALANCE_FIELDS):
            chart.add_account(account_id, balance)
        logger.debug("Imported %d accounts", len(chart.accounts))
        return chart
