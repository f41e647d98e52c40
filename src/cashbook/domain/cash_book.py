"""Cash book domain service."""

import logging
from typing import Optional

from cashbook.domain.chart import ChartOfAccounts
from cashbook.domain.csv_rows import parse_rows
from cashbook.domain.entities import BookEntry
from cashbook.domain.fees import FeeSchedule

logger = logging.getLogger(__name__)

TRANSACTION_FIELDS = ("account id", "value")


class CashBook:
    """Ordered log of entries posted against a chart of accounts."""

    def __init__(self, chart: ChartOfAccounts, fee_schedule: Optional[FeeSchedule] = None):
        """Initialize an empty cash book.

        Args:
            chart: Chart holding the accounts entries are posted to
            fee_schedule: Rules evaluated on each normal posting
                (defaults to the chart's own schedule)
        """
        self.chart = chart
        self.fee_schedule = fee_schedule if fee_schedule is not None else chart.fees
        self._entries: list[BookEntry] = []

    @property
    def entries(self) -> tuple[BookEntry, ...]:
        return tuple(self._entries)

    def add_book_entry(
        self, account_id: int, value: int, is_fee: bool = False
    ) -> Optional[BookEntry]:
        """Post a value against an account.

        Postings against an ID missing from the chart are dropped without
        error: no entry is recorded and no balance changes.

        Args:
            account_id: Target account ID
            value: Signed value in the smallest currency unit
            is_fee: Fee-exempt posting; fee rules are not evaluated

        Returns:
            The posted entry, or None if the account does not exist
        """
        account = self.chart.get_account(int(account_id))
        if account is None:
            logger.warning("Dropping entry %s,%s: unknown account", account_id, value)
            return None

        entry = BookEntry(account, value)
        self._entries.append(entry)
        logger.debug("Posted %s%s", entry.to_row(), " (fee)" if is_fee else "")

        if not is_fee:
            self.fee_schedule.evaluate(self, entry)
        return entry

    def serialize(self) -> str:
        """Render entries as `account_id,value` lines in posting order."""
        return "\n".join(entry.to_row() for entry in self._entries)

    @classmethod
    def import_transactions_from_text(
        cls,
        chart: ChartOfAccounts,
        text: str,
        fee_schedule: Optional[FeeSchedule] = None,
    ) -> "CashBook":
        """Post `account_id,value` rows in file order.

        The whole text is parsed before anything is posted, so a bad row
        leaves every balance untouched.

        Args:
            chart: Chart to post against
            text: Transaction list text
            fee_schedule: Optional schedule overriding the chart's

        Returns:
            Cash book holding the posted entries

        Raises:
            ParseError: If a row is not two integer fields
        """
        rows = list(parse_rows(text, TRANSACTION_FIELDS))
        cash_book = cls(chart, fee_schedule)
        for account_id, value in rows:
            cash_book.add_book_entry(account_id, value)
        return cash_book
