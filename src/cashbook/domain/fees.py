"""Fee rules evaluated against newly posted book entries.

Every normal posting is offered to each registered rule in registration
order. A matching rule may post further entries on the cash book; those
postings are fee-exempt and are not offered to the rules again.
"""

import logging
from typing import TYPE_CHECKING, Callable, Iterator, Protocol

from cashbook.domain.entities import BookEntry

if TYPE_CHECKING:
    from cashbook.domain.cash_book import CashBook

logger = logging.getLogger(__name__)

DEFAULT_WITHDRAWAL_FEE = 500

Condition = Callable[[BookEntry], bool]
Action = Callable[["CashBook", BookEntry], None]


class FeeRule(Protocol):
    """Anything that can react to a posted entry."""

    def matches(self, entry: BookEntry) -> bool:
        ...

    def apply(self, cash_book: "CashBook", entry: BookEntry) -> None:
        ...


class ConditionalFeeRule:
    """Fee rule built from a condition and an action callable."""

    def __init__(self, condition: Condition, action: Action):
        self.condition = condition
        self.action = action

    def matches(self, entry: BookEntry) -> bool:
        return bool(self.condition(entry))

    def apply(self, cash_book: "CashBook", entry: BookEntry) -> None:
        self.action(cash_book, entry)


class WithdrawalFeeRule:
    """Flat fee charged on every withdrawal.

    The fee is posted against the account that made the withdrawal.
    """

    def __init__(self, amount: int = DEFAULT_WITHDRAWAL_FEE):
        self.amount = int(amount)

    def matches(self, entry: BookEntry) -> bool:
        return entry.is_withdrawal

    def apply(self, cash_book: "CashBook", entry: BookEntry) -> None:
        cash_book.add_book_entry(entry.account_id, -self.amount, is_fee=True)

    def __repr__(self) -> str:
        return f"WithdrawalFeeRule(amount={self.amount})"


class FeeSchedule:
    """Ordered collection of fee rules."""

    def __init__(self, rules=None):
        self._rules: list[FeeRule] = list(rules or [])

    def add(self, rule: FeeRule) -> FeeRule:
        """Append a rule and return it."""
        self._rules.append(rule)
        return rule

    def add_rule(self, condition: Condition, action: Action) -> FeeRule:
        """Append a rule built from a condition and an action."""
        return self.add(ConditionalFeeRule(condition, action))

    def evaluate(self, cash_book: "CashBook", entry: BookEntry) -> int:
        """Apply every matching rule to the entry.

        Args:
            cash_book: Cash book the entry was posted on
            entry: Newly posted entry

        Returns:
            Number of rules that fired
        """
        fired = 0
        for rule in self._rules:
            if rule.matches(entry):
                logger.debug("Fee rule %r triggered by %s", rule, entry.to_row())
                rule.apply(cash_book, entry)
                fired += 1
        return fired

    def __iter__(self) -> Iterator[FeeRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)
