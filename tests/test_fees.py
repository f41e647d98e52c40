"""Tests for fee rules and the fee schedule."""

from cashbook.domain.cash_book import CashBook
from cashbook.domain.chart import ChartOfAccounts
from cashbook.domain.entities import Account, BookEntry
from cashbook.domain.fees import (
    DEFAULT_WITHDRAWAL_FEE,
    ConditionalFeeRule,
    FeeSchedule,
    WithdrawalFeeRule,
)


class RecordingBook:
    """Stand-in cash book that records postings."""

    def __init__(self):
        self.postings = []

    def add_book_entry(self, account_id, value, is_fee=False):
        self.postings.append((account_id, value, is_fee))


def test_withdrawal_rule_matches_negative_only():
    rule = WithdrawalFeeRule()
    account = Account(1, 0)
    assert rule.matches(BookEntry(account, -1))
    assert not rule.matches(BookEntry(account, 0))
    assert not rule.matches(BookEntry(account, 10))


def test_withdrawal_rule_posts_fee_exempt_entry():
    """The fee is posted on the same account and marked fee-exempt."""
    book = RecordingBook()
    rule = WithdrawalFeeRule()
    rule.apply(book, BookEntry(Account(3, 0), -100))
    assert book.postings == [(3, -DEFAULT_WITHDRAWAL_FEE, True)]


def test_withdrawal_rule_custom_amount():
    book = RecordingBook()
    WithdrawalFeeRule(250).apply(book, BookEntry(Account(1, 0), -1))
    assert book.postings == [(1, -250, True)]


def test_conditional_rule_wraps_callables():
    seen = []
    rule = ConditionalFeeRule(
        lambda entry: entry.value > 1000,
        lambda cash_book, entry: seen.append((cash_book, entry.value)),
    )
    account = Account(1, 0)
    assert not rule.matches(BookEntry(account, 5))
    big = BookEntry(account, 5000)
    assert rule.matches(big)
    rule.apply("book", big)
    assert seen == [("book", 5000)]


def test_schedule_evaluates_in_registration_order():
    """Every matching rule fires, in the order it was added."""
    calls = []
    schedule = FeeSchedule()
    schedule.add_rule(lambda e: True, lambda b, e: calls.append("first"))
    schedule.add_rule(lambda e: False, lambda b, e: calls.append("skipped"))
    schedule.add_rule(lambda e: True, lambda b, e: calls.append("third"))

    fired = schedule.evaluate(RecordingBook(), BookEntry(Account(1, 0), 1))

    assert fired == 2
    assert calls == ["first", "third"]


def test_schedule_iteration_and_length():
    first = WithdrawalFeeRule()
    second = WithdrawalFeeRule(10)
    schedule = FeeSchedule([first])
    schedule.add(second)
    assert len(schedule) == 2
    assert list(schedule) == [first, second]


def test_schedule_is_testable_without_a_chart():
    """A schedule injected into a cash book overrides the chart's rules."""
    chart = ChartOfAccounts()
    chart.add_account(1, 0)
    schedule = FeeSchedule([WithdrawalFeeRule(100)])

    book = CashBook(chart, fee_schedule=schedule)
    book.add_book_entry(1, -1)

    assert len(chart.fees) == 0
    assert chart.accounts[1].balance == -101
    assert book.serialize() == "1,-1\n1,-100"


def test_custom_rule_can_post_to_another_account():
    """Rules can post anywhere in the chart, not only the source account."""
    chart = ChartOfAccounts()
    chart.add_account(1, 0)
    chart.add_account(99, 0)
    chart.add_fee_rule(
        lambda entry: entry.is_withdrawal,
        lambda book, entry: book.add_book_entry(99, -entry.value, is_fee=True),
    )

    book = CashBook(chart)
    book.add_book_entry(1, -30)

    assert chart.accounts[1].balance == -30
    assert chart.accounts[99].balance == 30
