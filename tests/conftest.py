"""Shared pytest fixtures for cashbook tests."""

import logging

import pytest

from cashbook.cli.fixtures import CASH_BOOK_CSV, CHART_OF_ACCOUNTS_CSV
from cashbook.domain.cash_book import CashBook
from cashbook.domain.chart import ChartOfAccounts


@pytest.fixture(autouse=True)
def reset_cashbook_logger():
    """Undo handler setup done by CLI invocations."""
    yield
    logger = logging.getLogger("cashbook")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def chart():
    """Create a chart with two accounts and no fee rules."""
    chart = ChartOfAccounts()
    chart.add_account(1, 123)
    chart.add_account(2, 0)
    return chart


@pytest.fixture
def chart_with_fee(chart):
    """Chart with the default withdrawal fee registered."""
    chart.add_default_fee_rule()
    return chart


@pytest.fixture
def cash_book(chart_with_fee):
    """Create an empty cash book bound to the fee-charging chart."""
    return CashBook(chart_with_fee)


@pytest.fixture
def balances_csv():
    """Sample balance table."""
    return CHART_OF_ACCOUNTS_CSV


@pytest.fixture
def transactions_csv():
    """Sample transaction list."""
    return CASH_BOOK_CSV


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
