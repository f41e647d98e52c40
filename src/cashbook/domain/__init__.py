"""Domain layer for cashbook application."""

from cashbook.domain.entities import Account, BookEntry
from cashbook.domain.fees import (
    ConditionalFeeRule,
    FeeRule,
    FeeSchedule,
    WithdrawalFeeRule,
)
from cashbook.domain.chart import ChartOfAccounts
from cashbook.domain.cash_book import CashBook
from cashbook.domain.errors import DomainError, ParseError, ValidationError

__all__ = [
    "Account",
    "BookEntry",
    "FeeRule",
    "ConditionalFeeRule",
    "WithdrawalFeeRule",
    "FeeSchedule",
    "ChartOfAccounts",
    "CashBook",
    "DomainError",
    "ValidationError",
    "ParseError",
]
