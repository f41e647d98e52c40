"""Shared domain error messages and error types."""

from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class ParseError(ValidationError):
    """A row of delimited input could not be parsed.

    Attributes:
        line_number: 1-based line of the offending row
        row: Raw fields of the offending row
    """

    def __init__(self, message: str, line_number: Optional[int] = None, row=None):
        super().__init__(message)
        self.line_number = line_number
        self.row = list(row) if row is not None else None


def invalid_row_length(line_number: int, row: list[str]) -> str:
    """Return message for a row without exactly two columns."""
    return (
        f"Row {line_number}: expected 2 columns, got {len(row)} "
        f"({','.join(row)!r})"
    )


def invalid_integer(line_number: int, field: str, value: str) -> str:
    """Return message for a field that is not an integer."""
    return f"Row {line_number}: {field} '{value}' is not an integer"


def malformed_row(line_number: int, error: Exception) -> str:
    """Return message for a row the CSV reader could not split."""
    return f"Row {line_number}: {error}"
