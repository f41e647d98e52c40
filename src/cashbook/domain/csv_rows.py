"""CSV row parsing for the two-column comma formats."""

import csv
import io
import re
from typing import Iterator

from cashbook.domain.errors import (
    ParseError,
    invalid_integer,
    invalid_row_length,
    malformed_row,
)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_integer(value: str, line_number: int, field: str) -> int:
    """Parse a base-10 integer field.

    Handles:
    - "123"
    - "-500"
    - " 42 " (surrounding whitespace)

    Args:
        value: Raw field text
        line_number: 1-based line number, used in error messages
        field: Field name, used in error messages

    Returns:
        Integer value

    Raises:
        ParseError: If the field is not an integer
    """
    stripped = value.strip()
    if not _INTEGER_RE.fullmatch(stripped):
        raise ParseError(invalid_integer(line_number, field, value), line_number)
    return int(stripped)


def parse_rows(text: str, fields: tuple[str, str]) -> Iterator[tuple[int, int]]:
    """Yield integer pairs from two-column comma-delimited text.

    Blank lines are skipped. The first bad row stops the import.

    Args:
        text: Delimited text, no header row
        fields: Names of the two columns, used in error messages

    Yields:
        (first, second) integer pairs in file order

    Raises:
        ParseError: If a row does not hold exactly two integer fields
    """
    reader = csv.reader(io.StringIO(text))
    try:
        for row in reader:
            line_number = reader.line_num
            if not row or all(not cell.strip() for cell in row):
                continue
            if len(row) != 2:
                raise ParseError(invalid_row_length(line_number, row), line_number, row)
            try:
                first = parse_integer(row[0], line_number, fields[0])
                second = parse_integer(row[1], line_number, fields[1])
            except ParseError as e:
                raise ParseError(str(e), line_number, row) from e
            yield first, second
    except csv.Error as e:
        raise ParseError(malformed_row(reader.line_num, e), reader.line_num) from e


def format_rows(rows) -> str:
    """Join integer pairs into newline-separated `a,b` lines."""
    return "\n".join(f"{first},{second}" for first, second in rows)
