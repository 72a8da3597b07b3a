"""Positional CSV parsing for the published monitoring sheet.

This module splits quoted CSV text into fixed-arity sheet rows.
Column order, not header names, decides which field is which.
"""

from __future__ import annotations

from core.constants import (
    COLUMN_CREATED_AT,
    COLUMN_IDENTIFIER,
    COLUMN_ISSUE,
    COLUMN_LATITUDE,
    COLUMN_LONGITUDE,
    COLUMN_NOTES,
    COLUMN_SEVERITY,
    COLUMN_SITE_STATUS,
    COLUMN_TECHNOLOGY,
    COLUMN_TICKET_ID,
    COLUMN_TICKET_STATUS,
    COLUMN_UPDATED_AT,
    MIN_ROW_FIELDS,
)
from core.types import RowParseResult, RowRejection, SheetRow

_QUOTE = '"'
_DELIMITER = ","


def split_csv_line(line: str) -> list[str]:
    """Split one CSV line into trimmed, unquoted fields.

    A quoted field may contain literal commas, and a doubled quote
    inside quotes stands for one literal quote character.

    Args:
        line: Single line of CSV text without its line terminator.

    Returns:
        Ordered field values.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    index = 0
    length = len(line)
    while index < length:
        char = line[index]
        if char == _QUOTE:
            if in_quotes and index + 1 < length and line[index + 1] == _QUOTE:
                current.append(_QUOTE)
                index += 1
            else:
                in_quotes = not in_quotes
        elif char == _DELIMITER and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        index += 1
    fields.append("".join(current).strip())
    return fields


def parse_csv_lines(text: str) -> list[RowParseResult]:
    """Parse every data line into an accepted row or a rejection.

    The first line is the header and is always discarded.

    Args:
        text: Raw CSV payload.

    Returns:
        One result per data line, in input order.
    """
    # CRLF payloads leave a trailing "\r" that field trimming removes.
    lines = text.strip().split("\n")
    results: list[RowParseResult] = []
    for line_number, line in enumerate(lines[1:], 2):
        results.append(_parse_line(line, line_number))
    return results


def parse_sheet_csv(text: str) -> list[SheetRow]:
    """Parse CSV text into accepted sheet rows.

    Incomplete lines and lines without an identifier are silently
    excluded; they only shrink the result.

    Args:
        text: Raw CSV payload.

    Returns:
        Accepted rows in input order.
    """
    return [result for result in parse_csv_lines(text) if isinstance(result, SheetRow)]


def _parse_line(line: str, line_number: int) -> RowParseResult:
    fields = split_csv_line(line)
    if len(fields) < MIN_ROW_FIELDS:
        return RowRejection(line_number=line_number, reason="too_few_fields")
    identifier = fields[COLUMN_IDENTIFIER]
    if not identifier:
        return RowRejection(line_number=line_number, reason="missing_identifier")
    return SheetRow(
        line_number=line_number,
        identifier=identifier,
        technology=fields[COLUMN_TECHNOLOGY],
        latitude=fields[COLUMN_LATITUDE],
        longitude=fields[COLUMN_LONGITUDE],
        ticket_id=_optional_field(fields, COLUMN_TICKET_ID),
        issue=_optional_field(fields, COLUMN_ISSUE),
        severity=_optional_field(fields, COLUMN_SEVERITY),
        ticket_status=_optional_field(fields, COLUMN_TICKET_STATUS),
        created_at=_optional_field(fields, COLUMN_CREATED_AT),
        updated_at=_optional_field(fields, COLUMN_UPDATED_AT),
        notes=_optional_field(fields, COLUMN_NOTES),
        site_status=_optional_field(fields, COLUMN_SITE_STATUS),
    )


def _optional_field(fields: list[str], position: int) -> str | None:
    """Return the field at ``position`` or None when absent or blank."""
    if position >= len(fields):
        return None
    return fields[position] or None
