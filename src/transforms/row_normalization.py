"""Sheet row normalization into sites and tickets.

This module applies default and fallback rules to parsed sheet rows.
Every accepted row yields a site; only rows with a ticket id yield a ticket.
"""

from __future__ import annotations

from datetime import datetime, timezone
import re
from typing import Iterable

from core.constants import (
    DEFAULT_DISPATCHER_NOTES,
    DEFAULT_TECHNOLOGY,
    DEFAULT_TICKET_ISSUE,
    TECHNOLOGY_SEPARATOR,
)
from core.types import SheetRow, Site, Ticket
from transforms.keyword_rules import (
    classify_severity,
    classify_site_status,
    classify_ticket_status,
)

_LEADING_NUMBER = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def row_to_site(row: SheetRow, now: datetime | None = None) -> Site:
    """Build a site from an accepted sheet row.

    Args:
        row: Parsed sheet row.
        now: Optional clock value used for missing timestamps.

    Returns:
        Normalized site record.
    """
    return Site(
        id=row.identifier,
        name=row.identifier,
        # The sheet has no dedicated location column.
        location=row.identifier,
        latitude=parse_coordinate(row.latitude),
        longitude=parse_coordinate(row.longitude),
        technology=primary_technology(row.technology),
        status=classify_site_status(row.site_status),
        last_update=row.updated_at or _now_iso(now),
    )


def row_to_ticket(row: SheetRow, now: datetime | None = None) -> Ticket | None:
    """Build a ticket from a sheet row when it carries a ticket id.

    Args:
        row: Parsed sheet row.
        now: Optional clock value used for missing timestamps.

    Returns:
        Normalized ticket, or None when the row has no ticket id.
    """
    if row.ticket_id is None:
        return None
    timestamp = _now_iso(now)
    return Ticket(
        id=row.ticket_id,
        site_id=row.identifier,
        site_name=row.identifier,
        issue=row.issue or DEFAULT_TICKET_ISSUE,
        severity=classify_severity(row.severity),
        status=classify_ticket_status(row.ticket_status),
        created_at=row.created_at or timestamp,
        updated_at=row.updated_at or timestamp,
        dispatcher_notes=row.notes or DEFAULT_DISPATCHER_NOTES,
    )


def normalize_rows(
    rows: Iterable[SheetRow],
    now: datetime | None = None,
) -> tuple[list[Site], list[Ticket]]:
    """Normalize rows into ordered site and ticket collections.

    Args:
        rows: Accepted sheet rows in display order.
        now: Optional clock value shared by every defaulted timestamp.

    Returns:
        Sites and tickets, both in row order.
    """
    clock = now or datetime.now(timezone.utc)
    sites: list[Site] = []
    tickets: list[Ticket] = []
    for row in rows:
        sites.append(row_to_site(row, clock))
        ticket = row_to_ticket(row, clock)
        if ticket is not None:
            tickets.append(ticket)
    return sites, tickets


def primary_technology(raw_value: str) -> str:
    """Return the first token of a composite descriptor like ``2G/4G/5G``."""
    first_token = raw_value.split(TECHNOLOGY_SEPARATOR)[0].strip()
    return first_token or DEFAULT_TECHNOLOGY


def parse_coordinate(raw_value: str) -> float:
    """Parse the leading number of coordinate text.

    Trailing text after the number is ignored, so ``"25.6abc"`` reads as
    ``25.6``. Text that does not start with a number yields NaN.
    """
    match = _LEADING_NUMBER.match(raw_value)
    if match is None:
        return float("nan")
    return float(match.group(0))


def _now_iso(now: datetime | None) -> str:
    clock = now or datetime.now(timezone.utc)
    return clock.isoformat()
