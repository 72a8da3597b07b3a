"""Summary statistics over site and ticket collections.

Stats are always derived from the collections passed in and are
never cached, so they cannot drift from the data they describe.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Iterable, Sequence, TypeVar

from core.constants import DEFAULT_AVAILABILITY_DECIMALS, EMPTY_AVAILABILITY
from core.types import Site, SiteStats, Ticket

ItemT = TypeVar("ItemT")

_DEGRADED_SEVERITIES = frozenset({"medium", "high", "critical"})


def compute_site_stats(
    sites: Sequence[Site],
    tickets: Sequence[Ticket],
    decimals: int = DEFAULT_AVAILABILITY_DECIMALS,
) -> SiteStats:
    """Compute the dashboard stats block.

    Args:
        sites: Current site collection.
        tickets: Current ticket collection.
        decimals: Fixed digits for the availability percentage.

    Returns:
        Stats computed from the given collections.
    """
    operational_sites = count_matching(sites, lambda site: site.status == "operational")
    return SiteStats(
        total_sites=len(sites),
        operational_sites=operational_sites,
        warning_sites=count_matching(sites, lambda site: site.status == "warning"),
        critical_sites=count_matching(sites, lambda site: site.status == "critical"),
        availability=format_availability(operational_sites, len(sites), decimals),
        plottable_sites=count_matching(sites, lambda site: site.is_plottable),
        total_tickets=len(tickets),
        open_tickets=count_matching(tickets, lambda ticket: ticket.status == "open"),
        in_progress_tickets=count_matching(tickets, lambda ticket: ticket.status == "in-progress"),
        resolved_tickets=count_matching(tickets, lambda ticket: ticket.status == "resolved"),
        critical_tickets=count_matching(tickets, lambda ticket: ticket.severity == "critical"),
        high_tickets=count_matching(tickets, lambda ticket: ticket.severity == "high"),
        medium_tickets=count_matching(tickets, lambda ticket: ticket.severity == "medium"),
        low_tickets=count_matching(tickets, lambda ticket: ticket.severity == "low"),
        degraded_tickets=count_matching(
            tickets, lambda ticket: ticket.severity in _DEGRADED_SEVERITIES
        ),
    )


def format_availability(operational: int, total: int, decimals: int) -> str:
    """Format operational share as a fixed-point percentage string.

    Args:
        operational: Number of operational sites.
        total: Number of sites.
        decimals: Fixed digits after the decimal point.

    Returns:
        Percentage text, or ``"0"`` when there are no sites.
    """
    if total == 0:
        return EMPTY_AVAILABILITY
    return str(round_half_up(operational / total * 100, decimals))


def plottable_sites(sites: Iterable[Site]) -> list[Site]:
    """Return sites whose coordinates can be placed on a map."""
    return [site for site in sites if site.is_plottable]


def round_half_up(value: float, decimals: int) -> Decimal:
    """Round a float to fixed digits, halves away from zero."""
    # Half-up on the exact binary value, so 12.5 renders as "13".
    quantum = Decimal(1).scaleb(-decimals)
    return Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)


def count_matching(items: Iterable[ItemT], predicate: Callable[[ItemT], bool]) -> int:
    """Return how many items satisfy the predicate."""
    return sum(1 for item in items if predicate(item))
