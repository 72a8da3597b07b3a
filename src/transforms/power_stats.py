"""Summary statistics over power tickets and outage events."""

from __future__ import annotations

from typing import Sequence

from core.constants import POWER_AVAILABILITY_DECIMALS, POWER_WINDOW_MINUTES
from core.types import PowerOutageEvent, PowerStats, PowerTicket
from transforms.site_stats import count_matching, round_half_up


def compute_power_stats(
    tickets: Sequence[PowerTicket],
    events: Sequence[PowerOutageEvent],
    window_minutes: int = POWER_WINDOW_MINUTES,
) -> PowerStats:
    """Compute the power stats block.

    Availability is the share of the observation window not covered by
    downtime of unresolved tickets, clamped at zero. Tickets without a
    known duration count as zero minutes.

    Args:
        tickets: Current power tickets.
        events: Current outage events.
        window_minutes: Observation window in minutes.

    Returns:
        Stats computed from the given collections.

    Raises:
        ValueError: If window_minutes is not positive.
    """
    if window_minutes <= 0:
        raise ValueError(f"window_minutes must be positive, got {window_minutes}")
    total_outage_duration = sum(
        ticket.duration or 0 for ticket in tickets if ticket.type == "outage"
    )
    unresolved_downtime = sum(
        ticket.duration or 0 for ticket in tickets if ticket.status != "resolved"
    )
    availability = max(0.0, (window_minutes - unresolved_downtime) / window_minutes * 100)
    return PowerStats(
        critical_count=count_matching(tickets, lambda ticket: ticket.severity == "critical"),
        high_count=count_matching(tickets, lambda ticket: ticket.severity == "high"),
        medium_count=count_matching(tickets, lambda ticket: ticket.severity == "medium"),
        low_count=count_matching(tickets, lambda ticket: ticket.severity == "low"),
        open_count=count_matching(tickets, lambda ticket: ticket.status == "open"),
        in_progress_count=count_matching(
            tickets, lambda ticket: ticket.status == "in-progress"
        ),
        total_tickets=len(tickets),
        total_outage_duration=total_outage_duration,
        availability=str(round_half_up(availability, POWER_AVAILABILITY_DECIMALS)),
        total_affected_devices=sum(event.affected_devices for event in events),
    )
