"""Shared typed models.

This module defines immutable data models used by the parser,
normalizer, and aggregation layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
import math
from typing import Any, Literal, Union

SiteStatus = Literal["operational", "warning", "critical"]
TicketSeverity = Literal["low", "medium", "high", "critical"]
TicketStatus = Literal["open", "in-progress", "resolved"]
RejectionReason = Literal["too_few_fields", "missing_identifier"]
PowerTicketType = Literal["outage", "power"]
CowStatus = Literal["active", "warning", "inactive"]


@dataclass(frozen=True)
class SheetRow:
    """One accepted data line of the sheet, mapped by column position.

    Required columns are always strings (possibly empty except for the
    identifier). Optional columns are ``None`` when absent, empty, or
    whitespace-only.

    Attributes:
        line_number: One-based line number in the payload (header is line 1).
        identifier: Site identifier from column 0, never empty.
        technology: Composite technology descriptor, e.g. ``2G/4G/5G``.
        latitude: Raw latitude text.
        longitude: Raw longitude text.
        ticket_id: Ticket identifier; rows without it produce no ticket.
        issue: Ticket issue description.
        severity: Raw severity text.
        ticket_status: Raw ticket status text.
        created_at: Ticket creation timestamp text.
        updated_at: Last update timestamp text.
        notes: Dispatcher notes.
        site_status: Optional trailing network status of the site.
    """

    line_number: int
    identifier: str
    technology: str
    latitude: str
    longitude: str
    ticket_id: str | None = None
    issue: str | None = None
    severity: str | None = None
    ticket_status: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    notes: str | None = None
    site_status: str | None = None


@dataclass(frozen=True)
class RowRejection:
    """A data line excluded from the parsed output.

    Attributes:
        line_number: One-based line number in the payload.
        reason: Why the line was excluded.
    """

    line_number: int
    reason: RejectionReason


RowParseResult = Union[SheetRow, RowRejection]


@dataclass(frozen=True)
class Site:
    """A monitored network node.

    Attributes:
        id: Site identifier.
        name: Display name, same value as ``id`` for sheet data.
        location: Free-text location, falls back to ``name``.
        latitude: Latitude, ``NaN`` when the source text is not numeric.
        longitude: Longitude, ``NaN`` when the source text is not numeric.
        technology: Primary radio technology label.
        status: Network status of the site.
        last_update: ISO-8601 timestamp of the latest update.
    """

    id: str
    name: str
    location: str
    latitude: float
    longitude: float
    technology: str
    status: SiteStatus
    last_update: str

    @property
    def is_plottable(self) -> bool:
        """Return whether both coordinates are usable numbers."""
        return not (math.isnan(self.latitude) or math.isnan(self.longitude))

    def to_dict(self) -> dict[str, Any]:
        """Return a plain mapping using display-layer key names."""
        return {
            "id": self.id,
            "name": self.name,
            "location": self.location,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "technology": self.technology,
            "status": self.status,
            "lastUpdate": self.last_update,
        }


@dataclass(frozen=True)
class Ticket:
    """An open issue tied to a site by its denormalized name.

    ``site_id`` is not guaranteed to resolve to a loaded site.
    """

    id: str
    site_id: str
    site_name: str
    issue: str
    severity: TicketSeverity
    status: TicketStatus
    created_at: str
    updated_at: str
    dispatcher_notes: str

    def to_dict(self) -> dict[str, Any]:
        """Return a plain mapping using display-layer key names."""
        return {
            "id": self.id,
            "siteId": self.site_id,
            "siteName": self.site_name,
            "issue": self.issue,
            "severity": self.severity,
            "status": self.status,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "dispatcherNotes": self.dispatcher_notes,
        }


@dataclass(frozen=True)
class SiteStats:
    """Aggregate counts over the current site and ticket collections."""

    total_sites: int
    operational_sites: int
    warning_sites: int
    critical_sites: int
    availability: str
    plottable_sites: int
    total_tickets: int
    open_tickets: int
    in_progress_tickets: int
    resolved_tickets: int
    critical_tickets: int
    high_tickets: int
    medium_tickets: int
    low_tickets: int
    degraded_tickets: int

    def to_dict(self) -> dict[str, Any]:
        """Return stats as a plain mapping using display-layer key names."""
        return {_camel_case(key): value for key, value in asdict(self).items()}


def _camel_case(snake_name: str) -> str:
    head, *tail = snake_name.split("_")
    return head + "".join(part.capitalize() for part in tail)


@dataclass(frozen=True)
class PowerTicket:
    """A power or outage incident raised against a location.

    Attributes:
        id: Ticket identifier.
        location: Unit or zone the ticket refers to.
        severity: Incident severity.
        type: ``outage`` for loss of supply, ``power`` for degraded supply.
        status: Ticket lifecycle status.
        created_at: ISO-8601 creation timestamp.
        duration: Downtime in minutes, ``None`` when not yet known.
        affected_area: Optional zone name.
    """

    id: str
    location: str
    severity: TicketSeverity
    type: PowerTicketType
    status: TicketStatus
    created_at: str
    duration: int | None = None
    affected_area: str | None = None


@dataclass(frozen=True)
class PowerOutageEvent:
    """A located outage with its device impact."""

    id: str
    location: str
    latitude: float
    longitude: float
    start_time: str
    duration: int
    severity: TicketSeverity
    affected_devices: int


@dataclass(frozen=True)
class PowerStats:
    """Aggregate counts over power tickets and outage events.

    ``availability`` is a two-decimal percentage of the observation window
    not lost to unresolved downtime.
    """

    critical_count: int
    high_count: int
    medium_count: int
    low_count: int
    open_count: int
    in_progress_count: int
    total_tickets: int
    total_outage_duration: int
    availability: str
    total_affected_devices: int

    def to_dict(self) -> dict[str, Any]:
        """Return stats as a plain mapping using display-layer key names."""
        return {_camel_case(key): value for key, value in asdict(self).items()}


@dataclass(frozen=True)
class CowUnit:
    """A cell-on-wheels unit and its live radio metrics.

    Attributes:
        name: Unit identifier.
        tech: Composite technology descriptor.
        latitude: Unit latitude.
        longitude: Unit longitude.
        status: Unit health.
        signal_strength: Signal strength percentage.
        coverage: Coverage percentage.
        active_users: Connected users.
        data_usage: Data usage percentage.
    """

    name: str
    tech: str
    latitude: float
    longitude: float
    status: CowStatus
    signal_strength: float
    coverage: float
    active_users: int
    data_usage: float


@dataclass(frozen=True)
class NetworkStats:
    """Aggregate metrics over cell-on-wheels units."""

    total_cows: int
    active_cows: int
    warning_cows: int
    avg_signal_strength: int
    total_active_users: int
    avg_data_usage: int

    def to_dict(self) -> dict[str, Any]:
        """Return stats as a plain mapping using display-layer key names."""
        return {
            "totalCOWs": self.total_cows,
            "activeCOWs": self.active_cows,
            "warningCOWs": self.warning_cows,
            "avgSignalStrength": self.avg_signal_strength,
            "totalActiveUsers": self.total_active_users,
            "avgDataUsage": self.avg_data_usage,
        }
