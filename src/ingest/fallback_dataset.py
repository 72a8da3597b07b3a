"""Fixed sample sites and tickets shown when live data is unavailable."""

from __future__ import annotations

from core.types import Site, Ticket

_SAMPLE_UPDATE = "2025-12-09T13:45:00"

FALLBACK_SITES: tuple[Site, ...] = (
    Site("CWH076", "CWH076", "CWH076", 25.59805, 46.87754, "2G", "critical", _SAMPLE_UPDATE),
    Site("CWH022", "CWH022", "CWH022", 25.63587, 46.83091, "2G", "warning", _SAMPLE_UPDATE),
    Site("CWH188", "CWH188", "CWH188", 25.64236, 46.81855, "2G", "warning", _SAMPLE_UPDATE),
    Site("CWH094", "CWH094", "CWH094", 25.67764, 46.85573, "2G", "operational", _SAMPLE_UPDATE),
    Site("COW652", "COW652", "COW652", 25.67445, 46.8308, "2G", "operational", _SAMPLE_UPDATE),
    Site("CWS808", "CWS808", "CWS808", 25.6609, 46.86093, "2G", "operational", _SAMPLE_UPDATE),
)

FALLBACK_TICKETS: tuple[Ticket, ...] = (
    Ticket(
        id="TKT-001",
        site_id="CWH076",
        site_name="CWH076",
        issue="Power outage on generator feed",
        severity="critical",
        status="open",
        created_at="2025-12-09T13:45:00",
        updated_at="2025-12-09T13:45:00",
        dispatcher_notes="Field team dispatched",
    ),
    Ticket(
        id="TKT-002",
        site_id="CWH022",
        site_name="CWH022",
        issue="Backhaul link flapping",
        severity="high",
        status="in-progress",
        created_at="2025-12-09T12:30:00",
        updated_at="2025-12-09T13:10:00",
        dispatcher_notes="",
    ),
    Ticket(
        id="TKT-003",
        site_id="CWH188",
        site_name="CWH188",
        issue="High interference on 4G sector",
        severity="medium",
        status="open",
        created_at="2025-12-09T11:20:00",
        updated_at="2025-12-09T11:20:00",
        dispatcher_notes="Monitor after crowd peak",
    ),
)
