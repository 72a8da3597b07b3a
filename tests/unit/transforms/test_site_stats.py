"""Unit tests for dashboard summary statistics."""

from __future__ import annotations

from core.types import Site, Ticket
from transforms.site_stats import compute_site_stats, format_availability, plottable_sites


def _site(site_id: str, status: str = "operational", latitude: float = 25.0) -> Site:
    return Site(site_id, site_id, site_id, latitude, 46.0, "4G", status, "2025-01-01")  # type: ignore[arg-type]


def _ticket(ticket_id: str, severity: str, status: str) -> Ticket:
    return Ticket(
        id=ticket_id,
        site_id="S1",
        site_name="S1",
        issue="issue",
        severity=severity,  # type: ignore[arg-type]
        status=status,  # type: ignore[arg-type]
        created_at="2025-01-01",
        updated_at="2025-01-01",
        dispatcher_notes="",
    )


def test_compute_site_stats_handles_empty_collections() -> None:
    """Empty inputs should give zero counts and a "0" availability."""
    stats = compute_site_stats([], [])

    assert stats.total_sites == 0
    assert stats.total_tickets == 0
    assert stats.availability == "0"


def test_compute_site_stats_full_availability() -> None:
    """All-operational sites should report full availability."""
    sites = [_site("S1"), _site("S2")]

    assert compute_site_stats(sites, []).availability == "100"
    assert compute_site_stats(sites, [], decimals=2).availability == "100.00"


def test_compute_site_stats_counts_by_status_and_severity() -> None:
    """Stats should be simple predicate counts over each collection."""
    sites = [
        _site("S1"),
        _site("S2", "warning"),
        _site("S3", "critical", latitude=float("nan")),
    ]
    tickets = [
        _ticket("T1", "critical", "open"),
        _ticket("T2", "high", "in-progress"),
        _ticket("T3", "low", "resolved"),
        _ticket("T4", "medium", "open"),
    ]

    stats = compute_site_stats(sites, tickets, decimals=2)

    assert (stats.operational_sites, stats.warning_sites, stats.critical_sites) == (1, 1, 1)
    assert stats.availability == "33.33"
    assert stats.plottable_sites == 2
    assert (stats.open_tickets, stats.in_progress_tickets, stats.resolved_tickets) == (2, 1, 1)
    assert (stats.critical_tickets, stats.high_tickets) == (1, 1)
    assert (stats.medium_tickets, stats.low_tickets) == (1, 1)
    assert stats.degraded_tickets == 3


def test_format_availability_rounds_half_up() -> None:
    """Exact halves should round up like the dashboard gauges."""
    assert format_availability(1, 8, 0) == "13"
    assert format_availability(2, 3, 1) == "66.7"
    assert format_availability(0, 5, 0) == "0"


def test_plottable_sites_filters_nan_coordinates() -> None:
    """Sites with NaN coordinates should be excluded from map input."""
    sites = [_site("S1"), _site("S2", latitude=float("nan"))]

    assert [site.id for site in plottable_sites(sites)] == ["S1"]
