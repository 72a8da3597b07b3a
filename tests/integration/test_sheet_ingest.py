"""Integration tests for the sheet-to-dashboard workflow."""

from __future__ import annotations

import httpx

from core.config import SitePulseConfig
from sitepulse import FallbackData, LiveData, SheetRefresher, load_dashboard_data
from tests.fixture_paths import fixture_text
from tests.http_stubs import mock_sheet_client, static_sheet_client


def test_example_export_produces_sites_tickets_and_stats() -> None:
    """End-to-end flow should turn the example export into the display payload."""
    body = fixture_text("sheet/example.csv")
    client = static_sheet_client(200, body)
    config = SitePulseConfig(sheet_url="https://sheets.example/export.csv")

    result = load_dashboard_data(config, client=client)
    payload = result.to_dict()

    assert isinstance(result, LiveData)
    assert [(site["id"], site["technology"], site["status"]) for site in payload["sites"]] == [
        ("CWH001", "5G", "operational"),
        ("CWH002", "4G", "operational"),
    ]
    assert len(payload["tickets"]) == 1
    ticket = payload["tickets"][0]
    assert ticket["id"] == "TKT01"
    assert ticket["severity"] == "high"
    assert ticket["status"] == "open"
    assert ticket["issue"] == "Signal, weak"
    assert ticket["dispatcherNotes"] == 'Check "antenna"'
    assert payload["stats"]["availability"] == "100"
    assert payload["source"] == "live"


def test_refresher_recovers_from_fallback_once_sheet_returns() -> None:
    """A refresher should show fallback data during an outage and live data after it."""
    body = fixture_text("sheet/example.csv")
    responses = iter([httpx.Response(503, text="maintenance"), httpx.Response(200, text=body)])
    client = mock_sheet_client(lambda request: next(responses))
    refresher = SheetRefresher(SitePulseConfig(sheet_url="https://sheets.example/export.csv"), client=client)

    during_outage = refresher.refresh()
    after_outage = refresher.refresh()

    assert isinstance(during_outage, FallbackData) and during_outage.reason == "http_status"
    assert isinstance(after_outage, LiveData)
    assert refresher.latest is after_outage
    assert after_outage.stats.total_tickets <= after_outage.stats.total_sites
