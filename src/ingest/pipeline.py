"""Sheet ingest orchestration.

This module chains fetch, parse, normalization, and aggregation.
It never lets a data-source failure reach the caller: any fetch error
or an export with zero usable rows yields the fixed fallback dataset.
That policy can hide a broken sheet, so the result type records it.
"""

from __future__ import annotations

from datetime import datetime

import httpx

from core.config import SitePulseConfig
from core.errors import SheetFetchError
from core.logging_config import get_logger
from ingest.csv_parser import parse_sheet_csv
from ingest.dashboard_data import DashboardData, FallbackData, FallbackReason, LiveData
from ingest.fallback_dataset import FALLBACK_SITES, FALLBACK_TICKETS
from ingest.sheet_fetcher import fetch_sheet_csv
from transforms.row_normalization import normalize_rows

_LOGGER = get_logger(__name__)


def load_dashboard_data(
    config: SitePulseConfig,
    client: httpx.Client | None = None,
    now: datetime | None = None,
) -> DashboardData:
    """Fetch the sheet and build the dashboard dataset.

    Args:
        config: Runtime configuration with sheet URL and limits.
        client: Optional HTTP client, e.g. one backed by a mock transport.
        now: Optional clock value for defaulted timestamps.

    Returns:
        Live data, or the fallback dataset when live data is unavailable.
    """
    try:
        text = fetch_sheet_csv(
            config.sheet_url,
            client=client,
            timeout_seconds=config.fetch_timeout_seconds,
        )
    except SheetFetchError as error:
        _LOGGER.warning(
            "sheet_fetch_failed",
            sheet_url=config.sheet_url,
            reason=error.reason,
            status_code=error.status_code,
            error=str(error),
        )
        return build_fallback_data(config, _fallback_reason(error))
    return build_dashboard_data(text, config, now)


def build_dashboard_data(
    text: str,
    config: SitePulseConfig,
    now: datetime | None = None,
) -> DashboardData:
    """Build the dataset from an already fetched CSV payload.

    Args:
        text: Raw CSV payload.
        config: Runtime configuration.
        now: Optional clock value for defaulted timestamps.

    Returns:
        Live data, or the fallback dataset when no row survives parsing.
    """
    rows = parse_sheet_csv(text)
    if not rows:
        return build_fallback_data(config, "no_rows")
    sites, tickets = normalize_rows(rows, now)
    _LOGGER.info(
        "sheet_loaded",
        sheet_url=config.sheet_url,
        site_count=len(sites),
        ticket_count=len(tickets),
    )
    return LiveData(
        sites=tuple(sites),
        tickets=tuple(tickets),
        availability_decimals=config.availability_decimals,
    )


def build_fallback_data(config: SitePulseConfig, reason: FallbackReason) -> FallbackData:
    """Return the fixed sample dataset tagged with its cause."""
    _LOGGER.warning("sheet_fallback_used", sheet_url=config.sheet_url, reason=reason)
    return FallbackData(
        sites=FALLBACK_SITES,
        tickets=FALLBACK_TICKETS,
        availability_decimals=config.availability_decimals,
        reason=reason,
    )


def _fallback_reason(error: SheetFetchError) -> FallbackReason:
    if error.reason == "http_status":
        return "http_status"
    if error.reason == "empty_body":
        return "empty_body"
    return "fetch_failed"
