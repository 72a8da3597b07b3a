"""Public SDK surface for SitePulse.

This module provides a stable import path for dashboard consumers.
It re-exports the pipeline entry points and typed result models.
"""

from __future__ import annotations

from core.config import SitePulseConfig
from core.types import (
    CowUnit,
    NetworkStats,
    PowerOutageEvent,
    PowerStats,
    PowerTicket,
    Site,
    SiteStats,
    Ticket,
)
from ingest.dashboard_data import DashboardData, FallbackData, LiveData
from ingest.pipeline import build_dashboard_data, load_dashboard_data
from ingest.refresh_loop import SheetRefresher
from transforms.network_stats import compute_network_stats
from transforms.power_stats import compute_power_stats
from transforms.site_stats import compute_site_stats, plottable_sites

__all__ = [
    "CowUnit",
    "DashboardData",
    "FallbackData",
    "LiveData",
    "NetworkStats",
    "PowerOutageEvent",
    "PowerStats",
    "PowerTicket",
    "SheetRefresher",
    "Site",
    "SitePulseConfig",
    "SiteStats",
    "Ticket",
    "build_dashboard_data",
    "compute_network_stats",
    "compute_power_stats",
    "compute_site_stats",
    "load_dashboard_data",
    "plottable_sites",
]
