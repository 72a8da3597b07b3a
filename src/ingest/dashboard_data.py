"""Typed pipeline results for dashboard consumers.

Live and fallback results share one shape so consumers can render
either, while ``is_fallback`` and ``reason`` keep them distinguishable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Union

from core.constants import DEFAULT_AVAILABILITY_DECIMALS
from core.types import Site, SiteStats, Ticket
from transforms.site_stats import compute_site_stats

FallbackReason = Literal["fetch_failed", "http_status", "empty_body", "no_rows"]


@dataclass(frozen=True)
class _DashboardDataBase:
    sites: tuple[Site, ...]
    tickets: tuple[Ticket, ...]
    availability_decimals: int = DEFAULT_AVAILABILITY_DECIMALS

    @property
    def stats(self) -> SiteStats:
        """Stats recomputed from the current collections."""
        return compute_site_stats(self.sites, self.tickets, self.availability_decimals)

    def to_dict(self) -> dict[str, Any]:
        """Return the plain ``{sites, tickets, stats}`` display payload."""
        return {
            "sites": [site.to_dict() for site in self.sites],
            "tickets": [ticket.to_dict() for ticket in self.tickets],
            "stats": self.stats.to_dict(),
        }


@dataclass(frozen=True)
class LiveData(_DashboardDataBase):
    """Dataset parsed from the live sheet export."""

    is_fallback = False

    def to_dict(self) -> dict[str, Any]:
        """Return the display payload tagged as live data."""
        payload = super().to_dict()
        payload["source"] = "live"
        payload["reason"] = None
        return payload


@dataclass(frozen=True)
class FallbackData(_DashboardDataBase):
    """Fixed sample dataset substituted after a data-source failure.

    Attributes:
        reason: Why live data was not used.
    """

    reason: FallbackReason = "fetch_failed"
    is_fallback = True

    def to_dict(self) -> dict[str, Any]:
        """Return the display payload tagged with the fallback reason."""
        payload = super().to_dict()
        payload["source"] = "fallback"
        payload["reason"] = self.reason
        return payload


DashboardData = Union[LiveData, FallbackData]
