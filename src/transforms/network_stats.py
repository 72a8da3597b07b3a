"""Summary statistics over cell-on-wheels units."""

from __future__ import annotations

from typing import Sequence

from core.types import CowUnit, NetworkStats
from transforms.site_stats import count_matching, round_half_up


def compute_network_stats(units: Sequence[CowUnit]) -> NetworkStats:
    """Compute the network stats block.

    Averages are rounded half-up to whole numbers and are 0 when there
    are no units.
    """
    return NetworkStats(
        total_cows=len(units),
        active_cows=count_matching(units, lambda unit: unit.status == "active"),
        warning_cows=count_matching(units, lambda unit: unit.status == "warning"),
        avg_signal_strength=_rounded_mean([unit.signal_strength for unit in units]),
        total_active_users=sum(unit.active_users for unit in units),
        avg_data_usage=_rounded_mean([unit.data_usage for unit in units]),
    )


def _rounded_mean(values: Sequence[float]) -> int:
    if not values:
        return 0
    return int(round_half_up(sum(values) / len(values), 0))
