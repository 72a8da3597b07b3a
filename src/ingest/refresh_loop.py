"""Periodic background refresh of the dashboard dataset.

Design:
- One pass runs the full pipeline and replaces the latest result.
- Passes never overlap: a pass requested while another is in flight
  is skipped rather than queued.
- The polling thread is a daemon and waits on an event between passes,
  so ``stop()`` takes effect without sleeping out the interval.
"""

from __future__ import annotations

import threading
from typing import Callable

import httpx

from core.config import SitePulseConfig
from core.logging_config import get_logger
from ingest.dashboard_data import DashboardData
from ingest.pipeline import load_dashboard_data

_LOGGER = get_logger(__name__)


class SheetRefresher:
    """Owns the most recent dashboard dataset and refreshes it on demand or on a timer."""

    def __init__(
        self,
        config: SitePulseConfig,
        on_update: Callable[[DashboardData], None] | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._config = config
        self._on_update = on_update
        self._client = client
        self._in_flight = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self._latest: DashboardData | None = None

    @property
    def latest(self) -> DashboardData | None:
        """Most recent result, or None before the first pass completes."""
        return self._latest

    def refresh(self) -> DashboardData | None:
        """Run one pipeline pass unless another is already running.

        Returns:
            The new result, or None when the pass was skipped.
        """
        if not self._in_flight.acquire(blocking=False):
            _LOGGER.info("refresh_skipped", sheet_url=self._config.sheet_url)
            return None
        try:
            result = load_dashboard_data(self._config, client=self._client)
            self._latest = result
        finally:
            self._in_flight.release()
        if self._on_update is not None:
            self._on_update(result)
        return result

    def start(self) -> None:
        """Start the background polling thread."""
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._loop, name="sheet-refresher", daemon=True)
        self._thread.start()

    def stop(self, timeout_seconds: float | None = None) -> None:
        """Signal the polling thread to stop and wait for it to exit."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout_seconds)
            self._thread = None

    def _loop(self) -> None:
        while not self._stop.is_set():
            try:
                self.refresh()
            except Exception as error:  # on_update errors must not end polling
                _LOGGER.error(
                    "refresh_failed",
                    sheet_url=self._config.sheet_url,
                    error=f"{error.__class__.__name__}: {error}",
                )
            self._stop.wait(self._config.refresh_interval_seconds)
