"""SitePulse exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class SitePulseError(Exception):
    """Base exception for all SitePulse failures."""


class SitePulseConfigError(SitePulseError):
    """Raised for invalid runtime configuration."""


class SheetFetchError(SitePulseError):
    """Raised when the sheet export cannot be retrieved.

    Attributes:
        reason: Short cause label (``fetch_failed``, ``http_status``, ``empty_body``).
        status_code: HTTP status when the server answered, else None.
    """

    def __init__(self, message: str, reason: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.reason = reason
        self.status_code = status_code
