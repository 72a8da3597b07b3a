"""Runtime configuration model for SitePulse.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

import httpx

from core.constants import (
    DEFAULT_AVAILABILITY_DECIMALS,
    DEFAULT_FETCH_TIMEOUT_SECONDS,
    DEFAULT_REFRESH_INTERVAL_SECONDS,
    DEFAULT_SHEET_URL,
)
from core.errors import SitePulseConfigError

_SHEET_URL_SCHEMES = ("http", "https")


@dataclass(frozen=True)
class SitePulseConfig:
    """Validated runtime configuration.

    Attributes:
        sheet_url: Published CSV export URL of the monitoring sheet.
        fetch_timeout_seconds: Upper bound on a single sheet request.
        refresh_interval_seconds: Delay between background refresh passes.
        availability_decimals: Fixed digits used when formatting availability.
    """

    sheet_url: str = DEFAULT_SHEET_URL
    fetch_timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS
    refresh_interval_seconds: float = DEFAULT_REFRESH_INTERVAL_SECONDS
    availability_decimals: int = DEFAULT_AVAILABILITY_DECIMALS

    @classmethod
    def from_env(cls) -> "SitePulseConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            SitePulseConfigError: If environment values are invalid.
        """
        sheet_url = _parse_sheet_url(os.getenv("SITEPULSE_SHEET_URL", DEFAULT_SHEET_URL))
        return cls(
            sheet_url=sheet_url,
            fetch_timeout_seconds=_parse_positive_float(
                "SITEPULSE_FETCH_TIMEOUT_SECONDS", DEFAULT_FETCH_TIMEOUT_SECONDS
            ),
            refresh_interval_seconds=_parse_positive_float(
                "SITEPULSE_REFRESH_INTERVAL_SECONDS", DEFAULT_REFRESH_INTERVAL_SECONDS
            ),
            availability_decimals=_parse_decimals(
                "SITEPULSE_AVAILABILITY_DECIMALS", DEFAULT_AVAILABILITY_DECIMALS
            ),
        )


def _parse_sheet_url(raw_value: str) -> str:
    """Validate the sheet export URL.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Trimmed absolute http(s) URL.

    Raises:
        SitePulseConfigError: If value is blank, malformed, or not http(s).
    """
    sheet_url = raw_value.strip()
    try:
        parsed_url = httpx.URL(sheet_url)
    except httpx.InvalidURL as error:
        raise SitePulseConfigError(
            f"Invalid SITEPULSE_SHEET_URL value: {error}. "
            "Set it to the published CSV export URL or unset it to use the default."
        ) from error
    if parsed_url.scheme not in _SHEET_URL_SCHEMES or not parsed_url.host:
        raise SitePulseConfigError(
            f"Invalid SITEPULSE_SHEET_URL value: expected an absolute http(s) URL, got '{sheet_url}'. "
            "Set it to the published CSV export URL or unset it to use the default."
        )
    return sheet_url


def _parse_positive_float(env_name: str, default: float) -> float:
    """Parse a strictly positive float environment value.

    Args:
        env_name: Environment variable name.
        default: Value used when the variable is unset.

    Returns:
        Parsed positive float.

    Raises:
        SitePulseConfigError: If value is not a positive number.
    """
    raw_value = os.getenv(env_name)
    if raw_value is None:
        return default
    try:
        value = float(raw_value)
    except ValueError as error:
        raise SitePulseConfigError(
            f"Invalid {env_name} value: expected number, got '{raw_value}'. "
            f"Set {env_name} to a positive number of seconds."
        ) from error
    if not value > 0:
        raise SitePulseConfigError(
            f"Invalid {env_name} value: expected a value > 0, got '{raw_value}'."
        )
    return value


def _parse_decimals(env_name: str, default: int) -> int:
    """Parse a non-negative integer digit count."""
    raw_value = os.getenv(env_name)
    if raw_value is None:
        return default
    try:
        value = int(raw_value)
    except ValueError as error:
        raise SitePulseConfigError(
            f"Invalid {env_name} value: expected integer, got '{raw_value}'. "
            f"Set {env_name} to a whole number such as 0 or 2."
        ) from error
    if value < 0:
        raise SitePulseConfigError(
            f"Invalid {env_name} value: expected a value >= 0, got '{raw_value}'."
        )
    return value
