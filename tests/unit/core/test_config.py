"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import SitePulseConfig
from core.constants import DEFAULT_SHEET_URL
from core.errors import SitePulseConfigError


def test_from_env_uses_defaults() -> None:
    """Config should fall back to built-in defaults when env is empty."""
    config = SitePulseConfig.from_env()

    assert config == SitePulseConfig()
    assert config.sheet_url == DEFAULT_SHEET_URL


def test_from_env_reads_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should read every supported environment override."""
    monkeypatch.setenv("SITEPULSE_SHEET_URL", " https://sheets.example/export.csv ")
    monkeypatch.setenv("SITEPULSE_FETCH_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("SITEPULSE_REFRESH_INTERVAL_SECONDS", "60")
    monkeypatch.setenv("SITEPULSE_AVAILABILITY_DECIMALS", "2")

    config = SitePulseConfig.from_env()

    assert config.sheet_url == "https://sheets.example/export.csv"
    assert config.fetch_timeout_seconds == 2.5
    assert config.refresh_interval_seconds == 60.0
    assert config.availability_decimals == 2


@pytest.mark.parametrize(
    ("env_name", "raw_value"),
    [
        ("SITEPULSE_FETCH_TIMEOUT_SECONDS", "soon"),
        ("SITEPULSE_FETCH_TIMEOUT_SECONDS", "0"),
        ("SITEPULSE_REFRESH_INTERVAL_SECONDS", "-5"),
        ("SITEPULSE_AVAILABILITY_DECIMALS", "1.5"),
        ("SITEPULSE_AVAILABILITY_DECIMALS", "-1"),
        ("SITEPULSE_SHEET_URL", "   "),
        ("SITEPULSE_SHEET_URL", "http://sheets.example:notaport/export.csv"),
        ("SITEPULSE_SHEET_URL", "ftp://sheets.example/export.csv"),
        ("SITEPULSE_SHEET_URL", "sheets.example/export.csv"),
    ],
)
def test_from_env_raises_for_invalid_values(
    monkeypatch: pytest.MonkeyPatch,
    env_name: str,
    raw_value: str,
) -> None:
    """Config should reject malformed environment values with a config error."""
    monkeypatch.setenv(env_name, raw_value)

    with pytest.raises(SitePulseConfigError):
        SitePulseConfig.from_env()
