"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_SITEPULSE_ENV_NAMES = (
    "SITEPULSE_SHEET_URL",
    "SITEPULSE_FETCH_TIMEOUT_SECONDS",
    "SITEPULSE_REFRESH_INTERVAL_SECONDS",
    "SITEPULSE_AVAILABILITY_DECIMALS",
)


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def isolated_sitepulse_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer SITEPULSE_* settings out of every test."""
    for env_name in _SITEPULSE_ENV_NAMES:
        monkeypatch.delenv(env_name, raising=False)
