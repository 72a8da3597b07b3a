"""In-process HTTP stubs for sheet fetch tests."""

from __future__ import annotations

from typing import Callable

import httpx

RequestHandler = Callable[[httpx.Request], httpx.Response]


def mock_sheet_client(handler: RequestHandler) -> httpx.Client:
    """Build an httpx client whose requests are answered by ``handler``."""
    return httpx.Client(transport=httpx.MockTransport(handler))


def static_sheet_client(status_code: int, text: str) -> httpx.Client:
    """Build a client that answers every request with one fixed response."""
    return mock_sheet_client(lambda request: httpx.Response(status_code, text=text))
