"""HTTP retrieval of the published sheet export.

This module performs one bounded GET per call with no retries or caching.
Failures surface as SheetFetchError for the pipeline to absorb.
"""

from __future__ import annotations

import httpx

from core.constants import DEFAULT_FETCH_TIMEOUT_SECONDS, HTTP_USER_AGENT
from core.errors import SheetFetchError


def fetch_sheet_csv(
    url: str,
    client: httpx.Client | None = None,
    timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS,
) -> str:
    """Download the sheet export as text.

    Args:
        url: CSV export URL.
        client: Optional preconfigured client, used as-is and left open.
        timeout_seconds: Upper bound for the request when no client is given.

    Returns:
        Raw CSV payload.

    Raises:
        SheetFetchError: On transport failure, non-2xx status, or blank body.
    """
    if client is not None:
        return _fetch_with_client(client, url)
    with httpx.Client(timeout=timeout_seconds, headers={"User-Agent": HTTP_USER_AGENT}) as owned:
        return _fetch_with_client(owned, url)


def _fetch_with_client(client: httpx.Client, url: str) -> str:
    try:
        response = client.get(url, follow_redirects=True)
    except (httpx.HTTPError, httpx.InvalidURL) as error:
        raise SheetFetchError(
            f"Failed to fetch sheet export from {url}: {error.__class__.__name__}: {error}",
            reason="fetch_failed",
        ) from error
    if not response.is_success:
        raise SheetFetchError(
            f"Sheet export at {url} answered HTTP {response.status_code}.",
            reason="http_status",
            status_code=response.status_code,
        )
    text = response.text
    if not text.strip():
        raise SheetFetchError(
            f"Sheet export at {url} returned an empty body.",
            reason="empty_body",
            status_code=response.status_code,
        )
    return text
