"""Core constants used across SitePulse modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DEFAULT_SHEET_URL = (
    "https://docs.google.com/spreadsheets/d/1WVROxCmhtU9W6GFme3lWaJ4jhYPaAmSAunC3dMPSyys"
    "/export?format=csv&gid=1338846885"
)
DEFAULT_FETCH_TIMEOUT_SECONDS = 10.0
DEFAULT_REFRESH_INTERVAL_SECONDS = 30.0
DEFAULT_AVAILABILITY_DECIMALS = 0
HTTP_USER_AGENT = "SitePulse/0.1 (sheet-ingest)"

MIN_ROW_FIELDS = 4
TECHNOLOGY_SEPARATOR = "/"
DEFAULT_TECHNOLOGY = "4G"
DEFAULT_TICKET_ISSUE = "No description"
DEFAULT_DISPATCHER_NOTES = ""
EMPTY_AVAILABILITY = "0"

POWER_WINDOW_MINUTES = 480
POWER_AVAILABILITY_DECIMALS = 2

# Positional column contract of the published sheet template.
COLUMN_IDENTIFIER = 0
COLUMN_TECHNOLOGY = 1
COLUMN_LATITUDE = 2
COLUMN_LONGITUDE = 3
COLUMN_TICKET_ID = 4
COLUMN_ISSUE = 5
COLUMN_SEVERITY = 6
COLUMN_TICKET_STATUS = 7
COLUMN_CREATED_AT = 8
COLUMN_UPDATED_AT = 9
COLUMN_NOTES = 10
COLUMN_SITE_STATUS = 11
