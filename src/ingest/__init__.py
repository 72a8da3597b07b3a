"""Sheet data ingestion.

This module fetches and parses the published monitoring sheet.
It produces typed site and ticket datasets for dashboard consumers.
"""
