"""Unit tests for ordered keyword classification rules."""

from __future__ import annotations

import pytest

from transforms.keyword_rules import (
    SEVERITY_RULES,
    classify_severity,
    classify_site_status,
    classify_ticket_status,
)


@pytest.mark.parametrize(
    ("raw_value", "expected"),
    [
        ("Critical", "critical"),
        ("HIGH priority", "high"),
        ("low", "low"),
        ("Medium", "medium"),
        ("unknown", "medium"),
        ("", "medium"),
        ("   ", "medium"),
        (None, "medium"),
    ],
)
def test_classify_severity(raw_value: str | None, expected: str) -> None:
    """Severity should match by substring and default to medium."""
    assert classify_severity(raw_value) == expected


def test_classify_severity_uses_rule_order_for_multiple_keywords() -> None:
    """A value naming several severities resolves to the first rule in order."""
    assert [rule.label for rule in SEVERITY_RULES] == ["critical", "high", "low", "medium"]
    assert classify_severity("high priority, resolved as critical") == "critical"
    assert classify_severity("low to medium") == "low"
    assert classify_severity("medium-high") == "high"


@pytest.mark.parametrize(
    ("raw_value", "expected"),
    [
        ("Resolved", "resolved"),
        ("closed by NOC", "resolved"),
        ("In-Progress", "in-progress"),
        ("in progress", "in-progress"),
        ("Assigned", "in-progress"),
        ("pending vendor", "in-progress"),
        ("Open", "open"),
        ("new", "open"),
        (None, "open"),
    ],
)
def test_classify_ticket_status(raw_value: str | None, expected: str) -> None:
    """Ticket status should match by substring and default to open."""
    assert classify_ticket_status(raw_value) == expected


def test_classify_ticket_status_prefers_resolved_over_open() -> None:
    """Resolution keywords are checked before progress and open keywords."""
    assert classify_ticket_status("reopened then closed") == "resolved"


@pytest.mark.parametrize(
    ("raw_value", "expected"),
    [
        ("Critical", "critical"),
        ("WARNING", "warning"),
        (" warning ", "warning"),
        ("critical outage", "operational"),
        ("degraded", "operational"),
        (None, "operational"),
    ],
)
def test_classify_site_status_uses_exact_keywords(raw_value: str | None, expected: str) -> None:
    """Site status should only change on an exact keyword match."""
    assert classify_site_status(raw_value) == expected
