"""Ordered keyword classification rules.

This module maps free-text severity and status cells onto fixed labels.
Rules are evaluated top to bottom and the first match wins, so a cell
naming several keywords resolves by table order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Literal, Sequence, TypeVar

from core.types import SiteStatus, TicketSeverity, TicketStatus

LabelT = TypeVar("LabelT")
MatchMode = Literal["substring", "exact"]


@dataclass(frozen=True)
class KeywordRule(Generic[LabelT]):
    """Map any of ``keywords`` onto ``label``.

    Attributes:
        keywords: Lowercase keywords tested against the cell.
        label: Classification returned when a keyword matches.
    """

    keywords: tuple[str, ...]
    label: LabelT

    def matches(self, value: str, mode: MatchMode) -> bool:
        """Return whether a lowercased cell value satisfies this rule."""
        if mode == "exact":
            return value in self.keywords
        return any(keyword in value for keyword in self.keywords)


# Ticket priority follows the historical if/else order of the sheet
# importer. A cell like "high, escalated to critical" resolves to critical.
SEVERITY_RULES: tuple[KeywordRule[TicketSeverity], ...] = (
    KeywordRule(("critical",), "critical"),
    KeywordRule(("high",), "high"),
    KeywordRule(("low",), "low"),
    KeywordRule(("medium",), "medium"),
)

TICKET_STATUS_RULES: tuple[KeywordRule[TicketStatus], ...] = (
    KeywordRule(("resolved", "closed"), "resolved"),
    KeywordRule(("in-progress", "in progress", "assigned", "pending"), "in-progress"),
    KeywordRule(("open",), "open"),
)

SITE_STATUS_RULES: tuple[KeywordRule[SiteStatus], ...] = (
    KeywordRule(("critical",), "critical"),
    KeywordRule(("warning",), "warning"),
)


def classify(
    raw_value: str | None,
    rules: Sequence[KeywordRule[LabelT]],
    default: LabelT,
    mode: MatchMode = "substring",
) -> LabelT:
    """Classify a raw cell with an ordered rule table.

    Args:
        raw_value: Cell text, or None when absent.
        rules: Rules in priority order.
        default: Label used when the cell is blank or nothing matches.
        mode: ``substring`` containment or ``exact`` equality.

    Returns:
        Label of the first matching rule, else ``default``.
    """
    if raw_value is None:
        return default
    value = raw_value.strip().lower()
    if not value:
        return default
    for rule in rules:
        if rule.matches(value, mode):
            return rule.label
    return default


def classify_severity(raw_value: str | None) -> TicketSeverity:
    """Classify ticket severity, defaulting to ``medium``."""
    return classify(raw_value, SEVERITY_RULES, "medium")


def classify_ticket_status(raw_value: str | None) -> TicketStatus:
    """Classify ticket status, defaulting to ``open``."""
    return classify(raw_value, TICKET_STATUS_RULES, "open")


def classify_site_status(raw_value: str | None) -> SiteStatus:
    """Classify site network status by exact keyword, defaulting to ``operational``."""
    return classify(raw_value, SITE_STATUS_RULES, "operational", mode="exact")
