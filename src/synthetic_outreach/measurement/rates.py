"""Conversion-rate statistics over derived events.

Every rate is a filter-count-then-divide with a null-safe division:
``rate`` is ``None`` whenever the denominator is zero, never ``NaN`` and
never a ``ZeroDivisionError``.

=====================  ===================  ==========================
Rate                   Denominator          Numerator
=====================  ===================  ==========================
Dial→Connect           ``is_dial``          ``is_dial and is_connected``
Connect→Conversation   ``is_connected``     ``is_conversation``
Meeting→Qualified      ``is_meeting_held``  ``is_qualified``
No-Show                ``is_meeting_booked`` ``is_no_show``
=====================  ===================  ==========================
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from synthetic_outreach.domain.values import DerivedEvent, RateSummary

DIAL_TO_CONNECT = "Dial→Connect"
CONNECT_TO_CONVERSATION = "Connect→Conversation"
MEETING_TO_QUALIFIED = "Meeting→Qualified"
NO_SHOW = "No-Show Rate"


def calculate_rate(numerator: int, denominator: int) -> RateSummary:
    """Build a :class:`RateSummary`, leaving ``rate`` empty for a zero denominator."""
    return RateSummary(
        numerator=numerator,
        denominator=denominator,
        rate=None if denominator == 0 else numerator / denominator,
    )


def _count(events: Iterable[DerivedEvent], attr: str) -> int:
    return sum(1 for event in events if getattr(event, attr))


def compute_dial_to_connect_rate(events: Sequence[DerivedEvent]) -> RateSummary:
    denominator = _count(events, "is_dial")
    numerator = sum(1 for event in events if event.is_dial and event.is_connected)
    return calculate_rate(numerator, denominator)


def compute_connect_to_conversation_rate(events: Sequence[DerivedEvent]) -> RateSummary:
    return calculate_rate(_count(events, "is_conversation"), _count(events, "is_connected"))


def compute_meeting_to_qualified_rate(events: Sequence[DerivedEvent]) -> RateSummary:
    return calculate_rate(_count(events, "is_qualified"), _count(events, "is_meeting_held"))


def compute_no_show_rate(events: Sequence[DerivedEvent]) -> RateSummary:
    return calculate_rate(_count(events, "is_no_show"), _count(events, "is_meeting_booked"))


# ---------------------------------------------------------------------------
# Per-industry answer rate
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class IndustryAnswerRate:
    """Dial→Connect rate for a single industry."""

    industry: str
    summary: RateSummary

    @property
    def rate(self) -> float | None:
        return self.summary.rate


def compute_industry_answer_rates(events: Sequence[DerivedEvent]) -> list[IndustryAnswerRate]:
    """Dial→Connect per industry, ordered by industry name.

    Industries whose events are all non-call still appear, with a zero
    denominator and ``rate`` of ``None``.
    """
    dials: dict[str, int] = {}
    connects: dict[str, int] = defaultdict(int)
    for event in events:
        dials.setdefault(event.industry, 0)
        if event.is_dial:
            dials[event.industry] += 1
            if event.is_connected:
                connects[event.industry] += 1
    return [
        IndustryAnswerRate(industry, calculate_rate(connects[industry], dials[industry]))
        for industry in sorted(dials)
    ]
