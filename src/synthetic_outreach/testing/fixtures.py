"""A small, hand-checked event sample.

Eight call events across seven leads and three industries.  Useful
figures for the derived sample:

- Dial→Connect 6/8, Connect→Conversation 5/6, Meeting→Qualified 1/2,
  No-Show 1/4
- ``lead-4`` books a meeting 2 days 1 hour after first contact
- every event belongs to team ``Outbound`` (pipeline health 69)
"""

from __future__ import annotations

from synthetic_outreach.domain.enums import Channel, Objection, Outcome
from synthetic_outreach.domain.values import OutreachEvent

_WEEK_1 = "2024-01-01T00:00:00Z"
_WEEK_2 = "2024-01-08T00:00:00Z"


def _event(
    event_id: str,
    lead_id: str,
    timestamp: str,
    week_start: str,
    sdr_id: str,
    sdr_name: str,
    company: str,
    industry: str,
    outcome: Outcome,
    objection: Objection | None = None,
) -> OutreachEvent:
    return OutreachEvent(
        event_id=event_id,
        lead_id=lead_id,
        timestamp=timestamp,
        week_start=week_start,
        sdr_id=sdr_id,
        sdr_name=sdr_name,
        team="Outbound",
        company=company,
        industry=industry,
        channel=Channel.CALL,
        outcome=outcome,
        objection=objection,
    )


SAMPLE_EVENTS: tuple[OutreachEvent, ...] = (
    _event("evt-1", "lead-1", "2024-01-02T10:00:00Z", _WEEK_1, "sdr-1", "Jordan Lee",
           "Acme", "SaaS", Outcome.CONNECTED),
    _event("evt-2", "lead-2", "2024-01-02T11:00:00Z", _WEEK_1, "sdr-2", "Dev Patel",
           "Northwind", "SaaS", Outcome.CONVERSATION),
    _event("evt-3", "lead-3", "2024-01-03T09:30:00Z", _WEEK_1, "sdr-3", "Alex Smith",
           "Globex", "SaaS", Outcome.NO_ANSWER),
    _event("evt-4", "lead-4", "2024-01-03T15:00:00Z", _WEEK_1, "sdr-4", "Morgan Yu",
           "FinCorp", "Fintech", Outcome.NO_ANSWER),
    _event("evt-5", "lead-4", "2024-01-05T16:00:00Z", _WEEK_1, "sdr-4", "Morgan Yu",
           "FinCorp", "Fintech", Outcome.MEETING_BOOKED),
    _event("evt-6", "lead-5", "2024-01-09T13:00:00Z", _WEEK_2, "sdr-5", "Taylor Brooks",
           "FinCorp", "Fintech", Outcome.MEETING_HELD),
    _event("evt-7", "lead-6", "2024-01-09T14:00:00Z", _WEEK_2, "sdr-6", "Taylor Brooks",
           "FinCorp", "Fintech", Outcome.NO_SHOW, Objection.TIMING),
    _event("evt-8", "lead-7", "2024-01-10T10:30:00Z", _WEEK_2, "sdr-7", "Sky Harper",
           "HealthPlus", "Healthcare", Outcome.QUALIFIED),
)


def sample_events() -> list[OutreachEvent]:
    """A fresh list copy of :data:`SAMPLE_EVENTS`."""
    return list(SAMPLE_EVENTS)
