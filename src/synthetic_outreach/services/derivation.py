"""Event derivation: raw outreach events to funnel-flagged events.

:func:`derive_events` is a pure function.  It classifies every event into
funnel-stage booleans through a fixed outcome lookup table, marks each
lead's first contact, and measures the days from a lead's first contact
to its first meeting-stage outcome.  Output order always equals input
order.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence
from dataclasses import asdict, fields

from synthetic_outreach.domain.enums import Channel, Outcome
from synthetic_outreach.domain.timestamps import MS_PER_DAY, to_epoch_ms
from synthetic_outreach.domain.values import DerivedEvent, OutcomeFlags, OutreachEvent


def _flags(
    connected: bool = False,
    conversation: bool = False,
    booked: bool = False,
    held: bool = False,
    qualified: bool = False,
    no_show: bool = False,
) -> OutcomeFlags:
    return OutcomeFlags(
        is_connected=connected,
        is_conversation=conversation,
        is_meeting_booked=booked,
        is_meeting_held=held,
        is_qualified=qualified,
        is_no_show=no_show,
        is_dial=True,
    )


# Each outcome implies every weaker stage; no_show implies booked only.
OUTCOME_FLAGS: dict[Outcome, OutcomeFlags] = {
    Outcome.NO_ANSWER: _flags(),
    Outcome.VOICEMAIL: _flags(),
    Outcome.CONNECTED: _flags(connected=True),
    Outcome.CONVERSATION: _flags(connected=True, conversation=True),
    Outcome.MEETING_BOOKED: _flags(connected=True, conversation=True, booked=True),
    Outcome.MEETING_HELD: _flags(
        connected=True, conversation=True, booked=True, held=True
    ),
    Outcome.NO_SHOW: _flags(
        connected=True, conversation=True, booked=True, no_show=True
    ),
    Outcome.QUALIFIED: _flags(
        connected=True, conversation=True, booked=True, held=True, qualified=True
    ),
}

_EVENT_FIELDS = tuple(f.name for f in fields(OutreachEvent))


def derive_outcome_flags(event: OutreachEvent) -> OutcomeFlags:
    """Stage flags for *event*; ``is_dial`` depends on the channel alone."""
    flags = OUTCOME_FLAGS[event.outcome]
    return OutcomeFlags(
        is_connected=flags.is_connected,
        is_conversation=flags.is_conversation,
        is_meeting_booked=flags.is_meeting_booked,
        is_meeting_held=flags.is_meeting_held,
        is_qualified=flags.is_qualified,
        is_no_show=flags.is_no_show,
        is_dial=event.channel is Channel.CALL,
    )


def derive_events(events: Sequence[OutreachEvent]) -> list[DerivedEvent]:
    """Derive funnel flags and attribution for every event.

    First contact and first meeting are attributed on a copy sorted by
    timestamp.  When a lead has several events on the same timestamp the
    attribution follows the stable sort, i.e. input order; callers must not
    rely on that beyond a fixed sample.

    Parameters
    ----------
    events:
        Raw events, in any order.

    Returns
    -------
    list[DerivedEvent]
        One derived event per input event, in input order.
    """
    times = [to_epoch_ms(event.occurred_at) for event in events]
    order = sorted(range(len(events)), key=times.__getitem__)

    first_contact: dict[str, tuple[str, float]] = {}
    first_meeting: dict[str, tuple[str, float]] = {}
    for idx in order:
        event = events[idx]
        lead = event.lead_id
        if lead not in first_contact:
            first_contact[lead] = (event.event_id, times[idx])
        if event.outcome.is_meeting_stage and lead not in first_meeting:
            first_meeting[lead] = (event.event_id, times[idx])

    derived: list[DerivedEvent] = []
    for event in events:
        flags = derive_outcome_flags(event)
        contact_id, contact_time = first_contact[event.lead_id]
        meeting = first_meeting.get(event.lead_id)

        time_to_meeting: float | None = None
        if meeting is not None and meeting[0] == event.event_id:
            time_to_meeting = (meeting[1] - contact_time) / MS_PER_DAY

        derived.append(
            DerivedEvent(
                **{name: getattr(event, name) for name in _EVENT_FIELDS},
                **asdict(flags),
                is_first_contact=contact_id == event.event_id,
                time_to_meeting_days=time_to_meeting,
            )
        )
    return derived


def bucket_events_by_week(events: Sequence[DerivedEvent]) -> dict[str, list[DerivedEvent]]:
    """Group events by ``week_start``, weeks in chronological order."""
    buckets: dict[str, list[DerivedEvent]] = defaultdict(list)
    for event in events:
        buckets[event.week_start].append(event)
    return {week: buckets[week] for week in sorted(buckets)}
