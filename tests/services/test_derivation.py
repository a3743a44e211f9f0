"""Tests for event derivation: outcome flags, first contact, time to meeting."""

from __future__ import annotations

import pytest

from synthetic_outreach.domain.enums import Channel, Outcome
from synthetic_outreach.domain.values import DerivedEvent, GeneratedDataset
from synthetic_outreach.services.derivation import (
    OUTCOME_FLAGS,
    bucket_events_by_week,
    derive_events,
    derive_outcome_flags,
)

# outcome -> (connected, conversation, booked, held, qualified, no_show)
_EXPECTED_FLAGS = {
    Outcome.NO_ANSWER: (False, False, False, False, False, False),
    Outcome.VOICEMAIL: (False, False, False, False, False, False),
    Outcome.CONNECTED: (True, False, False, False, False, False),
    Outcome.CONVERSATION: (True, True, False, False, False, False),
    Outcome.MEETING_BOOKED: (True, True, True, False, False, False),
    Outcome.MEETING_HELD: (True, True, True, True, False, False),
    Outcome.NO_SHOW: (True, True, True, False, False, True),
    Outcome.QUALIFIED: (True, True, True, True, True, False),
}


def _flag_tuple(event) -> tuple[bool, ...]:
    return (
        event.is_connected,
        event.is_conversation,
        event.is_meeting_booked,
        event.is_meeting_held,
        event.is_qualified,
        event.is_no_show,
    )


# ===================================================================== #
#  Outcome flags                                                         #
# ===================================================================== #


class TestOutcomeFlags:

    def test_table_covers_every_outcome(self) -> None:
        assert set(OUTCOME_FLAGS) == set(Outcome)

    @pytest.mark.parametrize("outcome", list(Outcome))
    def test_flags_per_outcome(self, make_event, outcome: Outcome) -> None:
        flags = derive_outcome_flags(make_event(outcome=outcome))
        assert _flag_tuple(flags) == _EXPECTED_FLAGS[outcome]

    @pytest.mark.parametrize("channel", list(Channel))
    def test_is_dial_follows_channel(self, make_event, channel: Channel) -> None:
        flags = derive_outcome_flags(make_event(channel=channel, outcome=Outcome.QUALIFIED))
        assert flags.is_dial is (channel is Channel.CALL)

    def test_qualified_implies_weaker_stages(self) -> None:
        flags = OUTCOME_FLAGS[Outcome.QUALIFIED]
        assert flags.is_connected and flags.is_conversation
        assert flags.is_meeting_booked and flags.is_meeting_held

    def test_no_show_is_booked_but_not_held(self) -> None:
        flags = OUTCOME_FLAGS[Outcome.NO_SHOW]
        assert flags.is_meeting_booked
        assert not flags.is_meeting_held
        assert not flags.is_qualified


# ===================================================================== #
#  derive_events                                                         #
# ===================================================================== #


class TestDeriveEvents:

    def test_time_to_meeting_scenario(self, make_event) -> None:
        events = [
            make_event(lead_id="A", timestamp="2024-01-01T09:00:00.000Z",
                       outcome=Outcome.NO_ANSWER),
            make_event(lead_id="A", timestamp="2024-01-03T09:00:00.000Z",
                       outcome=Outcome.MEETING_BOOKED),
        ]
        first, second = derive_events(events)
        assert first.is_first_contact is True
        assert first.time_to_meeting_days is None
        assert second.is_first_contact is False
        assert second.time_to_meeting_days == pytest.approx(2.0)

    def test_output_order_matches_input(self, make_event) -> None:
        events = [
            make_event(timestamp="2024-01-05T09:00:00.000Z"),
            make_event(timestamp="2024-01-01T09:00:00.000Z"),
            make_event(timestamp="2024-01-03T09:00:00.000Z"),
        ]
        derived = derive_events(events)
        assert [d.event_id for d in derived] == [e.event_id for e in events]

    def test_first_contact_uses_timestamp_not_position(self, make_event) -> None:
        later = make_event(lead_id="L", timestamp="2024-01-05T09:00:00.000Z")
        earlier = make_event(lead_id="L", timestamp="2024-01-02T09:00:00.000Z")
        derived = derive_events([later, earlier])
        assert [d.is_first_contact for d in derived] == [False, True]

    def test_same_event_first_contact_and_meeting(self, make_event) -> None:
        (event,) = derive_events([make_event(outcome=Outcome.QUALIFIED)])
        assert event.is_first_contact
        assert event.time_to_meeting_days == 0

    def test_only_first_meeting_event_gets_duration(self, make_event) -> None:
        events = [
            make_event(lead_id="M", timestamp="2024-01-01T09:00:00.000Z"),
            make_event(lead_id="M", timestamp="2024-01-02T09:00:00.000Z",
                       outcome=Outcome.MEETING_BOOKED),
            make_event(lead_id="M", timestamp="2024-01-04T09:00:00.000Z",
                       outcome=Outcome.MEETING_HELD),
        ]
        derived = derive_events(events)
        assert [d.time_to_meeting_days for d in derived] == [None, pytest.approx(1.0), None]

    def test_no_show_is_not_a_first_meeting(self, make_event) -> None:
        events = [
            make_event(lead_id="N", timestamp="2024-01-01T09:00:00.000Z",
                       outcome=Outcome.NO_SHOW),
        ]
        assert derive_events(events)[0].time_to_meeting_days is None

    def test_lead_without_meeting_has_no_duration(self, make_event) -> None:
        events = [
            make_event(lead_id="Z", timestamp="2024-01-01T09:00:00.000Z"),
            make_event(lead_id="Z", timestamp="2024-01-02T09:00:00.000Z",
                       outcome=Outcome.CONVERSATION),
        ]
        assert all(d.time_to_meeting_days is None for d in derive_events(events))

    def test_same_timestamp_ties_follow_input_order(self, make_event) -> None:
        stamp = "2024-01-02T10:00:00.000Z"
        events = [
            make_event(event_id="a", lead_id="T", timestamp=stamp, outcome=Outcome.MEETING_HELD),
            make_event(event_id="b", lead_id="T", timestamp=stamp, outcome=Outcome.QUALIFIED),
        ]
        first, second = derive_events(events)
        assert first.is_first_contact and first.time_to_meeting_days == 0
        assert second.time_to_meeting_days is None

    def test_empty_input(self) -> None:
        assert derive_events([]) == []

    def test_preserves_raw_fields(self, sample) -> None:
        derived = derive_events(sample)
        for raw, event in zip(sample, derived):
            assert isinstance(event, DerivedEvent)
            assert (event.event_id, event.outcome, event.objection) == (
                raw.event_id, raw.outcome, raw.objection,
            )

    def test_sample_durations(self, derived_sample) -> None:
        by_id = {e.event_id: e for e in derived_sample}
        assert by_id["evt-5"].time_to_meeting_days == pytest.approx(2 + 1 / 24)
        assert by_id["evt-6"].time_to_meeting_days == 0
        assert by_id["evt-8"].time_to_meeting_days == 0
        assert by_id["evt-7"].time_to_meeting_days is None

    def test_generated_durations_non_negative(self, derived) -> None:
        durations = [e.time_to_meeting_days for e in derived if e.time_to_meeting_days is not None]
        assert durations
        assert all(d >= 0 for d in durations)

    def test_one_first_contact_per_lead(self, dataset: GeneratedDataset, derived) -> None:
        leads = {e.lead_id for e in dataset.events}
        assert sum(1 for e in derived if e.is_first_contact) == len(leads)


# ===================================================================== #
#  Weekly buckets                                                        #
# ===================================================================== #


class TestBucketByWeek:

    def test_weeks_sorted(self, derived_sample) -> None:
        buckets = bucket_events_by_week(derived_sample)
        assert list(buckets) == ["2024-01-01T00:00:00Z", "2024-01-08T00:00:00Z"]
        assert [len(v) for v in buckets.values()] == [5, 3]

    def test_empty(self) -> None:
        assert bucket_events_by_week([]) == {}
