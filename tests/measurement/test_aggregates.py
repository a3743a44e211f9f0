"""Tests for per-dimension dashboard aggregates."""

from __future__ import annotations

import pytest

from synthetic_outreach.domain.enums import Channel, Objection, Outcome
from synthetic_outreach.measurement.aggregates import (
    compute_best_time,
    compute_industry_summaries,
    compute_leaderboard,
    compute_no_show_summary,
    compute_objection_counts,
    compute_outreach_heatmap,
    compute_time_to_meeting,
    compute_totals,
    compute_weekly_conversation_trends,
)
from synthetic_outreach.services.derivation import derive_events


# ===================================================================== #
#  Totals                                                                #
# ===================================================================== #


class TestTotals:

    def test_sample(self, derived_sample) -> None:
        totals = compute_totals(derived_sample)
        assert totals.total_events == 8
        assert totals.unique_leads == 7
        assert totals.date_range.start == "2024-01-02T10:00:00Z"
        assert totals.date_range.end == "2024-01-10T10:30:00Z"
        assert totals.channel_totals == {"call": 8, "email": 0, "linkedin": 0}
        assert totals.outcome_totals["no_answer"] == 2
        assert set(totals.outcome_totals) == {o.value for o in Outcome}

    def test_empty(self) -> None:
        totals = compute_totals([])
        assert totals.total_events == 0
        assert totals.date_range.start is None
        assert sum(totals.channel_totals.values()) == 0

    def test_totals_add_up(self, derived) -> None:
        totals = compute_totals(derived)
        assert sum(totals.channel_totals.values()) == len(derived)
        assert sum(totals.outcome_totals.values()) == len(derived)


# ===================================================================== #
#  Industries                                                            #
# ===================================================================== #


class TestIndustrySummaries:

    def test_sample_ordering_and_counts(self, derived_sample) -> None:
        summaries = compute_industry_summaries(derived_sample)
        assert [s.industry for s in summaries] == ["Fintech", "Healthcare", "SaaS"]
        fintech = summaries[0]
        assert (fintech.dials, fintech.connects) == (4, 3)
        assert (fintech.meetings_booked, fintech.qualified) == (3, 0)
        assert fintech.answer_rate == pytest.approx(0.75)
        assert fintech.meetings_per_100_dials == pytest.approx(75.0)

    def test_non_call_events_ignored(self, make_event) -> None:
        events = derive_events([
            make_event(industry="Retail", channel=Channel.EMAIL, outcome=Outcome.QUALIFIED),
        ])
        assert compute_industry_summaries(events) == []

    def test_blank_industry_grouped_as_unknown(self, make_event) -> None:
        (summary,) = compute_industry_summaries(derive_events([make_event(industry="")]))
        assert summary.industry == "Unknown"

    def test_meetings_count_distinct_leads(self, make_event) -> None:
        events = derive_events([
            make_event(lead_id="L", outcome=Outcome.MEETING_BOOKED),
            make_event(lead_id="L", outcome=Outcome.MEETING_HELD),
        ])
        (summary,) = compute_industry_summaries(events)
        assert summary.dials == 2
        assert summary.meetings_booked == 1


# ===================================================================== #
#  Heatmap and objections                                                #
# ===================================================================== #


class TestHeatmap:

    def test_every_channel_zero_filled(self, derived_sample) -> None:
        rows = compute_outreach_heatmap(derived_sample)
        assert [r.channel for r in rows] == list(Channel)
        call, email, linkedin = rows
        assert call.totals == 8
        assert call.outcomes["qualified"] == 1
        assert email.totals == linkedin.totals == 0
        assert set(email.outcomes) == {o.value for o in Outcome}


class TestObjections:

    def test_sample(self, derived_sample) -> None:
        (count,) = compute_objection_counts(derived_sample)
        assert (count.objection, count.count) == (Objection.TIMING, 1)

    def test_count_desc_then_name(self, make_event) -> None:
        events = derive_events([
            make_event(objection=Objection.TIMING),
            make_event(objection=Objection.BUDGET),
            make_event(objection=Objection.NEED),
            make_event(objection=Objection.NEED),
            make_event(),
        ])
        ranked = compute_objection_counts(events)
        assert [(c.objection.value, c.count) for c in ranked] == [
            ("need", 2), ("budget", 1), ("timing", 1),
        ]


# ===================================================================== #
#  Meetings                                                              #
# ===================================================================== #


class TestMeetings:

    def test_no_show_summary(self, derived_sample) -> None:
        summary = compute_no_show_summary(derived_sample)
        assert (summary.meetings_booked, summary.meetings_held, summary.no_shows) == (4, 2, 1)
        assert summary.rate == pytest.approx(0.25)

    def test_time_to_meeting(self, derived_sample) -> None:
        summary = compute_time_to_meeting(derived_sample)
        assert summary.sample_size == 3
        assert summary.average_days == pytest.approx((2 + 1 / 24) / 3)
        assert summary.median_days == 0

    def test_time_to_meeting_empty(self) -> None:
        summary = compute_time_to_meeting([])
        assert summary.sample_size == 0
        assert summary.average_days is None
        assert summary.median_days is None


# ===================================================================== #
#  Best time                                                             #
# ===================================================================== #


class TestBestTime:

    def test_sample_days(self, derived_sample) -> None:
        best = compute_best_time(derived_sample)
        assert [(d.label, d.count) for d in best.top_days] == [
            ("Tue", 4), ("Wed", 3), ("Fri", 1),
        ]

    def test_sample_hours(self, derived_sample) -> None:
        best = compute_best_time(derived_sample)
        assert [(h.label, h.count) for h in best.top_hours] == [
            ("10", 2), ("09", 1), ("11", 1), ("13", 1), ("14", 1),
        ]

    def test_top_n(self, derived_sample) -> None:
        best = compute_best_time(derived_sample, top_n=1)
        assert len(best.top_days) == len(best.top_hours) == 1

    def test_hours_use_utc(self, make_event) -> None:
        (event,) = derive_events([make_event(timestamp="2024-01-08T23:30:00-02:00")])
        best = compute_best_time([event])
        assert best.top_days[0].label == "Tue"
        assert best.top_hours[0].label == "01"


# ===================================================================== #
#  Leaderboard                                                           #
# ===================================================================== #


class TestLeaderboard:

    def test_sample_order(self, derived_sample) -> None:
        board = compute_leaderboard(derived_sample)
        assert [(e.sdr_name, e.sdr_id) for e in board] == [
            ("Sky Harper", "sdr-7"),
            ("Taylor Brooks", "sdr-5"),
            ("Dev Patel", "sdr-2"),
            ("Jordan Lee", "sdr-1"),
            ("Morgan Yu", "sdr-4"),
            ("Taylor Brooks", "sdr-6"),
            ("Alex Smith", "sdr-3"),
        ]

    def test_size(self, derived) -> None:
        assert len(compute_leaderboard(derived, size=3)) == 3
        assert len(compute_leaderboard(derived)) == 10

    def test_names_from_directory(self, derived_sample) -> None:
        board = compute_leaderboard(derived_sample, {"sdr-7": "S. Harper"})
        assert board[0].sdr_name == "S. Harper"

    def test_monotone_on_generated_data(self, derived) -> None:
        board = compute_leaderboard(derived, size=100)
        keys = [(e.qualified, e.meetings_held, e.connects) for e in board]
        assert keys == sorted(keys, reverse=True)


# ===================================================================== #
#  Weekly trends                                                         #
# ===================================================================== #


class TestWeeklyTrends:

    def test_weeks_and_alignment(self, derived_sample) -> None:
        trends = compute_weekly_conversation_trends(derived_sample)
        assert trends.weeks == ("2024-01-01T00:00:00Z", "2024-01-08T00:00:00Z")
        assert all(len(s.rates) == 2 for s in trends.series)

    def test_series_order(self, derived_sample) -> None:
        trends = compute_weekly_conversation_trends(derived_sample)
        assert [s.sdr_id for s in trends.series] == [
            "sdr-2", "sdr-1", "sdr-4", "sdr-7", "sdr-5", "sdr-6", "sdr-3",
        ]

    def test_rates_per_week(self, derived_sample) -> None:
        trends = compute_weekly_conversation_trends(derived_sample)
        by_id = {s.sdr_id: s for s in trends.series}
        assert by_id["sdr-2"].rates == (1.0, None)
        assert by_id["sdr-1"].rates == (0.0, None)
        assert by_id["sdr-3"].rates == (None, None)

    def test_empty(self) -> None:
        trends = compute_weekly_conversation_trends([])
        assert trends.weeks == ()
        assert trends.series == ()
