"""Tests for funnel construction and pipeline health scores."""

from __future__ import annotations

import pytest

from synthetic_outreach.domain.enums import Channel, FunnelStage, Outcome
from synthetic_outreach.measurement.funnels import (
    STAGE_DEFINITIONS,
    build_funnels,
    funnel_sort_key,
)
from synthetic_outreach.measurement.health import (
    compute_pipeline_health,
    pipeline_health_score,
    rate_breakdowns,
    round_half_up,
)
from synthetic_outreach.measurement.report import (
    FunnelStageCount,
    FunnelSummary,
    RateRecord,
)
from synthetic_outreach.services.derivation import derive_events


def _funnel(name: str, dials: int, qualified: int) -> FunnelSummary:
    return FunnelSummary(
        id=name,
        name=name,
        stages=[
            FunnelStageCount(key=FunnelStage.DIALS, label="Dials", count=dials),
            FunnelStageCount(key=FunnelStage.QUALIFIED, label="Qualified", count=qualified),
        ],
    )


def _record(percentage: float | None) -> RateRecord:
    rate = None if percentage is None else percentage / 100
    return RateRecord(label="r", numerator=0, denominator=0 if rate is None else 1, rate=rate)


# ===================================================================== #
#  Funnels                                                               #
# ===================================================================== #


class TestBuildFunnels:

    def test_stage_order(self) -> None:
        assert [d.stage for d in STAGE_DEFINITIONS] == list(FunnelStage)

    def test_sample_team_funnel(self, derived_sample) -> None:
        (team,) = build_funnels(derived_sample, lambda e: e.team)
        assert team.name == "Outbound"
        assert [s.count for s in team.stages] == [7, 6, 5, 4, 2, 1]

    def test_counts_distinct_leads(self, make_event) -> None:
        events = derive_events([
            make_event(lead_id="same", outcome=Outcome.CONNECTED),
            make_event(lead_id="same", outcome=Outcome.CONNECTED),
        ])
        (funnel,) = build_funnels(events, lambda e: e.team)
        assert funnel.count(FunnelStage.CONNECTS) == 1

    def test_first_stage_counts_every_touched_lead(self, make_event) -> None:
        events = derive_events([
            make_event(lead_id="mail", channel=Channel.EMAIL, outcome=Outcome.QUALIFIED),
        ])
        (funnel,) = build_funnels(events, lambda e: e.team)
        assert funnel.count(FunnelStage.DIALS) == 1
        assert funnel.count(FunnelStage.QUALIFIED) == 1

    def test_monotone_on_generated_data(self, derived) -> None:
        for key in (lambda e: e.company, lambda e: e.team, lambda e: e.sdr_id):
            for funnel in build_funnels(derived, key, limit=None):
                counts = [s.count for s in funnel.stages]
                assert counts == sorted(counts, reverse=True)

    def test_limit(self, derived) -> None:
        assert len(build_funnels(derived, lambda e: e.company)) == 5
        assert len(build_funnels(derived, lambda e: e.company, limit=2)) == 2

    def test_name_function(self, derived_sample) -> None:
        funnels = build_funnels(
            derived_sample, lambda e: e.sdr_id, lambda sdr_id, e: e.sdr_name.upper()
        )
        assert funnels[0].name == "SKY HARPER"

    def test_empty_key_skipped(self, make_event) -> None:
        events = derive_events([make_event(company="")])
        assert build_funnels(events, lambda e: e.company) == []


class TestFunnelOrdering:

    def test_qualified_then_dials_then_name(self) -> None:
        funnels = [
            _funnel("b", dials=10, qualified=1),
            _funnel("a", dials=10, qualified=1),
            _funnel("c", dials=20, qualified=1),
            _funnel("d", dials=5, qualified=3),
        ]
        ranked = sorted(funnels, key=funnel_sort_key)
        assert [f.name for f in ranked] == ["d", "c", "a", "b"]

    def test_sample_sdr_ranking(self, derived_sample) -> None:
        funnels = build_funnels(derived_sample, lambda e: e.sdr_id, limit=None)
        # only sdr-7 qualifies; everyone else touched one lead and ties on name
        assert [f.id for f in funnels] == [
            "sdr-7", "sdr-1", "sdr-2", "sdr-3", "sdr-4", "sdr-5", "sdr-6",
        ]


# ===================================================================== #
#  Pipeline health                                                       #
# ===================================================================== #


class TestPipelineHealth:

    def test_score_scenario(self) -> None:
        assert pipeline_health_score([_record(80), _record(60), _record(40)]) == 60

    def test_nulls_skipped(self) -> None:
        assert pipeline_health_score([_record(None), _record(50), _record(None)]) == 50

    def test_all_null_is_none(self) -> None:
        assert pipeline_health_score([_record(None)] * 3) is None

    def test_rounds_half_up(self) -> None:
        assert round_half_up(62.5) == 63
        assert round_half_up(61.5) == 62
        assert round_half_up(61.49) == 61

    def test_breakdown_labels(self, derived_sample) -> None:
        labels = [r.label for r in rate_breakdowns(derived_sample)]
        assert labels == ["Dial→Connect", "Connect→Conversation", "Meeting→Qualified"]

    def test_sample_team_score(self, derived_sample) -> None:
        (team,) = compute_pipeline_health(derived_sample, lambda e: e.team)
        # (75 + 83.33 + 50) / 3
        assert team.score == 69
        assert team.label == "Outbound"

    def test_entities_without_rates_excluded(self, make_event) -> None:
        events = derive_events([make_event(sdr_id="quiet", channel=Channel.EMAIL)])
        assert compute_pipeline_health(events, lambda e: e.sdr_id) == []

    def test_sorted_by_score_then_label(self, make_event) -> None:
        events = derive_events([
            make_event(team="Zeta", outcome=Outcome.CONNECTED),
            make_event(team="Alpha", outcome=Outcome.CONNECTED),
            make_event(team="Mid", outcome=Outcome.NO_ANSWER),
        ])
        ranked = compute_pipeline_health(events, lambda e: e.team)
        assert [(h.label, h.score) for h in ranked] == [
            ("Alpha", 50), ("Zeta", 50), ("Mid", 0),
        ]

    @pytest.mark.parametrize("key", ["team", "sdr_id"])
    def test_generated_scores_in_range(self, derived, key: str) -> None:
        scores = compute_pipeline_health(derived, lambda e: getattr(e, key))
        assert scores
        assert all(0 <= s.score <= 100 for s in scores)
