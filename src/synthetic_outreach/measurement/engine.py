"""Summary engine -- builds the complete dashboard snapshot.

:func:`build_dashboard_summaries` is the single entry point that turns a
derived event collection (plus the dataset that owns it, for name
lookups) into an immutable :class:`DashboardSummaries`.  It is a pure
function: the same events, dataset, config and ``generated_at`` always
yield an equal snapshot.

Usage::

    derived = derive_events(dataset.events)
    summaries = build_dashboard_summaries(derived, dataset)
    summaries.kpi("Dial→Connect").rate
"""

from __future__ import annotations

import datetime
from collections.abc import Sequence

from synthetic_outreach.domain.timestamps import format_iso
from synthetic_outreach.domain.values import DerivedEvent, GeneratedDataset
from synthetic_outreach.infrastructure.config import SummaryConfig
from synthetic_outreach.measurement.aggregates import (
    compute_best_time,
    compute_industry_summaries,
    compute_leaderboard,
    compute_no_show_summary,
    compute_objection_counts,
    compute_outreach_heatmap,
    compute_time_to_meeting,
    compute_totals,
)
from synthetic_outreach.measurement.funnels import build_funnels
from synthetic_outreach.measurement.health import compute_pipeline_health, rate_record
from synthetic_outreach.measurement.rates import (
    CONNECT_TO_CONVERSATION,
    DIAL_TO_CONNECT,
    MEETING_TO_QUALIFIED,
    NO_SHOW,
    compute_connect_to_conversation_rate,
    compute_dial_to_connect_rate,
    compute_meeting_to_qualified_rate,
    compute_no_show_rate,
)
from synthetic_outreach.measurement.report import (
    DashboardSummaries,
    FunnelGroups,
    PipelineHealthOverview,
    RateRecord,
)
from synthetic_outreach.measurement.stats import compute_mean


def compute_kpis(events: Sequence[DerivedEvent]) -> list[RateRecord]:
    """The four headline rates, in display order."""
    return [
        rate_record(DIAL_TO_CONNECT, compute_dial_to_connect_rate(events)),
        rate_record(CONNECT_TO_CONVERSATION, compute_connect_to_conversation_rate(events)),
        rate_record(MEETING_TO_QUALIFIED, compute_meeting_to_qualified_rate(events)),
        rate_record(NO_SHOW, compute_no_show_rate(events)),
    ]


def build_dashboard_summaries(
    events: Sequence[DerivedEvent],
    dataset: GeneratedDataset,
    *,
    config: SummaryConfig | None = None,
    generated_at: str | None = None,
) -> DashboardSummaries:
    """Compute the full summary snapshot for *events*.

    Parameters
    ----------
    events:
        Derived events, typically ``derive_events(dataset.events)`` or a
        filtered subset of it.
    dataset:
        The dataset the events belong to.  Supplies the seed and the SDR
        directory used to name SDR funnels and leaderboard rows.
    config:
        Ranking sizes.  Defaults to :class:`SummaryConfig`.
    generated_at:
        ISO-8601 timestamp recorded in the snapshot.  Defaults to now (UTC).

    Returns
    -------
    DashboardSummaries
    """
    config = config or SummaryConfig()
    config.validate()
    if generated_at is None:
        generated_at = format_iso(datetime.datetime.now(datetime.UTC))

    sdr_names = dataset.sdr_names()
    top_n = config.max_entities

    team_health = compute_pipeline_health(events, lambda e: e.team)
    overall = compute_mean([summary.score for summary in team_health])

    funnels = FunnelGroups(
        companies=build_funnels(events, lambda e: e.company, limit=top_n),
        teams=build_funnels(events, lambda e: e.team, limit=top_n),
        sdrs=build_funnels(
            events,
            lambda e: e.sdr_id,
            lambda sdr_id, sample: sdr_names.get(sdr_id) or sample.sdr_name or sdr_id,
            limit=top_n,
        ),
    )

    return DashboardSummaries(
        generated_at=generated_at,
        seed=dataset.seed,
        totals=compute_totals(events),
        kpis=compute_kpis(events),
        pipeline_health=PipelineHealthOverview(
            overall_average=overall,
            top_teams=team_health[:top_n],
        ),
        funnels=funnels,
        industries=compute_industry_summaries(events),
        outreach_heatmap=compute_outreach_heatmap(events),
        objections=compute_objection_counts(events),
        no_show=compute_no_show_summary(events),
        time_to_meeting=compute_time_to_meeting(events),
        best_time=compute_best_time(events, config.best_time_top_n),
        leaderboard=compute_leaderboard(events, sdr_names, config.leaderboard_size),
    )
