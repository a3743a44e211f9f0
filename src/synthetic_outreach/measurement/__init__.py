"""Measurement layer for synthetic outreach analytics.

Computes conversion rates, funnels, pipeline health and per-dimension
aggregates over derived events, and assembles them into the immutable
:class:`DashboardSummaries` snapshot.

Public API
----------
- :func:`build_dashboard_summaries` -- complete snapshot for an event set
- :class:`DashboardSummaries` -- pydantic report model (camelCase JSON)
- Rates: ``compute_dial_to_connect_rate``, ``compute_connect_to_conversation_rate``,
  ``compute_meeting_to_qualified_rate``, ``compute_no_show_rate``,
  ``compute_industry_answer_rates``
- Funnels and health: :func:`build_funnels`, :func:`compute_pipeline_health`
- Trends: :func:`compute_weekly_conversation_trends`
"""

from synthetic_outreach.measurement.aggregates import (
    WeeklyConversationTrends,
    WeeklyTrendSeries,
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
from synthetic_outreach.measurement.engine import build_dashboard_summaries, compute_kpis
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
from synthetic_outreach.measurement.rates import (
    CONNECT_TO_CONVERSATION,
    DIAL_TO_CONNECT,
    MEETING_TO_QUALIFIED,
    NO_SHOW,
    IndustryAnswerRate,
    calculate_rate,
    compute_connect_to_conversation_rate,
    compute_dial_to_connect_rate,
    compute_industry_answer_rates,
    compute_meeting_to_qualified_rate,
    compute_no_show_rate,
)
from synthetic_outreach.measurement.report import (
    DashboardSummaries,
    FunnelSummary,
    PipelineHealthSummary,
    RateRecord,
)
from synthetic_outreach.measurement.stats import compute_mean, compute_median

__all__ = [
    # Engine & report
    "build_dashboard_summaries",
    "compute_kpis",
    "DashboardSummaries",
    "FunnelSummary",
    "PipelineHealthSummary",
    "RateRecord",
    # Rates
    "CONNECT_TO_CONVERSATION",
    "DIAL_TO_CONNECT",
    "MEETING_TO_QUALIFIED",
    "NO_SHOW",
    "IndustryAnswerRate",
    "calculate_rate",
    "compute_connect_to_conversation_rate",
    "compute_dial_to_connect_rate",
    "compute_industry_answer_rates",
    "compute_meeting_to_qualified_rate",
    "compute_no_show_rate",
    # Funnels & health
    "STAGE_DEFINITIONS",
    "build_funnels",
    "funnel_sort_key",
    "compute_pipeline_health",
    "pipeline_health_score",
    "rate_breakdowns",
    "round_half_up",
    # Aggregates
    "WeeklyConversationTrends",
    "WeeklyTrendSeries",
    "compute_best_time",
    "compute_industry_summaries",
    "compute_leaderboard",
    "compute_no_show_summary",
    "compute_objection_counts",
    "compute_outreach_heatmap",
    "compute_time_to_meeting",
    "compute_totals",
    "compute_weekly_conversation_trends",
    # Stats
    "compute_mean",
    "compute_median",
]
