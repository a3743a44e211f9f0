"""Dashboard summary report models.

:class:`DashboardSummaries` is an immutable, purely derived snapshot of a
derived event collection: totals, KPI rates, funnels, pipeline health and
per-dimension aggregates.  It holds no independent state and can be rebuilt
at any time from the same events.

The models are pydantic so the snapshot can be embedded as JSON in an
exported CSV and validated again on import.  JSON keys are camelCase;
Python attributes are snake_case.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from synthetic_outreach.domain.enums import Channel, FunnelStage, Objection


class _ReportModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# -- building blocks ---------------------------------------------------------


class RateRecord(_ReportModel):
    """A labelled :class:`~synthetic_outreach.domain.values.RateSummary`."""

    label: str
    numerator: int
    denominator: int
    rate: float | None

    @property
    def percentage(self) -> float | None:
        return None if self.rate is None else self.rate * 100


class FunnelStageCount(_ReportModel):
    key: FunnelStage
    label: str
    count: int


class FunnelSummary(_ReportModel):
    """Distinct-lead counts per funnel stage for one grouping entity."""

    id: str
    name: str
    stages: list[FunnelStageCount]

    def count(self, stage: FunnelStage) -> int:
        for item in self.stages:
            if item.key is stage:
                return item.count
        return 0


class PipelineHealthSummary(_ReportModel):
    id: str
    label: str
    score: int = Field(ge=0, le=100)
    components: list[RateRecord]


class PipelineHealthOverview(_ReportModel):
    overall_average: float | None
    top_teams: list[PipelineHealthSummary]


class FunnelGroups(_ReportModel):
    companies: list[FunnelSummary]
    teams: list[FunnelSummary]
    sdrs: list[FunnelSummary]


class IndustrySummary(_ReportModel):
    industry: str
    dials: int
    connects: int
    meetings_booked: int
    qualified: int
    answer_rate: float
    meetings_per_100_dials: float = Field(alias="meetingsPer100Dials")


class HeatmapRow(_ReportModel):
    channel: Channel
    totals: int
    outcomes: dict[str, int]  # keyed by Outcome value


class ObjectionCount(_ReportModel):
    objection: Objection
    count: int


class NoShowSummary(_ReportModel):
    meetings_booked: int
    meetings_held: int
    no_shows: int
    rate: float | None


class TimeToMeetingSummary(_ReportModel):
    average_days: float | None
    median_days: float | None
    sample_size: int


class FrequencyDatum(_ReportModel):
    label: str
    count: int


class BestTimeSummary(_ReportModel):
    top_days: list[FrequencyDatum]
    top_hours: list[FrequencyDatum]


class LeaderboardEntry(_ReportModel):
    sdr_id: str
    sdr_name: str
    connects: int
    meetings_held: int
    qualified: int


class DateRange(_ReportModel):
    start: str | None
    end: str | None


class Totals(_ReportModel):
    total_events: int
    unique_leads: int
    date_range: DateRange
    channel_totals: dict[str, int]  # keyed by Channel value
    outcome_totals: dict[str, int]  # keyed by Outcome value


# -- snapshot ----------------------------------------------------------------


class DashboardSummaries(_ReportModel):
    """Complete summary snapshot for one event collection."""

    generated_at: str
    seed: str
    totals: Totals
    kpis: list[RateRecord]
    pipeline_health: PipelineHealthOverview
    funnels: FunnelGroups
    industries: list[IndustrySummary]
    outreach_heatmap: list[HeatmapRow]
    objections: list[ObjectionCount]
    no_show: NoShowSummary
    time_to_meeting: TimeToMeetingSummary
    best_time: BestTimeSummary
    leaderboard: list[LeaderboardEntry]

    def kpi(self, label: str) -> RateRecord | None:
        """Return the KPI record with the given *label*, or ``None``."""
        for record in self.kpis:
            if record.label == label:
                return record
        return None

    def to_json(self) -> str:
        """Compact camelCase JSON, suitable for a single CSV comment line."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, text: str) -> DashboardSummaries:
        """Validate camelCase JSON produced by :meth:`to_json`.

        Raises ``pydantic.ValidationError`` on malformed or mismatched input.
        """
        return cls.model_validate_json(text)
