"""Per-dimension aggregates feeding the dashboard snapshot.

Each function is a pure fold over derived events.  Ordering is always
explicit; nothing relies on the order in which groups were first seen.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from synthetic_outreach.domain.enums import Channel, Outcome
from synthetic_outreach.domain.values import DerivedEvent
from synthetic_outreach.measurement.rates import (
    compute_connect_to_conversation_rate,
    compute_no_show_rate,
)
from synthetic_outreach.measurement.report import (
    BestTimeSummary,
    DateRange,
    FrequencyDatum,
    HeatmapRow,
    IndustrySummary,
    LeaderboardEntry,
    NoShowSummary,
    ObjectionCount,
    TimeToMeetingSummary,
    Totals,
)
from synthetic_outreach.measurement.stats import compute_mean, compute_median
from synthetic_outreach.services.derivation import bucket_events_by_week

WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
UNKNOWN_INDUSTRY = "Unknown"


# ---------------------------------------------------------------------------
# Totals
# ---------------------------------------------------------------------------

def compute_totals(events: Sequence[DerivedEvent]) -> Totals:
    """Event and lead counts, time span and zero-filled channel/outcome totals."""
    channel_totals = {channel.value: 0 for channel in Channel}
    outcome_totals = {outcome.value: 0 for outcome in Outcome}
    for event in events:
        channel_totals[event.channel.value] += 1
        outcome_totals[event.outcome.value] += 1

    if events:
        ordered = sorted(events, key=lambda e: e.occurred_at)
        date_range = DateRange(start=ordered[0].timestamp, end=ordered[-1].timestamp)
    else:
        date_range = DateRange(start=None, end=None)

    return Totals(
        total_events=len(events),
        unique_leads=len({event.lead_id for event in events}),
        date_range=date_range,
        channel_totals=channel_totals,
        outcome_totals=outcome_totals,
    )


# ---------------------------------------------------------------------------
# Industries
# ---------------------------------------------------------------------------

@dataclass
class _IndustryTally:
    dials: int = 0
    connects: int = 0
    meeting_leads: set[str] = field(default_factory=set)
    qualified_leads: set[str] = field(default_factory=set)


def industry_sort_key(summary: IndustrySummary) -> tuple[int, int, str]:
    return (-summary.meetings_booked, -summary.qualified, summary.industry)


def compute_industry_summaries(events: Sequence[DerivedEvent]) -> list[IndustrySummary]:
    """Dial-only industry aggregates.

    Only call events contribute.  Meetings booked and qualified count
    distinct leads; ``answer_rate`` and ``meetings_per_100_dials`` are
    computed over dials.
    """
    tallies: dict[str, _IndustryTally] = {}
    for event in events:
        if not event.is_dial:
            continue
        tally = tallies.setdefault(event.industry or UNKNOWN_INDUSTRY, _IndustryTally())
        tally.dials += 1
        if event.is_connected:
            tally.connects += 1
        if event.is_meeting_booked:
            tally.meeting_leads.add(event.lead_id)
        if event.is_qualified:
            tally.qualified_leads.add(event.lead_id)

    summaries = [
        IndustrySummary(
            industry=industry,
            dials=tally.dials,
            connects=tally.connects,
            meetings_booked=len(tally.meeting_leads),
            qualified=len(tally.qualified_leads),
            answer_rate=tally.connects / tally.dials,
            meetings_per_100_dials=len(tally.meeting_leads) / tally.dials * 100,
        )
        for industry, tally in tallies.items()
    ]
    summaries.sort(key=industry_sort_key)
    return summaries


# ---------------------------------------------------------------------------
# Channel x outcome heatmap, objections
# ---------------------------------------------------------------------------

def compute_outreach_heatmap(events: Sequence[DerivedEvent]) -> list[HeatmapRow]:
    """One row per channel with a zero-filled outcome matrix."""
    matrix = {channel: {outcome.value: 0 for outcome in Outcome} for channel in Channel}
    for event in events:
        matrix[event.channel][event.outcome.value] += 1
    return [
        HeatmapRow(channel=channel, totals=sum(counts.values()), outcomes=counts)
        for channel, counts in matrix.items()
    ]


def compute_objection_counts(events: Sequence[DerivedEvent]) -> list[ObjectionCount]:
    """Counts per raised objection, count descending then name ascending."""
    counts = Counter(event.objection for event in events if event.objection is not None)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0].value))
    return [ObjectionCount(objection=objection, count=count) for objection, count in ranked]


# ---------------------------------------------------------------------------
# Meetings
# ---------------------------------------------------------------------------

def compute_no_show_summary(events: Sequence[DerivedEvent]) -> NoShowSummary:
    rate = compute_no_show_rate(events)
    return NoShowSummary(
        meetings_booked=rate.denominator,
        meetings_held=sum(1 for event in events if event.is_meeting_held),
        no_shows=rate.numerator,
        rate=rate.rate,
    )


def compute_time_to_meeting(events: Sequence[DerivedEvent]) -> TimeToMeetingSummary:
    durations = [
        event.time_to_meeting_days
        for event in events
        if event.time_to_meeting_days is not None
    ]
    return TimeToMeetingSummary(
        average_days=compute_mean(durations),
        median_days=compute_median(durations),
        sample_size=len(durations),
    )


# ---------------------------------------------------------------------------
# Best time to reach out
# ---------------------------------------------------------------------------

def _top_frequencies(counts: Mapping[str, int], top_n: int) -> list[FrequencyDatum]:
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [FrequencyDatum(label=label, count=count) for label, count in ranked[:top_n]]


def compute_best_time(events: Sequence[DerivedEvent], top_n: int = 5) -> BestTimeSummary:
    """Busiest UTC weekdays and hours by event count."""
    days: Counter[str] = Counter()
    hours: Counter[str] = Counter()
    for event in events:
        moment = event.occurred_at
        days[WEEKDAY_LABELS[moment.weekday()]] += 1
        hours[f"{moment.hour:02d}"] += 1
    return BestTimeSummary(
        top_days=_top_frequencies(days, top_n),
        top_hours=_top_frequencies(hours, top_n),
    )


# ---------------------------------------------------------------------------
# Leaderboard
# ---------------------------------------------------------------------------

def leaderboard_sort_key(entry: LeaderboardEntry) -> tuple[int, int, int, str]:
    return (-entry.qualified, -entry.meetings_held, -entry.connects, entry.sdr_name)


def compute_leaderboard(
    events: Sequence[DerivedEvent],
    sdr_names: Mapping[str, str] | None = None,
    size: int = 10,
) -> list[LeaderboardEntry]:
    """Rank SDRs by qualified, then meetings held, then connects.

    Names resolve through *sdr_names*, then the first event's ``sdr_name``,
    then the id itself.
    """
    sdr_names = sdr_names or {}
    grouped: dict[str, list[DerivedEvent]] = defaultdict(list)
    for event in events:
        grouped[event.sdr_id].append(event)

    entries = [
        LeaderboardEntry(
            sdr_id=sdr_id,
            sdr_name=sdr_names.get(sdr_id) or members[0].sdr_name or sdr_id,
            connects=sum(1 for e in members if e.is_connected),
            meetings_held=sum(1 for e in members if e.is_meeting_held),
            qualified=sum(1 for e in members if e.is_qualified),
        )
        for sdr_id, members in grouped.items()
    ]
    entries.sort(key=leaderboard_sort_key)
    return entries[:size]


# ---------------------------------------------------------------------------
# Weekly Connect→Conversation trends
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class WeeklyTrendSeries:
    """Connect→Conversation rate per week for one SDR.

    ``rates`` is aligned with :attr:`WeeklyConversationTrends.weeks`; a week
    without connects holds ``None``.
    """

    sdr_id: str
    sdr_name: str
    rates: tuple[float | None, ...]
    total_connects: int


@dataclass(frozen=True)
class WeeklyConversationTrends:
    weeks: tuple[str, ...]
    series: tuple[WeeklyTrendSeries, ...]


def compute_weekly_conversation_trends(
    events: Sequence[DerivedEvent],
    sdr_names: Mapping[str, str] | None = None,
) -> WeeklyConversationTrends:
    """Per-SDR weekly Connect→Conversation series.

    Series are ordered by total connects descending, then name ascending.
    """
    sdr_names = sdr_names or {}
    weeks = tuple(bucket_events_by_week(events))

    grouped: dict[str, list[DerivedEvent]] = defaultdict(list)
    for event in events:
        grouped[event.sdr_id].append(event)

    series: list[WeeklyTrendSeries] = []
    for sdr_id, members in grouped.items():
        by_week = bucket_events_by_week(members)
        series.append(
            WeeklyTrendSeries(
                sdr_id=sdr_id,
                sdr_name=sdr_names.get(sdr_id) or members[0].sdr_name or sdr_id,
                rates=tuple(
                    compute_connect_to_conversation_rate(by_week.get(week, [])).rate
                    for week in weeks
                ),
                total_connects=sum(1 for e in members if e.is_connected),
            )
        )
    series.sort(key=lambda s: (-s.total_connects, s.sdr_name))
    return WeeklyConversationTrends(weeks=weeks, series=tuple(series))
