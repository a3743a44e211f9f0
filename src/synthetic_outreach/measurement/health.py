"""Pipeline health: a 0-100 composite of three stage-conversion rates.

For an entity (SDR, team, or the whole organisation) the score averages
Dial→Connect, Connect→Conversation and Meeting→Qualified expressed as
percentages, skipping any that are undefined.  Only the final average is
rounded (half up); an entity with no defined rate has no score.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from synthetic_outreach.domain.values import DerivedEvent, RateSummary
from synthetic_outreach.measurement.funnels import KeyFn, NameFn, group_events
from synthetic_outreach.measurement.rates import (
    CONNECT_TO_CONVERSATION,
    DIAL_TO_CONNECT,
    MEETING_TO_QUALIFIED,
    compute_connect_to_conversation_rate,
    compute_dial_to_connect_rate,
    compute_meeting_to_qualified_rate,
)
from synthetic_outreach.measurement.report import PipelineHealthSummary, RateRecord


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def rate_record(label: str, summary: RateSummary) -> RateRecord:
    return RateRecord(
        label=label,
        numerator=summary.numerator,
        denominator=summary.denominator,
        rate=summary.rate,
    )


def rate_breakdowns(events: Sequence[DerivedEvent]) -> list[RateRecord]:
    """The three health components for *events*, in fixed order."""
    return [
        rate_record(DIAL_TO_CONNECT, compute_dial_to_connect_rate(events)),
        rate_record(CONNECT_TO_CONVERSATION, compute_connect_to_conversation_rate(events)),
        rate_record(MEETING_TO_QUALIFIED, compute_meeting_to_qualified_rate(events)),
    ]


def pipeline_health_score(components: Sequence[RateRecord]) -> int | None:
    """Rounded mean of the defined component percentages, or ``None``."""
    available = [c.percentage for c in components if c.percentage is not None]
    if not available:
        return None
    return round_half_up(sum(available) / len(available))


def health_sort_key(summary: PipelineHealthSummary) -> tuple[int, str]:
    """Score descending, then label ascending."""
    return (-summary.score, summary.label)


def compute_pipeline_health(
    events: Sequence[DerivedEvent],
    key: KeyFn,
    label: NameFn | None = None,
) -> list[PipelineHealthSummary]:
    """Score every entity produced by *key*, ranked by :func:`health_sort_key`.

    Entities without any defined component rate are excluded.
    """
    summaries: list[PipelineHealthSummary] = []
    for group_id, members in group_events(events, key).items():
        components = rate_breakdowns(members)
        score = pipeline_health_score(components)
        if score is None:
            continue
        summaries.append(
            PipelineHealthSummary(
                id=group_id,
                label=label(group_id, members[0]) if label else group_id,
                score=score,
                components=components,
            )
        )
    summaries.sort(key=health_sort_key)
    return summaries
