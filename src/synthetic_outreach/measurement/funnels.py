"""Funnel construction: distinct leads per stage for each grouping entity.

A lead may generate several events, so each stage counts distinct
``lead_id`` values satisfying the stage predicate rather than raw events.
The first stage counts every lead the entity touched on any channel, which
keeps the stage chain non-increasing::

    dials >= connects >= conversations >= meetingsBooked >= meetingsHeld >= qualified

Display order is given by :func:`funnel_sort_key`, never by the order in
which entities were first seen.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from synthetic_outreach.domain.enums import FunnelStage
from synthetic_outreach.domain.values import DerivedEvent
from synthetic_outreach.measurement.report import FunnelStageCount, FunnelSummary

KeyFn = Callable[[DerivedEvent], "str | None"]
NameFn = Callable[[str, DerivedEvent], str]


@dataclass(frozen=True)
class StageDefinition:
    stage: FunnelStage
    predicate: Callable[[DerivedEvent], bool]


STAGE_DEFINITIONS: tuple[StageDefinition, ...] = (
    StageDefinition(FunnelStage.DIALS, lambda event: True),
    StageDefinition(FunnelStage.CONNECTS, lambda event: event.is_connected),
    StageDefinition(FunnelStage.CONVERSATIONS, lambda event: event.is_conversation),
    StageDefinition(FunnelStage.MEETINGS_BOOKED, lambda event: event.is_meeting_booked),
    StageDefinition(FunnelStage.MEETINGS_HELD, lambda event: event.is_meeting_held),
    StageDefinition(FunnelStage.QUALIFIED, lambda event: event.is_qualified),
)


def group_events(
    events: Sequence[DerivedEvent], key: KeyFn
) -> dict[str, list[DerivedEvent]]:
    """Group events by ``key(event)``; events with an empty key are dropped."""
    grouped: dict[str, list[DerivedEvent]] = {}
    for event in events:
        group_id = key(event)
        if not group_id:
            continue
        grouped.setdefault(group_id, []).append(event)
    return grouped


def stage_counts(events: Sequence[DerivedEvent]) -> list[FunnelStageCount]:
    """Distinct-lead count for every stage, in stage order."""
    counts: list[FunnelStageCount] = []
    for definition in STAGE_DEFINITIONS:
        leads = {event.lead_id for event in events if definition.predicate(event)}
        counts.append(
            FunnelStageCount(
                key=definition.stage,
                label=definition.stage.label,
                count=len(leads),
            )
        )
    return counts


def funnel_sort_key(funnel: FunnelSummary) -> tuple[int, int, str]:
    """Qualified count descending, then dials descending, then name ascending."""
    return (
        -funnel.count(FunnelStage.QUALIFIED),
        -funnel.count(FunnelStage.DIALS),
        funnel.name,
    )


def build_funnels(
    events: Sequence[DerivedEvent],
    key: KeyFn,
    name: NameFn | None = None,
    limit: int | None = 5,
) -> list[FunnelSummary]:
    """Build ranked funnels for every entity produced by *key*.

    Parameters
    ----------
    events:
        Derived events to aggregate.
    key:
        Grouping function, e.g. ``lambda e: e.company``.
    name:
        ``(group_id, sample_event) -> display name``.  Defaults to the id.
    limit:
        Number of funnels kept after ranking; ``None`` keeps all.
    """
    funnels = [
        FunnelSummary(
            id=group_id,
            name=name(group_id, members[0]) if name else group_id,
            stages=stage_counts(members),
        )
        for group_id, members in group_events(events, key).items()
    ]
    funnels.sort(key=funnel_sort_key)
    return funnels if limit is None else funnels[:limit]
