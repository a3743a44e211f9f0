"""Slicing a derived event collection by team, SDR, company, industry,
channel and date range.

The filter is a value object and :func:`filter_events` holds no state: a
surrounding application keeps the current :class:`EventFilters` and calls
this function whenever the selection or the events change.
"""

from __future__ import annotations

import datetime
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from typing import TypeVar

from synthetic_outreach.domain.enums import Channel
from synthetic_outreach.domain.timestamps import parse_iso
from synthetic_outreach.domain.values import OutreachEvent

E = TypeVar("E", bound=OutreachEvent)


@dataclass(frozen=True)
class EventFilters:
    """Selections applied by :func:`filter_events`.

    Empty selections do not filter.  ``start`` and ``end`` accept either a
    full ISO-8601 timestamp or a bare date; a bare ``start`` date means the
    beginning of that day and a bare ``end`` date its last millisecond.
    """

    teams: frozenset[str] = field(default_factory=frozenset)
    sdrs: frozenset[str] = field(default_factory=frozenset)  # SDR ids
    companies: frozenset[str] = field(default_factory=frozenset)
    industries: frozenset[str] = field(default_factory=frozenset)
    channels: frozenset[Channel] = field(default_factory=frozenset)
    start: str | None = None
    end: str | None = None

    @property
    def is_empty(self) -> bool:
        return not (
            self.teams
            or self.sdrs
            or self.companies
            or self.industries
            or self.channels
            or self.start
            or self.end
        )

    def with_date_range(self, start: str | None, end: str | None) -> EventFilters:
        return replace(self, start=start or None, end=end or None)


def _boundary(value: str | None, *, is_end: bool) -> datetime.datetime | None:
    if not value:
        return None
    text = value
    if "T" not in value:
        text = f"{value}T23:59:59.999Z" if is_end else f"{value}T00:00:00Z"
    try:
        return parse_iso(text)
    except ValueError:
        return None


def filter_events(events: Sequence[E], filters: EventFilters) -> Sequence[E]:
    """Return the events matching every active selection in *filters*.

    With no active selection the input sequence is returned unchanged.
    Unparseable date bounds are ignored rather than rejected.
    """
    if filters.is_empty:
        return events

    start = _boundary(filters.start, is_end=False)
    end = _boundary(filters.end, is_end=True)

    selected: list[E] = []
    for event in events:
        if filters.teams and event.team not in filters.teams:
            continue
        if filters.sdrs and event.sdr_id not in filters.sdrs:
            continue
        if filters.companies and event.company not in filters.companies:
            continue
        if filters.industries and event.industry not in filters.industries:
            continue
        if filters.channels and event.channel not in filters.channels:
            continue
        if start is not None or end is not None:
            moment = event.occurred_at
            if start is not None and moment < start:
                continue
            if end is not None and moment > end:
                continue
        selected.append(event)
    return selected
