"""Value objects for synthetic outreach analytics.

All types here are frozen dataclasses -- immutable, compared by value.
A ``GeneratedDataset`` is replaced wholesale on reseed or import, never
mutated in place, and ``DerivedEvent`` collections are recomputed from
``OutreachEvent`` collections whenever those change.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass

from .enums import Channel, Objection, Outcome
from .timestamps import parse_iso

# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class OutreachEvent:
    """One outreach attempt by an SDR against a lead.

    ``timestamp`` and ``week_start`` are ISO-8601 strings so that an
    export/import cycle reproduces them character for character.
    """

    event_id: str
    lead_id: str
    timestamp: str
    week_start: str  # Monday 00:00 UTC of the timestamp's week
    sdr_id: str
    sdr_name: str
    team: str
    company: str
    industry: str
    channel: Channel
    outcome: Outcome
    objection: Objection | None

    @property
    def occurred_at(self) -> datetime.datetime:
        """The timestamp parsed into an aware UTC ``datetime``."""
        return parse_iso(self.timestamp)


@dataclass(frozen=True)
class OutcomeFlags:
    """Funnel-stage booleans implied by an outcome (and channel for dials)."""

    is_connected: bool
    is_conversation: bool
    is_meeting_booked: bool
    is_meeting_held: bool
    is_qualified: bool
    is_no_show: bool
    is_dial: bool


@dataclass(frozen=True)
class DerivedEvent(OutreachEvent):
    """An ``OutreachEvent`` augmented with funnel flags and attribution.

    ``time_to_meeting_days`` is only set on the event that is its lead's
    first meeting-stage outcome.
    """

    is_connected: bool
    is_conversation: bool
    is_meeting_booked: bool
    is_meeting_held: bool
    is_qualified: bool
    is_no_show: bool
    is_dial: bool
    is_first_contact: bool
    time_to_meeting_days: float | None


# ---------------------------------------------------------------------------
# RateSummary
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RateSummary:
    """A ratio with its parts; ``rate`` is ``None`` iff ``denominator == 0``."""

    numerator: int
    denominator: int
    rate: float | None

    @property
    def percentage(self) -> float | None:
        """The rate expressed on a 0-100 scale, or ``None``."""
        return None if self.rate is None else self.rate * 100


# ---------------------------------------------------------------------------
# Directories
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SDRProfile:
    id: str
    name: str
    team: str


@dataclass(frozen=True)
class CompanyProfile:
    id: str
    name: str
    industry: str


@dataclass(frozen=True)
class IndustryProfile:
    """An industry; quiet industries convert to meetings less often."""

    name: str
    quiet: bool = False


@dataclass(frozen=True)
class GeneratedDataset:
    """A closed universe of events plus the directories they reference."""

    seed: str
    events: tuple[OutreachEvent, ...]
    sdrs: tuple[SDRProfile, ...]
    teams: tuple[str, ...]
    industries: tuple[IndustryProfile, ...]
    companies: tuple[CompanyProfile, ...]

    def sdr_names(self) -> dict[str, str]:
        """Map SDR id to display name."""
        return {sdr.id: sdr.name for sdr in self.sdrs}
