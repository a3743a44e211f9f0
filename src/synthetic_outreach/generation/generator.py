"""Seeded synthetic outreach dataset generator.

:func:`generate_dataset` builds a closed universe of teams, industries,
companies and SDRs, then a multi-week stream of outreach events with
realistic channel, outcome and time-of-day distributions.  Everything is
drawn from a single :func:`~synthetic_outreach.generation.rng.create_rng`
stream, so the draw order below is part of the determinism contract:
reordering two draws changes every dataset.
"""

from __future__ import annotations

import datetime
import logging
import math
from collections import defaultdict
from collections.abc import Sequence

from synthetic_outreach.domain.enums import Channel, Objection, Outcome
from synthetic_outreach.domain.timestamps import format_iso, start_of_week
from synthetic_outreach.domain.values import (
    CompanyProfile,
    GeneratedDataset,
    IndustryProfile,
    OutreachEvent,
    SDRProfile,
)
from synthetic_outreach.generation.catalog import (
    CHANNEL_WEIGHTS,
    COMPANY_PREFIXES,
    COMPANY_SUFFIXES,
    DAY_WEIGHTS,
    FIRST_NAMES,
    INDUSTRY_POOL,
    LAST_NAMES,
    MEETING_PREFERRED_WEEKDAYS,
    OBJECTION_PROBABILITY,
    OBJECTION_WEIGHTS,
    OUTCOME_WEIGHTS_BY_CHANNEL,
    TEAM_NAMES,
    OutcomeWeights,
)
from synthetic_outreach.generation.rng import RNG, coerce_seed, create_rng
from synthetic_outreach.generation.sampling import (
    pick_weighted,
    random_int,
    sample,
    shuffle,
)
from synthetic_outreach.infrastructure.config import GeneratorConfig

logger = logging.getLogger(__name__)

_QUIET_DAMPENED = frozenset({Outcome.MEETING_BOOKED, Outcome.MEETING_HELD})
_QUIET_BOOSTED = frozenset({Outcome.CONNECTED, Outcome.CONVERSATION})


# ---------------------------------------------------------------------------
# Directories
# ---------------------------------------------------------------------------

def _create_teams(rng: RNG, config: GeneratorConfig) -> list[str]:
    count = random_int(rng, config.min_teams, config.max_teams)
    return shuffle(rng, TEAM_NAMES)[:count]


def _create_industries(rng: RNG, config: GeneratorConfig) -> list[IndustryProfile]:
    count = random_int(rng, config.min_industries, config.max_industries)
    return shuffle(rng, INDUSTRY_POOL)[:count]


def _create_companies(
    rng: RNG, industries: Sequence[IndustryProfile], config: GeneratorConfig
) -> list[CompanyProfile]:
    companies: list[CompanyProfile] = []
    for index, industry in enumerate(industries, start=1):
        per_industry = random_int(
            rng,
            config.min_companies_per_industry,
            config.max_companies_per_industry,
        )
        for i in range(1, per_industry + 1):
            name = f"{sample(rng, COMPANY_PREFIXES)} {sample(rng, COMPANY_SUFFIXES)}"
            companies.append(
                CompanyProfile(
                    id=f"co_{index}_{i}",
                    name=f"{name} {industry.name}",
                    industry=industry.name,
                )
            )
    return companies


def _create_sdrs(
    rng: RNG, teams: Sequence[str], config: GeneratorConfig
) -> list[SDRProfile]:
    count = random_int(rng, config.min_sdrs, config.max_sdrs)
    sdrs: list[SDRProfile] = []
    for i in range(1, count + 1):
        name = f"{sample(rng, FIRST_NAMES)} {sample(rng, LAST_NAMES)}"
        sdrs.append(SDRProfile(id=f"sdr_{i}", name=name, team=sample(rng, teams)))
    return sdrs


# ---------------------------------------------------------------------------
# Calendar
# ---------------------------------------------------------------------------

def _build_date_range(rng: RNG, config: GeneratorConfig) -> list[datetime.datetime]:
    """Contiguous UTC midnights starting a seeded offset after the anchor."""
    total_days = random_int(rng, config.min_days, config.max_days)
    offset = random_int(rng, 0, config.max_offset_days)
    start = config.anchor + datetime.timedelta(days=offset)
    return [start + datetime.timedelta(days=i) for i in range(total_days)]


def _event_timestamp(
    rng: RNG,
    dates: Sequence[datetime.datetime],
    outcome: Outcome,
    selected_day: datetime.datetime,
    config: GeneratorConfig,
) -> datetime.datetime:
    """Pick a time within the day, nudging meetings towards Tue-Thu 10-16h."""
    if outcome.is_meeting_stage:
        preferred = [d for d in dates if d.weekday() in MEETING_PREFERRED_WEEKDAYS]
        use_preferred = (
            selected_day.weekday() not in MEETING_PREFERRED_WEEKDAYS
            and len(preferred) > 0
            and rng() < config.meeting_day_bias
        )
        day = sample(rng, preferred) if use_preferred else selected_day
        hour = random_int(rng, 10, 16)
    else:
        day = selected_day
        hour = random_int(rng, 8, 18)
    minute = random_int(rng, 0, 59)
    second = math.floor(rng() * 60)
    return day.replace(hour=hour, minute=minute, second=second)


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------

def outcome_weights(
    channel: Channel,
    industry: IndustryProfile,
    config: GeneratorConfig | None = None,
) -> OutcomeWeights:
    """Channel base weights, adjusted for quiet industries, summing to 1.

    The channel table is selected first, the quiet-industry factors are
    applied second, and the result is renormalized last.
    """
    cfg = config or GeneratorConfig()
    weights = OUTCOME_WEIGHTS_BY_CHANNEL[channel]
    if industry.quiet:
        adjusted = []
        for outcome, weight in weights:
            if outcome in _QUIET_DAMPENED:
                weight *= cfg.quiet_meeting_factor
            elif outcome in _QUIET_BOOSTED:
                weight *= cfg.quiet_connect_factor
            adjusted.append((outcome, weight))
        weights = tuple(adjusted)
    total = sum(weight for _, weight in weights) or 1
    return tuple((outcome, weight / total) for outcome, weight in weights)


def _pick_objection(rng: RNG, outcome: Outcome) -> Objection | None:
    probability = OBJECTION_PROBABILITY.get(outcome)
    if probability is None or rng() >= probability:
        return None
    return pick_weighted(rng, OBJECTION_WEIGHTS)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def generate_dataset(
    seed: str | int | float = 42,
    config: GeneratorConfig | None = None,
) -> GeneratedDataset:
    """Generate a complete, self-consistent dataset from *seed* alone.

    Parameters
    ----------
    seed:
        Any string or number; numbers are coerced to strings.  The same
        seed (and config) always yields an identical dataset.
    config:
        Optional :class:`GeneratorConfig`.  Defaults reproduce the
        canonical datasets.

    Returns
    -------
    GeneratedDataset
        Events plus the team, industry, company and SDR directories every
        event references.
    """
    cfg = config or GeneratorConfig()
    cfg.validate()

    rng = create_rng(seed)
    teams = _create_teams(rng, cfg)
    industries = _create_industries(rng, cfg)
    companies = _create_companies(rng, industries, cfg)
    sdrs = _create_sdrs(rng, teams, cfg)
    dates = _build_date_range(rng, cfg)
    day_options = [(day, DAY_WEIGHTS[day.weekday()]) for day in dates]

    companies_by_industry: dict[str, list[CompanyProfile]] = defaultdict(list)
    for company in companies:
        companies_by_industry[company.industry].append(company)

    total_events = random_int(rng, cfg.min_events, cfg.max_events)
    events: list[OutreachEvent] = []

    for i in range(1, total_events + 1):
        selected_day = pick_weighted(rng, day_options)
        sdr = sample(rng, sdrs)
        industry = sample(rng, industries)
        company = sample(rng, companies_by_industry.get(industry.name) or companies)

        channel = pick_weighted(rng, CHANNEL_WEIGHTS)
        outcome = pick_weighted(rng, outcome_weights(channel, industry, cfg))
        moment = _event_timestamp(rng, dates, outcome, selected_day, cfg)
        objection = _pick_objection(rng, outcome)
        lead_number = math.floor(rng() * 900000 + 100000)

        events.append(
            OutreachEvent(
                event_id=f"evt_{i:05d}",
                lead_id=f"lead_{lead_number}",
                timestamp=format_iso(moment),
                week_start=format_iso(start_of_week(moment)),
                sdr_id=sdr.id,
                sdr_name=sdr.name,
                team=sdr.team,
                company=company.name,
                industry=industry.name,
                channel=channel,
                outcome=outcome,
                objection=objection,
            )
        )

    logger.debug(
        "Generated %d events across %d days for seed %r",
        len(events),
        len(dates),
        coerce_seed(seed),
    )

    return GeneratedDataset(
        seed=coerce_seed(seed),
        events=tuple(events),
        sdrs=tuple(sdrs),
        teams=tuple(teams),
        industries=tuple(industries),
        companies=tuple(companies),
    )
