"""Name pools and weight tables for the synthetic dataset.

Order matters: the generator shuffles and indexes into these tuples, so
reordering any of them changes every seeded dataset.
"""

from __future__ import annotations

from synthetic_outreach.domain.enums import Channel, Objection, Outcome
from synthetic_outreach.domain.values import IndustryProfile

TEAM_NAMES: tuple[str, ...] = (
    "Outbound Alpha",
    "Pipeline Pros",
    "Growth Gurus",
    "Enterprise Edge",
    "Demand Drivers",
    "Revenue Rockets",
)

FIRST_NAMES: tuple[str, ...] = (
    "Jordan", "Taylor", "Morgan", "Avery", "Riley",
    "Hayden", "Quinn", "Reese", "Drew", "Casey",
    "Peyton", "Blair", "Skyler", "Rowan", "Cameron",
)

LAST_NAMES: tuple[str, ...] = (
    "Lee", "Patel", "Garcia", "Nguyen", "Johnson",
    "Davis", "Walker", "Clark", "Simmons", "Morgan",
    "Keller", "Bryant", "Foster", "Harper", "Shaw",
)

INDUSTRY_POOL: tuple[IndustryProfile, ...] = (
    IndustryProfile("SaaS"),
    IndustryProfile("Fintech"),
    IndustryProfile("Healthcare"),
    IndustryProfile("Manufacturing", quiet=True),
    IndustryProfile("Logistics", quiet=True),
    IndustryProfile("Retail"),
    IndustryProfile("Professional Services"),
    IndustryProfile("Energy", quiet=True),
    IndustryProfile("Education"),
    IndustryProfile("Media"),
    IndustryProfile("Nonprofit", quiet=True),
)

COMPANY_PREFIXES: tuple[str, ...] = (
    "North", "Blue", "Prime", "Next", "Bright",
    "Summit", "Pinnacle", "River", "Cedar", "Apex",
    "Vertex", "Horizon", "Synergy", "Fusion", "Echo",
)

COMPANY_SUFFIXES: tuple[str, ...] = (
    "Labs", "Systems", "Partners", "Solutions", "Logistics",
    "Dynamics", "Networks", "Consulting", "Ventures", "Industries",
    "Holdings", "Collective", "Works", "Group", "Innovations",
)

CHANNEL_WEIGHTS: tuple[tuple[Channel, float], ...] = (
    (Channel.CALL, 0.62),
    (Channel.EMAIL, 0.28),
    (Channel.LINKEDIN, 0.1),
)

OutcomeWeights = tuple[tuple[Outcome, float], ...]

CALL_OUTCOME_WEIGHTS: OutcomeWeights = (
    (Outcome.NO_ANSWER, 0.27),
    (Outcome.VOICEMAIL, 0.22),
    (Outcome.CONNECTED, 0.16),
    (Outcome.CONVERSATION, 0.14),
    (Outcome.MEETING_BOOKED, 0.07),
    (Outcome.MEETING_HELD, 0.03),
    (Outcome.NO_SHOW, 0.05),
    (Outcome.QUALIFIED, 0.06),
)

# voicemail is unreachable outside calls
EMAIL_OUTCOME_WEIGHTS: OutcomeWeights = (
    (Outcome.NO_ANSWER, 0.48),
    (Outcome.VOICEMAIL, 0.0),
    (Outcome.CONNECTED, 0.1),
    (Outcome.CONVERSATION, 0.18),
    (Outcome.MEETING_BOOKED, 0.08),
    (Outcome.MEETING_HELD, 0.02),
    (Outcome.NO_SHOW, 0.04),
    (Outcome.QUALIFIED, 0.1),
)

LINKEDIN_OUTCOME_WEIGHTS: OutcomeWeights = (
    (Outcome.NO_ANSWER, 0.22),
    (Outcome.VOICEMAIL, 0.0),
    (Outcome.CONNECTED, 0.23),
    (Outcome.CONVERSATION, 0.24),
    (Outcome.MEETING_BOOKED, 0.12),
    (Outcome.MEETING_HELD, 0.06),
    (Outcome.NO_SHOW, 0.04),
    (Outcome.QUALIFIED, 0.09),
)

OUTCOME_WEIGHTS_BY_CHANNEL: dict[Channel, OutcomeWeights] = {
    Channel.CALL: CALL_OUTCOME_WEIGHTS,
    Channel.EMAIL: EMAIL_OUTCOME_WEIGHTS,
    Channel.LINKEDIN: LINKEDIN_OUTCOME_WEIGHTS,
}

OBJECTION_WEIGHTS: tuple[tuple[Objection, float], ...] = (
    (Objection.TIMING, 0.42),
    (Objection.BUDGET, 0.32),
    (Objection.AUTHORITY, 0.1),
    (Objection.NEED, 0.08),
    (Objection.OTHER, 0.08),
)

# Probability that an outcome carries an objection; absent means never.
OBJECTION_PROBABILITY: dict[Outcome, float] = {
    Outcome.CONVERSATION: 0.45,
    Outcome.MEETING_BOOKED: 0.45,
    Outcome.MEETING_HELD: 0.45,
    Outcome.QUALIFIED: 0.25,
}

# Day weights by ``date.weekday()`` (Monday == 0).
DAY_WEIGHTS: dict[int, float] = {
    0: 1.15,
    1: 1.15,
    2: 1.15,
    3: 1.15,
    4: 0.9,
    5: 0.65,
    6: 0.65,
}

MEETING_PREFERRED_WEEKDAYS = frozenset({1, 2, 3})  # Tue-Thu
