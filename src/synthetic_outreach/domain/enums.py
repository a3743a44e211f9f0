"""Domain enumerations for synthetic outreach analytics.

These enums capture the closed vocabularies carried by every outreach
event: the channel used, the outcome reached, and the objection raised.
Their ``value`` is the lowercase string used on the wire (CSV and JSON).
"""

from enum import Enum


class Channel(Enum):
    """Outreach channel of a single attempt."""

    CALL = "call"
    EMAIL = "email"
    LINKEDIN = "linkedin"


class Outcome(Enum):
    """Result of a single outreach attempt, weakest to strongest.

    ``NO_SHOW`` sits outside the progression: it implies a booked meeting
    that was never held.
    """

    NO_ANSWER = "no_answer"
    VOICEMAIL = "voicemail"
    CONNECTED = "connected"
    CONVERSATION = "conversation"
    MEETING_BOOKED = "meeting_booked"
    MEETING_HELD = "meeting_held"
    NO_SHOW = "no_show"
    QUALIFIED = "qualified"

    @property
    def is_meeting_stage(self) -> bool:
        """True for outcomes that count as a lead's first meeting."""
        return self in (Outcome.MEETING_BOOKED, Outcome.MEETING_HELD, Outcome.QUALIFIED)


class Objection(Enum):
    """Objection raised by the lead during the attempt."""

    BUDGET = "budget"
    TIMING = "timing"
    AUTHORITY = "authority"
    NEED = "need"
    OTHER = "other"


class FunnelStage(Enum):
    """Ordered funnel stages; the value is the camelCase summary key."""

    DIALS = "dials"
    CONNECTS = "connects"
    CONVERSATIONS = "conversations"
    MEETINGS_BOOKED = "meetingsBooked"
    MEETINGS_HELD = "meetingsHeld"
    QUALIFIED = "qualified"

    @property
    def label(self) -> str:
        return _STAGE_LABELS[self]


_STAGE_LABELS: dict[FunnelStage, str] = {
    FunnelStage.DIALS: "Dials",
    FunnelStage.CONNECTS: "Connects",
    FunnelStage.CONVERSATIONS: "Conversations",
    FunnelStage.MEETINGS_BOOKED: "Meetings Booked",
    FunnelStage.MEETINGS_HELD: "Meetings Held",
    FunnelStage.QUALIFIED: "Qualified",
}
