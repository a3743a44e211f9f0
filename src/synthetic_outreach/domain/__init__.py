"""Domain layer for synthetic outreach analytics.

Re-exports all public domain types so that consumers can write::

    from synthetic_outreach.domain import OutreachEvent, Channel, Outcome
"""

# -- Enumerations -------------------------------------------------------------
from .enums import Channel, FunnelStage, Objection, Outcome

# -- Value Objects ------------------------------------------------------------
from .values import (
    CompanyProfile,
    DerivedEvent,
    GeneratedDataset,
    IndustryProfile,
    OutcomeFlags,
    OutreachEvent,
    RateSummary,
    SDRProfile,
)

# -- Exceptions ---------------------------------------------------------------
from .exceptions import ParseError, SyntheticOutreachError

__all__ = [
    # enums
    "Channel",
    "FunnelStage",
    "Objection",
    "Outcome",
    # values
    "CompanyProfile",
    "DerivedEvent",
    "GeneratedDataset",
    "IndustryProfile",
    "OutcomeFlags",
    "OutreachEvent",
    "RateSummary",
    "SDRProfile",
    # exceptions
    "ParseError",
    "SyntheticOutreachError",
]
