"""Service layer for synthetic outreach analytics.

Re-exports public service types for convenient top-level access::

    from synthetic_outreach.services import (
        derive_events, derive_outcome_flags, bucket_events_by_week,
        EventFilters, filter_events,
    )
"""

from synthetic_outreach.services.derivation import (
    OUTCOME_FLAGS,
    bucket_events_by_week,
    derive_events,
    derive_outcome_flags,
)
from synthetic_outreach.services.filtering import EventFilters, filter_events

__all__ = [
    # Derivation
    "OUTCOME_FLAGS",
    "bucket_events_by_week",
    "derive_events",
    "derive_outcome_flags",
    # Filtering
    "EventFilters",
    "filter_events",
]
