"""Synthetic Outreach.

Deterministic SDR outreach datasets and the analytics pipeline beneath an
outreach dashboard: seeded generation, funnel-flag derivation, conversion
rates and summaries, and a CSV interchange format with an embedded
summary snapshot.
"""

__version__ = "0.1.0"

from synthetic_outreach.generation import generate_dataset
from synthetic_outreach.infrastructure.csv_codec import (
    parse_dashboard_csv,
    prepare_dataset_from_csv,
    serialize_dashboard_csv,
)
from synthetic_outreach.measurement import DashboardSummaries, build_dashboard_summaries
from synthetic_outreach.services import EventFilters, derive_events, filter_events

__all__ = [
    "generate_dataset",
    "derive_events",
    "EventFilters",
    "filter_events",
    "build_dashboard_summaries",
    "DashboardSummaries",
    "serialize_dashboard_csv",
    "parse_dashboard_csv",
    "prepare_dataset_from_csv",
]
