"""Public testing utilities for synthetic outreach analytics.

Provides a fixed, hand-checked event sample for writing self-contained
examples and tests.
"""

from synthetic_outreach.testing.fixtures import SAMPLE_EVENTS, sample_events

__all__ = ["SAMPLE_EVENTS", "sample_events"]
