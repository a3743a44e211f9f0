"""Shared fixtures for the synthetic outreach test suite."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from synthetic_outreach.domain.enums import Channel, Outcome
from synthetic_outreach.domain.values import DerivedEvent, GeneratedDataset, OutreachEvent
from synthetic_outreach.generation.generator import generate_dataset
from synthetic_outreach.infrastructure.csv_codec import build_dataset_from_events
from synthetic_outreach.services.derivation import derive_events
from synthetic_outreach.testing import sample_events

# ---------------------------------------------------------------------------
# Event factories
# ---------------------------------------------------------------------------


@pytest.fixture
def make_event() -> Callable[..., OutreachEvent]:
    """Factory for single events; keyword arguments override the defaults."""
    counter = {"n": 0}

    def _make(**overrides: Any) -> OutreachEvent:
        counter["n"] += 1
        fields: dict[str, Any] = {
            "event_id": f"evt-{counter['n']}",
            "lead_id": f"lead-{counter['n']}",
            "timestamp": "2024-01-08T10:00:00.000Z",
            "week_start": "2024-01-08T00:00:00.000Z",
            "sdr_id": "sdr-1",
            "sdr_name": "Jordan Lee",
            "team": "Outbound",
            "company": "Acme",
            "industry": "SaaS",
            "channel": Channel.CALL,
            "outcome": Outcome.NO_ANSWER,
            "objection": None,
        }
        fields.update(overrides)
        return OutreachEvent(**fields)

    return _make


# ---------------------------------------------------------------------------
# Fixed sample
# ---------------------------------------------------------------------------


@pytest.fixture
def sample() -> list[OutreachEvent]:
    """The eight hand-checked call events."""
    return sample_events()


@pytest.fixture
def derived_sample(sample: list[OutreachEvent]) -> list[DerivedEvent]:
    return derive_events(sample)


@pytest.fixture
def sample_dataset(sample: list[OutreachEvent]) -> GeneratedDataset:
    return build_dataset_from_events(sample, seed="sample")


# ---------------------------------------------------------------------------
# Generated datasets (session-scoped: generation is deterministic)
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def dataset() -> GeneratedDataset:
    """Canonical dataset for seed 42."""
    return generate_dataset(42)


@pytest.fixture(scope="session")
def derived(dataset: GeneratedDataset) -> list[DerivedEvent]:
    return derive_events(dataset.events)
