"""Serialization utilities for synthetic outreach datasets.

Provides ``to_dict`` / ``from_dict`` round-trip conversion for events,
directory profiles, datasets and configs, plus JSON and YAML helpers on
top of them.  Dashboard summaries are pydantic models and serialize
themselves (:meth:`DashboardSummaries.to_json`).

Design goals:
- Every ``to_dict`` output is JSON-serializable (enums become their values,
  tuples become lists, a missing objection becomes ``None``).
- ``from_dict`` reconstructors raise ``ValueError`` for unknown enum values
  and ``KeyError`` for missing required fields.
"""

from __future__ import annotations

import json
from typing import Any

import yaml

from synthetic_outreach.domain.enums import Channel, Objection, Outcome
from synthetic_outreach.domain.values import (
    CompanyProfile,
    GeneratedDataset,
    IndustryProfile,
    OutreachEvent,
    SDRProfile,
)
from synthetic_outreach.infrastructure.config import GeneratorConfig, SummaryConfig

# =========================================================================== #
#  Events                                                                      #
# =========================================================================== #

def event_to_dict(event: OutreachEvent) -> dict[str, Any]:
    return {
        "event_id": event.event_id,
        "lead_id": event.lead_id,
        "timestamp": event.timestamp,
        "week_start": event.week_start,
        "sdr_id": event.sdr_id,
        "sdr_name": event.sdr_name,
        "team": event.team,
        "company": event.company,
        "industry": event.industry,
        "channel": event.channel.value,
        "outcome": event.outcome.value,
        "objection": event.objection.value if event.objection else None,
    }


def event_from_dict(data: dict[str, Any]) -> OutreachEvent:
    objection = data.get("objection")
    return OutreachEvent(
        event_id=str(data["event_id"]),
        lead_id=str(data["lead_id"]),
        timestamp=str(data["timestamp"]),
        week_start=str(data["week_start"]),
        sdr_id=str(data["sdr_id"]),
        sdr_name=str(data["sdr_name"]),
        team=str(data["team"]),
        company=str(data["company"]),
        industry=str(data["industry"]),
        channel=Channel(data["channel"]),
        outcome=Outcome(data["outcome"]),
        objection=Objection(objection) if objection else None,
    )


# =========================================================================== #
#  Directories                                                                 #
# =========================================================================== #

def sdr_to_dict(sdr: SDRProfile) -> dict[str, Any]:
    return {"id": sdr.id, "name": sdr.name, "team": sdr.team}


def sdr_from_dict(data: dict[str, Any]) -> SDRProfile:
    return SDRProfile(id=str(data["id"]), name=str(data["name"]), team=str(data["team"]))


def company_to_dict(company: CompanyProfile) -> dict[str, Any]:
    return {"id": company.id, "name": company.name, "industry": company.industry}


def company_from_dict(data: dict[str, Any]) -> CompanyProfile:
    return CompanyProfile(
        id=str(data["id"]), name=str(data["name"]), industry=str(data["industry"])
    )


def industry_to_dict(industry: IndustryProfile) -> dict[str, Any]:
    return {"name": industry.name, "quiet": industry.quiet}


def industry_from_dict(data: dict[str, Any]) -> IndustryProfile:
    return IndustryProfile(name=str(data["name"]), quiet=bool(data.get("quiet", False)))


# =========================================================================== #
#  Dataset                                                                     #
# =========================================================================== #

def dataset_to_dict(dataset: GeneratedDataset) -> dict[str, Any]:
    return {
        "seed": dataset.seed,
        "teams": list(dataset.teams),
        "industries": [industry_to_dict(i) for i in dataset.industries],
        "companies": [company_to_dict(c) for c in dataset.companies],
        "sdrs": [sdr_to_dict(s) for s in dataset.sdrs],
        "events": [event_to_dict(e) for e in dataset.events],
    }


def dataset_from_dict(data: dict[str, Any]) -> GeneratedDataset:
    return GeneratedDataset(
        seed=str(data.get("seed", "")),
        events=tuple(event_from_dict(e) for e in data.get("events", [])),
        sdrs=tuple(sdr_from_dict(s) for s in data.get("sdrs", [])),
        teams=tuple(str(t) for t in data.get("teams", [])),
        industries=tuple(industry_from_dict(i) for i in data.get("industries", [])),
        companies=tuple(company_from_dict(c) for c in data.get("companies", [])),
    )


# =========================================================================== #
#  Configs                                                                     #
# =========================================================================== #

def config_to_dict(cfg: GeneratorConfig | SummaryConfig) -> dict[str, Any]:
    """Convert any config dataclass to a plain dict."""
    return cfg.to_dict()


# =========================================================================== #
#  Generic serialize / deserialize                                             #
# =========================================================================== #

_SERIALIZERS: dict[type, tuple[Any, Any]] = {
    OutreachEvent: (event_to_dict, event_from_dict),
    SDRProfile: (sdr_to_dict, sdr_from_dict),
    CompanyProfile: (company_to_dict, company_from_dict),
    IndustryProfile: (industry_to_dict, industry_from_dict),
    GeneratedDataset: (dataset_to_dict, dataset_from_dict),
    GeneratorConfig: (config_to_dict, None),
    SummaryConfig: (config_to_dict, None),
}


def serialize(obj: Any) -> dict[str, Any]:
    """Serialize a known domain/infrastructure object to a dict.

    Raises ``TypeError`` for unsupported types.
    """
    ser = _SERIALIZERS.get(type(obj))
    if ser is None:
        raise TypeError(f"No serializer registered for {type(obj).__name__}")
    to_fn, _ = ser
    return to_fn(obj)


def deserialize(data: dict[str, Any], target_type: type) -> Any:
    """Deserialize a dict into *target_type*.

    Configs are rebuilt through their ``from_dict`` classmethod, which also
    validates them.
    """
    ser = _SERIALIZERS.get(target_type)
    if ser is not None:
        _, from_fn = ser
        if from_fn is not None:
            return from_fn(data)
        if hasattr(target_type, "from_dict"):
            return target_type.from_dict(data)
    raise TypeError(f"No deserializer registered for {target_type.__name__}")


# =========================================================================== #
#  JSON helpers                                                                #
# =========================================================================== #

def to_json(obj: Any, *, indent: int | None = 2) -> str:
    """Serialize a domain/infra object to a JSON string."""
    return json.dumps(serialize(obj), indent=indent, ensure_ascii=False)


def from_json(json_str: str, target_type: type) -> Any:
    """Deserialize a JSON string into *target_type*."""
    return deserialize(json.loads(json_str), target_type)


# =========================================================================== #
#  YAML helpers                                                                #
# =========================================================================== #

def to_yaml(obj: Any) -> str:
    """Serialize a domain/infra object to a YAML string."""
    return yaml.dump(serialize(obj), default_flow_style=False, sort_keys=False)


def from_yaml(yaml_str: str, target_type: type) -> Any:
    """Deserialize a YAML string into *target_type*."""
    data = yaml.safe_load(yaml_str)
    if not isinstance(data, dict):
        raise ValueError("YAML document must be a mapping")
    return deserialize(data, target_type)
