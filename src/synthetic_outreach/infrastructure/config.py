"""Configuration dataclasses for synthetic outreach analytics.

Each config is a plain ``dataclass`` with a ``validate()`` method that raises
``ValueError`` on invalid combinations.  Configs are **frozen** so a config
passed to the generator cannot drift during a generation call.

The defaults of :class:`GeneratorConfig` reproduce the canonical seeded
datasets; changing any field changes every dataset it generates.
"""

from __future__ import annotations

import datetime
import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import yaml


# ===================================================================== #
#  Generator Configuration                                               #
# ===================================================================== #

@dataclass(frozen=True)
class GeneratorConfig:
    """Parameters shaping a synthetic outreach dataset.

    Attributes
    ----------
    min_teams, max_teams:
        Inclusive range for the number of teams drawn from the team pool.
    min_industries, max_industries:
        Inclusive range for the number of industries drawn from the pool.
    min_sdrs, max_sdrs:
        Inclusive range for the number of SDRs.
    min_companies_per_industry, max_companies_per_industry:
        Inclusive range for companies generated in each industry.
    min_days, max_days:
        Inclusive range for the length of the contiguous date window.
    anchor_date:
        ISO date of the Monday the window is offset from.
    max_offset_days:
        The window starts ``0..max_offset_days`` days after the anchor.
    min_events, max_events:
        Inclusive range for the number of events.
    meeting_day_bias:
        Probability that a meeting-stage event landing outside Tue-Thu is
        moved onto a Tue-Thu day.
    quiet_meeting_factor:
        Multiplier applied to booked/held weights in quiet industries.
    quiet_connect_factor:
        Multiplier applied to connected/conversation weights in quiet
        industries.
    """

    min_teams: int = 2
    max_teams: int = 3
    min_industries: int = 6
    max_industries: int = 8
    min_sdrs: int = 10
    max_sdrs: int = 15
    min_companies_per_industry: int = 6
    max_companies_per_industry: int = 10
    min_days: int = 14
    max_days: int = 21
    anchor_date: str = "2024-01-08"
    max_offset_days: int = 14
    min_events: int = 2000
    max_events: int = 3000
    meeting_day_bias: float = 0.7
    quiet_meeting_factor: float = 0.6
    quiet_connect_factor: float = 1.2

    @property
    def anchor(self) -> datetime.datetime:
        """The anchor Monday as an aware UTC midnight."""
        day = datetime.date.fromisoformat(self.anchor_date)
        return datetime.datetime(day.year, day.month, day.day, tzinfo=datetime.UTC)

    def validate(self) -> None:
        """Raise ``ValueError`` if any field is out of valid range."""
        from synthetic_outreach.generation.catalog import INDUSTRY_POOL, TEAM_NAMES

        ranges = (
            ("teams", self.min_teams, self.max_teams, 1),
            ("industries", self.min_industries, self.max_industries, 1),
            ("sdrs", self.min_sdrs, self.max_sdrs, 1),
            (
                "companies_per_industry",
                self.min_companies_per_industry,
                self.max_companies_per_industry,
                1,
            ),
            ("days", self.min_days, self.max_days, 1),
            ("events", self.min_events, self.max_events, 0),
        )
        for name, low, high, floor in ranges:
            if low < floor:
                raise ValueError(f"min_{name} must be >= {floor}, got {low}")
            if high < low:
                raise ValueError(
                    f"max_{name} ({high}) must be >= min_{name} ({low})"
                )
        if self.max_teams > len(TEAM_NAMES):
            raise ValueError(
                f"max_teams must be <= {len(TEAM_NAMES)}, got {self.max_teams}"
            )
        if self.max_industries > len(INDUSTRY_POOL):
            raise ValueError(
                f"max_industries must be <= {len(INDUSTRY_POOL)}, "
                f"got {self.max_industries}"
            )
        try:
            anchor = datetime.date.fromisoformat(self.anchor_date)
        except ValueError:
            raise ValueError(
                f"anchor_date must be an ISO date, got '{self.anchor_date}'"
            ) from None
        if anchor.weekday() != 0:
            raise ValueError(f"anchor_date must be a Monday, got '{self.anchor_date}'")
        if self.max_offset_days < 0:
            raise ValueError(
                f"max_offset_days must be >= 0, got {self.max_offset_days}"
            )
        if not (0.0 <= self.meeting_day_bias <= 1.0):
            raise ValueError(
                f"meeting_day_bias must be in [0, 1], got {self.meeting_day_bias}"
            )
        if self.quiet_meeting_factor < 0.0:
            raise ValueError(
                f"quiet_meeting_factor must be >= 0, got {self.quiet_meeting_factor}"
            )
        if self.quiet_connect_factor < 0.0:
            raise ValueError(
                f"quiet_connect_factor must be >= 0, got {self.quiet_connect_factor}"
            )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GeneratorConfig:
        valid_keys = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        cfg = cls(**filtered)
        cfg.validate()
        return cfg


# ===================================================================== #
#  Summary Configuration                                                 #
# ===================================================================== #

@dataclass(frozen=True)
class SummaryConfig:
    """Sizes of the ranked lists in a dashboard summary.

    Attributes
    ----------
    max_entities:
        Funnels and pipeline-health teams kept per grouping.
    leaderboard_size:
        SDRs kept on the leaderboard.
    best_time_top_n:
        Weekdays and hours kept in the best-time summary.
    """

    max_entities: int = 5
    leaderboard_size: int = 10
    best_time_top_n: int = 5

    def validate(self) -> None:
        if self.max_entities < 1:
            raise ValueError(f"max_entities must be >= 1, got {self.max_entities}")
        if self.leaderboard_size < 1:
            raise ValueError(
                f"leaderboard_size must be >= 1, got {self.leaderboard_size}"
            )
        if self.best_time_top_n < 1:
            raise ValueError(
                f"best_time_top_n must be >= 1, got {self.best_time_top_n}"
            )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SummaryConfig:
        valid_keys = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        cfg = cls(**filtered)
        cfg.validate()
        return cfg


# ===================================================================== #
#  Unified config loader                                                 #
# ===================================================================== #

_CONFIG_MAP: dict[str, type] = {
    "generator": GeneratorConfig,
    "summary": SummaryConfig,
}


def _build_sections(raw: Any) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise ValueError("Top-level config must be a mapping")
    result: dict[str, Any] = {}
    for section, data in raw.items():
        cls = _CONFIG_MAP.get(section)
        if cls is not None and isinstance(data, dict):
            result[section] = cls.from_dict(data)
        else:
            result[section] = data
    return result


def load_config_from_json(json_str: str) -> dict[str, Any]:
    """Parse a JSON string into a dict of typed config objects.

    The JSON is expected to be an object whose top-level keys correspond to
    config section names (``generator``, ``summary``).  Unknown sections are
    preserved as raw values.
    """
    return _build_sections(json.loads(json_str))


def load_config_from_yaml(yaml_str: str) -> dict[str, Any]:
    """YAML counterpart of :func:`load_config_from_json`."""
    return _build_sections(yaml.safe_load(yaml_str))


def load_config_file(path: str | Path) -> dict[str, Any]:
    """Load a ``.json``, ``.yaml`` or ``.yml`` config file by extension."""
    source = Path(path)
    text = source.read_text(encoding="utf-8")
    if source.suffix.lower() in (".yaml", ".yml"):
        return load_config_from_yaml(text)
    return load_config_from_json(text)
