"""Dashboard CSV codec.

The CSV file is the interchange format for an outreach dataset.  It starts
with ``#`` metadata comment lines, then a header row, then one row per
event::

    # DASHBOARD_SUMMARY_JSON={"generatedAt": ...}
    # DATASET_SEED=42
    # GENERATED_AT=2024-02-01T09:00:00.000Z
    "event_id","lead_id","timestamp",...,"objection"
    "evt_00001","lead_104233","2024-01-08T09:12:00.000Z",...,""

Every field is double-quoted with embedded quotes doubled; a missing
objection is an empty quoted string.  Lines are joined with LF; CRLF is
accepted on read, as is a leading UTF-8 byte order mark.  Records are
line-based, so quoted newlines are not supported; the seed line escapes
backslash, CR and LF as ``\\\\``, ``\\r`` and ``\\n``.

Name, team, company and industry cells are kept verbatim.  Timestamp and
enum cells are trimmed before validation.

Parsing is strict and all-or-nothing: the first problem raises
:class:`~synthetic_outreach.domain.exceptions.ParseError` and no events
are returned.
"""

from __future__ import annotations

import csv
import io
import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from pydantic import ValidationError

from synthetic_outreach.domain.enums import Channel, Objection, Outcome
from synthetic_outreach.domain.exceptions import ParseError
from synthetic_outreach.domain.timestamps import parse_iso
from synthetic_outreach.domain.values import (
    CompanyProfile,
    DerivedEvent,
    GeneratedDataset,
    IndustryProfile,
    OutreachEvent,
    SDRProfile,
)
from synthetic_outreach.infrastructure.config import SummaryConfig
from synthetic_outreach.measurement.engine import build_dashboard_summaries
from synthetic_outreach.measurement.report import DashboardSummaries
from synthetic_outreach.services.derivation import derive_events

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

CSV_COLUMNS: tuple[str, ...] = (
    "event_id",
    "lead_id",
    "timestamp",
    "week_start",
    "sdr_id",
    "sdr_name",
    "team",
    "company",
    "industry",
    "channel",
    "outcome",
    "objection",
)

SUMMARY_KEY = "DASHBOARD_SUMMARY_JSON"
SEED_KEY = "DATASET_SEED"
GENERATED_AT_KEY = "GENERATED_AT"

DEFAULT_IMPORT_SEED = "imported-dataset"
UNKNOWN_TEAM = "Unknown Team"
UNKNOWN_INDUSTRY = "Unknown"
UNKNOWN_SDR = "Unknown SDR"

_TIMESTAMP_COLUMNS = ("timestamp", "week_start")
_TRIMMED_COLUMNS = (*_TIMESTAMP_COLUMNS, "channel", "outcome", "objection")
_LINE_SPLIT = re.compile(r"\r?\n")
_SLUG_INVALID = re.compile(r"[^a-z0-9]+")
_METADATA_ESCAPE = re.compile(r"\\(.)", re.DOTALL)
_METADATA_UNESCAPES = {"n": "\n", "r": "\r"}


@dataclass(frozen=True)
class SerializedCsv:
    csv: str
    summaries: DashboardSummaries


@dataclass(frozen=True)
class ParsedDashboardCsv:
    """Raw events plus whatever metadata the file carried."""

    events: tuple[OutreachEvent, ...]
    summaries: DashboardSummaries | None
    seed: str | None


@dataclass(frozen=True)
class ImportedDashboard:
    dataset: GeneratedDataset
    summaries: DashboardSummaries


# --------------------------------------------------------------------------- #
#  Serialization                                                               #
# --------------------------------------------------------------------------- #

def _cell(event: OutreachEvent, column: str) -> str:
    value = getattr(event, column)
    if value is None:
        return ""
    if isinstance(value, (Channel, Outcome, Objection)):
        return value.value
    return str(value)


def _escape_metadata(value: str) -> str:
    return value.replace("\\", "\\\\").replace("\r", "\\r").replace("\n", "\\n")


def _write_rows(rows: Iterable[Sequence[str]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerows(rows)
    return buffer.getvalue().rstrip("\n")


def serialize_dashboard_csv(
    events: Sequence[DerivedEvent],
    dataset: GeneratedDataset,
    *,
    config: SummaryConfig | None = None,
    generated_at: str | None = None,
) -> SerializedCsv:
    """Render *events* and their computed summaries as dashboard CSV text.

    Parameters
    ----------
    events:
        Derived events to export (usually the filtered view).  The summary
        snapshot is computed from them as given; only the twelve schema
        columns are written.
    dataset:
        The owning dataset; supplies the seed and the SDR directory.
    config:
        Ranking sizes for the embedded summary snapshot.
    generated_at:
        Timestamp recorded in the snapshot and metadata; defaults to now.

    Returns
    -------
    SerializedCsv
        The CSV text and the summary snapshot embedded in it.
    """
    summaries = build_dashboard_summaries(
        events, dataset, config=config, generated_at=generated_at
    )
    metadata = [
        f"# {SUMMARY_KEY}={summaries.to_json()}",
        f"# {SEED_KEY}={_escape_metadata(dataset.seed)}",
        f"# {GENERATED_AT_KEY}={summaries.generated_at}",
    ]
    body = _write_rows(
        [CSV_COLUMNS, *([_cell(e, c) for c in CSV_COLUMNS] for e in events)]
    )
    logger.info("Serialized %d events (seed=%s)", len(events), dataset.seed)
    return SerializedCsv(csv="\n".join([*metadata, body]), summaries=summaries)


# --------------------------------------------------------------------------- #
#  Parsing                                                                     #
# --------------------------------------------------------------------------- #

def _split_line(line: str) -> list[str]:
    return next(csv.reader([line]), [])


def _parse_enum(enum_cls: type[E], raw: str, column: str, line_number: int) -> E:
    try:
        return enum_cls(raw)
    except ValueError:
        raise ParseError(
            f'Invalid {column} value "{raw}" on line {line_number}.',
            line_number=line_number,
            column=column,
            value=raw,
        ) from None


def _parse_row(
    values: list[str], header: list[str], line_number: int
) -> OutreachEvent:
    row: dict[str, str] = {}
    for index, name in enumerate(header):
        if name in CSV_COLUMNS and name not in row:
            row[name] = values[index] if index < len(values) else ""
    for column in _TRIMMED_COLUMNS:
        row[column] = row.get(column, "").strip()

    for column in CSV_COLUMNS:
        if column != "objection" and not row.get(column, "").strip():
            raise ParseError(
                f"Line {line_number} is missing a value for '{column}'.",
                line_number=line_number,
                column=column,
            )

    for column in _TIMESTAMP_COLUMNS:
        try:
            parse_iso(row[column])
        except ValueError:
            raise ParseError(
                f'Invalid {column} value "{row[column]}" on line {line_number}.',
                line_number=line_number,
                column=column,
                value=row[column],
            ) from None

    objection_raw = row.get("objection", "")
    return OutreachEvent(
        event_id=row["event_id"],
        lead_id=row["lead_id"],
        timestamp=row["timestamp"],
        week_start=row["week_start"],
        sdr_id=row["sdr_id"],
        sdr_name=row["sdr_name"],
        team=row["team"],
        company=row["company"],
        industry=row["industry"],
        channel=_parse_enum(Channel, row["channel"], "channel", line_number),
        outcome=_parse_enum(Outcome, row["outcome"], "outcome", line_number),
        objection=(
            _parse_enum(Objection, objection_raw, "objection", line_number)
            if objection_raw
            else None
        ),
    )


def _unescape_metadata(value: str) -> str:
    return _METADATA_ESCAPE.sub(
        lambda m: _METADATA_UNESCAPES.get(m.group(1), m.group(1)), value
    )


def _parse_summaries(payload: str, line_number: int) -> DashboardSummaries:
    try:
        return DashboardSummaries.from_json(payload)
    except ValidationError as exc:
        raise ParseError(
            "Unable to parse dashboard summaries metadata.",
            line_number=line_number,
            column=SUMMARY_KEY,
            details={"errors": exc.error_count()},
        ) from exc


def parse_dashboard_csv(content: str) -> ParsedDashboardCsv:
    """Parse dashboard CSV text back into raw events.

    Blank lines are dropped.  ``#`` lines are scanned for the summary and
    seed metadata and otherwise ignored.  The first remaining line is the
    header; it must name all twelve columns, in any order.

    Raises
    ------
    ParseError
        On an empty file, a missing header or header column, an
        out-of-domain enum, a missing required value, an unreadable
        timestamp, or malformed summary metadata.  ``line_number`` refers
        to the physical line in *content* (1-based).
    """
    lines = [
        (number, line)
        for number, line in enumerate(
            _LINE_SPLIT.split(content.removeprefix("\ufeff")), start=1
        )
        if line.strip()
    ]
    if not lines:
        raise ParseError("CSV file is empty.")

    header: list[str] | None = None
    events: list[OutreachEvent] = []
    summaries: DashboardSummaries | None = None
    seed: str | None = None

    for line_number, raw in lines:
        line = raw.strip()
        if line.startswith("#"):
            payload = raw.lstrip()[1:].lstrip()
            if payload.startswith(f"{SUMMARY_KEY}="):
                summaries = _parse_summaries(
                    payload[len(SUMMARY_KEY) + 1 :].strip(), line_number
                )
            elif payload.startswith(f"{SEED_KEY}="):
                seed = _unescape_metadata(payload[len(SEED_KEY) + 1 :])
            continue

        if header is None:
            header = [name.strip() for name in _split_line(line)]
            missing = tuple(c for c in CSV_COLUMNS if c not in header)
            if missing:
                raise ParseError(
                    f"Missing required columns: {', '.join(missing)}",
                    line_number=line_number,
                    missing_columns=missing,
                )
            continue

        values = _split_line(line)
        if not values:
            continue
        events.append(_parse_row(values, header, line_number))

    if header is None:
        raise ParseError("CSV header row is missing.")

    logger.info("Parsed %d events from CSV (seed=%s)", len(events), seed)
    return ParsedDashboardCsv(events=tuple(events), summaries=summaries, seed=seed)


# --------------------------------------------------------------------------- #
#  Dataset reconstruction                                                      #
# --------------------------------------------------------------------------- #

def slugify(value: str) -> str:
    """Lowercase, collapse non-alphanumerics to ``-``; ``item`` if nothing is left."""
    return _SLUG_INVALID.sub("-", value.strip().lower()).strip("-") or "item"


def build_dataset_from_events(
    events: Sequence[OutreachEvent],
    seed: str = DEFAULT_IMPORT_SEED,
) -> GeneratedDataset:
    """Rebuild directories from the distinct values found in *events*.

    The first occurrence of each team, industry, company and SDR wins.
    Company ids are slugs of their names; imported industries are never
    quiet.  Directories are sorted by name.
    """
    teams: set[str] = set()
    industries: dict[str, IndustryProfile] = {}
    companies: dict[str, CompanyProfile] = {}
    sdrs: dict[str, SDRProfile] = {}

    for event in events:
        if event.team:
            teams.add(event.team)

        industry = event.industry.strip()
        if industry and industry not in industries:
            industries[industry] = IndustryProfile(name=industry)

        company = event.company.strip()
        if company and company not in companies:
            companies[company] = CompanyProfile(
                id=slugify(company),
                name=company,
                industry=event.industry or UNKNOWN_INDUSTRY,
            )

        sdr_id = event.sdr_id.strip()
        sdr_name = event.sdr_name.strip()
        if sdr_id or sdr_name:
            key = sdr_id or slugify(sdr_name)
            if key not in sdrs:
                sdrs[key] = SDRProfile(
                    id=key,
                    name=sdr_name or sdr_id or UNKNOWN_SDR,
                    team=event.team or UNKNOWN_TEAM,
                )

    return GeneratedDataset(
        seed=seed,
        events=tuple(events),
        sdrs=tuple(sorted(sdrs.values(), key=lambda s: (s.name, s.id))),
        teams=tuple(sorted(teams)),
        industries=tuple(sorted(industries.values(), key=lambda i: i.name)),
        companies=tuple(sorted(companies.values(), key=lambda c: c.name)),
    )


def prepare_dataset_from_csv(
    content: str, *, config: SummaryConfig | None = None
) -> ImportedDashboard:
    """Parse *content* and rebuild a dataset from it.

    The embedded summary snapshot is returned when present; otherwise the
    summaries are recomputed from the imported events.
    """
    parsed = parse_dashboard_csv(content)
    seed = parsed.seed if parsed.seed is not None else DEFAULT_IMPORT_SEED
    dataset = build_dataset_from_events(parsed.events, seed)
    summaries = parsed.summaries
    if summaries is None:
        logger.debug("No embedded summaries; recomputing from %d events", len(parsed.events))
        summaries = build_dashboard_summaries(
            derive_events(dataset.events), dataset, config=config
        )
    return ImportedDashboard(dataset=dataset, summaries=summaries)
