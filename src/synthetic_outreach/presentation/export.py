"""Export utilities for datasets and dashboard summaries.

Writes the dashboard CSV, the summary snapshot as JSON, and the complete
dataset (directories plus events) as JSON.  Parent directories are created
as needed.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from synthetic_outreach.domain.values import GeneratedDataset
from synthetic_outreach.infrastructure.csv_codec import SerializedCsv
from synthetic_outreach.infrastructure.serialization import dataset_to_dict
from synthetic_outreach.measurement.report import DashboardSummaries

logger = logging.getLogger(__name__)


def _prepare(path: str | Path) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    return out


# ---------------------------------------------------------------------------
# CSV
# ---------------------------------------------------------------------------

def export_csv(result: SerializedCsv, path: str | Path) -> Path:
    """Write serialized dashboard CSV text to *path*.

    Parameters
    ----------
    result:
        Output of :func:`serialize_dashboard_csv`.
    path:
        File path for the CSV output.
    """
    out = _prepare(path)
    out.write_text(result.csv, encoding="utf-8")
    logger.info("Wrote dashboard CSV to %s", out)
    return out


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------

def export_summary_json(summaries: DashboardSummaries, path: str | Path) -> Path:
    """Write the summary snapshot as indented camelCase JSON."""
    out = _prepare(path)
    out.write_text(summaries.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
    logger.info("Wrote summary JSON to %s", out)
    return out


def export_dataset_json(dataset: GeneratedDataset, path: str | Path) -> Path:
    """Write the dataset's directories and events as JSON."""
    out = _prepare(path)
    with open(out, "w", encoding="utf-8") as fh:
        json.dump(dataset_to_dict(dataset), fh, indent=2, ensure_ascii=False)
    logger.info("Wrote dataset JSON (%d events) to %s", len(dataset.events), out)
    return out
