"""Presentation layer: rich console dashboard and file exports."""

from synthetic_outreach.presentation.console import ConsoleDashboard
from synthetic_outreach.presentation.export import (
    export_csv,
    export_dataset_json,
    export_summary_json,
)

__all__ = [
    "ConsoleDashboard",
    "export_csv",
    "export_dataset_json",
    "export_summary_json",
]
