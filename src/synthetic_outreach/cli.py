"""Command-line interface for synthetic outreach analytics.

Provides subcommands for generating a seeded dataset, summarizing an
exported dashboard CSV, and showing package information.

Entry point
-----------
The ``main()`` function is registered as a console script in
``pyproject.toml``::

    [project.scripts]
    synthetic-outreach = "synthetic_outreach.cli:main"

Usage examples::

    synthetic-outreach generate --seed 42 --output data/outreach.csv
    synthetic-outreach summarize --input data/outreach.csv --channel call --start 2024-01-08
    synthetic-outreach summarize --input data/outreach.csv --format json
    synthetic-outreach info
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="synthetic-outreach",
        description=(
            "Synthetic outreach analytics -- generate seeded SDR outreach "
            "datasets and summarize dashboard CSV exports."
        ),
    )
    parser.add_argument(
        "--version",
        action="store_true",
        default=False,
        help="Show package version and exit.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level. (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available subcommands")

    # -- generate ------------------------------------------------------------
    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a seeded dataset.",
        description="Generate a deterministic outreach dataset and export it.",
    )
    gen_parser.add_argument(
        "--seed",
        type=str,
        default="42",
        help="Seed string; the same seed always yields the same dataset. (default: 42)",
    )
    gen_parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Path for the dashboard CSV.  If omitted, prints the summary tables.",
    )
    gen_parser.add_argument(
        "--summary-json",
        type=str,
        default=None,
        help="Optional path for the summary snapshot as JSON.",
    )
    gen_parser.add_argument(
        "--dataset-json",
        type=str,
        default=None,
        help="Optional path for the full dataset (directories and events) as JSON.",
    )
    gen_parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="JSON or YAML config file with 'generator' and 'summary' sections.",
    )

    # -- summarize -----------------------------------------------------------
    sum_parser = subparsers.add_parser(
        "summarize",
        help="Summarize a dashboard CSV.",
        description="Import a dashboard CSV, optionally filter it, and display summaries.",
    )
    sum_parser.add_argument(
        "--input",
        type=str,
        required=True,
        help="Path to the dashboard CSV file.",
    )
    sum_parser.add_argument(
        "--format",
        type=str,
        default="table",
        choices=["table", "json"],
        help="Display format. (default: table)",
    )
    sum_parser.add_argument("--team", action="append", default=[], help="Team to keep (repeatable).")
    sum_parser.add_argument("--sdr", action="append", default=[], help="SDR id to keep (repeatable).")
    sum_parser.add_argument(
        "--industry", action="append", default=[], help="Industry to keep (repeatable)."
    )
    sum_parser.add_argument(
        "--channel",
        action="append",
        default=[],
        choices=["call", "email", "linkedin"],
        help="Channel to keep (repeatable).",
    )
    sum_parser.add_argument("--start", type=str, default=None, help="Start date or timestamp.")
    sum_parser.add_argument("--end", type=str, default=None, help="End date or timestamp.")
    sum_parser.add_argument(
        "--trends",
        action="store_true",
        default=False,
        help="Also print weekly Connect→Conversation trends (table format only).",
    )
    sum_parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="JSON or YAML config file with a 'summary' section.",
    )

    # -- info ----------------------------------------------------------------
    subparsers.add_parser(
        "info",
        help="Show package version and defaults.",
        description="Display version, dependency versions and default configuration.",
    )

    return parser


def _load_sections(path: str | None) -> dict[str, Any]:
    if path is None:
        return {}
    from synthetic_outreach.infrastructure.config import load_config_file

    return load_config_file(path)


# =========================================================================
# Subcommand handlers
# =========================================================================

def _cmd_generate(args: argparse.Namespace) -> int:
    """Handle the ``generate`` subcommand."""
    from synthetic_outreach.generation.generator import generate_dataset
    from synthetic_outreach.infrastructure.csv_codec import serialize_dashboard_csv
    from synthetic_outreach.presentation.console import ConsoleDashboard
    from synthetic_outreach.presentation.export import (
        export_csv,
        export_dataset_json,
        export_summary_json,
    )
    from synthetic_outreach.services.derivation import derive_events

    sections = _load_sections(args.config)
    dataset = generate_dataset(args.seed, sections.get("generator"))
    derived = derive_events(dataset.events)
    result = serialize_dashboard_csv(derived, dataset, config=sections.get("summary"))
    logger.info("Generated %d events for seed %s", len(dataset.events), dataset.seed)

    if args.output:
        path = export_csv(result, args.output)
        print(f"Dataset ({len(dataset.events)} events) written to {path}")
    else:
        ConsoleDashboard().print_summaries(result.summaries)

    if args.summary_json:
        path = export_summary_json(result.summaries, args.summary_json)
        print(f"Summary written to {path}")
    if args.dataset_json:
        path = export_dataset_json(dataset, args.dataset_json)
        print(f"Dataset JSON written to {path}")
    return 0


def _cmd_summarize(args: argparse.Namespace) -> int:
    """Handle the ``summarize`` subcommand."""
    from synthetic_outreach.domain.enums import Channel
    from synthetic_outreach.infrastructure.csv_codec import prepare_dataset_from_csv
    from synthetic_outreach.measurement.aggregates import compute_weekly_conversation_trends
    from synthetic_outreach.measurement.engine import build_dashboard_summaries
    from synthetic_outreach.presentation.console import ConsoleDashboard
    from synthetic_outreach.services.derivation import derive_events
    from synthetic_outreach.services.filtering import EventFilters, filter_events

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: file not found: {input_path}", file=sys.stderr)
        return 1

    summary_config = _load_sections(args.config).get("summary")
    imported = prepare_dataset_from_csv(
        input_path.read_text(encoding="utf-8"), config=summary_config
    )
    dataset = imported.dataset

    filters = EventFilters(
        teams=frozenset(args.team),
        sdrs=frozenset(args.sdr),
        industries=frozenset(args.industry),
        channels=frozenset(Channel(c) for c in args.channel),
        start=args.start,
        end=args.end,
    )
    derived = derive_events(dataset.events)
    if filters.is_empty:
        summaries = imported.summaries
    else:
        derived = filter_events(derived, filters)
        summaries = build_dashboard_summaries(derived, dataset, config=summary_config)
        logger.info("Filtered to %d of %d events", len(derived), len(dataset.events))

    if args.format == "json":
        print(summaries.model_dump_json(by_alias=True, indent=2))
        return 0

    dashboard = ConsoleDashboard()
    dashboard.print_summaries(summaries)
    if args.trends:
        dashboard.print_trends(compute_weekly_conversation_trends(derived, dataset.sdr_names()))
    return 0


def _cmd_info(args: argparse.Namespace) -> int:
    """Handle the ``info`` subcommand."""
    from importlib import metadata

    from synthetic_outreach import __version__
    from synthetic_outreach.infrastructure.config import GeneratorConfig, SummaryConfig

    print(f"Synthetic Outreach v{__version__}")
    print()

    dependencies = {
        "numpy": "Mean/median summary statistics",
        "pydantic": "Dashboard summary models and JSON validation",
        "rich": "Console dashboard tables",
        "pyyaml": "YAML configuration files",
    }
    print("Dependencies:")
    for pkg, desc in dependencies.items():
        try:
            print(f"  [installed] {pkg} {metadata.version(pkg)} -- {desc}")
        except metadata.PackageNotFoundError:
            print(f"  [missing]   {pkg} -- {desc}")
    print()

    print("Generator defaults:")
    for key, value in GeneratorConfig().to_dict().items():
        print(f"  {key} = {value}")
    print()
    print("Summary defaults:")
    for key, value in SummaryConfig().to_dict().items():
        print(f"  {key} = {value}")
    print()
    return 0


# =========================================================================
# Main entry point
# =========================================================================

def main(argv: list[str] | None = None) -> None:
    """CLI entry point.

    Parameters
    ----------
    argv:
        Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.version:
        from synthetic_outreach import __version__
        print(f"synthetic-outreach {__version__}")
        sys.exit(0)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    handlers: dict[str, Any] = {
        "generate": _cmd_generate,
        "summarize": _cmd_summarize,
        "info": _cmd_info,
    }

    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        sys.exit(1)

    try:
        exit_code = handler(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        exit_code = 130
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        exit_code = 1

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
