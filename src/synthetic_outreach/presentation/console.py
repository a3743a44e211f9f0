"""Rich-based console dashboard.

:class:`ConsoleDashboard` renders a :class:`DashboardSummaries` snapshot as
a series of ``rich`` tables: totals, KPI rates, pipeline health, funnels
and the SDR leaderboard.  Weekly Connect→Conversation trends are drawn as
Unicode sparklines.
"""

from __future__ import annotations

import sys
from typing import Any

from rich.console import Console
from rich.table import Table

from synthetic_outreach.domain.enums import FunnelStage
from synthetic_outreach.measurement.aggregates import WeeklyConversationTrends
from synthetic_outreach.measurement.report import DashboardSummaries, FunnelSummary

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

_SPARK_CHARS = " " + "▁▂▃▄▅▆▇█"


def _sparkline(values: list[float | None]) -> str:
    """Sparkline over a 0..1 scale; missing values render as ``·``."""
    n_chars = len(_SPARK_CHARS) - 1
    chars: list[str] = []
    for v in values:
        if v is None:
            chars.append("·")
            continue
        idx = max(0, min(n_chars, int(v * n_chars)))
        chars.append(_SPARK_CHARS[idx])
    return "".join(chars)


def _format_percent(rate: float | None) -> str:
    return "—" if rate is None else f"{rate * 100:.1f}%"


def _score_colour(score: float) -> str:
    if score >= 60:
        return "green"
    if score >= 40:
        return "yellow"
    if score >= 20:
        return "orange3"
    return "red"


# ---------------------------------------------------------------------------
# ConsoleDashboard
# ---------------------------------------------------------------------------

class ConsoleDashboard:
    """Console presentation layer for dashboard summaries.

    Parameters
    ----------
    file:
        Output stream.  Defaults to ``sys.stdout``.
    width:
        Fixed console width; ``None`` lets rich detect it.
    """

    def __init__(self, file: Any = None, width: int | None = None) -> None:
        self._file = file or sys.stdout
        self._console = Console(file=self._file, width=width)

    # -- public API --------------------------------------------------------

    def print_summaries(self, summaries: DashboardSummaries) -> None:
        """Print every section of *summaries*."""
        self.print_totals(summaries)
        self.print_kpis(summaries)
        self.print_pipeline_health(summaries)
        self.print_funnels(summaries.funnels.teams, "Team Funnels")
        self.print_funnels(summaries.funnels.sdrs, "SDR Funnels")
        self.print_funnels(summaries.funnels.companies, "Company Funnels")
        self.print_leaderboard(summaries)

    def print_totals(self, summaries: DashboardSummaries) -> None:
        totals = summaries.totals
        self._console.print()
        self._console.print(
            f"[bold]Seed[/bold] {summaries.seed}  "
            f"[dim]generated {summaries.generated_at}[/dim]"
        )
        self._console.print(
            f"  events={totals.total_events}  leads={totals.unique_leads}  "
            f"range={totals.date_range.start or '—'} .. {totals.date_range.end or '—'}"
        )
        channels = "  ".join(f"{k}={v}" for k, v in totals.channel_totals.items())
        self._console.print(f"  [dim]channels:[/dim] {channels}")

    def print_kpis(self, summaries: DashboardSummaries) -> None:
        table = Table(title="Key Rates", show_header=True, header_style="bold cyan")
        table.add_column("Rate", style="bold")
        table.add_column("Numerator", justify="right")
        table.add_column("Denominator", justify="right")
        table.add_column("Value", justify="right")
        for record in summaries.kpis:
            table.add_row(
                record.label,
                str(record.numerator),
                str(record.denominator),
                _format_percent(record.rate),
            )
        self._console.print()
        self._console.print(table)

    def print_pipeline_health(self, summaries: DashboardSummaries) -> None:
        health = summaries.pipeline_health
        table = Table(
            title="Pipeline Health by Team",
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("Team", style="bold")
        table.add_column("Score", justify="right")
        for record in health.top_teams[0].components if health.top_teams else []:
            table.add_column(record.label, justify="right")

        for team in health.top_teams:
            colour = _score_colour(team.score)
            table.add_row(
                team.label,
                f"[{colour}]{team.score}[/{colour}]",
                *(_format_percent(c.rate) for c in team.components),
            )
        self._console.print()
        self._console.print(table)
        if health.overall_average is not None:
            self._console.print(f"  [dim]overall average:[/dim] {health.overall_average:.1f}")

    def print_funnels(self, funnels: list[FunnelSummary], title: str) -> None:
        table = Table(title=title, show_header=True, header_style="bold cyan")
        table.add_column("Name", style="bold")
        for stage in FunnelStage:
            table.add_column(stage.label, justify="right")
        for funnel in funnels:
            table.add_row(funnel.name, *(str(funnel.count(stage)) for stage in FunnelStage))
        self._console.print()
        self._console.print(table)

    def print_leaderboard(self, summaries: DashboardSummaries) -> None:
        table = Table(title="SDR Leaderboard", show_header=True, header_style="bold cyan")
        table.add_column("#", justify="right")
        table.add_column("SDR", style="bold")
        table.add_column("Qualified", justify="right")
        table.add_column("Held", justify="right")
        table.add_column("Connects", justify="right")
        for rank, entry in enumerate(summaries.leaderboard, start=1):
            table.add_row(
                str(rank),
                entry.sdr_name,
                str(entry.qualified),
                str(entry.meetings_held),
                str(entry.connects),
            )
        self._console.print()
        self._console.print(table)
        self._console.print()

    def print_trends(self, trends: WeeklyConversationTrends, limit: int = 8) -> None:
        """Print per-SDR weekly Connect→Conversation sparklines."""
        if not trends.series:
            self._console.print("No trend data.")
            return
        self._console.print()
        self._console.print(
            f"[bold]Connect→Conversation by week[/bold] "
            f"[dim]({trends.weeks[0][:10]} .. {trends.weeks[-1][:10]})[/dim]"
        )
        for series in trends.series[:limit]:
            self._console.print(
                f"  {series.sdr_name:<24} {_sparkline(list(series.rates))}  "
                f"[dim]connects={series.total_connects}[/dim]"
            )
        self._console.print()
