"""Typer CLI for consistently-interactive.

Commands:
  audit          Compute the consistently-interactive score for an artifact bundle
  quiet-periods  List the filtered CPU and network quiet-period candidates
"""

from __future__ import annotations

import logging
from pathlib import Path  # noqa: TC003 — Typer evaluates type hints at runtime
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.table import Table

from consistently_interactive.artifacts import load_artifacts
from consistently_interactive.audit import ConsistentlyInteractiveAudit
from consistently_interactive.config import InteractivityConfig
from consistently_interactive.errors import AuditError
from consistently_interactive.models import MatchResult

if TYPE_CHECKING:
    from consistently_interactive.models import QuietPeriod

app = typer.Typer(
    name="consistently-interactive",
    help="Time-to-consistently-interactive metric for browser traces",
    no_args_is_help=True,
)
console = Console()


def _configure_logging(config: InteractivityConfig, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _periods_table(title: str, periods: list[QuietPeriod], matched: QuietPeriod | None) -> Table:
    table = Table(title=title)
    table.add_column("Start (ms)", style="cyan", justify="right")
    table.add_column("End (ms)", style="cyan", justify="right")
    table.add_column("Duration (ms)", style="green", justify="right")
    table.add_column("Matched")
    for p in periods:
        table.add_row(
            f"{p.start:,.0f}",
            f"{p.end:,.0f}",
            f"{p.duration:,.0f}",
            "[bold green]✓[/bold green]" if p == matched else "",
        )
    return table


@app.command()
def audit(
    artifacts_path: Annotated[Path, typer.Argument(help="Artifact bundle JSON file")],
    format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: text or json")
    ] = "text",
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Compute the consistently-interactive score for an artifact bundle."""
    config = InteractivityConfig()
    _configure_logging(config, verbose)
    auditor = ConsistentlyInteractiveAudit(config)

    try:
        result = auditor.audit_artifacts(load_artifacts(artifacts_path))
    except AuditError as e:
        console.print(f"[red]Audit failed: {e}[/red]")
        raise typer.Exit(1) from None

    if format == "json":
        console.print(result.model_dump_json(by_alias=True, indent=2))
        return

    info = result.extended_info
    color = "green" if result.score >= 75 else "yellow" if result.score >= 45 else "red"
    console.print(f"[bold]{auditor.meta.description}[/bold]")
    console.print(f"Score: [{color}]{result.score}[/{color}]")
    console.print(f"Value: {result.display_value} (optimal {result.optimal_value})")
    console.print(
        f"CPU quiet from {info.cpu_quiet_period.start:,.0f}ms, "
        f"network quiet from {info.network_quiet_period.start:,.0f}ms"
    )


@app.command("quiet-periods")
def quiet_periods(
    artifacts_path: Annotated[Path, typer.Argument(help="Artifact bundle JSON file")],
    format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: text or json")
    ] = "text",
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """List the filtered CPU and network quiet-period candidates."""
    config = InteractivityConfig()
    _configure_logging(config, verbose)
    auditor = ConsistentlyInteractiveAudit(config)

    try:
        artifacts = load_artifacts(artifacts_path)
        outcome = auditor.find_quiet_periods(
            artifacts.trace_of_tab,
            auditor.long_tasks_for(artifacts),
            artifacts.network_records,
        )
    except AuditError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from None

    if format == "json":
        console.print(outcome.model_dump_json(by_alias=True, indent=2))
        return

    matched = isinstance(outcome, MatchResult)
    cpu_match = outcome.cpu_quiet_period if matched else None
    network_match = outcome.network_quiet_period if matched else None
    console.print(_periods_table("CPU Quiet Periods", outcome.cpu_quiet_periods, cpu_match))
    console.print(
        _periods_table("Network Quiet Periods", outcome.network_quiet_periods, network_match)
    )
    if not matched:
        console.print(f"[yellow]{outcome.message}[/yellow]")
