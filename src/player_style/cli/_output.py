from typing import Any

from rich.console import Console
from rich.table import Table

from player_style.domain.fixture_import import FixtureImport
from player_style.domain.metrics import Composite, ComputeSummary
from player_style.domain.results import PlayerCluster, PlayerDna

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

_COMPOSITE_LABELS = {
    Composite.POWER_STRENGTH: "Power/Strength",
    Composite.TECHNIQUE_CONTROL: "Technique/Control",
    Composite.MOBILITY_STABILITY: "Mobility/Stability",
    Composite.DECISION_COGNITION: "Decision/Cognition",
}


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def _fmt(value: Any) -> str:
    if isinstance(value, int | float) and not isinstance(value, bool):
        return f"{value:.3f}"
    return "[dim]n/a[/dim]"


def print_compute_summary(summary: ComputeSummary) -> None:
    if summary.evaluations_computed == 0:
        console.print(f"No evaluations found for team [bold]{summary.team_id}[/bold]; nothing computed.")
        return
    console.print(
        f"[bold green]Computed[/bold green] evaluation [bold]{summary.evaluation_id}[/bold]"
        f" for team [bold]{summary.team_id}[/bold]"
    )
    console.print(f"  Player evaluations upserted: {summary.player_evaluations_upserted}")
    console.print(f"  Evaluations in cohort history: {summary.evaluations_total}")
    years = ", ".join(str(y) for y in summary.cohort_years) or "none"
    console.print(f"  Birth-year cohorts: {years}")


def print_import_result(result: FixtureImport) -> None:
    console.print(
        f"[bold green]Import complete:[/bold green] {result.coaches_loaded} coaches,"
        f" {result.players_loaded} players, {result.evaluations_loaded} evaluations"
    )
    console.print(f"  Source: {result.source_detail}")


def print_player_dna(dna: PlayerDna | None) -> None:
    """Print a player's normalized features as a two-column table."""
    if dna is None:
        console.print("No player DNA found.")
        return
    pe = dna.player_evaluation
    console.print(f"[bold]{dna.player_name}[/bold] [dim]({pe.player_id})[/dim]")
    console.print(f"  Evaluation: {pe.name} [dim]({pe.evaluation_id}, {pe.created_at})[/dim]")
    console.print(f"  Coach: {pe.coach_name}")
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Feature")
    table.add_column("Value", justify="right")
    for name, value in dna.dna.items():
        table.add_row(name, _fmt(value))
    console.print(table)


def print_team_clusters(clusters: list[PlayerCluster]) -> None:
    """Print composite scores for every player in an evaluation."""
    if not clusters:
        console.print("No player clusters found.")
        return
    pe = clusters[0].player_evaluation
    console.print(f"Evaluation: [bold]{pe.name}[/bold] [dim]({pe.evaluation_id})[/dim]")
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Player")
    for composite in Composite:
        table.add_column(_COMPOSITE_LABELS[composite], justify="right")
    for entry in clusters:
        table.add_row(entry.player_name, *(_fmt(entry.cluster.get(c.value)) for c in Composite))
    console.print(table)
