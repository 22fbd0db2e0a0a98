from pathlib import Path
from typing import Annotated

import typer

from player_style.cli._logging import configure_logging
from player_style.cli._output import (
    print_compute_summary,
    print_error,
    print_import_result,
    print_player_dna,
    print_team_clusters,
)
from player_style.cli.factory import build_style_container
from player_style.config import Settings, SettingsError, create_config, load_settings
from player_style.domain.result import Err, Ok

app = typer.Typer(name="pstyle", help="Player style scoring for team evaluations")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
) -> None:
    """Player style scoring for team evaluations."""
    configure_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


_DbOpt = Annotated[str | None, typer.Option("--db", help="SQLite database path (overrides config)")]
_EvaluationOpt = Annotated[
    str | None, typer.Option("--evaluation", help="Evaluation id (defaults to the most recent one)")
]


def _settings(db_path: str | None) -> Settings:
    try:
        return load_settings(create_config(db_path=db_path))
    except SettingsError as exc:
        print_error(str(exc))
        raise typer.Exit(code=1) from exc


@app.command()
def compute(
    team_id: Annotated[str, typer.Argument(help="Team whose latest evaluation should be scored")],
    db: _DbOpt = None,
) -> None:
    """Score a team's most recent evaluation and persist the results."""
    with build_style_container(_settings(db)) as container:
        match container.compute_service.compute_latest(team_id):
            case Ok(summary):
                print_compute_summary(summary)
            case Err(e):
                print_error(e.message)
                raise typer.Exit(code=1)


@app.command("import")
def import_cmd(
    fixture_path: Annotated[Path, typer.Argument(help="Path to a JSON fixture of coaches, players and evaluations")],
    db: _DbOpt = None,
) -> None:
    """Import coaches, players and evaluations from a JSON fixture."""
    if not fixture_path.exists():
        print_error(f"file not found: {fixture_path}")
        raise typer.Exit(code=1)

    with build_style_container(_settings(db)) as container:
        match container.fixture_loader.load(fixture_path):
            case Ok(result):
                print_import_result(result)
            case Err(e):
                print_error(e.message)
                raise typer.Exit(code=1)


# --- show subcommand group ---

show_app = typer.Typer(name="show", help="Show persisted scoring results")
app.add_typer(show_app, name="show")


@show_app.command("dna")
def show_dna(
    player_id: Annotated[str, typer.Argument(help="Player id")],
    evaluation: _EvaluationOpt = None,
    db: _DbOpt = None,
) -> None:
    """Show a player's normalized feature scores."""
    with build_style_container(_settings(db)) as container:
        dna = container.lookup_service.player_dna(player_id, evaluation)
    print_player_dna(dna)


@show_app.command("cluster")
def show_cluster(
    team_id: Annotated[str, typer.Argument(help="Team id")],
    evaluation: _EvaluationOpt = None,
    db: _DbOpt = None,
) -> None:
    """Show composite style scores for every player in a team evaluation."""
    with build_style_container(_settings(db)) as container:
        clusters = container.lookup_service.team_clusters(team_id, evaluation)
    print_team_clusters(clusters)
