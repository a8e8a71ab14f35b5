"""CLI commands for last-interview"""
import dataclasses
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from last_interview import __version__
from last_interview.agents.player_factory import create_player
from last_interview.constants import DEFAULT_SIMULATION_RUNS, PLAYER_CHOICES
from last_interview.core.content_registry import get_registry
from last_interview.core.errors import ContentError
from last_interview.core.logging import LogManager
from last_interview.executors.player import play_interview
from last_interview.executors.simulation import print_summary, run_simulation
from last_interview.schemas.config import EngineConfig
from last_interview.schemas.content import ContentModel

# Initialize logging
log_manager = LogManager()
log = log_manager.get_logger()

app = typer.Typer(
    help="last-interview: a satirical job interview you cannot win.",
    rich_markup_mode="rich",
)


def version_callback(value: bool):
    if value:
        typer.echo(f"last-interview version {__version__}")
        raise typer.Exit()


def _load_config(content: Optional[Path], log_level: Optional[str], debug: bool = False,
                 **overrides) -> EngineConfig:
    """Environment config with CLI options applied on top"""
    try:
        config = EngineConfig.from_env()
        changes = {k: v for k, v in overrides.items() if v is not None}
        if content is not None:
            changes['content_path'] = content
        if debug:
            changes['log_level'] = "debug"
        elif log_level is not None:
            changes['log_level'] = log_level
        config = dataclasses.replace(config, **changes)
    except ValueError as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(code=2)
    log_manager.setup(config.log_level)
    return config


def _load_content(config: EngineConfig) -> ContentModel:
    try:
        return get_registry().get(config.content_path)
    except FileNotFoundError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
    except ContentError as e:
        typer.echo(e.message, err=True)
        raise typer.Exit(code=1)


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
):
    """
    last-interview: a satirical job interview you cannot win.

    Play the interview, simulate scripted candidates, or validate content files.
    """
    pass


@app.command()
def play(
    content: Optional[Path] = typer.Option(None, help="Path to a YAML content file."),
    seed: Optional[int] = typer.Option(None, help="Random seed for office flavor."),
    interruptions: Optional[float] = typer.Option(
        None, help="Chance of an office interruption after each answer (0-1)."),
    meta_interval: Optional[int] = typer.Option(
        None, help="Non-meta answers required before a meta question (0 disables)."),
    skip: bool = typer.Option(False, help="Auto-select questions with a single answer."),
    log_level: Optional[str] = typer.Option(None, help="Logging level (debug, info, warning, error)."),
    debug: bool = typer.Option(False, help="Enable debug logging and output, remove terminal UI."),
):
    """Play the interview interactively.

    Example:
        last-interview play
        last-interview play --content my_interview.yaml --interruptions 0.5
    """
    config = _load_config(content, log_level, debug, seed=seed,
                          interruption_chance=interruptions, meta_interval=meta_interval)
    interview = _load_content(config)

    try:
        ending = play_interview(interview, create_player("human", skip_single=skip),
                                config=config, debug=debug)
    except ContentError as e:
        typer.echo(e.message, err=True)
        raise typer.Exit(code=1)

    if ending is None:
        log.info("Interview abandoned")
        raise typer.Exit(code=1)
    log.info(f"Interview finished with ending: {ending.id}")


@app.command()
def simulate(
    content: Optional[Path] = typer.Option(None, help="Path to a YAML content file."),
    runs: int = typer.Option(DEFAULT_SIMULATION_RUNS, "--runs", "-n", help="Number of interviews to play."),
    player: str = typer.Option("random", help=f"Scripted player (choices: {', '.join(PLAYER_CHOICES)})."),
    seed: Optional[int] = typer.Option(None, help="Base random seed; run i uses seed + i."),
    meta_interval: Optional[int] = typer.Option(
        None, help="Non-meta answers required before a meta question (0 disables)."),
    log_level: Optional[str] = typer.Option(None, help="Logging level (debug, info, warning, error)."),
):
    """Play many interviews with a scripted player and show which endings they reach.

    Example:
        last-interview simulate --runs 500 --player zen --seed 42
    """
    if player not in PLAYER_CHOICES:
        raise typer.BadParameter(f"Unknown player {player!r}. Choices: {', '.join(PLAYER_CHOICES)}",
                                 param_hint="--player")
    if runs < 1:
        raise typer.BadParameter("Number of runs must be positive", param_hint="--runs")

    config = _load_config(content, log_level, seed=seed, meta_interval=meta_interval)
    interview = _load_content(config)

    def player_factory(run: int):
        return create_player(player, seed=None if config.seed is None else config.seed + run)

    result = run_simulation(interview, player_factory, runs=runs, meta_interval=config.meta_interval)
    print_summary(result, interview)


@app.command()
def validate(content: Path = typer.Argument(..., help="Path to a YAML content file.")):
    """Check a content file for structural and cross-reference problems.

    Exits with code 1 and lists every problem when the content is invalid.
    """
    console = Console()
    try:
        interview = get_registry().get(content, reload=True)
    except FileNotFoundError as e:
        console.print(f"[red]{escape(str(e))}[/]")
        raise typer.Exit(code=1)
    except ContentError as e:
        console.print(f"[red bold]{escape(e.message.splitlines()[0])}[/]")
        for problem in e.problems:
            console.print(f"  [red]- {escape(problem)}[/]")
        raise typer.Exit(code=1)

    table = Table(title=interview.title, show_header=False)
    table.add_column("Item", style="cyan")
    table.add_column("Count", style="green")
    for item, count in interview.summary().items():
        table.add_row(item, str(count))
    console.print(table)
    console.print(f"[green]✓ Valid content:[/] {escape(str(content))}")


if __name__ == "__main__":
    app()
