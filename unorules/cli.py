"""CLI entry point."""

from __future__ import annotations

import logging
from typing import Optional

import typer

from unorules.config import Settings

app = typer.Typer(help="UNO rules engine: hot-seat play and simulated matches")


def _configure_logging(level: Optional[str], settings: Settings) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _parse_players(players: Optional[str], settings: Settings) -> list[str]:
    if players is None:
        names = list(settings.players)
    else:
        names = [s.strip() for s in players.split(",") if s.strip()]
    if not 2 <= len(names) <= 10:
        raise typer.BadParameter("Give between 2 and 10 comma-separated player names.")
    if len(set(names)) != len(names):
        raise typer.BadParameter(f"Player names must be unique: {', '.join(names)}")
    return names


@app.command()
def play(
    players: Optional[str] = typer.Option(
        None,
        "--players",
        "-p",
        help="Comma-separated player names (e.g. Alice,Bob,Carol)",
    ),
    target: Optional[int] = typer.Option(None, "--target", "-t", help="Score that wins the match"),
    cards: Optional[int] = typer.Option(None, "--cards", "-c", help="Cards dealt to each player"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level"),
) -> None:
    """Play a hot-seat match at this terminal."""
    from unorules.agents.human_agent import HumanAgent
    from unorules.orchestration.match_runner import MatchRunner

    settings = Settings.from_env()
    _configure_logging(log_level, settings)
    names = _parse_players(players, settings)
    runner = MatchRunner(
        {name: HumanAgent(name=name) for name in names},
        target_score=settings.target_score if target is None else target,
        seed=seed if seed is not None else settings.seed,
        cards_per_player=settings.cards_per_player if cards is None else cards,
    )
    result = runner.run()
    typer.echo(f"Winner: {result.winner or 'None'}")
    for name, score in result.scores.items():
        typer.echo(f"  {name}: {score} points")


@app.command()
def simulate(
    players: int = typer.Option(4, "--players", "-n", min=2, max=10, help="Number of players"),
    matches: int = typer.Option(10, "--matches", "-g", min=1, help="Number of matches"),
    target: Optional[int] = typer.Option(None, "--target", "-t", help="Score that wins a match"),
    cards: Optional[int] = typer.Option(None, "--cards", "-c", help="Cards dealt to each player"),
    forgetful: float = typer.Option(
        0.0, "--forgetful", min=0.0, max=1.0, help="Chance a player forgets to say UNO"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level"),
) -> None:
    """Run matches between random players and report the wins."""
    from unorules.agents.random_agent import RandomAgent
    from unorules.orchestration.tournament import run_tournament

    settings = Settings.from_env()
    _configure_logging(log_level, settings)
    seed = seed if seed is not None else settings.seed
    agent_map = {
        f"player_{i}": RandomAgent(
            name=f"player_{i}",
            seed=None if seed is None else seed + i,
            forgetful=forgetful,
        )
        for i in range(players)
    }
    wins = run_tournament(
        agent_map,
        num_matches=matches,
        seed=seed,
        target_score=settings.target_score if target is None else target,
        cards_per_player=settings.cards_per_player if cards is None else cards,
    )
    typer.echo("Simulation results:")
    for pid in agent_map:
        typer.echo(f"  {pid}: {wins.get(pid, 0)} wins")


if __name__ == "__main__":
    app()
