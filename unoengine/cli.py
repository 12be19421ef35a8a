"""CLI entry point."""

from __future__ import annotations

import logging
import random
import time
from typing import TYPE_CHECKING, Callable, Optional

import typer

from unoengine.config import MAX_BOTS, GameConfig

if TYPE_CHECKING:
    from unoengine.agent.protocol import AgentProtocol

app = typer.Typer(help="UNO against bot opponents")


def _load_config(verbose: bool) -> GameConfig:
    try:
        config = GameConfig.from_env()
    except ValueError as e:
        raise typer.BadParameter(str(e)) from None
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    return config


def _ask_bot_count() -> int:
    """Prompt until the user enters a bot count in range."""
    typer.echo("Enter bot count:")
    while True:
        raw = input().strip()
        try:
            count = int(raw)
        except ValueError:
            typer.echo("You must input a standalone integer. Try again:")
            continue
        if 1 <= count <= MAX_BOTS:
            return count
        typer.echo(f"Bot count must be between 1 and {MAX_BOTS} inclusively. Try again:")


def _build_agents(bots: int, rng: random.Random) -> list[AgentProtocol]:
    from unoengine.agents import BotAgent, HumanAgent

    agents: list[AgentProtocol] = [HumanAgent(name="You")]
    for i in range(1, bots + 1):
        agents.append(BotAgent(name=f"Bot {i}", rng=rng))
    return agents


def _announcer(delay: float) -> Callable[[str, AgentProtocol], None]:
    def announce(event: str, agent: AgentProtocol) -> None:
        typer.echo(event)
        if not agent.is_human and delay > 0:
            time.sleep(delay)

    return announce


@app.command()
def play(
    bots: Optional[int] = typer.Option(
        None,
        "--bots",
        "-b",
        min=1,
        max=MAX_BOTS,
        help=f"Number of bot opponents (1-{MAX_BOTS}). Asked at startup when omitted.",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    delay: Optional[float] = typer.Option(
        None, "--delay", "-d", min=0.0, help="Seconds to pause after each bot move"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Play a single game against bots."""
    from unoengine.engine import DeckExhausted, EndReason
    from unoengine.orchestration.game_runner import GameRunner

    config = _load_config(verbose)
    bot_count = bots or config.bots or _ask_bot_count()
    rng = random.Random(seed if seed is not None else config.seed)
    bot_delay = config.bot_delay if delay is None else delay

    runner = GameRunner(
        _build_agents(bot_count, rng),
        rng=rng,
        max_turns=config.max_turns,
        on_event=_announcer(bot_delay),
    )
    try:
        result = runner.run()
    except DeckExhausted as e:
        typer.echo(f"Could not set up the deck: {e}", err=True)
        raise typer.Exit(code=1)
    except (EOFError, KeyboardInterrupt):
        typer.echo("\nGame abandoned.")
        raise typer.Exit(code=1)

    if result.reason is EndReason.WIN:
        if result.winner == 0:
            typer.echo("Game over: you win!")
        else:
            typer.echo(f"Game over: {result.winner_name} wins!")
    elif result.reason is EndReason.STARVATION:
        typer.echo("Game over: ran out of cards to play with")
    else:
        typer.echo(f"Game over: no winner after {result.num_turns} turns")


@app.command()
def simulate(
    bots: int = typer.Option(4, "--bots", "-b", min=2, max=MAX_BOTS + 1, help="Number of bots"),
    games: int = typer.Option(100, "--games", "-g", min=1, help="Number of games"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Run bot-only games and report win counts."""
    from unoengine.agents import BotAgent
    from unoengine.orchestration.tournament import run_tournament

    config = _load_config(verbose)
    rng = random.Random(seed if seed is not None else config.seed)
    agents = [BotAgent(name=f"Bot {i}", rng=rng) for i in range(1, bots + 1)]
    result = run_tournament(agents, num_games=games, seed=rng.randint(0, 2**31 - 1))

    typer.echo(f"Tournament results ({result.games} games):")
    for name, w in sorted(result.wins.items(), key=lambda x: -x[1]):
        typer.echo(f"  {name}: {w} wins")
    for reason, n in result.no_winner.items():
        typer.echo(f"  no winner ({reason.value}): {n}")


if __name__ == "__main__":
    app()
