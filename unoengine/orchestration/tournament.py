"""Tournament - run many games and aggregate results."""

import random
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any

from unoengine.engine import EndReason
from unoengine.orchestration.game_runner import GameRunner


@dataclass
class TournamentResult:
    """Win counts by agent name plus games that ended without a winner."""

    games: int = 0
    wins: dict[str, int] = field(default_factory=dict)
    no_winner: dict[EndReason, int] = field(default_factory=dict)


def run_tournament(
    agents: list[Any],
    num_games: int = 100,
    seed: int | None = None,
) -> TournamentResult:
    """Play `num_games` games with the same agents.

    Seat order alternates between the given order and its reverse so nobody
    always moves first.
    """
    wins: dict[str, int] = defaultdict(int)
    no_winner: dict[EndReason, int] = defaultdict(int)

    rng = random.Random(seed)
    for g in range(num_games):
        order = agents if g % 2 == 0 else list(reversed(agents))
        runner = GameRunner(order, seed=rng.randint(0, 2**31 - 1))
        result = runner.run()
        if result.winner_name is not None:
            wins[result.winner_name] += 1
        else:
            no_winner[result.reason] += 1

    return TournamentResult(games=num_games, wins=dict(wins), no_winner=dict(no_winner))
