"""Simulate a narrated game between bots."""

import logging
import random

from unoengine.agents import BotAgent
from unoengine.orchestration.game_runner import GameRunner

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)


def main():
    rng = random.Random(42)
    agents = [BotAgent(f"Bot {i}", rng=rng) for i in range(1, 5)]

    runner = GameRunner(agents, rng=rng, on_event=lambda event, agent: print(f"> {event}"))
    result = runner.run()

    print(f"Game finished! Winner: {result.winner_name or 'None'} ({result.reason.value})")
    print(f"Turns: {result.num_turns}")
    print(f"Cards accounted for: {runner.game.total_cards()}")


if __name__ == "__main__":
    main()
