"""Single game runner."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from unoengine.config import DEFAULT_MAX_TURNS
from unoengine.engine import (
    Action,
    EndReason,
    Game,
    IllegalPlay,
    PlayerView,
    Starvation,
    get_legal_actions,
    init_game,
)
from unoengine.engine.rules import DrawCard, PassTurn, PlayCard

if TYPE_CHECKING:
    from unoengine.agent.protocol import AgentProtocol

logger = logging.getLogger(__name__)

EventCallback = Callable[[str, "AgentProtocol"], None]


@dataclass
class GameResult:
    """Result of a completed game."""

    winner: Optional[int]
    reason: EndReason
    num_turns: int
    player_names: tuple[str, ...]

    @property
    def winner_name(self) -> Optional[str]:
        if self.winner is None:
            return None
        return self.player_names[self.winner]


class GameRunner:
    """Runs a single UNO game to completion."""

    def __init__(
        self,
        agents: list["AgentProtocol"],
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        max_turns: int = DEFAULT_MAX_TURNS,
        max_illegal_attempts: int = 3,
        on_event: Optional[EventCallback] = None,
    ):
        self._agents = agents
        self._rng = rng or random.Random(seed)
        self._max_turns = max_turns
        self._max_illegal = max_illegal_attempts
        self._on_event = on_event
        self.game: Optional[Game] = None

    def run(self) -> GameResult:
        """Run the game and return the result."""
        names = [a.name for a in self._agents]
        game = init_game(len(self._agents), rng=self._rng, names=names)
        self.game = game
        num_turns = 0
        seen = len(game.history)

        while not game.is_over and num_turns < self._max_turns:
            pid = game.current_player_index()
            agent = self._agents[pid]
            try:
                self._take_turn(game, agent, pid)
            except Starvation:
                logger.warning("Game ended without a winner: ran out of cards")
            seen = self._emit(game, agent, seen)
            num_turns += 1

        if game.outcome is None:
            logger.warning("Stopped after %d turns without a winner", num_turns)
            return GameResult(None, EndReason.TURN_LIMIT, num_turns, tuple(names))
        return GameResult(
            winner=game.outcome.winner,
            reason=game.outcome.reason,
            num_turns=num_turns,
            player_names=tuple(names),
        )

    def _take_turn(self, game: Game, agent: "AgentProtocol", pid: int) -> None:
        illegal = 0
        while True:
            legal = get_legal_actions(game)
            view = PlayerView.from_game(game, pid)
            action = agent.decide(view, legal)
            if action is None:
                action = _fallback(legal)

            try:
                _apply(game, action)
            except IllegalPlay as e:
                illegal += 1
                logger.warning("%s chose an illegal move (%d/%d): %s", agent.name, illegal, self._max_illegal, e)
                if illegal < self._max_illegal:
                    continue
                action = _fallback(legal)
                _apply(game, action)

            # A playable drawn card gives the player a second decision.
            if isinstance(action, DrawCard) and game.has_drawn:
                illegal = 0
                continue
            return

    def _emit(self, game: Game, agent: "AgentProtocol", seen: int) -> int:
        if self._on_event is not None:
            for event in game.history[seen:]:
                self._on_event(event, agent)
        return len(game.history)


def _fallback(legal: list[Action]) -> Action:
    return next(a for a in legal if isinstance(a, (DrawCard, PassTurn)))


def _apply(game: Game, action: Action) -> None:
    if isinstance(action, PlayCard):
        game.play(action.index, action.chosen_color)
    elif isinstance(action, DrawCard):
        game.draw_one()
    elif isinstance(action, PassTurn):
        game.pass_turn()
    else:
        raise IllegalPlay(f"Unknown action: {action!r}")
