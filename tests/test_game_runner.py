"""Tests for the game runner, tournament and CLI."""

import logging
import random

import pytest
from typer.testing import CliRunner

from unoengine.agents import BotAgent
from unoengine.cli import app
from unoengine.config import GameConfig
from unoengine.engine import EndReason, PlayCard
from unoengine.orchestration import GameRunner, run_tournament


class ScriptedAgent:
    """Always tries the same action."""

    def __init__(self, action, name: str = "scripted"):
        self._action = action
        self._name = name
        self.calls = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def decide(self, player_view, legal_actions):
        self.calls += 1
        return self._action


def _bots(n: int, seed: int) -> list:
    rng = random.Random(seed)
    return [BotAgent(f"Bot {i}", rng=rng) for i in range(1, n + 1)]


@pytest.mark.parametrize("num_bots", [2, 3, 5, 10])
def test_bot_game_runs_to_completion(num_bots: int) -> None:
    runner = GameRunner(_bots(num_bots, 1), seed=7)
    result = runner.run()
    assert result.reason in (EndReason.WIN, EndReason.STARVATION)
    assert runner.game.total_cards() == 108
    if result.reason is EndReason.WIN:
        assert runner.game.hands[result.winner] == []
        assert result.winner_name == f"Bot {result.winner + 1}"
    else:
        assert result.winner is None


def test_bot_game_reproducible() -> None:
    r1 = GameRunner(_bots(4, 3), seed=11).run()
    r2 = GameRunner(_bots(4, 3), seed=11).run()
    assert r1 == r2


def test_events_follow_history() -> None:
    events = []
    runner = GameRunner(_bots(3, 2), seed=5, on_event=lambda event, agent: events.append(event))
    runner.run()
    assert events == runner.game.history


def test_turn_limit() -> None:
    result = GameRunner(_bots(2, 0), seed=0, max_turns=1).run()
    assert result.reason is EndReason.TURN_LIMIT
    assert result.num_turns == 1
    assert result.winner is None


def test_illegal_choices_fall_back_to_drawing(caplog) -> None:
    agent = ScriptedAgent(PlayCard(index=99))
    runner = GameRunner([agent, BotAgent("Bot 1", rng=random.Random(0))], seed=3, max_turns=1)
    with caplog.at_level(logging.WARNING):
        result = runner.run()
    assert result.num_turns == 1
    assert runner.game.history[0] == "scripted draws a card"
    assert len(runner.game.hands[0]) == 8
    assert "illegal move" in caplog.text
    assert agent.calls in (3, 6)


def test_none_action_means_draw() -> None:
    agent = ScriptedAgent(None)
    runner = GameRunner([agent, BotAgent("Bot 1", rng=random.Random(0))], seed=3, max_turns=1)
    runner.run()
    assert runner.game.history[0] == "scripted draws a card"
    assert runner.game.current_player_index() == 1


def test_run_tournament() -> None:
    bots = _bots(3, 9)
    result = run_tournament(bots, num_games=6, seed=3)
    assert result.games == 6
    assert sum(result.wins.values()) + sum(result.no_winner.values()) == 6
    assert set(result.wins) <= {"Bot 1", "Bot 2", "Bot 3"}


def test_config_from_env(monkeypatch) -> None:
    monkeypatch.setenv("UNO_BOTS", "3")
    monkeypatch.setenv("UNO_SEED", "42")
    monkeypatch.setenv("UNO_BOT_DELAY", "0")
    monkeypatch.setenv("UNO_LOG_LEVEL", "debug")
    config = GameConfig.from_env(load_dotenv_file=False)
    assert config == GameConfig(bots=3, seed=42, bot_delay=0.0, log_level="DEBUG")


def test_config_defaults(monkeypatch) -> None:
    for var in ("UNO_BOTS", "UNO_SEED", "UNO_BOT_DELAY", "UNO_MAX_TURNS", "UNO_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    config = GameConfig.from_env(load_dotenv_file=False)
    assert config.bots is None
    assert config.bot_delay == 0.5
    assert config.log_level == "WARNING"


@pytest.mark.parametrize(
    "var, value",
    [("UNO_BOTS", "12"), ("UNO_BOTS", "many"), ("UNO_BOT_DELAY", "-1"), ("UNO_LOG_LEVEL", "LOUD")],
)
def test_config_rejects_bad_values(monkeypatch, var: str, value: str) -> None:
    monkeypatch.setenv(var, value)
    with pytest.raises(ValueError, match=var):
        GameConfig.from_env(load_dotenv_file=False)


def test_cli_simulate() -> None:
    result = CliRunner().invoke(app, ["simulate", "--bots", "3", "--games", "4", "--seed", "1"])
    assert result.exit_code == 0, result.output
    assert "Tournament results (4 games):" in result.output


def test_cli_play_with_scripted_input() -> None:
    result = CliRunner().invoke(
        app,
        ["play", "--bots", "1", "--seed", "3", "--delay", "0"],
        input="0\n" * 3000,
    )
    assert result.exit_code == 0, result.output
    assert "Game over:" in result.output
    assert "--- Your turn ---" in result.output


def test_cli_play_asks_for_bot_count(monkeypatch) -> None:
    monkeypatch.delenv("UNO_BOTS", raising=False)
    result = CliRunner().invoke(
        app,
        ["play", "--seed", "4", "--delay", "0"],
        input="x\n12\n2\n" + "0\n" * 3000,
    )
    assert result.exit_code == 0, result.output
    assert "You must input a standalone integer" in result.output
    assert "between 1 and 9 inclusively" in result.output
    assert "Bot 2" in result.output


def test_announcer_pauses_after_bot_events_only(monkeypatch) -> None:
    from unoengine.agents import HumanAgent
    from unoengine.cli import _announcer

    sleeps = []
    monkeypatch.setattr("unoengine.cli.time.sleep", sleeps.append)
    announce = _announcer(0.25)
    announce("You plays red_5", HumanAgent())
    announce("Bot 1 draws 2 cards", BotAgent("Bot 1"))
    assert sleeps == [0.25]
