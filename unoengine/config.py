"""Runtime configuration, read from the environment (and a .env file)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

MAX_BOTS = 9
DEFAULT_BOT_DELAY = 0.5
DEFAULT_MAX_TURNS = 5000


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass
class GameConfig:
    """Settings for a game session. CLI options override these."""

    bots: Optional[int] = None  # None = ask at startup
    seed: Optional[int] = None
    bot_delay: float = DEFAULT_BOT_DELAY  # seconds to pause after a bot's move
    max_turns: int = DEFAULT_MAX_TURNS
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.bots is not None and not 1 <= self.bots <= MAX_BOTS:
            raise ValueError(f"UNO_BOTS must be between 1 and {MAX_BOTS}, got {self.bots}")
        if self.bot_delay < 0:
            raise ValueError(f"UNO_BOT_DELAY must not be negative, got {self.bot_delay}")
        if self.max_turns < 1:
            raise ValueError(f"UNO_MAX_TURNS must be positive, got {self.max_turns}")
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"UNO_LOG_LEVEL is not a logging level: {self.log_level!r}")

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True) -> GameConfig:
        if load_dotenv_file:
            load_dotenv()
        return cls(
            bots=_env_int("UNO_BOTS", None),
            seed=_env_int("UNO_SEED", None),
            bot_delay=_env_float("UNO_BOT_DELAY", DEFAULT_BOT_DELAY),
            max_turns=_env_int("UNO_MAX_TURNS", DEFAULT_MAX_TURNS),
            log_level=os.environ.get("UNO_LOG_LEVEL", "").strip() or "WARNING",
        )
