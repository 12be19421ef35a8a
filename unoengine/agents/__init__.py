"""Built-in agents."""

from unoengine.agents.bot_agent import BotAgent
from unoengine.agents.human_agent import HumanAgent

__all__ = ["BotAgent", "HumanAgent"]
