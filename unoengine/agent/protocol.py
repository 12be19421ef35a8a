"""Agent protocol - interface that human and bot players implement."""

from typing import Protocol

from unoengine.engine import Action, PlayerView


class AgentProtocol(Protocol):
    """Interface for UNO-playing agents."""

    @property
    def name(self) -> str:
        """Display name for the agent."""
        ...

    @property
    def is_human(self) -> bool:
        """Whether moves come from a person at the terminal."""
        ...

    def decide(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
    ) -> Action | None:
        """Choose an action given the player view and legal actions.

        Args:
            player_view: Filtered view with only this player's hand and public info.
            legal_actions: List of valid actions to choose from.

        Returns:
            One of the legal actions, or None to draw (or pass after drawing).
        """
        ...
