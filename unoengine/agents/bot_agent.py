"""Bot agent - plays a random legal card."""

import random
from typing import Optional

from unoengine.engine import Action, Color, PlayerView, is_wild
from unoengine.engine.rules import DrawCard, PassTurn, PlayCard


class BotAgent:
    """Automated opponent.

    Plays a uniformly random legal card, picking a random color for wilds.
    With nothing to play it draws, and plays the drawn card when it can.
    """

    def __init__(self, name: str = "Bot", rng: Optional[random.Random] = None):
        self._name = name
        self._rng = rng or random.Random()

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def decide(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
    ) -> Action | None:
        if not legal_actions:
            return None

        plays = [a for a in legal_actions if isinstance(a, PlayCard)]
        if plays:
            index = self._rng.choice(sorted({a.index for a in plays}))
            if is_wild(player_view.my_hand[index]):
                return PlayCard(index=index, chosen_color=self._rng.choice(list(Color)))
            return PlayCard(index=index)

        for a in legal_actions:
            if isinstance(a, (DrawCard, PassTurn)):
                return a
        return legal_actions[0]
