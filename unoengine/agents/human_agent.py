"""Human agent - reads actions from terminal."""

from typing import Callable

from unoengine.engine import Action, PlayerView
from unoengine.engine.rules import DrawCard, PassTurn


def format_action(action: Action, view: PlayerView) -> str:
    if isinstance(action, DrawCard):
        return "DRAW"
    if isinstance(action, PassTurn):
        return "PASS (keep the drawn card)"
    card = view.my_hand[action.index]
    extra = f" (choose color: {action.chosen_color.value})" if action.chosen_color else ""
    return f"PLAY {card}{extra}"


class HumanAgent:
    """Agent that prompts the human for input via terminal."""

    def __init__(
        self,
        name: str = "You",
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self._name = name
        self._input = input_fn
        self._output = output_fn

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def decide(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
    ) -> Action | None:
        if not legal_actions:
            return None

        out = self._output
        out("\n--- Your turn ---")
        out("Your hand: " + " ".join(str(c) for c in player_view.my_hand))
        top = str(player_view.top_card)
        if player_view.wild_color is not None:
            top += f" (color: {player_view.wild_color.value})"
        out("Top discard: " + top)
        counts = ", ".join(
            f"{name}: {n}"
            for i, (name, n) in enumerate(
                zip(player_view.player_names, player_view.num_cards_per_player)
            )
            if i != player_view.player_index
        )
        out("Cards left: " + counts)
        out("\nLegal actions:")
        for i, a in enumerate(legal_actions):
            out(f"  {i}: {format_action(a, player_view)}")

        while True:
            raw = self._input("Enter number: ").strip()
            try:
                idx = int(raw)
            except ValueError:
                out("You must input a standalone integer. Try again.")
                continue
            if 0 <= idx < len(legal_actions):
                return legal_actions[idx]
            out(f"Choose a number between 0 and {len(legal_actions) - 1}. Try again.")
