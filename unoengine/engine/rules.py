"""UNO rules: card legality and the effect of a played card."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Union

from unoengine.engine.card import (
    ActionCard,
    ActionKind,
    Card,
    Color,
    WildCard,
    WildKind,
    accepts,
)
from unoengine.engine.errors import IllegalPlay

if TYPE_CHECKING:
    from unoengine.engine.game_state import Game, TurnState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayCard:
    """Action: play the card at `index` in the hand. For wilds, chosen_color is required."""

    index: int
    chosen_color: Optional[Color] = None


@dataclass(frozen=True)
class DrawCard:
    """Action: draw one card."""

    pass


@dataclass(frozen=True)
class PassTurn:
    """Action: keep a playable drawn card and end the turn."""

    pass


Action = Union[PlayCard, DrawCard, PassTurn]


@dataclass(frozen=True)
class Effect:
    """What a successful play did."""

    card: Card
    player: int
    wild_color: Optional[Color]
    direction: int
    skip_next: bool = False
    draw_penalty: int = 0
    won: bool = False


def legal_plays(hand: List[Card], top: Card, wild_color: Optional[Color]) -> List[int]:
    """Indices of the cards in `hand` that may be placed on `top`."""
    return [i for i, card in enumerate(hand) if accepts(top, card, wild_color)]


def draw_penalty(card: Card) -> int:
    """Cards the next player is forced to draw."""
    if isinstance(card, ActionCard) and card.kind is ActionKind.DRAW_TWO:
        return 2
    if isinstance(card, WildCard) and card.kind is WildKind.DRAW_FOUR:
        return 4
    return 0


def skips_next(card: Card, num_players: int) -> bool:
    """Whether the next player loses their turn.

    With two players a Reverse sends the turn straight back, so it counts as a Skip.
    """
    if isinstance(card, ActionCard):
        if card.kind is ActionKind.REVERSE:
            return num_players == 2
        return True
    return draw_penalty(card) > 0


def resolve_play(
    index: int,
    hand: List[Card],
    discard_pile: List[Card],
    turn: TurnState,
    chosen_wild_color: Optional[Color],
    num_players: int,
) -> Effect:
    """Move hand[index] onto the discard pile and apply its effect to `turn`.

    Nothing is mutated when the play is illegal.
    """
    if not 0 <= index < len(hand):
        raise IllegalPlay(f"Card index {index} out of range (0-{len(hand) - 1})")
    card = hand[index]
    top = discard_pile[-1]
    if not accepts(top, card, turn.wild_color):
        raise IllegalPlay(f"{card} cannot be played on {top}")
    if isinstance(card, WildCard) and not isinstance(chosen_wild_color, Color):
        raise IllegalPlay(f"{card} requires a chosen color, got {chosen_wild_color!r}")

    discard_pile.append(hand.pop(index))

    if isinstance(card, WildCard):
        turn.wild_color = chosen_wild_color
    else:
        turn.wild_color = None
    if isinstance(card, ActionCard) and card.kind is ActionKind.REVERSE:
        turn.direction = -turn.direction
    turn.hot = True

    effect = Effect(
        card=card,
        player=turn.current,
        wild_color=turn.wild_color,
        direction=turn.direction,
        skip_next=skips_next(card, num_players),
        draw_penalty=draw_penalty(card),
        won=not hand,
    )
    logger.debug("Player %d resolved %s: %s", turn.current, card, effect)
    return effect


def get_legal_actions(game: Game) -> List[Action]:
    """Return all legal actions for the current player."""
    if game.is_over:
        return []

    hand = game.hand(game.current_player_index())
    actions: List[Action] = []
    for i in game.legal_plays():
        if isinstance(hand[i], WildCard):
            for color in Color:
                actions.append(PlayCard(index=i, chosen_color=color))
        else:
            actions.append(PlayCard(index=i))

    if game.has_drawn:
        actions.append(PassTurn())
    else:
        actions.append(DrawCard())
    return actions
