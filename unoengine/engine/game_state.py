"""Game state and turn control for UNO."""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

from unoengine.engine.card import Card, Color, accepts, is_wild
from unoengine.engine.deck import (
    deal_initial_hands,
    establish_discard_seed,
    generate_full_set,
    transfer,
)
from unoengine.engine.errors import GameOver, IllegalPlay, InvalidWildColorBinding, Starvation
from unoengine.engine.rules import Effect, legal_plays, resolve_play

logger = logging.getLogger(__name__)


class EndReason(str, Enum):
    """Why a game stopped."""

    WIN = "win"
    STARVATION = "starvation"
    TURN_LIMIT = "turn_limit"


@dataclass(frozen=True)
class Outcome:
    """Terminal state of a game."""

    reason: EndReason
    winner: Optional[int] = None


@dataclass
class TurnState:
    """Whose turn it is and what the last play left behind."""

    current: int = 0
    direction: int = 1  # 1 = clockwise, -1 = counter-clockwise
    hot: bool = False  # informational: set by a play, cleared once its consequence is honored
    wild_color: Optional[Color] = None  # bound while a wild is on top

    def next_index(self, num_players: int, steps: int = 1) -> int:
        return (self.current + steps * self.direction) % num_players

    def advance(self, num_players: int, steps: int = 1) -> None:
        self.current = self.next_index(num_players, steps)


class Game:
    """Mutable UNO game: piles, hands and turn order.

    A turn progresses only through play(), draw_one() and pass_turn().
    Every call either completes or raises without changing the game, except
    Starvation, which ends the game before it is raised.
    """

    def __init__(
        self,
        hands: List[List[Card]],
        draw_pile: List[Card],
        discard_pile: List[Card],
        rng: random.Random,
        turn: Optional[TurnState] = None,
        names: Optional[Sequence[str]] = None,
    ):
        if len(hands) < 2:
            raise ValueError(f"Need at least two players, got {len(hands)}")
        if not discard_pile:
            raise ValueError("Discard pile needs a top card")
        self.hands = hands
        self.draw_pile = draw_pile
        self.discard_pile = discard_pile
        self.rng = rng
        self.turn = turn or TurnState()
        if is_wild(discard_pile[-1]) and self.turn.wild_color is None:
            raise InvalidWildColorBinding("Wild top card needs a bound color")
        if names is None:
            names = [f"Player {i}" for i in range(len(hands))]
        if len(names) != len(hands):
            raise ValueError(f"Got {len(names)} names for {len(hands)} players")
        self.names = list(names)
        self.history: List[str] = []
        self.outcome: Optional[Outcome] = None
        self._drawn_index: Optional[int] = None

    @property
    def num_players(self) -> int:
        return len(self.hands)

    @property
    def is_over(self) -> bool:
        return self.outcome is not None

    @property
    def winner(self) -> Optional[int]:
        return self.outcome.winner if self.outcome else None

    @property
    def has_drawn(self) -> bool:
        """Whether the current player drew a card they may still play."""
        return self._drawn_index is not None

    @property
    def drawn_index(self) -> Optional[int]:
        return self._drawn_index

    def current_player_index(self) -> int:
        return self.turn.current

    def current_top_card(self) -> Card:
        return self.discard_pile[-1]

    def current_wild_color(self) -> Optional[Color]:
        return self.turn.wild_color

    def hand(self, player_index: int) -> List[Card]:
        """Copy of a player's hand."""
        return list(self.hands[player_index])

    def hand_sizes(self) -> List[int]:
        return [len(h) for h in self.hands]

    def total_cards(self) -> int:
        return len(self.draw_pile) + len(self.discard_pile) + sum(self.hand_sizes())

    def legal_plays(self, player_index: Optional[int] = None) -> List[int]:
        """Indices the player may play right now.

        After drawing, only the drawn card can be played.
        """
        if player_index is None:
            player_index = self.turn.current
        hand = self.hands[player_index]
        plays = legal_plays(hand, self.current_top_card(), self.turn.wild_color)
        if player_index == self.turn.current and self._drawn_index is not None:
            return [i for i in plays if i == self._drawn_index]
        return plays

    def play(self, index: int, chosen_color: Optional[Color] = None) -> Effect:
        """Play hand[index] for the current player.

        Skip-class cards are honored immediately: the next player draws any
        penalty and loses their turn.
        """
        self._ensure_running()
        player = self.turn.current
        if self._drawn_index is not None and index != self._drawn_index:
            raise IllegalPlay("Only the card just drawn may be played")

        effect = resolve_play(
            index,
            self.hands[player],
            self.discard_pile,
            self.turn,
            chosen_color,
            self.num_players,
        )
        self._drawn_index = None

        desc = f"{self.names[player]} plays {effect.card}"
        if effect.wild_color is not None:
            desc += f" and chooses {effect.wild_color.value}"
        self._record(desc)

        if effect.won:
            self.outcome = Outcome(EndReason.WIN, winner=player)
            self._record(f"{self.names[player]} wins")
            return effect

        self.turn.advance(self.num_players)
        if effect.skip_next:
            self._honor_consequence(effect)
        return effect

    def draw_one(self) -> Card:
        """Current player draws one card.

        If the card cannot be played the turn passes, otherwise the player may
        play it or pass.
        """
        self._ensure_running()
        if self._drawn_index is not None:
            raise IllegalPlay("Already drew a card this turn")

        player = self.turn.current
        hand = self.hands[player]
        self._transfer(1, player)
        card = hand[-1]
        self._record(f"{self.names[player]} draws a card")

        if accepts(self.current_top_card(), card, self.turn.wild_color):
            self._drawn_index = len(hand) - 1
        else:
            self._end_turn()
        return card

    def pass_turn(self) -> None:
        """Keep the drawn card and end the turn."""
        self._ensure_running()
        if self._drawn_index is None:
            raise IllegalPlay("Can only pass after drawing a card")
        self._record(f"{self.names[self.turn.current]} passes")
        self._end_turn()

    def _honor_consequence(self, effect: Effect) -> None:
        victim = self.turn.current
        if effect.draw_penalty:
            self._transfer(effect.draw_penalty, victim)
            self._record(f"{self.names[victim]} draws {effect.draw_penalty} cards")
        else:
            self._record(f"{self.names[victim]} is skipped")
        self.turn.hot = False
        self.turn.advance(self.num_players)

    def _transfer(self, amount: int, player: int) -> None:
        try:
            transfer(amount, self.draw_pile, self.discard_pile, self.hands[player], self.rng)
        except Starvation:
            self.outcome = Outcome(EndReason.STARVATION)
            self._record("Ran out of cards to play with")
            raise

    def _end_turn(self) -> None:
        self._drawn_index = None
        self.turn.hot = False
        self.turn.advance(self.num_players)

    def _ensure_running(self) -> None:
        if self.outcome is not None:
            raise GameOver(f"Game already ended: {self.outcome.reason.value}")

    def _record(self, event: str) -> None:
        self.history.append(event)
        logger.debug(event)


def init_game(
    num_players: int,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    names: Optional[Sequence[str]] = None,
) -> Game:
    """Create a new game: shuffle, deal 7 cards each, seed the discard pile."""
    if rng is None:
        rng = random.Random(seed)
    draw_pile = generate_full_set(rng)
    hands = deal_initial_hands(num_players, draw_pile)
    discard_pile: List[Card] = []
    establish_discard_seed(draw_pile, discard_pile, rng)
    return Game(hands, draw_pile, discard_pile, rng, names=names)


@dataclass
class PlayerView:
    """Filtered game state visible to a single player.

    Contains only that player's hand and public info.
    """

    player_index: int
    my_hand: List[Card]
    top_card: Card
    wild_color: Optional[Color]
    current_player: int
    direction: int
    has_drawn: bool
    player_names: List[str]
    num_cards_per_player: List[int]
    history: List[str] = field(default_factory=list)  # Recent game events

    @classmethod
    def from_game(cls, game: Game, player_index: int) -> "PlayerView":
        """Create a player view from the full game, hiding other players' hands."""
        return cls(
            player_index=player_index,
            my_hand=game.hand(player_index),
            top_card=game.current_top_card(),
            wild_color=game.current_wild_color(),
            current_player=game.current_player_index(),
            direction=game.turn.direction,
            has_drawn=game.has_drawn and player_index == game.current_player_index(),
            player_names=list(game.names),
            num_cards_per_player=game.hand_sizes(),
            history=list(game.history[-10:]),  # Last 10 events
        )
