"""Deck creation, dealing and draw/discard pile recycling."""

import logging
import random
from typing import List

from unoengine.engine.card import (
    ActionCard,
    ActionKind,
    Card,
    Color,
    NumberCard,
    WildCard,
    WildKind,
    is_wild,
)
from unoengine.engine.errors import DeckExhausted, InsufficientCards, Starvation

logger = logging.getLogger(__name__)

INITIAL_HAND_SIZE = 7
DISCARD_SEED_ATTEMPTS = 1000

# Copies per color. Rank 0 appears once, every other rank twice.
NUMBER_COPIES = {0: 1, **{rank: 2 for rank in range(1, 10)}}
ACTION_COPIES = 2
WILD_COPIES = 4

FULL_SET_SIZE = (
    len(Color) * (sum(NUMBER_COPIES.values()) + ACTION_COPIES * len(ActionKind))
    + WILD_COPIES * len(WildKind)
)


def build_card_set() -> List[Card]:
    """Create the unshuffled 108-card set.

    - 4 colors x (one 0, two each of 1-9): 76 cards
    - 4 colors x two each of Skip, Reverse, Draw Two: 24 cards
    - 4 Wild, 4 Wild Draw Four: 8 cards
    """
    cards: List[Card] = []

    for color in Color:
        for rank, copies in NUMBER_COPIES.items():
            cards.extend(NumberCard(color=color, rank=rank) for _ in range(copies))
        for kind in ActionKind:
            cards.extend(ActionCard(color=color, kind=kind) for _ in range(ACTION_COPIES))

    for kind in WildKind:
        cards.extend(WildCard(kind=kind) for _ in range(WILD_COPIES))

    return cards


def generate_full_set(rng: random.Random) -> List[Card]:
    """Create the full card set, shuffled with `rng`.

    The end of the returned list is the next card to be dealt.
    """
    cards = build_card_set()
    rng.shuffle(cards)
    return cards


def deal_initial_hands(
    num_players: int,
    draw_pile: List[Card],
    hand_size: int = INITIAL_HAND_SIZE,
) -> List[List[Card]]:
    """Deal `hand_size` cards to each player, one at a time round the table."""
    if num_players < 1:
        raise ValueError(f"Need at least one player, got {num_players}")
    needed = num_players * hand_size
    if len(draw_pile) < needed:
        raise InsufficientCards(
            f"Dealing {num_players} hands of {hand_size} needs {needed} cards, "
            f"draw pile has {len(draw_pile)}"
        )

    hands: List[List[Card]] = [[] for _ in range(num_players)]
    for _ in range(hand_size):
        for hand in hands:
            hand.append(draw_pile.pop())
    return hands


def establish_discard_seed(
    draw_pile: List[Card],
    discard_pile: List[Card],
    rng: random.Random,
    max_attempts: int = DISCARD_SEED_ATTEMPTS,
) -> Card:
    """Move the first non-wild card of the draw pile onto the discard pile.

    The draw pile is reshuffled while its next card is wild, so the game never
    starts with an unbound wild color.
    """
    if not draw_pile:
        raise DeckExhausted("Draw pile is empty, cannot seed the discard pile")

    for attempt in range(max_attempts):
        if not is_wild(draw_pile[-1]):
            card = draw_pile.pop()
            discard_pile.append(card)
            if attempt:
                logger.debug("Discard seeded with %s after %d reshuffles", card, attempt)
            return card
        rng.shuffle(draw_pile)

    raise DeckExhausted(f"No non-wild card surfaced after {max_attempts} reshuffles")


def recycle_discard_pile(
    draw_pile: List[Card],
    discard_pile: List[Card],
    rng: random.Random,
) -> int:
    """Move every discard card except the top into the draw pile and shuffle.

    Returns the number of cards moved.
    """
    recyclable = discard_pile[:-1]
    if not recyclable:
        return 0
    del discard_pile[:-1]
    draw_pile.extend(recyclable)
    rng.shuffle(draw_pile)
    logger.debug("Recycled %d discard cards into the draw pile", len(recyclable))
    return len(recyclable)


def cards_available(draw_pile: List[Card], discard_pile: List[Card]) -> int:
    """Cards that can still be drawn, counting those waiting to be recycled."""
    return len(draw_pile) + max(len(discard_pile) - 1, 0)


def transfer(
    amount: int,
    draw_pile: List[Card],
    discard_pile: List[Card],
    hand: List[Card],
    rng: random.Random,
) -> None:
    """Move `amount` cards from the draw pile into `hand`.

    When the draw pile runs out, the discard pile (minus its top card) is
    shuffled back in. Raises Starvation, without moving any card, when there
    are not enough cards left anywhere. Because of that up-front check a
    multi-card draw can starve while the discard pile still holds recyclable
    cards; a single-card draw starves only when the draw pile is empty and
    the discard pile is down to its top card.
    """
    if amount < 0:
        raise ValueError(f"Cannot draw a negative number of cards: {amount}")
    available = cards_available(draw_pile, discard_pile)
    if amount > available:
        logger.warning("Starvation: %d cards needed, %d available", amount, available)
        raise Starvation(f"Need {amount} cards but only {available} remain")

    for _ in range(amount):
        if not draw_pile:
            recycle_discard_pile(draw_pile, discard_pile, rng)
        hand.append(draw_pile.pop())
