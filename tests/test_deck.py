"""Unit tests for deck generation, dealing and recycling."""

import random
from collections import Counter

import pytest

from unoengine.engine import (
    ActionCard,
    ActionKind,
    Color,
    DeckExhausted,
    InsufficientCards,
    NumberCard,
    Starvation,
    WildCard,
    WildKind,
    build_card_set,
    deal_initial_hands,
    establish_discard_seed,
    generate_full_set,
    is_wild,
    recycle_discard_pile,
    transfer,
)
from unoengine.engine.deck import FULL_SET_SIZE, INITIAL_HAND_SIZE


@pytest.mark.parametrize("seed", [0, 1, 42, 12345])
def test_full_set_composition(seed: int) -> None:
    cards = generate_full_set(random.Random(seed))
    counts = Counter(cards)
    assert len(cards) == FULL_SET_SIZE == 108

    for color in Color:
        assert counts[NumberCard(color, 0)] == 1
        for rank in range(1, 10):
            assert counts[NumberCard(color, rank)] == 2
        for kind in ActionKind:
            assert counts[ActionCard(color, kind)] == 2
    for kind in WildKind:
        assert counts[WildCard(kind)] == 4

    assert sum(isinstance(c, NumberCard) for c in cards) == 76
    assert sum(isinstance(c, ActionCard) for c in cards) == 24
    assert sum(is_wild(c) for c in cards) == 8


def test_generate_full_set_reproducible() -> None:
    d1 = generate_full_set(random.Random(123))
    d2 = generate_full_set(random.Random(123))
    assert d1 == d2
    assert d1 != generate_full_set(random.Random(124))
    assert sorted(map(str, d1)) == sorted(map(str, build_card_set()))


def test_deal_initial_hands_from_end_of_pile() -> None:
    pile = build_card_set()
    expected_first = pile[-1]
    hands = deal_initial_hands(3, pile)
    assert [len(h) for h in hands] == [INITIAL_HAND_SIZE] * 3
    assert hands[0][0] is expected_first
    assert len(pile) == 108 - 21


def test_deal_initial_hands_ten_players() -> None:
    pile = generate_full_set(random.Random(0))
    hands = deal_initial_hands(10, pile)
    assert len(hands) == 10
    assert len(pile) == 108 - 70


def test_deal_initial_hands_insufficient_cards() -> None:
    pile = build_card_set()[:13]
    with pytest.raises(InsufficientCards):
        deal_initial_hands(2, pile)
    assert len(pile) == 13


def test_deal_initial_hands_needs_players() -> None:
    with pytest.raises(ValueError):
        deal_initial_hands(0, build_card_set())


def test_establish_discard_seed_skips_wilds() -> None:
    number = NumberCard(Color.GREEN, 4)
    wild = WildCard(WildKind.CHANGE_COLOR)
    pile = [number, wild, wild, wild]
    discard = []
    card = establish_discard_seed(pile, discard, random.Random(3))
    assert card == number
    assert discard == [number]
    assert len(pile) == 3 and all(is_wild(c) for c in pile)


def test_establish_discard_seed_takes_front_card() -> None:
    pile = build_card_set()  # ends with wilds
    pile.append(NumberCard(Color.RED, 8))
    discard = []
    assert establish_discard_seed(pile, discard, random.Random(0)) == NumberCard(Color.RED, 8)
    assert len(pile) == 108


def test_establish_discard_seed_all_wild_pile() -> None:
    pile = [WildCard(WildKind.DRAW_FOUR)] * 5
    with pytest.raises(DeckExhausted):
        establish_discard_seed(pile, [], random.Random(0), max_attempts=10)


def test_establish_discard_seed_empty_pile() -> None:
    with pytest.raises(DeckExhausted):
        establish_discard_seed([], [], random.Random(0))


def test_recycle_keeps_top_card() -> None:
    top = NumberCard(Color.RED, 9)
    discard = [NumberCard(Color.BLUE, i) for i in range(1, 4)] + [top]
    draw = []
    assert recycle_discard_pile(draw, discard, random.Random(0)) == 3
    assert discard == [top]
    assert sorted(c.rank for c in draw) == [1, 2, 3]
    assert recycle_discard_pile(draw, discard, random.Random(0)) == 0


def test_transfer_recycles_mid_draw() -> None:
    top = NumberCard(Color.RED, 9)
    last_draw = NumberCard(Color.YELLOW, 0)
    recyclable = [NumberCard(Color.BLUE, i) for i in range(1, 6)]
    draw = [last_draw]
    discard = recyclable + [top]
    hand = []

    transfer(3, draw, discard, hand, random.Random(7))

    assert len(hand) == 3
    assert hand[0] == last_draw
    assert all(c in recyclable for c in hand[1:])
    assert discard == [top]
    assert len(draw) == 3
    assert sorted(hand[1:] + draw, key=str) == sorted(recyclable, key=str)


def test_transfer_starves_with_only_top_card() -> None:
    top = NumberCard(Color.RED, 9)
    discard = [top]
    hand = [NumberCard(Color.BLUE, 2)]
    for amount in (1, 2, 4):
        with pytest.raises(Starvation):
            transfer(amount, [], discard, hand, random.Random(0))
    assert discard == [top]
    assert hand == [NumberCard(Color.BLUE, 2)]


@pytest.mark.parametrize("discard_size", range(2, 12))
def test_transfer_never_starves_with_recyclable_cards(discard_size: int) -> None:
    discard = [NumberCard(Color.GREEN, i % 10) for i in range(discard_size)]
    hand = []
    transfer(1, [], discard, hand, random.Random(discard_size))
    assert len(hand) == 1
    assert len(discard) == 1


def test_transfer_is_atomic_when_short() -> None:
    draw = [NumberCard(Color.RED, 1)]
    discard = [NumberCard(Color.RED, 2), NumberCard(Color.RED, 3)]
    hand = []
    with pytest.raises(Starvation):
        transfer(3, draw, discard, hand, random.Random(0))
    assert hand == []
    assert len(draw) == 1 and len(discard) == 2


def test_transfer_zero_is_noop() -> None:
    draw = [NumberCard(Color.RED, 1)]
    hand = []
    transfer(0, draw, [NumberCard(Color.RED, 2)], hand, random.Random(0))
    assert hand == [] and len(draw) == 1


def test_transfer_rejects_negative_amount() -> None:
    with pytest.raises(ValueError):
        transfer(-1, [], [NumberCard(Color.RED, 2)], [], random.Random(0))


def test_multi_card_draw_can_starve_with_recyclable_cards() -> None:
    discard = [NumberCard(Color.RED, 2), NumberCard(Color.RED, 3), NumberCard(Color.RED, 4)]
    with pytest.raises(Starvation):
        transfer(3, [], discard, [], random.Random(0))
    hand = []
    transfer(2, [], discard, hand, random.Random(0))
    assert len(hand) == 2
