"""Card and Color types for UNO."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from unoengine.engine.errors import InvalidWildColorBinding


class Color(str, Enum):
    """Card colors."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"


class ActionKind(str, Enum):
    """Colored action cards."""

    SKIP = "skip"
    REVERSE = "reverse"
    DRAW_TWO = "draw_two"


class WildKind(str, Enum):
    """Wild cards. They carry no color of their own."""

    CHANGE_COLOR = "wild"
    DRAW_FOUR = "wild_draw_four"


@dataclass(frozen=True)
class NumberCard:
    """A colored card with a rank from 0 to 9."""

    color: Color
    rank: int

    def __post_init__(self) -> None:
        if not isinstance(self.color, Color):
            raise ValueError(f"Invalid card color: {self.color!r}")
        if not 0 <= self.rank <= 9:
            raise ValueError(f"Invalid card rank: {self.rank}")

    def __str__(self) -> str:
        return f"{self.color.value}_{self.rank}"


@dataclass(frozen=True)
class ActionCard:
    """A colored Skip, Reverse or Draw Two card."""

    color: Color
    kind: ActionKind

    def __post_init__(self) -> None:
        if not isinstance(self.color, Color):
            raise ValueError(f"Invalid card color: {self.color!r}")
        if not isinstance(self.kind, ActionKind):
            raise ValueError(f"Invalid action kind: {self.kind!r}")

    def __str__(self) -> str:
        return f"{self.color.value}_{self.kind.value}"


@dataclass(frozen=True)
class WildCard:
    """A Wild or Wild Draw Four card."""

    kind: WildKind

    def __post_init__(self) -> None:
        if not isinstance(self.kind, WildKind):
            raise ValueError(f"Invalid wild kind: {self.kind!r}")

    def __str__(self) -> str:
        return self.kind.value


Card = Union[NumberCard, ActionCard, WildCard]


def is_wild(card: Card) -> bool:
    return isinstance(card, WildCard)


def card_color(card: Card) -> Optional[Color]:
    """Intrinsic color of a card, None for wilds."""
    if isinstance(card, WildCard):
        return None
    return card.color


def accepts(top: Card, candidate: Card, wild_color: Optional[Color] = None) -> bool:
    """Check whether `candidate` may be placed on `top`.

    A wild candidate is always legal. On a wild top, the candidate must match
    the bound wild color, which the caller has to supply.
    """
    if isinstance(candidate, WildCard):
        return True

    if isinstance(top, WildCard):
        if wild_color is None:
            raise InvalidWildColorBinding(f"No color bound for wild top card {top}")
        return card_color(candidate) == wild_color

    if isinstance(top, NumberCard) and isinstance(candidate, NumberCard):
        return top.color == candidate.color or top.rank == candidate.rank

    if isinstance(top, ActionCard) and isinstance(candidate, ActionCard):
        return top.color == candidate.color or top.kind == candidate.kind

    if isinstance(top, (NumberCard, ActionCard)) and isinstance(
        candidate, (NumberCard, ActionCard)
    ):
        # Number on Action or Action on Number
        return card_color(top) == card_color(candidate)

    raise TypeError(f"Cannot compare {top!r} with {candidate!r}")
