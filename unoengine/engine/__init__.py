"""Game engine for UNO."""

from unoengine.engine.card import (
    ActionCard,
    ActionKind,
    Card,
    Color,
    NumberCard,
    WildCard,
    WildKind,
    accepts,
    card_color,
    is_wild,
)
from unoengine.engine.deck import (
    build_card_set,
    deal_initial_hands,
    establish_discard_seed,
    generate_full_set,
    recycle_discard_pile,
    transfer,
)
from unoengine.engine.errors import (
    DeckExhausted,
    GameOver,
    IllegalPlay,
    InsufficientCards,
    InvalidWildColorBinding,
    Starvation,
    UnoError,
)
from unoengine.engine.game_state import (
    EndReason,
    Game,
    Outcome,
    PlayerView,
    TurnState,
    init_game,
)
from unoengine.engine.rules import (
    Action,
    DrawCard,
    Effect,
    PassTurn,
    PlayCard,
    get_legal_actions,
    legal_plays,
    resolve_play,
)

__all__ = [
    "ActionCard",
    "ActionKind",
    "Card",
    "Color",
    "NumberCard",
    "WildCard",
    "WildKind",
    "accepts",
    "card_color",
    "is_wild",
    "build_card_set",
    "deal_initial_hands",
    "establish_discard_seed",
    "generate_full_set",
    "recycle_discard_pile",
    "transfer",
    "DeckExhausted",
    "GameOver",
    "IllegalPlay",
    "InsufficientCards",
    "InvalidWildColorBinding",
    "Starvation",
    "UnoError",
    "EndReason",
    "Game",
    "Outcome",
    "PlayerView",
    "TurnState",
    "init_game",
    "Action",
    "DrawCard",
    "Effect",
    "PassTurn",
    "PlayCard",
    "get_legal_actions",
    "legal_plays",
    "resolve_play",
]
