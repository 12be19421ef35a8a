"""Errors raised by the UNO engine."""


class UnoError(Exception):
    """Base class for engine errors."""


class IllegalPlay(UnoError, ValueError):
    """The chosen card or move is not allowed. Re-ask the player."""


class Starvation(UnoError):
    """No cards left anywhere to satisfy a required draw. Ends the game with no winner."""


class DeckExhausted(UnoError):
    """The deck could not be set up for a game."""


class InsufficientCards(DeckExhausted):
    """Not enough cards in the draw pile to deal every hand."""


class InvalidWildColorBinding(UnoError, RuntimeError):
    """A card was matched against a wild top card with no color bound."""


class GameOver(UnoError):
    """The game has already ended."""
