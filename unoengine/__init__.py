"""UNO game engine with a terminal player and bot opponents."""

__version__ = "0.1.0"
