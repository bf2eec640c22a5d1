"""Dealing and table state."""

from core.game.state import GameState
from core.game.dealer import Shuffle, deal, identity_shuffle, random_shuffle

__all__ = [
    "GameState",
    "Shuffle",
    "deal",
    "identity_shuffle",
    "random_shuffle",
]
