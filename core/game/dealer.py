"""Shuffle and deal a new game."""

from random import Random
from typing import Callable, Sequence

from config import config
from core.cards import Card, fresh_deck
from core.game.state import GameState
from core.logging_utils import get_logger

logger = get_logger(__name__)

Shuffle = Callable[[Sequence[Card]], Sequence[Card]]

_default_rng: Random | None = None


def get_default_rng() -> Random:
    """Get the process-wide generator, seeded once from BLACKJACK_SEED."""
    global _default_rng
    if _default_rng is None:
        _default_rng = Random(config.game.seed)
    return _default_rng


def identity_shuffle(cards: Sequence[Card]) -> Sequence[Card]:
    """Leave the cards in their current order."""
    return cards


def random_shuffle(rng: Random | None = None) -> Shuffle:
    """
    Build a fair shuffle backed by a random number generator.

    Args:
        rng: Generator to draw from; defaults to the shared generator
            from get_default_rng()

    Returns:
        A function returning a new random permutation of its input
    """
    rng = rng or get_default_rng()

    def shuffle(cards: Sequence[Card]) -> Sequence[Card]:
        return rng.sample(list(cards), len(cards))

    return shuffle


def deal(shuffle: Shuffle | None = None) -> GameState:
    """
    Start a new game.

    Four cards come off the top of the shuffled deck. The player gets the
    1st and 3rd, the dealer the 2nd and 4th.

    Args:
        shuffle: Permutation applied to the fresh deck (random by default)

    Raises:
        ValueError: If the shuffled deck holds fewer than four cards
    """
    shuffle = shuffle or random_shuffle()
    deck = list(shuffle(fresh_deck()))
    if len(deck) < 4:
        raise ValueError(f"Cannot deal from a deck of {len(deck)} cards")

    a, b, c, d, *rest = deck
    state = GameState(deck=tuple(rest), dealer=(b, d), player=(a, c))
    logger.debug(
        "dealt player=%s dealer=%s, %d cards left",
        " ".join(map(str, state.player)),
        " ".join(map(str, state.dealer)),
        state.cards_remaining,
    )
    return state
