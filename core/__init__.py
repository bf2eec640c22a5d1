"""Core blackjack engine - 100% UI-agnostic."""

from core.cards import (
    Card,
    InvalidCardError,
    Rank,
    Suit,
    fresh_deck,
    make_card,
    make_cards,
)
from core.hand import HandValue, Qualifier, UnknownRankError, card_value, hand_value
from core.game import GameState, deal, identity_shuffle, random_shuffle
from core.render import render

__all__ = [
    "Card",
    "InvalidCardError",
    "Rank",
    "Suit",
    "fresh_deck",
    "make_card",
    "make_cards",
    "HandValue",
    "Qualifier",
    "UnknownRankError",
    "card_value",
    "hand_value",
    "GameState",
    "deal",
    "identity_shuffle",
    "random_shuffle",
    "render",
]
