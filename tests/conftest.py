"""Pytest fixtures for blackjack core tests."""

import pytest
from random import Random

from core.cards import Card, Rank, Suit, fresh_deck, make_cards
from core.game import GameState, random_shuffle


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def seeded_shuffle(rng):
    """A fair shuffle with a fixed seed."""
    return random_shuffle(rng)


@pytest.fixture
def deck():
    """A fresh, ordered deck."""
    return fresh_deck()


@pytest.fixture
def stacked_deck():
    """A short deck arranged so the deal is known in advance."""
    return make_cards([("A", "H"), (7, "S"), ("Q", "H"), (6, "D"), ("K", "S"), ("J", "C")])


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand (A-K)."""
    return [Card(Rank.ACE, Suit.SPADES), Card(Rank.KING, Suit.HEARTS)]


@pytest.fixture
def soft_16_hand():
    """A soft 16 hand (A-5)."""
    return [Card(Rank.ACE, Suit.SPADES), Card(Rank.FIVE, Suit.HEARTS)]


@pytest.fixture
def bust_hand():
    """A busted hand with no ace (10-6-K)."""
    return [
        Card(Rank.TEN, Suit.SPADES),
        Card(Rank.SIX, Suit.HEARTS),
        Card(Rank.KING, Suit.CLUBS),
    ]


@pytest.fixture
def table():
    """A mid-game table with a blackjack for the player."""
    return GameState(
        deck=tuple(make_cards([("K", "S"), (6, "D")])),
        dealer=tuple(make_cards([(7, "S"), ("J", "C")])),
        player=tuple(make_cards([("A", "H"), (10, "D")])),
    )
