"""Card model and deck builder - immutable card representations."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, TypeVar

E = TypeVar("E", bound=Enum)


class InvalidCardError(ValueError):
    """Raised when a card is built from a rank or suit outside the deck."""


class Suit(Enum):
    """Card suits, in deck-building order."""

    HEARTS = "H"
    CLUBS = "C"
    DIAMONDS = "D"
    SPADES = "S"

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks, in deck-building order.

    Number ranks carry their face value; face ranks carry a symbolic token.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    def __str__(self) -> str:
        return str(self.value)

    @property
    def is_number(self) -> bool:
        """Check if this rank is a number card (2-10)."""
        return isinstance(self.value, int)

    @property
    def is_face(self) -> bool:
        """Check if this rank is a Jack, Queen or King."""
        return self in (Rank.JACK, Rank.QUEEN, Rank.KING)

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        if not isinstance(self.rank, Rank):
            raise InvalidCardError(f"Invalid rank: {self.rank!r}")
        if not isinstance(self.suit, Suit):
            raise InvalidCardError(f"Invalid suit: {self.suit!r}")

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', '10d', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise InvalidCardError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {str(rank.value): rank for rank in Rank}
        rank_map["T"] = Rank.TEN

        suit_map = {suit.value: suit for suit in Suit}
        suit_map.update({str(suit): suit for suit in Suit})

        if rank_str not in rank_map:
            raise InvalidCardError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise InvalidCardError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


def _lookup(enum_cls: type[E], token: object, kind: str) -> E:
    if isinstance(token, enum_cls):
        return token
    # exact types only: 10.0 == 10 and True == 1 would otherwise match
    if type(token) not in (int, str):
        raise InvalidCardError(f"Invalid {kind}: {token!r}")
    try:
        return enum_cls(token)
    except ValueError:
        raise InvalidCardError(f"Invalid {kind}: {token!r}") from None


def make_card(rank: Rank | int | str, suit: Suit | str) -> Card:
    """
    Build a validated card.

    Args:
        rank: A Rank, or its token (2-10, "J", "Q", "K", "A")
        suit: A Suit, or its token ("H", "C", "D", "S")

    Raises:
        InvalidCardError: If either value is outside the deck
    """
    return Card(_lookup(Rank, rank, "rank"), _lookup(Suit, suit, "suit"))


def make_cards(pairs: Iterable[tuple[Rank | int | str, Suit | str]]) -> list[Card]:
    """Build a list of cards from (rank, suit) pairs, in order.

    Usage: make_cards([(2, "H"), (2, "C"), (3, "S")])
    """
    return [make_card(rank, suit) for rank, suit in pairs]


def fresh_deck() -> list[Card]:
    """Return all 52 cards in order: suits H, C, D, S, each 2 through Ace."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]
