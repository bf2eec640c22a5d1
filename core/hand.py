"""Hand evaluation for blackjack."""

from enum import Enum
from typing import Any, NamedTuple, Sequence

from core.cards import Card, Rank


class UnknownRankError(RuntimeError):
    """Raised when a card with a rank outside Rank reaches valuation.

    Cards built through the card model can never trigger this.
    """

    def __init__(self, card: Any) -> None:
        super().__init__(f"Unknown rank: {getattr(card, 'rank', None)!r}")
        self.card = card


class Qualifier(Enum):
    """How a hand total should be read."""

    SOFT = "soft"
    HARD = "hard"
    BUST = "bust"
    BLACKJACK = "blackjack"

    def __str__(self) -> str:
        return self.value


class HandValue(NamedTuple):
    """A hand total and its qualifier (None for a plain total)."""

    total: int
    qualifier: Qualifier | None = None

    @property
    def is_bust(self) -> bool:
        return self.qualifier == Qualifier.BUST

    @property
    def is_blackjack(self) -> bool:
        return self.qualifier == Qualifier.BLACKJACK

    @property
    def is_soft(self) -> bool:
        return self.qualifier == Qualifier.SOFT

    @property
    def is_hard(self) -> bool:
        return self.qualifier == Qualifier.HARD

    def label(self) -> str:
        """Player-facing annotation: 'Blackjack!', 'soft 16' or '15'."""
        if self.qualifier == Qualifier.BLACKJACK:
            return "Blackjack!"
        if self.qualifier is not None:
            return f"{self.qualifier} {self.total}"
        return str(self.total)


def card_value(card: Card) -> int:
    """
    How much is a card worth?

    Aces always count 11 here; hand_value decides when one drops to 1.

    Raises:
        UnknownRankError: If the card's rank is not a Rank
    """
    rank = getattr(card, "rank", None)
    if not isinstance(rank, Rank):
        raise UnknownRankError(card)
    if rank.is_number:
        return rank.value
    if rank.is_face:
        return 10
    if rank.is_ace:
        return 11
    raise UnknownRankError(card)


def hand_value(hand: Sequence[Card]) -> HandValue:
    """
    How much is a hand worth?

    Every ace counts 11 first. A bust hand holding an ace is corrected once
    by counting a single ace as 1, which makes it hard. The correction is
    never repeated: A-A-A evaluates to (23, hard).

    Returns:
        HandValue(total, qualifier)
    """
    total = sum(card_value(card) for card in hand)
    has_ace = any(card.is_ace for card in hand)

    if total > 21:
        qualifier = Qualifier.BUST
    elif total == 21 and len(hand) == 2:
        qualifier = Qualifier.BLACKJACK
    elif has_ace:
        qualifier = Qualifier.SOFT
    else:
        qualifier = None

    # Bust with an ace? Use the lower value instead
    if has_ace and qualifier == Qualifier.BUST:
        return HandValue(total - 10, Qualifier.HARD)
    return HandValue(total, qualifier)
