"""Table state produced by a deal."""

from dataclasses import dataclass

from core.cards import Card


@dataclass(frozen=True)
class GameState:
    """
    Snapshot of the table after a deal.

    Attributes:
        deck: Cards left to draw, in shuffled order
        dealer: Dealer's hand
        player: Player's hand
    """

    deck: tuple[Card, ...]
    dealer: tuple[Card, ...]
    player: tuple[Card, ...]

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards left in the deck."""
        return len(self.deck)
