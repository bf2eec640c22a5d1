"""Text rendering of the table using Unicode playing-card glyphs."""

from typing import Sequence

from core.cards import Card, Rank, Suit
from core.game.state import GameState
from core.hand import hand_value

FACE_DOWN = "\U0001F0A0"  # 🂠

# Spades row of the Playing Cards block; U+1F0AC (knight) is skipped
CARD_FACES: dict[Rank, str] = {
    Rank.TWO: "\U0001F0A2",
    Rank.THREE: "\U0001F0A3",
    Rank.FOUR: "\U0001F0A4",
    Rank.FIVE: "\U0001F0A5",
    Rank.SIX: "\U0001F0A6",
    Rank.SEVEN: "\U0001F0A7",
    Rank.EIGHT: "\U0001F0A8",
    Rank.NINE: "\U0001F0A9",
    Rank.TEN: "\U0001F0AA",
    Rank.JACK: "\U0001F0AB",
    Rank.QUEEN: "\U0001F0AD",
    Rank.KING: "\U0001F0AE",
    Rank.ACE: "\U0001F0A1",
}

SUIT_OFFSETS: dict[Suit, int] = {
    Suit.SPADES: 0,
    Suit.HEARTS: 16,
    Suit.DIAMONDS: 32,
    Suit.CLUBS: 48,
}


def card_glyph(card: Card) -> str:
    """Return the single-character glyph for a face-up card."""
    return chr(ord(CARD_FACES[card.rank]) + SUIT_OFFSETS[card.suit])


def render_card(card: Card | None = None) -> str:
    """Render a single card, or the face-down back when no card is given."""
    if card is None:
        return f"{FACE_DOWN} "
    return f"{card_glyph(card)} "


def render_dealer_hand(hand: Sequence[Card]) -> str:
    """Render the dealer's hand with the hole card face down."""
    return render_card() + "".join(render_card(card) for card in hand[1:])


def render_player_hand(hand: Sequence[Card]) -> str:
    """Render the player's hand followed by its value."""
    cards = "".join(render_card(card) for card in hand)
    return f"{cards} {hand_value(hand).label()}"


def render(state: GameState) -> str:
    """Render the game state neatly."""
    return (
        f"Dealer: {render_dealer_hand(state.dealer)}\n"
        f"Player: {render_player_hand(state.player)}"
    )
