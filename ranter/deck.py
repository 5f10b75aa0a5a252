"""
Deck module for Ranter-Go-Round.
Handles deck creation, shuffling, drawing and collecting discarded hands.
"""

import random
from typing import List, Optional, TYPE_CHECKING

from ranter.card import Card, create_deck

if TYPE_CHECKING:
    from ranter.hand import Hand


class Deck:
    """An ordered pile of cards. The top of the deck is the end of the list."""

    def __init__(self, cards: Optional[List[Card]] = None):
        self.cards: List[Card] = list(cards) if cards else []

    @classmethod
    def standard(cls, jokers: int = 0) -> "Deck":
        """Build an unshuffled full deck with the given number of jokers."""
        return cls(create_deck(jokers))

    def shuffle(self, rng: random.Random):
        """Shuffle the deck in place using the supplied random source."""
        rng.shuffle(self.cards)

    def draw(self) -> Optional[Card]:
        """Remove and return the top card, or None if the deck is empty."""
        if not self.cards:
            return None
        return self.cards.pop()

    def push(self, card: Card):
        """Put a card on top of the deck."""
        self.cards.append(card)

    def take(self, hand: "Hand"):
        """Move every card of a hand onto this deck, leaving the hand empty."""
        self.cards.extend(hand.cards)
        hand.clear()

    def swap(self, other: "Deck"):
        """Exchange contents with another deck."""
        self.cards, other.cards = other.cards, self.cards

    def cards_remaining(self) -> int:
        """Return number of cards remaining in deck."""
        return len(self.cards)

    def is_empty(self) -> bool:
        """Check if deck is empty."""
        return len(self.cards) == 0

    def __len__(self):
        return len(self.cards)

    def __iter__(self):
        return iter(self.cards)
