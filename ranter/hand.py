"""
Hand module for Ranter-Go-Round.
Defines a player's hand, its accept rule and win evaluation.
"""

from enum import Enum
from typing import List, Optional

from ranter.card import Card, OrdinaryCard, SpecialCard, JokerCard
from ranter.rules import MAX_HAND_SUM, FIVE_CARD_COUNT, ACE_LOW_SUM, require


class WinCondition(Enum):
    """Ways a hand can win. Values are the names used in round reports."""
    FIVE_CARDS = "FiveCards"
    TWENTY_FIVE = "TwentyFive"
    SPECIAL = "Special"
    JOKER = "Joker"

    def __str__(self):
        return self.value


class HandStatus:
    """Result of evaluating a hand: either a win or the numeric sum."""

    def __init__(self, win: Optional[WinCondition] = None, points: int = 0):
        self.win = win
        self.points = points

    @classmethod
    def won(cls, condition: WinCondition) -> "HandStatus":
        return cls(win=condition)

    @classmethod
    def no_win(cls, points: int) -> "HandStatus":
        return cls(points=points)

    @property
    def is_win(self) -> bool:
        return self.win is not None

    def total(self) -> int:
        """Return the hand sum. Only defined when the hand has not won."""
        require(not self.is_win, f"total() called on {self!r}")
        return self.points

    def __eq__(self, other):
        if not isinstance(other, HandStatus):
            return NotImplemented
        return self.win == other.win and self.points == other.points

    def __hash__(self):
        return hash((self.win, self.points))

    def __repr__(self):
        if self.is_win:
            return f"Win({self.win.value})"
        return f"NoWin({self.points})"


class Hand:
    """Cards held by one player."""

    def __init__(self, cards: Optional[List[Card]] = None):
        self.cards: List[Card] = list(cards) if cards else []

    def can_accept(self, card: Card) -> bool:
        """
        Check whether the hand may receive a card.

        Special cards and jokers are always accepted. An ordinary card is
        accepted if it keeps the hand sum at or below 25.

        Raises:
            ContractViolation: If the hand is already in a winning state
        """
        if isinstance(card, (SpecialCard, JokerCard)):
            return True
        status = self.evaluate()
        require(not status.is_win, "can_accept() on winning hand")
        return status.points + card.rank <= MAX_HAND_SUM

    def accept(self, card: Card):
        """Add a card to the hand. The card must be acceptable."""
        require(self.can_accept(card), f"hand {self} cannot accept {card}")
        self.cards.append(card)

    def evaluate(self) -> HandStatus:
        """Compute the hand status from its full contents."""
        if any(isinstance(card, JokerCard) for card in self.cards):
            return HandStatus.won(WinCondition.JOKER)
        if any(isinstance(card, SpecialCard) for card in self.cards):
            return HandStatus.won(WinCondition.SPECIAL)

        points = 0
        aces = 0
        for card in self.cards:
            if isinstance(card, OrdinaryCard):
                points += card.rank
                if card.is_ace:
                    aces += 1
            else:
                raise TypeError(f"unknown card type: {card!r}")

        # Five cards win outright, before the sum rule is checked
        if len(self.cards) == FIVE_CARD_COUNT:
            return HandStatus.won(WinCondition.FIVE_CARDS)
        if points == MAX_HAND_SUM or (points == ACE_LOW_SUM and aces >= 1):
            return HandStatus.won(WinCondition.TWENTY_FIVE)
        return HandStatus.no_win(points)

    def clear(self):
        self.cards = []

    def __len__(self):
        return len(self.cards)

    def __str__(self):
        return " ".join(str(card) for card in self.cards) or "-"
