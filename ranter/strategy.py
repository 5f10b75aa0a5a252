"""
Tie-break strategies for Ranter-Go-Round.
A strategy picks the receiver when several hands can accept a red card.
"""

import random
from abc import ABC, abstractmethod
from typing import List

from ranter.card import Card
from ranter.hand import Hand
from ranter.rules import DEFAULT_STRATEGY_SEED


def eligible_players(hands: List[Hand], card: Card) -> List[int]:
    """Return the indices of hands that can accept the card."""
    return [i for i, hand in enumerate(hands) if hand.can_accept(card)]


class Strategy(ABC):
    """Abstract interface that all tie-break policies must implement."""

    @abstractmethod
    def choose(self, giver: int, hands: List[Hand], card: Card) -> int:
        """
        Choose which player receives a card.

        Only called when two or more hands can accept the card.

        Args:
            giver: Index of the player giving this round
            hands: All hands in seat order
            card: The card being routed

        Returns:
            Index of a hand that can accept the card
        """
        pass


class RandomStrategy(Strategy):
    """Picks uniformly among the eligible players using its own random source."""

    def __init__(self, seed: int = DEFAULT_STRATEGY_SEED):
        self.rng = random.Random(seed)

    def choose(self, giver: int, hands: List[Hand], card: Card) -> int:
        candidates = eligible_players(hands, card)
        if not candidates:
            raise ValueError(f"No player can accept {card}")
        return self.rng.choice(candidates)


class LowestSumStrategy(Strategy):
    """Gives the card to the eligible hand with the smallest sum.

    Ties go to the first eligible seat after the giver.
    """

    def choose(self, giver: int, hands: List[Hand], card: Card) -> int:
        candidates = eligible_players(hands, card)
        if not candidates:
            raise ValueError(f"No player can accept {card}")
        num_players = len(hands)
        return min(
            candidates,
            key=lambda i: (hands[i].evaluate().total(), (i - giver - 1) % num_players),
        )


STRATEGIES = {
    'random': RandomStrategy,
    'lowest': LowestSumStrategy,
}


def create_strategy(name: str, seed: int = DEFAULT_STRATEGY_SEED) -> Strategy:
    """Create a strategy by its command-line name."""
    if name not in STRATEGIES:
        raise ValueError(f"Unknown strategy: {name}. Available: {list(STRATEGIES.keys())}")
    if name == 'random':
        return RandomStrategy(seed)
    return STRATEGIES[name]()
