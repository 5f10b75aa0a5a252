"""
Card module for Ranter-Go-Round.
Defines Suit and the three card variants: ordinary, special and joker.
"""

from enum import Enum
from typing import List

from ranter.rules import MIN_RANK, MAX_RANK, require


class Suit(Enum):
    """Card suits in deck generation order."""
    SPADES = "♠"
    HEARTS = "♥"
    CLUBS = "♣"
    DIAMONDS = "♦"

    @property
    def is_red(self) -> bool:
        return self in (Suit.HEARTS, Suit.DIAMONDS)

    def __str__(self):
        return self.value


RANK_TOKENS = {1: "A", 10: "T", 11: "J", 12: "Q", 13: "K"}

# (suit, rank) pairs that become SpecialCard
SPECIAL_CARDS = {(Suit.SPADES, 11), (Suit.DIAMONDS, 12)}


class Card:
    """Base class for the closed set of card variants."""

    __slots__ = ()

    @property
    def is_red(self) -> bool:
        """Routing color. Only ordinary cards can be red."""
        return False

    def _key(self) -> tuple:
        raise NotImplementedError

    def __eq__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self):
        return hash((type(self).__name__,) + self._key())

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")


class OrdinaryCard(Card):
    """A ranked card with a suit."""

    __slots__ = ("suit", "rank")

    def __init__(self, suit: Suit, rank: int):
        object.__setattr__(self, "suit", suit)
        object.__setattr__(self, "rank", rank)

    @property
    def is_red(self) -> bool:
        return self.suit.is_red

    @property
    def is_ace(self) -> bool:
        return self.rank == MIN_RANK

    def _key(self) -> tuple:
        return (self.suit, self.rank)

    def __str__(self):
        return f"{self.suit}{RANK_TOKENS.get(self.rank, self.rank)}"

    def __repr__(self):
        return f"OrdinaryCard({self.suit.name}, {self.rank})"


class SpecialCard(Card):
    """One of the two wild cards: the jack of spades or the queen of diamonds."""

    __slots__ = ("suit",)

    def __init__(self, suit: Suit):
        object.__setattr__(self, "suit", suit)

    def _key(self) -> tuple:
        return (self.suit,)

    def __str__(self):
        letter = "J" if self.suit == Suit.SPADES else "Q"
        return f"{self.suit}{letter}"

    def __repr__(self):
        return f"SpecialCard({self.suit.name})"


class JokerCard(Card):
    """A supplementary card identified only by its index."""

    __slots__ = ("index",)

    def __init__(self, index: int):
        object.__setattr__(self, "index", index)

    def _key(self) -> tuple:
        return (self.index,)

    def __str__(self):
        return f"J{self.index}"

    def __repr__(self):
        return f"JokerCard({self.index})"


def make_card(suit: Suit, rank: int) -> Card:
    """
    Build the card for a suit and rank.

    Args:
        suit: Card suit
        rank: Rank between 1 (ace) and 13 (king)

    Returns:
        SpecialCard for the two special combinations, OrdinaryCard otherwise

    Raises:
        ContractViolation: If rank is out of range
    """
    require(MIN_RANK <= rank <= MAX_RANK, f"rank {rank} outside [{MIN_RANK}, {MAX_RANK}]")
    if (suit, rank) in SPECIAL_CARDS:
        return SpecialCard(suit)
    return OrdinaryCard(suit, rank)


def create_deck(jokers: int = 0) -> List[Card]:
    """Create the 52 standard cards followed by the requested jokers."""
    require(jokers >= 0, f"joker count must be non-negative, got {jokers}")
    deck = []
    for suit in Suit:
        for rank in range(MIN_RANK, MAX_RANK + 1):
            deck.append(make_card(suit, rank))
    for index in range(jokers):
        deck.append(JokerCard(index))
    return deck
