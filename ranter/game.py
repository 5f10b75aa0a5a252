"""
Main game module for Ranter-Go-Round.
Owns the deck, discard pile and hands, and resolves one round per step.
"""

import logging
import random
from typing import Iterator, List, Optional

from ranter.card import Card, SpecialCard
from ranter.deck import Deck
from ranter.hand import Hand, WinCondition
from ranter.round import RoundResult
from ranter.rules import require
from ranter.strategy import Strategy, eligible_players

logger = logging.getLogger(__name__)


class RanterGame:
    """Round engine for Ranter-Go-Round."""

    def __init__(self, num_players: int, jokers: int = 0, deck: Optional[Deck] = None):
        require(num_players > 0, f"need at least one player, got {num_players}")

        self.deck = deck if deck is not None else Deck.standard(jokers)
        self.discard = Deck()
        self.players: List[Hand] = [Hand() for _ in range(num_players)]
        self.round = 0

    @property
    def num_players(self) -> int:
        return len(self.players)

    def shuffle(self, rng: random.Random):
        """Shuffle the deck once at game start."""
        self.deck.shuffle(rng)

    def card_count(self) -> int:
        """Total cards across deck, discard pile and hands."""
        return len(self.deck) + len(self.discard) + sum(len(hand) for hand in self.players)

    def draw_card(self, rng: random.Random) -> Optional[Card]:
        """Draw a card, recycling the discard pile once if the deck is empty."""
        card = self.deck.draw()
        if card is not None:
            return card

        self.deck.swap(self.discard)
        self.deck.shuffle(rng)
        logger.info(f"Round {self.round}: reshuffled {len(self.deck)} discarded cards into the deck")
        return self.deck.draw()

    def _choose_receiver(self, giver: int, card: Card, strategy: Strategy) -> Optional[int]:
        """Decide which player receives the card, or None to discard it."""
        if not card.is_red:
            return giver if self.players[giver].can_accept(card) else None

        candidates = eligible_players(self.players, card)
        if not candidates:
            return None
        if len(candidates) == 1:
            return candidates[0]

        choice = strategy.choose(giver, self.players, card)
        require(0 <= choice < self.num_players,
                f"strategy chose player {choice} of {self.num_players}")
        require(self.players[choice].can_accept(card),
                f"strategy chose player {choice} who cannot accept {card}")
        return choice

    def step(self, rng: random.Random, strategy: Strategy) -> Optional[RoundResult]:
        """
        Resolve one round.

        Args:
            rng: Random source used to reshuffle the discard pile
            strategy: Tie-break policy for red cards

        Returns:
            The round result, or None if deck and discard pile are both empty
        """
        card = self.draw_card(rng)
        if card is None:
            logger.info(f"Round {self.round}: deck and discard pile exhausted")
            return None

        giver = self.round % self.num_players
        receiver = self._choose_receiver(giver, card, strategy)

        win = None
        hand_total = None
        if receiver is None:
            self.discard.push(card)
        elif isinstance(card, SpecialCard):
            # The special card wins on arrival and is never held
            win = WinCondition.SPECIAL
            self.discard.push(card)
        else:
            hand = self.players[receiver]
            hand.accept(card)
            status = hand.evaluate()
            if status.is_win:
                self.discard.take(hand)
                win = status.win
            else:
                hand_total = status.total()

        self.round += 1
        result = RoundResult(giver=giver, receiver=receiver, card=card,
                             win=win, hand_total=hand_total)
        logger.debug(f"Round {self.round - 1}: {result}")
        return result

    def play(self, rng: random.Random, strategy: Strategy, rounds: int) -> Iterator[RoundResult]:
        """Yield up to `rounds` results, stopping early if the cards run out."""
        for _ in range(rounds):
            result = self.step(rng, strategy)
            if result is None:
                return
            yield result

    def __str__(self):
        hands = ", ".join(f"{i}: [{hand}]" for i, hand in enumerate(self.players))
        return f"Round {self.round} - deck {len(self.deck)}, discard {len(self.discard)} - {hands}"
