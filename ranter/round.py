"""
Round module for Ranter-Go-Round.
Holds the record produced by each resolved round and its report line.
"""

from dataclasses import dataclass
from typing import Optional

from ranter.card import Card
from ranter.hand import WinCondition


@dataclass(frozen=True)
class RoundResult:
    """Outcome of one round. Only used for reporting."""

    giver: int
    receiver: Optional[int]
    card: Card
    win: Optional[WinCondition] = None
    # Receiving hand's sum after the card was added, when nobody won
    hand_total: Optional[int] = None

    @property
    def discarded(self) -> bool:
        return self.receiver is None

    def describe(self) -> str:
        """Render the round as a single report line."""
        if self.receiver is None:
            return f"{self.giver} {self.card} to nobody"
        if self.win is not None:
            return f"{self.giver} {self.card} to {self.receiver} => {self.win.value}"
        return f"{self.giver} {self.card} to {self.receiver} => {self.hand_total}"

    def __str__(self):
        return self.describe()
