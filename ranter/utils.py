"""
Utility module for Ranter-Go-Round.
Contains logging and formatting helpers.
"""

import logging
from typing import List, Optional

from ranter.hand import Hand
from ranter.round import RoundResult


def setup_logging(log_file: Optional[str] = None, level: int = logging.INFO):
    """Set up logging configuration for the simulator."""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def format_hand(hand: Hand) -> str:
    """
    Format a hand for display.

    Args:
        hand: Hand to format

    Returns:
        Cards followed by the hand status, e.g. "♥7 ♣3 (NoWin(10))"
    """
    if not hand.cards:
        return "Empty hand"
    return f"{hand} ({hand.evaluate()!r})"


def format_hands(hands: List[Hand]) -> str:
    """Format every hand, one line per player."""
    return '\n'.join(f"Player {i}: {format_hand(hand)}" for i, hand in enumerate(hands))


def log_round_result(round_number: int, result: RoundResult, hands: List[Hand],
                     logger: logging.Logger = None):
    """Log the receiving hand after a resolved round."""
    if logger is None:
        logger = logging.getLogger(__name__)

    if result.receiver is not None:
        logger.debug(f"Round {round_number}: player {result.receiver} now holds: {format_hand(hands[result.receiver])}")
