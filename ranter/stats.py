"""
Run statistics for Ranter-Go-Round.
Summarizes a sequence of round results.
"""

from typing import Dict, List

import numpy as np

from ranter.hand import WinCondition
from ranter.round import RoundResult


class RunSummary:
    """Aggregated counts over a simulation run."""

    def __init__(self, rounds: int, discards: int, wins_by_condition: Dict[WinCondition, int],
                 wins_per_player: np.ndarray, receives_per_player: np.ndarray,
                 mean_hand_total: float):
        self.rounds = rounds
        self.discards = discards
        self.wins_by_condition = wins_by_condition
        self.wins_per_player = wins_per_player
        self.receives_per_player = receives_per_player
        self.mean_hand_total = mean_hand_total

    @property
    def total_wins(self) -> int:
        return sum(self.wins_by_condition.values())


def summarize(results: List[RoundResult], num_players: int) -> RunSummary:
    """
    Compute summary statistics for a run.

    Args:
        results: Round results in play order
        num_players: Number of players in the game

    Returns:
        RunSummary for the run
    """
    receivers = np.array([r.receiver for r in results if r.receiver is not None], dtype=np.int64)
    winners = np.array([r.receiver for r in results if r.win is not None], dtype=np.int64)
    totals = np.array([r.hand_total for r in results if r.hand_total is not None], dtype=np.float64)

    wins_by_condition = {condition: 0 for condition in WinCondition}
    for r in results:
        if r.win is not None:
            wins_by_condition[r.win] += 1

    return RunSummary(
        rounds=len(results),
        discards=sum(1 for r in results if r.receiver is None),
        wins_by_condition=wins_by_condition,
        wins_per_player=np.bincount(winners, minlength=num_players),
        receives_per_player=np.bincount(receivers, minlength=num_players),
        mean_hand_total=float(totals.mean()) if totals.size else 0.0,
    )


def format_summary(summary: RunSummary) -> str:
    """Format a run summary for display."""
    lines = [
        f"Rounds played: {summary.rounds}",
        f"Cards discarded: {summary.discards}",
        f"Wins: {summary.total_wins}",
    ]
    for condition, count in summary.wins_by_condition.items():
        lines.append(f"  {condition.value}: {count}")
    for player, (wins, received) in enumerate(zip(summary.wins_per_player, summary.receives_per_player)):
        lines.append(f"Player {player}: received {int(received)}, won {int(wins)}")
    lines.append(f"Mean hand sum after receiving: {summary.mean_hand_total:.2f}")
    return '\n'.join(lines)
