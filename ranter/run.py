#!/usr/bin/env python3
"""
Main entry point for Ranter-Go-Round.
Runs a seeded simulation and prints one report line per round.
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from ranter.game import RanterGame
from ranter.round import RoundResult
from ranter.rules import (
    DEFAULT_PLAYERS, DEFAULT_JOKERS, DEFAULT_SEED, DEFAULT_ROUNDS, DEFAULT_STRATEGY_SEED,
)
from ranter.stats import summarize, format_summary
from ranter.strategy import STRATEGIES, create_strategy
from ranter.utils import setup_logging, format_hands, log_round_result

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simulate a game of Ranter-Go-Round")
    parser.add_argument('--players', type=int, default=DEFAULT_PLAYERS,
                        help='Number of players')
    parser.add_argument('--jokers', type=int, default=DEFAULT_JOKERS,
                        help='Number of jokers added to the deck')
    parser.add_argument('--seed', type=int, default=DEFAULT_SEED,
                        help='Seed for shuffling the deck')
    parser.add_argument('--rounds', type=int, default=DEFAULT_ROUNDS,
                        help='Number of rounds to play')
    parser.add_argument('--strategy', choices=list(STRATEGIES.keys()), default='random',
                        help='Tie-break strategy for red cards')
    parser.add_argument('--strategy-seed', type=int, default=DEFAULT_STRATEGY_SEED,
                        help='Seed for the random tie-break strategy')
    parser.add_argument('--allow-exhaustion', action='store_true',
                        help='Stop quietly if the cards run out before the round limit')
    parser.add_argument('--summary', action='store_true',
                        help='Print run statistics at the end')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable verbose logging')
    parser.add_argument('--log-file', default=None,
                        help='Also write log output to this file')
    return parser


def run_game(players: int, jokers: int, seed: int, rounds: int,
             strategy_name: str = 'random', strategy_seed: int = DEFAULT_STRATEGY_SEED,
             out=None) -> List[RoundResult]:
    """
    Play up to `rounds` rounds, writing each report line to `out`.

    Returns:
        The results of every round played
    """
    out = out or sys.stdout
    rng = random.Random(seed)
    strategy = create_strategy(strategy_name, strategy_seed)

    game = RanterGame(players, jokers)
    game.shuffle(rng)
    logger.info(f"Starting game: {players} players, {jokers} jokers, seed {seed}, "
                f"strategy {strategy_name}")

    results = []
    for result in game.play(rng, strategy, rounds):
        log_round_result(game.round - 1, result, game.players, logger)
        print(result.describe(), file=out)
        results.append(result)

    logger.debug(f"Final hands after {game.round} rounds:\n{format_hands(game.players)}")
    return results


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.players < 1:
        parser.error("--players must be at least 1")
    if args.jokers < 0:
        parser.error("--jokers must not be negative")
    if args.rounds < 0:
        parser.error("--rounds must not be negative")

    setup_logging(args.log_file, logging.DEBUG if args.verbose else logging.WARNING)

    results = run_game(args.players, args.jokers, args.seed, args.rounds,
                       args.strategy, args.strategy_seed)

    if args.summary:
        print(format_summary(summarize(results, args.players)))

    if len(results) < args.rounds:
        if args.allow_exhaustion:
            logger.info(f"Cards ran out after {len(results)} rounds")
            return 0
        print("We're out of cards!", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
