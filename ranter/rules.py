"""
Rules module for Ranter-Go-Round.
Contains rule constants, runner defaults and the contract check used by the engine.
"""


# Card constants
MIN_RANK = 1
MAX_RANK = 13
ACE_RANK = 1
STANDARD_DECK_SIZE = 52

# Hand constants
MAX_HAND_SUM = 25
FIVE_CARD_COUNT = 5
ACE_LOW_SUM = 12  # 12 with an ace counted as 14 makes 25

# Tie-break strategy seed
DEFAULT_STRATEGY_SEED = 60

# Runner defaults
DEFAULT_PLAYERS = 5
DEFAULT_JOKERS = 3
DEFAULT_SEED = 42
DEFAULT_ROUNDS = 1000


class ContractViolation(AssertionError):
    """Raised when the engine or its caller breaks an invariant.

    These are programmer errors, not game states: they are never caught
    inside the package.
    """


def require(condition: bool, message: str):
    """Raise ContractViolation with message unless condition holds."""
    if not condition:
        raise ContractViolation(message)
