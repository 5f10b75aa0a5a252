"""
Unit tests for the round engine.
Tests routing, win resolution, deck recycling and exhaustion.
"""

import random

import pytest
from ranter.card import Suit, OrdinaryCard, SpecialCard, JokerCard
from ranter.deck import Deck
from ranter.game import RanterGame
from ranter.hand import WinCondition
from ranter.rules import ContractViolation
from ranter.strategy import RandomStrategy, Strategy


class FixedStrategy(Strategy):
    """Always returns the same index and records each call."""

    def __init__(self, index):
        self.index = index
        self.calls = []

    def choose(self, giver, hands, card):
        self.calls.append((giver, card))
        return self.index


def clubs(*ranks):
    return [OrdinaryCard(Suit.CLUBS, r) for r in ranks]


def game_with(cards, num_players=3):
    return RanterGame(num_players, deck=Deck(cards))


@pytest.fixture
def rng():
    return random.Random(0)


class TestRouting:

    def test_black_card_goes_to_giver(self, rng):
        game = game_with([OrdinaryCard(Suit.CLUBS, 5)])
        result = game.step(rng, FixedStrategy(2))
        assert result.giver == 0
        assert result.receiver == 0
        assert result.win is None
        assert result.describe() == "0 ♣5 to 0 => 5"

    def test_black_card_discarded_when_giver_full(self, rng):
        game = game_with([OrdinaryCard(Suit.SPADES, 6)])
        game.players[0].cards = clubs(10, 10)
        result = game.step(rng, FixedStrategy(1))
        assert result.receiver is None
        assert result.describe() == "0 ♠6 to nobody"
        assert game.discard.cards == [OrdinaryCard(Suit.SPADES, 6)]
        assert len(game.players[1]) == 0

    def test_red_card_single_eligible(self, rng):
        game = game_with([OrdinaryCard(Suit.HEARTS, 9)])
        game.players[0].cards = clubs(10, 10)
        game.players[1].cards = clubs(10, 10)
        strategy = FixedStrategy(0)
        result = game.step(rng, strategy)
        assert result.receiver == 2
        assert strategy.calls == []

    def test_red_card_nobody_eligible(self, rng):
        game = game_with([OrdinaryCard(Suit.DIAMONDS, 9)])
        for hand in game.players:
            hand.cards = clubs(10, 10)
        result = game.step(rng, FixedStrategy(0))
        assert result.receiver is None
        assert len(game.discard) == 1

    def test_red_card_tie_uses_strategy(self, rng):
        card = OrdinaryCard(Suit.HEARTS, 4)
        game = game_with([card])
        strategy = FixedStrategy(1)
        result = game.step(rng, strategy)
        assert strategy.calls == [(0, card)]
        assert result.receiver == 1
        assert game.players[1].cards == [card]

    def test_strategy_out_of_range(self, rng):
        game = game_with([OrdinaryCard(Suit.HEARTS, 4)])
        with pytest.raises(ContractViolation):
            game.step(rng, FixedStrategy(3))

    def test_strategy_ineligible_choice(self, rng):
        game = game_with([OrdinaryCard(Suit.HEARTS, 8)])
        game.players[2].cards = clubs(10, 10)
        with pytest.raises(ContractViolation):
            game.step(rng, FixedStrategy(2))


class TestResolution:

    def test_special_card_wins_without_being_held(self, rng):
        game = game_with([SpecialCard(Suit.SPADES)], num_players=2)
        game.players[0].cards = clubs(3)
        result = game.step(rng, RandomStrategy())
        assert result.receiver == 0
        assert result.win == WinCondition.SPECIAL
        assert game.players[0].cards == clubs(3)
        assert game.discard.cards == [SpecialCard(Suit.SPADES)]
        assert result.describe() == "0 ♠J to 0 => Special"

    def test_red_special_card_is_routed_as_black(self, rng):
        game = game_with([SpecialCard(Suit.DIAMONDS)], num_players=2)
        game.round = 1
        strategy = FixedStrategy(0)
        result = game.step(rng, strategy)
        assert result.receiver == 1
        assert strategy.calls == []

    def test_joker_wins_and_clears_hand(self, rng):
        game = game_with([JokerCard(0)])
        game.players[0].cards = clubs(4, 7)
        result = game.step(rng, FixedStrategy(0))
        assert result.win == WinCondition.JOKER
        assert len(game.players[0]) == 0
        assert len(game.discard) == 3
        assert result.describe() == "0 J0 to 0 => Joker"

    def test_twenty_five_clears_hand(self, rng):
        game = game_with([OrdinaryCard(Suit.SPADES, 2)])
        game.players[0].cards = clubs(10, 10, 3)
        result = game.step(rng, FixedStrategy(0))
        assert result.win == WinCondition.TWENTY_FIVE
        assert result.describe() == "0 ♠2 to 0 => TwentyFive"
        assert len(game.players[0]) == 0
        assert len(game.discard) == 4

    def test_five_cards(self, rng):
        game = game_with([OrdinaryCard(Suit.CLUBS, 3)])
        game.players[0].cards = clubs(2, 2, 2, 2)
        result = game.step(rng, FixedStrategy(0))
        assert result.win == WinCondition.FIVE_CARDS


class TestDeckCycle:

    def test_recycles_discard_pile(self, rng):
        game = game_with([])
        game.discard = Deck(clubs(1, 2, 3, 4, 5))
        card = game.draw_card(rng)
        assert card is not None
        assert len(game.deck) == 4
        assert len(game.discard) == 0

    def test_step_after_recycle(self, rng):
        game = game_with([])
        game.discard = Deck(clubs(2))
        result = game.step(rng, FixedStrategy(0))
        assert result is not None
        assert result.card == OrdinaryCard(Suit.CLUBS, 2)

    def test_exhaustion_returns_none(self, rng):
        game = game_with([])
        assert game.step(rng, FixedStrategy(0)) is None
        assert game.round == 0

    def test_play_stops_on_exhaustion(self, rng):
        # Both cards end up held, leaving nothing to recycle
        game = game_with(clubs(3, 2), num_players=2)
        results = list(game.play(rng, FixedStrategy(0), 10))
        assert [r.describe() for r in results] == ["0 ♣2 to 0 => 2", "1 ♣3 to 1 => 3"]
        assert game.round == 2


class TestGameProgress:

    def test_needs_players(self):
        with pytest.raises(ContractViolation):
            RanterGame(0)

    def test_round_counter_and_giver_cycle(self):
        rng = random.Random(7)
        game = RanterGame(3)
        game.shuffle(rng)
        strategy = RandomStrategy()
        givers = [game.step(rng, strategy).giver for _ in range(20)]
        assert givers == [i % 3 for i in range(20)]
        assert game.round == 20

    def test_cards_are_conserved(self):
        rng = random.Random(11)
        game = RanterGame(4, jokers=2)
        game.shuffle(rng)
        strategy = RandomStrategy(5)
        for _ in range(500):
            assert game.step(rng, strategy) is not None
            assert game.card_count() == 54
            assert not any(hand.evaluate().is_win for hand in game.players)

    def test_same_seeds_same_game(self):
        def run():
            rng = random.Random(42)
            game = RanterGame(5, jokers=3)
            game.shuffle(rng)
            return [str(r) for r in game.play(rng, RandomStrategy(), 300)]

        assert run() == run()


if __name__ == "__main__":
    pytest.main([__file__])
