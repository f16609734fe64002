"""Pytest fixtures for blackjack tests."""

from random import Random

import pytest

from core.cards import Shoe
from core.hand import Hand
from core.rules import RuleSet
from core.game import BlackjackGame

from helpers import StackedShoe, cards


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def shoe(rng):
    """A standard eight-deck shoe."""
    return Shoe(rng=rng)


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """Ace and King."""
    return Hand(cards("AS", "KH"))


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return Hand(cards("10S", "6H"))


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return Hand(cards("10S", "6H", "KC"))


@pytest.fixture
def rules():
    """Default table rules."""
    return RuleSet()


@pytest.fixture
def game(rng):
    """A new game instance."""
    return BlackjackGame(rng=rng)


@pytest.fixture
def stacked_game():
    """Factory for games whose shoe deals the given card codes first.

    Deal order is dealer, player, player, then hits, then dealer draws.
    """

    def make(*codes: str, **kwargs) -> BlackjackGame:
        return BlackjackGame(shoe=StackedShoe(cards(*codes)), **kwargs)

    return make
