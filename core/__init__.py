"""Core blackjack engine - 100% UI-agnostic."""

from core.cards import Card, Shoe, Rank, Suit, standard_deck
from core.hand import Hand, hand_value
from core.rules import Outcome, RuleSet, Settlement, dealer_should_draw, play_dealer, resolve

__all__ = [
    "Card",
    "Shoe",
    "Rank",
    "Suit",
    "standard_deck",
    "Hand",
    "hand_value",
    "Outcome",
    "RuleSet",
    "Settlement",
    "dealer_should_draw",
    "play_dealer",
    "resolve",
]
