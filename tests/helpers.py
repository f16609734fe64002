"""Shared test helpers."""

from random import Random

from hypothesis import strategies as st

from core.cards import Card, Rank, Shoe, Suit


class StackedShoe(Shoe):
    """Shoe that deals ``stack`` first, followed by a normal shuffled shoe."""

    def __init__(self, stack, **kwargs):
        self._stack = list(stack)
        kwargs.setdefault("rng", Random(7))
        super().__init__(**kwargs)

    def _refill(self) -> None:
        super()._refill()
        self._cards = self._stack + self._cards
        self._stack = []


def cards(*codes: str) -> list[Card]:
    """Build cards from short codes such as 'AS', '10H'."""
    return [Card.from_string(code) for code in codes]


# Hypothesis strategies for property-based testing
@st.composite
def card_strategy(draw):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)


def hand_cards_strategy(min_cards=1, max_cards=6):
    """Generate a random list of cards."""
    return st.lists(card_strategy(), min_size=min_cards, max_size=max_cards)
