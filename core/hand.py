"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from core.cards import Card

BLACKJACK = 21
SOFT_BONUS = 10


def hand_value(cards: Iterable[Card]) -> int:
    """
    Calculate a hand's value.

    Aces are summed at 11. If the hand holds any Ace and adding 10 more would
    not pass 21, the bonus is added once. Multiple Aces never get more than one
    adjustment, so A-A scores 22. Values above 21 are returned as-is.
    """
    total = 0
    has_ace = False

    for card in cards:
        total += card.value
        if card.is_ace:
            has_ace = True

    if has_ace and total + SOFT_BONUS <= BLACKJACK:
        total += SOFT_BONUS

    return total


@dataclass
class Hand:
    """An append-only blackjack hand."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    @property
    def value(self) -> int:
        """Return the hand value."""
        return hand_value(self.cards)

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.value > BLACKJACK

    @property
    def num_cards(self) -> int:
        """Return the number of cards in the hand."""
        return len(self.cards)

    def snapshot(self) -> tuple[Card, ...]:
        """Return an immutable copy of the cards."""
        return tuple(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        value_str = "(BUST)" if self.is_busted else f"({self.value})"
        return f"{cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"
