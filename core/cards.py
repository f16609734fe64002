"""Card and Shoe classes - immutable card representations."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Callable, Iterator

logger = logging.getLogger(__name__)


class Suit(Enum):
    """Card suits. Suits never affect scoring."""

    SPADES = auto()
    HEARTS = auto()
    DIAMONDS = auto()
    CLUBS = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]

    @property
    def display_name(self) -> str:
        """Return the suit name, e.g. 'Spades'."""
        return self.name.title()


class Rank(Enum):
    """Card ranks with blackjack values."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    @property
    def blackjack_value(self) -> int:
        """Return the base point value (Ace = 11, face cards = 10)."""
        if self.value <= 10:
            return self.value
        if self == Rank.ACE:
            return 11
        return 10  # Face cards

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE

    @property
    def display_name(self) -> str:
        """Return the rank name, e.g. 'Ace' or 'Ten'."""
        return self.name.title()


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the base blackjack point value."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @property
    def display_name(self) -> str:
        """Return a readable name like 'Ace of Spades'."""
        return f"{self.rank.display_name} of {self.suit.display_name}"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {
            "2": Rank.TWO,
            "3": Rank.THREE,
            "4": Rank.FOUR,
            "5": Rank.FIVE,
            "6": Rank.SIX,
            "7": Rank.SEVEN,
            "8": Rank.EIGHT,
            "9": Rank.NINE,
            "10": Rank.TEN,
            "T": Rank.TEN,
            "J": Rank.JACK,
            "Q": Rank.QUEEN,
            "K": Rank.KING,
            "A": Rank.ACE,
        }

        suit_map = {
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


def standard_deck() -> list[Card]:
    """Return the 52 cards of a standard deck in suit/rank order."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


class Shoe:
    """A continuous multi-deck shoe that rebuilds itself past a dealt-card threshold.

    Cards are dealt from the front of the shoe. Once ``reshuffle_threshold``
    cards have been dealt the shoe is rebuilt and reshuffled in full, discarding
    any undealt cards, and the dealt count starts again from zero. If fewer than
    ``min_cards`` cards remain before that, the shoe is refilled and reshuffled
    but the dealt count keeps running towards the threshold.
    """

    def __init__(
        self,
        num_decks: int = 8,
        reshuffle_threshold: int = 1456,
        min_cards: int = 4,
        rng: Random | None = None,
        on_shuffle: Callable[[], None] | None = None,
    ) -> None:
        """
        Initialize and shuffle a shoe.

        Args:
            num_decks: Number of 52-card decks in the shoe
            reshuffle_threshold: Cards dealt since the last shuffle that force a reshuffle
            min_cards: Reshuffle before drawing if fewer cards than this remain
            rng: Random number generator for shuffling
            on_shuffle: Called whenever a draw triggers a reshuffle
        """
        if num_decks < 1:
            raise ValueError("Shoe must have at least 1 deck")
        if reshuffle_threshold < 1:
            raise ValueError("Reshuffle threshold must be positive")
        if min_cards < 1:
            raise ValueError("min_cards must be positive")

        self._num_decks = num_decks
        self._reshuffle_threshold = reshuffle_threshold
        self._min_cards = min_cards
        self._rng = rng or Random()
        self.on_shuffle = on_shuffle
        self._cards: list[Card] = []
        self._cards_dealt = 0
        self._shuffle_count = 0
        self.build()

    def build(self) -> None:
        """Repopulate the shoe with every deck, shuffle it and reset the dealt count."""
        self._refill()
        self._cards_dealt = 0

    def _refill(self) -> None:
        self._cards = [card for _ in range(self._num_decks) for card in standard_deck()]
        self._rng.shuffle(self._cards)

    def draw(self) -> Card:
        """Draw the next card, reshuffling first if the shoe calls for it."""
        if self._cards_dealt >= self._reshuffle_threshold:
            self._reshuffle(reset_count=True)
        elif len(self._cards) < self._min_cards:
            self._reshuffle(reset_count=False)
        card = self._cards.pop(0)
        self._cards_dealt += 1
        return card

    def _reshuffle(self, reset_count: bool) -> None:
        logger.info(
            "Reshuffling shoe after %d cards dealt (%d remaining)",
            self._cards_dealt,
            len(self._cards),
        )
        if reset_count:
            self.build()
        else:
            self._refill()
        self._shuffle_count += 1
        if self.on_shuffle:
            self.on_shuffle()

    @property
    def needs_shuffle(self) -> bool:
        """Check if the next draw will rebuild the shoe."""
        return (
            self._cards_dealt >= self._reshuffle_threshold
            or len(self._cards) < self._min_cards
        )

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    @property
    def cards_dealt(self) -> int:
        """Return the number of cards dealt since the threshold last reset."""
        return self._cards_dealt

    @property
    def shuffle_count(self) -> int:
        """Return how many times a draw has triggered a reshuffle."""
        return self._shuffle_count

    @property
    def total_cards(self) -> int:
        """Return the total number of cards in a full shoe."""
        return self._num_decks * 52

    @property
    def num_decks(self) -> int:
        """Return the number of decks in the shoe."""
        return self._num_decks

    @property
    def reshuffle_threshold(self) -> int:
        """Return the configured reshuffle threshold."""
        return self._reshuffle_threshold

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)
