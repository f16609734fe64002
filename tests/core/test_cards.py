"""Tests for Card and Shoe classes."""

from collections import Counter
from random import Random

import pytest

from core.cards import Card, Shoe, Rank, Suit, standard_deck


class TestCard:
    """Tests for the Card class."""

    def test_card_creation(self):
        """Test creating a card."""
        card = Card(Rank.ACE, Suit.SPADES)
        assert card.rank == Rank.ACE
        assert card.suit == Suit.SPADES

    def test_card_immutability(self):
        """Test that cards are immutable."""
        card = Card(Rank.ACE, Suit.SPADES)
        with pytest.raises(AttributeError):
            card.rank = Rank.KING

    def test_card_value(self):
        """Test card base values."""
        assert Card(Rank.TWO, Suit.HEARTS).value == 2
        assert Card(Rank.TEN, Suit.HEARTS).value == 10
        assert Card(Rank.JACK, Suit.HEARTS).value == 10
        assert Card(Rank.QUEEN, Suit.HEARTS).value == 10
        assert Card(Rank.KING, Suit.HEARTS).value == 10
        assert Card(Rank.ACE, Suit.HEARTS).value == 11

    def test_suit_does_not_affect_value(self):
        """Every suit of a rank scores the same."""
        values = {Card(Rank.SEVEN, suit).value for suit in Suit}
        assert values == {7}

    def test_display_name(self):
        """Test the readable card name."""
        assert Card(Rank.ACE, Suit.SPADES).display_name == "Ace of Spades"
        assert Card(Rank.TEN, Suit.DIAMONDS).display_name == "Ten of Diamonds"

    def test_card_from_string(self):
        """Test creating cards from strings."""
        assert Card.from_string("AS") == Card(Rank.ACE, Suit.SPADES)
        assert Card.from_string("10D") == Card(Rank.TEN, Suit.DIAMONDS)
        assert Card.from_string("kc") == Card(Rank.KING, Suit.CLUBS)
        assert Card.from_string("K♥") == Card(Rank.KING, Suit.HEARTS)

    @pytest.mark.parametrize("code", ["", "A", "1S", "AX"])
    def test_card_from_string_invalid(self, code):
        """Unknown ranks and suits are rejected."""
        with pytest.raises(ValueError):
            Card.from_string(code)

    def test_card_equality_and_hash(self):
        """Cards are value objects."""
        assert Card(Rank.ACE, Suit.SPADES) == Card(Rank.ACE, Suit.SPADES)
        assert Card(Rank.ACE, Suit.SPADES) != Card(Rank.ACE, Suit.HEARTS)
        assert len({Card(Rank.ACE, Suit.SPADES), Card(Rank.ACE, Suit.SPADES)}) == 1


def test_standard_deck_has_52_unique_cards():
    deck = standard_deck()
    assert len(deck) == 52
    assert len(set(deck)) == 52


class TestShoe:
    """Tests for the Shoe class."""

    def test_shoe_creation(self, shoe):
        """A default shoe holds eight full decks."""
        assert len(shoe) == 416
        assert shoe.num_decks == 8
        assert shoe.reshuffle_threshold == 1456
        assert shoe.cards_dealt == 0
        assert shoe.shuffle_count == 0

    def test_shoe_composition(self, shoe):
        """Each card appears once per deck."""
        counts = Counter(shoe)
        assert len(counts) == 52
        assert set(counts.values()) == {8}

    def test_shoe_is_shuffled(self, shoe):
        """The shoe is not in deck order."""
        ordered = standard_deck() * 8
        assert list(shoe) != ordered

    def test_seeded_shoes_match(self):
        """Shuffles are reproducible with a seeded RNG."""
        assert list(Shoe(rng=Random(1))) == list(Shoe(rng=Random(1)))

    def test_draw_takes_front_card(self, shoe):
        """Draw removes the first card and counts it."""
        first = next(iter(shoe))
        assert shoe.draw() == first
        assert shoe.cards_remaining == 415
        assert shoe.cards_dealt == 1

    def test_invalid_decks(self):
        """Test that invalid deck count raises error."""
        with pytest.raises(ValueError):
            Shoe(num_decks=0)

    def test_invalid_threshold(self):
        with pytest.raises(ValueError):
            Shoe(reshuffle_threshold=0)

    def test_threshold_reshuffle(self, rng):
        """The draw after the threshold rebuilds the shoe exactly once."""
        notified = []
        shoe = Shoe(rng=rng, on_shuffle=lambda: notified.append(True))

        for _ in range(1456):
            shoe.draw()
        assert shoe.cards_dealt == 1456
        count_before = shoe.shuffle_count

        assert shoe.needs_shuffle
        shoe.draw()

        assert shoe.shuffle_count == count_before + 1
        assert shoe.cards_dealt == 1
        assert shoe.cards_remaining == 415
        assert len(notified) == shoe.shuffle_count

    def test_low_card_guard(self, rng):
        """A nearly empty shoe is refilled before the draw."""
        shoe = Shoe(num_decks=1, reshuffle_threshold=1000, rng=rng)

        for _ in range(49):
            shoe.draw()
        assert shoe.cards_remaining == 3
        assert shoe.shuffle_count == 0

        shoe.draw()

        assert shoe.shuffle_count == 1
        assert shoe.cards_remaining == 51
        # The refill does not restart the threshold count
        assert shoe.cards_dealt == 50

    def test_draw_never_runs_out(self, rng):
        """Drawing well past the shoe size keeps working."""
        shoe = Shoe(num_decks=1, reshuffle_threshold=80, rng=rng)
        drawn = [shoe.draw() for _ in range(500)]
        assert len(drawn) == 500
        assert shoe.shuffle_count > 0
