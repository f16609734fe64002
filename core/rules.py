"""House rules: dealer drawing policy and round settlement."""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

from core.cards import Card
from core.hand import BLACKJACK, Hand

if TYPE_CHECKING:
    from config import GameConfig

CURRENCY = "£"


@dataclass(frozen=True)
class RuleSet:
    """
    Table rules configuration.

    The defaults describe the only table this game deals: eight decks, a
    rebuild after three and a half decks, dealer stands on any 17.
    """

    num_decks: int = 8
    reshuffle_threshold: int = 1456  # 3.5 * 52 * 8
    min_cards_before_shuffle: int = 4
    dealer_stands_on: int = 17
    starting_bankroll: int = 1000
    bet: int = 5

    def __post_init__(self) -> None:
        """Validate rule combinations."""
        if self.num_decks < 1:
            raise ValueError("num_decks must be at least 1")
        if self.reshuffle_threshold < 1:
            raise ValueError("reshuffle_threshold must be positive")
        if self.bet < 1:
            raise ValueError("bet must be positive")

    @classmethod
    def from_config(cls, game_config: "GameConfig") -> "RuleSet":
        """Build rules from the application game configuration."""
        return cls(
            num_decks=game_config.num_decks,
            reshuffle_threshold=game_config.reshuffle_threshold,
            min_cards_before_shuffle=game_config.min_cards_before_shuffle,
            dealer_stands_on=game_config.dealer_stands_on,
            starting_bankroll=game_config.starting_bankroll,
            bet=game_config.bet,
        )


def dealer_should_draw(value: int, stands_on: int = 17) -> bool:
    """Dealer draws on anything below the stand threshold, soft or hard."""
    return value < stands_on


def play_dealer(
    hand: Hand,
    draw: Callable[[], Card],
    stands_on: int = 17,
) -> list[Card]:
    """
    Draw cards into the dealer hand until it reaches the stand threshold.

    A bust also stops the loop since it is above the threshold.

    Returns:
        The cards drawn, in order
    """
    drawn = []
    while dealer_should_draw(hand.value, stands_on):
        card = draw()
        hand.add_card(card)
        drawn.append(card)
    return drawn


class Outcome(Enum):
    """Result of a settled round from the player's side."""

    WIN = "win"
    PUSH = "push"
    LOSS = "loss"
    BUST = "bust"


@dataclass(frozen=True)
class Settlement:
    """Bankroll change and message for a settled round."""

    outcome: Outcome
    delta: int
    message: str


def resolve(dealer_value: int, player_value: int, bet: int) -> Settlement:
    """
    Settle a stood hand against the dealer.

    Checked in order: dealer bust wins for the player (even if the player is
    also over 21), a higher non-bust player total wins, equal totals push,
    anything else loses. Wins pay twice the bet and a push returns the stake.
    """
    if dealer_value > BLACKJACK or (dealer_value < player_value <= BLACKJACK):
        win = 2 * bet
        return Settlement(Outcome.WIN, win, f"You win {CURRENCY}{win}")
    if player_value == dealer_value:
        return Settlement(
            Outcome.PUSH,
            bet,
            f"It's a draw. You get back your bet of {CURRENCY}{bet}",
        )
    return Settlement(Outcome.LOSS, -bet, f"You lose {CURRENCY}{bet}")


def settle_bust(bet: int) -> Settlement:
    """Settle a hand that went over 21 on a hit."""
    return Settlement(Outcome.BUST, -bet, f"You are bust! You lose {CURRENCY}{bet}")
