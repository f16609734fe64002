"""Adapter connecting the core blackjack engine to the PyGame UI."""

from dataclasses import dataclass
from random import Random
from typing import Callable, Optional, Sequence

from core.cards import Card, Suit
from core.game.engine import BlackjackGame
from core.game.events import EventType, GameEvent
from core.rules import CURRENCY, Outcome, RuleSet

RED_SUITS = (Suit.HEARTS, Suit.DIAMONDS)

RESHUFFLE_MESSAGE = "Deck reshuffled"


@dataclass(frozen=True)
class CardView:
    """Card as the UI displays it."""

    name: str  # "Ace of Spades"
    is_red: bool

    @classmethod
    def from_core_card(cls, card: Card) -> "CardView":
        return cls(name=card.display_name, is_red=card.suit in RED_SUITS)


@dataclass(frozen=True)
class HandView:
    """One hand panel's contents."""

    title: str
    cards: tuple[CardView, ...]
    total: int

    @property
    def total_text(self) -> str:
        return f"Total: {self.total}"


@dataclass(frozen=True)
class TableView:
    """Everything the table scene renders."""

    dealer: HandView
    player: HandView
    bankroll: int
    current_bet: int
    can_hit: bool
    can_stand: bool

    @property
    def bet_text(self) -> str:
        return f"Bet: {CURRENCY}{self.current_bet}"

    @property
    def money_text(self) -> str:
        return f"Money: {CURRENCY}{self.bankroll}"


def format_cards(cards: Sequence[Card]) -> str:
    """Join card names for a dialog line."""
    return ", ".join(card.display_name for card in cards)


def format_stand_message(dealer_cards: Sequence[Card], dealer_total: int, outcome_message: str) -> str:
    """Build the dialog text shown after the player stands."""
    return (
        f"Dealer's Total: {dealer_total}\n"
        f"Dealer's Hand: {format_cards(dealer_cards)}\n\n"
        f"{outcome_message}"
    )


class EngineAdapter:
    """Adapter between the core BlackjackGame and PyGame UI.

    Subscribes to engine events and translates them to UI callbacks:
    dialog messages (reshuffles and round results, in the order they happen)
    and per-round results for toasts.
    """

    def __init__(
        self,
        rules: Optional[RuleSet] = None,
        rng: Optional[Random] = None,
        game: Optional[BlackjackGame] = None,
    ):
        """Initialize the adapter.

        Args:
            rules: Table rules (defaults to the standard table)
            rng: Random number generator for reproducible shuffles
            game: Existing engine to wrap, mainly for tests
        """
        self.game = game or BlackjackGame(rules=rules, rng=rng)
        self.game.subscribe(self._handle_event)

        # UI callbacks
        self._on_message: Optional[Callable[[str], None]] = None
        self._on_round_result: Optional[Callable[[str, int], None]] = None
        self._on_invalid_action: Optional[Callable[[str], None]] = None

    def set_callbacks(
        self,
        on_message: Optional[Callable[[str], None]] = None,
        on_round_result: Optional[Callable[[str, int], None]] = None,
        on_invalid_action: Optional[Callable[[str], None]] = None,
    ) -> None:
        """Set UI callback functions."""
        self._on_message = on_message
        self._on_round_result = on_round_result
        self._on_invalid_action = on_invalid_action

    def _handle_event(self, event: GameEvent) -> None:
        """Handle events from the core engine."""
        etype = event.event_type

        if etype == EventType.SHOE_SHUFFLED:
            self._emit_message(RESHUFFLE_MESSAGE)
        elif etype == EventType.ROUND_ENDED:
            self._handle_round_ended(event.data)
        elif etype == EventType.INVALID_ACTION:
            if self._on_invalid_action:
                self._on_invalid_action(event.data.get("message", "Invalid action"))

    def _handle_round_ended(self, data: dict) -> None:
        # Fired before the next round is dealt, so the hands are still the settled ones
        outcome = data["outcome"]

        if outcome == Outcome.BUST.value:
            message = data["message"]
        else:
            message = format_stand_message(
                self.game.dealer_hand.cards,
                self.game.dealer_hand.value,
                data["message"],
            )

        self._emit_message(message)
        if self._on_round_result:
            self._on_round_result(outcome, data["result"])

    def _report_invalid(self, action: str) -> None:
        if self._on_invalid_action:
            self._on_invalid_action(f"Cannot {action} now")

    def _emit_message(self, message: str) -> None:
        if self._on_message:
            self._on_message(message)

    def start(self) -> TableView:
        """Deal the first round."""
        self.game.start_round()
        return self.table_view()

    def hit(self) -> TableView:
        """Player hits."""
        if self.game.can_hit:
            self.game.hit()
        else:
            self._report_invalid("hit")
        return self.table_view()

    def stand(self) -> TableView:
        """Player stands."""
        if self.game.can_stand:
            self.game.stand()
        else:
            self._report_invalid("stand")
        return self.table_view()

    def table_view(self) -> TableView:
        """Build the view of the round currently on the table."""
        snapshot = self.game.snapshot()
        return TableView(
            dealer=HandView(
                title="Dealer's hand",
                cards=tuple(CardView.from_core_card(c) for c in snapshot.dealer_hand),
                total=snapshot.dealer_total,
            ),
            player=HandView(
                title="Player's hand",
                cards=tuple(CardView.from_core_card(c) for c in snapshot.player_hand),
                total=snapshot.player_total,
            ),
            bankroll=snapshot.bankroll,
            current_bet=snapshot.current_bet,
            can_hit=self.game.can_hit,
            can_stand=self.game.can_stand,
        )
