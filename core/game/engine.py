"""Blackjack round engine with state machine."""

import logging
from dataclasses import dataclass
from random import Random
from typing import Callable

from transitions import Machine

from core.cards import Card, Shoe
from core.hand import BLACKJACK, Hand, hand_value
from core.rules import Outcome, RuleSet, Settlement, play_dealer, resolve, settle_bust
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.state import RoundState

logger = logging.getLogger(__name__)


class InvalidActionError(RuntimeError):
    """Raised when a command is not allowed in the current round state."""

    def __init__(self, action: str, state: RoundState) -> None:
        super().__init__(f"Cannot {action} while round is {state}")
        self.action = action
        self.state = state


@dataclass
class Session:
    """Bankroll and bet, kept for the whole process run."""

    bankroll: int = 1000
    current_bet: int = 5
    rounds_played: int = 0

    def apply(self, settlement: Settlement) -> None:
        """Apply a round settlement to the bankroll."""
        self.bankroll += settlement.delta
        self.rounds_played += 1


@dataclass(frozen=True)
class RoundSnapshot:
    """Hands and totals of a freshly dealt or in-progress round."""

    dealer_hand: tuple[Card, ...]
    player_hand: tuple[Card, ...]
    dealer_total: int
    player_total: int
    bankroll: int
    current_bet: int
    round_number: int


@dataclass(frozen=True)
class HitResult:
    """Result of a hit. When busted, ``next_round`` is the auto-dealt round."""

    player_hand: tuple[Card, ...]
    player_total: int
    busted: bool
    bankroll: int
    settlement: Settlement | None = None
    next_round: RoundSnapshot | None = None

    @property
    def bankroll_delta(self) -> int | None:
        return self.settlement.delta if self.settlement else None


@dataclass(frozen=True)
class StandResult:
    """Final dealer hand and settlement of a stood round."""

    dealer_hand: tuple[Card, ...]
    dealer_total: int
    player_hand: tuple[Card, ...]
    player_total: int
    settlement: Settlement
    bankroll: int
    next_round: RoundSnapshot | None = None

    @property
    def outcome(self) -> Outcome:
        return self.settlement.outcome

    @property
    def outcome_message(self) -> str:
        return self.settlement.message

    @property
    def bankroll_delta(self) -> int:
        return self.settlement.delta


class BlackjackGame:
    """
    Single-player blackjack round engine using a state machine.

    This is the core game logic, completely UI-agnostic.
    Communication happens through events and returned snapshots only.
    """

    # State machine states
    STATES = [s.name.lower() for s in RoundState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "deal", "source": ["not_started", "settled"], "dest": "player_turn"},
        {"trigger": "player_hit", "source": "player_turn", "dest": "player_turn"},
        {"trigger": "player_busts", "source": "player_turn", "dest": "settled"},
        {"trigger": "player_stands", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "dealer_done", "source": "dealer_turn", "dest": "settled"},
    ]

    def __init__(
        self,
        rules: RuleSet | None = None,
        rng: Random | None = None,
        shoe: Shoe | None = None,
        auto_deal: bool = True,
    ) -> None:
        """
        Initialize a new blackjack game.

        Args:
            rules: Table rules (uses defaults if not provided)
            rng: Random number generator for reproducible shuffles
            shoe: Pre-built shoe, mainly for tests
            auto_deal: Deal the next round as soon as one settles
        """
        self.rules = rules or RuleSet()
        self.shoe = shoe or Shoe(
            num_decks=self.rules.num_decks,
            reshuffle_threshold=self.rules.reshuffle_threshold,
            min_cards=self.rules.min_cards_before_shuffle,
            rng=rng,
        )
        self.shoe.on_shuffle = self._on_shoe_shuffled
        self.auto_deal = auto_deal

        self.session = Session(
            bankroll=self.rules.starting_bankroll,
            current_bet=self.rules.bet,
        )
        self.dealer_hand = Hand()
        self.player_hand = Hand()
        self.events = EventEmitter()

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="not_started",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._machine_state.upper()]  # type: ignore

    @property
    def bankroll(self) -> int:
        return self.session.bankroll

    @property
    def current_bet(self) -> int:
        return self.session.current_bet

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def start_round(self) -> RoundSnapshot:
        """
        Deal a new round: one card to the dealer, then two to the player.

        Raises:
            InvalidActionError: If a round is already in progress
        """
        if self.state not in (RoundState.NOT_STARTED, RoundState.SETTLED):
            self._reject("start a round")
        return self._deal_round()

    def hit(self) -> HitResult:
        """
        Player takes another card.

        Going over 21 loses the bet straight away and, with auto-deal on,
        deals the next round.

        Raises:
            InvalidActionError: If it is not the player's turn
        """
        if self.state != RoundState.PLAYER_TURN:
            self._reject("hit")

        self._deal_card_to_hand(self.player_hand)
        player_total = self.player_hand.value
        self.events.emit_new(EventType.PLAYER_HIT, hand_value=player_total)

        if player_total <= BLACKJACK:
            self.player_hit()
            return HitResult(
                player_hand=self.player_hand.snapshot(),
                player_total=player_total,
                busted=False,
                bankroll=self.session.bankroll,
            )

        settlement = settle_bust(self.session.current_bet)
        self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=player_total)
        self.player_busts()
        self._settle(settlement)
        busted_hand = self.player_hand.snapshot()

        return HitResult(
            player_hand=busted_hand,
            player_total=player_total,
            busted=True,
            bankroll=self.session.bankroll,
            settlement=settlement,
            next_round=self._maybe_deal_next(),
        )

    def stand(self) -> StandResult:
        """
        Player stands; the dealer draws to the threshold and the bet is settled.

        Raises:
            InvalidActionError: If it is not the player's turn
        """
        if self.state != RoundState.PLAYER_TURN:
            self._reject("stand")

        player_total = self.player_hand.value
        self.events.emit_new(EventType.PLAYER_STAND, hand_value=player_total)
        self.player_stands()

        drawn = play_dealer(
            self.dealer_hand,
            self._deal_dealer_hit,
            stands_on=self.rules.dealer_stands_on,
        )
        dealer_total = self.dealer_hand.value
        logger.debug("Dealer drew %d card(s) to %d", len(drawn), dealer_total)

        if self.dealer_hand.is_busted:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=dealer_total)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=dealer_total)

        settlement = resolve(dealer_total, player_total, self.session.current_bet)
        self.dealer_done()
        self._settle(settlement)
        dealer_cards = self.dealer_hand.snapshot()
        player_cards = self.player_hand.snapshot()

        return StandResult(
            dealer_hand=dealer_cards,
            dealer_total=dealer_total,
            player_hand=player_cards,
            player_total=player_total,
            settlement=settlement,
            bankroll=self.session.bankroll,
            next_round=self._maybe_deal_next(),
        )

    def snapshot(self) -> RoundSnapshot:
        """Return the current hands and totals."""
        return RoundSnapshot(
            dealer_hand=self.dealer_hand.snapshot(),
            player_hand=self.player_hand.snapshot(),
            dealer_total=self.dealer_hand.value,
            player_total=self.player_hand.value,
            bankroll=self.session.bankroll,
            current_bet=self.session.current_bet,
            round_number=self.session.rounds_played + 1,
        )

    @property
    def can_hit(self) -> bool:
        """Check if hitting is allowed."""
        return self.state == RoundState.PLAYER_TURN

    @property
    def can_stand(self) -> bool:
        """Check if standing is allowed."""
        return self.state == RoundState.PLAYER_TURN

    def _deal_round(self) -> RoundSnapshot:
        """Discard the old hands and deal fresh ones."""
        self.dealer_hand = Hand()
        self.player_hand = Hand()

        self._deal_card_to_hand(self.dealer_hand)
        self._deal_card_to_hand(self.player_hand)
        self._deal_card_to_hand(self.player_hand)

        self.deal()
        snapshot = self.snapshot()
        self.events.emit_new(
            EventType.ROUND_STARTED,
            round_number=snapshot.round_number,
            dealer_total=snapshot.dealer_total,
            player_total=snapshot.player_total,
        )
        logger.debug(
            "Round %d dealt: dealer %s, player %s",
            snapshot.round_number,
            self.dealer_hand,
            self.player_hand,
        )
        return snapshot

    def _maybe_deal_next(self) -> RoundSnapshot | None:
        if not self.auto_deal:
            return None
        return self._deal_round()

    def _deal_card_to_hand(self, hand: Hand) -> Card:
        """Deal a card to a hand."""
        card = self.shoe.draw()
        hand.add_card(card)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card),
            hand="dealer" if hand is self.dealer_hand else "player",
            hand_value=hand.value,
        )
        return card

    def _deal_dealer_hit(self) -> Card:
        card = self.shoe.draw()
        new_value = hand_value([*self.dealer_hand.cards, card])
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card),
            hand="dealer",
            hand_value=new_value,
        )
        self.events.emit_new(EventType.DEALER_HITS, hand_value=new_value)
        return card

    def _settle(self, settlement: Settlement) -> None:
        """Apply the settlement and announce it."""
        self.session.apply(settlement)

        if settlement.outcome == Outcome.WIN:
            self.events.emit_new(EventType.PLAYER_WINS, amount=settlement.delta)
        elif settlement.outcome == Outcome.PUSH:
            self.events.emit_new(EventType.PUSH, amount=settlement.delta)
        else:
            self.events.emit_new(EventType.PLAYER_LOSES, amount=-settlement.delta)

        self.events.emit_new(
            EventType.ROUND_ENDED,
            outcome=settlement.outcome.value,
            result=settlement.delta,
            message=settlement.message,
            bankroll=self.session.bankroll,
        )
        logger.info(
            "Round settled: %s (%+d), bankroll %d",
            settlement.outcome.value,
            settlement.delta,
            self.session.bankroll,
        )

    def _on_shoe_shuffled(self) -> None:
        self.events.emit_new(EventType.SHOE_SHUFFLED, cards=self.shoe.cards_remaining)

    def _reject(self, action: str) -> None:
        """Signal an action that the current state does not allow."""
        logger.warning("Rejected %s in state %s", action, self.state.name)
        self.events.emit_new(
            EventType.INVALID_ACTION,
            message=f"Cannot {action} now",
            state=self.state.name,
        )
        raise InvalidActionError(action, self.state)
