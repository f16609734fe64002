"""Tests for the round engine."""

import pytest

from core.game import (
    BlackjackGame,
    EventType,
    InvalidActionError,
    RoundState,
    Session,
)
from core.game.events import HISTORY_LIMIT
from core.rules import Outcome, Settlement

from helpers import StackedShoe, cards


class TestStartRound:
    """Dealing a round."""

    def test_initial_state(self, game):
        assert game.state == RoundState.NOT_STARTED
        assert game.bankroll == 1000
        assert game.current_bet == 5

    def test_deal_order(self, stacked_game):
        """Dealer gets the first card, the player the next two."""
        game = stacked_game("KS", "2H", "3C")
        snapshot = game.start_round()

        assert [c.display_name for c in snapshot.dealer_hand] == ["King of Spades"]
        assert [c.display_name for c in snapshot.player_hand] == ["Two of Hearts", "Three of Clubs"]
        assert snapshot.dealer_total == 10
        assert snapshot.player_total == 5
        assert snapshot.bankroll == 1000
        assert snapshot.current_bet == 5
        assert game.state == RoundState.PLAYER_TURN

    def test_start_round_twice_rejected(self, game):
        game.start_round()
        with pytest.raises(InvalidActionError):
            game.start_round()

    def test_two_aces_do_not_bust_on_deal(self, stacked_game):
        """A-A totals 22 but only a hit can bust the player."""
        game = stacked_game("10S", "AH", "AC")
        snapshot = game.start_round()
        assert snapshot.player_total == 22
        assert game.state == RoundState.PLAYER_TURN


class TestHit:
    """Player hits."""

    def test_hit_without_bust(self, stacked_game):
        game = stacked_game("5S", "2H", "3C", "4D")
        game.start_round()

        result = game.hit()

        assert not result.busted
        assert result.player_total == 9
        assert len(result.player_hand) == 3
        assert result.bankroll_delta is None
        assert result.next_round is None
        assert game.state == RoundState.PLAYER_TURN

    def test_hit_bust_loses_bet_and_deals_next_round(self, stacked_game):
        game = stacked_game("5S", "10H", "9C", "KD")
        game.start_round()

        result = game.hit()

        assert result.busted
        assert result.player_total == 29
        assert len(result.player_hand) == 3
        assert result.bankroll == 995
        assert result.bankroll_delta == -5
        assert result.settlement.outcome == Outcome.BUST
        assert result.settlement.message == "You are bust! You lose £5"

        assert result.next_round is not None
        assert len(result.next_round.player_hand) == 2
        assert len(result.next_round.dealer_hand) == 1
        assert game.state == RoundState.PLAYER_TURN

    def test_hit_before_start_rejected(self, game):
        with pytest.raises(InvalidActionError) as exc_info:
            game.hit()

        assert exc_info.value.action == "hit"
        assert exc_info.value.state == RoundState.NOT_STARTED
        assert game.events.history[-1].event_type == EventType.INVALID_ACTION


class TestStand:
    """Player stands and the dealer plays out."""

    def test_dealer_bust_full_round(self, stacked_game):
        """Stand on 18, dealer goes 10 -> 16 -> 26."""
        game = stacked_game("10S", "10H", "8C", "6D", "KS")
        game.start_round()

        result = game.stand()

        assert result.dealer_total == 26
        assert len(result.dealer_hand) == 3
        assert result.player_total == 18
        assert result.outcome == Outcome.WIN
        assert result.bankroll_delta == 10
        assert result.bankroll == 1010
        assert game.bankroll == 1010

        assert result.next_round is not None
        assert len(result.next_round.player_hand) == 2
        assert len(result.next_round.dealer_hand) == 1
        assert result.next_round.bankroll == 1010
        assert game.state == RoundState.PLAYER_TURN

    def test_dealer_lone_ace_stands(self, stacked_game):
        """A single dealer Ace scores 21, so the dealer draws nothing."""
        game = stacked_game("AS", "10H", "9C")
        game.start_round()
        remaining = game.shoe.cards_remaining

        result = game.stand()

        assert len(result.dealer_hand) == 1
        assert result.dealer_total == 21
        assert result.outcome == Outcome.LOSS
        assert result.bankroll == 995
        # Only the next round's three cards left the shoe
        assert game.shoe.cards_remaining == remaining - 3

    def test_push_returns_stake(self, stacked_game):
        game = stacked_game("10S", "10H", "9C", "9D")
        game.start_round()

        result = game.stand()

        assert result.outcome == Outcome.PUSH
        assert result.outcome_message == "It's a draw. You get back your bet of £5"
        assert result.bankroll == 1005

    def test_player_over_21_loses_to_standing_dealer(self, stacked_game):
        game = stacked_game("10S", "AH", "AC", "7D")
        game.start_round()

        result = game.stand()

        assert result.dealer_total == 17
        assert result.player_total == 22
        assert result.outcome == Outcome.LOSS
        assert result.bankroll == 995

    def test_dealer_bust_beats_player_over_21(self, stacked_game):
        game = stacked_game("10S", "AH", "AC", "6D", "KS")
        game.start_round()

        result = game.stand()

        assert result.dealer_total == 26
        assert result.outcome == Outcome.WIN
        assert result.bankroll == 1010

    def test_stand_before_start_rejected(self, game):
        with pytest.raises(InvalidActionError):
            game.stand()

    def test_without_auto_deal(self, stacked_game):
        game = stacked_game("10S", "10H", "9C", "8D", auto_deal=False)
        game.start_round()

        result = game.stand()

        assert result.next_round is None
        assert game.state == RoundState.SETTLED
        with pytest.raises(InvalidActionError):
            game.hit()

        game.start_round()
        assert game.state == RoundState.PLAYER_TURN


class TestEvents:
    """Events emitted by the engine."""

    def test_round_ended_before_next_round(self, stacked_game):
        game = stacked_game("10S", "10H", "8C", "6D", "KS")
        game.start_round()
        game.events.clear_history()

        game.stand()

        types = [event.event_type for event in game.events.history]
        assert types.index(EventType.PLAYER_STAND) < types.index(EventType.DEALER_HITS)
        assert EventType.DEALER_BUSTS in types
        assert types.index(EventType.PLAYER_WINS) < types.index(EventType.ROUND_ENDED)
        assert types.index(EventType.ROUND_ENDED) < types.index(EventType.ROUND_STARTED)

    def test_round_ended_payload(self, stacked_game):
        game = stacked_game("5S", "10H", "9C", "KD")
        ended = []
        game.subscribe(ended.append, EventType.ROUND_ENDED)
        game.start_round()

        game.hit()

        assert len(ended) == 1
        assert ended[0].data["outcome"] == "bust"
        assert ended[0].data["result"] == -5
        assert ended[0].data["bankroll"] == 995

    def test_reshuffle_notification(self):
        # Player holds 5, so the hit after the reshuffle cannot bust
        shoe = StackedShoe(cards("KS", "2H", "3C"), num_decks=1, reshuffle_threshold=3)
        game = BlackjackGame(shoe=shoe)
        shuffles = []
        game.subscribe(shuffles.append, EventType.SHOE_SHUFFLED)

        game.start_round()
        assert shuffles == []

        game.hit()

        assert len(shuffles) == 1
        assert game.shoe.shuffle_count == 1


class TestSession:
    """Session bookkeeping across rounds."""

    def test_apply(self):
        session = Session()
        session.apply(Settlement(Outcome.WIN, 10, "You win £10"))
        assert session.bankroll == 1010
        assert session.rounds_played == 1

    def test_round_numbers(self, stacked_game):
        game = stacked_game("10S", "10H", "8C", "6D", "KS")
        assert game.start_round().round_number == 1
        assert game.stand().next_round.round_number == 2

    def test_bankroll_tracks_every_settlement(self, rng):
        game = BlackjackGame(rng=rng)
        deltas = []
        game.subscribe(lambda e: deltas.append(e.data["result"]), EventType.ROUND_ENDED)

        game.start_round()
        for _ in range(300):
            if game.snapshot().player_total < 15:
                game.hit()
            else:
                game.stand()
            assert game.state == RoundState.PLAYER_TURN

        assert game.bankroll == 1000 + sum(deltas)
        assert set(deltas) <= {-5, 5, 10}


def test_event_history_stays_bounded_over_long_session(rng):
    """Thousands of rounds leave only the most recent events in memory."""
    game = BlackjackGame(rng=rng)
    game.start_round()

    for _ in range(2000):
        game.stand()

    assert len(game.events.history) <= HISTORY_LIMIT
    assert game.events.history[-1].event_type == EventType.ROUND_STARTED


def test_machine_states_and_triggers_match_round_states():
    """Every transition in the engine's table moves between known round states."""
    names = {state.name.lower() for state in RoundState}
    assert set(BlackjackGame.STATES) == names

    for transition in BlackjackGame.TRANSITIONS:
        sources = transition["source"]
        sources = sources if isinstance(sources, list) else [sources]
        assert set(sources) <= names
        assert transition["dest"] in names

    deal = next(t for t in BlackjackGame.TRANSITIONS if t["trigger"] == "deal")
    assert set(deal["source"]) == {"not_started", "settled"}
