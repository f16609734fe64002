"""Round state enumeration."""

from enum import Enum, auto


class RoundState(Enum):
    """
    Round state machine states.

    Flow: NOT_STARTED → PLAYER_TURN → (DEALER_TURN) → SETTLED → PLAYER_TURN ...

    SETTLED is left straight away when the next round is auto-dealt.
    """

    # No round dealt yet
    NOT_STARTED = auto()

    # Player may hit or stand
    PLAYER_TURN = auto()

    # Dealer draws to the stand threshold
    DEALER_TURN = auto()

    # Bet paid out or taken
    SETTLED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()
