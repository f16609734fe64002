"""Round engine and state management."""

from core.game.events import GameEvent, EventType, EventEmitter
from core.game.state import RoundState
from core.game.engine import (
    BlackjackGame,
    HitResult,
    InvalidActionError,
    RoundSnapshot,
    Session,
    StandResult,
)

__all__ = [
    "GameEvent",
    "EventType",
    "EventEmitter",
    "RoundState",
    "BlackjackGame",
    "HitResult",
    "InvalidActionError",
    "RoundSnapshot",
    "Session",
    "StandResult",
]
