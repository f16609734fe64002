"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_optional_int(name: str) -> int | None:
    """Parse an optional integer environment variable."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    return int(raw)


@dataclass(frozen=True)
class GameConfig:
    """Default table configuration."""

    num_decks: int = 8
    reshuffle_decks: float = 3.5  # Decks dealt before the shoe is rebuilt
    min_cards_before_shuffle: int = 4
    dealer_stands_on: int = 17
    starting_bankroll: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_BANKROLL", "1000"))
    )
    bet: int = field(default_factory=lambda: int(os.getenv("BLACKJACK_BET", "5")))

    @property
    def reshuffle_threshold(self) -> int:
        """Number of cards dealt since the last shuffle that forces a reshuffle."""
        return int(self.reshuffle_decks * 52 * self.num_decks)


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    seed: int | None = field(default_factory=lambda: _parse_optional_int("BLACKJACK_SEED"))
    game: GameConfig = field(default_factory=GameConfig)
    log_level_name: str | None = field(default_factory=lambda: os.getenv("LOG_LEVEL"))

    @property
    def log_level(self) -> str:
        """Resolve the logging level name."""
        if self.log_level_name:
            return self.log_level_name.upper()
        return "DEBUG" if self.debug else "WARNING"


# Global configuration instance
config = AppConfig()
