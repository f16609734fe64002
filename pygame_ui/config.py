"""Configuration constants for the PyGame blackjack table."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Colors:
    """Color palette for the blackjack UI."""

    # Felt and background
    FELT_GREEN: Tuple[int, int, int] = (34, 87, 59)

    # Card text
    CARD_RED: Tuple[int, int, int] = (222, 90, 90)
    CARD_BLACK: Tuple[int, int, int] = (235, 235, 240)

    # UI accents
    GOLD: Tuple[int, int, int] = (255, 200, 87)

    # Results
    WIN: Tuple[int, int, int] = (100, 200, 100)
    LOSE: Tuple[int, int, int] = (200, 100, 100)

    # Text
    TEXT_WHITE: Tuple[int, int, int] = (240, 240, 240)
    TEXT_MUTED: Tuple[int, int, int] = (150, 150, 160)

    # Buttons
    BUTTON_DEFAULT: Tuple[int, int, int] = (60, 70, 90)
    BUTTON_HOVER: Tuple[int, int, int] = (80, 95, 120)
    BUTTON_PRESSED: Tuple[int, int, int] = (45, 55, 70)
    BUTTON_DISABLED: Tuple[int, int, int] = (50, 50, 55)
    HIT_GREEN: Tuple[int, int, int] = (46, 140, 70)
    HIT_GREEN_HOVER: Tuple[int, int, int] = (60, 170, 90)
    STAND_RED: Tuple[int, int, int] = (160, 50, 50)
    STAND_RED_HOVER: Tuple[int, int, int] = (190, 70, 70)

    # Panels
    PANEL_BG: Tuple[int, int, int] = (35, 38, 48)
    PANEL_BORDER: Tuple[int, int, int] = (120, 120, 130)

    # Dialog overlay
    OVERLAY: Tuple[int, int, int, int] = (0, 0, 0, 150)


@dataclass(frozen=True)
class Dimensions:
    """Dimension constants for layout and sizing."""

    # Screen
    SCREEN_WIDTH: int = 800
    SCREEN_HEIGHT: int = 540
    TARGET_FPS: int = 60

    # Layout
    CENTER_X: int = SCREEN_WIDTH // 2
    CENTER_Y: int = SCREEN_HEIGHT // 2
    HAND_PANEL_WIDTH: int = 340
    HAND_PANEL_HEIGHT: int = 360
    HAND_PANEL_TOP: int = 30
    HAND_LINE_HEIGHT: int = 26
    BUTTON_ROW_Y: int = 460

    # UI Elements
    BUTTON_WIDTH: int = 120
    BUTTON_HEIGHT: int = 45
    BUTTON_CORNER_RADIUS: int = 6
    PANEL_PADDING: int = 16
    PANEL_CORNER_RADIUS: int = 12

    # Dialog
    DIALOG_WIDTH: int = 460
    DIALOG_MIN_HEIGHT: int = 160


@dataclass(frozen=True)
class AnimationConfig:
    """Animation timing constants."""

    # Durations (in seconds)
    TOAST_DURATION: float = 1.5


# Global instances for easy import
COLORS = Colors()
DIMENSIONS = Dimensions()
ANIMATION = AnimationConfig()
