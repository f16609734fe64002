"""Floating toast notifications for round results."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple

import pygame

from pygame_ui.config import ANIMATION, COLORS


class ToastType(Enum):
    """Types of toast notifications."""

    INFO = auto()
    WIN = auto()
    LOSE = auto()
    PUSH = auto()


TOAST_COLORS = {
    ToastType.INFO: COLORS.TEXT_WHITE,
    ToastType.WIN: COLORS.GOLD,
    ToastType.LOSE: COLORS.LOSE,
    ToastType.PUSH: COLORS.TEXT_MUTED,
}


@dataclass
class Toast:
    """A single floating toast notification."""

    text: str
    x: float
    y: float
    toast_type: ToastType = ToastType.INFO
    duration: float = ANIMATION.TOAST_DURATION
    font_size: int = 36

    elapsed: float = field(default=0.0, init=False)
    alpha: float = field(default=255.0, init=False)
    offset_y: float = field(default=0.0, init=False)
    completed: bool = field(default=False, init=False)

    _font: Optional[pygame.font.Font] = field(default=None, init=False)

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.Font(None, self.font_size)
        return self._font

    @property
    def color(self) -> Tuple[int, int, int]:
        return TOAST_COLORS.get(self.toast_type, COLORS.TEXT_WHITE)

    def update(self, dt: float) -> bool:
        """Advance the float-and-fade animation.

        Returns:
            True if still active, False if completed
        """
        self.elapsed += dt
        progress = self.elapsed / self.duration

        if progress >= 1.0:
            self.completed = True
            return False

        self.offset_y = -progress * 40

        # Fade out in last 30%
        if progress > 0.7:
            self.alpha = 255 * (1.0 - (progress - 0.7) / 0.3)
        else:
            self.alpha = 255

        return True

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the toast."""
        if self.completed:
            return

        rendered = self.font.render(self.text, True, self.color)
        rendered.set_alpha(int(self.alpha))
        rect = rendered.get_rect(center=(int(self.x), int(self.y + self.offset_y)))
        surface.blit(rendered, rect)


class ToastManager:
    """Manages multiple toast notifications."""

    def __init__(self, max_toasts: int = 5):
        self.toasts: List[Toast] = []
        self.max_toasts = max_toasts

    def spawn(
        self,
        text: str,
        x: float,
        y: float,
        toast_type: ToastType = ToastType.INFO,
        duration: float = None,
    ) -> Toast:
        """Spawn a new toast notification."""
        toast = Toast(
            text=text,
            x=x,
            y=y,
            toast_type=toast_type,
            duration=duration if duration is not None else ANIMATION.TOAST_DURATION,
        )
        self.toasts.append(toast)

        while len(self.toasts) > self.max_toasts:
            self.toasts.pop(0)

        return toast

    def spawn_result(self, outcome: str, delta: int, x: float, y: float) -> Toast:
        """Spawn a toast for a settled round.

        Args:
            outcome: "win", "push", "loss" or "bust"
            delta: Bankroll change for the round
            x: X position
            y: Y position
        """
        if outcome == "win":
            text, toast_type = f"WIN +£{delta}", ToastType.WIN
        elif outcome == "push":
            text, toast_type = "PUSH", ToastType.PUSH
        elif outcome == "bust":
            text, toast_type = f"BUST -£{abs(delta)}", ToastType.LOSE
        else:
            text, toast_type = f"LOSE -£{abs(delta)}", ToastType.LOSE

        return self.spawn(text, x, y, toast_type=toast_type, duration=2.0)

    def update(self, dt: float) -> None:
        """Update all toasts."""
        self.toasts = [toast for toast in self.toasts if toast.update(dt)]

    def draw(self, surface: pygame.Surface) -> None:
        """Draw all toasts."""
        for toast in self.toasts:
            toast.draw(surface)

    def clear(self) -> None:
        """Remove all toasts."""
        self.toasts.clear()
