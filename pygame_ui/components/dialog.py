"""Modal message dialog with an OK button."""

from collections import deque
from typing import Deque, List, Optional

import pygame

from pygame_ui.components.button import Button
from pygame_ui.components.panel import Panel
from pygame_ui.config import COLORS, DIMENSIONS

DISMISS_KEYS = (pygame.K_RETURN, pygame.K_SPACE, pygame.K_ESCAPE, pygame.K_KP_ENTER)


class MessageDialog:
    """Shows queued messages one at a time until each is dismissed.

    Messages may contain newlines; each line is drawn separately.
    """

    def __init__(self, title: str = "Message"):
        self.title = title
        self._queue: Deque[str] = deque()
        self._panel = Panel(
            DIMENSIONS.CENTER_X - DIMENSIONS.DIALOG_WIDTH / 2,
            0,
            DIMENSIONS.DIALOG_WIDTH,
            DIMENSIONS.DIALOG_MIN_HEIGHT,
            bg_alpha=245,
            border_color=COLORS.GOLD,
        )
        self._ok_button = Button(
            DIMENSIONS.CENTER_X,
            0,
            width=100,
            height=38,
            text="OK",
            on_click=self.dismiss,
        )
        self._font: Optional[pygame.font.Font] = None

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.Font(None, 26)
        return self._font

    @property
    def is_open(self) -> bool:
        return bool(self._queue)

    @property
    def current_message(self) -> Optional[str]:
        return self._queue[0] if self._queue else None

    def show(self, message: str) -> None:
        """Queue a message behind any already showing."""
        self._queue.append(message)

    def dismiss(self) -> None:
        """Close the message currently showing."""
        if self._queue:
            self._queue.popleft()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Consume every event while open."""
        if not self.is_open:
            return False
        if event.type == pygame.KEYDOWN and event.key in DISMISS_KEYS:
            self.dismiss()
            return True
        self._ok_button.handle_event(event)
        return True

    def update(self, dt: float) -> None:
        self._ok_button.update(dt)

    def _lines(self) -> List[str]:
        return self.current_message.split("\n") if self.current_message else []

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the overlay, panel, message and OK button."""
        if not self.is_open:
            return

        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        overlay.fill(COLORS.OVERLAY)
        surface.blit(overlay, (0, 0))

        lines = self._lines()
        line_height = 26
        padding = DIMENSIONS.PANEL_PADDING
        height = max(
            DIMENSIONS.DIALOG_MIN_HEIGHT,
            padding * 3 + 30 + len(lines) * line_height + self._ok_button.height,
        )
        self._panel.set_size(self._panel.width, height)
        self._panel.y = DIMENSIONS.CENTER_Y - height / 2
        self._panel.draw(surface)

        title = self.font.render(self.title, True, COLORS.GOLD)
        surface.blit(
            title,
            title.get_rect(centerx=DIMENSIONS.CENTER_X, top=int(self._panel.y) + padding),
        )

        y_offset = int(self._panel.y) + padding + 30
        for line in lines:
            rendered = self.font.render(line, True, COLORS.TEXT_WHITE)
            surface.blit(rendered, rendered.get_rect(centerx=DIMENSIONS.CENTER_X, top=y_offset))
            y_offset += line_height

        self._ok_button.center_y = self._panel.y + height - padding - self._ok_button.height / 2
        self._ok_button.draw(surface)
