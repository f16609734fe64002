"""Panel components with rounded borders and semi-transparent background."""

from typing import Optional, Sequence, Tuple

import pygame

from pygame_ui.config import COLORS, DIMENSIONS


class Panel:
    """A rounded rectangle panel with border and optional transparency.

    Position is given as the top-left corner.
    """

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        bg_color: Tuple[int, int, int] = COLORS.PANEL_BG,
        bg_alpha: int = 200,
        border_color: Tuple[int, int, int] = COLORS.PANEL_BORDER,
        border_width: int = 2,
    ):
        """Initialize a panel.

        Args:
            x: Left edge
            y: Top edge
            width: Panel width
            height: Panel height
            bg_color: Background color (RGB)
            bg_alpha: Background transparency (0-255)
            border_color: Border color (RGB)
            border_width: Border thickness (0 for no border)
        """
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.bg_color = bg_color
        self.bg_alpha = bg_alpha
        self.border_color = border_color
        self.border_width = border_width

        self._surface: Optional[pygame.Surface] = None

    @property
    def rect(self) -> pygame.Rect:
        """Get the panel's rectangle."""
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    def set_size(self, width: float, height: float) -> None:
        """Resize the panel, keeping the top-left corner."""
        if (width, height) != (self.width, self.height):
            self.width = width
            self.height = height
            self._surface = None

    def _render(self) -> pygame.Surface:
        """Render the panel surface."""
        surface = pygame.Surface((int(self.width), int(self.height)), pygame.SRCALPHA)
        rect = pygame.Rect(0, 0, int(self.width), int(self.height))

        pygame.draw.rect(
            surface,
            (*self.bg_color, self.bg_alpha),
            rect,
            border_radius=DIMENSIONS.PANEL_CORNER_RADIUS,
        )
        if self.border_width > 0:
            pygame.draw.rect(
                surface,
                self.border_color,
                rect,
                width=self.border_width,
                border_radius=DIMENSIONS.PANEL_CORNER_RADIUS,
            )
        return surface

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the panel."""
        if self._surface is None:
            self._surface = self._render()
        surface.blit(self._surface, (int(self.x), int(self.y)))


class HandPanel(Panel):
    """Panel listing one hand: a title, one line per card and a total."""

    def __init__(self, x: float, y: float, title: str, **kwargs):
        super().__init__(
            x, y, DIMENSIONS.HAND_PANEL_WIDTH, DIMENSIONS.HAND_PANEL_HEIGHT, **kwargs
        )
        self.title = title
        self.card_lines: list[Tuple[str, bool]] = []  # (name, is_red)
        self.total_text = "Total: "

        self._title_font: Optional[pygame.font.Font] = None
        self._content_font: Optional[pygame.font.Font] = None

    @property
    def title_font(self) -> pygame.font.Font:
        if self._title_font is None:
            self._title_font = pygame.font.Font(None, 30)
        return self._title_font

    @property
    def content_font(self) -> pygame.font.Font:
        if self._content_font is None:
            self._content_font = pygame.font.Font(None, 26)
        return self._content_font

    def set_hand(self, card_lines: Sequence[Tuple[str, bool]], total_text: str) -> None:
        """Replace the displayed cards and total."""
        self.card_lines = list(card_lines)
        self.total_text = total_text

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the panel with its cards."""
        super().draw(surface)

        padding = DIMENSIONS.PANEL_PADDING
        title = self.title_font.render(self.title, True, COLORS.GOLD)
        surface.blit(title, title.get_rect(centerx=int(self.center_x), top=int(self.y) + padding))

        y_offset = int(self.y) + padding + 40
        for name, is_red in self.card_lines:
            color = COLORS.CARD_RED if is_red else COLORS.CARD_BLACK
            line = self.content_font.render(name, True, color)
            surface.blit(line, line.get_rect(centerx=int(self.center_x), top=y_offset))
            y_offset += DIMENSIONS.HAND_LINE_HEIGHT

        total = self.title_font.render(self.total_text, True, COLORS.TEXT_WHITE)
        surface.blit(
            total,
            total.get_rect(
                centerx=int(self.center_x),
                bottom=int(self.y + self.height) - padding,
            ),
        )
