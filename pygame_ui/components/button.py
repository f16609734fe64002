"""Clickable button with hover and press states."""

from enum import Enum, auto
from typing import Callable, Optional, Tuple

import pygame

from pygame_ui.config import COLORS, DIMENSIONS


class ButtonState(Enum):
    """Visual state of a button."""

    NORMAL = auto()
    HOVERED = auto()
    PRESSED = auto()
    DISABLED = auto()


class Button:
    """A centered, rounded button that fires ``on_click`` on mouse release."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float = DIMENSIONS.BUTTON_WIDTH,
        height: float = DIMENSIONS.BUTTON_HEIGHT,
        text: str = "Button",
        font_size: int = 28,
        on_click: Optional[Callable[[], None]] = None,
        bg_color: Tuple[int, int, int] = None,
        hover_color: Tuple[int, int, int] = None,
        text_color: Tuple[int, int, int] = COLORS.TEXT_WHITE,
        enabled: bool = True,
    ):
        """Initialize a button.

        Args:
            x: Center x position
            y: Center y position
            width: Button width
            height: Button height
            text: Button text
            font_size: Text font size
            on_click: Callback function when clicked
            bg_color: Normal background color
            hover_color: Hovered background color
            text_color: Text color
            enabled: Whether button is interactive
        """
        self.text = text
        self.font_size = font_size
        self.on_click = on_click
        self.enabled = enabled

        self.bg_color = bg_color or COLORS.BUTTON_DEFAULT
        self.hover_color = hover_color or COLORS.BUTTON_HOVER
        self.pressed_color = COLORS.BUTTON_PRESSED
        self.text_color = text_color

        self.width = width
        self.height = height
        self.center_x = x
        self.center_y = y

        self.state = ButtonState.NORMAL if enabled else ButtonState.DISABLED
        self._is_pressed = False
        self.scale = 1.0
        self.target_scale = 1.0

        self._font: Optional[pygame.font.Font] = None

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.Font(None, self.font_size)
        return self._font

    @property
    def rect(self) -> pygame.Rect:
        """Get the button's rectangle."""
        return pygame.Rect(
            int(self.center_x - self.width / 2),
            int(self.center_y - self.height / 2),
            int(self.width),
            int(self.height),
        )

    def set_enabled(self, enabled: bool) -> None:
        """Enable or disable the button."""
        self.enabled = enabled
        self._is_pressed = False
        self.state = ButtonState.NORMAL if enabled else ButtonState.DISABLED
        self.target_scale = 1.0

    def click(self) -> bool:
        """Fire the click callback as if the button was pressed.

        Returns:
            True if the callback ran
        """
        if not self.enabled or self.on_click is None:
            return False
        self.on_click()
        return True

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Handle a pygame event.

        Returns:
            True if event was consumed (clicked)
        """
        if not self.enabled:
            return False

        if event.type == pygame.MOUSEMOTION:
            inside = self.rect.collidepoint(event.pos)
            if not self._is_pressed:
                self.state = ButtonState.HOVERED if inside else ButtonState.NORMAL
                self.target_scale = 1.05 if inside else 1.0

        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1 and self.rect.collidepoint(event.pos):
                self.state = ButtonState.PRESSED
                self._is_pressed = True
                self.target_scale = 0.95

        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button == 1 and self._is_pressed:
                self._is_pressed = False
                if self.rect.collidepoint(event.pos):
                    self.state = ButtonState.HOVERED
                    self.target_scale = 1.05
                    return self.click()
                self.state = ButtonState.NORMAL
                self.target_scale = 1.0

        return False

    def update(self, dt: float) -> None:
        """Ease the scale towards its target."""
        self.scale += (self.target_scale - self.scale) * min(1.0, 15.0 * dt)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the button."""
        if not self.enabled:
            bg_color = COLORS.BUTTON_DISABLED
            text_color = COLORS.TEXT_MUTED
        elif self.state == ButtonState.PRESSED:
            bg_color = self.pressed_color
            text_color = self.text_color
        elif self.state == ButtonState.HOVERED:
            bg_color = self.hover_color
            text_color = self.text_color
        else:
            bg_color = self.bg_color
            text_color = self.text_color

        width = int(self.width * self.scale)
        height = int(self.height * self.scale)
        rect = pygame.Rect(0, 0, width, height)
        rect.center = (int(self.center_x), int(self.center_y))

        pygame.draw.rect(
            surface, bg_color, rect, border_radius=DIMENSIONS.BUTTON_CORNER_RADIUS
        )

        text_surface = self.font.render(self.text, True, text_color)
        surface.blit(text_surface, text_surface.get_rect(center=rect.center))


class ActionButton(Button):
    """Game action button (Hit, Stand) with a keyboard shortcut."""

    def __init__(
        self,
        x: float,
        y: float,
        text: str,
        action: str,
        on_click: Optional[Callable[[], None]] = None,
        hotkey: Optional[int] = None,
        **kwargs,
    ):
        """Initialize an action button.

        Args:
            x: X position
            y: Y position
            text: Button text
            action: Action identifier
            on_click: Click callback
            hotkey: pygame key constant that triggers the action
        """
        super().__init__(x=x, y=y, text=text, on_click=on_click, **kwargs)
        self.action = action
        self.hotkey = hotkey

    def handle_key(self, key: int) -> bool:
        """Trigger the action if ``key`` is this button's hotkey."""
        if self.hotkey is not None and key == self.hotkey:
            return self.click()
        return False

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the action button with its hotkey hint."""
        super().draw(surface)

        if self.hotkey is not None and self.enabled:
            hint_font = pygame.font.Font(None, 18)
            hint = hint_font.render(
                f"[{pygame.key.name(self.hotkey).upper()}]", True, COLORS.TEXT_MUTED
            )
            hint_rect = hint.get_rect(
                centerx=int(self.center_x),
                top=int(self.center_y + self.height / 2 + 4),
            )
            surface.blit(hint, hint_rect)
