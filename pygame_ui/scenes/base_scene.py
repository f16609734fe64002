"""Base scene class for the table scenes."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

import pygame

if TYPE_CHECKING:
    from pygame_ui.core.scene_manager import SceneManager


class BaseScene(ABC):
    """A screen driven by the application loop.

    The manager calls ``on_enter`` once when the scene is shown, then
    ``handle_event``, ``update`` and ``draw`` every frame.
    """

    def __init__(self):
        self.scene_manager: Optional["SceneManager"] = None
        self.entered = False

    def on_enter(self) -> None:
        self.entered = True

    def on_exit(self) -> None:
        self.entered = False

    @abstractmethod
    def handle_event(self, event: pygame.event.Event) -> bool:
        """Process one input event; return True when it was consumed."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance animations by ``dt`` seconds."""

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Render the scene."""
