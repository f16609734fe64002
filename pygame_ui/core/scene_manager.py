"""Scene manager holding the registered scenes and the active one."""

from typing import Dict, Optional, TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from pygame_ui.scenes.base_scene import BaseScene


class SceneManager:
    """Named scene registry with a single active scene."""

    def __init__(self, screen: pygame.Surface):
        """Initialize the scene manager.

        Args:
            screen: The main pygame display surface
        """
        self.screen = screen
        self._scenes: Dict[str, "BaseScene"] = {}
        self._current: Optional["BaseScene"] = None

    @property
    def current_scene(self) -> Optional["BaseScene"]:
        """Get the currently active scene."""
        return self._current

    def register(self, name: str, scene: "BaseScene") -> None:
        """Register a scene with a name."""
        self._scenes[name] = scene
        scene.scene_manager = self

    def change_to(self, scene_name: str) -> None:
        """Make a registered scene the active one.

        Raises:
            KeyError: If no scene is registered under ``scene_name``
        """
        scene = self._scenes[scene_name]
        if self._current is not None:
            self._current.on_exit()
        self._current = scene
        scene.on_enter()

    def handle_event(self, event: pygame.event.Event) -> None:
        if self._current is not None:
            self._current.handle_event(event)

    def update(self, dt: float) -> None:
        if self._current is not None:
            self._current.update(dt)

    def draw(self) -> None:
        """Draw the active scene and flip the display."""
        if self._current is not None:
            self._current.draw(self.screen)
        pygame.display.flip()
