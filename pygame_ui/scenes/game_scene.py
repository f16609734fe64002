"""Blackjack table scene - integrated with core engine."""

from random import Random
from typing import List, Optional

import pygame

from pygame_ui.config import COLORS, DIMENSIONS
from pygame_ui.core.engine_adapter import EngineAdapter, TableView
from pygame_ui.components.button import ActionButton
from pygame_ui.components.dialog import MessageDialog
from pygame_ui.components.panel import HandPanel
from pygame_ui.components.toast import ToastManager
from pygame_ui.scenes.base_scene import BaseScene

from core.rules import RuleSet


class GameScene(BaseScene):
    """The table: dealer and player hands, Hit/Stand buttons, bet and money."""

    def __init__(self, rules: Optional[RuleSet] = None, rng: Optional[Random] = None):
        super().__init__()
        self._rules = rules
        self._rng = rng

        self.engine: Optional[EngineAdapter] = None
        self.view: Optional[TableView] = None

        self.dealer_panel: Optional[HandPanel] = None
        self.player_panel: Optional[HandPanel] = None
        self.buttons: List[ActionButton] = []
        self.dialog = MessageDialog(title="Blackjack")
        self.toast_manager = ToastManager()

        self._label_font: Optional[pygame.font.Font] = None

    @property
    def label_font(self) -> pygame.font.Font:
        if self._label_font is None:
            self._label_font = pygame.font.Font(None, 30)
        return self._label_font

    def on_enter(self) -> None:
        """Create the engine and deal the first round."""
        super().on_enter()

        self.engine = EngineAdapter(rules=self._rules, rng=self._rng)
        self.engine.set_callbacks(
            on_message=self.dialog.show,
            on_round_result=self._on_round_result,
            on_invalid_action=self._on_invalid_action,
        )

        gap = (DIMENSIONS.SCREEN_WIDTH - 2 * DIMENSIONS.HAND_PANEL_WIDTH) / 3
        self.dealer_panel = HandPanel(gap, DIMENSIONS.HAND_PANEL_TOP, "Dealer's hand")
        self.player_panel = HandPanel(
            2 * gap + DIMENSIONS.HAND_PANEL_WIDTH,
            DIMENSIONS.HAND_PANEL_TOP,
            "Player's hand",
        )
        self._setup_buttons()

        self._refresh(self.engine.start())

    def _setup_buttons(self) -> None:
        """Create the Hit and Stand buttons."""
        y = DIMENSIONS.BUTTON_ROW_Y
        self.buttons = [
            ActionButton(
                x=110,
                y=y,
                text="Hit",
                action="hit",
                on_click=self._on_hit,
                hotkey=pygame.K_h,
                bg_color=COLORS.HIT_GREEN,
                hover_color=COLORS.HIT_GREEN_HOVER,
            ),
            ActionButton(
                x=250,
                y=y,
                text="Stand",
                action="stand",
                on_click=self._on_stand,
                hotkey=pygame.K_s,
                bg_color=COLORS.STAND_RED,
                hover_color=COLORS.STAND_RED_HOVER,
            ),
        ]

    def _refresh(self, view: TableView) -> None:
        """Push a table view into the panels and buttons."""
        self.view = view
        self.dealer_panel.set_hand(
            [(card.name, card.is_red) for card in view.dealer.cards],
            view.dealer.total_text,
        )
        self.player_panel.set_hand(
            [(card.name, card.is_red) for card in view.player.cards],
            view.player.total_text,
        )
        for button in self.buttons:
            allowed = view.can_hit if button.action == "hit" else view.can_stand
            button.set_enabled(allowed)

    def _on_hit(self) -> None:
        self._refresh(self.engine.hit())

    def _on_stand(self) -> None:
        self._refresh(self.engine.stand())

    def _on_round_result(self, outcome: str, delta: int) -> None:
        self.toast_manager.spawn_result(
            outcome,
            delta,
            DIMENSIONS.CENTER_X,
            DIMENSIONS.HAND_PANEL_TOP + DIMENSIONS.HAND_PANEL_HEIGHT / 2,
        )

    def _on_invalid_action(self, message: str) -> None:
        self.toast_manager.spawn(message, DIMENSIONS.CENTER_X, DIMENSIONS.BUTTON_ROW_Y - 40)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Route input to the dialog first, then the action buttons."""
        if self.dialog.handle_event(event):
            return True

        if event.type == pygame.KEYDOWN:
            return any(button.handle_key(event.key) for button in self.buttons)

        for button in self.buttons:
            if button.handle_event(event):
                return True
        return False

    def update(self, dt: float) -> None:
        for button in self.buttons:
            button.update(dt)
        self.dialog.update(dt)
        self.toast_manager.update(dt)

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(COLORS.FELT_GREEN)

        self.dealer_panel.draw(surface)
        self.player_panel.draw(surface)

        for button in self.buttons:
            button.draw(surface)

        if self.view is not None:
            bet = self.label_font.render(self.view.bet_text, True, COLORS.TEXT_WHITE)
            money = self.label_font.render(self.view.money_text, True, COLORS.GOLD)
            y = DIMENSIONS.BUTTON_ROW_Y
            surface.blit(bet, bet.get_rect(left=400, centery=y))
            surface.blit(money, money.get_rect(left=560, centery=y))

        self.toast_manager.draw(surface)
        self.dialog.draw(surface)
