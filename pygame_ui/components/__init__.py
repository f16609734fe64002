"""UI components for the blackjack table."""

from pygame_ui.components.toast import Toast, ToastManager, ToastType
from pygame_ui.components.panel import Panel, HandPanel
from pygame_ui.components.button import Button, ActionButton
from pygame_ui.components.dialog import MessageDialog

__all__ = [
    "Toast",
    "ToastManager",
    "ToastType",
    "Panel",
    "HandPanel",
    "Button",
    "ActionButton",
    "MessageDialog",
]
