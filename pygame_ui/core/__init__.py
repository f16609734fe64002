"""Core systems for the blackjack table UI.

Only the pygame-free engine adapter is re-exported here; import
``pygame_ui.core.scene_manager`` directly for the scene manager.
"""

from pygame_ui.core.engine_adapter import CardView, EngineAdapter, HandView, TableView

__all__ = [
    "CardView",
    "EngineAdapter",
    "HandView",
    "TableView",
]
