"""
Tenzies Real-time Layer.

Game clock, event publishing and the controller that owns a session.
"""

from src.realtime.controller import GameController, GameView
from src.realtime.events import EventPayload, GameEvent, classify_transition
from src.realtime.ticker import IntervalTicker

__all__ = [
    "classify_transition",
    "EventPayload",
    "GameController",
    "GameEvent",
    "GameView",
    "IntervalTicker",
]
