"""
Tenzies - Game Event Definitions

Event types and payloads published by the game controller, and the
classification of a state transition into an event.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from src.engine.base import GamePhase, GameState


class GameEvent(Enum):
    """Events that can occur during a game."""

    GAME_STARTED = auto()
    DICE_ROLLED = auto()
    DIE_HELD = auto()
    DIE_RELEASED = auto()
    TIMER_TICKED = auto()
    GAME_WON = auto()
    GAME_RESET = auto()
    BEST_SCORE_UPDATED = auto()


@dataclass
class EventPayload:
    """Wrapper for event data."""

    event: GameEvent
    state: GameState
    data: dict[str, Any] = field(default_factory=dict)


def classify_transition(previous: GameState, current: GameState) -> GameEvent | None:
    """Determine the event for a move from ``previous`` to ``current``.

    Winning is reported separately by the controller, since a single
    transition can both roll the dice and win the game.
    """
    if current is previous:
        return None

    prev_ids = {die.id for die in previous.dice}
    if not prev_ids.intersection(die.id for die in current.dice):
        return GameEvent.GAME_RESET

    if current.roll_count != previous.roll_count:
        if previous.phase is GamePhase.IDLE:
            return GameEvent.GAME_STARTED
        return GameEvent.DICE_ROLLED

    if current.held_count > previous.held_count:
        return GameEvent.DIE_HELD
    if current.held_count < previous.held_count:
        return GameEvent.DIE_RELEASED

    if current.elapsed_seconds != previous.elapsed_seconds:
        return GameEvent.TIMER_TICKED

    return None
