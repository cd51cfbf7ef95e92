"""
Tenzies - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. All classes are immutable (frozen dataclasses) so the
controller and the timer thread can share them without copying.
"""

from dataclasses import dataclass
from enum import Enum, auto

NUM_DICE = 10
DIE_FACES = 6


class GamePhase(Enum):
    """Phases of a single game."""
    IDLE = auto()          # Fresh dice, nothing rolled yet
    IN_PROGRESS = auto()   # At least one roll, not won
    WON = auto()           # All dice held and matching


@dataclass(frozen=True)
class Die:
    """
    A single six-sided die.

    Attributes:
        value: Face value (1-6)
        id: Stable identifier, unchanged by rolls and holds
        is_held: Whether the die is frozen between rolls
    """
    value: int
    id: str
    is_held: bool = False

    def __post_init__(self) -> None:
        """Validate the face value."""
        if not (1 <= self.value <= DIE_FACES):
            raise ValueError(
                f"Invalid die value {self.value}. "
                f"Must be between 1 and {DIE_FACES}."
            )


def all_held_and_matching(dice: tuple[Die, ...]) -> bool:
    """True iff there are dice, every one is held, and all show the same value."""
    if not dice:
        return False
    first = dice[0].value
    return all(die.is_held and die.value == first for die in dice)


@dataclass(frozen=True)
class GameState:
    """
    Complete state of a game.

    Attributes:
        dice: Exactly ten dice, in display order
        roll_count: Rolls taken since the last reset
        elapsed_seconds: Seconds spent in progress
    """
    dice: tuple[Die, ...]
    roll_count: int = 0
    elapsed_seconds: int = 0

    def __post_init__(self) -> None:
        """Validate dice count and counters."""
        if len(self.dice) != NUM_DICE:
            raise ValueError(
                f"A game needs exactly {NUM_DICE} dice, got {len(self.dice)}."
            )
        if self.roll_count < 0:
            raise ValueError(f"Roll count cannot be negative, got {self.roll_count}.")
        if self.elapsed_seconds < 0:
            raise ValueError(
                f"Elapsed seconds cannot be negative, got {self.elapsed_seconds}."
            )

    @property
    def values(self) -> tuple[int, ...]:
        """Face values in display order."""
        return tuple(die.value for die in self.dice)

    @property
    def held_count(self) -> int:
        """Number of dice currently held."""
        return sum(1 for die in self.dice if die.is_held)

    @property
    def is_won(self) -> bool:
        """True iff every die is held and all show the same value."""
        return all_held_and_matching(self.dice)

    @property
    def phase(self) -> GamePhase:
        if self.is_won:
            return GamePhase.WON
        if self.roll_count > 0:
            return GamePhase.IN_PROGRESS
        return GamePhase.IDLE

    def find_die(self, die_id: str) -> Die | None:
        """Return the die with the given id, or None."""
        return next((die for die in self.dice if die.id == die_id), None)


@dataclass(frozen=True)
class BestScore:
    """
    Best result ever achieved.

    Both fields are None while no game has been won. A record with only
    one field set is meaningless and treated as unset by ``is_set``.

    Attributes:
        rolls: Fewest rolls taken to win
        time: Seconds taken on that win (tiebreaker)
    """
    rolls: int | None = None
    time: int | None = None

    @property
    def is_set(self) -> bool:
        return self.rolls is not None and self.time is not None

    def is_beaten_by(self, rolls: int, time: int) -> bool:
        """Strict lexicographic improvement: fewer rolls, then less time."""
        if not self.is_set:
            return True
        return (rolls, time) < (self.rolls, self.time)

    def __str__(self) -> str:
        if not self.is_set:
            return "No best score yet"
        return f"{self.rolls} rolls in {self.time}s"
