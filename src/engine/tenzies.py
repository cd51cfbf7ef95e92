"""
Tenzies - Game Engine

Roll ten D6, hold dice between rolls, win when all ten are held and
show the same face.

All methods are stateless class methods operating on immutable data.
Every transition returns a new GameState; inputs are never mutated.
"""

import random
import uuid
from dataclasses import replace
from typing import Iterable, Sequence

from src.engine.base import (
    DIE_FACES,
    NUM_DICE,
    BestScore,
    Die,
    GamePhase,
    GameState,
    all_held_and_matching,
)
from src.engine.validators import (
    validate_count,
    validate_dice_values,
    validate_held_indices,
)


class TenziesEngine:
    """
    Stateless engine for Tenzies.

    All methods are class methods operating on immutable data.
    State is passed in and returned, never stored.

    Any method that rolls accepts an optional ``rng`` (anything with
    ``randint``, usually a seeded ``random.Random``); the ``random``
    module is used when omitted.
    """

    NUM_DICE = NUM_DICE
    DIE_FACES = DIE_FACES

    @classmethod
    def roll_value(cls, rng: random.Random | None = None) -> int:
        """Roll one die face (1-6)."""
        source = rng if rng is not None else random
        return source.randint(1, cls.DIE_FACES)

    @classmethod
    def generate_dice(cls, rng: random.Random | None = None) -> tuple[Die, ...]:
        """Create ten fresh, unheld dice with new ids."""
        return tuple(
            Die(value=cls.roll_value(rng), id=uuid.uuid4().hex)
            for _ in range(cls.NUM_DICE)
        )

    @classmethod
    def new_game(cls, rng: random.Random | None = None) -> GameState:
        """Start an idle game with fresh dice and zeroed counters."""
        return GameState(dice=cls.generate_dice(rng))

    @classmethod
    def from_values(
        cls,
        values: Sequence[int],
        held: Iterable[int] = (),
        roll_count: int = 0,
        elapsed_seconds: int = 0,
    ) -> GameState:
        """Build a state from known face values.

        Args:
            values: Ten face values in display order
            held: Indices of dice to mark as held
            roll_count: Rolls already taken
            elapsed_seconds: Seconds already elapsed

        Returns:
            A GameState with fresh die ids
        """
        values = validate_dice_values(values, cls.NUM_DICE)
        held_indices = validate_held_indices(held, len(values))
        dice = tuple(
            Die(value=value, id=uuid.uuid4().hex, is_held=i in held_indices)
            for i, value in enumerate(values)
        )
        return GameState(
            dice=dice,
            roll_count=validate_count(roll_count, "roll_count"),
            elapsed_seconds=validate_count(elapsed_seconds, "elapsed_seconds"),
        )

    @classmethod
    def reset(cls, rng: random.Random | None = None) -> GameState:
        """Throw away the current dice and counters."""
        return cls.new_game(rng)

    @classmethod
    def roll(cls, state: GameState, rng: random.Random | None = None) -> GameState:
        """Reroll every unheld die and count the roll.

        Rolling a won game starts a new one instead.

        Args:
            state: Current game state
            rng: Optional random source (for testing)

        Returns:
            The next GameState
        """
        if state.is_won:
            return cls.reset(rng)

        dice = tuple(
            die if die.is_held else replace(die, value=cls.roll_value(rng))
            for die in state.dice
        )
        return replace(state, dice=dice, roll_count=state.roll_count + 1)

    @classmethod
    def hold(cls, state: GameState, die_id: str) -> GameState:
        """Toggle the hold flag on one die.

        Unknown ids, and any hold on a won game, return ``state`` itself.
        """
        if state.is_won or state.find_die(die_id) is None:
            return state

        dice = tuple(
            replace(die, is_held=not die.is_held) if die.id == die_id else die
            for die in state.dice
        )
        return replace(state, dice=dice)

    @classmethod
    def tick(cls, state: GameState) -> GameState:
        """Advance the clock by one second while the game is in progress."""
        if cls.phase(state) is not GamePhase.IN_PROGRESS:
            return state
        return replace(state, elapsed_seconds=state.elapsed_seconds + 1)

    @classmethod
    def is_won(cls, dice: tuple[Die, ...]) -> bool:
        """Check the win condition on a set of dice.

        Args:
            dice: Dice to check

        Returns:
            True if every die is held and all values are equal
        """
        return all_held_and_matching(tuple(dice))

    @classmethod
    def phase(cls, state: GameState) -> GamePhase:
        return state.phase

    @classmethod
    def is_better_score(cls, rolls: int, time: int, best: BestScore) -> bool:
        """True if (rolls, time) strictly improves on ``best``."""
        return best.is_beaten_by(rolls, time)
