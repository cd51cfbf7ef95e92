"""
Tenzies - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from typing import Any, Iterable, Sequence

from src.engine.base import DIE_FACES, NUM_DICE


def validate_dice_values(
    values: Sequence[int],
    count: int = NUM_DICE,
) -> tuple[int, ...]:
    """
    Validate and normalize a full set of dice values.

    Args:
        values: Sequence of dice values to validate
        count: Exact number of dice required

    Returns:
        Validated values as a tuple

    Raises:
        ValueError: If validation fails
    """
    values_tuple = tuple(values)

    if len(values_tuple) != count:
        raise ValueError(f"Exactly {count} dice required, got {len(values_tuple)}.")

    for i, value in enumerate(values_tuple):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Die value at index {i} must be an integer, got {type(value).__name__}.")
        if not (1 <= value <= DIE_FACES):
            raise ValueError(
                f"Die value at index {i} is {value}, must be between 1 and {DIE_FACES}."
            )

    return values_tuple


def validate_count(value: Any, name: str) -> int:
    """
    Validate a non-negative counter (rolls or seconds).

    Args:
        value: Value to validate
        name: Field name used in the error message

    Returns:
        Validated count

    Raises:
        ValueError: If value is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {type(value).__name__}.")

    if value < 0:
        raise ValueError(f"{name} cannot be negative, got {value}.")

    return value



def validate_held_indices(
    indices: Iterable[int],
    dice_count: int = NUM_DICE,
) -> frozenset[int]:
    """
    Validate indices of held dice.

    Args:
        indices: Collection of dice indices that are held
        dice_count: Total number of dice on the table

    Returns:
        Validated indices as a frozenset

    Raises:
        ValueError: If any index is not an integer or is out of range
    """
    indices_set = frozenset(indices)

    for idx in indices_set:
        if isinstance(idx, bool) or not isinstance(idx, int):
            raise ValueError(f"Held index must be an integer, got {type(idx).__name__}.")
        if not (0 <= idx < dice_count):
            raise ValueError(
                f"Held index {idx} is out of range. Must be between 0 and {dice_count - 1}."
            )

    return indices_set
