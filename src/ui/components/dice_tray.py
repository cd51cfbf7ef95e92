"""Dice tray component — ten clickable dice that toggle hold."""

from __future__ import annotations

import streamlit as st

from src.engine.base import Die

_DICE_PER_ROW = 5


def render_dice_tray(
    dice: tuple[Die, ...],
    roll_count: int,
    disabled: bool = False,
) -> str | None:
    """Render the dice as buttons. Held dice use the primary style.

    Args:
        dice: Dice in display order.
        roll_count: Current roll number (used in button keys).
        disabled: Disable every die, e.g. once the game is won.

    Returns:
        Id of the die the player clicked, or ``None``.
    """
    clicked: str | None = None

    for start in range(0, len(dice), _DICE_PER_ROW):
        row = dice[start:start + _DICE_PER_ROW]
        cols = st.columns(_DICE_PER_ROW)
        for col, die in zip(cols, row):
            with col:
                if st.button(
                    str(die.value),
                    key=f"die_{die.id}_r{roll_count}",
                    help="Release" if die.is_held else "Freeze",
                    use_container_width=True,
                    type="primary" if die.is_held else "secondary",
                    disabled=disabled,
                ):
                    clicked = die.id

    return clicked
