"""Roll / New Game button."""

from __future__ import annotations

import streamlit as st


def render_turn_controls(label: str, roll_count: int) -> bool:
    """Render the single roll button.

    Returns:
        True if the player pressed it on this run.
    """
    return st.button(
        label,
        key=f"btn_roll_{roll_count}",
        use_container_width=True,
        type="primary",
    )
