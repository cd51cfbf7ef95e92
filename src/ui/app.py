"""Tenzies — Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st

_RULES = """\
**Goal:** all ten dice showing the same number, all frozen.

- **Roll** rerolls every die that is not frozen
- **Click a die** to freeze it, click again to release it
- The clock starts with your first roll and stops when you win
- **Best score** = fewest rolls, then fastest time
"""


def _render_sidebar_rules() -> None:
    with st.sidebar:
        st.markdown("### How to play")
        st.markdown(_RULES)


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Tenzies",
        page_icon="🎲",
        layout="centered",
        initial_sidebar_state="collapsed",
    )

    from src.config import configure_logging, get_settings

    settings = get_settings()
    configure_logging(settings.log_level, debug=settings.debug)

    # Lazy imports keep page setup first
    from src.ui.themes import load_css
    from src.ui.views.game import render_game_page

    load_css()
    render_game_page()
    _render_sidebar_rules()


if __name__ == "__main__":
    main()
