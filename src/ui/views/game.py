"""Game page — dice, roll button, stats and the win banner."""

from __future__ import annotations

import logging

import streamlit as st

from src.config.settings import get_settings
from src.database.best_score import get_best_score_store
from src.realtime.controller import GameController
from src.realtime.ticker import IntervalTicker
from src.ui.components.announcer import render_live_region
from src.ui.components.dice_tray import render_dice_tray
from src.ui.components.scoreboard import render_scoreboard
from src.ui.components.turn_controls import render_turn_controls
from src.ui.themes.animations import render_celebration, render_victory_animation

logger = logging.getLogger(__name__)

_CONTROLLER_KEY = "controller"

_INSTRUCTIONS = (
    "Roll until all dice are the same. Click each die to freeze it at its "
    "current value between rolls."
)


def _get_controller() -> GameController:
    """One controller per browser session, kept in session state."""
    ss = st.session_state
    if _CONTROLLER_KEY not in ss:
        settings = get_settings()
        ss[_CONTROLLER_KEY] = GameController(
            get_best_score_store(settings),
            ticker=IntervalTicker(settings.tick_interval),
        )
        logger.info("Started a new Tenzies session")
    return ss[_CONTROLLER_KEY]


def _render_stats(controller: GameController) -> None:
    view = controller.view()
    render_scoreboard(
        roll_count=view.roll_count,
        elapsed_seconds=view.elapsed_seconds,
        best_score=view.best_score,
        in_progress=view.in_progress,
    )


def render_game_page() -> None:
    """Render the Tenzies board."""
    controller = _get_controller()

    # Announce before anything else so the live region is stable in the DOM
    announcement = controller.pop_announcement()
    render_live_region(announcement)
    if announcement:
        render_celebration()

    st.title("Tenzies")
    st.markdown(f'<p class="instructions">{_INSTRUCTIONS}</p>', unsafe_allow_html=True)

    view = controller.view()

    # Re-render only the stats once per tick while the clock runs
    run_every = get_settings().tick_interval if view.in_progress else None
    st.fragment(_render_stats, run_every=run_every)(controller)

    clicked = render_dice_tray(
        dice=view.dice,
        roll_count=view.roll_count,
        disabled=view.is_won,
    )
    if clicked is not None:
        controller.hold(clicked)
        st.rerun()

    if render_turn_controls(view.roll_label, view.roll_count):
        controller.roll()
        st.rerun()

    if view.is_won:
        render_victory_animation(view.roll_count, view.elapsed_seconds, view.is_new_record)
