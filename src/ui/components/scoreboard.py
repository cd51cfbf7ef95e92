"""Scoreboard component — current rolls and time, plus the best score."""

from __future__ import annotations

import streamlit as st

from src.engine.base import BestScore


def render_scoreboard(
    roll_count: int,
    elapsed_seconds: int,
    best_score: BestScore,
    in_progress: bool,
) -> None:
    """Render the stats panel.

    Current stats only show while a game is in progress; the best score
    only once one exists.
    """
    html = ['<div class="stats-container">']

    if in_progress:
        html.append(
            '<div class="current-stats">'
            '<p class="stat"><span class="stat-label">Rolls:</span> '
            f'<span class="stat-value">{roll_count}</span></p>'
            '<p class="stat"><span class="stat-label">Time:</span> '
            f'<span class="stat-value">{elapsed_seconds}s</span></p>'
            "</div>"
        )

    if best_score.is_set:
        html.append(
            '<div class="best-score">'
            '<p class="stat best"><span class="stat-label">&#127942; Best:</span> '
            f'<span class="stat-value">{best_score.rolls} rolls in {best_score.time}s</span></p>'
            "</div>"
        )

    html.append("</div>")
    st.markdown("".join(html), unsafe_allow_html=True)
