"""Screen-reader live region."""

from __future__ import annotations

import html

import streamlit as st


def render_live_region(message: str | None) -> None:
    """Render a polite ``aria-live`` region, empty when there is no message."""
    body = f"<p>{html.escape(message)}</p>" if message else ""
    st.markdown(
        f'<div aria-live="polite" class="sr-only">{body}</div>',
        unsafe_allow_html=True,
    )
