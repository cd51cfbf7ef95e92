"""CSS injection and HTML animation helpers for the Tenzies theme."""

from pathlib import Path

import streamlit as st


def load_css() -> None:
    """Inject the Tenzies CSS theme into the Streamlit app."""
    css_path = Path(__file__).parent / "tenzies.css"
    css_text = css_path.read_text(encoding="utf-8")
    st.markdown(f"<style>{css_text}</style>", unsafe_allow_html=True)


def render_victory_animation(rolls: int, seconds: int, is_new_record: bool) -> None:
    """Render the win banner, with a record badge when the best was beaten."""
    record = '<p class="new-record">&#10024; New Record! &#10024;</p>' if is_new_record else ""
    st.markdown(
        '<div class="win-message">'
        f"<p>&#127881; You won in <strong>{rolls}</strong> rolls "
        f"and <strong>{seconds}</strong> seconds!</p>"
        f"{record}"
        "</div>",
        unsafe_allow_html=True,
    )


def render_celebration() -> None:
    """One-off celebration effect for the moment of winning."""
    st.balloons()
