"""Visual theme for Tenzies."""

from src.ui.themes.animations import (
    load_css,
    render_celebration,
    render_victory_animation,
)

__all__ = [
    "load_css",
    "render_celebration",
    "render_victory_animation",
]
