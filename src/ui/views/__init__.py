"""Page renderers for Tenzies."""

from src.ui.views.game import render_game_page

__all__ = ["render_game_page"]
