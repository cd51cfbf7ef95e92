"""
Tenzies Game Engine.

Pure Python game logic with zero UI/database dependencies.
Handles dice rolling, holding, win detection and best-score comparison.
"""

from src.engine.base import (
    DIE_FACES,
    NUM_DICE,
    BestScore,
    Die,
    GamePhase,
    GameState,
)
from src.engine.tenzies import TenziesEngine

__all__ = [
    # Constants
    "DIE_FACES",
    "NUM_DICE",
    # Data Classes
    "BestScore",
    "Die",
    "GameState",
    # Enums
    "GamePhase",
    # Engines
    "TenziesEngine",
]
