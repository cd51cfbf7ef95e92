"""
Tenzies - Test Configuration and Fixtures

Common fixtures and test doubles for all test modules.
"""

import itertools
import random
from typing import Callable, Iterable

import pytest

from src.database.best_score import InMemoryBestScoreStore
from src.engine.base import GameState
from src.engine.tenzies import TenziesEngine
from src.realtime.controller import GameController


# =============================================================================
# TEST DOUBLES
# =============================================================================

class ScriptedRng:
    """Random source that replays a fixed cycle of values."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = itertools.cycle(values)
        self.calls = 0

    def randint(self, a: int, b: int) -> int:
        self.calls += 1
        return next(self._values)


class FakeTicker:
    """Manual clock: ticks only when the test calls ``fire``."""

    def __init__(self) -> None:
        self.callback: Callable[[], None] | None = None
        self.starts = 0
        self.cancels = 0

    @property
    def is_running(self) -> bool:
        return self.callback is not None

    def start(self, callback: Callable[[], None]) -> None:
        self.cancel()
        self.callback = callback
        self.starts += 1

    def cancel(self) -> None:
        if self.callback is not None:
            self.cancels += 1
        self.callback = None

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            if self.callback is not None:
                self.callback()


# =============================================================================
# RANDOM SOURCES
# =============================================================================

@pytest.fixture
def seeded_rng() -> random.Random:
    """Reproducible random source."""
    return random.Random(1234)


@pytest.fixture
def make_rng() -> Callable[..., ScriptedRng]:
    """Factory for scripted random sources: ``make_rng(4)`` or ``make_rng(1, 2, 3)``."""
    def _make(*values: int) -> ScriptedRng:
        return ScriptedRng(values)
    return _make


# =============================================================================
# GAME STATE FIXTURES
# =============================================================================

@pytest.fixture
def all_fours_held() -> GameState:
    """Ten 4s, all held: a won game."""
    return TenziesEngine.from_values((4,) * 10, held=range(10), roll_count=7, elapsed_seconds=30)


@pytest.fixture
def all_fours_one_unheld() -> GameState:
    """Ten 4s with the last die not held: not won."""
    return TenziesEngine.from_values((4,) * 10, held=range(9), roll_count=7, elapsed_seconds=30)


@pytest.fixture
def mixed_state() -> GameState:
    """In-progress game with dice 0, 2 and 5 held."""
    return TenziesEngine.from_values(
        (1, 2, 3, 4, 5, 6, 1, 2, 3, 4),
        held={0, 2, 5},
        roll_count=3,
        elapsed_seconds=12,
    )


# =============================================================================
# CONTROLLER FIXTURES
# =============================================================================

@pytest.fixture
def fake_ticker() -> FakeTicker:
    return FakeTicker()


@pytest.fixture
def memory_store() -> InMemoryBestScoreStore:
    return InMemoryBestScoreStore()


@pytest.fixture
def make_controller(fake_ticker, make_rng) -> Callable[..., GameController]:
    """Controller whose dice always land on ``face`` and whose clock is manual."""
    def _make(store=None, face: int = 3) -> GameController:
        return GameController(
            store if store is not None else InMemoryBestScoreStore(),
            rng=make_rng(face),
            ticker=fake_ticker,
        )
    return _make
