"""
Tenzies - Game Controller

Owns the mutable side of a game session: the current GameState, the
best score, and the ticking clock. User actions and timer ticks all go
through the same transition step, which publishes events, detects the
win, and starts or stops the clock.
"""

from __future__ import annotations

import logging
import random
import threading
import weakref
from dataclasses import dataclass
from typing import Callable, Protocol

from src.database.best_score import BestScoreStore
from src.engine.base import BestScore, Die, GamePhase, GameState
from src.engine.tenzies import TenziesEngine
from src.realtime.events import EventPayload, GameEvent, classify_transition
from src.realtime.ticker import IntervalTicker

logger = logging.getLogger(__name__)

WIN_ANNOUNCEMENT = (
    "Congratulations! You won in {rolls} rolls and {time} seconds! "
    'Press "New Game" to start again.'
)


class Ticker(Protocol):
    """Anything that can call back periodically and be cancelled."""

    @property
    def is_running(self) -> bool: ...

    def start(self, callback: Callable[[], None]) -> None: ...

    def cancel(self) -> None: ...


@dataclass(frozen=True)
class GameView:
    """Read-only snapshot handed to the UI."""

    dice: tuple[Die, ...]
    roll_count: int
    elapsed_seconds: int
    best_score: BestScore
    phase: GamePhase
    is_new_record: bool = False

    @property
    def is_won(self) -> bool:
        return self.phase is GamePhase.WON

    @property
    def in_progress(self) -> bool:
        return self.phase is GamePhase.IN_PROGRESS

    @property
    def roll_label(self) -> str:
        return "New Game" if self.is_won else "Roll"


class GameController:
    """Single-player Tenzies session.

    Args:
        store: Where the best score is read from and written to.
        rng: Optional random source for deterministic rolls.
        ticker: Clock driving ``elapsed_seconds``; defaults to a
            one-second IntervalTicker.
    """

    def __init__(
        self,
        store: BestScoreStore,
        *,
        rng: random.Random | None = None,
        ticker: Ticker | None = None,
    ) -> None:
        self._store = store
        self._rng = rng
        self._ticker = ticker if ticker is not None else IntervalTicker()
        self._lock = threading.RLock()
        self._subscribers: list[Callable[[EventPayload], None]] = []

        self._state = TenziesEngine.new_game(rng)
        self._best = store.load()
        self._is_new_record = False
        self._pending_announcement: str | None = None

        # Bumped on every start/stop so a tick racing a cancel is dropped
        self._timer_generation = 0
        self._timer_active = False

        logger.info("New controller, best score: %s", self._best)

    # -- Read access -----------------------------------------------------

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def best_score(self) -> BestScore:
        return self._best

    @property
    def is_won(self) -> bool:
        return self._state.is_won

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    @property
    def timer_running(self) -> bool:
        return self._timer_active

    def view(self) -> GameView:
        with self._lock:
            state = self._state
            return GameView(
                dice=state.dice,
                roll_count=state.roll_count,
                elapsed_seconds=state.elapsed_seconds,
                best_score=self._best,
                phase=state.phase,
                is_new_record=self._is_new_record and state.is_won,
            )

    def pop_announcement(self) -> str | None:
        """Return the pending win announcement once, then clear it."""
        with self._lock:
            announcement = self._pending_announcement
            self._pending_announcement = None
            return announcement

    # -- Actions ---------------------------------------------------------

    def roll(self) -> GameState:
        """Roll unheld dice, or start over if the game is won."""
        with self._lock:
            self._apply(TenziesEngine.roll(self._state, self._rng))
            return self._state

    def hold(self, die_id: str) -> GameState:
        """Toggle the hold on one die. Unknown ids are ignored."""
        with self._lock:
            new_state = TenziesEngine.hold(self._state, die_id)
            if new_state is self._state:
                logger.debug("Hold ignored for die %s", die_id)
            self._apply(new_state)
            return self._state

    def reset(self) -> GameState:
        """Discard the current game and deal ten fresh dice."""
        with self._lock:
            self._apply(TenziesEngine.reset(self._rng))
            return self._state

    def tick(self) -> GameState:
        """Advance the clock one second (no-op unless in progress)."""
        with self._lock:
            self._apply(TenziesEngine.tick(self._state))
            return self._state

    def shutdown(self) -> None:
        """Stop the clock."""
        with self._lock:
            self._stop_timer()

    # -- Subscribers -----------------------------------------------------

    def subscribe(self, callback: Callable[[EventPayload], None]) -> None:
        with self._lock:
            if callback not in self._subscribers:
                self._subscribers.append(callback)

    def unsubscribe(self, callback: Callable[[EventPayload], None]) -> None:
        with self._lock:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

    # -- Transition step -------------------------------------------------

    def _apply(self, new_state: GameState) -> None:
        previous = self._state
        if new_state is previous:
            return
        self._state = new_state

        payloads: list[EventPayload] = []
        event = classify_transition(previous, new_state)
        if event is GameEvent.GAME_RESET:
            self._is_new_record = False
            self._pending_announcement = None
        if event is not None:
            payloads.append(EventPayload(event=event, state=new_state))

        if previous.phase is not GamePhase.WON and new_state.phase is GamePhase.WON:
            payloads.extend(self._on_win(new_state))

        self._sync_timer()

        for payload in payloads:
            self._publish(payload)

    def _on_win(self, state: GameState) -> list[EventPayload]:
        rolls, seconds = state.roll_count, state.elapsed_seconds
        logger.info("Game won in %d rolls and %d seconds", rolls, seconds)

        self._pending_announcement = WIN_ANNOUNCEMENT.format(rolls=rolls, time=seconds)
        payloads = [
            EventPayload(
                event=GameEvent.GAME_WON,
                state=state,
                data={"rolls": rolls, "time": seconds},
            )
        ]

        if not TenziesEngine.is_better_score(rolls, seconds, self._best):
            return payloads

        previous_best = self._best
        candidate = BestScore(rolls=rolls, time=seconds)
        try:
            written = self._store.save(candidate)
        except Exception:
            logger.exception("Failed to persist best score %s", candidate)
            # The in-memory best still updates
            written = True

        if not written:
            # Another session stored a score at least as good meanwhile
            self._best = self._store.load()
            logger.info("Best score %s already beaten in storage by %s", candidate, self._best)
            return payloads

        self._best = candidate
        self._is_new_record = True

        payloads.append(
            EventPayload(
                event=GameEvent.BEST_SCORE_UPDATED,
                state=state,
                data={"previous": previous_best, "best": self._best},
            )
        )
        return payloads

    def _publish(self, payload: EventPayload) -> None:
        for callback in list(self._subscribers):
            try:
                callback(payload)
            except Exception:
                logger.exception("Subscriber failed on %s", payload.event.name)

    # -- Clock -----------------------------------------------------------

    def _sync_timer(self) -> None:
        """Run the clock iff the game is in progress."""
        if self._state.phase is GamePhase.IN_PROGRESS:
            if not self._timer_active:
                self._start_timer()
        elif self._timer_active:
            self._stop_timer()

    def _start_timer(self) -> None:
        self._timer_generation += 1
        self._timer_active = True
        self._ticker.start(_weak_tick(self, self._ticker, self._timer_generation))

    def _stop_timer(self) -> None:
        self._timer_generation += 1
        self._timer_active = False
        self._ticker.cancel()

    def _on_tick(self, generation: int) -> None:
        with self._lock:
            if generation != self._timer_generation:
                return
            self._apply(TenziesEngine.tick(self._state))


def _weak_tick(
    controller: GameController, ticker: Ticker, generation: int
) -> Callable[[], None]:
    """Tick callback that does not keep ``controller`` alive.

    A browser session that goes away drops its controller without calling
    ``shutdown()``; the next tick then finds it collected and stops the
    ticker thread.
    """
    ref = weakref.ref(controller)

    def tick() -> None:
        target = ref()
        if target is None:
            ticker.cancel()
            return
        target._on_tick(generation)

    return tick
