"""
Tenzies - Best Score Storage

Persists the best score under a single key, either in a local JSON file
(the desktop equivalent of browser local storage) or in a Supabase table.

Reading never raises: a missing, unreadable or malformed record loads as
an unset BestScore.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
import time
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, TypeVar

from httpx import RemoteProtocolError
from supabase import Client

from src.config.settings import Settings
from src.database.models import BestScoreRecord
from src.engine.base import BestScore

logger = logging.getLogger(__name__)

DEFAULT_KEY = "tenziesBestScore"

T = TypeVar("T")


class BestScoreStore(ABC):
    """Load and save the best score under one storage key."""

    # Serialises read-compare-write across every store in the process
    _save_lock = threading.Lock()

    def __init__(self, key: str = DEFAULT_KEY) -> None:
        self.key = key

    @abstractmethod
    def _read_raw(self) -> Any:
        """Return the decoded record for ``self.key``, or None if absent."""

    @abstractmethod
    def _write_raw(self, record: BestScoreRecord) -> None:
        """Persist ``record`` under ``self.key``."""

    def load(self) -> BestScore:
        """Read the stored best score, falling back to unset."""
        try:
            raw = self._read_raw()
        except Exception:
            logger.warning("Could not read best score %r; treating as unset", self.key, exc_info=True)
            return BestScore()

        if raw is None:
            return BestScore()

        try:
            return BestScoreRecord.model_validate(raw).to_best_score()
        except ValueError:
            logger.warning("Ignoring malformed best score %r: %r", self.key, raw)
            return BestScore()

    def save(self, best: BestScore) -> bool:
        """Write the best score unless storage already holds one as good.

        Several sessions share one store, so the stored record is re-read
        first and only a strict improvement over it is written.

        Returns:
            True if ``best`` was written, False if the stored score was kept

        Raises:
            ValueError: If ``best`` is unset
        """
        record = BestScoreRecord.from_best_score(best)
        with self._save_lock:
            stored = self.load()
            if not stored.is_beaten_by(best.rolls, best.time):
                logger.info("Kept stored best score %s over %s under %r", stored, best, self.key)
                return False
            self._write_raw(record)
        logger.info("Saved best score %s under %r", best, self.key)
        return True


class InMemoryBestScoreStore(BestScoreStore):
    """Keeps the record in process memory. Used when nothing should touch disk."""

    def __init__(self, key: str = DEFAULT_KEY, initial: Any = None) -> None:
        super().__init__(key)
        self._data: dict[str, Any] = {}
        if initial is not None:
            self._data[key] = initial

    def _read_raw(self) -> Any:
        return self._data.get(self.key)

    def _write_raw(self, record: BestScoreRecord) -> None:
        self._data[self.key] = record.model_dump(include={"rolls", "time"})


class LocalBestScoreStore(BestScoreStore):
    """JSON file holding a ``{key: record}`` object.

    Other keys in the file are left untouched on write.
    """

    def __init__(self, path: Path | str, key: str = DEFAULT_KEY) -> None:
        super().__init__(key)
        self.path = Path(path).expanduser()

    def _read_file(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not contain a JSON object.")
        return data

    def _read_raw(self) -> Any:
        return self._read_file().get(self.key)

    def _write_raw(self, record: BestScoreRecord) -> None:
        try:
            data = self._read_file()
        except ValueError:
            logger.warning("Overwriting unreadable storage file %s", self.path)
            data = {}
        data[self.key] = record.model_dump(include={"rolls", "time"})

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            dir=self.path.parent,
            prefix=f"{self.path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        ) as tmp:
            tmp.write(json.dumps(data, ensure_ascii=False, indent=2))
        try:
            os.replace(tmp.name, self.path)
        except OSError:
            os.unlink(tmp.name)
            raise


class SupabaseBestScoreStore(BestScoreStore):
    """Best score row in the Supabase ``best_scores`` table."""

    TABLE = "best_scores"

    def __init__(
        self,
        client: Client,
        key: str = DEFAULT_KEY,
        *,
        retries: int = 2,
        retry_delay: float = 0.3,
    ) -> None:
        super().__init__(key)
        self.client = client
        self.table = client.table(self.TABLE)
        self.retries = retries
        self.retry_delay = retry_delay

    def _retry(self, fn: Callable[[], T]) -> T:
        """Call *fn* with simple retry on transient connection errors."""
        for attempt in range(self.retries + 1):
            try:
                return fn()
            except (RemoteProtocolError, ConnectionError, OSError):
                if attempt == self.retries:
                    raise
                logger.debug("Retrying best score request (attempt %d)", attempt + 1)
                time.sleep(self.retry_delay)
        raise AssertionError("unreachable")

    def _read_raw(self) -> Any:
        data = self._retry(
            lambda: self.table.select("*").eq("key", self.key).execute()
        )
        if data.data:
            return data.data[0]
        return None

    def _write_raw(self, record: BestScoreRecord) -> None:
        row = {
            "key": self.key,
            "rolls": record.rolls,
            "time": record.time,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        self._retry(lambda: self.table.upsert(row).execute())


def get_best_score_store(settings: Settings) -> BestScoreStore:
    """Pick Supabase when configured, otherwise the local JSON file."""
    if settings.use_supabase:
        from src.database.client import get_supabase_client

        logger.info("Using Supabase best score storage")
        return SupabaseBestScoreStore(get_supabase_client(), settings.best_score_key)

    logger.info("Using local best score storage at %s", settings.best_score_path)
    return LocalBestScoreStore(settings.best_score_path, settings.best_score_key)
