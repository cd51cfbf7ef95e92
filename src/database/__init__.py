"""
Tenzies Storage Layer.

Best-score persistence in a local JSON file or in Supabase.
"""

from src.database.best_score import (
    BestScoreStore,
    InMemoryBestScoreStore,
    LocalBestScoreStore,
    SupabaseBestScoreStore,
    get_best_score_store,
)
from src.database.client import get_supabase_client
from src.database.models import BestScoreRecord

__all__ = [
    "get_best_score_store",
    "get_supabase_client",
    "BestScoreRecord",
    "BestScoreStore",
    "InMemoryBestScoreStore",
    "LocalBestScoreStore",
    "SupabaseBestScoreStore",
]
