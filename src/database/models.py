"""
Tenzies - Database Models

Pydantic models for persisted records.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from src.engine.base import BestScore


class BestScoreRecord(BaseModel):
    """Serialized best score: ``{"rolls": int, "time": int}``.

    Also mirrors the ``best_scores`` table; extra columns such as
    ``key`` are ignored on read.
    """

    rolls: int = Field(ge=0, strict=True)
    time: int = Field(ge=0, strict=True)
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}

    @classmethod
    def from_best_score(cls, best: BestScore) -> "BestScoreRecord":
        if not best.is_set:
            raise ValueError("Cannot persist an unset best score.")
        return cls(rolls=best.rolls, time=best.time)

    def to_best_score(self) -> BestScore:
        return BestScore(rolls=self.rolls, time=self.time)
