"""Analytics Summary — override statistics derived from the feedback log."""

from typing import List

from pydantic import BaseModel, Field


class ReasonCount(BaseModel):
    reason: str
    count: int = Field(ge=1)


class AnalyticsSummary(BaseModel):
    """Recomputed on demand from the Feedback Store. Never stored."""

    total_feedback: int = 0
    override_rate: float = Field(ge=0.0, le=1.0, default=0.0)
    top_reasons: List[ReasonCount] = []     # Count descending, first-seen on ties
