"""Feedback Record — a reviewer's approval or override of a scored case."""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from decision_oversight.models.case import Verdict


class ReviewAction(str, Enum):
    APPROVE = "Approve"
    OVERRIDE = "Override"


class OriginalDecision(BaseModel):
    """Snapshot of the ScoreResult the reviewer was looking at."""

    verdict: Verdict
    risk_score: int = Field(ge=0, le=100)
    confidence: float = Field(ge=0.0, le=1.0)
    model: str
    backend: str


class FeedbackSubmission(BaseModel):
    """What a reviewer sends. The server stamps `received_at` on acceptance."""

    case_id: str = Field(min_length=1)
    reviewer: str = Field(min_length=1)
    action: ReviewAction
    final_verdict: Verdict
    reason_codes: List[str] = []
    notes: Optional[str] = None
    original: Optional[OriginalDecision] = None

    @field_validator("reason_codes", mode="before")
    @classmethod
    def _absent_reasons_are_empty(cls, value):
        return [] if value is None else value

    @field_validator("reason_codes")
    @classmethod
    def _dedupe_reasons(cls, value: List[str]) -> List[str]:
        # Reason codes are a set; keep first occurrence order
        return list(dict.fromkeys(value))


class FeedbackRecord(FeedbackSubmission):
    """
    The System of Record entry for one review. Append-only: created once on
    accepted submission, never mutated or deleted afterwards.
    """

    received_at: datetime
