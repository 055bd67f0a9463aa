"""Case and Score Result — input and output of the Risk Scoring Engine."""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class CaseType(str, Enum):
    TRANSACTION = "transaction"
    CONTENT = "content"
    ACCOUNT = "account"


class Verdict(str, Enum):
    APPROVE = "Approve"
    REVIEW = "Review"
    REJECT = "Reject"


class Case(BaseModel):
    """A case submitted for automated risk scoring. Never persisted."""

    id: Optional[str] = None                # Generated when absent
    type: CaseType
    summary: str = Field(min_length=1)
    amount: Optional[float] = Field(default=None, ge=0)
    merchant: Optional[str] = None          # Signal source only
    user_context: Optional[str] = None      # Signal source only


class ScoreResult(BaseModel):
    """
    The engine's ruling on a single Case.

    The caller keeps this around; a reviewer's feedback later carries a
    snapshot of it as the `original` decision.
    """

    case_id: str
    risk_score: int = Field(ge=0, le=100)
    verdict: Verdict
    confidence: float = Field(ge=0.0, le=1.0)
    rationale: str
    signals: List[str] = []                 # In rule-table order
    model: str
    backend: str
    timestamp: datetime
