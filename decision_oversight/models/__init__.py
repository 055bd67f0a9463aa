"""Decision Oversight data models."""

from decision_oversight.models.analytics import AnalyticsSummary, ReasonCount
from decision_oversight.models.case import Case, CaseType, ScoreResult, Verdict
from decision_oversight.models.config import ServiceConfig
from decision_oversight.models.feedback import (
    FeedbackRecord,
    FeedbackSubmission,
    OriginalDecision,
    ReviewAction,
)

__all__ = [
    "AnalyticsSummary",
    "Case",
    "CaseType",
    "FeedbackRecord",
    "FeedbackSubmission",
    "OriginalDecision",
    "ReasonCount",
    "ReviewAction",
    "ScoreResult",
    "ServiceConfig",
    "Verdict",
]
