"""
Risk Scoring Engine — heuristic triage of submitted cases.

Maps a Case to a ScoreResult by walking an ordered table of independent,
additive rules. Not a trained model: every point of the score traces back
to a named signal a reviewer can audit.

Behavioral Contract:
- Total over any validated Case; never raises once parse_case() succeeds
- Rules are evaluated in table order, so `signals` order never depends on content
- Score is clamped to [0, 100] before verdict and confidence are derived
- Stateless: identical input yields identical score, verdict and signals
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, List, NamedTuple, Optional, Sequence, Tuple
from uuid import uuid4

from pydantic import ValidationError

from decision_oversight.models.case import Case, ScoreResult, Verdict
from decision_oversight.models.config import ServiceConfig

logger = logging.getLogger(__name__)

BASELINE_SCORE = 20
MIN_SCORE = 0
MAX_SCORE = 100

HIGH_AMOUNT_THRESHOLD = 500

REVIEW_THRESHOLD = 40       # score >= this is at least Review
REJECT_THRESHOLD = 70       # score >= this is Reject

HIGH_CONFIDENCE = 0.85
LOW_CONFIDENCE = 0.65
CONFIDENT_ABOVE = 80        # score >= this is an extreme
CONFIDENT_BELOW = 20        # score <= this is an extreme

RATIONALE = "Heuristic risk evaluation for demo purposes."


class MissingFieldError(Exception):
    """Raised when a scoring request lacks the required case fields."""
    pass


class ScoringRule(NamedTuple):
    """One row of the rule table: fires `signal` and adds `weight` when `predicate` holds."""

    signal: str
    weight: int
    predicate: Callable[[Case, str], bool]


def _mentions_any(*phrases: str) -> Callable[[Case, str], bool]:
    """Predicate matching any phrase in the lower-cased evaluation text."""
    def predicate(case: Case, text: str) -> bool:
        return any(phrase in text for phrase in phrases)
    return predicate


def _is_high_amount(case: Case, text: str) -> bool:
    return case.amount is not None and case.amount > HIGH_AMOUNT_THRESHOLD


SCORING_RULES: Tuple[ScoringRule, ...] = (
    ScoringRule("high_amount", 25, _is_high_amount),
    ScoringRule("urgency_language", 15, _mentions_any("urgent", "immediately")),
    ScoringRule("high_risk_payment", 25, _mentions_any("gift card", "wire", "crypto")),
    ScoringRule("social_engineering_phrase", 15, _mentions_any("not a scam", "trust me")),
)


def build_evaluation_text(case: Case) -> str:
    """Concatenate the free-text fields the rules look at."""
    return f"{case.summary} {case.merchant or ''} {case.user_context or ''}".lower()


def clamp_score(score: int) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, score))


def verdict_for_score(score: int) -> Verdict:
    if score >= REJECT_THRESHOLD:
        return Verdict.REJECT
    if score >= REVIEW_THRESHOLD:
        return Verdict.REVIEW
    return Verdict.APPROVE


def confidence_for_score(score: int) -> float:
    if score >= CONFIDENT_ABOVE or score <= CONFIDENT_BELOW:
        return HIGH_CONFIDENCE
    return LOW_CONFIDENCE


def parse_case(payload: Any) -> Case:
    """
    Validate a raw POST /score body of the form {"case": {...}}.

    Raises MissingFieldError for anything that is not a well-formed case,
    including bodies that failed to decode.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("case"), dict):
        raise MissingFieldError("Request body must contain a 'case' object")
    try:
        return Case.model_validate(payload["case"])
    except ValidationError as exc:
        raise MissingFieldError(str(exc)) from exc


class RiskScoringEngine:
    """
    Scores cases against the rule table.
    Holds only static configuration; safe to share across requests.
    """

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        rules: Sequence[ScoringRule] = SCORING_RULES,
    ):
        self.config = config or ServiceConfig()
        self.rules = tuple(rules)

    def evaluate(self, case: Case) -> Tuple[int, List[str]]:
        """Apply every rule in order. Returns the clamped score and fired signals."""
        text = build_evaluation_text(case)
        score = BASELINE_SCORE
        signals: List[str] = []

        for rule in self.rules:
            if rule.predicate(case, text):
                score += rule.weight
                signals.append(rule.signal)

        return clamp_score(score), signals

    def score(self, case: Case) -> ScoreResult:
        """Produce a fresh ScoreResult for a validated case."""
        risk_score, signals = self.evaluate(case)
        result = ScoreResult(
            case_id=case.id or str(uuid4()),
            risk_score=risk_score,
            verdict=verdict_for_score(risk_score),
            confidence=confidence_for_score(risk_score),
            rationale=RATIONALE,
            signals=signals,
            model=self.config.model_name,
            backend=self.config.backend,
            timestamp=datetime.now(timezone.utc),
        )
        logger.info(
            "Scored case %s: risk_score=%d verdict=%s signals=%s",
            result.case_id, result.risk_score, result.verdict.value, signals,
        )
        return result
