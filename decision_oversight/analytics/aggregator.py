"""
Analytics Aggregator — override statistics over the feedback log.

Recomputes from the full history on every call. That is linear in the
number of records times reasons per record, which is fine for an
in-memory log; a durable deployment would keep incremental counters.
"""

from collections import Counter
from decimal import ROUND_HALF_UP, Decimal

from decision_oversight.feedback.store import FeedbackStore
from decision_oversight.models.analytics import AnalyticsSummary, ReasonCount
from decision_oversight.models.feedback import ReviewAction

OVERRIDE_RATE_QUANTUM = Decimal("0.01")


def _round_rate(rate: float) -> float:
    """Two decimals, halves rounded up (0.125 -> 0.13, not banker's 0.12)."""
    return float(Decimal(rate).quantize(OVERRIDE_RATE_QUANTUM, rounding=ROUND_HALF_UP))


class AnalyticsAggregator:
    """Summarizes reviewer feedback into override rate and ranked reasons."""

    def __init__(self, store: FeedbackStore):
        self.store = store

    def compute(self) -> AnalyticsSummary:
        records = self.store.read_all()
        total = len(records)
        if total == 0:
            return AnalyticsSummary()

        overrides = sum(1 for r in records if r.action == ReviewAction.OVERRIDE)

        # Counter keeps first-seen order and most_common() sorts stably,
        # so equal counts stay in the order reasons first appeared.
        reasons: Counter = Counter()
        for record in records:
            reasons.update(record.reason_codes)

        return AnalyticsSummary(
            total_feedback=total,
            override_rate=_round_rate(overrides / total),
            top_reasons=[
                ReasonCount(reason=reason, count=count)
                for reason, count in reasons.most_common()
            ],
        )
