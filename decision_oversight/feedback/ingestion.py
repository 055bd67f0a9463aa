"""
Feedback Ingestion — accepts reviewer decisions into the Feedback Store.

Validation happens in full before anything is written: a payload either
becomes exactly one new FeedbackRecord or leaves the store untouched.
"""

import logging
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError

from decision_oversight.feedback.store import FeedbackStore
from decision_oversight.models.feedback import FeedbackRecord, FeedbackSubmission

logger = logging.getLogger(__name__)


class InvalidFeedbackError(Exception):
    """Raised when a feedback payload is missing required fields or malformed."""
    pass


class FeedbackIngestion:
    """Validates feedback payloads and appends them to the store."""

    def __init__(self, store: FeedbackStore):
        self.store = store

    def submit(self, payload: Any) -> FeedbackRecord:
        """
        Record a reviewer's decision.

        Requires case_id, reviewer, action and final_verdict. Any
        client-supplied received_at is ignored; the server stamps its own.
        """
        if not isinstance(payload, dict):
            logger.warning("Rejected feedback: body is not a JSON object")
            raise InvalidFeedbackError("Feedback payload must be a JSON object")

        try:
            submission = FeedbackSubmission.model_validate(payload)
        except ValidationError as exc:
            logger.warning(
                "Rejected feedback for case %s: %d validation error(s)",
                payload.get("case_id"), exc.error_count(),
            )
            raise InvalidFeedbackError(str(exc)) from exc

        record = FeedbackRecord(
            **submission.model_dump(),
            received_at=datetime.now(timezone.utc),
        )
        self.store.append(record)

        logger.info(
            "Accepted feedback for case %s from %s: %s -> %s",
            record.case_id, record.reviewer, record.action.value,
            record.final_verdict.value,
        )
        return record
