"""Tests for core data models and configuration."""

from datetime import datetime, timezone

import pytest

from decision_oversight.models import (
    AnalyticsSummary,
    Case,
    CaseType,
    FeedbackRecord,
    FeedbackSubmission,
    ReasonCount,
    ReviewAction,
    ScoreResult,
    ServiceConfig,
    Verdict,
)


class TestCase:
    def test_minimal_case(self):
        case = Case(type="transaction", summary="Card purchase")
        assert case.type == CaseType.TRANSACTION
        assert case.id is None
        assert case.amount is None

    def test_type_is_closed(self):
        with pytest.raises(Exception):
            Case(type="loan", summary="Unknown type")

    def test_amount_non_negative(self):
        with pytest.raises(Exception):
            Case(type="transaction", summary="Refund", amount=-1)


class TestScoreResult:
    def test_score_bounds(self):
        with pytest.raises(Exception):
            ScoreResult(
                case_id="c",
                risk_score=101,
                verdict=Verdict.REJECT,
                confidence=0.85,
                rationale="r",
                model="m",
                backend="b",
                timestamp=datetime.now(timezone.utc),
            )

    def test_serializes_enum_values(self):
        result = ScoreResult(
            case_id="c",
            risk_score=45,
            verdict=Verdict.REVIEW,
            confidence=0.65,
            rationale="r",
            signals=["high_risk_payment"],
            model="m",
            backend="b",
            timestamp=datetime(2026, 1, 1, tzinfo=timezone.utc),
        )
        data = result.model_dump(mode="json")
        assert data["verdict"] == "Review"
        assert data["timestamp"].startswith("2026-01-01T00:00:00")


class TestFeedbackModels:
    def test_record_extends_submission(self):
        submission = FeedbackSubmission(
            case_id="c",
            reviewer="r",
            action="Override",
            final_verdict="Approve",
        )
        record = FeedbackRecord(
            **submission.model_dump(),
            received_at=datetime.now(timezone.utc),
        )
        assert record.action == ReviewAction.OVERRIDE
        assert record.reason_codes == []

    def test_submission_has_no_received_at(self):
        assert "received_at" not in FeedbackSubmission.model_fields


class TestAnalyticsModels:
    def test_defaults_are_zeroed(self):
        summary = AnalyticsSummary()
        assert summary.total_feedback == 0
        assert summary.override_rate == 0
        assert summary.top_reasons == []

    def test_reason_count_positive(self):
        with pytest.raises(Exception):
            ReasonCount(reason="edge_case", count=0)


class TestServiceConfig:
    def test_defaults(self):
        config = ServiceConfig()
        assert config.model_name == "heuristic-mvp"
        assert config.backend == "local"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("MODEL_NAME", "rules-v2")
        monkeypatch.setenv("BACKEND", "worker")
        config = ServiceConfig.from_env()
        assert config.model_name == "rules-v2"
        assert config.backend == "worker"

    def test_from_env_falls_back(self, monkeypatch):
        monkeypatch.delenv("MODEL_NAME", raising=False)
        monkeypatch.setenv("BACKEND", "")
        config = ServiceConfig.from_env()
        assert config.model_name == "heuristic-mvp"
        assert config.backend == "local"
