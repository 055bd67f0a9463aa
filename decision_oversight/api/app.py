"""
Decision Oversight API — FastAPI endpoints.

Exposes the oversight loop via a JSON API for:
- Case scoring
- Reviewer feedback
- Override analytics
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from decision_oversight.analytics.aggregator import AnalyticsAggregator
from decision_oversight.feedback.ingestion import FeedbackIngestion, InvalidFeedbackError
from decision_oversight.feedback.store import FeedbackStore
from decision_oversight.models.config import ServiceConfig
from decision_oversight.scoring.engine import MissingFieldError, RiskScoringEngine, parse_case

logger = logging.getLogger(__name__)

SERVICE_NAME = "AI Decision Oversight Demo"
PUBLIC_ENDPOINTS = ["/score", "/feedback", "/analytics"]


def cors_headers(origin: Optional[str]) -> Dict[str, str]:
    """Cross-origin headers echoing the caller's origin, or any origin."""
    return {
        "Access-Control-Allow-Origin": origin or "*",
        "Access-Control-Allow-Methods": "GET,POST,OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
    }


async def _read_json(request: Request) -> Any:
    """Decode the request body. Undecodable bodies come back as None."""
    try:
        return await request.json()
    except ValueError:
        return None


# --- Application Factory ---

def create_app(
    feedback_store: Optional[FeedbackStore] = None,
    scoring_engine: Optional[RiskScoringEngine] = None,
    config: Optional[ServiceConfig] = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Decision Oversight API",
        description="Risk scoring with human review and override analytics",
        version="0.1.0",
    )

    # Initialize components
    store = feedback_store or FeedbackStore()
    engine = scoring_engine or RiskScoringEngine(config or ServiceConfig.from_env())
    ingestion = FeedbackIngestion(store)
    aggregator = AnalyticsAggregator(store)

    # Store components on app state for access in endpoints
    app.state.feedback_store = store
    app.state.scoring_engine = engine
    app.state.feedback_ingestion = ingestion
    app.state.analytics_aggregator = aggregator

    # === CROSS-ORIGIN ===

    @app.middleware("http")
    async def apply_cors(request: Request, call_next):
        origin = request.headers.get("origin")
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=cors_headers(origin))
        response = await call_next(request)
        response.headers.update(cors_headers(origin))
        return response

    # === ERRORS ===

    @app.exception_handler(MissingFieldError)
    async def missing_field_handler(request: Request, exc: MissingFieldError):
        return JSONResponse({"error": "Missing required fields"}, status_code=400)

    @app.exception_handler(InvalidFeedbackError)
    async def invalid_feedback_handler(request: Request, exc: InvalidFeedbackError):
        return JSONResponse({"error": "Invalid feedback payload"}, status_code=400)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # Unknown path or method is reported uniformly as not found
        if exc.status_code in (404, 405):
            return JSONResponse({"error": "Not found"}, status_code=404)
        return JSONResponse({"error": exc.detail}, status_code=exc.status_code)

    # === HEALTH ===

    @app.get("/")
    def health():
        """Service liveness and endpoint listing."""
        return {"ok": True, "service": SERVICE_NAME, "endpoints": PUBLIC_ENDPOINTS}

    # === SCORING ===

    @app.post("/score")
    async def score_case(request: Request):
        """Score a case: {"case": {type, summary, ...}}."""
        case = parse_case(await _read_json(request))
        result = engine.score(case)
        return result.model_dump(mode="json")

    # === FEEDBACK ===

    @app.post("/feedback")
    async def submit_feedback(request: Request):
        """Record a reviewer's approval or override."""
        ingestion.submit(await _read_json(request))
        return {"ok": True}

    @app.get("/feedback")
    def list_feedback(limit: int = 50):
        """Recent feedback records, oldest first."""
        return [r.model_dump(mode="json") for r in store.query_recent(limit=limit)]

    # === ANALYTICS ===

    @app.get("/analytics")
    def get_analytics():
        """Override rate and ranked reason codes over all feedback."""
        return aggregator.compute().model_dump(mode="json")

    return app


# Default application instance
app = create_app()
