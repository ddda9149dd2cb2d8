"""REST API for the pyscout scoring engine."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Body, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from pyscout.api.schemas import (
    PositionProfileResponse,
    RecommendationResponse,
    RecommendRequest,
    ScoreResponse,
)
from pyscout.config import ScoringSettings, iter_profiles
from pyscout.errors import (
    InferenceError,
    ScoringEngineError,
    TrainingCancelled,
    TrainingDataError,
    UnknownPositionError,
    ValidationError,
)
from pyscout.scoring import ScoringEngine


logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[ScoringEngineError], int] = {
    ValidationError: 422,
    UnknownPositionError: 404,
    InferenceError: 503,
    TrainingDataError: 503,
    TrainingCancelled: 503,
}


def _status_for(exc: ScoringEngineError) -> int:
    for error_type, status in _STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status
    return 500


def _parse_recommend_request(payload: dict[str, Any]) -> RecommendRequest:
    try:
        return RecommendRequest.model_validate(payload)
    except PydanticValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(item) for item in error['loc']) or 'body'}: {error['msg']}"
            for error in exc.errors()
        )
        raise ValidationError(details) from exc


def create_app(engine: ScoringEngine | None = None, settings: ScoringSettings | None = None) -> FastAPI:
    """Build the API around ``engine``, training one from ``settings`` if omitted.

    Dataset failures propagate so the process does not start with an untrained
    predictor.
    """

    app = FastAPI(title="pyscout scoring engine")
    if engine is None:
        engine = ScoringEngine.from_settings(settings)
    app.state.engine = engine

    @app.exception_handler(ScoringEngineError)
    async def engine_error_handler(request: Request, exc: ScoringEngineError) -> JSONResponse:
        status = _status_for(exc)
        if status >= 500:
            logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=status, content=exc.to_dict())

    @app.get("/health")
    async def health() -> dict[str, Any]:
        return {"status": "ok", "ready": engine.is_ready}

    @app.get("/positions", response_model=list[PositionProfileResponse])
    async def positions() -> list[PositionProfileResponse]:
        return [
            PositionProfileResponse(
                code=profile.code,
                label=profile.label,
                name=profile.name,
                height_range=list(profile.height_range),
                weight_range=list(profile.weight_range),
                ideal_score=profile.ideal_score,
            )
            for profile in iter_profiles()
        ]

    @app.post("/score", response_model=ScoreResponse)
    def score(payload: dict[str, Any] = Body(...)) -> ScoreResponse:
        breakdown = engine.compute_score(payload)
        return ScoreResponse(**breakdown.to_dict())

    @app.post("/recommend", response_model=RecommendationResponse)
    async def recommend(payload: dict[str, Any] = Body(...)) -> RecommendationResponse:
        request = _parse_recommend_request(payload)
        result = engine.recommend(request.score, request.natural_positions)
        return RecommendationResponse(**result.model_dump())

    return app
