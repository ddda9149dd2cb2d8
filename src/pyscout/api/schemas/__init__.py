"""Pydantic models for API I/O."""

from .scoring import (
    ErrorResponse,
    PositionProfileResponse,
    RecommendationResponse,
    RecommendRequest,
    ScoreResponse,
)

__all__ = [
    "ErrorResponse",
    "PositionProfileResponse",
    "RecommendationResponse",
    "RecommendRequest",
    "ScoreResponse",
]
