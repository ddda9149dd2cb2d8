from __future__ import annotations

from typing import List

from pydantic import AliasChoices, BaseModel, Field
from pydantic.config import ConfigDict

from pyscout.models import Verdict


class ScoreResponse(BaseModel):
    success: bool = True
    score: float
    predictor_output: float
    height_fit: float
    weight_fit: float
    features: List[float]


class RecommendRequest(BaseModel):
    score: float = Field(..., strict=True, allow_inf_nan=False)
    natural_positions: List[str] = Field(
        ...,
        validation_alias=AliasChoices("natural_positions", "naturalPositions", "natposition"),
    )

    model_config = ConfigDict(populate_by_name=True)


class RecommendationResponse(BaseModel):
    success: bool = True
    verdict: Verdict
    message: str
    position: str
    score: float
    ideal_score: float
    alternative_positions: List[str] | None = None


class PositionProfileResponse(BaseModel):
    code: int
    label: str
    name: str
    height_range: List[float]
    weight_range: List[float]
    ideal_score: float


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    message: str
