"""Canonical athlete records shared by the scoring and recommendation layers."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field
from pydantic.config import ConfigDict


class DominantFoot(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"


class Verdict(str, Enum):
    SUFFICIENT = "sufficient"
    INSUFFICIENT = "insufficient"


class AttributeInput(BaseModel):
    """Raw scoring inputs for a single athlete.

    Field names are snake_case; the camelCase names used by request payloads
    (``videoUploaded``, ``dominantFoot``...) and the legacy ``yearsexp`` and
    ``foot`` keys are accepted as aliases.
    """

    position: int = Field(..., ge=0, le=7, strict=True)
    height: float = Field(..., gt=0.0, allow_inf_nan=False)
    weight: float = Field(..., gt=0.0, allow_inf_nan=False)
    experience: float = Field(
        ...,
        ge=0.0,
        allow_inf_nan=False,
        validation_alias=AliasChoices("experience", "yearsexp"),
    )
    achievements: float = Field(default=0.0, ge=0.0, allow_inf_nan=False)
    video_uploaded: bool = Field(
        default=False, validation_alias=AliasChoices("video_uploaded", "videoUploaded")
    )
    ambidextrous: bool = False
    criminal_record: bool = Field(
        default=False, validation_alias=AliasChoices("criminal_record", "criminalRecord")
    )
    versatility: bool = False
    dominant_foot: DominantFoot = Field(
        default=DominantFoot.RIGHT,
        validation_alias=AliasChoices("dominant_foot", "dominantFoot", "foot"),
    )
    injury_history: float = Field(
        default=0.0,
        ge=0.0,
        allow_inf_nan=False,
        validation_alias=AliasChoices("injury_history", "injuryHistory"),
    )
    training_hours_per_week: float = Field(
        default=0.0,
        ge=0.0,
        allow_inf_nan=False,
        validation_alias=AliasChoices("training_hours_per_week", "trainingHoursPerWeek"),
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Recommendation(BaseModel):
    verdict: Verdict
    message: str
    position: str
    score: float
    ideal_score: float
    alternative_positions: Optional[List[str]] = None

    model_config = ConfigDict(frozen=True)
