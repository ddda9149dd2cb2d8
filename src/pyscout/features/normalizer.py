"""Serving-time feature extraction.

Raw athlete attributes are mapped onto discrete tiers (1.0 / 0.7 / 0.0 for
physical fit, 1.0 / 0.5 / 0.0 for experience) plus fixed boolean-gated bonus
constants. This is deliberately different from the continuous min/max scaling
applied to training rows in :mod:`pyscout.ingest.dataset`; the two schemes are
not interchangeable and must not be merged.

The constants below were tuned against historical scores. Changing any of
them, or the order of :data:`FEATURE_ORDER`, requires retraining.
"""

from __future__ import annotations

from typing import Tuple

from pyscout.config import get_profile
from pyscout.models import AttributeInput, DominantFoot


FeatureVector = Tuple[float, ...]

FEATURE_ORDER: Tuple[str, ...] = (
    "position",
    "height",
    "weight",
    "experience",
    "video_uploaded",
    "ambidextrous",
    "dominant_foot",
    "versatility",
)
FEATURE_COUNT = len(FEATURE_ORDER)

HEIGHT_INDEX = FEATURE_ORDER.index("height")
WEIGHT_INDEX = FEATURE_ORDER.index("weight")

FIT_EXACT = 1.0
FIT_NEAR = 0.7
FIT_NONE = 0.0
FIT_TOLERANCE_BELOW = 10.0

EXPERIENCE_SENIOR_YEARS = 5.0
EXPERIENCE_JUNIOR_YEARS = 2.0

CRIMINAL_RECORD_PENALTY = 0.1
VIDEO_BONUS = 1.2
AMBIDEXTROUS_BONUS = 0.05
LEFT_FOOT_BONUS = 0.2
OTHER_FOOT_BONUS = 0.1
VERSATILITY_BONUS = 0.05


def canonicalize(attributes: AttributeInput) -> AttributeInput:
    """Rewrite ``dominant_foot=both`` as a right-footed ambidextrous athlete."""

    if attributes.dominant_foot is DominantFoot.BOTH:
        return attributes.model_copy(
            update={"dominant_foot": DominantFoot.RIGHT, "ambidextrous": True}
        )
    return attributes


def range_fit(value: float, bounds: Tuple[float, float]) -> float:
    """Three-tier step fit; only values below the lower bound are tolerated."""

    low, high = bounds
    if low <= value <= high:
        return FIT_EXACT
    if low - FIT_TOLERANCE_BELOW <= value < low:
        return FIT_NEAR
    return FIT_NONE


def experience_fit(years: float) -> float:
    if years >= EXPERIENCE_SENIOR_YEARS:
        return 1.0
    if years >= EXPERIENCE_JUNIOR_YEARS:
        return 0.5
    return 0.0


def normalize(attributes: AttributeInput) -> FeatureVector:
    """Build the feature vector the predictor consumes, in FEATURE_ORDER."""

    attrs = canonicalize(attributes)
    profile = get_profile(attrs.position)

    experience = experience_fit(attrs.experience)
    # the penalty shares the experience slot so the vector stays 8 wide
    if attrs.criminal_record:
        experience = max(0.0, experience - CRIMINAL_RECORD_PENALTY)

    return (
        float(attrs.position),
        range_fit(attrs.height, profile.height_range),
        range_fit(attrs.weight, profile.weight_range),
        experience,
        VIDEO_BONUS if attrs.video_uploaded else 0.0,
        AMBIDEXTROUS_BONUS if attrs.ambidextrous else 0.0,
        LEFT_FOOT_BONUS if attrs.dominant_foot is DominantFoot.LEFT else OTHER_FOOT_BONUS,
        VERSATILITY_BONUS if attrs.versatility else 0.0,
    )
