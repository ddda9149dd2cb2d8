"""Score blending, recommendation rules and the engine service."""

from .blend import blend
from .engine import ScoreBreakdown, ScoringEngine, coerce_attributes
from .recommend import alternative_positions, recommend

__all__ = [
    "ScoreBreakdown",
    "ScoringEngine",
    "alternative_positions",
    "blend",
    "coerce_attributes",
    "recommend",
]
