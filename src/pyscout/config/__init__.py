"""Configuration helpers for position profiles and engine settings."""

from .positions import (
    POSITION_LABELS,
    PositionProfile,
    get_profile,
    get_profile_by_label,
    iter_profiles,
    position_count,
)
from .settings import ScoringSettings

__all__ = [
    "POSITION_LABELS",
    "PositionProfile",
    "ScoringSettings",
    "get_profile",
    "get_profile_by_label",
    "iter_profiles",
    "position_count",
]
