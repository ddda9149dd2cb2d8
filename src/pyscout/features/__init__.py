"""Feature extraction used at inference time."""

from .normalizer import (
    FEATURE_COUNT,
    FEATURE_ORDER,
    FeatureVector,
    canonicalize,
    experience_fit,
    normalize,
    range_fit,
)

__all__ = [
    "FEATURE_COUNT",
    "FEATURE_ORDER",
    "FeatureVector",
    "canonicalize",
    "experience_fit",
    "normalize",
    "range_fit",
]
