"""Blend the predictor output with heuristic physical-fit sub-scores."""

from __future__ import annotations

# Tunable in principle, but stored scores were produced with these values.
PREDICTOR_WEIGHT = 0.5
HEIGHT_FIT_WEIGHT = 0.3
WEIGHT_FIT_WEIGHT = 0.2


def blend(predictor_output: float, height_fit: float, weight_fit: float) -> float:
    """Return ``0.5 * predictor + 0.3 * height_fit + 0.2 * weight_fit``.

    With a sigmoid predictor and fits in ``[0, 1]`` the result lies in
    ``[0, 1]``; it is not clamped.
    """

    return (
        predictor_output * PREDICTOR_WEIGHT
        + height_fit * HEIGHT_FIT_WEIGHT
        + weight_fit * WEIGHT_FIT_WEIGHT
    )
