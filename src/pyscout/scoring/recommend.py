"""Decide whether a stored score fits the athlete's natural position."""

from __future__ import annotations

import math
from typing import List, Sequence

from pyscout.config import PositionProfile, get_profile_by_label, iter_profiles
from pyscout.errors import ValidationError
from pyscout.models import Recommendation, Verdict


ALTERNATIVE_TOLERANCE = 0.1
# absorbs float noise such as |0.93 - 0.83| evaluating just above 0.1
_TOLERANCE_EPSILON = 1e-9

NO_ALTERNATIVES_MESSAGE = "No alternative position is close enough to this score."


def _resolve_positions(natural_positions: Sequence[str] | str) -> List[PositionProfile]:
    if isinstance(natural_positions, str):
        natural_positions = [natural_positions]
    labels = list(natural_positions or [])
    if not labels:
        raise ValidationError("at least one natural position is required")
    return [get_profile_by_label(label) for label in labels]


def alternative_positions(
    score: float,
    current: PositionProfile,
    *,
    tolerance: float = ALTERNATIVE_TOLERANCE,
) -> List[PositionProfile]:
    """Profiles other than ``current`` whose ideal score is within ``tolerance``."""

    return [
        profile
        for profile in iter_profiles()
        if profile.code != current.code
        and abs(profile.ideal_score - score) <= tolerance + _TOLERANCE_EPSILON
    ]


def recommend(
    score: float,
    natural_positions: Sequence[str] | str,
    *,
    tolerance: float = ALTERNATIVE_TOLERANCE,
) -> Recommendation:
    """Compare ``score`` with the ideal score of the first natural position.

    Only the first natural position takes part in the comparison; the others are
    validated but otherwise ignored.
    """

    if isinstance(score, bool) or not isinstance(score, (int, float)) or not math.isfinite(score):
        raise ValidationError(f"score must be a finite number, got {score!r}")
    score = float(score)
    primary = _resolve_positions(natural_positions)[0]

    if score >= primary.ideal_score:
        return Recommendation(
            verdict=Verdict.SUFFICIENT,
            message=(
                f"Score {score:.2f} meets the ideal score {primary.ideal_score:.2f} "
                f"for {primary.name}."
            ),
            position=primary.name,
            score=score,
            ideal_score=primary.ideal_score,
        )

    alternatives = alternative_positions(score, primary, tolerance=tolerance)
    if not alternatives:
        return Recommendation(
            verdict=Verdict.INSUFFICIENT,
            message=NO_ALTERNATIVES_MESSAGE,
            position=primary.name,
            score=score,
            ideal_score=primary.ideal_score,
        )
    names = [profile.name for profile in alternatives]
    return Recommendation(
        verdict=Verdict.INSUFFICIENT,
        message=(
            f"Score {score:.2f} is below the ideal score {primary.ideal_score:.2f} "
            f"for {primary.name}. Consider: {', '.join(names)}."
        ),
        position=primary.name,
        score=score,
        ideal_score=primary.ideal_score,
        alternative_positions=names,
    )
