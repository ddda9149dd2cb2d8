"""Expected physical ranges and ideal scores for each playing position."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Tuple

from pyscout.errors import UnknownPositionError, ValidationError


@dataclass(frozen=True)
class PositionProfile:
    code: int
    label: str
    name: str
    height_range: Tuple[float, float]
    weight_range: Tuple[float, float]
    ideal_score: float


_POSITION_PROFILES: Dict[int, PositionProfile] = {
    0: PositionProfile(
        code=0,
        label="PO",
        name="Goalkeeper",
        height_range=(170.0, 190.0),
        weight_range=(60.0, 80.0),
        ideal_score=0.80,
    ),
    1: PositionProfile(
        code=1,
        label="DFC",
        name="Center-back",
        height_range=(168.0, 185.0),
        weight_range=(60.0, 75.0),
        ideal_score=0.82,
    ),
    2: PositionProfile(
        code=2,
        label="LAT",
        name="Fullback / Wing-back",
        height_range=(160.0, 175.0),
        weight_range=(52.0, 68.0),
        ideal_score=0.75,
    ),
    3: PositionProfile(
        code=3,
        label="MC",
        name="Central midfielder",
        height_range=(160.0, 175.0),
        weight_range=(50.0, 65.0),
        ideal_score=0.85,
    ),
    4: PositionProfile(
        code=4,
        label="MCD",
        name="Defensive midfielder",
        height_range=(162.0, 178.0),
        weight_range=(55.0, 70.0),
        ideal_score=0.78,
    ),
    5: PositionProfile(
        code=5,
        label="MCO",
        name="Attacking midfielder",
        height_range=(155.0, 172.0),
        weight_range=(50.0, 63.0),
        ideal_score=0.88,
    ),
    6: PositionProfile(
        code=6,
        label="EXT",
        name="Winger",
        height_range=(155.0, 170.0),
        weight_range=(48.0, 62.0),
        ideal_score=0.72,
    ),
    7: PositionProfile(
        code=7,
        label="DC",
        name="Forward",
        height_range=(160.0, 178.0),
        weight_range=(55.0, 70.0),
        ideal_score=0.90,
    ),
}

_LABEL_LOOKUP: Dict[str, int] = {}
for _profile in _POSITION_PROFILES.values():
    _LABEL_LOOKUP[_profile.label.upper()] = _profile.code
    _LABEL_LOOKUP[_profile.name.upper()] = _profile.code


def iter_profiles() -> Iterable[PositionProfile]:
    """Return profiles in ascending position-code order."""

    return (_POSITION_PROFILES[code] for code in sorted(_POSITION_PROFILES))


def position_count() -> int:
    return len(_POSITION_PROFILES)


def get_profile(code: int) -> PositionProfile:
    """Fetch the profile for a position code, raising ValidationError if out of range."""

    if isinstance(code, bool) or not isinstance(code, int):
        raise ValidationError(f"position must be an integer code, got {code!r}")
    if code not in _POSITION_PROFILES:
        raise ValidationError(
            f"position {code} is outside 0-{position_count() - 1}"
        )
    return _POSITION_PROFILES[code]


def get_profile_by_label(label: str) -> PositionProfile:
    """Resolve a short label ("MC") or full name ("Central midfielder")."""

    key = label.strip().upper() if isinstance(label, str) else ""
    if key not in _LABEL_LOOKUP:
        raise UnknownPositionError(str(label))
    return _POSITION_PROFILES[_LABEL_LOOKUP[key]]


POSITION_LABELS: Mapping[int, str] = {
    code: profile.label for code, profile in _POSITION_PROFILES.items()
}
