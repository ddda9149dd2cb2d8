"""Load the labeled training CSV and scale rows for the trainer.

Training rows use continuous min/max scaling with per-column importance
multipliers. Serving requests go through the step-function tiers in
:mod:`pyscout.features.normalizer` instead; keep the two separate.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Mapping, Sequence, Tuple

from pydantic import BaseModel

from pyscout.errors import TrainingDataError
from pyscout.features import FEATURE_ORDER, FeatureVector


logger = logging.getLogger(__name__)

REQUIRED_COLUMNS: Tuple[str, ...] = (
    "position",
    "height",
    "weight",
    "experience",
    "videoUploaded",
    "ambidextrous",
    "dominantFoot",
    "versatility",
    "output",
)

HEIGHT_SCALE = (150.0, 200.0)
WEIGHT_SCALE = (50.0, 100.0)
EXPERIENCE_SCALE = (0.0, 20.0)
OUTPUT_SCALE = (0.0, 1.0)

HEIGHT_IMPORTANCE = 1.2
WEIGHT_IMPORTANCE = 1.2
VIDEO_IMPORTANCE = 1.5
AMBIDEXTROUS_IMPORTANCE = 0.1
VERSATILITY_IMPORTANCE = 0.1


@dataclass(frozen=True)
class TrainingExample:
    features: FeatureVector
    output: float


class TrainingRow(BaseModel):
    line: int
    raw_position: str
    raw_height: str
    raw_weight: str
    raw_experience: str
    raw_video_uploaded: str
    raw_ambidextrous: str
    raw_dominant_foot: str
    raw_versatility: str
    raw_output: str

    @classmethod
    def from_mapping(cls, row: Mapping[str, str | None], *, line: int) -> "TrainingRow":
        def extract(column: str) -> str:
            value = row.get(column)
            return value.strip() if value is not None else ""

        return cls(
            line=line,
            raw_position=extract("position"),
            raw_height=extract("height"),
            raw_weight=extract("weight"),
            raw_experience=extract("experience"),
            raw_video_uploaded=extract("videoUploaded"),
            raw_ambidextrous=extract("ambidextrous"),
            raw_dominant_foot=extract("dominantFoot"),
            raw_versatility=extract("versatility"),
            raw_output=extract("output"),
        )


def linear_scale(value: float, bounds: Tuple[float, float]) -> float:
    low, high = bounds
    return (value - low) / (high - low)


def _parse_number(raw: str, *, column: str, line: int) -> float:
    try:
        return float(raw)
    except ValueError:
        raise TrainingDataError(f"line {line}: {column} '{raw}' is not numeric") from None


def _parse_flag(raw: str, *, column: str, line: int) -> int:
    text = raw.strip().lower()
    if text in {"1", "true", "t", "yes", "y"}:
        return 1
    if text in {"0", "false", "f", "no", "n", ""}:
        return 0
    try:
        return int(float(text))
    except ValueError:
        raise TrainingDataError(f"line {line}: {column} '{raw}' is not a flag") from None


def load_training_csv(path: Path) -> List[TrainingRow]:
    if not path.exists():
        raise TrainingDataError(f"training dataset {path} does not exist")
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        columns = [name.strip() for name in (reader.fieldnames or [])]
        missing = [column for column in REQUIRED_COLUMNS if column not in columns]
        if missing:
            raise TrainingDataError(
                f"training dataset {path} is missing columns: {', '.join(missing)}"
            )
        rows = [
            TrainingRow.from_mapping(
                {(key or "").strip(): value for key, value in row.items()},
                line=index,
            )
            for index, row in enumerate(reader, start=2)
        ]
    return rows


def row_to_example(row: TrainingRow) -> TrainingExample:
    line = row.line
    foot = row.raw_dominant_foot.lower()
    ambidextrous = _parse_flag(row.raw_ambidextrous, column="ambidextrous", line=line)
    if foot == "both":
        foot = "right"
        ambidextrous = 1

    features = (
        _parse_number(row.raw_position, column="position", line=line),
        linear_scale(_parse_number(row.raw_height, column="height", line=line), HEIGHT_SCALE)
        * HEIGHT_IMPORTANCE,
        linear_scale(_parse_number(row.raw_weight, column="weight", line=line), WEIGHT_SCALE)
        * WEIGHT_IMPORTANCE,
        linear_scale(
            _parse_number(row.raw_experience, column="experience", line=line), EXPERIENCE_SCALE
        ),
        _parse_flag(row.raw_video_uploaded, column="videoUploaded", line=line) * VIDEO_IMPORTANCE,
        ambidextrous * AMBIDEXTROUS_IMPORTANCE,
        1.0 if foot == "left" else 0.0,
        _parse_flag(row.raw_versatility, column="versatility", line=line) * VERSATILITY_IMPORTANCE,
    )
    output = linear_scale(_parse_number(row.raw_output, column="output", line=line), OUTPUT_SCALE)
    return TrainingExample(features=tuple(float(value) for value in features), output=output)


def rows_to_examples(rows: Sequence[TrainingRow]) -> List[TrainingExample]:
    examples = [row_to_example(row) for row in rows]
    if not examples:
        raise TrainingDataError("training dataset has no rows")
    for example in examples:
        if len(example.features) != len(FEATURE_ORDER):
            raise TrainingDataError("training row does not match the feature order")
    logger.debug("Loaded %d training examples", len(examples))
    return examples


def load_examples_from_csv(path: Path) -> List[TrainingExample]:
    return rows_to_examples(load_training_csv(path))


def examples_from_records(records: Iterable[Mapping[str, object]]) -> List[TrainingExample]:
    """Build examples from in-memory rows keyed by the CSV column names."""

    rows: List[TrainingRow] = []
    for index, record in enumerate(records, start=1):
        missing = [column for column in REQUIRED_COLUMNS if column not in record]
        if missing:
            raise TrainingDataError(
                f"record {index} is missing columns: {', '.join(missing)}"
            )
        rows.append(
            TrainingRow.from_mapping(
                {key: None if value is None else str(value) for key, value in record.items()},
                line=index,
            )
        )
    return rows_to_examples(rows)
