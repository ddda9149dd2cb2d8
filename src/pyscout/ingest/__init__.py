"""Input adapters that load and scale labeled training data."""

from .dataset import (
    REQUIRED_COLUMNS,
    TrainingExample,
    TrainingRow,
    examples_from_records,
    linear_scale,
    load_examples_from_csv,
    load_training_csv,
    rows_to_examples,
)

__all__ = [
    "REQUIRED_COLUMNS",
    "TrainingExample",
    "TrainingRow",
    "examples_from_records",
    "linear_scale",
    "load_examples_from_csv",
    "load_training_csv",
    "rows_to_examples",
]
