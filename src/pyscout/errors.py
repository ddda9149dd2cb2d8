"""Error taxonomy shared by the scoring engine and its callers."""

from __future__ import annotations


class ScoringEngineError(Exception):
    """Base class for every error the engine reports to its callers."""

    kind = "scoring_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, object]:
        return {"success": False, "error": self.kind, "message": self.message}


class ValidationError(ScoringEngineError, ValueError):
    """Malformed or out-of-range caller input."""

    kind = "validation_error"


class UnknownPositionError(ScoringEngineError):
    """A position label that does not map to a known position code."""

    kind = "unknown_position"

    def __init__(self, label: str):
        super().__init__(f"Unknown position label {label!r}")
        self.label = label


class InferenceError(ScoringEngineError):
    """Predictor used before training, or with mismatched dimensions."""

    kind = "inference_error"


class TrainingDataError(ScoringEngineError):
    """Training dataset missing, empty or missing required columns."""

    kind = "training_data_error"


class TrainingCancelled(ScoringEngineError):
    """Training stopped by its cancel event or timeout before finishing."""

    kind = "training_cancelled"
