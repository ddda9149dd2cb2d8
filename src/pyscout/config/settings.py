"""Runtime settings for the scoring engine, read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


logger = logging.getLogger(__name__)

_DATASET_ENV = "PYSCOUT_DATASET"
_WEIGHTS_ENV = "PYSCOUT_WEIGHTS"
_LEARNING_RATE_ENV = "PYSCOUT_LEARNING_RATE"
_MAX_ITERATIONS_ENV = "PYSCOUT_MAX_ITERATIONS"
_PATIENCE_ENV = "PYSCOUT_PATIENCE"
_SEED_ENV = "PYSCOUT_SEED"
_LOG_EVERY_ENV = "PYSCOUT_LOG_EVERY"
_TRAINING_TIMEOUT_ENV = "PYSCOUT_TRAINING_TIMEOUT"
_TOLERANCE_ENV = "PYSCOUT_ALTERNATIVE_TOLERANCE"

DEFAULT_DATASET_PATH = Path(__file__).resolve().parent.parent / "data" / "training.csv"
DEFAULT_LEARNING_RATE = 0.001
DEFAULT_MAX_ITERATIONS = 6000
DEFAULT_PATIENCE = 2000
DEFAULT_LOG_EVERY = 1000
DEFAULT_ALTERNATIVE_TOLERANCE = 0.1


def _env_float(name: str, default: float, *, clamp_min: float | None = None, clamp_max: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %s", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    if clamp_max is not None:
        value = min(clamp_max, value)
    return value


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def _env_optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; ignoring", name, raw)
        return None


def _env_optional_float(name: str, *, clamp_min: float | None = None) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; ignoring", name, raw)
        return None
    if clamp_min is not None:
        value = max(clamp_min, value)
    return value


def _env_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return Path(raw.strip()).expanduser()


@dataclass(frozen=True)
class ScoringSettings:
    dataset_path: Path = DEFAULT_DATASET_PATH
    weights_path: Optional[Path] = None
    learning_rate: float = DEFAULT_LEARNING_RATE
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    patience: int = DEFAULT_PATIENCE
    seed: Optional[int] = None
    log_every: int = DEFAULT_LOG_EVERY
    training_timeout: Optional[float] = None
    alternative_tolerance: float = DEFAULT_ALTERNATIVE_TOLERANCE

    @classmethod
    def from_env(cls) -> "ScoringSettings":
        return cls(
            dataset_path=_env_path(_DATASET_ENV) or DEFAULT_DATASET_PATH,
            weights_path=_env_path(_WEIGHTS_ENV),
            learning_rate=_env_float(_LEARNING_RATE_ENV, DEFAULT_LEARNING_RATE, clamp_min=1e-6),
            max_iterations=_env_int(_MAX_ITERATIONS_ENV, DEFAULT_MAX_ITERATIONS, min_value=1),
            patience=_env_int(_PATIENCE_ENV, DEFAULT_PATIENCE, min_value=1),
            seed=_env_optional_int(_SEED_ENV),
            log_every=_env_int(_LOG_EVERY_ENV, DEFAULT_LOG_EVERY, min_value=1),
            training_timeout=_env_optional_float(_TRAINING_TIMEOUT_ENV, clamp_min=0.0),
            alternative_tolerance=_env_float(
                _TOLERANCE_ENV, DEFAULT_ALTERNATIVE_TOLERANCE, clamp_min=0.0, clamp_max=1.0
            ),
        )
