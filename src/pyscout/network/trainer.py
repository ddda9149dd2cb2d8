"""Fit predictor weights from labeled examples with early stopping."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Literal, Optional, Sequence

import numpy as np

from pyscout.config.settings import (
    DEFAULT_LEARNING_RATE,
    DEFAULT_LOG_EVERY,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_PATIENCE,
    ScoringSettings,
)
from pyscout.errors import TrainingCancelled, TrainingDataError
from pyscout.features import FEATURE_COUNT
from pyscout.ingest import TrainingExample

from .predictor import NetworkWeights, Predictor, sigmoid


logger = logging.getLogger(__name__)

StopReason = Literal["early_stop", "max_iterations"]


@dataclass
class TrainingConfig:
    learning_rate: float = DEFAULT_LEARNING_RATE
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    patience: int = DEFAULT_PATIENCE
    seed: Optional[int] = None
    log_every: int = DEFAULT_LOG_EVERY
    timeout: Optional[float] = None
    cancel_event: Optional[threading.Event] = None

    def __post_init__(self) -> None:
        if self.learning_rate <= 0:
            raise ValueError("learning_rate must be positive")
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")
        if self.patience < 1:
            raise ValueError("patience must be at least 1")
        if self.log_every < 1:
            raise ValueError("log_every must be at least 1")

    @classmethod
    def from_settings(cls, settings: ScoringSettings, **overrides) -> "TrainingConfig":
        values = {
            "learning_rate": settings.learning_rate,
            "max_iterations": settings.max_iterations,
            "patience": settings.patience,
            "seed": settings.seed,
            "log_every": settings.log_every,
            "timeout": settings.training_timeout,
        }
        values.update(overrides)
        return cls(**values)


@dataclass(frozen=True)
class TrainingReport:
    iterations: int
    best_error: float
    final_error: float
    stop_reason: StopReason
    examples: int
    elapsed_seconds: float


class _Network:
    """Mutable working copy of the weights used during a training pass."""

    def __init__(self, initial: NetworkWeights):
        self.weights = [np.array(matrix, dtype=float) for matrix in initial.weights]
        self.biases = [np.array(bias, dtype=float) for bias in initial.biases]

    def freeze(self) -> NetworkWeights:
        return NetworkWeights(weights=tuple(self.weights), biases=tuple(self.biases))

    def forward_all(self, inputs: np.ndarray) -> np.ndarray:
        activation = inputs
        for matrix, bias in zip(self.weights, self.biases):
            activation = sigmoid(activation @ matrix.T + bias)
        return activation[:, 0]

    def step(self, features: np.ndarray, target: float, rate: float) -> None:
        activations = [features]
        for matrix, bias in zip(self.weights, self.biases):
            activations.append(sigmoid(matrix @ activations[-1] + bias))

        # sigmoid output with cross-entropy cost: the output delta is the raw error
        delta = np.array([target]) - activations[-1]
        for layer in range(len(self.weights) - 1, -1, -1):
            previous = activations[layer]
            next_delta = None
            if layer > 0:
                next_delta = previous * (1.0 - previous) * (self.weights[layer].T @ delta)
            self.weights[layer] += rate * np.outer(delta, previous)
            self.biases[layer] += rate * delta
            if next_delta is not None:
                delta = next_delta


def _as_arrays(examples: Sequence[TrainingExample]) -> tuple[np.ndarray, np.ndarray]:
    if not examples:
        raise TrainingDataError("cannot train on an empty dataset")
    inputs = np.asarray([example.features for example in examples], dtype=float)
    targets = np.asarray([example.output for example in examples], dtype=float)
    if inputs.ndim != 2 or inputs.shape[1] != FEATURE_COUNT:
        raise TrainingDataError(
            f"training features have shape {inputs.shape}, expected (n, {FEATURE_COUNT})"
        )
    if not (np.all(np.isfinite(inputs)) and np.all(np.isfinite(targets))):
        raise TrainingDataError("training data contains non-finite values")
    return inputs, targets


def train(
    predictor: Predictor,
    examples: Sequence[TrainingExample],
    config: TrainingConfig | None = None,
) -> TrainingReport:
    """Train from scratch and install the result on ``predictor``.

    Each iteration is one shuffled online pass over the examples followed by a
    mean-absolute-error evaluation over the full set. Training stops when the
    error has not improved for ``patience`` consecutive iterations or when
    ``max_iterations`` is reached. The predictor only receives new weights once
    training finishes; cancellation leaves its current weights in place.
    """

    config = config or TrainingConfig()
    inputs, targets = _as_arrays(examples)
    rng = np.random.default_rng(config.seed)
    network = _Network(NetworkWeights.initialize(rng))

    started = time.monotonic()
    deadline = started + config.timeout if config.timeout is not None else None
    best_error = float("inf")
    current_error = float("inf")
    stall = 0
    stop_reason: StopReason = "max_iterations"
    iterations = 0

    logger.info(
        "Training predictor on %d examples (rate=%s, max_iterations=%d, patience=%d)",
        len(examples),
        config.learning_rate,
        config.max_iterations,
        config.patience,
    )

    for iteration in range(config.max_iterations):
        if config.cancel_event is not None and config.cancel_event.is_set():
            raise TrainingCancelled(f"training cancelled at iteration {iteration}")
        if deadline is not None and time.monotonic() > deadline:
            raise TrainingCancelled(
                f"training exceeded {config.timeout:.1f}s timeout at iteration {iteration}"
            )

        for index in rng.permutation(len(targets)):
            network.step(inputs[index], targets[index], config.learning_rate)
        iterations = iteration + 1

        current_error = float(np.mean(np.abs(network.forward_all(inputs) - targets)))
        if current_error < best_error:
            best_error = current_error
            stall = 0
        else:
            stall += 1
            if stall >= config.patience:
                logger.info("Early stopping triggered at iteration %d", iteration)
                stop_reason = "early_stop"
                break

        if iteration % config.log_every == 0:
            logger.info("Iteration %d: error %.6f", iteration, current_error)

    predictor.install(network.freeze())
    report = TrainingReport(
        iterations=iterations,
        best_error=best_error,
        final_error=current_error,
        stop_reason=stop_reason,
        examples=len(examples),
        elapsed_seconds=time.monotonic() - started,
    )
    logger.info(
        "Training completed after %d iterations (best error %.6f, %s)",
        report.iterations,
        report.best_error,
        report.stop_reason,
    )
    return report


def train_new(
    examples: Sequence[TrainingExample],
    config: TrainingConfig | None = None,
) -> tuple[Predictor, TrainingReport]:
    predictor = Predictor()
    report = train(predictor, examples, config)
    return predictor, report
