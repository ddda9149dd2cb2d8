"""Feed-forward network used to score normalized athlete features."""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple

import numpy as np

from pyscout.errors import InferenceError
from pyscout.features import FEATURE_COUNT, FEATURE_ORDER


logger = logging.getLogger(__name__)

LAYER_SIZES: Tuple[int, ...] = (FEATURE_COUNT, 10, 5, 1)
INIT_SCALE = 0.1


def sigmoid(z: np.ndarray) -> np.ndarray:
    return 1.0 / (1.0 + np.exp(-np.clip(z, -500.0, 500.0)))


def _frozen(array: np.ndarray) -> np.ndarray:
    array = np.array(array, dtype=float, copy=True)
    array.setflags(write=False)
    return array


@dataclass(frozen=True, eq=False)
class NetworkWeights:
    """Immutable weight snapshot for the ``8 -> 10 -> 5 -> 1`` sigmoid network.

    ``weights[i]`` has shape ``(LAYER_SIZES[i + 1], LAYER_SIZES[i])`` and
    ``biases[i]`` has shape ``(LAYER_SIZES[i + 1],)``.
    """

    weights: Tuple[np.ndarray, ...]
    biases: Tuple[np.ndarray, ...]
    feature_order: Tuple[str, ...] = FEATURE_ORDER

    def __post_init__(self) -> None:
        if len(self.weights) != len(LAYER_SIZES) - 1 or len(self.biases) != len(LAYER_SIZES) - 1:
            raise InferenceError("network must have exactly three weight layers")
        for index, (matrix, bias) in enumerate(zip(self.weights, self.biases)):
            expected = (LAYER_SIZES[index + 1], LAYER_SIZES[index])
            if np.shape(matrix) != expected or np.shape(bias) != (expected[0],):
                raise InferenceError(
                    f"layer {index} has shape {np.shape(matrix)}/{np.shape(bias)}, expected {expected}"
                )
        object.__setattr__(self, "weights", tuple(_frozen(matrix) for matrix in self.weights))
        object.__setattr__(self, "biases", tuple(_frozen(bias) for bias in self.biases))
        object.__setattr__(self, "feature_order", tuple(self.feature_order))

    @classmethod
    def initialize(cls, rng: np.random.Generator) -> "NetworkWeights":
        weights = []
        biases = []
        for fan_in, fan_out in zip(LAYER_SIZES[:-1], LAYER_SIZES[1:]):
            weights.append(rng.uniform(-INIT_SCALE, INIT_SCALE, size=(fan_out, fan_in)))
            biases.append(rng.uniform(-INIT_SCALE, INIT_SCALE, size=fan_out))
        return cls(weights=tuple(weights), biases=tuple(biases))

    def forward(self, inputs: np.ndarray) -> np.ndarray:
        """Activate the network for a batch of shape ``(n, FEATURE_COUNT)``."""

        activation = inputs
        for matrix, bias in zip(self.weights, self.biases):
            activation = sigmoid(activation @ matrix.T + bias)
        return activation[:, 0]

    def to_dict(self) -> dict:
        return {
            "feature_order": list(self.feature_order),
            "layer_sizes": list(LAYER_SIZES),
            "weights": [matrix.tolist() for matrix in self.weights],
            "biases": [bias.tolist() for bias in self.biases],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "NetworkWeights":
        feature_order = tuple(data.get("feature_order", ()))
        if feature_order != FEATURE_ORDER:
            raise InferenceError(
                f"stored feature order {list(feature_order)} does not match {list(FEATURE_ORDER)}"
            )
        if tuple(data.get("layer_sizes", ())) != LAYER_SIZES:
            raise InferenceError(
                f"stored layer sizes {data.get('layer_sizes')} do not match {list(LAYER_SIZES)}"
            )
        try:
            weights = tuple(np.asarray(matrix, dtype=float) for matrix in data["weights"])
            biases = tuple(np.asarray(bias, dtype=float) for bias in data["biases"])
        except (KeyError, TypeError, ValueError) as exc:
            raise InferenceError(f"stored weights are malformed: {exc}") from exc
        return cls(weights=weights, biases=biases, feature_order=feature_order)

    @classmethod
    def load(cls, path: Path) -> "NetworkWeights":
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise InferenceError(f"unable to read weights from {path}: {exc}") from exc
        return cls.from_dict(data)

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")


class Predictor:
    """Holds the current weight snapshot and serves inference from it.

    Both :meth:`install` and :meth:`snapshot` take the lock, and each inference
    call works from the one snapshot it read, so a concurrent install never
    exposes half-updated weights.
    """

    def __init__(self, weights: Optional[NetworkWeights] = None):
        self._lock = threading.Lock()
        self._weights = weights

    @property
    def is_ready(self) -> bool:
        with self._lock:
            return self._weights is not None

    def snapshot(self) -> NetworkWeights:
        with self._lock:
            weights = self._weights
        if weights is None:
            raise InferenceError("predictor has not been trained or loaded")
        return weights

    def install(self, weights: NetworkWeights) -> None:
        with self._lock:
            self._weights = weights
        logger.debug("Installed new predictor weights")

    def infer(self, vector: Sequence[float]) -> float:
        weights = self.snapshot()
        inputs = np.asarray(vector, dtype=float)
        if inputs.shape != (FEATURE_COUNT,):
            raise InferenceError(
                f"feature vector has {inputs.size} values, expected {FEATURE_COUNT}"
            )
        return float(weights.forward(inputs.reshape(1, -1))[0])

    def infer_many(self, vectors: Sequence[Sequence[float]]) -> list[float]:
        weights = self.snapshot()
        inputs = np.asarray(vectors, dtype=float)
        if inputs.ndim != 2 or inputs.shape[1] != FEATURE_COUNT:
            raise InferenceError(
                f"feature batch has shape {inputs.shape}, expected (n, {FEATURE_COUNT})"
            )
        return [float(value) for value in weights.forward(inputs)]
