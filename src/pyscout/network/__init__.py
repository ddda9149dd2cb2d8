"""Feed-forward predictor and its trainer."""

from .predictor import LAYER_SIZES, NetworkWeights, Predictor
from .trainer import TrainingConfig, TrainingReport, train, train_new

__all__ = [
    "LAYER_SIZES",
    "NetworkWeights",
    "Predictor",
    "TrainingConfig",
    "TrainingReport",
    "train",
    "train_new",
]
