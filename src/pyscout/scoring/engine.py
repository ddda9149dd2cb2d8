"""Service object that owns the predictor lifecycle and serves score requests."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

from pydantic import ValidationError as PydanticValidationError

from pyscout.config import ScoringSettings
from pyscout.errors import InferenceError, ValidationError
from pyscout.features import FeatureVector, normalize
from pyscout.features.normalizer import HEIGHT_INDEX, WEIGHT_INDEX
from pyscout.ingest import TrainingExample, load_examples_from_csv
from pyscout.models import AttributeInput, Recommendation
from pyscout.network import NetworkWeights, Predictor, TrainingConfig, TrainingReport, train

from .blend import blend
from .recommend import recommend


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreBreakdown:
    score: float
    predictor_output: float
    height_fit: float
    weight_fit: float
    features: FeatureVector

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "predictor_output": self.predictor_output,
            "height_fit": self.height_fit,
            "weight_fit": self.weight_fit,
            "features": list(self.features),
        }


def _format_validation_error(exc: PydanticValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ())) or "input"
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)


def coerce_attributes(attributes: AttributeInput | Mapping[str, Any]) -> AttributeInput:
    if isinstance(attributes, AttributeInput):
        return attributes
    if not isinstance(attributes, Mapping):
        raise ValidationError(f"attributes must be a mapping, got {type(attributes).__name__}")
    try:
        return AttributeInput.model_validate(dict(attributes))
    except PydanticValidationError as exc:
        raise ValidationError(_format_validation_error(exc)) from exc


class ScoringEngine:
    """Scores athletes and recommends positions.

    Lifecycle: construct, then :meth:`train` or :meth:`load_weights`, then serve
    :meth:`compute_score` / :meth:`recommend`. Build one instance at process start
    (see :meth:`from_settings`) and hand it to request handlers.
    """

    def __init__(self, predictor: Optional[Predictor] = None, settings: Optional[ScoringSettings] = None):
        self.predictor = predictor or Predictor()
        self.settings = settings or ScoringSettings()
        self.last_report: Optional[TrainingReport] = None

    @classmethod
    def from_settings(
        cls,
        settings: Optional[ScoringSettings] = None,
        *,
        config: Optional[TrainingConfig] = None,
    ) -> "ScoringEngine":
        """Build a ready engine: load stored weights if present, otherwise train.

        Raises TrainingDataError when the dataset cannot be used, so callers never
        end up serving an untrained predictor.
        """

        settings = settings or ScoringSettings.from_env()
        engine = cls(settings=settings)
        weights_path = settings.weights_path
        if weights_path is not None and weights_path.exists():
            engine.load_weights(weights_path)
            return engine

        examples = load_examples_from_csv(settings.dataset_path)
        engine.train(examples, config or TrainingConfig.from_settings(settings))
        if weights_path is not None:
            engine.predictor.snapshot().save(weights_path)
            logger.info("Saved trained weights to %s", weights_path)
        return engine

    @property
    def is_ready(self) -> bool:
        return self.predictor.is_ready

    def train(
        self,
        examples: Sequence[TrainingExample],
        config: Optional[TrainingConfig] = None,
    ) -> TrainingReport:
        report = train(self.predictor, examples, config or TrainingConfig.from_settings(self.settings))
        self.last_report = report
        return report

    def load_weights(self, path: Path) -> None:
        self.predictor.install(NetworkWeights.load(path))
        logger.info("Loaded predictor weights from %s", path)

    def compute_score(self, attributes: AttributeInput | Mapping[str, Any]) -> ScoreBreakdown:
        attrs = coerce_attributes(attributes)
        if not self.predictor.is_ready:
            raise InferenceError("predictor has not completed training")

        features = normalize(attrs)
        predictor_output = self.predictor.infer(features)
        height_fit = features[HEIGHT_INDEX]
        weight_fit = features[WEIGHT_INDEX]
        score = blend(predictor_output, height_fit, weight_fit)
        if not math.isfinite(score):
            raise InferenceError("predictor produced a non-finite score")
        return ScoreBreakdown(
            score=score,
            predictor_output=predictor_output,
            height_fit=height_fit,
            weight_fit=weight_fit,
            features=features,
        )

    def recommend(self, score: float, natural_positions: Sequence[str] | str) -> Recommendation:
        return recommend(score, natural_positions, tolerance=self.settings.alternative_tolerance)
