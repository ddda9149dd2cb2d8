import math
from pathlib import Path

import pytest

from pyscout.config import ScoringSettings
from pyscout.config.settings import DEFAULT_DATASET_PATH
from pyscout.errors import InferenceError, TrainingDataError, ValidationError
from pyscout.models import AttributeInput, Verdict
from pyscout.network import TrainingConfig
from pyscout.scoring import ScoringEngine, blend


MIDFIELDER = {
    "position": 3,
    "height": 170,
    "weight": 65,
    "experience": 3,
    "videoUploaded": True,
    "ambidextrous": False,
    "dominantFoot": "right",
    "versatility": True,
}


def test_midfielder_score_is_reproducible(trained_engine: ScoringEngine):
    first = trained_engine.compute_score(MIDFIELDER)
    second = trained_engine.compute_score(AttributeInput.model_validate(MIDFIELDER))

    assert first == second
    assert first.height_fit == 1.0
    assert first.weight_fit == 1.0
    assert first.features == pytest.approx((3.0, 1.0, 1.0, 0.5, 1.2, 0.0, 0.1, 0.05))
    assert first.score == pytest.approx(blend(first.predictor_output, 1.0, 1.0))
    assert first.to_dict()["score"] == first.score


@pytest.mark.parametrize(
    "overrides",
    [
        {},
        {"position": 0, "height": 150, "weight": 90, "experience": 0},
        {"position": 1, "height": 185, "weight": 75, "dominantFoot": "left", "ambidextrous": True},
        {"position": 7, "height": 150, "weight": 48, "criminalRecord": True},
        {"position": 5, "dominantFoot": "both", "experience": 12},
    ],
)
def test_scores_are_finite_and_bounded(trained_engine: ScoringEngine, overrides):
    payload = dict(MIDFIELDER)
    payload.update(overrides)

    score = trained_engine.compute_score(payload).score

    assert math.isfinite(score)
    assert 0.0 <= score <= 1.0


def test_both_feet_scores_like_ambidextrous_right(trained_engine: ScoringEngine):
    both = trained_engine.compute_score(dict(MIDFIELDER, dominantFoot="both"))
    explicit = trained_engine.compute_score(dict(MIDFIELDER, dominantFoot="right", ambidextrous=True))

    assert both.score == explicit.score


@pytest.mark.parametrize(
    "payload",
    [
        dict(MIDFIELDER, position=8),
        dict(MIDFIELDER, height="tall"),
        dict(MIDFIELDER, position=True),
        {key: value for key, value in MIDFIELDER.items() if key != "experience"},
        {key: value for key, value in MIDFIELDER.items() if key != "weight"},
    ],
)
def test_invalid_attributes_raise_validation_error(trained_engine: ScoringEngine, payload):
    with pytest.raises(ValidationError):
        trained_engine.compute_score(payload)


def test_untrained_engine_raises_inference_error():
    engine = ScoringEngine()

    assert not engine.is_ready
    with pytest.raises(InferenceError):
        engine.compute_score(MIDFIELDER)


def test_validation_runs_before_readiness_check():
    with pytest.raises(ValidationError):
        ScoringEngine().compute_score(dict(MIDFIELDER, position=11))


def test_recommend_uses_configured_tolerance():
    engine = ScoringEngine(settings=ScoringSettings(alternative_tolerance=0.03))

    result = engine.recommend(0.83, ["MC"])

    assert result.verdict is Verdict.INSUFFICIENT
    assert result.alternative_positions == ["Goalkeeper", "Center-back"]


def test_from_settings_trains_then_reuses_saved_weights(tmp_path: Path):
    weights_path = tmp_path / "weights.json"
    settings = ScoringSettings(dataset_path=DEFAULT_DATASET_PATH, weights_path=weights_path, seed=2)
    config = TrainingConfig(max_iterations=5, seed=2)

    trained = ScoringEngine.from_settings(settings, config=config)
    assert weights_path.exists()
    assert trained.last_report is not None

    reloaded = ScoringEngine.from_settings(settings)
    assert reloaded.last_report is None
    assert reloaded.compute_score(MIDFIELDER).score == pytest.approx(
        trained.compute_score(MIDFIELDER).score
    )


def test_from_settings_fails_without_dataset(tmp_path: Path):
    settings = ScoringSettings(dataset_path=tmp_path / "missing.csv")

    with pytest.raises(TrainingDataError):
        ScoringEngine.from_settings(settings, config=TrainingConfig(max_iterations=2))
