import logging
from pathlib import Path

from pyscout.config import ScoringSettings
from pyscout.config.settings import DEFAULT_DATASET_PATH
from pyscout.network import TrainingConfig


def test_defaults_match_reference_training_parameters(monkeypatch):
    for name in (
        "PYSCOUT_DATASET",
        "PYSCOUT_WEIGHTS",
        "PYSCOUT_LEARNING_RATE",
        "PYSCOUT_MAX_ITERATIONS",
        "PYSCOUT_PATIENCE",
        "PYSCOUT_SEED",
        "PYSCOUT_LOG_EVERY",
        "PYSCOUT_TRAINING_TIMEOUT",
        "PYSCOUT_ALTERNATIVE_TOLERANCE",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = ScoringSettings.from_env()

    assert settings.dataset_path == DEFAULT_DATASET_PATH
    assert settings.weights_path is None
    assert settings.learning_rate == 0.001
    assert settings.max_iterations == 6000
    assert settings.patience == 2000
    assert settings.alternative_tolerance == 0.1


def test_environment_overrides(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("PYSCOUT_DATASET", str(tmp_path / "rows.csv"))
    monkeypatch.setenv("PYSCOUT_WEIGHTS", str(tmp_path / "weights.json"))
    monkeypatch.setenv("PYSCOUT_MAX_ITERATIONS", "250")
    monkeypatch.setenv("PYSCOUT_PATIENCE", "0")
    monkeypatch.setenv("PYSCOUT_SEED", "17")
    monkeypatch.setenv("PYSCOUT_TRAINING_TIMEOUT", "30")

    settings = ScoringSettings.from_env()
    config = TrainingConfig.from_settings(settings, log_every=10)

    assert settings.dataset_path == tmp_path / "rows.csv"
    assert settings.weights_path == tmp_path / "weights.json"
    assert config.max_iterations == 250
    assert config.patience == 1
    assert config.seed == 17
    assert config.timeout == 30.0
    assert config.log_every == 10


def test_invalid_values_fall_back_with_warning(monkeypatch, caplog):
    monkeypatch.setenv("PYSCOUT_LEARNING_RATE", "fast")
    monkeypatch.setenv("PYSCOUT_MAX_ITERATIONS", "lots")

    with caplog.at_level(logging.WARNING, logger="pyscout.config.settings"):
        settings = ScoringSettings.from_env()

    assert settings.learning_rate == 0.001
    assert settings.max_iterations == 6000
    assert "PYSCOUT_LEARNING_RATE" in caplog.text
