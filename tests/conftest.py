import pytest

from pyscout.config import ScoringSettings
from pyscout.config.settings import DEFAULT_DATASET_PATH
from pyscout.ingest import load_examples_from_csv
from pyscout.network import TrainingConfig
from pyscout.scoring import ScoringEngine


FAST_TRAINING = TrainingConfig(max_iterations=150, patience=50, seed=11, log_every=50)


@pytest.fixture(scope="session")
def training_examples():
    return load_examples_from_csv(DEFAULT_DATASET_PATH)


@pytest.fixture(scope="session")
def trained_engine(training_examples) -> ScoringEngine:
    engine = ScoringEngine(settings=ScoringSettings(seed=11))
    engine.train(training_examples, FAST_TRAINING)
    return engine
