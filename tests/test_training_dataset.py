from pathlib import Path

import pytest

from pyscout.config.settings import DEFAULT_DATASET_PATH
from pyscout.errors import TrainingDataError
from pyscout.ingest import examples_from_records, load_examples_from_csv, load_training_csv

HEADER = "position,height,weight,experience,videoUploaded,ambidextrous,dominantFoot,versatility,output\n"


def _write(tmp_path: Path, body: str, header: str = HEADER) -> Path:
    path = tmp_path / "training.csv"
    path.write_text(header + body, encoding="utf-8")
    return path


def test_rows_are_scaled_linearly_with_importance(tmp_path: Path):
    path = _write(tmp_path, "3,175,75,10,1,1,left,1,0.8\n")

    [example] = load_examples_from_csv(path)

    assert example.features == pytest.approx((3.0, 0.6, 0.6, 0.5, 1.5, 0.1, 1.0, 0.1))
    assert example.output == pytest.approx(0.8)


def test_scaling_differs_from_serving_tiers(tmp_path: Path):
    path = _write(tmp_path, "3,170,65,3,0,0,right,0,0.5\n")

    [example] = load_examples_from_csv(path)

    # same athlete fits the midfielder range exactly, yet training keeps a continuous value
    assert example.features[1] == pytest.approx(0.48)
    assert example.features[6] == 0.0


def test_both_feet_rows_are_canonicalized(tmp_path: Path):
    path = _write(tmp_path, "5,160,55,4,0,0,both,0,0.7\n")

    [example] = load_examples_from_csv(path)

    assert example.features[5] == pytest.approx(0.1)
    assert example.features[6] == 0.0


def test_missing_columns_fail_fast(tmp_path: Path):
    path = _write(tmp_path, "3,170,65\n", header="position,height,weight\n")

    with pytest.raises(TrainingDataError, match="missing columns"):
        load_training_csv(path)


def test_empty_dataset_fails_fast(tmp_path: Path):
    path = _write(tmp_path, "")

    with pytest.raises(TrainingDataError, match="no rows"):
        load_examples_from_csv(path)


def test_missing_file_fails_fast(tmp_path: Path):
    with pytest.raises(TrainingDataError):
        load_examples_from_csv(tmp_path / "absent.csv")


def test_non_numeric_value_reports_line(tmp_path: Path):
    path = _write(tmp_path, "3,170,65,3,0,0,right,0,0.5\n3,tall,65,3,0,0,right,0,0.5\n")

    with pytest.raises(TrainingDataError, match="line 3: height"):
        load_examples_from_csv(path)


def test_examples_from_records():
    examples = examples_from_records(
        [
            {
                "position": 0,
                "height": 180,
                "weight": 70,
                "experience": 5,
                "videoUploaded": True,
                "ambidextrous": False,
                "dominantFoot": "right",
                "versatility": 0,
                "output": 0.9,
            }
        ]
    )

    assert examples[0].features[4] == pytest.approx(1.5)
    assert examples[0].output == pytest.approx(0.9)

    with pytest.raises(TrainingDataError):
        examples_from_records([{"position": 0}])


def test_packaged_dataset_loads():
    examples = load_examples_from_csv(DEFAULT_DATASET_PATH)

    assert len(examples) == 48
    assert all(0.0 <= example.output <= 1.0 for example in examples)
