import pytest

from pyscout.scoring import blend
from pyscout.scoring.blend import HEIGHT_FIT_WEIGHT, PREDICTOR_WEIGHT, WEIGHT_FIT_WEIGHT


def test_blend_coefficients():
    assert (PREDICTOR_WEIGHT, HEIGHT_FIT_WEIGHT, WEIGHT_FIT_WEIGHT) == (0.5, 0.3, 0.2)
    assert blend(0.4, 1.0, 0.7) == pytest.approx(0.64)


def test_blend_range():
    assert blend(0.0, 0.0, 0.0) == 0.0
    assert blend(1.0, 1.0, 1.0) == pytest.approx(1.0)
    assert blend(0.99, 0.7, 0.0) == pytest.approx(0.705)
