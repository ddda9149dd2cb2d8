import pytest
from pydantic import ValidationError

from pyscout.models import AttributeInput, DominantFoot


def test_attribute_input_is_frozen():
    attrs = AttributeInput(position=3, height=170, weight=65, experience=2)

    assert attrs.dominant_foot is DominantFoot.RIGHT
    assert attrs.video_uploaded is False

    with pytest.raises((TypeError, ValidationError)):
        attrs.height = 180  # type: ignore[misc]


def test_attribute_input_accepts_request_aliases():
    attrs = AttributeInput.model_validate(
        {
            "position": 2,
            "height": 168,
            "weight": 60,
            "yearsexp": 4,
            "videoUploaded": 1,
            "criminalRecord": False,
            "foot": "left",
            "injuryHistory": 1,
            "trainingHoursPerWeek": 12,
        }
    )

    assert attrs.experience == 4
    assert attrs.video_uploaded is True
    assert attrs.dominant_foot is DominantFoot.LEFT
    assert attrs.training_hours_per_week == 12


@pytest.mark.parametrize(
    "overrides",
    [
        {"position": 8},
        {"position": -1},
        {"position": True},
        {"position": "3"},
        {"position": 3.5},
        {"height": 0},
        {"weight": "heavy"},
        {"experience": -2},
        {"dominant_foot": "none"},
    ],
)
def test_attribute_input_rejects_invalid_values(overrides):
    payload = {"position": 3, "height": 170, "weight": 65, "experience": 2}
    payload.update(overrides)

    with pytest.raises(ValidationError):
        AttributeInput.model_validate(payload)


def test_attribute_input_requires_experience():
    with pytest.raises(ValidationError, match="experience"):
        AttributeInput.model_validate({"position": 3, "height": 170, "weight": 65})
