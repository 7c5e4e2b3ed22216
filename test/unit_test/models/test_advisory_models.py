import pytest

from khet_mitra.models.crop_disease import DiseaseIdentification
from khet_mitra.models.soil_sensor import SensorState


@pytest.mark.parametrize(
    "raw, expected", [(1.7, 1.0), (-0.2, 0.0), (0.42, 0.42), (None, 0.0), ("0.5", 0.5)]
)
def test_confidence_level_is_clamped(raw, expected):
    result = DiseaseIdentification(disease_detected=True, confidence_level=raw)
    assert result.confidence_level == expected


def test_healthy_crop_has_empty_fields():
    result = DiseaseIdentification(
        disease_detected=False, likely_disease=None, suggested_actions=None
    )
    assert result.likely_disease == ""
    assert result.suggested_actions == ""


def test_sensor_states_do_not_share_readings():
    first, second = SensorState(), SensorState()
    first.readings.nitrogen = 99
    assert second.readings.nitrogen == 30
