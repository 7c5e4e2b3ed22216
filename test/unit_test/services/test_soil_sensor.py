import random

from khet_mitra.models.soil_sensor import DeviceStatus, SoilReading
from khet_mitra.services.soil_sensor import SoilSensorSimulator, next_reading


class ConstantRandom(random.Random):
    def __init__(self, value: float) -> None:
        super().__init__()
        self.value = value

    def random(self) -> float:
        return self.value


def test_new_device_starts_connecting_with_default_readings():
    state = SoilSensorSimulator(ConstantRandom(0.5)).state("user-1")
    assert state.status == DeviceStatus.CONNECTING
    assert state.readings == SoilReading(
        ph=7.0, nitrogen=30, phosphorus=60, potassium=120, moisture=45
    )


def test_connect_succeeds_above_threshold():
    assert SoilSensorSimulator(ConstantRandom(0.31)).connect("u").status == DeviceStatus.ONLINE


def test_connect_fails_at_or_below_threshold():
    assert SoilSensorSimulator(ConstantRandom(0.3)).connect("u").status == DeviceStatus.OFFLINE


def test_reading_step_upwards():
    reading = next_reading(SoilReading(), ConstantRandom(1.0))
    assert reading == SoilReading(ph=7.1, nitrogen=32, phosphorus=63, potassium=124, moisture=47)


def test_reading_step_downwards():
    reading = next_reading(SoilReading(), ConstantRandom(0.0))
    assert reading == SoilReading(ph=6.9, nitrogen=28, phosphorus=57, potassium=116, moisture=42)


def test_readings_are_clamped():
    high = SoilReading(nitrogen=100, phosphorus=150, potassium=200, moisture=100)
    assert next_reading(high, ConstantRandom(1.0)).nitrogen == 100
    low = SoilReading(nitrogen=0, phosphorus=0, potassium=0, moisture=0)
    reading = next_reading(low, ConstantRandom(0.0))
    assert (reading.nitrogen, reading.phosphorus, reading.potassium, reading.moisture) == (0, 0, 0, 0)


def test_offline_device_keeps_readings():
    simulator = SoilSensorSimulator(ConstantRandom(0.1))
    simulator.connect("u")
    assert simulator.refresh("u").readings == SoilReading()


def test_online_device_changes_readings_per_user():
    simulator = SoilSensorSimulator(ConstantRandom(1.0))
    simulator.connect("a")
    assert simulator.refresh("a").readings.nitrogen == 32
    assert simulator.refresh("a").readings.nitrogen == 34
    assert simulator.refresh("b").readings.nitrogen == 30


def test_forget_drops_the_device():
    sensor = SoilSensorSimulator(ConstantRandom(0.9))
    sensor.connect("user-1")
    sensor.forget("user-1")
    sensor.forget("never-seen")
    assert sensor.devices == {}
