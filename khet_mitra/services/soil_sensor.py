"""
Simulated "My Poll" soil probe.

Each user gets one device. Connecting succeeds with probability 0.7; while
online every refresh nudges the readings by a small random step.
"""

import math
import random
from typing import Dict, Optional

from khet_mitra.models.soil_sensor import DeviceStatus, SensorState, SoilReading

CONNECT_SUCCESS_THRESHOLD = 0.3


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def _step(rng: random.Random, scale: float, bias: float = 0.5) -> int:
    return math.floor((rng.random() - bias) * scale)


def next_reading(previous: SoilReading, rng: random.Random) -> SoilReading:
    return SoilReading(
        ph=round(previous.ph + (rng.random() - 0.5) * 0.2, 1),
        nitrogen=_clamp(previous.nitrogen + _step(rng, 4), 0, 100),
        phosphorus=_clamp(previous.phosphorus + _step(rng, 6), 0, 150),
        potassium=_clamp(previous.potassium + _step(rng, 8), 0, 200),
        moisture=_clamp(previous.moisture + _step(rng, 5, bias=0.45), 0, 100),
    )


class SoilSensorSimulator:
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()
        self.devices: Dict[str, SensorState] = {}

    def state(self, user_id: str) -> SensorState:
        if user_id not in self.devices:
            self.devices[user_id] = SensorState()
        return self.devices[user_id]

    def connect(self, user_id: str) -> SensorState:
        state = self.state(user_id)
        if self.rng.random() > CONNECT_SUCCESS_THRESHOLD:
            state.status = DeviceStatus.ONLINE
        else:
            state.status = DeviceStatus.OFFLINE
        return state

    def refresh(self, user_id: str) -> SensorState:
        state = self.state(user_id)
        if state.status == DeviceStatus.ONLINE:
            state.readings = next_reading(state.readings, self.rng)
        return state

    def forget(self, user_id: str) -> None:
        self.devices.pop(user_id, None)


simulator = SoilSensorSimulator()
