from enum import Enum

from pydantic import BaseModel, Field


class DeviceStatus(str, Enum):
    CONNECTING = "connecting"
    ONLINE = "online"
    OFFLINE = "offline"


class SoilReading(BaseModel):
    ph: float = 7.0
    nitrogen: int = 30
    phosphorus: int = 60
    potassium: int = 120
    moisture: int = 45


class SensorState(BaseModel):
    status: DeviceStatus = DeviceStatus.CONNECTING
    readings: SoilReading = Field(default_factory=SoilReading)
