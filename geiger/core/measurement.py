"""Measurement data structures."""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Measurement:
    """Decoded record from the Geiger counter.

    Every numeric field is None when the device reported zero or
    nothing for it.
    """
    deviceid: Optional[str]
    timestamp: datetime
    cpm: Optional[int]
    radiation_usvh: Optional[float]
    temp_c: Optional[float]
    pressure_hpa: Optional[float]
    tube_v: Optional[float]
    power_v: Optional[float]

    def to_dict(self) -> dict:
        """Convert measurement to dictionary format."""
        return {
            'deviceid': self.deviceid,
            'timestamp': self.timestamp,
            'cpm': self.cpm,
            'radiation_usvh': self.radiation_usvh,
            'temp_c': self.temp_c,
            'pressure_hpa': self.pressure_hpa,
            'tube_v': self.tube_v,
            'power_v': self.power_v,
        }

    def __str__(self) -> str:
        return (
            f"Measurement("
            f"id={self.deviceid}, "
            f"t={self.timestamp.strftime('%H:%M:%S.%f')[:-3]}, "
            f"cpm={self.cpm}, "
            f"uSv/h={self.radiation_usvh}, "
            f"T={self.temp_c}, "
            f"p={self.pressure_hpa})"
        )
