"""Geiger counter serial reader package."""

from .version import __version__, __version_info__, APP_NAME
from .core import Measurement, AppSettings
from .serial import (
    SerialConfig,
    LineFramer,
    MeasurementParser,
    MeasurementStream,
    SerialReader,
)

__all__ = [
    "__version__",
    "__version_info__",
    "APP_NAME",
    "Measurement",
    "AppSettings",
    "SerialConfig",
    "LineFramer",
    "MeasurementParser",
    "MeasurementStream",
    "SerialReader",
]
