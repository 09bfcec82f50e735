"""Serial communication package for the Geiger counter."""

from .config import SerialConfig
from .framer import LineFramer
from .parser import MeasurementParser
from .stream import LineResult, MeasurementStream
from .handler import SerialPortHandler
from .serial_reader import SerialReader

__all__ = [
    "SerialConfig",
    "LineFramer",
    "MeasurementParser",
    "LineResult",
    "MeasurementStream",
    "SerialPortHandler",
    "SerialReader",
]
