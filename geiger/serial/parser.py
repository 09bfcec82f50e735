"""Measurement record parser for the Geiger counter line format."""

from __future__ import annotations
import logging
import math
import re
from datetime import datetime
from typing import Optional

from ..core import Measurement
from .config import SerialConfig

logger = logging.getLogger(__name__)


class MeasurementParser:
    """Parser for measurement records from serial port.

    A record looks like::

        105 4.9V 12V +23°C 1013.2hPa ABC123 920 nSv/h

    The trailing device id and dose rate are optional and always come
    together.
    """

    RECORD_PATTERN = re.compile(
        r'(?P<counts>[0-9]+)'
        r' (?P<tube_v>[0-9]+(?:\.[0-9]+)?)V'
        r' (?P<power_v>[0-9]+)V'
        r' (?P<temp_c>[+\-][0-9]+)°C'
        r' (?P<pressure_hpa>[0-9.]+)hPa'
        r'(?: (?P<deviceid>[0-9A-Z]+) (?P<radiation_nsvh>[0-9]+) nSv/h)?'
    )

    # Characters that can't appear in a device id taken from the port name
    HINT_SEPARATORS = re.compile(r'[^a-z0-9\-.]', re.I)

    # Leading number in a field that passed the grammar (e.g. '1013.2.1')
    _NUMBER_PREFIX = re.compile(r'[+\-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)')

    @staticmethod
    def device_id_from_hint(hint: Optional[str]) -> Optional[str]:
        """Derive a device id from the connection's identifying string.

        Args:
            hint: Usually the serial port path, e.g. '/dev/tty.usbserial-GX1C0PY9'

        Returns:
            Last token of the hint ('tty.usbserial-GX1C0PY9'), or None
            without a hint.
        """
        if hint is None:
            return None
        return MeasurementParser.HINT_SEPARATORS.split(hint)[-1]

    @staticmethod
    def parse_float(text: Optional[str]) -> Optional[float]:
        """Parse a numeric field, mapping zero and garbage to None."""
        if not text:
            return None
        match = MeasurementParser._NUMBER_PREFIX.match(text)
        if not match:
            return None
        return float(match.group()) or None

    @staticmethod
    def estimate_usvh(counts: int) -> Optional[float]:
        """Estimate the dose rate from raw counts when the device sends none."""
        # Round half up, the way the device vendor's tools do
        nsvh = math.floor(counts / SerialConfig.COUNTS_TO_NSVH + 0.5)
        return nsvh / 1000 or None

    @staticmethod
    def parse_line(line: str, device_hint: Optional[str] = None) -> Optional[Measurement]:
        """Parse one line from the device.

        Args:
            line: Complete line without terminators
            device_hint: Fallback identifier used when the record has no device id

        Returns:
            Parsed measurement, or None if the line is not a valid record.
        """
        match = MeasurementParser.RECORD_PATTERN.fullmatch(line or "")
        if match is None:
            logger.debug("invalid record: %r", line)
            return None

        logger.debug("parsing record: %r", line)
        fields = match.groupdict()
        window_factor = 60 // SerialConfig.MEASUREMENT_WINDOW_S

        # Noise can produce digit runs too long for an int or a float
        try:
            counts = int(fields['counts'])
            radiation = None
            if fields['radiation_nsvh'] is not None:
                radiation = int(fields['radiation_nsvh']) / 1000 or None
            if radiation is None:
                radiation = MeasurementParser.estimate_usvh(counts)
        except (ValueError, OverflowError):
            logger.debug("invalid record: %r", line)
            return None

        return Measurement(
            deviceid=(
                fields['deviceid']
                or MeasurementParser.device_id_from_hint(device_hint)
            ),
            timestamp=datetime.now(),
            cpm=counts * window_factor or None,
            radiation_usvh=radiation,
            temp_c=MeasurementParser.parse_float(fields['temp_c']),
            pressure_hpa=MeasurementParser.parse_float(fields['pressure_hpa']),
            tube_v=MeasurementParser.parse_float(fields['tube_v']),
            power_v=MeasurementParser.parse_float(fields['power_v']),
        )
