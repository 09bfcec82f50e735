"""Serial port configuration for the Geiger counter."""

from __future__ import annotations


class SerialConfig:
    """Configuration for serial port connection."""
    DEFAULT_BAUD = 115200
    DEFAULT_BYTESIZE = 8
    DEFAULT_PARITY = 'N'
    DEFAULT_STOPBITS = 1
    DEFAULT_TIMEOUT = 1.0
    READ_CHUNK_SIZE = 1024

    # The device sends the degree sign as a single Latin-1 byte
    ENCODING = 'iso-8859-1'

    # Counts are accumulated over 30 s, so cpm is twice the raw count
    MEASUREMENT_WINDOW_S = 30
    # Estimated nSv/h per count when the device sends no dose rate
    COUNTS_TO_NSVH = 0.0875
