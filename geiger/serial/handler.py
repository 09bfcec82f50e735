"""Low-level serial port handler."""

from __future__ import annotations

import logging
import time
from typing import Optional

import serial

from .config import SerialConfig

logger = logging.getLogger(__name__)


class SerialPortHandler:
    """Opens the device port and reads raw byte chunks from it."""

    def __init__(self, port: str, baud: int = SerialConfig.DEFAULT_BAUD,
                 bytesize: int = SerialConfig.DEFAULT_BYTESIZE,
                 parity: str = SerialConfig.DEFAULT_PARITY,
                 stopbits: float = SerialConfig.DEFAULT_STOPBITS,
                 timeout: float = SerialConfig.DEFAULT_TIMEOUT):
        self.port = port
        self.baud = baud
        self.bytesize = bytesize
        self.parity = parity
        self.stopbits = stopbits
        self.timeout = timeout
        self._ser: Optional[serial.Serial] = None

    @property
    def is_open(self) -> bool:
        """Check if port is open."""
        return self._ser is not None and self._ser.is_open

    def open(self) -> None:
        """Open serial port.

        Raises:
            ConnectionError: If the port can't be opened or configured.
        """
        try:
            self._ser = serial.Serial(
                self.port,
                self.baud,
                bytesize=self.bytesize,
                parity=self.parity,
                stopbits=self.stopbits,
                timeout=self.timeout,
            )
            time.sleep(0.1)  # Let port stabilize
            self._ser.reset_input_buffer()  # Flush any old data
        except (serial.SerialException, ValueError, OSError) as e:
            self.close()
            raise ConnectionError(
                f"Cannot open {self.port}: {e}\n"
                "Check that the device exists and permissions are correct."
            ) from e
        logger.info(f"Opened {self.port} at {self.baud} baud")

    def read_chunk(self) -> bytes:
        """Read whatever the device has sent so far.

        Blocks for at most the read timeout and returns b"" if nothing
        arrived. pyserial raises SerialException when the device goes away.
        """
        if self._ser is None:
            return b""
        size = min(max(self._ser.in_waiting, 1), SerialConfig.READ_CHUNK_SIZE)
        return self._ser.read(size)

    def close(self) -> None:
        """Close the serial connection."""
        if self._ser:
            try:
                if self._ser.is_open:
                    self._ser.close()
                    logger.info(f"Closed {self.port}")
            except (serial.SerialException, OSError) as e:
                logger.warning(f"Error closing {self.port}: {e}")
            self._ser = None
