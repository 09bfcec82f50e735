"""Serial port reader thread for the Geiger counter.

This module provides a serial reader that decodes measurement records from
the device and emits them as Qt signals, one per line, in arrival order.
"""

from __future__ import annotations

import logging
import traceback

from PySide6 import QtCore
import serial

from .config import SerialConfig
from .handler import SerialPortHandler
from .stream import MeasurementStream

logger = logging.getLogger(__name__)


class SerialReader(QtCore.QThread):
    """Background thread that reads measurements from serial port.

    Signals:
        opened: Emitted once the port is open.
        data_received: Emitted with a Measurement for every valid record.
        line_rejected: Emitted with the raw text of every malformed line.
        disconnected: Emitted when the device goes away while reading.
        error: Emitted when the transport fails.
        closed: Emitted after the port has been closed.
    """

    opened = QtCore.Signal()
    data_received = QtCore.Signal(object)
    line_rejected = QtCore.Signal(str)
    disconnected = QtCore.Signal()
    error = QtCore.Signal(str)
    closed = QtCore.Signal()

    def __init__(self, port: str, baud: int = SerialConfig.DEFAULT_BAUD, parent=None):
        super().__init__(parent)
        self._port_handler = SerialPortHandler(port, baud)
        self._stream = MeasurementStream(device_hint=port)
        self._running = False

    @property
    def port(self) -> str:
        """Get serial port path."""
        return self._port_handler.port

    def run(self) -> None:
        """Main thread loop: read, frame and decode serial data."""
        try:
            self._port_handler.open()
        except ConnectionError as e:
            self.error.emit(str(e))
            return

        logger.debug("port open")
        self.opened.emit()
        self._stream.reset()
        self._running = True

        while self._running:
            try:
                chunk = self._port_handler.read_chunk()

                if not chunk:
                    continue

                for result in self._stream.feed_bytes(chunk):
                    if result.measurement is not None:
                        self.data_received.emit(result.measurement)
                    else:
                        self.line_rejected.emit(result.line)

            except serial.SerialException as e:
                if not self._running:
                    break
                logger.debug(f"device disconnected: {e}")
                self.disconnected.emit()
                break
            except (TypeError, OSError) as e:
                if not self._running:
                    break
                self.error.emit(f"Serial read error: {e}")
                break
            except Exception:
                if not self._running:
                    break
                self.error.emit(f"Unexpected error:\n{traceback.format_exc()}")
                break

        self._running = False
        self._port_handler.close()
        logger.debug("port closed")
        self.closed.emit()

    def stop(self, wait_ms: int = 3000) -> None:
        """Stop the reader thread.

        Args:
            wait_ms: Maximum milliseconds to wait for thread to finish.
        """
        self._running = False
        self._port_handler.close()
        self.wait(wait_ms)
