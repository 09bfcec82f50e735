"""Byte stream to measurement pipeline for one connection."""

from __future__ import annotations
import logging
from typing import List, NamedTuple, Optional

from ..core import Measurement
from .config import SerialConfig
from .framer import LineFramer
from .parser import MeasurementParser

logger = logging.getLogger(__name__)


class LineResult(NamedTuple):
    """One complete line and its decoded measurement (None if rejected)."""
    line: str
    measurement: Optional[Measurement]

    @property
    def accepted(self) -> bool:
        return self.measurement is not None


class MeasurementStream:
    """Frames incoming data and decodes every completed line in order.

    Each connection owns its own stream; nothing is shared between
    instances.
    """

    def __init__(self, device_hint: Optional[str] = None,
                 encoding: str = SerialConfig.ENCODING):
        self.device_hint = device_hint
        self.encoding = encoding
        self._framer = LineFramer()
        self._parser = MeasurementParser()

    @property
    def pending(self) -> str:
        """Partial line still waiting for its terminator."""
        return self._framer.pending

    def feed_bytes(self, data: bytes) -> List[LineResult]:
        """Decode raw serial bytes and process them."""
        logger.debug("got %d bytes", len(data))
        return self.feed(data.decode(self.encoding, errors='replace'))

    def feed(self, text: str) -> List[LineResult]:
        """Process a text chunk.

        Returns:
            Results for every line the chunk completed, in arrival order.
        """
        lines = self._framer.feed(text)
        if lines:
            logger.debug("found %d new records", len(lines))
        return [
            LineResult(line, self._parser.parse_line(line, self.device_hint))
            for line in lines
        ]

    def reset(self) -> None:
        """Forget any partial line, e.g. after reopening the port."""
        self._framer.reset()
