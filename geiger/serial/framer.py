"""Splits an arbitrarily chunked text stream into complete lines."""

from __future__ import annotations
import re
from typing import List

# Any run of CR/LF counts as a single line break
_TERMINATORS = re.compile(r'[\r\n]+')


class LineFramer:
    """Accumulates text and hands out complete, terminator-free lines.

    At most one unterminated fragment is kept between calls; every line
    before it has been returned exactly once, in input order.
    """

    def __init__(self) -> None:
        self._buffer = ""

    @property
    def pending(self) -> str:
        """Unterminated remainder waiting for more input."""
        return self._buffer

    def feed(self, text: str) -> List[str]:
        """Append a chunk and return the lines it completed."""
        self._buffer += text
        lines = _TERMINATORS.split(self._buffer)
        self._buffer = lines.pop()
        # A break at the very start of the stream leaves an empty head
        return [line for line in lines if line]

    def reset(self) -> None:
        """Drop the pending fragment."""
        self._buffer = ""
