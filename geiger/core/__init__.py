"""Core data structures for the Geiger serial reader."""

from .measurement import Measurement
from .settings import AppSettings

__all__ = [
    'Measurement',
    'AppSettings',
]
