"""Application settings with persistence."""

from __future__ import annotations
import logging
from dataclasses import dataclass, fields
from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

ORGANIZATION = "GeigerReader"
APPLICATION = "GeigerReader"


def _open_store() -> QSettings:
    """INI file in the user's config dir, relocatable with QSettings.setPath."""
    return QSettings(QSettings.Format.IniFormat, QSettings.Scope.UserScope,
                     ORGANIZATION, APPLICATION)


@dataclass
class AppSettings:
    """Application settings."""
    # Serial
    port: str = ""  # Empty means "must be given on the command line"
    baud_rate: int = 115200

    # Output
    output_format: str = "text"  # "text" or "json"
    log_level: str = "WARNING"

    OUTPUT_FORMATS = ("text", "json")

    def save(self) -> None:
        """Save settings to persistent storage.

        Uses an INI file through QSettings:
        - Linux: ~/.config/GeigerReader/GeigerReader.ini
        - Windows: %APPDATA%\\GeigerReader\\GeigerReader.ini
        - macOS: ~/.config/GeigerReader/GeigerReader.ini
        """
        try:
            settings = _open_store()
            for f in fields(self):
                settings.setValue(f.name, getattr(self, f.name))
            settings.sync()
        except Exception as e:
            # Settings will use defaults next time
            logger.warning(f"Could not save settings: {e}")

    @classmethod
    def load(cls) -> 'AppSettings':
        """Load settings from persistent storage.

        Returns default settings if nothing is stored or it can't be read.
        """
        instance = cls()

        try:
            settings = _open_store()

            for f in fields(instance):
                if settings.contains(f.name):
                    stored = settings.value(f.name)
                    default_val = getattr(instance, f.name)

                    # QSettings may hand back strings for every type
                    if isinstance(default_val, int):
                        value = int(stored)
                    else:
                        value = str(stored)
                    setattr(instance, f.name, value)
        except Exception as e:
            logger.warning(f"Could not load settings, using defaults: {e}")
            return cls()

        if instance.output_format not in cls.OUTPUT_FORMATS:
            instance.output_format = "text"
        return instance
