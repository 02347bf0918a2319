"""Custom exception hierarchy for versekit."""

from __future__ import annotations

from pathlib import Path


class VersekitError(Exception):
    """Base error for the versekit package."""


class ConfigError(VersekitError):
    """Raised when a configuration file fails validation."""

    def __init__(self, path: Path, message: str):
        self.path = Path(path)
        self.message = message
        super().__init__(f"{self.path.name}: {self.message}")


class SourceReadError(VersekitError):
    """Raised when a Verse source file cannot be read or written."""

    def __init__(self, path: Path, message: str):
        self.path = Path(path)
        self.message = message
        super().__init__(f"{self.message} ({self.path})")


class ReferenceDataError(VersekitError):
    """Raised when the bundled language reference cannot be loaded."""

    def __init__(self, path: Path, message: str):
        self.path = Path(path)
        self.message = message
        super().__init__(f"{self.path.name}: {self.message}")
