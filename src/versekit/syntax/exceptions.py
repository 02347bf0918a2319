"""Exceptions raised by the syntax layer."""

from __future__ import annotations

from dataclasses import dataclass

from ..exceptions import VersekitError


@dataclass
class UsingParseError(VersekitError):
    """Raised when a ``using`` statement fails to parse."""

    line_no: int
    line: str
    detail: str

    def __post_init__(self) -> None:
        message = f"line {self.line_no}: {self.detail.strip()}"
        super().__init__(message)
