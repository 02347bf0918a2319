"""File-level check and format workflows."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List

from ..config import ConfigBundle
from ..exceptions import SourceReadError
from ..formatting import format_source
from ..validators import ValidationResult, suggest_fix, validate_source

logger = logging.getLogger(__name__)


@dataclass
class FileCheck:
    path: Path
    result: ValidationResult

    def as_dict(self) -> dict:
        return {
            "path": str(self.path),
            "is_valid": self.result.is_valid,
            "issues": [
                {**diagnostic.as_dict(), "suggestion": suggest_fix(diagnostic)}
                for diagnostic in (*self.result.errors, *self.result.warnings)
            ],
        }


@dataclass
class CheckReport:
    """Summary from validating a set of source files."""

    files: List[FileCheck] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return sum(len(item.result.errors) for item in self.files)

    @property
    def warning_count(self) -> int:
        return sum(len(item.result.warnings) for item in self.files)

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0

    def as_dict(self) -> dict:
        return {
            "files": [item.as_dict() for item in self.files],
            "summary": {
                "files": len(self.files),
                "errors": self.error_count,
                "warnings": self.warning_count,
            },
        }


@dataclass
class FormatReport:
    """Files examined by a format run and which of them changed."""

    checked: List[Path] = field(default_factory=list)
    changed: List[Path] = field(default_factory=list)
    written: bool = False

    def as_dict(self) -> dict:
        return {
            "checked": [str(path) for path in self.checked],
            "changed": [str(path) for path in self.changed],
            "written": self.written,
        }


def check_files(paths: Iterable[Path], config: ConfigBundle) -> CheckReport:
    """Validate each file in *paths* with the configured namespace table."""

    namespaces = config.validator.namespace_table()
    report = CheckReport()
    for path in paths:
        path = Path(path)
        result = validate_source(read_source(path), namespaces=namespaces)
        logger.info(
            "%s: %d error(s), %d warning(s)",
            path,
            len(result.errors),
            len(result.warnings),
        )
        report.files.append(FileCheck(path=path, result=result))
    return report


def format_files(
    paths: Iterable[Path],
    config: ConfigBundle,
    *,
    write: bool,
) -> FormatReport:
    """Format each file in *paths*; rewrite changed files when *write* is set."""

    report = FormatReport(written=write)
    for path in paths:
        path = Path(path)
        original = read_source(path)
        newline = detect_newline(original)
        formatted = format_source(
            original.replace(newline, "\n"),
            indent_width=config.formatter.indent_width,
        ).replace("\n", newline)
        report.checked.append(path)
        if formatted == original:
            continue
        report.changed.append(path)
        if write:
            write_source(path, formatted)
            logger.info("reformatted %s", path)
    return report


def detect_newline(text: str) -> str:
    """Return the line terminator used by *text*, preferring CRLF when present."""

    return "\r\n" if "\r\n" in text else "\n"


def read_source(path: Path) -> str:
    """Read *path* as UTF-8 without translating its line endings."""

    try:
        with path.open("r", encoding="utf-8", newline="") as fh:
            return fh.read()
    except FileNotFoundError as exc:
        raise SourceReadError(path, "file not found") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(path, f"failed to read source: {exc}") from exc


def write_source(path: Path, text: str) -> None:
    try:
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(text)
    except OSError as exc:
        raise SourceReadError(path, f"failed to write source: {exc}") from exc
