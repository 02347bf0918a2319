"""Functions for reading and validating the configuration file."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any, Iterable, Optional

from pydantic import ValidationError

from ..exceptions import ConfigError
from .models import ConfigBundle

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "versekit.toml"


def load_config(path: Optional[Path] = None) -> ConfigBundle:
    """Load configuration from *path*, or return defaults when *path* is None."""

    if path is None:
        return ConfigBundle()

    path = Path(path)
    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except FileNotFoundError as exc:
        raise ConfigError(path, "file not found") from exc
    except (tomllib.TOMLDecodeError, OSError) as exc:
        raise ConfigError(path, f"failed to read TOML: {exc}") from exc

    try:
        bundle = ConfigBundle.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(path, describe_validation_error(exc)) from exc
    logger.debug("loaded configuration from %s", path)
    return bundle


def discover_config(start: Path) -> Optional[Path]:
    """Return ``versekit.toml`` in *start* if present."""

    candidate = Path(start) / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def describe_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic error into ``section.key[0]: message`` fragments."""

    fragments = []
    for detail in error.errors(include_context=False):
        where = dotted_location(detail.get("loc", ()))
        what = detail.get("msg", "invalid value")
        fragments.append(f"{where}: {what}" if where else what)
    return "; ".join(fragments)


def dotted_location(loc: Iterable[Any]) -> str:
    """Render a pydantic ``loc`` tuple, folding list indexes into brackets."""

    rendered = ""
    for entry in loc:
        if isinstance(entry, int):
            rendered += f"[{entry}]"
        elif rendered:
            rendered += f".{entry}"
        else:
            rendered = str(entry)
    return rendered
