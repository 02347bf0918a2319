"""Loading and querying the bundled Verse language reference."""

from __future__ import annotations

import logging
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from ..config.loader import describe_validation_error
from ..exceptions import ReferenceDataError
from .models import DocEntry, ReferenceCatalog

logger = logging.getLogger(__name__)

REFERENCE_PATH = Path(__file__).parent / "verse_reference.toml"


def load_reference(path: Optional[Path] = None) -> ReferenceCatalog:
    """Read a reference catalog from *path* (the bundled file by default)."""

    path = REFERENCE_PATH if path is None else Path(path)
    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except FileNotFoundError as exc:
        raise ReferenceDataError(path, "file not found") from exc
    except (tomllib.TOMLDecodeError, OSError) as exc:
        raise ReferenceDataError(path, f"failed to read TOML: {exc}") from exc

    try:
        catalog = ReferenceCatalog.model_validate(data)
    except ValidationError as exc:
        raise ReferenceDataError(path, describe_validation_error(exc)) from exc
    logger.debug("loaded %d reference entries from %s", len(catalog.entries), path)
    return catalog


@lru_cache(maxsize=1)
def default_reference() -> ReferenceCatalog:
    return load_reference()


def get_documentation(name: str) -> Optional[DocEntry]:
    return default_reference().get(name)


def documentation_by_category(category: str) -> List[DocEntry]:
    return default_reference().by_category(category)


def search_documentation(query: str) -> List[DocEntry]:
    return default_reference().search(query)
