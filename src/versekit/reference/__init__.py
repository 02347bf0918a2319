"""Bundled Verse language reference and lookups."""

from .catalog import (
    REFERENCE_PATH,
    default_reference,
    documentation_by_category,
    get_documentation,
    load_reference,
    search_documentation,
)
from .models import DocCategory, DocEntry, DocParam, ReferenceCatalog

__all__ = [
    "REFERENCE_PATH",
    "DocCategory",
    "DocEntry",
    "DocParam",
    "ReferenceCatalog",
    "default_reference",
    "documentation_by_category",
    "get_documentation",
    "load_reference",
    "search_documentation",
]
