"""Pydantic models for language reference entries."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, model_validator

DocCategory = Literal[
    "keyword",
    "type",
    "function",
    "device",
    "event",
    "operator",
    "namespace",
]


class DocParam(BaseModel):
    name: str
    type: str
    description: str


class DocEntry(BaseModel):
    """Reference documentation for one keyword, type, device or namespace."""

    name: str = Field(min_length=1)
    description: str
    category: DocCategory
    syntax: Optional[str] = None
    example: Optional[str] = None
    params: List[DocParam] = Field(default_factory=list)
    return_type: Optional[str] = None
    url: Optional[str] = None

    def matches(self, query: str) -> bool:
        needle = query.lower()
        return needle in self.name.lower() or needle in self.description.lower()


class ReferenceCatalog(BaseModel):
    entries: List[DocEntry] = Field(default_factory=list)

    @model_validator(mode="after")
    def ensure_unique_names(self) -> "ReferenceCatalog":
        seen = set()
        for entry in self.entries:
            key = entry.name.lower()
            if key in seen:
                raise ValueError(f"duplicate reference entry: {entry.name}")
            seen.add(key)
        return self

    def get(self, name: str) -> Optional[DocEntry]:
        """Return the entry named *name*, ignoring case."""

        key = name.lower()
        for entry in self.entries:
            if entry.name.lower() == key:
                return entry
        return None

    def by_category(self, category: str) -> List[DocEntry]:
        return [entry for entry in self.entries if entry.category == category]

    def search(self, query: str) -> List[DocEntry]:
        """Entries whose name or description contains *query*, ignoring case."""

        return [entry for entry in self.entries if entry.matches(query)]
