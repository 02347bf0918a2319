"""Pydantic models describing the versekit configuration file."""

from __future__ import annotations

from typing import Dict, List, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from ..formatting import DEFAULT_INDENT_WIDTH
from ..syntax.vocabulary import DEFAULT_NAMESPACES, merge_namespace_tables, normalize_namespace


class FormatterConfig(BaseModel):
    indent_width: int = Field(default=DEFAULT_INDENT_WIDTH, ge=1, le=16)


class ValidatorConfig(BaseModel):
    namespaces: Dict[str, List[str]] = Field(default_factory=dict)
    replace_default_namespaces: bool = False

    @field_validator("namespaces")
    @classmethod
    def normalize_paths(cls, value: Dict[str, List[str]]) -> Dict[str, List[str]]:
        normalized: Dict[str, List[str]] = {}
        for type_name, paths in value.items():
            if not type_name.strip():
                raise ValueError("type names must not be empty")
            if not paths:
                raise ValueError(f"{type_name} must list at least one namespace")
            normalized[type_name] = [normalize_namespace(path) for path in paths]
        return normalized

    @model_validator(mode="after")
    def ensure_table_not_empty(self) -> "ValidatorConfig":
        if self.replace_default_namespaces and not self.namespaces:
            raise ValueError("replace_default_namespaces requires at least one namespace entry")
        return self

    def namespace_table(self) -> Dict[str, Tuple[str, ...]]:
        base = {} if self.replace_default_namespaces else DEFAULT_NAMESPACES
        return merge_namespace_tables(self.namespaces, base=base)


class ConfigBundle(BaseModel):
    formatter: FormatterConfig = Field(default_factory=FormatterConfig)
    validator: ValidatorConfig = Field(default_factory=ValidatorConfig)
