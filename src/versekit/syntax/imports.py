"""Parser for ``using`` statements based on Lark."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from lark import Lark, Transformer, UnexpectedInput

from .exceptions import UsingParseError
from .types import NamespacePath


GRAMMAR = r"""
    start: "using" "{" namespace_path "}"

    namespace_path: ("/" SEGMENT)+

    SEGMENT: /[A-Za-z0-9_][A-Za-z0-9_.]*/

    %import common.WS_INLINE
    %ignore WS_INLINE
"""


class _UsingTransformer(Transformer):
    def namespace_path(self, items: list[Any]) -> NamespacePath:
        return NamespacePath(segments=tuple(str(tok) for tok in items))

    def start(self, items: list[Any]) -> NamespacePath:
        return items[0]


class UsingParser:
    """Parse a single ``using { /Some.path/Module }`` line."""

    def __init__(self) -> None:
        self._parser = Lark(GRAMMAR, start="start", parser="lalr")
        self._transformer = _UsingTransformer()

    def parse(self, text: str, line_no: int = 0) -> NamespacePath:
        try:
            tree = self._parser.parse(text.strip())
        except UnexpectedInput as exc:
            raise UsingParseError(line_no=line_no, line=text, detail=str(exc)) from exc
        return self._transformer.transform(tree)


@lru_cache(maxsize=1)
def default_using_parser() -> UsingParser:
    """Return the process-wide ``UsingParser``."""

    return UsingParser()
