"""Typed representations of classified source lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple


class ShapeKind(Enum):
    BLANK = "blank"
    COMMENT = "comment"
    IMPORT = "import"
    TYPE_DECL = "type_decl"
    FUNCTION_DECL = "function_decl"
    VAR_DECL = "var_decl"
    IF_STMT = "if_stmt"
    GENERIC = "generic"


@dataclass(frozen=True)
class NamespacePath:
    segments: Tuple[str, ...]

    @property
    def path(self) -> str:
        return "/" + "/".join(self.segments)


@dataclass(frozen=True)
class Parameter:
    name: str
    type_name: Optional[str] = None


@dataclass(frozen=True)
class LineShape:
    """One source line together with the shape it was classified as."""

    kind: ClassVar[ShapeKind] = ShapeKind.GENERIC

    line_no: int
    raw: str

    @property
    def text(self) -> str:
        return self.raw.strip()

    @property
    def indent(self) -> int:
        return len(self.raw) - len(self.raw.lstrip())

    def column_of(self, offset: int) -> int:
        """Translate an offset into ``text`` to a 1-based column in ``raw``."""

        return self.indent + offset + 1


@dataclass(frozen=True)
class BlankLine(LineShape):
    kind: ClassVar[ShapeKind] = ShapeKind.BLANK


@dataclass(frozen=True)
class CommentLine(LineShape):
    kind: ClassVar[ShapeKind] = ShapeKind.COMMENT


@dataclass(frozen=True)
class ImportLine(LineShape):
    kind: ClassVar[ShapeKind] = ShapeKind.IMPORT

    namespace: NamespacePath = NamespacePath(segments=())


@dataclass(frozen=True)
class TypeDecl(LineShape):
    kind: ClassVar[ShapeKind] = ShapeKind.TYPE_DECL

    name: str = ""
    parent: str = ""


@dataclass(frozen=True)
class FunctionDecl(LineShape):
    kind: ClassVar[ShapeKind] = ShapeKind.FUNCTION_DECL

    name: str = ""
    parameters: Tuple[Parameter, ...] = ()
    return_type: Optional[str] = None


@dataclass(frozen=True)
class VarDecl(LineShape):
    kind: ClassVar[ShapeKind] = ShapeKind.VAR_DECL

    name: str = ""
    type_name: Optional[str] = None
    value: str = ""
    mutable: bool = False


@dataclass(frozen=True)
class IfStmt(LineShape):
    kind: ClassVar[ShapeKind] = ShapeKind.IF_STMT

    condition: str = ""


@dataclass(frozen=True)
class GenericLine(LineShape):
    kind: ClassVar[ShapeKind] = ShapeKind.GENERIC
