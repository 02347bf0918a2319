"""Namespace dependency checks for recognised UEFN types."""

from __future__ import annotations

from typing import Collection, List, Mapping

from ..syntax.vocabulary import NamespaceTable, normalize_namespace
from .issues import Diagnostic


def check_namespaces(
    used_types: Mapping[str, int],
    imports: Collection[str],
    table: NamespaceTable,
) -> List[Diagnostic]:
    """Warn once per type/namespace pair whose ``using`` line is absent.

    The dependency is file-global, so every warning is reported at line 1.
    """

    imported = {normalize_namespace(path) for path in imports}
    diagnostics: List[Diagnostic] = []
    for type_name in used_types:
        for namespace in table.get(type_name, ()):
            namespace = normalize_namespace(namespace)
            if namespace in imported:
                continue
            diagnostics.append(
                Diagnostic(
                    line=1,
                    message=f"Using type '{type_name}' requires namespace '{namespace}'",
                    severity="warning",
                    code="W_NAMESPACE_MISSING",
                )
            )
    return diagnostics
