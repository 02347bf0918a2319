"""Source formatting."""

from .indent import DEFAULT_INDENT_WIDTH, format_source

__all__ = ["DEFAULT_INDENT_WIDTH", "format_source"]
