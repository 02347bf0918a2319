"""File workflows built on the validator and formatter."""

from .check import (
    CheckReport,
    FileCheck,
    FormatReport,
    check_files,
    format_files,
    read_source,
    write_source,
)
from .extract import extract_code_blocks, extract_first_code_block

__all__ = [
    "check_files",
    "format_files",
    "read_source",
    "write_source",
    "CheckReport",
    "FileCheck",
    "FormatReport",
    "extract_code_blocks",
    "extract_first_code_block",
]
