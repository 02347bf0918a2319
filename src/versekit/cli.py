"""Typer CLI entrypoint for versekit."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer

from .config import ConfigBundle, discover_config, load_config
from .engine import (
    check_files,
    extract_first_code_block,
    format_files,
    read_source,
    write_source,
)
from .exceptions import ConfigError, ReferenceDataError, SourceReadError, VersekitError
from .formatting import format_source
from .reference import (
    DocEntry,
    documentation_by_category,
    get_documentation,
    search_documentation,
)


EXIT_SUCCESS = 0
EXIT_VALIDATION_ERROR = 2
EXIT_IO_ERROR = 4
EXIT_CONFIG_ERROR = 5
EXIT_NOT_FOUND = 6


app = typer.Typer(help="Validate and format Verse source files")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log progress to stderr",
    ),
) -> None:
    """Base command callback holding shared options."""

    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


def _load_bundle(config_path: Optional[Path]) -> ConfigBundle:
    if config_path is None:
        config_path = discover_config(Path.cwd())
    try:
        return load_config(config_path)
    except ConfigError as exc:
        typer.echo(f"Config error: {exc}", err=True)
        raise typer.Exit(EXIT_CONFIG_ERROR) from exc


@app.command("check")
def check_command(
    paths: List[Path] = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Verse source files to validate",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to versekit.toml (defaults to ./versekit.toml when present)",
    ),
    report_path: Optional[Path] = typer.Option(
        None,
        "--report",
        help="Optional path for the JSON report",
    ),
) -> None:
    """Validate Verse files and print a JSON report."""

    bundle = _load_bundle(config_path)
    try:
        report = check_files(paths, bundle)
    except SourceReadError as exc:
        typer.echo(f"Source error: {exc}", err=True)
        raise typer.Exit(EXIT_IO_ERROR) from exc
    except VersekitError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(EXIT_IO_ERROR) from exc

    json_payload = json.dumps(report.as_dict(), indent=2)
    typer.echo(json_payload)

    if report_path is not None:
        try:
            report_path.parent.mkdir(parents=True, exist_ok=True)
            report_path.write_text(json_payload + "\n", encoding="utf-8")
        except OSError as exc:
            typer.echo(f"Failed to write report {report_path}: {exc}", err=True)
            raise typer.Exit(EXIT_IO_ERROR) from exc

    if report.has_errors:
        raise typer.Exit(EXIT_VALIDATION_ERROR)


@app.command("format")
def format_command(
    paths: List[Path] = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Verse source files to re-indent",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to versekit.toml (defaults to ./versekit.toml when present)",
    ),
    check: bool = typer.Option(
        False,
        "--check",
        help="Report files that would change without rewriting them",
    ),
) -> None:
    """Re-indent Verse files in place."""

    bundle = _load_bundle(config_path)
    try:
        report = format_files(paths, bundle, write=not check)
    except SourceReadError as exc:
        typer.echo(f"Source error: {exc}", err=True)
        raise typer.Exit(EXIT_IO_ERROR) from exc

    typer.echo(json.dumps(report.as_dict(), indent=2))

    if check and report.changed:
        raise typer.Exit(EXIT_VALIDATION_ERROR)


@app.command("extract")
def extract_command(
    response: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Saved generated-text response (markdown)",
    ),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        dir_okay=False,
        help="Write the extracted code here instead of stdout",
    ),
    reformat: bool = typer.Option(
        False,
        "--format",
        help="Re-indent the extracted code",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to versekit.toml (defaults to ./versekit.toml when present)",
    ),
) -> None:
    """Extract the first fenced code block from a generated response."""

    try:
        text = read_source(response)
    except SourceReadError as exc:
        typer.echo(f"Source error: {exc}", err=True)
        raise typer.Exit(EXIT_IO_ERROR) from exc

    code = extract_first_code_block(text)
    if reformat:
        bundle = _load_bundle(config_path)
        code = format_source(code, indent_width=bundle.formatter.indent_width)

    if out is None:
        typer.echo(code)
        return

    try:
        write_source(out, code)
    except SourceReadError as exc:
        typer.echo(f"Source error: {exc}", err=True)
        raise typer.Exit(EXIT_IO_ERROR) from exc

    payload = {
        "output": str(out),
        "lines": len(code.splitlines()),
    }
    typer.echo(json.dumps(payload, indent=2, sort_keys=True))


@app.command("doc")
def doc_command(
    name: Optional[str] = typer.Argument(
        None,
        help="Keyword, type, function, device, event or namespace to look up",
    ),
    category: Optional[str] = typer.Option(
        None,
        "--category",
        help="List every entry in a category (keyword, type, function, ...)",
    ),
    search: Optional[str] = typer.Option(
        None,
        "--search",
        "-s",
        help="List entries whose name or description contains this text",
    ),
) -> None:
    """Look up the bundled Verse language reference."""

    selectors = [value for value in (name, category, search) if value is not None]
    if len(selectors) != 1:
        raise typer.BadParameter("give exactly one of NAME, --category or --search")

    try:
        if name is not None:
            entry = get_documentation(name)
            entries = [] if entry is None else [entry]
        elif category is not None:
            entries = documentation_by_category(category)
        else:
            entries = search_documentation(search)
    except ReferenceDataError as exc:
        typer.echo(f"Reference error: {exc}", err=True)
        raise typer.Exit(EXIT_IO_ERROR) from exc

    typer.echo(json.dumps(_entries_payload(entries), indent=2))
    if not entries:
        raise typer.Exit(EXIT_NOT_FOUND)


def _entries_payload(entries: List[DocEntry]) -> dict:
    return {
        "count": len(entries),
        "entries": [entry.model_dump(exclude_none=True) for entry in entries],
    }
