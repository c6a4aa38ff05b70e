"""CLI: convert `tree` output into an Excel sheet with merged hierarchy cells."""

import sys
from collections.abc import Collection
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from tree_to_excel.config import DEFAULT_OUTPUT_PATH, KNOWN_EXTENSIONLESS_FILES
from tree_to_excel.core.grid.projection import project_grid
from tree_to_excel.core.parser.tree import parse_tree
from tree_to_excel.errors import InputReadError, TreeToExcelError
from tree_to_excel.logging_config import configure_logging
from tree_to_excel.protocols import SheetProtocol
from tree_to_excel.render import render_grid
from tree_to_excel.writer import WorkbookWriter

app = typer.Typer(help="Convert `tree` command output into an Excel sheet.")


@dataclass(frozen=True)
class ConversionStats:
    """Summary of a conversion run."""

    items: int
    directories: int
    files: int
    max_depth: int
    merged_ranges: int


def read_input(path: Path | None) -> str:
    """Read the tree listing from ``path``, or from stdin when it is None."""
    if path is not None:
        logger.info("Reading tree output from {}", path)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
            raise InputReadError(str(path), reason) from e

    if sys.stdin.isatty():
        logger.info("Reading tree output from stdin (Ctrl+D to finish):")
    try:
        return sys.stdin.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError("standard input", str(e)) from e


def convert_tree(
    text: str,
    sheet: SheetProtocol,
    *,
    include_hidden: bool = False,
    known_files: Collection[str] = KNOWN_EXTENSIONLESS_FILES,
) -> ConversionStats:
    """Execute the conversion pipeline: parse, project, render, save.

    Args:
        text: Raw `tree` output.
        sheet: Spreadsheet to render into; saved at the end.
        include_hidden: Keep dot-entries and their subtrees.
        known_files: Extensionless names to treat as files.
    """
    items = parse_tree(text, include_hidden=include_hidden, known_files=known_files)
    entries = [item for item in items if not item.is_summary]
    files = sum(1 for item in entries if item.is_leaf)
    logger.info("Found {} files/directories", len(entries))

    grid = project_grid(items)
    merged = render_grid(grid, sheet)
    sheet.save()

    return ConversionStats(
        items=len(items),
        directories=len(entries) - files,
        files=files,
        max_depth=grid.max_depth,
        merged_ranges=merged,
    )


@app.command()
def main(
    input_path: Annotated[
        Path | None,
        typer.Option("--input", "-i", help="File with `tree` output (default: stdin)"),
    ] = None,
    output_path: Annotated[
        Path,
        typer.Option("--output", "-o", help="Excel file to write"),
    ] = DEFAULT_OUTPUT_PATH,
    include_hidden: bool = typer.Option(
        False, "--include-hidden", "-a", help="Include hidden entries such as .git"
    ),
    known_file: Annotated[
        list[str] | None,
        typer.Option("--known-file", "-k", help="Extra extensionless file name (repeatable)"),
    ] = None,
    dry_run: bool = typer.Option(False, "--dry-run", help="Do not write anything"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Convert `tree` output into an Excel sheet with merged hierarchy cells."""
    configure_logging(verbose=verbose)

    known_files = KNOWN_EXTENSIONLESS_FILES | frozenset(known_file or ())
    if include_hidden:
        logger.info("Parsing tree structure (including hidden entries)")
    else:
        logger.info("Parsing tree structure (hidden entries such as .git are skipped)")

    try:
        text = read_input(input_path)
        writer = WorkbookWriter(output_path, dry_run=dry_run)
        stats = convert_tree(
            text, writer, include_hidden=include_hidden, known_files=known_files
        )
    except TreeToExcelError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e

    typer.echo(
        f"Wrote {stats.directories} directories and {stats.files} files "
        f"({stats.max_depth} levels, {stats.merged_ranges} merged ranges) to {output_path}"
        + (" (dry run)" if dry_run else "")
    )
