"""Reconstruct a tree from `tree` command output."""

from collections.abc import Collection

from loguru import logger

from tree_to_excel.config import HIDDEN_MARKER, KNOWN_EXTENSIONLESS_FILES, SUMMARY_PREFIX
from tree_to_excel.core.parser.ansi import strip_ansi
from tree_to_excel.core.parser.lines import is_root_marker, is_stats_line, parse_line
from tree_to_excel.models.items import TreeItem


def is_leaf_name(name: str, known_files: Collection[str] = KNOWN_EXTENSIONLESS_FILES) -> bool:
    """Guess whether an entry is a file.

    A name is a file when its last ``.`` is neither the first nor the last
    character (``main.rs``, ``archive.tar.gz``), or when it is one of the
    well-known extensionless file names.
    """
    dot = name.rfind(".")
    if 0 < dot < len(name) - 1:
        return True
    return name in known_files


def format_counts(directories: int, files: int) -> str:
    return f"{directories} directories, {files} files"


def summary_text(items: list[TreeItem], stats_line: str | None, *, include_hidden: bool) -> str:
    """Pick the counts phrase for the summary record.

    When hidden entries were filtered out, the listing's own report no longer
    matches what is rendered, so counts are recomputed from ``items``.
    """
    if include_hidden and stats_line is not None:
        return stats_line
    files = sum(1 for item in items if item.is_leaf)
    return format_counts(len(items) - files, files)


def parse_tree(
    text: str,
    *,
    include_hidden: bool = False,
    known_files: Collection[str] = KNOWN_EXTENSIONLESS_FILES,
    hidden_marker: str = HIDDEN_MARKER,
) -> list[TreeItem]:
    """Parse a tree listing into a flat, pre-ordered list of items.

    Args:
        text: Raw output of ``tree``, possibly with colour codes.
        include_hidden: Keep entries starting with ``hidden_marker`` and
            everything below them.
        known_files: Extensionless names to classify as files.
        hidden_marker: Prefix marking hidden entries.

    Returns:
        One TreeItem per accepted line, followed by a depth-0 summary item.
    """
    items: list[TreeItem] = []
    ancestors: list[str] = []
    hidden_depths: list[int] = []
    stats_line: str | None = None
    skipped = 0
    hidden = 0

    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = strip_ansi(raw)
        if not line.strip() or is_root_marker(line):
            continue

        if is_stats_line(line):
            if stats_line is None:
                stats_line = line.strip()
            continue

        parsed = parse_line(line)
        if parsed is None:
            logger.debug("Skipping line {}: not a tree entry: {!r}", lineno, line)
            skipped += 1
            continue
        depth, name = parsed

        if not include_hidden:
            hidden_depths = [d for d in hidden_depths if d < depth]
            is_hidden = name.startswith(hidden_marker)
            if is_hidden or hidden_depths:
                if is_hidden:
                    hidden_depths.append(depth)
                hidden += 1
                continue

        del ancestors[depth - 1 :]
        ancestors.append(name)
        items.append(
            TreeItem(
                name=name,
                depth=depth,
                is_leaf=is_leaf_name(name, known_files),
                full_path="/".join(ancestors),
                parts=tuple(ancestors),
            )
        )

    logger.debug(
        "Parsed {} entries ({} hidden, {} malformed lines skipped)", len(items), hidden, skipped
    )

    summary = SUMMARY_PREFIX + summary_text(items, stats_line, include_hidden=include_hidden)
    items.append(TreeItem(name=summary, depth=0, is_leaf=False, full_path=summary))
    return items
