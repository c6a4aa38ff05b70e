"""Grammar of a single tree listing line.

A valid entry line looks like::

    │   │   ├── name
    │       └── name

i.e. zero or more four-character indentation units, a connector glyph and the
entry name.
"""

import re

from tree_to_excel.core.parser.ansi import strip_ansi

BAR = "│"
TEE = "├"
ELBOW = "└"
DASH = "─"

_UNIT_WIDTH = 4
_DIR_COUNT_RE = re.compile(r"\b\d+\s+director(?:y|ies)\b")
_FILE_COUNT_RE = re.compile(r"\b\d+\s+files?\b")


def is_root_marker(line: str) -> bool:
    """Check for the implicit root line (``.`` or ``project-1.0/``)."""
    trimmed = line.strip()
    if trimmed == ".":
        return True
    return trimmed.endswith("/") and TEE not in trimmed and ELBOW not in trimmed


def is_stats_line(line: str) -> bool:
    """Check for the trailing ``N directories, M files`` report."""
    return bool(_DIR_COUNT_RE.search(line)) and bool(_FILE_COUNT_RE.search(line))


def _indent_unit_at(chars: str, pos: int) -> bool:
    if pos + _UNIT_WIDTH > len(chars):
        return False
    unit = chars[pos : pos + _UNIT_WIDTH]
    if unit[0] == BAR and unit[1:].isspace():
        return True
    return unit == " " * _UNIT_WIDTH


def count_indent_units(chars: str) -> int:
    """Count leading indentation units; each is ``│`` + 3 blanks or 4 spaces.

    Units are matched independently, so listings mixing both conventions on one
    line are accepted.
    """
    units = 0
    while _indent_unit_at(chars, units * _UNIT_WIDTH):
        units += 1
    return units


def parse_line(line: str) -> tuple[int, str] | None:
    """Parse one listing line into ``(depth, name)``.

    Returns:
        The 1-based depth and the trimmed entry name, or None when the line
        is not an entry (no connector after the indentation, or empty name).
    """
    chars = strip_ansi(line)
    units = count_indent_units(chars)
    pos = units * _UNIT_WIDTH

    if chars[pos : pos + 1] not in (TEE, ELBOW) or chars[pos + 1 : pos + 3] != DASH * 2:
        return None
    pos += 3
    if chars[pos : pos + 1] == " ":
        pos += 1

    name = chars[pos:].strip()
    if not name:
        return None
    return units + 1, name
