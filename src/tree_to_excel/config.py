"""Configuration constants for tree-to-excel."""

from pathlib import Path

# Output file used when --output is not given.
DEFAULT_OUTPUT_PATH: Path = Path("tree_output.xlsx")

# Names without an extension that are still files, not directories.
# Extend per run with --known-file.
KNOWN_EXTENSIONLESS_FILES: frozenset[str] = frozenset(
    {
        "Cargo.lock",
        "Dockerfile",
        "Makefile",
        "LICENSE",
        "README",
        "CHANGELOG",
    }
)

# Entries whose name starts with this are hidden, together with their subtrees.
HIDDEN_MARKER: str = "."

SUMMARY_PREFIX: str = "📊 Summary: "

SHEET_TITLE: str = "Tree"

LEVEL_COLUMN_WIDTH: float = 20
PATH_COLUMN_WIDTH: float = 60
NOTES_COLUMN_WIDTH: float = 30
SUMMARY_ROW_HEIGHT: float = 20
