"""Domain models: parsed tree entries, spreadsheet grid rows, merge runs."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TreeItem:
    """A single entry reconstructed from a tree listing.

    ``depth`` is 1 for top-level entries. The trailing summary record has
    depth 0 and carries the counts phrase as its name.
    """

    name: str
    depth: int
    is_leaf: bool
    full_path: str
    parts: tuple[str, ...] = ()

    @property
    def is_summary(self) -> bool:
        return self.depth == 0


@dataclass(frozen=True)
class GridRow:
    """One spreadsheet row: the entry's ancestry spread over level columns.

    ``levels[i]`` holds the ancestor name at depth ``i + 1``, or "" when the
    row's own depth is shallower.
    """

    levels: tuple[str, ...]
    full_path: str
    is_leaf: bool
    depth: int

    @property
    def is_summary(self) -> bool:
        return self.depth == 0

    @property
    def own_column(self) -> int:
        """Index of the level column holding the entry itself."""
        filled = [i for i, value in enumerate(self.levels) if value]
        return filled[-1] if filled else 0


@dataclass(frozen=True)
class Grid:
    """All rows of a rendered tree, in input order."""

    rows: tuple[GridRow, ...]
    max_depth: int

    @property
    def data_rows(self) -> tuple[GridRow, ...]:
        return tuple(r for r in self.rows if not r.is_summary)

    @property
    def summary_rows(self) -> tuple[GridRow, ...]:
        return tuple(r for r in self.rows if r.is_summary)

    @property
    def column_count(self) -> int:
        """Level columns plus the full path and notes columns."""
        return self.max_depth + 2


@dataclass(frozen=True)
class MergeRun:
    """A contiguous range of data rows in one level column to merge visually.

    Row indices are positions in the data-row sequence, both inclusive.
    """

    column: int
    first_row: int
    last_row: int
    value: str

    @property
    def row_count(self) -> int:
        return self.last_row - self.first_row + 1
