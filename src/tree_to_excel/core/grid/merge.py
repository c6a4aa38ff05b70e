"""Find runs of rows that share a cell value under the same parent."""

from collections.abc import Sequence

from tree_to_excel.models.items import GridRow, MergeRun


def _same_parent(a: GridRow, b: GridRow, column: int) -> bool:
    return a.levels[:column] == b.levels[:column]


def compute_merge_runs(rows: Sequence[GridRow], column: int) -> list[MergeRun]:
    """Compute the merge ranges of one level column.

    A run is a maximal block of consecutive rows with the same non-empty value
    in ``column`` and identical values in every column left of it. Two
    directories that both contain ``README`` therefore yield separate runs.
    Blocks of a single row are not reported.

    Args:
        rows: Data rows in listing order (no summary rows).
        column: Level column index, 0-based.

    Returns:
        Runs in row order; indices are positions in ``rows``.
    """
    runs: list[MergeRun] = []
    i = 0
    while i < len(rows):
        value = rows[i].levels[column]
        if not value:
            i += 1
            continue

        j = i + 1
        while (
            j < len(rows)
            and rows[j].levels[column] == value
            and _same_parent(rows[i], rows[j], column)
        ):
            j += 1

        if j - i > 1:
            runs.append(MergeRun(column=column, first_row=i, last_row=j - 1, value=value))
        i = j
    return runs


def merge_runs_by_column(rows: Sequence[GridRow], max_depth: int) -> dict[int, list[MergeRun]]:
    """Compute merge runs for every level column independently."""
    return {column: compute_merge_runs(rows, column) for column in range(max_depth)}
