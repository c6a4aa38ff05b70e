"""Lay a grid out on a spreadsheet, merging cells along shared ancestry."""

from loguru import logger

from tree_to_excel import styles
from tree_to_excel.config import (
    LEVEL_COLUMN_WIDTH,
    NOTES_COLUMN_WIDTH,
    PATH_COLUMN_WIDTH,
    SUMMARY_ROW_HEIGHT,
)
from tree_to_excel.core.grid.merge import merge_runs_by_column
from tree_to_excel.models.items import Grid, GridRow
from tree_to_excel.protocols import SheetProtocol

_HEADER_ROW = 0
_FIRST_DATA_ROW = 1


def _write_header(sheet: SheetProtocol, max_depth: int) -> None:
    for col in range(max_depth):
        sheet.write(_HEADER_ROW, col, f"L{col + 1}", styles.HEADER)
        sheet.set_column_width(col, LEVEL_COLUMN_WIDTH)

    sheet.write(_HEADER_ROW, max_depth, "Full path", styles.HEADER)
    sheet.set_column_width(max_depth, PATH_COLUMN_WIDTH)
    sheet.write(_HEADER_ROW, max_depth + 1, "Notes", styles.HEADER)
    sheet.set_column_width(max_depth + 1, NOTES_COLUMN_WIDTH)


def _write_data_row(sheet: SheetProtocol, row_num: int, row: GridRow, max_depth: int) -> None:
    for col, value in enumerate(row.levels):
        if not value:
            continue
        style = styles.FILE if row.is_leaf and col == row.own_column else styles.DIRECTORY
        sheet.write(row_num, col, value, style)

    sheet.write(row_num, max_depth, row.full_path, styles.PATH)
    sheet.write(row_num, max_depth + 1, "", styles.NOTES)


def render_grid(grid: Grid, sheet: SheetProtocol) -> int:
    """Render ``grid`` onto ``sheet``.

    Every non-empty cell is written on its own first, then the merge ranges
    of each level column are laid over it. Summary rows follow the data,
    each merged across the full width.

    Returns:
        Number of merge ranges applied to level columns.
    """
    data_rows = grid.data_rows
    summary_rows = grid.summary_rows
    last_col = grid.column_count - 1

    _write_header(sheet, grid.max_depth)

    for offset, row in enumerate(data_rows):
        _write_data_row(sheet, _FIRST_DATA_ROW + offset, row, grid.max_depth)

    merged = 0
    for column, runs in merge_runs_by_column(data_rows, grid.max_depth).items():
        for run in runs:
            sheet.merge_range(
                _FIRST_DATA_ROW + run.first_row,
                column,
                _FIRST_DATA_ROW + run.last_row,
                column,
                run.value,
                styles.DIRECTORY,
            )
            merged += 1
    logger.debug("Merged {} ranges over {} level columns", merged, grid.max_depth)

    row_num = _FIRST_DATA_ROW + len(data_rows)
    for row in summary_rows:
        sheet.set_row_height(row_num, SUMMARY_ROW_HEIGHT)
        sheet.merge_range(row_num, 0, row_num, last_col, row.levels[0], styles.SUMMARY)
        row_num += 1

    sheet.freeze_panes(_FIRST_DATA_ROW, 0)
    if data_rows:
        sheet.autofilter(_HEADER_ROW, 0, len(data_rows) + len(summary_rows), last_col)

    return merged
