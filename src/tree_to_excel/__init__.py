"""Convert `tree` command output into Excel sheets with merged hierarchy cells."""

from tree_to_excel.core.grid import compute_merge_runs, project_grid
from tree_to_excel.core.parser import parse_tree
from tree_to_excel.protocols import SheetProtocol
from tree_to_excel.render import render_grid
from tree_to_excel.writer import WorkbookWriter

__all__ = [
    "SheetProtocol",
    "WorkbookWriter",
    "compute_merge_runs",
    "parse_tree",
    "project_grid",
    "render_grid",
]
