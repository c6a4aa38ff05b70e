"""Grid projection and merge-range detection."""

from tree_to_excel.core.grid.merge import compute_merge_runs, merge_runs_by_column
from tree_to_excel.core.grid.projection import project_grid

__all__ = ["compute_merge_runs", "merge_runs_by_column", "project_grid"]
