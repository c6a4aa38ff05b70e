"""Domain models for tree-to-excel."""

from tree_to_excel.models.items import Grid, GridRow, MergeRun, TreeItem

__all__ = ["Grid", "GridRow", "MergeRun", "TreeItem"]
