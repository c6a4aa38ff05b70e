"""Spread parsed tree items over one column per depth level."""

from collections.abc import Sequence

from tree_to_excel.models.items import Grid, GridRow, TreeItem


def project_grid(items: Sequence[TreeItem]) -> Grid:
    """Turn the ordered item list into a grid of rows, one per item.

    Each row holds the item's ancestry, one name per level column, padded with
    "" up to the deepest entry. The summary item keeps its phrase in the first
    column.
    """
    max_depth = max((item.depth for item in items if not item.is_summary), default=1)

    rows: list[GridRow] = []
    for item in items:
        levels = [""] * max_depth
        if item.is_summary:
            levels[0] = item.name
        else:
            parts = item.parts or (item.name,)
            for i, name in enumerate(parts[:max_depth]):
                levels[i] = name
        rows.append(
            GridRow(
                levels=tuple(levels),
                full_path=item.full_path,
                is_leaf=False if item.is_summary else item.is_leaf,
                depth=item.depth,
            )
        )

    return Grid(rows=tuple(rows), max_depth=max_depth)
