"""Protocols for dependency injection in the renderer."""

from typing import Protocol, runtime_checkable

from tree_to_excel.styles import CellStyle


@runtime_checkable
class SheetProtocol(Protocol):
    """Protocol for spreadsheet writers used by the renderer.

    Rows and columns are 0-based.
    """

    def write(self, row: int, col: int, value: str, style: CellStyle) -> None:
        """Write a styled value into one cell."""
        ...

    def merge_range(
        self,
        first_row: int,
        first_col: int,
        last_row: int,
        last_col: int,
        value: str,
        style: CellStyle,
    ) -> None:
        """Merge a rectangular range and write a styled value into it."""
        ...

    def set_column_width(self, col: int, width: float) -> None:
        """Set the width of a column."""
        ...

    def set_row_height(self, row: int, height: float) -> None:
        """Set the height of a row."""
        ...

    def freeze_panes(self, row: int, col: int) -> None:
        """Freeze rows above ``row`` and columns left of ``col``."""
        ...

    def autofilter(self, first_row: int, first_col: int, last_row: int, last_col: int) -> None:
        """Add an autofilter over a range."""
        ...

    def save(self) -> None:
        """Persist the workbook."""
        ...
