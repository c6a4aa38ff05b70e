"""Errors raised by tree-to-excel.

Malformed tree lines are never errors: the parser skips them. Only failing to
obtain the input or failing to save the workbook aborts a run.
"""

from pathlib import Path


class TreeToExcelError(Exception):
    """Base class for fatal conversion errors."""


class InputReadError(TreeToExcelError):
    """The tree listing could not be read."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Cannot read {source}: {reason}")
        self.source = source


class OutputWriteError(TreeToExcelError):
    """The workbook could not be saved."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot save workbook to {str(path)!r}: {reason}")
        self.path = path
