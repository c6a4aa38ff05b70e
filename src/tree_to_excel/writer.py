"""Spreadsheet writer backed by openpyxl."""

from pathlib import Path

from loguru import logger
from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE, Cell
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from tree_to_excel.config import SHEET_TITLE
from tree_to_excel.errors import OutputWriteError
from tree_to_excel.styles import CellStyle

_THIN = Side(style="thin")
_THIN_BORDER = Border(left=_THIN, right=_THIN, top=_THIN, bottom=_THIN)

_Resolved = tuple[Font, PatternFill | None, Border | None, Alignment]


def _coordinate(row: int, col: int) -> str:
    """Convert 0-based (row, col) to an A1 reference."""
    return f"{get_column_letter(col + 1)}{row + 1}"


class WorkbookWriter:
    """Build a single-sheet workbook and save it to ``output_path``.

    Coordinates are 0-based, as in the renderer; openpyxl's 1-based ones
    never leave this class. In dry-run mode the workbook is built but
    ``save()`` only reports what it would do.
    """

    def __init__(
        self,
        output_path: str | Path,
        *,
        dry_run: bool = False,
        sheet_title: str = SHEET_TITLE,
    ) -> None:
        self.output_path = Path(output_path)
        self.dry_run = dry_run
        self.workbook = Workbook()
        self.worksheet = self.workbook.active
        self.worksheet.title = sheet_title
        self._styles: dict[CellStyle, _Resolved] = {}
        self._saved = False

        logger.debug("Writer ready, output {!r}, dry_run {!r}", str(self.output_path), dry_run)

    def _resolve(self, style: CellStyle) -> _Resolved:
        cached = self._styles.get(style)
        if cached is None:
            font = Font(bold=style.bold, color=style.font_color)
            fill = (
                PatternFill(fill_type="solid", start_color=style.fill, end_color=style.fill)
                if style.fill
                else None
            )
            border = _THIN_BORDER if style.border else None
            alignment = Alignment(horizontal=style.horizontal, vertical=style.vertical)
            cached = (font, fill, border, alignment)
            self._styles[style] = cached
        return cached

    def _apply(self, cell: Cell, style: CellStyle) -> None:
        font, fill, border, alignment = self._resolve(style)
        cell.font = font
        if fill is not None:
            cell.fill = fill
        if border is not None:
            cell.border = border
        cell.alignment = alignment

    def write(self, row: int, col: int, value: str, style: CellStyle) -> None:
        """Write ``value`` as text, never as a formula.

        Control characters Excel cannot store are dropped.
        """
        cell = self.worksheet.cell(row=row + 1, column=col + 1)
        cell.value = ILLEGAL_CHARACTERS_RE.sub("", value)
        if cell.data_type == "f":
            cell.data_type = "s"
        self._apply(cell, style)

    def merge_range(
        self,
        first_row: int,
        first_col: int,
        last_row: int,
        last_col: int,
        value: str,
        style: CellStyle,
    ) -> None:
        # openpyxl copies the top-left border onto the range edges when merging.
        self.write(first_row, first_col, value, style)
        self.worksheet.merge_cells(
            start_row=first_row + 1,
            start_column=first_col + 1,
            end_row=last_row + 1,
            end_column=last_col + 1,
        )

    def set_column_width(self, col: int, width: float) -> None:
        self.worksheet.column_dimensions[get_column_letter(col + 1)].width = width

    def set_row_height(self, row: int, height: float) -> None:
        self.worksheet.row_dimensions[row + 1].height = height

    def freeze_panes(self, row: int, col: int) -> None:
        self.worksheet.freeze_panes = _coordinate(row, col)

    def autofilter(self, first_row: int, first_col: int, last_row: int, last_col: int) -> None:
        self.worksheet.auto_filter.ref = (
            f"{_coordinate(first_row, first_col)}:{_coordinate(last_row, last_col)}"
        )

    def save(self) -> None:
        """Write the workbook to ``output_path``.

        Raises:
            OutputWriteError: The file could not be written.
            RuntimeError: save() was already called.
        """
        if self._saved:
            msg = "save() called twice"
            raise RuntimeError(msg)
        self._saved = True

        action = "update" if self.output_path.exists() else "create"
        if self.dry_run:
            logger.info("dry-run: would {} {!r}", action, str(self.output_path))
            return

        logger.debug("Writing ({}) {!r}", action, str(self.output_path))
        try:
            self.workbook.save(self.output_path)
        except OSError as e:
            raise OutputWriteError(self.output_path, e.strerror or str(e)) from e
