"""Cell styles of the generated sheet."""

from dataclasses import dataclass
from typing import Literal

Align = Literal["center"] | None


@dataclass(frozen=True)
class CellStyle:
    """Spreadsheet-library independent cell style. Colours are ``RRGGBB``."""

    name: str
    bold: bool = False
    fill: str | None = None
    font_color: str | None = None
    border: bool = True
    horizontal: Align = None
    vertical: Align = None


HEADER = CellStyle("header", bold=True, fill="4F81BD", font_color="FFFFFF")

# Directory names, also used for every merged range.
DIRECTORY = CellStyle(
    "directory", bold=True, fill="E8F4FD", horizontal="center", vertical="center"
)

FILE = CellStyle("file", fill="F0F8E8")
PATH = CellStyle("path", fill="FFFEF7")
NOTES = CellStyle("notes", fill="F5F5F5")
SUMMARY = CellStyle("summary", bold=True, fill="FFE4E1", font_color="8B0000")
