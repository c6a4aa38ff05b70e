"""Tests for laying a grid out on a sheet."""

from tests.unit.fakes import FakeSheet
from tree_to_excel import styles
from tree_to_excel.core.grid.projection import project_grid
from tree_to_excel.core.parser.tree import parse_tree
from tree_to_excel.models.items import TreeItem
from tree_to_excel.protocols import SheetProtocol
from tree_to_excel.render import render_grid


def _render(items: list[TreeItem]) -> tuple[FakeSheet, int]:
    sheet = FakeSheet()
    merged = render_grid(project_grid(items), sheet)
    return sheet, merged


def test_fake_sheet_satisfies_protocol() -> None:
    assert isinstance(FakeSheet(), SheetProtocol)


def test_render_header_and_column_widths(sample_items: list[TreeItem]) -> None:
    sheet, _ = _render(sample_items)

    assert [sheet.value(0, c) for c in range(5)] == ["L1", "L2", "L3", "Full path", "Notes"]
    assert all(sheet.cells[(0, c)][1] == styles.HEADER for c in range(5))
    assert sheet.column_widths == {0: 20, 1: 20, 2: 20, 3: 60, 4: 30}


def test_render_writes_every_non_empty_cell(sample_items: list[TreeItem]) -> None:
    sheet, _ = _render(sample_items)

    # src/main.rs is data row 4, sheet row 5
    assert sheet.value(5, 0) == "src"
    assert sheet.value(5, 1) == "main.rs"
    assert (5, 2) not in sheet.cells
    assert sheet.value(5, 3) == "src/main.rs"
    assert sheet.cells[(5, 4)] == ("", styles.NOTES)


def test_render_styles_files_and_directories(sample_items: list[TreeItem]) -> None:
    sheet, _ = _render(sample_items)

    assert sheet.cells[(1, 0)] == ("Cargo.lock", styles.FILE)
    assert sheet.cells[(4, 0)] == ("src", styles.DIRECTORY)
    assert sheet.cells[(5, 1)] == ("main.rs", styles.FILE)
    assert sheet.cells[(7, 1)] == ("parser", styles.DIRECTORY)
    assert sheet.cells[(7, 2)] == ("lines.rs", styles.FILE)
    assert sheet.cells[(10, 1)] == ("README", styles.FILE)
    assert sheet.cells[(5, 3)][1] == styles.PATH


def test_render_merges_shared_ancestry(sample_items: list[TreeItem]) -> None:
    sheet, merged = _render(sample_items)

    assert merged == 3
    assert sheet.merges[:3] == [
        (4, 0, 8, 0, "src", styles.DIRECTORY),
        (9, 0, 10, 0, "tests", styles.DIRECTORY),
        (6, 1, 8, 1, "parser", styles.DIRECTORY),
    ]


def test_render_summary_row_spans_all_columns(sample_items: list[TreeItem]) -> None:
    sheet, _ = _render(sample_items)

    assert sheet.merges[-1] == (
        11,
        0,
        11,
        4,
        "📊 Summary: 3 directories, 7 files",
        styles.SUMMARY,
    )
    assert sheet.row_heights == {11: 20}


def test_render_freezes_header_and_filters_all_rows(sample_items: list[TreeItem]) -> None:
    sheet, _ = _render(sample_items)

    assert sheet.frozen == (1, 0)
    assert sheet.filter_range == (0, 0, 11, 4)


def test_render_summary_only() -> None:
    sheet, merged = _render(parse_tree(""))

    assert merged == 0
    assert [sheet.value(0, c) for c in range(3)] == ["L1", "Full path", "Notes"]
    assert sheet.merges == [(1, 0, 1, 2, "📊 Summary: 0 directories, 0 files", styles.SUMMARY)]
    assert sheet.filter_range is None
    assert sheet.frozen == (1, 0)


def test_render_does_not_save(sample_items: list[TreeItem]) -> None:
    sheet, _ = _render(sample_items)

    assert sheet.saved == 0


def test_render_file_style_follows_filled_column_when_depth_is_skipped() -> None:
    """A depth-3 line directly under a depth-1 line sits in the second column."""
    items = parse_tree("├── a\n│       └── deep.txt\n")
    sheet, _ = _render(items)

    assert items[1].depth == 3
    assert sheet.cells[(2, 0)] == ("a", styles.DIRECTORY)
    assert sheet.cells[(2, 1)] == ("deep.txt", styles.FILE)
    assert (2, 2) not in sheet.cells
