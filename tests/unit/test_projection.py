"""Tests for spreading tree items over level columns."""

from tree_to_excel.core.grid.projection import project_grid
from tree_to_excel.core.parser.tree import parse_tree
from tree_to_excel.models.items import TreeItem


def test_project_sample_grid(sample_items: list[TreeItem]) -> None:
    grid = project_grid(sample_items)

    assert grid.max_depth == 3
    assert grid.column_count == 5
    assert [row.levels for row in grid.data_rows] == [
        ("Cargo.lock", "", ""),
        ("Cargo.toml", "", ""),
        ("README.md", "", ""),
        ("src", "", ""),
        ("src", "main.rs", ""),
        ("src", "parser", ""),
        ("src", "parser", "lines.rs"),
        ("src", "parser", "mod.rs"),
        ("tests", "", ""),
        ("tests", "README", ""),
    ]


def test_project_keeps_path_and_leaf_flags(sample_items: list[TreeItem]) -> None:
    rows = project_grid(sample_items).data_rows

    assert rows[4].full_path == "src/main.rs"
    assert rows[4].is_leaf is True
    assert rows[5].is_leaf is False
    assert rows[6].own_column == 2


def test_project_summary_row(sample_items: list[TreeItem]) -> None:
    grid = project_grid(sample_items)

    assert len(grid.summary_rows) == 1
    summary = grid.rows[-1]
    assert summary.is_summary
    assert summary.levels == ("📊 Summary: 3 directories, 7 files", "", "")
    assert summary.is_leaf is False


def test_project_summary_only_defaults_to_one_level() -> None:
    grid = project_grid(parse_tree(""))

    assert grid.max_depth == 1
    assert grid.data_rows == ()
    assert grid.rows[0].levels == ("📊 Summary: 0 directories, 0 files",)


def test_project_items_without_parts_use_their_name() -> None:
    items = [TreeItem(name="solo.txt", depth=1, is_leaf=True, full_path="solo.txt")]

    grid = project_grid(items)

    assert grid.rows[0].levels == ("solo.txt",)


def test_project_preserves_input_order() -> None:
    items = parse_tree("├── b\n│   └── z.txt\n└── a\n    └── y.txt\n")

    rows = project_grid(items).data_rows

    assert [row.full_path for row in rows] == ["b", "b/z.txt", "a", "a/y.txt"]
