"""Line parser: `tree` listing text to TreeItems."""

from tree_to_excel.core.parser.ansi import strip_ansi
from tree_to_excel.core.parser.lines import parse_line
from tree_to_excel.core.parser.tree import is_leaf_name, parse_tree

__all__ = ["is_leaf_name", "parse_line", "parse_tree", "strip_ansi"]
