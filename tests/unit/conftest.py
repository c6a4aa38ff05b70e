"""Shared test fixtures."""

import pytest

from tests.unit.samples import SAMPLE_TREE
from tree_to_excel.core.parser.tree import parse_tree
from tree_to_excel.models.items import TreeItem


@pytest.fixture
def sample_tree() -> str:
    return SAMPLE_TREE


@pytest.fixture
def sample_items() -> list[TreeItem]:
    """Items of SAMPLE_TREE with hidden entries filtered out."""
    return parse_tree(SAMPLE_TREE)
