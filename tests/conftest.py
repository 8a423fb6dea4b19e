"""Shared fixtures for the ordered-tree tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from click.testing import CliRunner

from BST import OrderedTree

SAMPLE_KEYS = [5, 3, 8, 1, 4, 7, 9]


@pytest.fixture
def sample_tree() -> OrderedTree:
    """The seven-key tree: 5 at the root, 3 and 8 below, four leaves."""
    return OrderedTree(SAMPLE_KEYS)


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """The shell reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    levels = {name: logging.getLogger(name).level for name in ("BST", "tree_shell")}
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)
