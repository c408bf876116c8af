"""Shared test fixtures."""

from pathlib import Path

import pytest

from todotree.core.parser.reader import parse_text
from todotree.models.node import Document

SAMPLE_TODO = (
    "Groceries:\n"
    "    - [ ] buy milk @today\n"
    "    ✔ bread @done(2020-01-02)\n"
    "    x cake\n"
    "Work:\n"
    "    - write *report* @high\n"
    "        - outline `intro`\n"
    "    [x] send ~old~ mail\n"
    "notes about the week\n"
)


@pytest.fixture
def sample_document() -> Document:
    """Return the parsed sample todo list."""
    return parse_text(SAMPLE_TODO)


@pytest.fixture
def todo_file(tmp_path: Path) -> Path:
    """Write the sample todo list to a file and return its path."""
    path = tmp_path / "week.todo"
    path.write_text(SAMPLE_TODO, encoding="utf-8")
    return path


@pytest.fixture
def sample_text() -> str:
    """Return the raw sample todo list."""
    return SAMPLE_TODO
