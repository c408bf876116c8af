"""Tests for rewriting todo files from a document."""

from pathlib import Path

from todotree.core.parser.reader import parse_file
from todotree.core.render.compositor import build_compositor
from todotree.writer import rewrite_document


def test_unchanged_document_is_not_rewritten(todo_file: Path) -> None:
    """Files whose contents would not change are left alone."""
    compositor = build_compositor(parse_file(todo_file))
    mtime_before = todo_file.stat().st_mtime_ns

    changed = rewrite_document(todo_file, compositor)

    assert changed is False
    assert todo_file.stat().st_mtime_ns == mtime_before


def test_rewrite_with_numbering(todo_file: Path) -> None:
    compositor = build_compositor(parse_file(todo_file), auto_number=True)

    changed = rewrite_document(todo_file, compositor)

    assert changed is True
    lines = todo_file.read_text(encoding="utf-8").splitlines()
    assert lines[1] == "    - 1. [ ] buy milk @today"
    assert lines[6] == "        - 5. outline `intro`"


def test_rewrite_is_idempotent(todo_file: Path) -> None:
    rewrite_document(todo_file, build_compositor(parse_file(todo_file), auto_number=True))
    first = todo_file.read_text(encoding="utf-8")

    changed = rewrite_document(todo_file, build_compositor(parse_file(todo_file), auto_number=True))

    assert changed is False
    assert todo_file.read_text(encoding="utf-8") == first


def test_rewrite_normalizes_tabs_and_blank_lines(tmp_path: Path) -> None:
    path = tmp_path / "TODO"
    path.write_text("- a\n\n\t- b\r\n", encoding="utf-8")

    assert rewrite_document(path, build_compositor(parse_file(path))) is True
    assert path.read_bytes() == b"- a\n    - b\n"


def test_rewrite_creates_missing_file(tmp_path: Path, todo_file: Path) -> None:
    target = tmp_path / "copy.todo"

    assert rewrite_document(target, build_compositor(parse_file(todo_file))) is True
    assert target.read_text(encoding="utf-8") == todo_file.read_text(encoding="utf-8")
