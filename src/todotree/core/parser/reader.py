"""Parse todo documents from streams, strings and files."""

from collections.abc import Iterable
from pathlib import Path

from todotree.config import DEFAULT_TAB_WIDTH
from todotree.core.parser.classifier import classify_line
from todotree.core.tree.builder import TreeBuilder
from todotree.models.node import Document


class DocumentReadError(Exception):
    """Reading a document failed; no partial document is returned."""

    def __init__(self, msg: str, *, path: Path) -> None:
        super().__init__(msg)
        self.path = path


def parse_lines(lines: Iterable[str], *, tab_width: int = DEFAULT_TAB_WIDTH) -> Document:
    """Build a document from lines, in order.

    Line terminators are stripped; blank and whitespace-only lines are skipped.
    Errors raised while iterating ``lines`` propagate unchanged.
    """
    builder = TreeBuilder()
    for raw in lines:
        line = raw.removesuffix("\n").removesuffix("\r")
        if not line.strip():
            continue
        builder.add(classify_line(line, tab_width=tab_width))
    return builder.build()


def parse_text(text: str, *, tab_width: int = DEFAULT_TAB_WIDTH) -> Document:
    return parse_lines(text.split("\n"), tab_width=tab_width)


def parse_file(path: str | Path, *, tab_width: int = DEFAULT_TAB_WIDTH) -> Document:
    """Parse a UTF-8 todo file.

    Raises:
        DocumentReadError: If the file cannot be opened, read or decoded.
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8", newline="") as f:
            return parse_lines(f, tab_width=tab_width)
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Cannot read todo file {str(path)!r}: {exc}"
        raise DocumentReadError(msg, path=path) from exc
