"""Classify a single outline line into a node."""

from todotree.config import DEFAULT_TAB_WIDTH
from todotree.core.parser.glyphs import ITEM_RE, TITLE_RE, glyph_status
from todotree.core.parser.tags import extract_spans
from todotree.models.node import Node, NodeKind, Status


def measure_indent(line: str, *, tab_width: int = DEFAULT_TAB_WIDTH) -> tuple[int, str]:
    """Split a line into its indent width and the remaining "pure" line.

    Spaces count one column, tabs count ``tab_width`` columns.
    """
    width = 0
    for i, char in enumerate(line):
        if char == " ":
            width += 1
        elif char == "\t":
            width += tab_width
        else:
            return width, line[i:]
    return width, ""


def classify_line(line: str, *, tab_width: int = DEFAULT_TAB_WIDTH) -> Node:
    """Turn one non-blank line (without its terminator) into a detached node.

    Every line produces a node: item if it starts with a known glyph, title
    if it ends with a colon, plain text otherwise.
    """
    if tab_width < 0:
        msg = f"tab_width must be non-negative, got {tab_width!r}"
        raise ValueError(msg)

    indent, pure = measure_indent(line, tab_width=tab_width)

    if match := ITEM_RE.match(pure):
        kind, token, text = NodeKind.ITEM, match.group(1), match.group(2)
        status = glyph_status(token)
    else:
        kind = NodeKind.TITLE if TITLE_RE.match(pure) else NodeKind.TEXT
        token, text, status = "", pure, Status.UNKNOWN

    return Node(kind=kind, indent=indent, text=text, token=token, status=status, spans=extract_spans(text))
