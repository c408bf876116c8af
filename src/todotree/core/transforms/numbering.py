"""Auto-numbering of todo items."""

import re

from loguru import logger

from todotree.models.node import NodeKind, NodeSnapshot, TransformResult

# Leading "<digits>." of an already numbered item.
_NUMBER_RE = re.compile(r"^(\d+)\.")


class AutoNumber:
    """Number items with one running counter across the whole traversal.

    Unnumbered items get a ``"<n>. "`` prefix. Numbered items keep their text
    but have the digits rewritten; a number larger than the counter advances
    the counter, so numbering never goes backwards. Titles and plain text pass
    through untouched.
    """

    def __init__(self, start: int = 1) -> None:
        if start < 1:
            msg = f"start must be positive, got {start!r}"
            raise ValueError(msg)
        self.start = start
        self.counter = start

    def fresh(self) -> "AutoNumber":
        return AutoNumber(start=self.start)

    def transform(self, snapshot: NodeSnapshot) -> TransformResult:
        if snapshot.kind is not NodeKind.ITEM:
            return TransformResult(snapshot.text)

        match = _NUMBER_RE.match(snapshot.text)
        if match is None:
            prefix = f"{self.counter}. "
            result = TransformResult(prefix + snapshot.text, len(prefix))
        else:
            old_digits = match.group(1)
            self.counter = max(self.counter, int(old_digits))
            new_digits = str(self.counter)
            text = new_digits + snapshot.text[len(old_digits) :]
            result = TransformResult(text, len(new_digits) - len(old_digits))

        logger.debug("Numbered item {}: {!r}", self.counter, result.text)
        self.counter += 1
        return result
