"""Write plain renderings back to todo files."""

from pathlib import Path

from loguru import logger

from todotree.core.render.compositor import Compositor


def rewrite_document(path: str | Path, compositor: Compositor) -> bool:
    """Write the plain rendering of a document to ``path``.

    Does not touch the file if its contents would not change, so its mtime
    stays put for unchanged documents.

    Returns:
        True if the file was written.
    """
    path = Path(path)
    contents = compositor.render_plain()
    current: str | None
    try:
        with path.open(encoding="utf-8", newline="") as f:
            current = f.read()
    except FileNotFoundError:
        current = None

    if current == contents:
        logger.debug("Unchanged, not rewriting: {}", path)
        return False

    with path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(contents)
    logger.debug("Rewrote {} ({} nodes)", path, len(compositor.document))
    return True
