"""Configuration constants for todotree."""

import tomllib
from pathlib import Path
from typing import Any

from loguru import logger

# Columns a tab counts for when measuring indentation.
DEFAULT_TAB_WIDTH: int = 4

# Files picked up when no input is given: "*.todo" and files named "TODO".
TODO_SUFFIX: str = ".todo"
TODO_BASENAMES: tuple[str, ...] = ("TODO",)

# Palette override files. First file found is used.
CONFIG_FILES: list[Path] = [
    Path("~/.config/todotree/palette.toml").expanduser(),
    Path("~/.todo.toml").expanduser(),
]


def find_todo_files(directory: str | Path) -> list[Path]:
    """Return todo files directly inside ``directory``, sorted by name."""
    return sorted(
        entry
        for entry in Path(directory).iterdir()
        if entry.is_file() and (entry.suffix == TODO_SUFFIX or entry.name in TODO_BASENAMES)
    )


def load_palette_overrides(paths: list[Path] | None = None) -> dict[str, tuple[str, ...]]:
    """Read the ``[palette]`` table of the first existing config file.

    Keys are category names, values a style string or a list of them.
    Returns an empty mapping when no config file exists. Unparsable files
    are skipped and malformed entries dropped, with a warning.
    """
    for path in CONFIG_FILES if paths is None else paths:
        if not path.is_file():
            continue
        with path.open("rb") as f:
            try:
                data: dict[str, Any] = tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                logger.warning("Ignoring config file {}: {}", path, exc)
                continue
        logger.debug("Using config file: {}", path)
        table = data.get("palette", {})
        if not isinstance(table, dict):
            logger.warning("Ignoring palette in {}: expected a table, got {!r}", path, table)
            return {}
        overrides: dict[str, tuple[str, ...]] = {}
        for name, value in table.items():
            if isinstance(value, str):
                overrides[name.lower()] = (value,)
            elif isinstance(value, list) and all(isinstance(v, str) for v in value):
                overrides[name.lower()] = tuple(value)
            else:
                logger.warning("Ignoring palette entry {!r} in {}: expected string or list of strings", name, path)
        return overrides
    return {}
