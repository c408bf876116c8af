"""CLI for todotree: show, number and rewrite todo outline files."""

import json
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console

from todotree.config import DEFAULT_TAB_WIDTH, find_todo_files, load_palette_overrides
from todotree.core.parser.reader import DocumentReadError, parse_file
from todotree.core.render.compositor import build_compositor
from todotree.core.render.palette import palette_from_names
from todotree.core.tree.json_export import document_to_dict
from todotree.logging_config import configure_logging
from todotree.writer import rewrite_document

app = typer.Typer(help="todotree: render indented todo lists with status and tag highlighting.")


def _resolve_inputs(inputs: list[Path] | None, directory: Path | None) -> list[Path]:
    """Explicit inputs, or the todo files found in ``directory`` (default: cwd)."""
    if inputs:
        return inputs
    search_dir = directory or Path.cwd()
    if not search_dir.is_dir():
        logger.error("Directory not found: {}", search_dir)
        raise typer.Exit(1)
    return find_todo_files(search_dir)


@app.command()
def main(
    inputs: Annotated[
        list[Path] | None,
        typer.Option("--input", "-i", help="Todo file to read (repeatable)"),
    ] = None,
    directory: Annotated[
        Path | None,
        typer.Option("--directory", "-d", help="Where to look for *.todo and TODO files"),
    ] = None,
    auto_number: bool = typer.Option(False, "--auto-number", "-n", help="Number todo items"),
    rewrite: bool = typer.Option(False, "--rewrite", "-w", help="Write the result back to each file"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output the tree as JSON"),
    tab_width: int = typer.Option(DEFAULT_TAB_WIDTH, "--tab-width", "-t", min=0, help="Columns per tab"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Show todo files, optionally numbering items and rewriting the files."""
    configure_logging(verbose=verbose)

    paths = _resolve_inputs(inputs, directory)
    if not paths:
        logger.error("No todo files found. Pass --input or create a *.todo file.")
        raise typer.Exit(1)

    palette = palette_from_names(load_palette_overrides())
    console = Console(no_color=no_color, highlight=False)

    for path in paths:
        try:
            document = parse_file(path, tab_width=tab_width)
        except DocumentReadError as exc:
            logger.error("{}", exc)
            raise typer.Exit(1) from exc
        logger.debug("Parsed {}: {} nodes", path, len(document))

        compositor = build_compositor(document, auto_number=auto_number, palette=palette)
        if output_json:
            typer.echo(json.dumps(document_to_dict(document), indent=2, ensure_ascii=False))
        else:
            compositor.write_styled(console)

        if rewrite:
            try:
                rewrite_document(path, compositor)
            except OSError as exc:
                logger.error("Cannot rewrite {}: {}", path, exc)
                raise typer.Exit(1) from exc
