"""Parse, style and renumber indented todo lists."""

from todotree.core.parser.reader import DocumentReadError, parse_file, parse_lines, parse_text
from todotree.core.render.compositor import Compositor, build_compositor
from todotree.core.transforms.numbering import AutoNumber
from todotree.models.node import Document, Node
from todotree.protocols import NodeTransform

__all__ = [
    "AutoNumber",
    "Compositor",
    "Document",
    "DocumentReadError",
    "Node",
    "NodeTransform",
    "build_compositor",
    "parse_file",
    "parse_lines",
    "parse_text",
]
