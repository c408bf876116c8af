"""Assemble classified nodes into a document forest by indentation."""

from loguru import logger

from todotree.models.node import Document, Node


class TreeBuilder:
    """Attach nodes one at a time, comparing each with the previous node.

    - deeper than the previous node: becomes its child
    - same depth: becomes a sibling under the tracked parent
    - shallower: pops exactly one level, however large the dedent
    """

    def __init__(self) -> None:
        self.document = Document()
        self._prev: int | None = None
        self._parent: int | None = None

    def add(self, node: Node) -> Node:
        nodes = self.document.nodes
        node.index = len(nodes)
        nodes.append(node)

        if self._prev is not None:
            prev = nodes[self._prev]
            if node.indent > prev.indent:
                self._parent = prev.index
            elif node.indent < prev.indent and self._parent is not None:
                self._parent = nodes[self._parent].parent

        self._attach(node, self._parent)
        self._prev = node.index
        return node

    def _attach(self, node: Node, parent: int | None) -> None:
        node.parent = parent
        if parent is None:
            self.document.roots.append(node.index)
        else:
            self.document.nodes[parent].children.append(node.index)

    def build(self) -> Document:
        logger.debug("Built document: {} nodes, {} roots", len(self.document), len(self.document.roots))
        return self.document
