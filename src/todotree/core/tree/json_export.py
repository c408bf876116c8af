"""Export a document tree as JSON-serializable data."""

from typing import Any

from todotree.models.node import Document, Node


def node_to_dict(document: Document, node: Node) -> dict[str, Any]:
    """Convert a node and its descendants; enums become their names."""
    return {
        "indent": node.indent,
        "kind": node.kind.name,
        "token": node.token,
        "status": node.status.name,
        "text": node.text,
        "tags": [
            {"start": tag.start, "stop": tag.stop, "kind": tag.kind.name, "text": tag.literal}
            for tag in node.spans
        ],
        "items": [node_to_dict(document, child) for child in document.children_of(node)],
    }


def document_to_dict(document: Document) -> dict[str, Any]:
    return {"items": [node_to_dict(document, document.nodes[i]) for i in document.roots]}
