"""Protocols for pluggable render-time transforms."""

from typing import Protocol, runtime_checkable

from todotree.models.node import NodeSnapshot, TransformResult


@runtime_checkable
class NodeTransform(Protocol):
    """A render pipeline stage.

    Stages receive a snapshot, never the document's own node, and report how
    far they shifted the text so that tag spans can be re-anchored.

    Each render pass works on its own copy of every stage. A stage that keeps
    uncopyable state can define ``fresh()`` returning a reset instance; other
    stages are deep-copied.
    """

    def transform(self, snapshot: NodeSnapshot) -> TransformResult:
        """Return the rewritten text and the offset it introduced."""
        ...
