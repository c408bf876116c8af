"""Domain models for todo outline documents."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class NodeKind(Enum):
    """What a line is: an actionable item, a section title, or free text."""

    TEXT = "text"
    ITEM = "item"
    TITLE = "title"


class Status(Enum):
    """Status of an item, derived from its leading glyph."""

    UNKNOWN = "unknown"
    PENDING = "pending"
    STARTED = "started"
    DONE = "done"
    CANCELLED = "cancelled"
    ARCHIVED = "archived"


class AnnotationKind(Enum):
    """Semantic meaning of an inline ``@tag``."""

    NORMAL = "normal"
    DONE = "done"
    STARTED = "started"
    ESTIMATE = "estimate"
    LASTED = "lasted"
    CRITICAL = "critical"
    HIGH = "high"
    LOW = "low"
    TODAY = "today"


class FormatKind(Enum):
    """Inline text formatting marked by a delimiter pair."""

    BOLD = "bold"
    ITALIC = "italic"
    DELETED = "deleted"
    CODE = "code"
    UNKNOWN = "unknown"


TagKind = AnnotationKind | FormatKind


@dataclass(frozen=True)
class Tag:
    """A marked range ``[start, stop)`` of a node's text."""

    start: int
    stop: int
    kind: TagKind
    literal: str


@dataclass
class Node:
    """A single line of a todo document.

    Nodes live in a ``Document`` arena; ``parent`` and ``children`` hold
    indices into ``Document.nodes`` rather than references.
    """

    kind: NodeKind
    indent: int
    text: str
    token: str = ""
    status: Status = Status.UNKNOWN
    spans: tuple[Tag, ...] = ()
    index: int = -1
    parent: int | None = None
    children: list[int] = field(default_factory=list)

    @property
    def is_item(self) -> bool:
        return self.kind is NodeKind.ITEM

    def __str__(self) -> str:
        return " " * self.indent + self.text


@dataclass(frozen=True)
class NodeSnapshot:
    """Render-time copy of a node, rewritten by transform stages.

    ``offset`` is the accumulated shift to apply to ``spans`` so that they
    line up with the rewritten ``text``.
    """

    kind: NodeKind
    indent: int
    text: str
    token: str = ""
    status: Status = Status.UNKNOWN
    spans: tuple[Tag, ...] = ()
    offset: int = 0

    @classmethod
    def of(cls, node: Node) -> "NodeSnapshot":
        return cls(
            kind=node.kind,
            indent=node.indent,
            text=node.text,
            token=node.token,
            status=node.status,
            spans=node.spans,
        )


@dataclass(frozen=True)
class TransformResult:
    """Output of a transform stage: new text and the span shift it introduced."""

    text: str
    offset_delta: int = 0


@dataclass
class Document:
    """A parsed todo document: an ordered forest stored as a node arena."""

    nodes: list[Node] = field(default_factory=list)
    roots: list[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.nodes)

    def children_of(self, node: Node) -> list[Node]:
        return [self.nodes[i] for i in node.children]

    def parent_of(self, node: Node) -> Node | None:
        if node.parent is None:
            return None
        return self.nodes[node.parent]

    def walk(self) -> Iterator[Node]:
        """Yield every node depth-first, pre-order, in insertion order."""
        stack = list(reversed(self.roots))
        while stack:
            node = self.nodes[stack.pop()]
            yield node
            stack.extend(reversed(node.children))
