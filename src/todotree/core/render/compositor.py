"""Render documents as plain text or as styled console text."""

import copy
from collections.abc import Iterable, Iterator
from dataclasses import replace
from typing import TextIO

from rich.console import Console
from rich.style import Style
from rich.text import Text

from todotree.core.render.palette import (
    Palette,
    kind_category,
    merge_palette,
    resolve_style,
    status_category,
    tag_category,
)
from todotree.core.transforms.numbering import AutoNumber
from todotree.models.node import Document, NodeKind, NodeSnapshot, Status, Tag
from todotree.protocols import NodeTransform


def compose_spans(
    text: str,
    spans: Iterable[Tag],
    *,
    offset: int,
    style: Style,
    palette: Palette,
) -> Text:
    """Style ``text`` against its tag spans.

    Spans are shifted by ``offset`` and consumed in the order given. Text
    between spans gets ``style``; each span's literal gets its tag style.
    A span that starts before the cursor, ends past the text or is inverted
    after shifting is dropped.
    """
    out = Text()
    cursor = 0
    for span in spans:
        start, stop = span.start + offset, span.stop + offset
        if start < cursor or start > stop or stop > len(text):
            continue
        out.append(text[cursor:start], style=style)
        out.append(span.literal, style=resolve_style(palette, tag_category(span.kind)))
        cursor = stop
    out.append(text[cursor:], style=style)
    return out


def fresh_stage(stage: NodeTransform) -> NodeTransform:
    """Return a private copy of a stage for one render pass.

    Stages that define ``fresh()`` build their own copy; others are deep-copied
    and so must not hold uncopyable state such as locks or consoles.
    """
    fresh = getattr(stage, "fresh", None)
    if callable(fresh):
        return fresh()
    return copy.deepcopy(stage)


class Compositor:
    """Walk a document, run each node through the pipeline, and render it.

    Every render works on snapshots and on private copies of the pipeline
    stages, so plain and styled renders of one document are independent.
    """

    def __init__(
        self,
        document: Document,
        *,
        palette: Palette | None = None,
        pipeline: Iterable[NodeTransform] = (),
    ) -> None:
        self.document = document
        self.palette = merge_palette(palette)
        self.pipeline: list[NodeTransform] = list(pipeline)

    def add_transform(self, stage: NodeTransform) -> None:
        self.pipeline.append(stage)

    def snapshots(self) -> Iterator[NodeSnapshot]:
        """Yield transformed snapshots in depth-first pre-order."""
        stages = [fresh_stage(stage) for stage in self.pipeline]
        for node in self.document.walk():
            snapshot = NodeSnapshot.of(node)
            for stage in stages:
                result = stage.transform(snapshot)
                snapshot = replace(snapshot, text=result.text, offset=snapshot.offset + result.offset_delta)
            yield snapshot

    @staticmethod
    def plain_line(snapshot: NodeSnapshot) -> str:
        indent = " " * snapshot.indent
        if snapshot.kind is NodeKind.ITEM:
            return f"{indent}{snapshot.token} {snapshot.text}"
        return f"{indent}{snapshot.text}"

    def render_plain(self) -> str:
        return "".join(self.plain_line(snapshot) + "\n" for snapshot in self.snapshots())

    def write_plain(self, stream: TextIO) -> None:
        for snapshot in self.snapshots():
            stream.write(self.plain_line(snapshot) + "\n")

    def styled_line(self, snapshot: NodeSnapshot) -> Text:
        status_style = resolve_style(self.palette, status_category(snapshot.status))
        if snapshot.status in (Status.DONE, Status.CANCELLED):
            text_style = status_style
        else:
            text_style = resolve_style(self.palette, kind_category(snapshot.kind))

        line = Text(" " * snapshot.indent)
        if snapshot.kind is NodeKind.ITEM:
            line.append(snapshot.token, style=status_style)
            line.append(" ")
        line.append_text(
            compose_spans(
                snapshot.text,
                snapshot.spans,
                offset=snapshot.offset,
                style=text_style,
                palette=self.palette,
            )
        )
        return line

    def render_styled(self) -> Text:
        return Text("\n").join(self.styled_line(snapshot) for snapshot in self.snapshots())

    def write_styled(self, console: Console) -> None:
        for snapshot in self.snapshots():
            console.print(self.styled_line(snapshot), soft_wrap=True, highlight=False)


def build_compositor(
    document: Document,
    *,
    auto_number: bool = False,
    palette: Palette | None = None,
) -> Compositor:
    """Create a compositor with the standard pipeline.

    Callers can extend ``compositor.pipeline`` with further stages.
    """
    compositor = Compositor(document, palette=palette)
    if auto_number:
        compositor.add_transform(AutoNumber())
    return compositor
