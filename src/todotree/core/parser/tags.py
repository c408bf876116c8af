"""Extract inline annotation and format spans from node text."""

import re
from types import MappingProxyType

from todotree.models.node import AnnotationKind, FormatKind, Tag

# "@word", "@word(params)" or "@word" plus one trailing non-space character.
ANNOTATION_RE = re.compile(r"@\w+(?:\([\w\s:-]+\)|\S)?")
FORMAT_RE = re.compile(r"\*.*?\*|`.*?`|~.*?~|_.*?_")

# Checked in order; the first matching prefix wins.
ANNOTATION_PREFIXES: tuple[tuple[str, AnnotationKind], ...] = (
    ("done", AnnotationKind.DONE),
    ("started", AnnotationKind.STARTED),
    ("est", AnnotationKind.ESTIMATE),
    ("lasted", AnnotationKind.LASTED),
    ("critical", AnnotationKind.CRITICAL),
    ("high", AnnotationKind.HIGH),
    ("low", AnnotationKind.LOW),
    ("today", AnnotationKind.TODAY),
)

FORMAT_DELIMITERS: MappingProxyType[str, FormatKind] = MappingProxyType(
    {
        "*": FormatKind.BOLD,
        "_": FormatKind.ITALIC,
        "~": FormatKind.DELETED,
        "`": FormatKind.CODE,
    }
)


def annotation_kind(literal: str) -> AnnotationKind:
    if not literal.startswith("@"):
        return AnnotationKind.NORMAL
    name = literal[1:]
    for prefix, kind in ANNOTATION_PREFIXES:
        if name.startswith(prefix):
            return kind
    return AnnotationKind.NORMAL


def format_kind(literal: str) -> FormatKind:
    return FORMAT_DELIMITERS.get(literal[:1], FormatKind.UNKNOWN)


def extract_annotations(text: str) -> list[Tag]:
    """Find ``@tag`` annotations, left to right."""
    return [
        Tag(start=m.start(), stop=m.end(), kind=annotation_kind(m.group()), literal=m.group())
        for m in ANNOTATION_RE.finditer(text)
    ]


def extract_formats(text: str) -> list[Tag]:
    """Find ``*bold*``, ``_italic_``, ``~deleted~`` and `` `code` `` runs, left to right."""
    return [
        Tag(start=m.start(), stop=m.end(), kind=format_kind(m.group()), literal=m.group())
        for m in FORMAT_RE.finditer(text)
    ]


def extract_spans(text: str) -> tuple[Tag, ...]:
    """All annotation spans followed by all format spans.

    The two passes are concatenated, not merged by position, and may overlap.
    """
    return (*extract_annotations(text), *extract_formats(text))
