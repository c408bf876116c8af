"""Palette: visual categories and the rich styles they map to."""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from loguru import logger
from rich.errors import StyleSyntaxError
from rich.style import Style

from todotree.models.node import AnnotationKind, FormatKind, NodeKind, Status, TagKind


class Category(Enum):
    BASE = "base"
    ITEM = "item"
    TITLE = "title"
    TEXT = "text"
    DONE = "done"
    CANCEL = "cancel"
    TAG = "tag"
    TIME = "time"
    USER = "user"
    HIGHLIGHT = "highlight"
    CUSTOM1 = "custom1"
    CUSTOM2 = "custom2"
    CUSTOM3 = "custom3"
    CUSTOM4 = "custom4"
    BOLD = "bold"
    ITALIC = "italic"
    DELETED = "deleted"
    CODE = "code"


Palette = Mapping[Category, tuple[str, ...]]

DEFAULT_PALETTE: Palette = MappingProxyType(
    {
        Category.BASE: ("white",),
        Category.ITEM: ("white",),
        Category.TITLE: ("cyan",),
        Category.TEXT: ("dim",),
        Category.DONE: ("green",),
        Category.CANCEL: ("red",),
        Category.TAG: ("yellow",),
        Category.CUSTOM1: ("on bright_red", "black"),
        Category.CUSTOM2: ("on bright_cyan", "black"),
        Category.CUSTOM3: ("on yellow", "black"),
        Category.CUSTOM4: ("on magenta", "black"),
        Category.BOLD: ("bold",),
        Category.ITALIC: ("italic",),
        Category.DELETED: ("strike",),
        Category.CODE: ("bright_yellow",),
        Category.HIGHLIGHT: ("bright_yellow",),
    }
)

_KIND_CATEGORY = MappingProxyType(
    {
        NodeKind.ITEM: Category.ITEM,
        NodeKind.TITLE: Category.TITLE,
        NodeKind.TEXT: Category.TEXT,
    }
)

_STATUS_CATEGORY = MappingProxyType(
    {
        Status.DONE: Category.DONE,
        Status.CANCELLED: Category.CANCEL,
    }
)

_TAG_CATEGORY: Mapping[TagKind, Category] = MappingProxyType(
    {
        AnnotationKind.NORMAL: Category.TAG,
        AnnotationKind.CRITICAL: Category.CUSTOM1,
        AnnotationKind.HIGH: Category.CUSTOM2,
        AnnotationKind.LOW: Category.CUSTOM3,
        AnnotationKind.TODAY: Category.CUSTOM4,
        FormatKind.BOLD: Category.BOLD,
        FormatKind.ITALIC: Category.ITALIC,
        FormatKind.DELETED: Category.DELETED,
        FormatKind.CODE: Category.CODE,
    }
)


def merge_palette(
    overrides: Palette | None = None,
    defaults: Palette = DEFAULT_PALETTE,
) -> dict[Category, tuple[str, ...]]:
    """Combine a partial palette with the defaults without mutating either.

    Entries in ``overrides`` win; categories it leaves out come from ``defaults``.
    """
    merged = {category: tuple(attributes) for category, attributes in (overrides or {}).items()}
    for category, attributes in defaults.items():
        merged.setdefault(category, attributes)
    return merged


def palette_from_names(entries: Mapping[str, tuple[str, ...]]) -> dict[Category, tuple[str, ...]]:
    """Convert ``{"title": ("bold",)}``-style config entries to a palette.

    Unknown category names and unparsable styles are logged and dropped.
    """
    palette: dict[Category, tuple[str, ...]] = {}
    for name, attributes in entries.items():
        try:
            category = Category(name.lower())
        except ValueError:
            logger.warning("Unknown palette category {!r}, ignoring", name)
            continue
        try:
            for attribute in attributes:
                Style.parse(attribute)
        except StyleSyntaxError as exc:
            logger.warning("Invalid style for palette category {!r}, ignoring: {}", name, exc)
            continue
        palette[category] = tuple(attributes)
    return palette


def kind_category(kind: NodeKind) -> Category:
    return _KIND_CATEGORY.get(kind, Category.TEXT)


def status_category(status: Status) -> Category:
    return _STATUS_CATEGORY.get(status, Category.BASE)


def tag_category(kind: TagKind) -> Category:
    return _TAG_CATEGORY.get(kind, Category.TAG)


def resolve_style(palette: Palette, category: Category) -> Style:
    """Combine a category's attributes into one style.

    Categories absent from ``palette`` fall back to the default base style.
    """
    attributes = palette.get(category)
    if not attributes:
        return Style.parse(DEFAULT_PALETTE[Category.BASE][0])
    return Style.combine(Style.parse(attribute) for attribute in attributes)
