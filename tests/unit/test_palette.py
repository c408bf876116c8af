"""Tests for palette merging and style resolution."""

from rich.style import Style
from rich.text import Span

from todotree.core.parser.reader import parse_text
from todotree.core.render.compositor import Compositor
from todotree.core.render.palette import (
    DEFAULT_PALETTE,
    Category,
    kind_category,
    merge_palette,
    palette_from_names,
    resolve_style,
    status_category,
    tag_category,
)
from todotree.models.node import AnnotationKind, FormatKind, NodeKind, Status


def test_merge_caller_entries_win() -> None:
    overrides = {Category.TITLE: ("bold magenta",)}

    merged = merge_palette(overrides)

    assert merged[Category.TITLE] == ("bold magenta",)
    assert merged[Category.DONE] == DEFAULT_PALETTE[Category.DONE]


def test_merge_does_not_mutate_inputs() -> None:
    overrides = {Category.TAG: ("blue",)}
    defaults_before = dict(DEFAULT_PALETTE)

    merge_palette(overrides)

    assert overrides == {Category.TAG: ("blue",)}
    assert dict(DEFAULT_PALETTE) == defaults_before


def test_merge_without_overrides_is_defaults() -> None:
    assert merge_palette() == dict(DEFAULT_PALETTE)


def test_merge_against_custom_defaults() -> None:
    merged = merge_palette({Category.BOLD: ("bold",)}, defaults={Category.BASE: ("white",)})

    assert merged == {Category.BOLD: ("bold",), Category.BASE: ("white",)}


def test_resolve_combines_attributes() -> None:
    style = resolve_style(DEFAULT_PALETTE, Category.CUSTOM1)

    assert style == Style.parse("black on bright_red")


def test_resolve_missing_category_uses_base() -> None:
    assert resolve_style(DEFAULT_PALETTE, Category.TIME) == Style.parse("white")
    assert resolve_style({}, Category.TITLE) == Style.parse("white")


def test_palette_from_names_drops_unknown() -> None:
    palette = palette_from_names({"Title": ("bold",), "sparkles": ("red",)})

    assert palette == {Category.TITLE: ("bold",)}


def test_category_lookups() -> None:
    assert kind_category(NodeKind.TITLE) is Category.TITLE
    assert kind_category(NodeKind.TEXT) is Category.TEXT
    assert status_category(Status.DONE) is Category.DONE
    assert status_category(Status.CANCELLED) is Category.CANCEL
    assert status_category(Status.PENDING) is Category.BASE
    assert tag_category(AnnotationKind.TODAY) is Category.CUSTOM4
    assert tag_category(AnnotationKind.ESTIMATE) is Category.TAG
    assert tag_category(FormatKind.CODE) is Category.CODE
    assert tag_category(FormatKind.UNKNOWN) is Category.TAG


def test_code_override_restyles_code_span() -> None:
    palette = palette_from_names({"code": ("red",)})

    line = Compositor(parse_text("- run `x`\n"), palette=palette).render_styled()

    assert palette == {Category.CODE: ("red",)}
    assert Span(6, 9, Style.parse("red")) in line.spans


def test_default_code_style() -> None:
    assert resolve_style(DEFAULT_PALETTE, Category.CODE) == Style.parse("bright_yellow")


def test_palette_from_names_drops_unparsable_style() -> None:
    palette = palette_from_names({"title": ("blinky",), "done": ("bold", "not-a-colour"), "tag": ("blue",)})

    assert palette == {Category.TAG: ("blue",)}
