"""Leading glyph vocabulary and the patterns built from it.

Tables are built once at import; a malformed pattern fails the import.
"""

import re
from types import MappingProxyType

from todotree.models.node import Status

PENDING_GLYPHS: tuple[str, ...] = ("-", "❍", "❑", "■", "⬜", "□", "☐", "▪", "▫", "–", "—", "≡", "→", "›", "[]")
DONE_GLYPHS: tuple[str, ...] = ("✔", "✓", "☑", "+", "[x]", "[X]", "[+]")
CANCEL_GLYPHS: tuple[str, ...] = ("✘", "x", "X", "[-]")

# "[ ]" with any run of whitespace between the brackets.
_EMPTY_BOX = r"\[\s+\]"

GLYPH_STATUS: MappingProxyType[str, Status] = MappingProxyType(
    {
        **{glyph: Status.PENDING for glyph in (*PENDING_GLYPHS, "[ ]")},
        **{glyph: Status.DONE for glyph in DONE_GLYPHS},
        **{glyph: Status.CANCELLED for glyph in CANCEL_GLYPHS},
    }
)


def _build_item_pattern() -> re.Pattern[str]:
    alternatives = [re.escape(glyph) for glyph in PENDING_GLYPHS]
    alternatives.append(_EMPTY_BOX)
    alternatives.extend(re.escape(glyph) for glyph in DONE_GLYPHS)
    alternatives.extend(re.escape(glyph) for glyph in CANCEL_GLYPHS)
    return re.compile(r"^(" + "|".join(alternatives) + r")\s+(.*)$", re.DOTALL)


def _build_title_pattern() -> re.Pattern[str]:
    chars = sorted({char for glyph in (*PENDING_GLYPHS, *DONE_GLYPHS, *CANCEL_GLYPHS) for char in glyph})
    excluded = "".join(re.escape(char) for char in chars)
    return re.compile(r"^[^" + excluded + r"].*:$", re.DOTALL)


ITEM_RE = _build_item_pattern()
TITLE_RE = _build_title_pattern()


def glyph_status(token: str) -> Status:
    """Status for a matched glyph; unlisted glyphs count as pending."""
    return GLYPH_STATUS.get(token, Status.PENDING)
