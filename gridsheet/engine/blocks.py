"""
Block catalog.

A block is one labeled unit of the sheet: a header row followed by a fixed
number of data rows. Geometry is derived from the content kind only; margins
add blank columns on both sides of the content and count towards the width
used for packing.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

from ..exceptions import GeometryError

GRID36_ALPHABET = "-ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
GRID10_DIGITS = "0123456789"
KEYID_PREFIX = "0 x"
KEYID_PREFIX_SPAN = 2
KEYID_HEX_LENGTH = 16
KEYID_COMPACT_SHRINK = 8
LITERAL_HEIGHT = 2


class ContentKind(Enum):
    """Content kinds understood by the layout engine and the renderer."""

    LITERAL = "literal"
    GRID10 = "grid10"
    GRID36 = "grid36"
    KEYID = "keyid"
    KEYID_COMPACT = "keyid3"

    @property
    def is_keyid(self) -> bool:
        return self in (ContentKind.KEYID, ContentKind.KEYID_COMPACT)


# (content_width, content_height) for kinds whose size does not depend on text
_FIXED_GEOMETRY = {
    ContentKind.GRID36: (len(GRID36_ALPHABET), 30),
    ContentKind.GRID10: (len(GRID10_DIGITS), 9),
    ContentKind.KEYID: (KEYID_PREFIX_SPAN + KEYID_HEX_LENGTH, 2),
    ContentKind.KEYID_COMPACT: (KEYID_PREFIX_SPAN + KEYID_HEX_LENGTH // 2, 3),
}


def content_geometry(kind: ContentKind, text: str = "") -> Tuple[int, int]:
    """Return ``(content_width, content_height)`` for a content kind."""
    if kind is ContentKind.LITERAL:
        return len(text), LITERAL_HEIGHT
    return _FIXED_GEOMETRY[kind]


@dataclass(frozen=True, slots=True)
class BlockSpec:
    """Validated, typed block descriptor handed to the catalog by the parser."""

    key: str
    header: str
    kind: ContentKind
    text: str
    margin_left: int = 0
    margin_right: int = 0
    keyid_hex16: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Block:
    """Single block with its derived geometry.

    Blocks are values: the only change a block ever goes through is keyid
    compaction, which produces a new ``Block`` via :meth:`compact`.
    """

    key: str
    header: str
    kind: ContentKind
    text: str
    content_width: int
    content_height: int
    margin_left: int = 0
    margin_right: int = 0
    keyid_hex16: Optional[str] = None
    compacted: bool = False

    @property
    def width(self) -> int:
        return self.content_width + self.margin_left + self.margin_right

    @property
    def height(self) -> int:
        return self.content_height

    @property
    def is_keyid(self) -> bool:
        return self.kind.is_keyid

    def compact(self) -> Optional["Block"]:
        """Return the compact two-line variant of a full key-id block.

        Returns None when the block is not a full key id or when shrinking
        would leave less room than the ``0 x`` prefix needs.
        """
        if self.kind is not ContentKind.KEYID:
            return None
        new_width = self.content_width - KEYID_COMPACT_SHRINK
        if new_width < KEYID_PREFIX_SPAN:
            return None
        return replace(
            self,
            kind=ContentKind.KEYID_COMPACT,
            content_width=new_width,
            content_height=_FIXED_GEOMETRY[ContentKind.KEYID_COMPACT][1],
            compacted=True,
        )


def build_block(spec: BlockSpec, table_width: int) -> Block:
    """Create a block from its descriptor, enforcing ``width <= table_width``."""
    content_width, content_height = content_geometry(spec.kind, spec.text)
    block = Block(
        key=spec.key,
        header=spec.header,
        kind=spec.kind,
        text=spec.text,
        content_width=content_width,
        content_height=content_height,
        margin_left=spec.margin_left,
        margin_right=spec.margin_right,
        keyid_hex16=spec.keyid_hex16,
    )
    if block.width > table_width:
        raise GeometryError(
            f"block '{spec.key}' has width {block.width} > table width {table_width}"
        )
    return block
