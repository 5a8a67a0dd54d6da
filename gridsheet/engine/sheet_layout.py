"""
Sheet layout driver.

Feeds blocks, in input order, to the open RowGroup. When a block does not
fit, the driver first tries to make room by compacting a full key-id block
sitting alone in the last column; if that does not help either, the group is
closed and a new one is started.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..exceptions import GeometryError, LayoutError
from .blocks import Block, ContentKind
from .row_group import RowGroup

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SheetTitle:
    """Title line printed above the grid."""

    left: str = ""
    right: str = ""


@dataclass(frozen=True, slots=True)
class Placement:
    """Final position of one block, for diagnostics."""

    key: str
    header: str
    content: str
    group_index: int
    group_top: int
    column_left: int
    top: int
    width: int
    height: int
    compacted: bool = False

    def describe(self) -> str:
        line = (
            f"{self.key}: header='{self.header}' data='{self.content}' "
            f"top={self.top} left={self.column_left} width={self.width} height={self.height}"
        )
        if self.compacted:
            line += " compacted"
        return line


@dataclass(frozen=True, slots=True)
class Sheet:
    """Finished layout: ordered row groups inside a fixed table width.

    The groups are sealed on construction and accept no further blocks.
    """

    table_width: int
    groups: Tuple[RowGroup, ...] = ()
    title: Optional[SheetTitle] = None

    def __post_init__(self) -> None:
        for group in self.groups:
            group.seal()

    @property
    def height(self) -> int:
        return sum(group.height for group in self.groups)

    @property
    def blocks(self) -> List[Block]:
        return [block for group in self.groups for block in group.blocks]

    def placements(self) -> List[Placement]:
        placements: List[Placement] = []
        group_top = 0
        for group_index, group in enumerate(self.groups):
            column_left = 0
            for column in group.columns:
                for block, offset in column.block_offsets():
                    placements.append(
                        Placement(
                            key=block.key,
                            header=block.header,
                            content=block.text,
                            group_index=group_index,
                            group_top=group_top,
                            column_left=column_left,
                            top=group_top + offset,
                            width=block.width,
                            height=block.height,
                            compacted=block.compacted,
                        )
                    )
                column_left += column.width
            group_top += group.height
        return placements


def attempt_compact(group: RowGroup, block: Block) -> Optional[RowGroup]:
    """Try to fit ``block`` by compacting the key id in the last column.

    The last column must hold a single full key-id block that defines the
    column width. The group is rebuilt from scratch with that block replaced
    by its compact variant, followed by ``block``. Returns the new group, or
    None; ``group`` itself is never modified.
    """
    if group.is_empty or group.last_keyid_index != group.block_count - 1:
        return None
    column = group.last_column
    if len(column.blocks) != 1:
        return None
    keyid = column.blocks[0]
    if keyid.kind is not ContentKind.KEYID or column.width != keyid.width:
        return None
    compacted = keyid.compact()
    if compacted is None:
        return None
    return RowGroup.pack(group.table_width, group.blocks[:-1] + [compacted, block])


class SheetLayoutEngine:
    """Lays out a block sequence into row groups of a fixed table width."""

    def __init__(self, table_width: int, title: Optional[SheetTitle] = None) -> None:
        if table_width <= 0:
            raise GeometryError(f"table width must be positive, got {table_width}")
        self.table_width = table_width
        self.title = title

    def layout(self, blocks: Sequence[Block]) -> Sheet:
        groups: List[RowGroup] = []
        current = RowGroup(self.table_width)

        for block in blocks:
            if block.width > self.table_width:
                raise GeometryError(
                    f"block '{block.key}' has width {block.width} > table width {self.table_width}"
                )

            if current.add(block):
                continue

            repaired = attempt_compact(current, block)
            if repaired is not None:
                logger.debug("Compacted key id to fit block '%s' (group height %d)", block.key, repaired.height)
                current = repaired
                continue

            if not current.is_empty:
                logger.debug("Closing %r before block '%s'", current, block.key)
                groups.append(current)
            current = RowGroup(self.table_width)
            if not current.add(block):
                raise LayoutError(
                    f"block '{block.key}' does not fit into an empty row group",
                    details=f"width={block.width} height={block.height} table_width={self.table_width}",
                )

        if not current.is_empty:
            groups.append(current)

        sheet = Sheet(table_width=self.table_width, groups=tuple(groups), title=self.title)
        if logger.isEnabledFor(logging.INFO):
            for placement in sheet.placements():
                logger.info("%s", placement.describe())
        return sheet
