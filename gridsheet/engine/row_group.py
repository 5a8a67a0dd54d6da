"""
Column and RowGroup - the greedy packer.

A RowGroup is a horizontal run of columns that all share the group height.
Blocks are stacked top-down inside the last column until it is full, then a
new column is opened to its right. A block taller than the group rebuilds the
whole group at the new height; the rebuild happens on a scratch group and is
only swapped in when every block fits again.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from ..exceptions import LayoutError
from .blocks import Block


@dataclass(slots=True)
class Column:
    """Vertical stack of blocks inside a RowGroup."""

    blocks: List[Block] = field(default_factory=list)
    width: int = 0
    height: int = 0

    def append(self, block: Block) -> None:
        self.blocks.append(block)
        self.width = max(self.width, block.width)
        self.height += block.height

    def locate(self, row: int) -> Optional[Tuple[Block, int]]:
        """Return the block owning ``row`` and the block-local row index."""
        top = 0
        for block in self.blocks:
            if top <= row < top + block.height:
                return block, row - top
            top += block.height
        return None

    def block_offsets(self) -> List[Tuple[Block, int]]:
        """Blocks of the column with their row offset inside the group."""
        offsets = []
        top = 0
        for block in self.blocks:
            offsets.append((block, top))
            top += block.height
        return offsets


class RowGroup:
    """Columns sharing one height, bounded by the table width."""

    def __init__(self, table_width: int, height: int = 0) -> None:
        self.table_width = table_width
        self.height = height
        self.columns: List[Column] = []
        # index into ``blocks`` of the most recently placed key-id block
        self.last_keyid_index: Optional[int] = None
        self.sealed = False

    def __repr__(self) -> str:
        return (
            f"RowGroup(height={self.height}, width={self.width}, "
            f"columns={len(self.columns)}, blocks={self.block_count})"
        )

    @property
    def width(self) -> int:
        return sum(column.width for column in self.columns)

    @property
    def blocks(self) -> List[Block]:
        """All blocks in placement order: left-to-right, top-to-bottom."""
        return [block for column in self.columns for block in column.blocks]

    @property
    def block_count(self) -> int:
        return sum(len(column.blocks) for column in self.columns)

    @property
    def is_empty(self) -> bool:
        return not self.columns

    @property
    def last_column(self) -> Column:
        if not self.columns:
            raise LayoutError("RowGroup has no columns")
        return self.columns[-1]

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def seal(self) -> None:
        """Reject further placement; called once the group is part of a Sheet."""
        self.sealed = True

    def add(self, block: Block) -> bool:
        """Place ``block`` in this group.

        Returns False and leaves the group untouched when the block cannot
        be placed. Raises LayoutError if the group is sealed.
        """
        if self.sealed:
            raise LayoutError(f"cannot add block '{block.key}' to a sealed row group")
        if block.height > self.height:
            scratch = self.rebuilt(block.height, self.blocks + [block])
            if scratch is None:
                return False
            self.height = scratch.height
            self.columns = scratch.columns
            self.last_keyid_index = scratch.last_keyid_index
            return True
        return self._place(block)

    def _place(self, block: Block) -> bool:
        """Fixed-height placement: last column first, then a new column."""
        if block.height > self.height:
            return False

        if self.columns:
            column = self.columns[-1]
            widened = self.width - column.width + max(column.width, block.width)
            if column.height + block.height <= self.height and widened <= self.table_width:
                column.append(block)
                self._note_placed(block)
                return True

        if self.width + block.width <= self.table_width:
            column = Column()
            column.append(block)
            self.columns.append(column)
            self._note_placed(block)
            return True

        return False

    def _note_placed(self, block: Block) -> None:
        if block.is_keyid:
            self.last_keyid_index = self.block_count - 1

    def rebuilt(self, height: int, blocks: Iterable[Block]) -> Optional["RowGroup"]:
        """Place ``blocks`` into a fresh group of fixed ``height``.

        Returns None if any block does not fit.
        """
        scratch = RowGroup(self.table_width, height)
        for block in blocks:
            if not scratch._place(block):
                return None
        return scratch

    @classmethod
    def pack(cls, table_width: int, blocks: Iterable[Block]) -> Optional["RowGroup"]:
        """Add ``blocks`` one by one to an empty group; None on first failure."""
        group = cls(table_width)
        for block in blocks:
            if not group.add(block):
                return None
        return group
