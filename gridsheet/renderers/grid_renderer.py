"""
Grid renderer - turns a laid-out Sheet into rows of cell instructions.

Every row group is walked row by row and, inside a row, column by column.
A column either contributes the header or a data row of the block covering
that grid row, or a blank filler when its blocks end above the row.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Iterator, List

from ..engine.blocks import (
    GRID10_DIGITS,
    GRID36_ALPHABET,
    KEYID_PREFIX,
    KEYID_PREFIX_SPAN,
    Block,
    ContentKind,
)
from ..engine.render_instructions import (
    BlankCell,
    DataCell,
    HeaderCell,
    PositionedCell,
    RenderCell,
    RenderRow,
)
from ..engine.row_group import Column
from ..engine.sheet_layout import Sheet
from ..exceptions import RenderingError

logger = logging.getLogger(__name__)

GRID36_PERIOD = 5


def _blank(colspan: int) -> List[RenderCell]:
    return [BlankCell(colspan)] if colspan > 0 else []


def _characters(text: str) -> List[RenderCell]:
    return [DataCell(char) for char in text]


class GridRenderer:
    """Produces :class:`RenderRow` objects for a :class:`Sheet`."""

    def __init__(self, sheet: Sheet) -> None:
        self.sheet = sheet
        self._data_rows: Dict[ContentKind, Callable[[Block, int], List[RenderCell]]] = {
            ContentKind.LITERAL: self._literal_row,
            ContentKind.GRID10: self._grid10_row,
            ContentKind.GRID36: self._grid36_row,
            ContentKind.KEYID: self._keyid_row,
            ContentKind.KEYID_COMPACT: self._keyid_compact_row,
        }

    def rows(self) -> Iterator[RenderRow]:
        for group_index, group in enumerate(self.sheet.groups):
            for offset in range(group.height):
                row = RenderRow(group_index=group_index, row_offset=offset)
                for column in group.columns:
                    row.cells.extend(self._column_cells(column, offset))
                row.cells.extend(_blank(self.sheet.table_width - group.width))
                yield row

    def render(self) -> List[RenderRow]:
        rows = list(self.rows())
        logger.debug("Rendered %d grid rows for %d row groups", len(rows), len(self.sheet.groups))
        return rows

    # ------------------------------------------------------------------
    # Column cells
    # ------------------------------------------------------------------
    def _column_cells(self, column: Column, row: int) -> List[RenderCell]:
        located = column.locate(row)
        if located is None:
            return _blank(column.width)
        block, block_row = located

        cells = _blank(block.margin_left)
        if block_row == 0:
            cells.append(HeaderCell(block.content_width, block.header))
        else:
            cells.extend(self._data_rows[block.kind](block, block_row))
        cells.extend(_blank(block.margin_right))
        cells.extend(_blank(column.width - block.width))
        return cells

    # ------------------------------------------------------------------
    # Data rows per content kind
    # ------------------------------------------------------------------
    def _literal_row(self, block: Block, block_row: int) -> List[RenderCell]:
        if block_row != 1:
            raise RenderingError(
                f"literal block '{block.key}' has no data row {block_row}",
                details=f"height={block.height}",
            )
        return _characters(block.text)

    def _grid10_row(self, block: Block, block_row: int) -> List[RenderCell]:
        return _characters(GRID10_DIGITS)

    def _grid36_row(self, block: Block, block_row: int) -> List[RenderCell]:
        if (block_row - 1) % GRID36_PERIOD < GRID36_PERIOD - 1:
            return _characters(GRID36_ALPHABET)
        return [DataCell(GRID36_ALPHABET[0])] + _blank(len(GRID36_ALPHABET) - 1)

    def _keyid_row(self, block: Block, block_row: int) -> List[RenderCell]:
        if block_row != 1:
            raise RenderingError(f"key id block '{block.key}' has no data row {block_row}")
        return [DataCell(KEYID_PREFIX, colspan=KEYID_PREFIX_SPAN)] + _characters(self._hex(block))

    def _keyid_compact_row(self, block: Block, block_row: int) -> List[RenderCell]:
        digits = self._hex(block)
        half = len(digits) // 2
        if block_row == 1:
            prefix = DataCell(KEYID_PREFIX, colspan=KEYID_PREFIX_SPAN, rowspan=2)
            return [prefix] + _characters(digits[:half])
        if block_row == 2:
            return _characters(digits[half:])
        raise RenderingError(f"compact key id block '{block.key}' has no data row {block_row}")

    @staticmethod
    def _hex(block: Block) -> str:
        if block.keyid_hex16 is None:
            raise RenderingError(f"key id block '{block.key}' carries no key id")
        return block.keyid_hex16


def position_cells(rows: Iterable[RenderRow]) -> Iterator[PositionedCell]:
    """Resolve cells to grid coordinates the way an HTML table does.

    Positions covered by a row-spanning cell from an earlier row are skipped
    when placing the cells of later rows.
    """
    covered: Dict[int, int] = {}
    for row_index, row in enumerate(rows):
        column = 0
        for cell in row.cells:
            while covered.get(column, 0) > 0:
                column += 1
            yield PositionedCell(row=row_index, column=column, cell=cell)
            if cell.rowspan > 1:
                for spanned in range(column, column + cell.colspan):
                    covered[spanned] = cell.rowspan
            column += cell.colspan
        covered = {col: left - 1 for col, left in covered.items() if left > 1}
