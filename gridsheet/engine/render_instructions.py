"""

Standardized cell instructions produced by the grid renderer.

Emitters (HTML, PDF) consume rows of these instructions and never look at
blocks or row groups, so a new tabular output format only needs to know how
to draw three kinds of cell.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union

###############################################################################
# Cells
###############################################################################


@dataclass(frozen=True, slots=True)
class HeaderCell:
    """Block label spanning the block content width."""

    colspan: int
    text: str
    rowspan: int = 1


@dataclass(frozen=True, slots=True)
class DataCell:
    """Single piece of block content, usually one character."""

    text: str
    colspan: int = 1
    rowspan: int = 1


@dataclass(frozen=True, slots=True)
class BlankCell:
    """Filler for margins, column slack and unused table width."""

    colspan: int
    rowspan: int = 1


RenderCell = Union[HeaderCell, DataCell, BlankCell]


###############################################################################
# Rows
###############################################################################


@dataclass(slots=True)
class RenderRow:
    """

    One grid row. ``group_index``/``row_offset`` locate the row inside the
    sheet; ``cells`` are ordered left to right and skip the grid positions
    still covered by a row-spanning cell from an earlier row.

    """

    group_index: int
    row_offset: int
    cells: List[RenderCell] = field(default_factory=list)

    @property
    def span(self) -> int:
        """Columns started by cells of this row (row spans from above excluded)."""
        return sum(cell.colspan for cell in self.cells)


@dataclass(frozen=True, slots=True)
class PositionedCell:
    """Cell resolved to absolute grid coordinates."""

    row: int
    column: int
    cell: RenderCell
