"""
Layout engine: block catalog, row-group packer and sheet layout driver.

HTML and PDF compilers live in the ``html`` and ``pdf`` subpackages and are
imported from there.
"""

from .blocks import Block, BlockSpec, ContentKind, build_block, content_geometry
from .layout_validator import LayoutValidator
from .render_instructions import BlankCell, DataCell, HeaderCell, PositionedCell, RenderRow
from .row_group import Column, RowGroup
from .sheet_layout import Placement, Sheet, SheetLayoutEngine, SheetTitle, attempt_compact

__all__ = [
    "Block",
    "BlockSpec",
    "ContentKind",
    "build_block",
    "content_geometry",
    "LayoutValidator",
    "BlankCell",
    "DataCell",
    "HeaderCell",
    "PositionedCell",
    "RenderRow",
    "Column",
    "RowGroup",
    "Placement",
    "Sheet",
    "SheetLayoutEngine",
    "SheetTitle",
    "attempt_compact",
]
