"""
gridsheet - lays out labeled blocks on a fixed-width printable grid.

A sheet is described in JSON as an ordered list of blocks (literal strings,
alphabet and digit grids, key ids). The layout engine packs them greedily
into row groups no wider than the table, and the renderers turn the result
into an HTML table or a PDF.

Quick Start:
    from gridsheet import layout_file, render_to_html

    sheet = layout_file("sheet.json")
    for placement in sheet.placements():
        print(placement.describe())

    render_to_html("sheet.json", "sheet.html")
"""

from .version import __version__, __version_info__

from .exceptions import (
    GridSheetError,
    ParsingError,
    GeometryError,
    LayoutError,
    RenderingError,
    CompilationError,
)

from .engine import (
    Block,
    BlockSpec,
    ContentKind,
    LayoutValidator,
    Placement,
    RowGroup,
    Sheet,
    SheetLayoutEngine,
    SheetTitle,
)
from .parser import SheetDocument, SheetParser, load_sheet
from .renderers import GridRenderer
from .api import layout_document, layout_file, render_to_html, render_to_pdf

__all__ = [
    # Version
    "__version__",
    "__version_info__",

    # High-level API
    "layout_document",
    "layout_file",
    "render_to_html",
    "render_to_pdf",

    # Layout engine
    "Block",
    "BlockSpec",
    "ContentKind",
    "LayoutValidator",
    "Placement",
    "RowGroup",
    "Sheet",
    "SheetLayoutEngine",
    "SheetTitle",
    "GridRenderer",

    # Input
    "SheetDocument",
    "SheetParser",
    "load_sheet",

    # Exceptions
    "GridSheetError",
    "ParsingError",
    "GeometryError",
    "LayoutError",
    "RenderingError",
    "CompilationError",
]


def main():
    """CLI entry point."""
    from .cli import main as cli_main
    return cli_main()
