"""
Simple high-level API for gridsheet.

Usage:
    from gridsheet import layout_file, render_to_html

    sheet = layout_file("keys.json")
    render_to_html("keys.json", "keys.html")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .engine.html import HTMLCompiler, HTMLCompilerConfig
from .engine.layout_validator import LayoutValidator
from .engine.pdf import PDFCompiler, PDFCompilerConfig
from .engine.sheet_layout import Sheet, SheetLayoutEngine
from .exceptions import LayoutError
from .parser import SheetDocument, load_sheet

logger = logging.getLogger(__name__)


def layout_document(document: SheetDocument) -> Sheet:
    """Build blocks for a parsed document, lay them out and validate the result."""
    blocks = document.build_blocks()
    sheet = SheetLayoutEngine(document.table_width, title=document.title).layout(blocks)

    is_valid, errors, warnings = LayoutValidator(sheet).validate()
    for warning in warnings:
        logger.warning(warning)
    if not is_valid:
        raise LayoutError("Layout failed validation", details="; ".join(errors))

    logger.debug("Laid out %d blocks in %d row groups", len(blocks), len(sheet.groups))
    return sheet


def layout_file(path: Union[str, Path]) -> Sheet:
    """Load a JSON sheet description and lay it out."""
    return layout_document(load_sheet(path))


def render_to_html(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    config: Optional[HTMLCompilerConfig] = None,
) -> Path:
    """Lays out a JSON sheet and writes it as HTML (convenience function)."""
    sheet = layout_file(input_path)
    return HTMLCompiler(config).compile(sheet, output_path=output_path)


def render_to_pdf(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    config: Optional[PDFCompilerConfig] = None,
) -> Path:
    """Lays out a JSON sheet and writes it as PDF (convenience function)."""
    sheet = layout_file(input_path)
    return PDFCompiler(config).compile(sheet, output_path=output_path)
