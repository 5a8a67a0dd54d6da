"""
HTMLCompiler - renders a laid-out Sheet as a printable HTML table
-----------------------------------------------------------------

- call: ``HTMLCompiler(config).compile(sheet)``
- input: ``Sheet`` from :class:`SheetLayoutEngine`
- output: HTML file with one ``<table>`` whose grid is exactly
  ``sheet.table_width`` columns wide

The compiler only maps render instructions to tags; which cells exist and
how far they span is decided by :class:`GridRenderer`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from html import escape
from pathlib import Path
from typing import List, Optional, Union

from ...exceptions import CompilationError
from ...renderers.grid_renderer import GridRenderer
from ..render_instructions import BlankCell, DataCell, HeaderCell, RenderCell, RenderRow
from ..sheet_layout import Sheet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HTMLCompilerConfig:
    """
    Default HTML compiler configuration.

    Attributes:
        output_path: Default output file path.
        title: Document title placed in ``<head>``.
        html_lang: Value of the ``lang`` attribute of ``<html>``.
        embed_default_styles: Whether to emit the print stylesheet.
        show_title: Whether to render the sheet title as the first table row.
        cell_width_mm: Printed width of one grid column.
        cell_height_mm: Printed height of one grid row.
    """

    output_path: Path = Path("output.html")
    title: str = "Sheet"
    html_lang: str = "en"
    embed_default_styles: bool = True
    show_title: bool = True
    cell_width_mm: float = 3.5
    cell_height_mm: float = 5.0


class HTMLCompiler:
    """Maps grid rows to ``<tr>`` elements of a single fixed-layout table."""

    def __init__(
        self,
        config: Optional[HTMLCompilerConfig] = None,
        *,
        output_path: Optional[Union[str, Path]] = None,
    ) -> None:
        self.config = config or HTMLCompilerConfig()
        self.output_path = Path(output_path) if output_path else self.config.output_path

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def compile(
        self,
        sheet: Sheet,
        *,
        output_path: Optional[Union[str, Path]] = None,
    ) -> Path:
        """
        Write the HTML document for ``sheet`` and return its path.
        """
        target_path = Path(output_path) if output_path else self.output_path
        html = self.compile_to_string(sheet)
        try:
            target_path.parent.mkdir(parents=True, exist_ok=True)
            target_path.write_text(html, encoding="utf-8")
        except OSError as exc:
            raise CompilationError(f"Failed to write HTML to {target_path}", details=str(exc)) from exc
        logger.info("Sheet exported to HTML: %s", target_path)
        return target_path

    def compile_to_string(self, sheet: Sheet) -> str:
        return "\n".join(self.compile_lines(sheet)) + "\n"

    def compile_lines(self, sheet: Sheet) -> List[str]:
        """Return the document as a list of markup lines."""
        lines = [
            "<!DOCTYPE html>",
            f'<html lang="{escape(self.config.html_lang)}">',
            "<head>",
        ]
        lines.extend(self._render_head(sheet))
        lines.append("</head>")
        lines.append("<body>")
        lines.extend(self.table_lines(sheet))
        lines.append("</body>")
        lines.append("</html>")
        return lines

    def table_lines(self, sheet: Sheet) -> List[str]:
        """Return only the ``<table>`` element, one row per line."""
        lines = ['<table class="sheet">', "<colgroup>"]
        lines.extend("<col />" for _ in range(sheet.table_width))
        lines.append("</colgroup>")
        if self.config.show_title and sheet.title is not None:
            lines.append(self._render_title(sheet))
        for row in GridRenderer(sheet).rows():
            lines.append(self._render_row(row))
        lines.append("</table>")
        return lines

    # ------------------------------------------------------------------
    # Rendering helpers
    # ------------------------------------------------------------------
    def _render_head(self, sheet: Sheet) -> List[str]:
        title = self.config.title
        if sheet.title is not None and (sheet.title.left or sheet.title.right):
            title = " ".join(part for part in (sheet.title.left, sheet.title.right) if part)
        parts = ['<meta charset="utf-8" />', f"<title>{escape(title)}</title>"]
        if self.config.embed_default_styles:
            parts.append("<style>")
            parts.append(self._default_stylesheet())
            parts.append("</style>")
        return parts

    def _render_title(self, sheet: Sheet) -> str:
        left_span = sheet.table_width // 2
        right_span = sheet.table_width - left_span
        if left_span == 0:
            # single-column table: both texts share the only cell
            text = " ".join(part for part in (sheet.title.left, sheet.title.right) if part)
            return f'<tr class="title"><td class="title-left">{escape(text)}</td></tr>'
        cells = [
            f'<td class="title-left" colspan="{left_span}">{escape(sheet.title.left)}</td>',
            f'<td class="title-right" colspan="{right_span}">{escape(sheet.title.right)}</td>',
        ]
        return '<tr class="title">' + "".join(cells) + "</tr>"

    def _render_row(self, row: RenderRow) -> str:
        return "<tr>" + "".join(self._render_cell(cell) for cell in row.cells) + "</tr>"

    def _render_cell(self, cell: RenderCell) -> str:
        spans = self._span_attributes(cell)
        if isinstance(cell, HeaderCell):
            return f'<th{spans}>{escape(cell.text)}</th>'
        if isinstance(cell, DataCell):
            return f"<td{spans}>{escape(cell.text)}</td>"
        if isinstance(cell, BlankCell):
            return f'<td class="blank"{spans}></td>'
        raise CompilationError(f"Unsupported render cell {cell!r}")

    @staticmethod
    def _span_attributes(cell: RenderCell) -> str:
        attributes = ""
        if cell.colspan > 1:
            attributes += f' colspan="{cell.colspan}"'
        if cell.rowspan > 1:
            attributes += f' rowspan="{cell.rowspan}"'
        return attributes

    def _default_stylesheet(self) -> str:
        width = f"{self.config.cell_width_mm:g}mm"
        height = f"{self.config.cell_height_mm:g}mm"
        return "\n".join(
            [
                "@page {",
                "  size: landscape;",
                "  margin: 10mm;",
                "}",
                "body {",
                "  margin: 0;",
                "  font-family: 'DejaVu Sans Mono', 'Courier New', monospace;",
                "}",
                "table.sheet {",
                "  border-collapse: collapse;",
                "  table-layout: fixed;",
                "}",
                "table.sheet col {",
                f"  width: {width};",
                "}",
                "table.sheet td, table.sheet th {",
                f"  height: {height};",
                "  padding: 0;",
                "  border: 0.2mm solid #000000;",
                "  text-align: center;",
                "  font-size: 8pt;",
                "  overflow: hidden;",
                "  white-space: nowrap;",
                "}",
                "table.sheet th {",
                "  background: #e0e0e0;",
                "  font-weight: bold;",
                "}",
                "table.sheet td.blank {",
                "  border: none;",
                "}",
                "table.sheet tr.title td {",
                "  border: none;",
                "  font-size: 11pt;",
                "  font-weight: bold;",
                "}",
                "table.sheet td.title-left {",
                "  text-align: left;",
                "}",
                "table.sheet td.title-right {",
                "  text-align: right;",
                "}",
                "tr {",
                "  break-inside: avoid;",
                "}",
            ]
        )
