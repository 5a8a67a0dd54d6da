"""

PDFCompiler - sheet renderer to PDF
-----------------------------------
Draws the same cell instructions the HTML compiler emits as boxes on
ReportLab pages. Pages break between row groups; a group taller than a page
is cut at the page limit and its row-spanning cells continue on the next
page. The title is repeated at the top of every page.

"""

from __future__ import annotations

import logging
from bisect import bisect_right
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from reportlab.lib.pagesizes import A4, landscape, letter
from reportlab.pdfgen import canvas

from ...exceptions import CompilationError
from ...renderers.grid_renderer import GridRenderer, position_cells
from ..render_instructions import BlankCell, HeaderCell, PositionedCell
from ..sheet_layout import Sheet

logger = logging.getLogger(__name__)

PAGE_SIZES: Dict[str, Tuple[float, float]] = {
    "A4": A4,
    "letter": letter,
}


@dataclass(frozen=True)
class PDFCompilerConfig:
    """
    PDF compiler configuration.

    Attributes:
        output_path: Default output file path.
        page_size: Name of the page size (``"A4"`` or ``"letter"``).
        landscape: Whether pages are rotated to landscape.
        page_margin: Page margin in points, on every side.
        cell_height: Height of one grid row in points.
        font_name: Standard PDF font used for all text.
        font_size: Font size of cell text in points.
        title_font_size: Font size of the title line in points.
    """

    output_path: Path = Path("output.pdf")
    page_size: str = "A4"
    landscape: bool = True
    page_margin: float = 28.0
    cell_height: float = 14.0
    font_name: str = "Courier"
    font_size: float = 7.0
    title_font_size: float = 11.0


@dataclass
class PDFPage:
    """Grid rows ``first_row`` .. ``first_row + row_count - 1`` and their cells."""

    first_row: int
    row_count: int
    cells: List[PositionedCell] = field(default_factory=list)


class PDFCompiler:
    """Draws a Sheet as a grid of boxes, one grid row per cell height."""

    def __init__(
        self,
        config: Optional[PDFCompilerConfig] = None,
        *,
        output_path: Optional[Union[str, Path]] = None,
    ) -> None:
        self.config = config or PDFCompilerConfig()
        if self.config.page_size not in PAGE_SIZES:
            raise CompilationError(
                f"Unknown page size '{self.config.page_size}'",
                details=f"expected one of {', '.join(sorted(PAGE_SIZES))}",
            )
        self.output_path = Path(output_path) if output_path else self.config.output_path
        self.pages_written = 0

    @property
    def page_size(self) -> Tuple[float, float]:
        size = PAGE_SIZES[self.config.page_size]
        return landscape(size) if self.config.landscape else size

    @property
    def title_height(self) -> float:
        return self.config.title_font_size * 2

    def rows_per_page(self) -> int:
        _, page_height = self.page_size
        usable = page_height - 2 * self.config.page_margin - self.title_height
        rows = int(usable // self.config.cell_height)
        if rows < 1:
            raise CompilationError("Page is too small for a single grid row")
        return rows

    def page_starts(self, sheet: Sheet) -> List[int]:
        """
        First grid row of every page.

        A page ends before the row group that would overflow it. A group is
        as tall as its tallest block, so a group taller than a page cannot be
        cut between blocks and is cut at the page limit instead.
        """
        per_page = self.rows_per_page()
        starts = [0]
        group_top = 0
        for group in sheet.groups:
            group_end = group_top + group.height
            if group_end - starts[-1] > per_page and group_top > starts[-1]:
                starts.append(group_top)
            while group_end - starts[-1] > per_page:
                starts.append(starts[-1] + per_page)
            group_top = group_end
        return starts

    def paginate(self, sheet: Sheet) -> List[PDFPage]:
        """
        Split positioned cells into pages.

        A row-spanning cell cut by a page break is continued at the top of the
        next page with the remaining rowspan.
        """
        starts = self.page_starts(sheet)
        ends = starts[1:] + [max(sheet.height, starts[-1])]
        pages = [PDFPage(first_row=start, row_count=end - start) for start, end in zip(starts, ends)]
        for positioned in position_cells(GridRenderer(sheet).rows()):
            index = bisect_right(starts, positioned.row) - 1
            pages[index].cells.append(positioned)
            last_row = positioned.row + positioned.cell.rowspan
            while index + 1 < len(pages) and last_row > pages[index + 1].first_row:
                index += 1
                page = pages[index]
                page.cells.append(
                    PositionedCell(
                        row=page.first_row,
                        column=positioned.column,
                        cell=replace(positioned.cell, rowspan=last_row - page.first_row),
                    )
                )
        return pages

    def compile(
        self,
        sheet: Sheet,
        *,
        output_path: Optional[Union[str, Path]] = None,
    ) -> Path:
        """
        Write the PDF for ``sheet`` and return its path.
        """
        target_path = Path(output_path) if output_path else self.output_path
        pages = self.paginate(sheet)
        try:
            target_path.parent.mkdir(parents=True, exist_ok=True)
            pdf = canvas.Canvas(str(target_path), pagesize=self.page_size)
            for page in pages:
                self._draw_page(pdf, sheet, page)
                pdf.showPage()
            pdf.save()
        except OSError as exc:
            raise CompilationError(f"Failed to write PDF to {target_path}", details=str(exc)) from exc
        self.pages_written = len(pages)
        logger.info("Sheet exported to PDF: %s (%d pages)", target_path, self.pages_written)
        return target_path

    # ------------------------------------------------------------------
    # Drawing helpers
    # ------------------------------------------------------------------
    def _cell_width(self, sheet: Sheet) -> float:
        page_width, _ = self.page_size
        return (page_width - 2 * self.config.page_margin) / sheet.table_width

    def _draw_page(self, pdf: canvas.Canvas, sheet: Sheet, page: PDFPage) -> None:
        page_width, page_height = self.page_size
        margin = self.config.page_margin
        grid_top = page_height - margin - self.title_height
        cell_width = self._cell_width(sheet)
        cell_height = self.config.cell_height

        if sheet.title is not None:
            pdf.setFont(self.config.font_name, self.config.title_font_size)
            baseline = page_height - margin - self.config.title_font_size
            pdf.drawString(margin, baseline, sheet.title.left)
            pdf.drawRightString(page_width - margin, baseline, sheet.title.right)

        pdf.setFont(self.config.font_name, self.config.font_size)
        pdf.setLineWidth(0.5)
        for positioned in page.cells:
            cell = positioned.cell
            if isinstance(cell, BlankCell):
                continue
            local_row = positioned.row - page.first_row
            rows_spanned = min(cell.rowspan, page.row_count - local_row)
            x = margin + positioned.column * cell_width
            width = cell.colspan * cell_width
            height = rows_spanned * cell_height
            y = grid_top - local_row * cell_height - height

            if isinstance(cell, HeaderCell):
                pdf.setFillGray(0.88)
                pdf.rect(x, y, width, height, stroke=1, fill=1)
                pdf.setFillGray(0)
            else:
                pdf.rect(x, y, width, height, stroke=1, fill=0)
            text_y = y + (height - self.config.font_size) / 2 + 1
            pdf.drawCentredString(x + width / 2, text_y, cell.text)
