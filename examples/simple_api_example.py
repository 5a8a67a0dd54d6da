#!/usr/bin/env python3
"""
Example use of the high-level API.

Lays out examples/sample_sheet.json and writes it as HTML and PDF.
"""

from pathlib import Path

from gridsheet import layout_file
from gridsheet.engine.html import HTMLCompiler
from gridsheet.engine.pdf import PDFCompiler
from gridsheet.utils import configure_logging, print_placements


def main():
    """Example of the simple API."""
    configure_logging("INFO")
    source = Path(__file__).with_name("sample_sheet.json")

    # 1. Lay out the sheet
    print("📄 Laying out sheet...")
    sheet = layout_file(source)
    print(f"   Row groups: {len(sheet.groups)}")
    print(f"   Grid rows: {sheet.height}")
    print_placements(sheet)

    # 2. Render to HTML
    print("🌐 Rendering HTML...")
    html_path = HTMLCompiler().compile(sheet, output_path="output/sample_sheet.html")
    print(f"   ✅ HTML saved: {html_path}")

    # 3. Render to PDF
    print("🖨️  Rendering PDF...")
    pdf_path = PDFCompiler().compile(sheet, output_path="output/sample_sheet.pdf")
    print(f"   ✅ PDF saved: {pdf_path}")


if __name__ == "__main__":
    main()
