"""Tests for HTML compiler."""

import re

import pytest

from gridsheet.engine.blocks import ContentKind
from gridsheet.engine.html import HTMLCompiler, HTMLCompilerConfig
from gridsheet.engine.sheet_layout import SheetLayoutEngine, SheetTitle
from gridsheet.exceptions import CompilationError


def row_width(row_markup):
    """Sum of colspans of the cells opened in one ``<tr>`` line."""
    width = 0
    for match in re.finditer(r"<t[hd]([^>]*)>", row_markup):
        span = re.search(r'colspan="(\d+)"', match.group(1))
        width += int(span.group(1)) if span else 1
    return width


@pytest.fixture
def small_sheet(make_block):
    return SheetLayoutEngine(20, title=SheetTitle("Left", "Right")).layout([
        make_block("name", text="A<B", header="Name & co", table_width=20),
        make_block("pin", ContentKind.GRID10, table_width=20),
    ])


class TestHTMLCompiler:
    """Test suite for HTMLCompiler."""

    def test_compile_writes_file(self, small_sheet, temp_dir):
        output = temp_dir / "nested" / "sheet.html"

        result = HTMLCompiler().compile(small_sheet, output_path=output)

        assert result == output
        assert output.exists()
        assert output.read_text(encoding="utf-8").startswith("<!DOCTYPE html>")

    def test_output_path_from_constructor(self, small_sheet, temp_dir):
        output = temp_dir / "from_init.html"

        assert HTMLCompiler(output_path=output).compile(small_sheet) == output

    def test_colgroup_matches_table_width(self, small_sheet):
        lines = HTMLCompiler().table_lines(small_sheet)

        assert lines.count("<col />") == 20

    def test_title_row(self, small_sheet):
        lines = HTMLCompiler().table_lines(small_sheet)

        title = next(line for line in lines if 'class="title"' in line)
        assert '<td class="title-left" colspan="10">Left</td>' in title
        assert '<td class="title-right" colspan="10">Right</td>' in title

    def test_title_can_be_hidden(self, small_sheet):
        lines = HTMLCompiler(HTMLCompilerConfig(show_title=False)).table_lines(small_sheet)

        assert not any('class="title"' in line for line in lines)

    def test_title_in_head(self, small_sheet):
        html = HTMLCompiler().compile_to_string(small_sheet)

        assert "<title>Left Right</title>" in html

    def test_config_title_without_sheet_title(self, make_block):
        sheet = SheetLayoutEngine(10).layout([make_block("a", text="A", table_width=10)])

        html = HTMLCompiler(HTMLCompilerConfig(title="Backup")).compile_to_string(sheet)

        assert "<title>Backup</title>" in html
        assert 'class="title"' not in html

    def test_every_row_spans_the_table(self, small_sheet):
        lines = HTMLCompiler(HTMLCompilerConfig(show_title=False)).table_lines(small_sheet)
        rows = [line for line in lines if line.startswith("<tr>")]

        assert len(rows) == small_sheet.height
        assert all(row_width(row) == 20 for row in rows)

    def test_text_is_escaped(self, small_sheet):
        html = HTMLCompiler().compile_to_string(small_sheet)

        assert "<th>Name &amp; co</th>" not in html
        assert '<th colspan="3">Name &amp; co</th>' in html
        assert "<td>&lt;</td>" in html

    def test_header_blank_and_data_cells(self, small_sheet):
        rows = [line for line in HTMLCompiler().table_lines(small_sheet) if line.startswith("<tr>")]

        assert rows[0] == (
            '<tr><th colspan="3">Name &amp; co</th><th colspan="10">PIN</th>'
            '<td class="blank" colspan="7"></td></tr>'
        )
        assert rows[1].startswith("<tr><td>A</td><td>&lt;</td><td>B</td><td>0</td>")

    def test_compact_keyid_rowspan(self, make_block):
        sheet = SheetLayoutEngine(10).layout([
            make_block("keyid3", ContentKind.KEYID_COMPACT, table_width=10),
        ])

        html = HTMLCompiler().compile_to_string(sheet)

        assert '<td colspan="2" rowspan="2">0 x</td>' in html

    def test_stylesheet_can_be_disabled(self, small_sheet):
        with_styles = HTMLCompiler().compile_to_string(small_sheet)
        without = HTMLCompiler(HTMLCompilerConfig(embed_default_styles=False)).compile_to_string(small_sheet)

        assert "<style>" in with_styles
        assert "width: 3.5mm;" in with_styles
        assert "<style>" not in without

    def test_write_failure_is_compilation_error(self, small_sheet, temp_dir):
        blocker = temp_dir / "file"
        blocker.write_text("x", encoding="utf-8")

        with pytest.raises(CompilationError):
            HTMLCompiler().compile(small_sheet, output_path=blocker / "sheet.html")

    def test_single_column_title_keeps_both_texts(self, make_block):
        sheet = SheetLayoutEngine(1, title=SheetTitle("L", "R")).layout([make_block("a", text="A", table_width=1)])

        lines = HTMLCompiler().table_lines(sheet)

        title = next(line for line in lines if 'class="title"' in line)
        assert title == '<tr class="title"><td class="title-left">L R</td></tr>'
