"""Tests for the command-line interface."""

import json

import pytest

from gridsheet.cli import create_parser, main, resolve_input


class TestParser:
    """Argument parsing."""

    def test_render_defaults(self):
        args = create_parser().parse_args(["render", "sheet.json"])

        assert args.command == "render"
        assert args.format == "html"
        assert args.output is None
        assert not args.no_title

    def test_invalid_format(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["render", "sheet.json", "--format", "docx"])


def test_resolve_input_adds_json_suffix(sample_sheet_path):
    assert resolve_input(str(sample_sheet_path.with_suffix(""))) == sample_sheet_path


def test_resolve_input_keeps_unknown_name(temp_dir):
    missing = temp_dir / "missing"

    assert resolve_input(str(missing)) == missing


def test_render_html_default_output(sample_sheet_path, capsys):
    assert main(["-q", "render", str(sample_sheet_path)]) == 0

    output = sample_sheet_path.with_suffix(".html")
    assert output.exists()
    assert f"Saved: {output}" in capsys.readouterr().out


def test_render_pdf_from_basename(sample_sheet_path, temp_dir, capsys):
    output = temp_dir / "out" / "sheet.pdf"

    code = main(["-q", "render", str(sample_sheet_path.with_suffix("")), "-f", "pdf", "-o", str(output)])

    assert code == 0
    assert output.read_bytes().startswith(b"%PDF")
    assert "(1 pages)" in capsys.readouterr().out


def test_render_without_title(sample_sheet_path, temp_dir):
    output = temp_dir / "plain.html"

    main(["-q", "render", str(sample_sheet_path), "-o", str(output), "--no-title"])

    assert 'class="title"' not in output.read_text(encoding="utf-8")


def test_layout_json(sample_sheet_path, capsys):
    assert main(["-q", "layout", str(sample_sheet_path), "--json"]) == 0

    info = json.loads(capsys.readouterr().out)
    assert info["table_width"] == 80
    assert info["height"] == 30
    assert info["title"] == {"left": "Recovery sheet", "right": "Keep offline"}
    assert [p["key"] for p in info["placements"]] == ["owner", "keyid", "words", "pin", "note"]


def test_layout_table(sample_sheet_path, capsys):
    assert main(["-q", "layout", str(sample_sheet_path)]) == 0

    out = capsys.readouterr().out
    assert "title.left: Recovery sheet" in out
    assert "table.width: 80" in out
    assert "owner" in out


def test_missing_input_reports_error(temp_dir, capsys):
    code = main(["-q", "layout", str(temp_dir / "missing.json")])

    assert code == 1
    assert "Error: Expected input file" in capsys.readouterr().err


def test_version(capsys):
    assert main(["version"]) == 0

    assert capsys.readouterr().out.strip() == "gridsheet v1.0.0"


def test_no_command_prints_help(capsys):
    assert main([]) == 0

    assert "usage: gridsheet" in capsys.readouterr().out
