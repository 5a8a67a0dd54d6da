"""
Command-line interface for gridsheet.

Usage:
    gridsheet render sheet.json --format html --output sheet.html
    gridsheet render sheet --format pdf
    gridsheet layout sheet.json
    gridsheet version
"""

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

from .exceptions import GridSheetError


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gridsheet",
        description="gridsheet - lay out labeled blocks on a printable grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  gridsheet render sheet.json --format html --output out.html
  gridsheet render sheet --format pdf
  gridsheet layout sheet.json
  gridsheet version
        """,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log layout decisions (DEBUG level)"
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Render command
    render_parser = subparsers.add_parser("render", help="Render a sheet to HTML or PDF")
    render_parser.add_argument("input", help="Input JSON file, or its basename without .json")
    render_parser.add_argument(
        "-f", "--format",
        choices=["html", "pdf"],
        default="html",
        help="Output format (default: html)"
    )
    render_parser.add_argument(
        "-o", "--output",
        help="Output file path (default: input name with new extension)"
    )
    render_parser.add_argument(
        "--no-title",
        action="store_true",
        help="Do not print the title row (html format)"
    )

    # Layout command
    layout_parser = subparsers.add_parser("layout", help="Show where every block is placed")
    layout_parser.add_argument("input", help="Input JSON file, or its basename without .json")
    layout_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON"
    )

    # Version command
    subparsers.add_parser("version", help="Show version information")

    return parser


def resolve_input(name: str) -> Path:
    """Accept either a path or a basename whose ``.json`` file exists."""
    path = Path(name)
    if path.exists():
        return path
    with_suffix = Path(name + ".json")
    if with_suffix.exists():
        return with_suffix
    return path


def cmd_render(args) -> int:
    """Handle render command."""
    from .api import layout_file
    from .engine.html import HTMLCompiler, HTMLCompilerConfig
    from .engine.pdf import PDFCompiler

    input_path = resolve_input(args.input)
    output_path = Path(args.output) if args.output else input_path.with_suffix(f".{args.format}")

    sheet = layout_file(input_path)
    if args.format == "pdf":
        compiler = PDFCompiler()
        compiler.compile(sheet, output_path=output_path)
        print(f"Saved: {output_path} ({compiler.pages_written} pages)")
    else:
        config = HTMLCompilerConfig(show_title=not args.no_title)
        HTMLCompiler(config).compile(sheet, output_path=output_path)
        print(f"Saved: {output_path}")
    return 0


def cmd_layout(args) -> int:
    """Handle layout command."""
    from .api import layout_file
    from .utils.logger import print_placements

    sheet = layout_file(resolve_input(args.input))
    if args.json:
        info = {
            "title": asdict(sheet.title) if sheet.title is not None else None,
            "table_width": sheet.table_width,
            "height": sheet.height,
            "placements": [asdict(placement) for placement in sheet.placements()],
        }
        print(json.dumps(info, indent=2, ensure_ascii=False))
    else:
        print_placements(sheet)
    return 0


def cmd_version(args=None) -> int:
    """Handle version command."""
    from .version import __version__
    print(f"gridsheet v{__version__}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    from .utils.logger import configure_logging

    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        configure_logging("DEBUG")
    elif args.quiet:
        configure_logging("WARNING")
    else:
        configure_logging("INFO")

    commands = {
        "render": cmd_render,
        "layout": cmd_layout,
        "version": cmd_version,
    }
    if args.command not in commands:
        parser.print_help()
        return 0

    try:
        return commands[args.command](args)
    except GridSheetError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
