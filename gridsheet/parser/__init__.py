"""
Parser package for gridsheet.

Reads JSON sheet descriptions and validates them into typed block
descriptors.
"""

from .sheet_parser import SheetDocument, SheetParser, load_sheet, parse_int, parse_keyid

__all__ = [
    "SheetDocument",
    "SheetParser",
    "load_sheet",
    "parse_int",
    "parse_keyid",
]
