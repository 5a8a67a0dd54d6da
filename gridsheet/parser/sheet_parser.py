"""
Sheet parser for gridsheet documents.

Handles reading the JSON sheet description, validating its fields, and
turning every entry of ``data_headers`` into a typed :class:`BlockSpec`.
"""

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from ..engine.blocks import Block, BlockSpec, ContentKind, build_block
from ..engine.sheet_layout import SheetTitle
from ..exceptions import ParsingError

logger = logging.getLogger(__name__)

GRID_TOKENS = {
    "grid36": ContentKind.GRID36,
    "grid10": ContentKind.GRID10,
}
KEYID_KEYS = {
    "keyid": ContentKind.KEYID,
    "keyid3": ContentKind.KEYID_COMPACT,
}

_INTEGER_RE = re.compile(r"\s*[+-]?[0-9]+")
_KEYID_RE = re.compile(r"[0-9A-Fa-f]{16}")


def parse_int(value: Any, what: str) -> int:
    """
    Parse an integer given as a JSON number or a base-10 string.

    Args:
        value: Raw JSON value
        what: Field name used in error messages

    Returns:
        Parsed integer
    """
    if isinstance(value, bool):
        raise ParsingError(f"{what} must be an integer or integer string")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        if not _INTEGER_RE.fullmatch(value):
            raise ParsingError(f"{what} must be an integer, got '{value}'")
        return int(value)
    raise ParsingError(f"{what} must be an integer or integer string")


def parse_keyid(value: str, key: str) -> str:
    """
    Normalize a key id: strip one ``0x``/``0X`` prefix and require 16 hex digits.

    The digits keep their original case.
    """
    digits = value[2:] if value[:2] in ("0x", "0X") else value
    if not _KEYID_RE.fullmatch(digits):
        raise ParsingError(
            f"data.{key} must be 16 hexadecimal digits with an optional 0x prefix, got '{value}'"
        )
    return digits


@dataclass
class SheetDocument:
    """Validated sheet description, ready for layout."""

    table_width: int
    specs: List[BlockSpec] = field(default_factory=list)
    title: Optional[SheetTitle] = None

    def build_blocks(self) -> List[Block]:
        """Create catalog blocks, rejecting any block wider than the table."""
        return [build_block(spec, self.table_width) for spec in self.specs]


class SheetParser:
    """
    Parser for gridsheet JSON documents.

    Expects the keys ``table``, ``data_headers``, ``data`` and ``margins``;
    ``title`` is optional.
    """

    def parse(self, data: Any) -> SheetDocument:
        """
        Validate a decoded JSON document.

        Args:
            data: Decoded JSON value

        Returns:
            SheetDocument with one BlockSpec per ``data_headers`` entry, in order
        """
        if not isinstance(data, dict):
            raise ParsingError("sheet document must be a JSON object")

        title = self._parse_title(data.get("title"))
        table = self._require_object(data, "table")
        if "width" not in table:
            raise ParsingError("table.width is required")
        table_width = parse_int(table["width"], "table.width")
        if table_width <= 0:
            raise ParsingError(f"table.width must be positive, got {table_width}")

        headers = self._require_object(data, "data_headers")
        contents = self._require_object(data, "data")
        margins = self._require_object(data, "margins")

        specs = [
            self._parse_block(key, header, contents, margins)
            for key, header in headers.items()
        ]
        logger.debug("Parsed %d block descriptors for table width %d", len(specs), table_width)
        return SheetDocument(table_width=table_width, specs=specs, title=title)

    def load(self, path: Union[str, Path]) -> SheetDocument:
        """Read and parse a JSON sheet file."""
        path = Path(path)
        if not path.exists():
            raise ParsingError(f"Expected input file {path} does not exist")
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as exc:
            raise ParsingError(f"{path} is not valid JSON", details=str(exc)) from exc
        return self.parse(data)

    # ------------------------------------------------------------------
    def _parse_block(self, key: str, header: Any, contents: Dict[str, Any],
                     margins: Dict[str, Any]) -> BlockSpec:
        if key not in contents:
            raise ParsingError(f"data_headers key '{key}' is missing from data")
        if key not in margins:
            raise ParsingError(f"data_headers key '{key}' is missing from margins")
        if not isinstance(header, str):
            raise ParsingError(f"data_headers.{key} must be a string")
        content = contents[key]
        if not isinstance(content, str):
            raise ParsingError(f"data.{key} must be a string")

        margin_left, margin_right = self._parse_margins(key, margins[key])
        kind, keyid = self._classify(key, content)
        return BlockSpec(
            key=key,
            header=header,
            kind=kind,
            text=content,
            margin_left=margin_left,
            margin_right=margin_right,
            keyid_hex16=keyid,
        )

    @staticmethod
    def _classify(key: str, content: str) -> Tuple[ContentKind, Optional[str]]:
        if key in KEYID_KEYS:
            return KEYID_KEYS[key], parse_keyid(content, key)
        if content in GRID_TOKENS:
            return GRID_TOKENS[content], None
        if not content:
            raise ParsingError(f"data.{key} must not be empty")
        return ContentKind.LITERAL, None

    @staticmethod
    def _parse_margins(key: str, margin: Any) -> Tuple[int, int]:
        if not isinstance(margin, dict):
            raise ParsingError(f"margins.{key} must be an object")
        values = []
        for side in ("left", "right"):
            value = parse_int(margin[side], f"margins.{key}.{side}") if side in margin else 0
            if value < 0:
                raise ParsingError(f"margins.{key}.{side} must not be negative, got {value}")
            values.append(value)
        return values[0], values[1]

    @staticmethod
    def _parse_title(title: Any) -> Optional[SheetTitle]:
        if title is None:
            return None
        if not isinstance(title, dict):
            raise ParsingError("title must be an object")
        left = title.get("left", "")
        right = title.get("right", "")
        if not isinstance(left, str) or not isinstance(right, str):
            raise ParsingError("title.left and title.right must be strings")
        return SheetTitle(left=left, right=right)

    @staticmethod
    def _require_object(data: Dict[str, Any], name: str) -> Dict[str, Any]:
        if name not in data:
            raise ParsingError(f"{name} is required")
        value = data[name]
        if not isinstance(value, dict):
            raise ParsingError(f"{name} must be an object")
        return value


def load_sheet(path: Union[str, Path]) -> SheetDocument:
    """Convenience wrapper around :meth:`SheetParser.load`."""
    return SheetParser().load(path)
