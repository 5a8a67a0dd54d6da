"""

Layout Validator - Sheet validation.

Checks:
- whether every block width is content + margins and fits the table
- whether column width/height match the blocks they hold
- whether columns fit inside their row group
- whether row groups fit inside the table width
- whether block keys are unique

"""

from typing import List, Tuple

from .blocks import content_geometry
from .sheet_layout import Sheet


class LayoutValidator:
    """Layout validator - checks Sheet integrity."""

    def __init__(self, sheet: Sheet):
        """
        Args:
            sheet: Sheet to validate
        """
        self.sheet = sheet
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def validate(self) -> Tuple[bool, List[str], List[str]]:
        """

        Performs full layout validation.

        Returns:
        Tuple (is_valid, errors, warnings)

        """
        self.errors.clear()
        self.warnings.clear()

        self._validate_groups_exist()
        self._validate_block_geometry()
        self._validate_columns()
        self._validate_group_width()
        self._validate_unique_keys()

        is_valid = len(self.errors) == 0
        return is_valid, self.errors.copy(), self.warnings.copy()

    def _validate_groups_exist(self) -> None:
        """Checks if the sheet holds anything to render."""
        if not self.sheet.groups:
            self.warnings.append("Sheet contains no row groups")
        for index, group in enumerate(self.sheet.groups):
            if group.is_empty:
                self.errors.append(f"Row group {index} is empty")

    def _validate_block_geometry(self) -> None:
        """Checks width = content + margins and width <= table width."""
        table_width = self.sheet.table_width
        for block in self.sheet.blocks:
            if block.width != block.content_width + block.margin_left + block.margin_right:
                self.errors.append(f"Block '{block.key}' width does not match content and margins")
            if block.width > table_width:
                self.errors.append(
                    f"Block '{block.key}' is wider than the table "
                    f"(width={block.width}, table_width={table_width})"
                )
            expected = content_geometry(block.kind, block.text)
            if (block.content_width, block.content_height) != expected:
                self.errors.append(
                    f"Block '{block.key}' has geometry {block.content_width}x{block.content_height}, "
                    f"expected {expected[0]}x{expected[1]} for {block.kind.value}"
                )

    def _validate_columns(self) -> None:
        """Checks column aggregates and that columns fit their group."""
        for group_index, group in enumerate(self.sheet.groups):
            for column_index, column in enumerate(group.columns):
                where = f"group {group_index}, column {column_index}"
                if not column.blocks:
                    self.errors.append(f"Column at {where} is empty")
                    continue
                if column.height != sum(block.height for block in column.blocks):
                    self.errors.append(f"Column at {where} height does not match its blocks")
                if column.width != max(block.width for block in column.blocks):
                    self.errors.append(f"Column at {where} width does not match its blocks")
                if column.height > group.height:
                    self.errors.append(
                        f"Column at {where} is taller than its group "
                        f"(height={column.height}, group_height={group.height})"
                    )

    def _validate_group_width(self) -> None:
        """Checks sum(column.width) <= table width."""
        for index, group in enumerate(self.sheet.groups):
            if group.width > self.sheet.table_width:
                self.errors.append(
                    f"Row group {index} is wider than the table "
                    f"(width={group.width}, table_width={self.sheet.table_width})"
                )

    def _validate_unique_keys(self) -> None:
        seen = set()
        for block in self.sheet.blocks:
            if block.key in seen:
                self.errors.append(f"Duplicate block key '{block.key}'")
            seen.add(block.key)
