"""
Rich logging for gridsheet.

Provides console logging through the rich library and a table view of the
block placements of a laid-out sheet.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from ..engine.sheet_layout import Sheet

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level: str = "WARNING", console: Optional[Console] = None) -> None:
    """
    Configure root logging with a rich handler.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console: Console to log to (stderr by default)
    """
    if level.upper() not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {level}")

    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()
    root_logger.addHandler(rich_handler)


def placement_table(sheet: Sheet) -> Table:
    """Build a rich table listing where every block ended up."""
    table = Table(title=f"Layout (table width {sheet.table_width})")
    for name in ("key", "header", "data", "group", "top", "left", "width", "height", "compacted"):
        justify = "right" if name in ("group", "top", "left", "width", "height") else "left"
        table.add_column(name, justify=justify)
    for placement in sheet.placements():
        table.add_row(
            Text(placement.key),
            Text(placement.header),
            Text(placement.content),
            str(placement.group_index),
            str(placement.top),
            str(placement.column_left),
            str(placement.width),
            str(placement.height),
            "yes" if placement.compacted else "",
        )
    return table


def print_placements(sheet: Sheet, console: Optional[Console] = None) -> None:
    """Print title, table width and the placement table."""
    console = console or Console()
    if sheet.title is not None:
        console.print(f"title.left: {sheet.title.left}", markup=False, highlight=False)
        console.print(f"title.right: {sheet.title.right}", markup=False, highlight=False)
    console.print(f"table.width: {sheet.table_width}", markup=False, highlight=False)
    console.print(placement_table(sheet))
