"""Utility helpers for gridsheet."""

from .logger import configure_logging, placement_table, print_placements

__all__ = ["configure_logging", "placement_table", "print_placements"]
