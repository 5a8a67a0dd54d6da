"""Renderers turning a Sheet into emitter-neutral cell rows."""

from .grid_renderer import GridRenderer, position_cells

__all__ = ["GridRenderer", "position_cells"]
