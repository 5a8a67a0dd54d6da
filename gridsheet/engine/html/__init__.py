"""HTML output for laid-out sheets."""

from .html_compiler import HTMLCompiler, HTMLCompilerConfig

__all__ = ["HTMLCompiler", "HTMLCompilerConfig"]
