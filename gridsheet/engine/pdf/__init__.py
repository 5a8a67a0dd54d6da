"""PDF output for laid-out sheets (ReportLab)."""

from .pdf_compiler import PDFCompiler, PDFCompilerConfig, PDFPage

__all__ = ["PDFCompiler", "PDFCompilerConfig", "PDFPage"]
