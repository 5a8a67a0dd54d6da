"""Custom exceptions for gridsheet."""

from typing import Optional


class GridSheetError(Exception):
    """Base exception for gridsheet errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ParsingError(GridSheetError):
    """Exception raised while reading or validating a sheet document."""

    pass


class GeometryError(GridSheetError):
    """Exception raised when a block cannot exist inside the table width."""

    pass


class LayoutError(GridSheetError):
    """Exception raised when the packer reaches an impossible state."""

    pass


class RenderingError(GridSheetError):
    """Exception raised while turning a sheet into render instructions."""

    pass


class CompilationError(GridSheetError):
    """Exception raised while writing HTML or PDF output."""

    pass
