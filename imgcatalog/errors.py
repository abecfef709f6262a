"""
Exceptions raised while building an image catalog.
"""

from typing import Optional


class CatalogError(Exception):
    """Base class for catalog generation failures."""


class ConfigError(CatalogError):
    """Raised when catalog configuration values are invalid."""


class DecodeError(CatalogError):
    """Raised when an image cannot be decoded."""

    def __init__(self, message: str, filename: Optional[str] = None):
        super().__init__(message)
        self.filename = filename

    def __str__(self) -> str:
        message = super().__str__()
        if self.filename:
            return f"{self.filename}: {message}"
        return message


class SerializationError(CatalogError):
    """Raised when the workbook cannot be serialized or written."""


class EmptySelectionError(CatalogError):
    """Raised when generation is requested with no images selected."""


class GenerationInProgressError(CatalogError):
    """Raised when generation is started while another run is active."""
