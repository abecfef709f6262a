"""
Image catalog generator

Builds a single spreadsheet listing each selected image's filename next to
an embedded 50x50 thumbnail preview:
    1. Thumbnail phase: each image is scaled, centered and padded with white
    2. Catalog phase: one row per image is written and the workbook serialized
"""

__version__ = "1.0.0"

from .catalog_config import CatalogConfig, ColumnSpec, XLSX_CONTENT_TYPE
from .errors import (
    CatalogError,
    ConfigError,
    DecodeError,
    SerializationError,
    EmptySelectionError,
    GenerationInProgressError,
)
from .image_file import ImageFile
from .selection import SelectionSet
from .thumbnail_generator import ThumbnailGenerator, ThumbnailLayout
from .catalog_writer import CatalogWriter
from .generation_stats import GenerationStats
from .generation_progress import GenerationProgress
from .catalog_builder import CatalogBuilder, CatalogResult
from .reporter import Reporter

__all__ = [
    "CatalogConfig",
    "ColumnSpec",
    "XLSX_CONTENT_TYPE",
    "CatalogError",
    "ConfigError",
    "DecodeError",
    "SerializationError",
    "EmptySelectionError",
    "GenerationInProgressError",
    "ImageFile",
    "SelectionSet",
    "ThumbnailGenerator",
    "ThumbnailLayout",
    "CatalogWriter",
    "GenerationStats",
    "GenerationProgress",
    "CatalogBuilder",
    "CatalogResult",
    "Reporter",
]
