"""
CatalogConfig - Named constants for thumbnail and workbook layout.
"""

from dataclasses import dataclass, field, replace
from typing import List, Tuple

XLSX_CONTENT_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'

# Excel row heights are in points; images are sized in pixels at 96 dpi
POINTS_TO_PIXELS = 4 / 3


@dataclass(frozen=True)
class ColumnSpec:
    """
    A declared worksheet column.

    Attributes:
        header: Text written into the header row
        key: Short identifier for the column
        width: Column width in Excel character units
    """
    header: str
    key: str
    width: float


def _default_columns() -> Tuple[ColumnSpec, ...]:
    return (
        ColumnSpec(header='Image Name', key='name', width=30),
        ColumnSpec(header='Preview', key='preview', width=40),
    )


@dataclass(frozen=True)
class CatalogConfig:
    """
    Layout settings for a catalog workbook.

    Attributes:
        thumbnail_size: Edge length of the square thumbnail in pixels
        background: RGB fill colour behind the scaled image
        sheet_name: Title of the single worksheet
        columns: Name and preview column declarations, in order
        header_bold: Render the header row in bold
        row_height: Height of each data row in points
        output_filename: Default name of the generated workbook
    """
    thumbnail_size: int = 50
    background: Tuple[int, int, int] = (255, 255, 255)
    sheet_name: str = 'Images'
    columns: Tuple[ColumnSpec, ...] = field(default_factory=_default_columns)
    header_bold: bool = True
    row_height: float = 40.0
    output_filename: str = 'images_report.xlsx'

    @property
    def name_column(self) -> ColumnSpec:
        return self.columns[0]

    @property
    def preview_column(self) -> ColumnSpec:
        return self.columns[1]

    def validate(self) -> List[str]:
        """
        Check configuration values.

        Returns:
            List of error messages, empty if the configuration is usable
        """
        errors = []

        if self.thumbnail_size <= 0:
            errors.append(f"Thumbnail size must be positive (got {self.thumbnail_size})")
        if len(self.background) != 3 or any(not 0 <= c <= 255 for c in self.background):
            errors.append(f"Background must be an RGB triple in 0-255 (got {self.background})")
        if not self.sheet_name:
            errors.append("Sheet name must not be empty")
        elif len(self.sheet_name) > 31:
            errors.append(f"Sheet name is longer than 31 characters: {self.sheet_name}")
        if len(self.columns) != 2:
            errors.append(f"Exactly two columns are required (got {len(self.columns)})")
        for column in self.columns:
            if column.width <= 0:
                errors.append(f"Column '{column.header}' width must be positive")
        if self.row_height <= 0:
            errors.append(f"Row height must be positive (got {self.row_height})")
        elif self.row_height * POINTS_TO_PIXELS < self.thumbnail_size:
            errors.append(
                f"Row height {self.row_height}pt is shorter than the "
                f"{self.thumbnail_size}px thumbnail"
            )
        if not self.output_filename:
            errors.append("Output filename must not be empty")

        return errors

    def with_overrides(self, **overrides) -> 'CatalogConfig':
        """Return a copy with the given non-None fields replaced."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)
