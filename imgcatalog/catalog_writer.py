"""
CatalogWriter - Builds the catalog workbook with openpyxl.
"""

import io
import logging
import os
import tempfile
from typing import Optional

from openpyxl import Workbook
from openpyxl.drawing.image import Image as XLImage
from openpyxl.drawing.spreadsheet_drawing import AnchorMarker, OneCellAnchor
from openpyxl.drawing.xdr import XDRPositiveSize2D
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
from openpyxl.utils.units import pixels_to_EMU

from .catalog_config import CatalogConfig
from .errors import SerializationError

HEADER_ROW = 1
NAME_COLUMN = 1
PREVIEW_COLUMN = 2


class CatalogWriter:
    """
    Assembles one worksheet with a filename and a floating thumbnail per row.

    Row 1 holds the headers; the entry added i-th (0-based) lands on row
    i + 2 with its image anchored over the preview cell of that row.
    """

    def __init__(
        self,
        config: Optional[CatalogConfig] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize writer and lay out the header row.

        Args:
            config: Layout configuration (default: CatalogConfig())
            logger: Optional logger instance
        """
        self.config = config or CatalogConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.workbook = Workbook()
        self.worksheet = self.workbook.active
        self.worksheet.title = self.config.sheet_name
        self._row_count = 0
        self._write_header()

    @property
    def row_count(self) -> int:
        """Number of data rows written (header excluded)."""
        return self._row_count

    def _write_header(self) -> None:
        """Write column headers, widths and header font."""
        for index, column in enumerate(self.config.columns, start=1):
            cell = self.worksheet.cell(row=HEADER_ROW, column=index, value=column.header)
            if self.config.header_bold:
                cell.font = Font(bold=True)
            self.worksheet.column_dimensions[get_column_letter(index)].width = column.width

    def add_entry(self, name: str, thumbnail: bytes) -> int:
        """
        Append a catalog row.

        Args:
            name: Filename shown in the name column
            thumbnail: PNG-encoded thumbnail bytes

        Returns:
            The 1-based worksheet row that was written
        """
        row = HEADER_ROW + self._row_count + 1
        cell = self.worksheet.cell(row=row, column=NAME_COLUMN, value=name)
        # keep names such as "=x.png" as text rather than formulas
        cell.data_type = 's'

        size = self.config.thumbnail_size
        image = XLImage(io.BytesIO(thumbnail))
        image.width = size
        image.height = size
        # AnchorMarker is 0-based: column B, this row
        image.anchor = OneCellAnchor(
            _from=AnchorMarker(col=PREVIEW_COLUMN - 1, row=row - 1),
            ext=XDRPositiveSize2D(pixels_to_EMU(size), pixels_to_EMU(size)),
        )
        self.worksheet.add_image(image)

        self.worksheet.row_dimensions[row].height = self.config.row_height
        self._row_count += 1

        self.logger.debug(f"Row {row}: {name} ({len(thumbnail)} byte thumbnail)")
        return row

    def to_bytes(self) -> bytes:
        """
        Serialize the workbook to xlsx bytes.

        Raises:
            SerializationError: If openpyxl cannot write the workbook
        """
        output = io.BytesIO()
        try:
            self.workbook.save(output)
        except Exception as e:
            self.logger.error(f"Error serializing workbook: {e}")
            raise SerializationError(f"Could not serialize workbook: {e}") from e
        return output.getvalue()


def write_bytes_atomic(path: str, data: bytes) -> None:
    """Write data to path via a temporary file in the same directory."""
    directory = os.path.dirname(os.path.abspath(path))
    try:
        fd, temp_path = tempfile.mkstemp(prefix='.imgcatalog-', suffix='.tmp', dir=directory)
    except OSError as e:
        raise SerializationError(f"Could not write {path}: {e}") from e
    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
        os.replace(temp_path, path)
    except OSError as e:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise SerializationError(f"Could not write {path}: {e}") from e
