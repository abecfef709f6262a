"""Tests for CatalogWriter class."""

import io
import pytest
from openpyxl import load_workbook

from imgcatalog.catalog_config import CatalogConfig
from imgcatalog.catalog_writer import CatalogWriter, write_bytes_atomic
from imgcatalog.errors import SerializationError
from imgcatalog.thumbnail_generator import ThumbnailGenerator


@pytest.fixture
def thumbnail(sample_image_bytes):
    """Fixture providing a rendered thumbnail."""
    return ThumbnailGenerator().generate(sample_image_bytes)


def _reload(data):
    return load_workbook(io.BytesIO(data))


class TestCatalogWriter:
    """Tests for CatalogWriter class."""

    def test_header_layout(self):
        """Test sheet name, headers, widths and bold header row."""
        writer = CatalogWriter()
        ws = writer.worksheet

        assert ws.title == 'Images'
        assert ws['A1'].value == 'Image Name'
        assert ws['B1'].value == 'Preview'
        assert ws['A1'].font.bold is True
        assert ws['B1'].font.bold is True
        assert ws.column_dimensions['A'].width == 30
        assert ws.column_dimensions['B'].width == 40
        assert writer.row_count == 0

    def test_add_entry_rows_in_order(self, thumbnail):
        """Test entries are written to consecutive rows after the header."""
        writer = CatalogWriter()

        rows = [writer.add_entry(name, thumbnail) for name in ['c.png', 'a.png', 'b.png']]

        assert rows == [2, 3, 4]
        assert writer.row_count == 3
        assert [writer.worksheet.cell(row=r, column=1).value for r in rows] == ['c.png', 'a.png', 'b.png']

    def test_add_entry_anchors_image(self, thumbnail):
        """Test images are anchored over the preview column of their row."""
        writer = CatalogWriter()
        writer.add_entry('first.png', thumbnail)
        writer.add_entry('second.png', thumbnail)

        images = writer.worksheet._images

        assert len(images) == 2
        assert images[1].anchor._from.col == 1
        assert images[1].anchor._from.row == 2
        assert images[0].width == 50
        assert images[0].height == 50

    def test_add_entry_sets_row_height(self, thumbnail):
        """Test data rows get the configured height."""
        writer = CatalogWriter(CatalogConfig(row_height=55))

        row = writer.add_entry('photo.png', thumbnail)

        assert writer.worksheet.row_dimensions[row].height == 55

    def test_to_bytes_round_trip(self, thumbnail):
        """Test serialized workbook reloads with rows and images."""
        writer = CatalogWriter()
        writer.add_entry('one.jpg', thumbnail)
        writer.add_entry('two.jpg', thumbnail)

        wb = _reload(writer.to_bytes())
        ws = wb['Images']

        assert ws.max_row == 3
        assert ws['A2'].value == 'one.jpg'
        assert ws['A3'].value == 'two.jpg'
        assert len(ws._images) == 2

    def test_filename_stored_as_plain_text(self, thumbnail):
        """Test filenames that look like formulas are kept verbatim."""
        writer = CatalogWriter()
        writer.add_entry('=SUM(A1) <&>.png', thumbnail)

        ws = _reload(writer.to_bytes())['Images']

        assert ws['A2'].value == '=SUM(A1) <&>.png'
        assert ws['A2'].data_type == 's'

    def test_to_bytes_failure(self, thumbnail, mocker):
        """Test openpyxl failures surface as SerializationError."""
        writer = CatalogWriter()
        writer.add_entry('one.jpg', thumbnail)
        mocker.patch.object(writer.workbook, 'save', side_effect=MemoryError())

        with pytest.raises(SerializationError):
            writer.to_bytes()


class TestWriteBytesAtomic:
    """Tests for write_bytes_atomic."""

    def test_writes_and_replaces(self, tmp_path):
        """Test existing files are replaced and no temp files remain."""
        path = tmp_path / 'out.xlsx'
        path.write_bytes(b'old')

        write_bytes_atomic(str(path), b'new')

        assert path.read_bytes() == b'new'
        assert [p.name for p in tmp_path.iterdir()] == ['out.xlsx']

    def test_missing_directory(self, tmp_path):
        """Test writing into a missing directory fails cleanly."""
        with pytest.raises(SerializationError):
            write_bytes_atomic(str(tmp_path / 'missing' / 'out.xlsx'), b'data')
