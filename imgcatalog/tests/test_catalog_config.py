"""Tests for CatalogConfig class."""

import pytest

from imgcatalog.catalog_config import CatalogConfig, ColumnSpec, XLSX_CONTENT_TYPE


class TestCatalogConfig:
    """Tests for CatalogConfig class."""

    def test_defaults(self):
        """Test default layout constants."""
        config = CatalogConfig()

        assert config.thumbnail_size == 50
        assert config.background == (255, 255, 255)
        assert config.sheet_name == 'Images'
        assert config.name_column == ColumnSpec('Image Name', 'name', 30)
        assert config.preview_column == ColumnSpec('Preview', 'preview', 40)
        assert config.row_height == 40
        assert config.output_filename == 'images_report.xlsx'

    def test_content_type(self):
        """Test the xlsx MIME type."""
        assert XLSX_CONTENT_TYPE == 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'

    def test_validate_defaults(self):
        """Test default configuration is valid."""
        assert CatalogConfig().validate() == []

    def test_validate_errors(self):
        """Test invalid values are reported."""
        config = CatalogConfig(
            thumbnail_size=0,
            background=(300, 0, 0),
            sheet_name='',
            row_height=-1,
        )

        errors = config.validate()

        assert len(errors) == 4
        assert any('Thumbnail size' in e for e in errors)
        assert any('Row height' in e for e in errors)

    def test_validate_long_sheet_name(self):
        """Test sheet names longer than Excel allows."""
        errors = CatalogConfig(sheet_name='x' * 32).validate()

        assert len(errors) == 1

    def test_validate_row_shorter_than_thumbnail(self):
        """Test rows must be tall enough for the thumbnail."""
        errors = CatalogConfig(thumbnail_size=120).validate()

        assert len(errors) == 1
        assert 'shorter than' in errors[0]

    def test_validate_row_fits_thumbnail(self):
        """Test a row of 100pt holds a 120px thumbnail."""
        assert CatalogConfig(thumbnail_size=120, row_height=100).validate() == []

    def test_with_overrides_ignores_none(self):
        """Test None overrides keep defaults."""
        config = CatalogConfig().with_overrides(thumbnail_size=80, row_height=None)

        assert config.thumbnail_size == 80
        assert config.row_height == 40

    def test_frozen(self):
        """Test configuration is immutable."""
        with pytest.raises(AttributeError):
            CatalogConfig().thumbnail_size = 10
