"""
Pytest fixtures for imgcatalog tests.
"""

import io
import pytest


def _image_bytes(size, color='red', mode='RGB', fmt='JPEG'):
    from PIL import Image

    img = Image.new(mode, size, color=color)
    buffer = io.BytesIO()
    img.save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def sample_image_bytes():
    """Fixture providing sample JPEG image bytes."""
    return _image_bytes((100, 100))


@pytest.fixture
def sample_png_bytes():
    """Fixture providing sample PNG image bytes with transparency."""
    return _image_bytes((100, 100), color=(255, 0, 0, 0), mode='RGBA', fmt='PNG')


@pytest.fixture
def wide_image_bytes():
    """Fixture providing a 200x100 PNG."""
    return _image_bytes((200, 100), color='blue', fmt='PNG')


@pytest.fixture
def tall_image_bytes():
    """Fixture providing a 60x240 PNG."""
    return _image_bytes((60, 240), color='green', fmt='PNG')


@pytest.fixture
def image_files(sample_image_bytes, sample_png_bytes, wide_image_bytes):
    """Fixture providing three selected images."""
    from imgcatalog.image_file import ImageFile

    return [
        ImageFile(name='red.jpg', data=sample_image_bytes, content_type='image/jpeg'),
        ImageFile(name='clear.png', data=sample_png_bytes, content_type='image/png'),
        ImageFile(name='wide.png', data=wide_image_bytes, content_type='image/png'),
    ]


@pytest.fixture
def mixed_files(image_files):
    """Fixture providing three images interleaved with two non-image files."""
    from imgcatalog.image_file import ImageFile

    notes = ImageFile(name='notes.txt', data=b'hello', content_type='text/plain')
    report = ImageFile(name='report.pdf', data=b'%PDF-1.4', content_type='application/pdf')
    return [image_files[0], notes, image_files[1], report, image_files[2]]


@pytest.fixture
def selection(image_files):
    """Fixture providing a selection of three images."""
    from imgcatalog.selection import SelectionSet

    return SelectionSet.from_files(image_files)


@pytest.fixture
def corrupt_image_file():
    """Fixture providing garbage bytes labelled as a JPEG."""
    from imgcatalog.image_file import ImageFile

    return ImageFile(name='broken.jpg', data=b'not an image', content_type='image/jpeg')


@pytest.fixture
def image_dir(tmp_path, sample_image_bytes, wide_image_bytes):
    """Fixture providing a directory with two images and a text file."""
    (tmp_path / 'b_wide.png').write_bytes(wide_image_bytes)
    (tmp_path / 'a_red.jpg').write_bytes(sample_image_bytes)
    (tmp_path / 'readme.txt').write_text('not an image')
    return tmp_path


@pytest.fixture
def logger():
    """Fixture providing a logger."""
    import logging
    return logging.getLogger('test')
