"""
ThumbnailGenerator - Renders fixed-size, white-padded PNG previews.
"""

import io
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from PIL import Image, ImageOps, UnidentifiedImageError

from .errors import DecodeError


@dataclass(frozen=True)
class ThumbnailLayout:
    """
    Placement of the scaled image on the square canvas.

    Attributes:
        width: Scaled image width in pixels
        height: Scaled image height in pixels
        x: Left offset on the canvas
        y: Top offset on the canvas
    """
    width: int
    height: int
    x: int
    y: int


class ThumbnailGenerator:
    """
    Generates square PNG thumbnails from original images using Pillow.

    The image is scaled uniformly to fit the box, centered, and drawn over
    an opaque background so no transparent pixels reach the spreadsheet.
    """

    def __init__(
        self,
        size: int = 50,
        background: Tuple[int, int, int] = (255, 255, 255),
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize thumbnail generator.

        Args:
            size: Edge length of the square thumbnail (default: 50)
            background: RGB fill colour (default: white)
            logger: Optional logger instance
        """
        self.size = size
        self.background = background
        self.logger = logger or logging.getLogger(__name__)

    def compute_layout(self, width: int, height: int) -> ThumbnailLayout:
        """
        Fit an image of the given dimensions into the square box.

        Images smaller than the box are scaled up; the longer side always
        spans the full box.
        """
        if width <= 0 or height <= 0:
            raise DecodeError(f"Invalid image dimensions {width}x{height}")

        scale = min(self.size / width, self.size / height)
        scaled_width = max(1, min(self.size, round(width * scale)))
        scaled_height = max(1, min(self.size, round(height * scale)))

        return ThumbnailLayout(
            width=scaled_width,
            height=scaled_height,
            x=(self.size - scaled_width) // 2,
            y=(self.size - scaled_height) // 2,
        )

    def generate(self, image_data: bytes, filename: Optional[str] = None) -> bytes:
        """
        Generate a thumbnail from image data.

        Args:
            image_data: Original image as bytes
            filename: Name used in error messages

        Returns:
            PNG-encoded thumbnail bytes

        Raises:
            DecodeError: If the data is not a readable image
        """
        img = self._decode(image_data, filename)
        layout = self.compute_layout(*img.size)

        img = self._convert_color_mode(img)
        img = img.resize((layout.width, layout.height), Image.Resampling.LANCZOS)

        canvas = Image.new('RGB', (self.size, self.size), self.background)
        canvas.paste(img, (layout.x, layout.y))

        output = io.BytesIO()
        canvas.save(output, format='PNG')
        return output.getvalue()

    def _decode(self, image_data: bytes, filename: Optional[str]) -> Image.Image:
        """Open and fully load image data, honouring EXIF orientation."""
        try:
            img = Image.open(io.BytesIO(image_data))
            img.load()
            return ImageOps.exif_transpose(img)
        except (UnidentifiedImageError, OSError, ValueError, Image.DecompressionBombError) as e:
            self.logger.error(f"Error decoding image {filename or '<bytes>'}: {e}")
            raise DecodeError(str(e) or "Unsupported image data", filename=filename) from e

    def _convert_color_mode(self, img: Image.Image) -> Image.Image:
        """Flatten any transparency onto the background colour."""
        # colour-keyed RGB, L and P images carry their key in info['transparency']
        if img.mode in ('RGBA', 'LA', 'PA') or 'transparency' in img.info:
            img = img.convert('RGBA')
            background = Image.new('RGB', img.size, self.background)
            background.paste(img, mask=img.split()[-1])
            return background
        elif img.mode != 'RGB':
            return img.convert('RGB')
        return img
