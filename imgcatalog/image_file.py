"""
ImageFile - A user-selected file and its declared content type.
"""

import os
from dataclasses import dataclass, field
from mimetypes import guess_type
from typing import Optional

DEFAULT_CONTENT_TYPE = 'application/octet-stream'


def guess_content_type(filename: str) -> str:
    """Guess the declared media type of a file from its name."""
    content_type, _ = guess_type(filename)
    return content_type or DEFAULT_CONTENT_TYPE


@dataclass(frozen=True)
class ImageFile:
    """
    A selected file held in memory for one catalog run.

    Attributes:
        name: Base filename as shown in the catalog
        data: Raw file contents
        content_type: Declared media type (e.g. 'image/png')
        size: Size in bytes
    """
    name: str
    data: bytes = field(repr=False)
    content_type: str = DEFAULT_CONTENT_TYPE
    size: int = -1

    def __post_init__(self):
        if self.size < 0:
            object.__setattr__(self, 'size', len(self.data))

    @property
    def is_image(self) -> bool:
        """True if the declared content type is an image type."""
        return self.content_type.lower().startswith('image/')

    @classmethod
    def from_path(cls, path: str, content_type: Optional[str] = None) -> 'ImageFile':
        """
        Read a local file.

        Args:
            path: Filesystem path
            content_type: Declared media type, guessed from the name if omitted
        """
        name = os.path.basename(path)
        with open(path, 'rb') as f:
            data = f.read()
        return cls(
            name=name,
            data=data,
            content_type=content_type or guess_content_type(name),
        )

    def format_size(self) -> str:
        """Format the size in kilobytes, e.g. '12.34 KB'."""
        return f"{self.size / 1024:.2f} KB"
