"""
SelectionSet - Ordered, immutable snapshot of the images chosen for a catalog.
"""

import logging
import os
from typing import Iterable, Iterator, List, Optional, Tuple

from .image_file import ImageFile, guess_content_type


class SelectionSet:
    """
    Ordered collection of image files.

    Non-image entries are dropped when the set is built. Order is preserved
    and becomes the row order of the catalog. A new selection replaces the
    old one wholesale; instances are never modified.
    """

    def __init__(self, files: Iterable[ImageFile] = (), dropped: int = 0):
        self._files: Tuple[ImageFile, ...] = tuple(files)
        self.dropped = dropped

    @classmethod
    def from_files(
        cls,
        files: Iterable[ImageFile],
        logger: Optional[logging.Logger] = None
    ) -> 'SelectionSet':
        """Build a selection, keeping only files with an image content type."""
        logger = logger or logging.getLogger(__name__)
        kept = []
        dropped = 0
        for image_file in files:
            if image_file.is_image:
                kept.append(image_file)
            else:
                dropped += 1
                logger.debug(f"Skipping non-image file: {image_file.name} ({image_file.content_type})")
        return cls(kept, dropped=dropped)

    @classmethod
    def from_paths(
        cls,
        paths: Iterable[str],
        logger: Optional[logging.Logger] = None
    ) -> 'SelectionSet':
        """
        Build a selection from filesystem paths.

        Directories contribute their direct children in name order.
        Only files with an image content type are read from disk.

        Args:
            paths: Files or directories, in selection order
            logger: Optional logger instance
        """
        logger = logger or logging.getLogger(__name__)
        kept = []
        dropped = 0
        for path in _expand_paths(paths):
            if not guess_content_type(path).startswith('image/'):
                dropped += 1
                logger.debug(f"Skipping non-image file: {path}")
                continue
            kept.append(ImageFile.from_path(path))
        return cls(kept, dropped=dropped)

    @property
    def files(self) -> Tuple[ImageFile, ...]:
        return self._files

    @property
    def names(self) -> List[str]:
        return [f.name for f in self._files]

    @property
    def total_size(self) -> int:
        return sum(f.size for f in self._files)

    @property
    def is_empty(self) -> bool:
        return not self._files

    def __len__(self) -> int:
        return len(self._files)

    def __iter__(self) -> Iterator[ImageFile]:
        return iter(self._files)

    def __getitem__(self, index: int) -> ImageFile:
        return self._files[index]

    def __repr__(self) -> str:
        return f"SelectionSet({len(self._files)} images, {self.dropped} dropped)"


def _expand_paths(paths: Iterable[str]) -> Iterator[str]:
    for path in paths:
        if os.path.isdir(path):
            for name in sorted(os.listdir(path)):
                child = os.path.join(path, name)
                if os.path.isfile(child):
                    yield child
        else:
            yield path
