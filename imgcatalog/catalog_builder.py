"""
CatalogBuilder - Turns a selection of images into a catalog workbook.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .catalog_config import CatalogConfig
from .catalog_writer import CatalogWriter
from .errors import CatalogError, DecodeError, EmptySelectionError, GenerationInProgressError
from .generation_progress import GenerationProgress
from .generation_stats import GenerationStats
from .image_file import ImageFile
from .thumbnail_generator import ThumbnailGenerator


@dataclass
class CatalogResult:
    """
    Output of a successful generation run.

    Attributes:
        data: Serialized xlsx workbook
        names: Filenames in row order
        stats: Statistics for the run
    """
    data: bytes
    names: List[str] = field(default_factory=list)
    stats: GenerationStats = field(default_factory=GenerationStats)

    @property
    def row_count(self) -> int:
        """Number of data rows (header excluded)."""
        return len(self.names)


class CatalogBuilder:
    """
    Builds a catalog workbook from a selection, one image at a time.

    A run either returns the whole workbook or raises; the first image that
    fails to decode aborts the batch.
    """

    def __init__(
        self,
        thumbnail_generator: Optional[ThumbnailGenerator] = None,
        config: Optional[CatalogConfig] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize builder.

        Args:
            thumbnail_generator: Thumbnail generator (default: built from config)
            config: Layout configuration (default: CatalogConfig())
            logger: Optional logger instance
        """
        self.config = config or CatalogConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.thumb_gen = thumbnail_generator or ThumbnailGenerator(
            size=self.config.thumbnail_size,
            background=self.config.background,
            logger=self.logger,
        )
        self.stats = GenerationStats()
        self._processing = False

    @property
    def is_processing(self) -> bool:
        """True while a generation run is active."""
        return self._processing

    def generate(
        self,
        selection: Iterable[ImageFile],
        progress: Optional[GenerationProgress] = None
    ) -> CatalogResult:
        """
        Generate the catalog workbook.

        Args:
            selection: Images in row order; snapshotted when the run starts
            progress: Optional progress tracker

        Returns:
            CatalogResult with the serialized workbook

        Raises:
            EmptySelectionError: If there is nothing to catalog
            GenerationInProgressError: If a run is already active
            DecodeError: If any image cannot be decoded
            SerializationError: If the workbook cannot be serialized
        """
        if self._processing:
            raise GenerationInProgressError("Catalog generation is already running")

        files = tuple(selection)
        if not files:
            raise EmptySelectionError("No images selected")

        self._processing = True
        try:
            return self._build(files, progress)
        finally:
            self._processing = False

    def _build(self, files, progress: Optional[GenerationProgress]) -> CatalogResult:
        self.stats = GenerationStats(total_to_process=len(files))
        writer = CatalogWriter(self.config, logger=self.logger)

        if progress:
            progress.on_start(self.stats)
        else:
            self.logger.info(f"Starting generation: {len(files)} images")

        for image_file in files:
            self._process_file(writer, image_file, progress)
            if progress:
                progress.on_progress_update(self.stats)

        try:
            data = writer.to_bytes()
        except CatalogError as e:
            self.logger.error(f"Generation failed: {e}")
            raise
        self.stats.workbook_bytes = len(data)

        self.logger.info(
            f"Generation complete: {writer.row_count} rows, "
            f"{len(data)} bytes ({self.stats.elapsed_seconds:.1f}s)"
        )
        return CatalogResult(
            data=data,
            names=[f.name for f in files],
            stats=self.stats,
        )

    def _process_file(
        self,
        writer: CatalogWriter,
        image_file: ImageFile,
        progress: Optional[GenerationProgress]
    ) -> int:
        """Render one thumbnail and append its row."""
        self.logger.debug(f"Generating thumbnail: {image_file.name}")
        try:
            thumb_data = self.thumb_gen.generate(image_file.data, image_file.name)
        except DecodeError as e:
            if e.filename is None:
                e.filename = image_file.name
            self.logger.error(f"Error processing {image_file.name}: {e}")
            if progress:
                progress.on_file_processed(image_file, success=False, error=str(e))
            raise

        row = writer.add_entry(image_file.name, thumb_data)
        self.stats.record(len(thumb_data))

        if progress:
            progress.on_file_processed(image_file, row=row, success=True, thumb_size=len(thumb_data))
        else:
            self.logger.debug(
                f"Added: {image_file.name} ({len(thumb_data)} bytes) "
                f"[{self.stats.processed}/{self.stats.total_to_process}]"
            )
        return row
