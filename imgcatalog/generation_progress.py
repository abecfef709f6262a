"""
GenerationProgress - Tracks and displays catalog generation progress.
"""

import logging
from typing import Optional

from .generation_stats import GenerationStats
from .image_file import ImageFile


class GenerationProgress:
    """
    Tracks and displays generation progress with optional per-file output.
    """

    def __init__(
        self,
        show_files: bool = False,
        log_interval: int = 25,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize progress tracker.

        Args:
            show_files: If True, print each file as it's processed
            log_interval: Log summary progress every N images (when not show_files)
            logger: Optional logger instance
        """
        self.show_files = show_files
        self.log_interval = log_interval
        self.logger = logger or logging.getLogger(__name__)
        self.last_logged = 0

    def on_start(self, stats: GenerationStats) -> None:
        """Called once before the first image is processed."""
        self.last_logged = 0
        self.logger.info(f"Generating catalog for {stats.total_to_process} images...")

    def on_file_processed(
        self,
        image_file: ImageFile,
        row: Optional[int] = None,
        success: bool = True,
        thumb_size: Optional[int] = None,
        error: Optional[str] = None
    ) -> None:
        """
        Called when a file is processed.

        Args:
            image_file: The selected image
            row: Worksheet row the image was written to (if success)
            success: Whether the thumbnail was generated
            thumb_size: Size of generated thumbnail (if success)
            error: Error message (if failed)
        """
        if self.show_files:
            if success:
                size_str = self._format_bytes(thumb_size)
                print(f"  [OK] {image_file.name} -> row {row} ({size_str})")
            else:
                print(f"  [ERROR] {image_file.name} -> {error or 'failed'}")

    def on_progress_update(self, stats: GenerationStats) -> None:
        """
        Called after each image to report overall progress.

        Args:
            stats: Current generation statistics
        """
        if not self.show_files and stats.processed - self.last_logged >= self.log_interval:
            self.last_logged = stats.processed
            self.logger.info(
                f"Progress: {stats.processed}/{stats.total_to_process} images "
                f"({stats.rate_per_minute:.1f}/min, {stats.remaining_count} left)"
            )

    @staticmethod
    def _format_bytes(bytes_val: Optional[int]) -> str:
        """Format bytes as human-readable string."""
        if bytes_val is None:
            return "unknown"
        for unit in ['B', 'KB', 'MB', 'GB']:
            if bytes_val < 1024:
                return f"{bytes_val:.1f} {unit}"
            bytes_val /= 1024
        return f"{bytes_val:.1f} TB"
