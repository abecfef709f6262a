"""
GenerationStats - Statistics for a catalog generation run.
"""

import time
from dataclasses import dataclass, field


@dataclass
class GenerationStats:
    """
    Statistics for a generation run.

    Attributes:
        total_to_process: Images in the selection
        processed: Images rendered and added to the workbook
        bytes_generated: Total bytes of thumbnails generated
        workbook_bytes: Size of the serialized workbook
        start_time: Start timestamp
    """
    total_to_process: int = 0
    processed: int = 0
    bytes_generated: int = 0
    workbook_bytes: int = 0
    start_time: float = field(default_factory=time.time)

    @property
    def elapsed_seconds(self) -> float:
        """Elapsed time in seconds."""
        return time.time() - self.start_time

    @property
    def rate_per_second(self) -> float:
        """Processing rate in images per second."""
        if self.elapsed_seconds > 0:
            return self.processed / self.elapsed_seconds
        return 0.0

    @property
    def rate_per_minute(self) -> float:
        """Processing rate in images per minute."""
        return self.rate_per_second * 60

    def record(self, thumb_size: int) -> None:
        """Count one image added to the workbook."""
        self.processed += 1
        self.bytes_generated += thumb_size

    @property
    def average_thumbnail_bytes(self) -> float:
        """Mean PNG size of the thumbnails generated so far."""
        if self.processed:
            return self.bytes_generated / self.processed
        return 0.0

    @property
    def remaining_count(self) -> int:
        """Remaining to process."""
        return self.total_to_process - self.processed
