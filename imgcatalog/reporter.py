"""
Reporter - Human-readable listings of selections and generation results.
"""

import sys
from typing import Optional, TextIO

from .catalog_builder import CatalogResult
from .selection import SelectionSet


class Reporter:
    """
    Writes selection listings and run summaries to a text stream.
    """

    def __init__(self, output: Optional[TextIO] = None):
        """
        Initialize reporter.

        Args:
            output: Output stream (default: stdout)
        """
        self.output = output or sys.stdout

    def _print(self, text: str = "") -> None:
        """Print to output stream."""
        print(text, file=self.output)

    def _format_bytes(self, bytes_val: float) -> str:
        """Format bytes as human-readable string."""
        for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
            if bytes_val < 1024:
                return f"{bytes_val:.1f} {unit}"
            bytes_val /= 1024
        return f"{bytes_val:.1f} PB"

    def _format_duration(self, seconds: float) -> str:
        """Format duration as human-readable string."""
        if seconds < 60:
            return f"{seconds:.1f} seconds"
        elif seconds < 3600:
            return f"{seconds / 60:.1f} minutes"
        else:
            return f"{seconds / 3600:.1f} hours"

    def report_selection(self, selection: SelectionSet) -> None:
        """List the selected images with their sizes."""
        if selection.is_empty:
            self._print("No images selected.")
            return

        self._print(f"Selected Images ({len(selection)}):")
        self._print("-" * 70)
        for image_file in selection:
            self._print(f"  {image_file.name}")
            self._print(f"      Size: {image_file.format_size()}")
        self._print("-" * 70)
        self._print(f"  Total:    {self._format_bytes(selection.total_size)}")
        if selection.dropped:
            self._print(f"  Skipped:  {selection.dropped} non-image file(s)")

    def report_result(self, result: CatalogResult, output_path: str) -> None:
        """Summarize a finished generation run."""
        stats = result.stats
        self._print("=" * 70)
        self._print("IMAGE CATALOG GENERATED")
        self._print("=" * 70)
        self._print(f"  Output:      {output_path}")
        self._print(f"  Rows:        {result.row_count:,}")
        self._print(f"  Workbook:    {self._format_bytes(len(result.data))}")
        self._print(
            f"  Thumbnails:  {self._format_bytes(stats.bytes_generated)} "
            f"(avg {self._format_bytes(stats.average_thumbnail_bytes)})"
        )
        self._print(f"  Time:        {self._format_duration(stats.elapsed_seconds)}")
