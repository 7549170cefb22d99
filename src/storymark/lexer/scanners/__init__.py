"""Scanners for the storymark tokenizer.

- marker: measures runs of a repeated marker character
- sink: collects Markdown chunks, skipping over fenced code blocks
"""

from storymark.lexer.scanners.marker import MarkerRun, scan_marker_run
from storymark.lexer.scanners.sink import ChunkScannerMixin

__all__ = [
    "ChunkScannerMixin",
    "MarkerRun",
    "scan_marker_run",
]
