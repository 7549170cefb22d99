"""Repeated-marker scanner shared by heading and code fence detection."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MarkerRun:
    """A run of one repeated character, e.g. ``###`` or ``~~~~``.

    Attributes:
        char: The repeated character
        offset: Position of the first character in source
        length: Number of repetitions counted (capped by the caller's limit)

    """

    char: str
    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length

    @property
    def text(self) -> str:
        return self.char * self.length


def scan_marker_run(source: str, start: int, limit: int) -> MarkerRun:
    """Measure the run of ``source[start]`` repeated from ``start``.

    Counting stops at the first different character, at the end of source,
    or once ``limit`` characters were counted. The limit keeps pathological
    inputs (a line of ten thousand backticks) from dominating the scan while
    still accepting any realistic marker.

    Args:
        source: Source text
        start: Position of the first marker character (must be < len(source))
        limit: Maximum run length to report; values below 1 count as 1

    Returns:
        MarkerRun describing the run.
    """
    char = source[start]
    stop = min(len(source), start + max(limit, 1))
    pos = start + 1
    while pos < stop and source[pos] == char:
        pos += 1
    return MarkerRun(char=char, offset=start, length=pos - start)
