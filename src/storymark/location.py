"""Source location tracking for debugging and error messages.

Tokens only store absolute offsets. SourceLocation converts an offset range
into 1-indexed line and column numbers when somebody actually asks for it.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location of a token.

    All line and column numbers are 1-indexed.

    Attributes:
        lineno: Starting line number
        col_offset: Starting column
        offset: Absolute start offset in source
        end_offset: Absolute end offset in source (exclusive)
        end_lineno: Line number of the last consumed character
        end_col_offset: Column of the last consumed character
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation.from_offsets("a\\n## b", 1, 6)
            >>> (loc.lineno, loc.col_offset, loc.end_lineno)
            (1, 2, 2)

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location as ``file.md:10:5`` or ``10:5``."""
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def from_offsets(
        cls,
        source: str,
        offset: int,
        end_offset: int,
        source_file: str | None = None,
    ) -> SourceLocation:
        """Build a location from absolute offsets into ``source``.

        Uses str.count/str.rfind so the cost is one pass over the prefix.

        Args:
            source: The full source string
            offset: Start position
            end_offset: End position (exclusive)
            source_file: Optional path for display

        Returns:
            SourceLocation for the range.
        """
        lineno, col = _line_col(source, offset)
        # The end position points at the last consumed character
        last = end_offset - 1 if end_offset > offset else offset
        end_lineno, end_col = _line_col(source, last)
        return cls(
            lineno=lineno,
            col_offset=col,
            offset=offset,
            end_offset=end_offset,
            end_lineno=end_lineno,
            end_col_offset=end_col,
            source_file=source_file,
        )

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Placeholder location for synthetic tokens."""
        return cls(lineno=0, col_offset=0)


def _line_col(source: str, offset: int) -> tuple[int, int]:
    lineno = source.count("\n", 0, offset) + 1
    last_nl = source.rfind("\n", 0, offset)
    return lineno, offset - last_nl
