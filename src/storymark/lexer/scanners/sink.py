"""Fence-aware Markdown chunk scanner mixin."""

from __future__ import annotations

from storymark.config import TokenizerConfig
from storymark.lexer.scanners.marker import scan_marker_run
from storymark.tokens import Chunk
from storymark.utils.logger import get_logger

logger = get_logger(__name__)

FENCE_OPENERS = ("```", "~~~")


class ChunkScannerMixin:
    """Mixin providing the fallback scanner that collects plain Markdown.

    The chunk ends right before the next place where a heading or directive
    could start:

    - a line break followed by ``#``
    - ``<Story `` or ``<Story`` + line break

    Fenced code blocks are skipped as a whole, so headings and tags inside
    code examples stay part of the chunk. Only the opening and closing fence
    lines are looked at; the code itself is never examined.

    """

    # These will be set by the Tokenizer class
    _source: str
    _source_len: int
    _config: TokenizerConfig
    _lead_search_from: int
    _lead_pos: int

    def _match_chunk(self, pos: int) -> Chunk:
        """Collect Markdown starting at ``pos``.

        Always consumes at least one character: the tokenizer only gets here
        after the heading and directive matchers declined at ``pos``.

        Returns:
            Chunk token.
        """
        source = self._source
        source_len = self._source_len
        cursor = pos

        if pos == 0 and self._config.fence_at_document_start and self._is_fence_opener(0):
            cursor = self._skip_fence(0)
            if cursor == -1:
                return self._unclosed_fence_chunk(pos, 0)

        lead = self._find_directive_lead(pos + 1)
        while cursor < source_len:
            newline = source.find("\n", cursor)
            if lead != -1 and lead < cursor:
                lead = self._find_directive_lead(cursor)

            if lead != -1 and (newline == -1 or lead < newline):
                return self._chunk(pos, lead)
            if newline == -1:
                break

            line_start = newline + 1
            if self._is_fence_opener(line_start):
                cursor = self._skip_fence(line_start)
                if cursor == -1:
                    return self._unclosed_fence_chunk(pos, line_start)
                continue

            if newline > pos and source.startswith("#", line_start):
                return self._chunk(pos, newline)

            cursor = line_start

        return self._chunk(pos, source_len)

    def _chunk(self, start: int, end: int) -> Chunk:
        return Chunk(source=self._source, offset=start, length=end - start)

    def _unclosed_fence_chunk(self, pos: int, fence_start: int) -> Chunk:
        # Fail open: render the rest of the document rather than reject it
        logger.debug(
            "Unclosed code fence at offset %d; remaining %d characters kept as one chunk",
            fence_start,
            self._source_len - pos,
        )
        return self._chunk(pos, self._source_len)

    def _is_fence_opener(self, pos: int) -> bool:
        return self._source.startswith(FENCE_OPENERS, pos)

    def _skip_fence(self, opener: int) -> int:
        """Skip a fenced block whose opening marker starts at ``opener``.

        The closer is the next line starting with the same marker run (same
        character, at least as long). The info string after the opening
        marker and anything after the closing marker are ordinary text.

        Returns:
            Position right after the closing marker run, or -1 if the fence
            is never closed.
        """
        run = scan_marker_run(self._source, opener, self._config.max_fence_run)
        closer = "\n" + run.text
        idx = self._source.find(closer, run.end)
        if idx == -1:
            return -1
        return idx + len(closer)

    def _find_directive_lead(self, start: int) -> int:
        """Find the next ``<Story `` or ``<Story\\n`` at or after ``start`` (memoised).

        Same reuse rule as the ``/>`` lookup: an answer covers every start
        between the previous search start and the found lead, and a failed
        search covers every later start. Each stretch of the source is
        walked once per document.
        """
        if self._lead_search_from <= start and (self._lead_pos == -1 or self._lead_pos >= start):
            return self._lead_pos
        self._lead_search_from = start
        self._lead_pos = self._scan_directive_lead(start)
        return self._lead_pos

    def _scan_directive_lead(self, start: int) -> int:
        source = self._source
        prefix = self._config.directive_prefix
        idx = source.find(prefix, start)
        while idx != -1:
            follower = idx + len(prefix)
            if follower < self._source_len and source[follower] in " \n":
                return idx
            idx = source.find(prefix, idx + 1)
        return -1
