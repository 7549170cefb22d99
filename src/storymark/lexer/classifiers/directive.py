"""Story directive classifier mixin."""

from __future__ import annotations

from storymark.config import TokenizerConfig
from storymark.lexer.attributes import find_target_attribute, has_flag_attribute
from storymark.tokens import Directive
from storymark.utils.logger import get_logger

logger = get_logger(__name__)

TAG_CLOSE = "/>"


class DirectiveClassifierMixin:
    """Mixin providing ``<Story ... />`` recognition.

    The tag must be self-closing. A ``<Story`` with no ``/>`` anywhere after
    it is not a directive and ends up in a Markdown chunk.

    """

    # These will be set by the Tokenizer class
    _source: str
    _config: TokenizerConfig
    _close_search_from: int
    _close_pos: int

    def _find_tag_close(self, pos: int) -> int:
        """Find the first ``/>`` at or after ``pos`` (memoised).

        The previous answer stays valid while ``pos`` lies between the
        previous search start and the found closer, and a failed search
        stays failed for every later position. This keeps a document full of
        unterminated tags linear.
        """
        if self._close_search_from <= pos and (self._close_pos == -1 or self._close_pos >= pos):
            return self._close_pos
        self._close_search_from = pos
        self._close_pos = self._source.find(TAG_CLOSE, pos)
        return self._close_pos

    def _match_directive(self, pos: int) -> Directive | None:
        """Try to match a directive tag at ``pos``.

        Returns:
            Directive token spanning ``<`` through ``/>``, or None.
        """
        config = self._config
        prefix = config.directive_prefix
        source = self._source
        if not source.startswith(prefix, pos):
            return None

        close = self._find_tag_close(pos)
        if close == -1:
            logger.debug("Unterminated %s tag at offset %d; left as Markdown", prefix, pos)
            return None

        content_start = pos + len(prefix)
        target = find_target_attribute(source, content_start, close, config.target_attribute)
        controls = has_flag_attribute(source, content_start, close, config.flag_attribute)

        return Directive(
            source=source,
            offset=pos,
            length=close + len(TAG_CLOSE) - pos,
            target_offset=target[0] if target is not None else None,
            target_length=target[1] if target is not None else 0,
            controls=controls,
        )
