"""ATX heading classifier mixin."""

from __future__ import annotations

from storymark.config import TokenizerConfig
from storymark.lexer.scanners.marker import scan_marker_run
from storymark.tokens import Heading


class HeadingClassifierMixin:
    """Mixin providing ATX heading recognition.

    Only top-level headings are recognised: the ``#`` run must follow a line
    break, or sit at the very start of the document (``initial`` mode). We do
    not track Markdown nesting, so ``> ## Quoted`` is left to the renderer.
    Setext (``===``/``---``) headings are not detected.

    """

    # These will be set by the Tokenizer class
    _source: str
    _source_len: int
    _config: TokenizerConfig

    def _match_heading(self, pos: int, *, initial: bool = False) -> Heading | None:
        """Try to match a heading at ``pos``.

        Args:
            pos: Current position in source
            initial: Also accept a ``#`` run at pos without a leading break.
                Used once, for the first token of the document.

        Returns:
            Heading token, or None if pos does not start a heading.
        """
        source = self._source
        if source.startswith("\n#", pos):
            marker_start = pos + 1
        elif initial and source.startswith("#", pos):
            marker_start = pos
        else:
            return None

        run = scan_marker_run(source, marker_start, self._config.max_heading_run)
        after = run.end
        if after >= self._source_len:
            return None

        follower = source[after]
        if follower == " ":
            # Text runs to the line end; the break belongs to the next token
            line_end = source.find("\n", after)
            if line_end == -1:
                line_end = self._source_len
            return Heading(
                source=source,
                offset=pos,
                length=line_end - pos,
                level=run.length,
                text_offset=after,
                text_length=line_end - after,
            )

        if follower == "\n":
            # Bare marker line: most renderers treat it as an empty heading
            return Heading(
                source=source,
                offset=pos,
                length=after - pos,
                level=run.length,
                text_offset=after,
                text_length=0,
            )

        return None
