"""Single-pass tokenizer for documentation sections.

Splits a section description into headings, ``<Story />`` directives and
opaque Markdown chunks. The chunks go to a full Markdown renderer; headings
and directives are handled by the caller.

No regex in the hot path: every scan is ``str.find``/``str.startswith``
based and moves forward only.

Thread Safety:
Tokenizer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable

from storymark.config import TokenizerConfig, get_tokenizer_config
from storymark.lexer.classifiers import DirectiveClassifierMixin, HeadingClassifierMixin
from storymark.lexer.scanners import ChunkScannerMixin
from storymark.tokens import Token

Matcher = Callable[[int], Token | None]


class Tokenizer(
    HeadingClassifierMixin,
    DirectiveClassifierMixin,
    ChunkScannerMixin,
):
    """Split a documentation string into Heading, Directive and Chunk tokens.

    The token list is a lossless partition of the source: joining every
    token's ``raw`` text gives back the input, and each token consumes at
    least one character.

    Matching order at every position:

    1. heading (a line break followed by ``#``)
    2. ``<Story ... />`` directive
    3. chunk (always matches)

    Before the loop, a heading is also accepted at the very start of the
    document without a preceding line break.

    Usage:
            >>> tokens = Tokenizer("Intro\\n## Usage\\n<Story of=\\"a/b\\" />").tokenize()
            >>> [type(t).__name__ for t in tokens]
            ['Chunk', 'Heading', 'Chunk', 'Directive']

    Thread Safety:
        Tokenizer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_config",
        "_matchers",
        # Memos for the "/>" and "<Story" lookups
        "_close_search_from",
        "_close_pos",
        "_lead_search_from",
        "_lead_pos",
    )

    def __init__(self, source: str, config: TokenizerConfig | None = None) -> None:
        """Initialize tokenizer with source text.

        Args:
            source: Documentation text (Markdown with ``<Story />`` tags)
            config: Tokenizer configuration; the context config when None
        """
        self._source = source
        self._source_len = len(source)
        self._config = config if config is not None else get_tokenizer_config()
        self._close_search_from = self._source_len + 1
        self._close_pos = -1
        self._lead_search_from = self._source_len + 1
        self._lead_pos = -1
        self._matchers: tuple[Matcher, ...] = (
            self._match_heading,
            self._match_directive,
            self._match_chunk,
        )

    def tokenize(self) -> list[Token]:
        """Tokenize the whole source.

        Returns:
            List of tokens in source order. Empty for an empty source.

        Complexity: O(n) for typical documents; fence and heading markers
        are capped by the configuration.
        """
        tokens: list[Token] = []
        pos = 0
        source_len = self._source_len

        first = self._match_heading(0, initial=True)
        if first is not None:
            tokens.append(first)
            pos = first.length

        while pos < source_len:
            for matcher in self._matchers:
                token = matcher(pos)
                if token is not None:
                    tokens.append(token)
                    pos += token.length
                    break

        return tokens
