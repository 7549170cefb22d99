"""Token definitions for the storymark tokenizer.

The tokenizer splits a documentation string into three kinds of fragments:

- ``Heading``: an ATX heading found at a line start (``## Title``)
- ``Directive``: a self-closing ``<Story ... />`` tag
- ``Chunk``: everything else, passed verbatim to a Markdown renderer

Tokens never copy text. Each token keeps a reference to the source string
together with ``(offset, length)`` pairs, and text is sliced on demand.
A token's spans are only meaningful against the source it was produced from.

Thread Safety:
All tokens are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from storymark.location import SourceLocation


@dataclass(frozen=True, slots=True)
class Span:
    """Base class for all tokens: a contiguous range of the source.

    Attributes:
        source: The full source string the token was produced from
        offset: Absolute start position in source
        length: Number of characters consumed from source

    """

    source: str = field(repr=False, compare=False, hash=False)
    offset: int
    length: int

    @property
    def end(self) -> int:
        """Absolute end position (exclusive)."""
        return self.offset + self.length

    @property
    def raw(self) -> str:
        """Exact slice of the source consumed by this token."""
        return self.source[self.offset : self.offset + self.length]

    @property
    def location(self) -> SourceLocation:
        """Line/column location of the token start (computed on access)."""
        from storymark.location import SourceLocation

        return SourceLocation.from_offsets(self.source, self.offset, self.end)


@dataclass(frozen=True, slots=True)
class Heading(Span):
    """ATX heading (``# Title``).

    The text keeps the space that follows the marker run, so ``## Kaboom``
    has text ``" Kaboom"``. When the heading was matched after a line break,
    the break is part of the consumed range but not of the text.

    """

    level: int
    text_offset: int
    text_length: int

    @property
    def text(self) -> str:
        return self.source[self.text_offset : self.text_offset + self.text_length]


@dataclass(frozen=True, slots=True)
class Directive(Span):
    """Self-closing ``<Story of="path" controls />`` tag.

    Attributes:
        target_offset: Start of the ``of`` attribute value, None when absent
        target_length: Length of the ``of`` attribute value
        controls: Whether the bare ``controls`` flag is present

    """

    target_offset: int | None
    target_length: int
    controls: bool

    @property
    def target(self) -> str | None:
        """Value of the ``of`` attribute, or None if the tag has none."""
        if self.target_offset is None:
            return None
        return self.source[self.target_offset : self.target_offset + self.target_length]


@dataclass(frozen=True, slots=True)
class Chunk(Span):
    """Opaque run of Markdown, including any fenced code blocks."""

    @property
    def text(self) -> str:
        return self.raw


Token = Heading | Directive | Chunk
