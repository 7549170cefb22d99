"""Table of contents extraction from tokenized sections.

Heading detection exists so a section can show its own outline. The entries
use the same slugs as HtmlHeadingRenderer, so links resolve when both see the
headings in the same order.

Example:
    >>> from storymark import tokenize
    >>> entries = table_of_contents(tokenize("# Button\\n## Usage\\n## Usage"))
    >>> [(e.level, e.title, e.slug) for e in entries]
    [(1, 'Button', 'button'), (2, 'Usage', 'usage'), (2, 'Usage', 'usage-1')]

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from storymark.tokens import Heading, Token
from storymark.utils.text import slugify, unique_slug


@dataclass(frozen=True, slots=True)
class TocEntry:
    """One heading in the outline.

    Attributes:
        level: Heading level (number of ``#``)
        title: Heading text without surrounding whitespace
        slug: Anchor id, unique within the outline (empty if the title has
            no word characters)
        offset: Position of the heading token in source

    """

    level: int
    title: str
    slug: str
    offset: int


def table_of_contents(tokens: Iterable[Token]) -> list[TocEntry]:
    """Collect the headings of a token sequence.

    Args:
        tokens: Tokens in source order

    Returns:
        TocEntry per Heading token, in order.
    """
    seen: set[str] = set()
    entries: list[TocEntry] = []
    for token in tokens:
        if not isinstance(token, Heading):
            continue
        title = token.text.strip()
        slug = slugify(title)
        if slug:
            slug = unique_slug(slug, seen)
        entries.append(TocEntry(level=token.level, title=title, slug=slug, offset=token.offset))
    return entries
