"""Text helpers for heading anchors and HTML output.

Example:
    >>> from storymark.utils.text import slugify
    >>> slugify(" Getting started")
    'getting-started'
"""

from __future__ import annotations

import html
import re

_NON_WORD = re.compile(r"[^\w\s-]")
_SEPARATOR_RUN = re.compile(r"[-\s]+")


def slugify(text: str, separator: str = "-", max_length: int | None = None) -> str:
    """Convert heading text to an anchor slug.

    Unicode word characters are kept so non-English headings still produce
    readable anchors. HTML entities are decoded first.

    Args:
        text: Heading text (leading space from the marker is fine)
        separator: Character placed between words
        max_length: Cut the slug at a word boundary below this length

    Returns:
        Lowercase slug, possibly empty.

    Examples:
        >>> slugify("Hello World!")
        'hello-world'
        >>> slugify("Café &amp; Co")
        'café-co'
    """
    if not text:
        return ""

    slug = _NON_WORD.sub("", html.unescape(text).lower().strip())
    slug = _SEPARATOR_RUN.sub(separator, slug).strip(separator)

    if max_length is not None and len(slug) > max_length:
        cut = slug[:max_length]
        head, sep, _ = cut.rpartition(separator)
        slug = head if sep else cut

    return slug


def escape_html(text: str) -> str:
    """Escape text for HTML element content and attribute values.

    Examples:
        >>> escape_html("<b>'x'</b>")
        '&lt;b&gt;&#x27;x&#x27;&lt;/b&gt;'
    """
    if not text:
        return ""
    return html.escape(text, quote=True)


def unique_slug(slug: str, seen: set[str]) -> str:
    """Return ``slug`` or ``slug-N`` so that it is not in ``seen``, and record it.

    Examples:
        >>> seen: set[str] = set()
        >>> unique_slug("usage", seen), unique_slug("usage", seen)
        ('usage', 'usage-1')
    """
    candidate = slug
    counter = 1
    while candidate in seen:
        candidate = f"{slug}-{counter}"
        counter += 1
    seen.add(candidate)
    return candidate
