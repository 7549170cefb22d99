"""Reference HTML heading renderer."""

from __future__ import annotations

from storymark.utils.text import escape_html, slugify, unique_slug

MAX_HTML_HEADING_LEVEL = 6


class HtmlHeadingRenderer:
    """Render Heading tokens as ``<hN id="slug">text</hN>``.

    Levels deeper than HTML supports render as ``h6``. Slugs are unique
    per renderer instance, so use one instance per rendered page.

    Usage:
        >>> renderer = HtmlHeadingRenderer()
        >>> renderer.render_heading(2, " Kaboom")
        '<h2 id="kaboom">Kaboom</h2>'

    Thread Safety:
        Keeps the set of emitted slugs; do not share across threads.

    """

    __slots__ = ("_seen_slugs", "_anchors")

    def __init__(self, *, anchors: bool = True) -> None:
        """Initialize renderer.

        Args:
            anchors: Emit ``id`` attributes derived from the heading text
        """
        self._seen_slugs: set[str] = set()
        self._anchors = anchors

    def render_heading(self, level: int, text: str) -> str:
        tag = f"h{min(max(level, 1), MAX_HTML_HEADING_LEVEL)}"
        title = text.strip()
        body = escape_html(title)

        slug = slugify(title) if self._anchors else ""
        if not slug:
            return f"<{tag}>{body}</{tag}>"

        slug = unique_slug(slug, self._seen_slugs)
        return f'<{tag} id="{escape_html(slug)}">{body}</{tag}>'
