"""Rendering collaborators for tokenized sections."""

from storymark.renderers.html import HtmlHeadingRenderer
from storymark.renderers.protocol import DirectiveResolver, HeadingRenderer, ProseRenderer

__all__ = [
    "DirectiveResolver",
    "HeadingRenderer",
    "HtmlHeadingRenderer",
    "ProseRenderer",
]
