"""Render a documentation section by dispatching tokens to collaborators.

A section description is tokenized once; every token is then handed to the
collaborator responsible for its kind, in source order.

Example:
    from storymark import render_section
    from storymark.renderers import HtmlHeadingRenderer

    parts = render_section(
        description,
        prose=markdown_renderer,
        headings=HtmlHeadingRenderer(),
        directives=story_resolver,
    )

"""

from __future__ import annotations

from typing import TypeVar

from storymark.config import TokenizerConfig
from storymark.lexer import Tokenizer
from storymark.renderers.protocol import DirectiveResolver, HeadingRenderer, ProseRenderer
from storymark.tokens import Chunk, Directive, Heading, Token
from storymark.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def render_tokens(
    tokens: list[Token],
    *,
    prose: ProseRenderer[T],
    headings: HeadingRenderer[T],
    directives: DirectiveResolver[T],
) -> list[T]:
    """Dispatch already tokenized content to the collaborators.

    Args:
        tokens: Output of Tokenizer.tokenize()
        prose: Renders Chunk text
        headings: Renders Heading level and text
        directives: Resolves Directive target and controls flag

    Returns:
        One rendered item per token, in order.
    """
    rendered: list[T] = []
    for token in tokens:
        match token:
            case Heading():
                rendered.append(headings.render_heading(token.level, token.text))
            case Directive():
                if token.target is None:
                    logger.debug("Story tag at %s has no target attribute", token.location)
                rendered.append(directives.resolve_directive(token.target, token.controls))
            case Chunk():
                rendered.append(prose.render_prose(token.text))
    return rendered


def render_section(
    source: str,
    *,
    prose: ProseRenderer[T],
    headings: HeadingRenderer[T],
    directives: DirectiveResolver[T],
    config: TokenizerConfig | None = None,
) -> list[T]:
    """Tokenize a section description and render every token.

    Args:
        source: Section description (Markdown with ``<Story />`` tags)
        prose: Renders Chunk text
        headings: Renders Heading level and text
        directives: Resolves Directive target and controls flag
        config: Tokenizer configuration (context config when None)

    Returns:
        One rendered item per token, in order.
    """
    logger.debug("Tokenizing section (%d characters)", len(source))
    tokens = Tokenizer(source, config).tokenize()
    logger.debug("Rendering %d tokens", len(tokens))
    return render_tokens(tokens, prose=prose, headings=headings, directives=directives)
