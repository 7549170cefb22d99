"""storymark: split component documentation into headings, stories and Markdown.

A documentation section is Markdown with embedded ``<Story of="path" />``
tags. storymark scans it once and returns an ordered, lossless list of
tokens: headings (for the section outline), story directives (resolved by the
host application) and opaque Markdown chunks (for a Markdown renderer).
Fenced code blocks are kept intact, so examples showing headings or story
tags are not mistaken for the real thing.

Quick Start:
    >>> from storymark import tokenize
    >>> [type(t).__name__ for t in tokenize("## Kaboom\\n<Story of=\\"button/primary\\" />")]
    ['Heading', 'Chunk', 'Directive']

Rendering:
    >>> from storymark import render_section
    >>> from storymark.renderers import HtmlHeadingRenderer
    >>> parts = render_section(source, prose=md, headings=HtmlHeadingRenderer(),
    ...                        directives=resolver)

"""

from __future__ import annotations

from storymark.config import (
    TokenizerConfig,
    get_tokenizer_config,
    reset_tokenizer_config,
    set_tokenizer_config,
    tokenizer_config_context,
)
from storymark.errors import ConfigError, SerializationError, StorymarkError
from storymark.lexer import Tokenizer
from storymark.location import SourceLocation
from storymark.renderers import (
    DirectiveResolver,
    HeadingRenderer,
    HtmlHeadingRenderer,
    ProseRenderer,
)
from storymark.section import render_section, render_tokens
from storymark.serialization import from_dict, from_json, to_dict, to_json
from storymark.toc import TocEntry, table_of_contents
from storymark.tokens import Chunk, Directive, Heading, Span, Token

__version__ = "0.1.0"


def tokenize(source: str, *, config: TokenizerConfig | None = None) -> list[Token]:
    """Tokenize a documentation section.

    Never raises for any string input; the empty string gives an empty list.

    Args:
        source: Markdown source with optional ``<Story />`` tags
        config: Tokenizer configuration (context config when None)

    Returns:
        Tokens in source order. Joining their ``raw`` text gives back source.

    Example:
        >>> tokens = tokenize("Intro\\n## Usage")
        >>> tokens[1].level, tokens[1].text
        (2, ' Usage')
    """
    return Tokenizer(source, config).tokenize()


__all__ = [
    "__version__",
    # Tokenizing
    "tokenize",
    "Tokenizer",
    # Tokens
    "Span",
    "Heading",
    "Directive",
    "Chunk",
    "Token",
    # Location
    "SourceLocation",
    # Rendering
    "render_section",
    "render_tokens",
    "ProseRenderer",
    "HeadingRenderer",
    "DirectiveResolver",
    "HtmlHeadingRenderer",
    # Outline
    "TocEntry",
    "table_of_contents",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "TokenizerConfig",
    "get_tokenizer_config",
    "set_tokenizer_config",
    "reset_tokenizer_config",
    "tokenizer_config_context",
    # Errors
    "StorymarkError",
    "ConfigError",
    "SerializationError",
]
