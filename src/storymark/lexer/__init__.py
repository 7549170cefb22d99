"""Forward-only tokenizer for Story documentation sections.

Architecture:
lexer/
├── __init__.py          # Re-exports Tokenizer
├── core.py              # Tokenizer class (mixin composition + driver loop)
├── attributes.py        # of="..." and bare flag attribute parsing
├── classifiers/         # Matchers that may decline
│   ├── heading.py       # ATX heading
│   └── directive.py     # <Story ... /> tag
└── scanners/            # Scanners that always consume
    ├── marker.py        # Repeated-marker runs (#, `, ~)
    └── sink.py          # Fence-aware Markdown chunks

Usage:
    >>> from storymark.lexer import Tokenizer
    >>> for token in Tokenizer("# Hello\\nWorld").tokenize():
    ...     print(token)
Heading(offset=0, length=7, level=1, text_offset=1, text_length=6)
Chunk(offset=7, length=6)

"""

from storymark.lexer.core import Matcher, Tokenizer

__all__ = ["Matcher", "Tokenizer"]
