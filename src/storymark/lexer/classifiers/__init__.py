"""Matchers that recognise headings and directives.

Each classifier is a mixin method ``_match_*(pos)`` that returns a token or
None, leaving the position untouched when it declines.
"""

from storymark.lexer.classifiers.directive import DirectiveClassifierMixin
from storymark.lexer.classifiers.heading import HeadingClassifierMixin

__all__ = [
    "DirectiveClassifierMixin",
    "HeadingClassifierMixin",
]
