"""Utility modules for storymark.

Provides:
- text: slugify, escape_html for heading anchors and HTML output
- logger: get_logger for logging
"""

from storymark.utils.logger import get_logger
from storymark.utils.text import escape_html, slugify, unique_slug

__all__ = [
    "escape_html",
    "get_logger",
    "slugify",
    "unique_slug",
]
