"""Logger access for storymark modules.

Records go to standard library loggers under ``storymark.``; the library never
installs handlers.
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, adding the ``storymark.`` prefix if missing."""
    if not (name == "storymark" or name.startswith("storymark.")):
        name = f"storymark.{name}"
    return logging.getLogger(name)
