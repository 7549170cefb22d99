"""Exception classes for storymark.

The tokenizer itself never raises: every string tokenizes. These exceptions
cover the surrounding API (configuration and serialization).
"""

from __future__ import annotations


class StorymarkError(Exception):
    """Base exception for all storymark errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(StorymarkError):
    """Invalid tokenizer configuration value."""

    def __init__(self, field_name: str, message: str) -> None:
        """Initialize config error.

        Args:
            field_name: Name of the offending TokenizerConfig field
            message: Description of the problem
        """
        self.field_name = field_name
        super().__init__(f"Invalid config '{field_name}': {message}")


class SerializationError(StorymarkError, ValueError):
    """Serialized token payload is malformed or does not fit the source."""

    pass
