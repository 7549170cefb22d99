"""ContextVar-based tokenizer configuration for storymark.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Tokenizer created without an explicit config reads the active one.

Thread Safety:
    Each thread and asyncio task has its own ContextVar storage,
    so setting a config in one never affects another.

Usage:
    from storymark.config import TokenizerConfig, tokenizer_config_context

    with tokenizer_config_context(TokenizerConfig(max_fence_run=64)):
        tokens = tokenize(source)

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

from storymark.errors import ConfigError

# Markdown supports six heading levels; eight leaves room to recognise
# "almost a heading" runs and reject them.
DEFAULT_MAX_HEADING_RUN = 8
DEFAULT_MAX_FENCE_RUN = 1024


@dataclass(frozen=True, slots=True)
class TokenizerConfig:
    """Immutable tokenizer configuration.

    Attributes:
        max_heading_run: Cap on counted ``#`` characters in a heading marker
        max_fence_run: Cap on counted characters in a code fence marker
        directive_name: Tag name of the embeddable directive (``<Story />``)
        target_attribute: Attribute holding the directive target path
        flag_attribute: Bare boolean attribute enabling the controls panel
        fence_at_document_start: Recognise a code fence on the very first
            line of a document (no preceding line break)

    """

    max_heading_run: int = DEFAULT_MAX_HEADING_RUN
    max_fence_run: int = DEFAULT_MAX_FENCE_RUN
    directive_name: str = "Story"
    target_attribute: str = "of"
    flag_attribute: str = "controls"
    # Departs from the line-break-only fence rule; False restores it
    fence_at_document_start: bool = True

    def __post_init__(self) -> None:
        if self.max_heading_run < 1:
            raise ConfigError("max_heading_run", "must be at least 1")
        if self.max_fence_run < 3:
            raise ConfigError("max_fence_run", "must be at least 3")
        for name in ("directive_name", "target_attribute", "flag_attribute"):
            value = getattr(self, name)
            if not value or any(char.isspace() for char in value):
                raise ConfigError(name, f"must be a non-empty word, got {value!r}")

    @property
    def directive_prefix(self) -> str:
        """Literal opening of the directive tag, e.g. ``<Story``."""
        return "<" + self.directive_name

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> TokenizerConfig:
        """Create TokenizerConfig from dictionary.

        Only includes keys that are valid TokenizerConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = TokenizerConfig.from_dict({
            ...     "max_fence_run": 64,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.max_fence_run
            64

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TokenizerConfig = TokenizerConfig()

_tokenizer_config: ContextVar[TokenizerConfig] = ContextVar(
    "tokenizer_config",
    default=_DEFAULT_CONFIG,
)


def get_tokenizer_config() -> TokenizerConfig:
    """Get current tokenizer configuration (thread-local)."""
    return _tokenizer_config.get()


def set_tokenizer_config(config: TokenizerConfig) -> None:
    """Set tokenizer configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _tokenizer_config.set(config)


def reset_tokenizer_config() -> None:
    """Reset to the default configuration."""
    _tokenizer_config.set(_DEFAULT_CONFIG)


@contextmanager
def tokenizer_config_context(config: TokenizerConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with tokenizer_config_context(TokenizerConfig(max_heading_run=6)):
        ...     tokens = tokenize("####### not a heading")

    """
    previous = _tokenizer_config.get()
    _tokenizer_config.set(config)
    try:
        yield
    finally:
        _tokenizer_config.set(previous)


__all__ = [
    "DEFAULT_MAX_FENCE_RUN",
    "DEFAULT_MAX_HEADING_RUN",
    "TokenizerConfig",
    "get_tokenizer_config",
    "reset_tokenizer_config",
    "set_tokenizer_config",
    "tokenizer_config_context",
]
