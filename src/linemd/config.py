"""ContextVar-based parse configuration for linemd.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per Markdown instance, read by every lexer created in
the same context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent
    storage, so no locks are needed.

Usage:
    # In Markdown class
    md = Markdown(text_transformer=str.upper)
    html = md("hello")  # Sets config internally via ContextVar

    # Direct usage
    from linemd.config import parse_config_context, ParseConfig

    with parse_config_context(ParseConfig(text_transformer=str.strip)):
        tokens = parse(source)

"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        text_transformer: Optional callback applied to the value of every
            plain (unstyled) Text token, e.g. for smart quotes or
            variable substitution. Styled text and code are left alone.

    """

    text_transformer: Callable[[str], str] | None = None

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> ParseConfig.from_dict({"text_transformer": str.upper, "x": 1})
            ParseConfig(text_transformer=<method 'upper' of 'str' objects>)

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "linemd_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Only affects the current thread's context.
    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> from linemd import parse
        >>> with parse_config_context(ParseConfig(text_transformer=str.upper)):
        ...     tokens = parse("hello")
        >>> tokens
        [Text(value='HELLO', bold=False, italic=False, code=False)]

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
]
