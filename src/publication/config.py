"""ContextVar-based parse configuration for Publication.

Config decides which extensions a parse uses. It is set once, read by every
Parser constructed in the same context without an explicit registry.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    # Direct parser usage
    from publication.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(enable_bold=True, list_bullet="-")):
        blocks = Parser(source).parse()

    # From a TOML file
    config = load_config("publication.toml")

"""

from __future__ import annotations

import tomllib
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from publication.extensions.protocol import Extension
    from publication.extensions.registry import ExtensionRegistry


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        enable_bold: Register ``*text*`` emphasis
        enable_italics: Register ``/text/`` emphasis
        list_bullet: Register bulleted lists using this literal bullet
        extensions: Custom extensions, consulted after the builtins

    """

    enable_bold: bool = False
    enable_italics: bool = False
    list_bullet: str | None = None
    extensions: tuple[Extension, ...] = ()

    def __post_init__(self) -> None:
        """Reject values of the wrong type, such as TOML strings for booleans.

        Raises:
            ValueError: Naming the offending field
        """
        from publication.extensions.protocol import Extension

        for name in ("enable_bold", "enable_italics"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                msg = f"{name} must be a boolean, got {value!r}"
                raise ValueError(msg)
        if self.list_bullet is not None and not isinstance(self.list_bullet, str):
            msg = f"list_bullet must be a string, got {self.list_bullet!r}"
            raise ValueError(msg)
        if not isinstance(self.extensions, tuple):
            msg = f"extensions must be a tuple, got {self.extensions!r}"
            raise ValueError(msg)
        for extension in self.extensions:
            if not isinstance(extension, Extension):
                msg = f"extensions must hold Extension instances, got {extension!r}"
                raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> ParseConfig:
        """Create ParseConfig from a dictionary.

        Keys may be spelled with hyphens (``enable-bold``, ``list-bullet``)
        as in configuration files, or with underscores. Unknown keys are
        silently ignored.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "enable-bold": True,
            ...     "list-bullet": "-",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.enable_bold, config.list_bullet
            (True, '-')

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {}
        for key, value in config_dict.items():
            name = key.replace("-", "_")
            if name in valid_fields:
                filtered[name] = value
        if "extensions" in filtered:
            extensions = filtered["extensions"]
            if not isinstance(extensions, list | tuple):
                msg = f"extensions must be a list, got {extensions!r}"
                raise ValueError(msg)
            filtered["extensions"] = tuple(extensions)
        return cls(**filtered)

    def merged(self, **overrides: Any) -> ParseConfig:
        """Return a copy with the non-None ``overrides`` applied."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return ParseConfig(**values)

    def build_registry(self) -> ExtensionRegistry:
        """Build the extension registry this config describes."""
        from publication.extensions.registry import create_registry

        return create_registry(
            enable_bold=self.enable_bold,
            enable_italics=self.enable_italics,
            list_bullet=self.list_bullet,
            extensions=self.extensions,
        )


def load_config(path: str | Path) -> ParseConfig:
    """Load a ParseConfig from a TOML file.

    Settings are read from a ``[publication]`` table when present, otherwise
    from the top level of the file.

    Example file:
        [publication]
        enable-bold = true
        enable-italics = true
        list-bullet = "**"

    Raises:
        OSError: If the file cannot be read
        tomllib.TOMLDecodeError: If the file is not valid TOML
        ValueError: If a setting has the wrong type, or the file sets
            ``extensions`` (extension objects can only be passed in code)
    """
    with Path(path).open("rb") as f:
        data = tomllib.load(f)
    table = data.get("publication", data)
    if not isinstance(table, dict):
        msg = f"[publication] must be a table in {path}"
        raise ValueError(msg)
    if "extensions" in table:
        msg = "extensions cannot be set from a configuration file; pass Extension objects in code"
        raise ValueError(msg)
    return ParseConfig.from_dict(table)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

# Thread-local configuration via ContextVar
_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to the default configuration (no extensions)."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Properly restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(enable_bold=True)):
        ...     blocks = Parser("*hi*").parse()
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
    "load_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
]
