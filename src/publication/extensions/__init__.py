"""Extension system for the Publication parser.

Extensions add grammar to the core without modifying it:
- bold: ``*strong*`` inline emphasis
- italics: ``/slanted/`` inline emphasis
- lists: bulleted lists with a caller-chosen bullet string

Usage:
    >>> from publication import Parser
    >>> from publication.extensions import get_extension
    >>>
    >>> parser = Parser("Some *bold* text")
    >>> parser.add_extension(get_extension("bold"))
    >>> blocks = parser.parse()
    >>>
    >>> # Lists take the bullet as an option
    >>> lists = get_extension("lists", bullet="-")

Dispatch Order:
During parsing, extensions are consulted strictly in registration order and
the first match wins. Emitters, by contrast, resolve the builtin tags (bold,
italics, list) with fixed priority before any caller-supplied tag mapping.

Thread Safety:
All builtin extensions are stateless. Multiple threads can share instances.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from publication.extensions.protocol import Extension

__all__ = [
    "BUILTIN_EXTENSIONS",
    "Extension",
    "get_extension",
    "register_extension",
]

# Registry of builtin extensions
BUILTIN_EXTENSIONS: dict[str, type[Extension]] = {}


def register_extension(
    name: str,
) -> Callable[[type[Extension]], type[Extension]]:
    """Decorator to register a builtin extension.

    Args:
        name: Extension name for lookup

    Returns:
        Decorator function that registers and returns the class

    Usage:
        @register_extension("bold")
        class Bold(DelimitedEmphasis):
            ...

    """

    def decorator(cls: type[Extension]) -> type[Extension]:
        BUILTIN_EXTENSIONS[name] = cls
        return cls

    return decorator


def get_extension(name: str, **options: Any) -> Extension:
    """Get a builtin extension instance by name.

    Args:
        name: Extension name (e.g., "bold", "lists")
        **options: Constructor options (e.g., ``bullet="-"`` for lists)

    Returns:
        Extension instance

    Raises:
        KeyError: If extension name is not recognized

    """
    if name not in BUILTIN_EXTENSIONS:
        available = ", ".join(sorted(BUILTIN_EXTENSIONS.keys()))
        raise KeyError(f"Unknown extension: {name!r}. Available: {available}")
    return BUILTIN_EXTENSIONS[name](**options)


def is_builtin_extension(extension: Extension) -> bool:
    """Whether ``extension`` is an instance of a registered builtin class."""
    return type(extension) in BUILTIN_EXTENSIONS.values()


# Import builtin extensions to register them
# These imports trigger the @register_extension decorators
from publication.extensions.emphasis import Bold, Italics  # noqa: E402
from publication.extensions.lists import Lists  # noqa: E402
from publication.extensions.registry import (  # noqa: E402
    ExtensionRegistry,
    ExtensionRegistryBuilder,
    create_registry,
)

__all__ += [
    "Bold",
    "ExtensionRegistry",
    "ExtensionRegistryBuilder",
    "Italics",
    "Lists",
    "create_registry",
    "is_builtin_extension",
]
