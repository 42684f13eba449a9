"""Tags identifying which grammar rule produced an AST node.

A Tag serves two purposes:
- AST discriminant: ExtensionBlock, ExtensionBlocks and ExtensionElement
  nodes carry the tag of the extension that built them
- Emitter lookup key: backends resolve custom tags through a tag table

Builtin tags live in the reserved ``builtin:`` namespace. Extension-defined
tags must not use it, and must be unique among registered extensions
(enforced by ExtensionRegistryBuilder).

Example:
    >>> from publication.tags import Tag, BOLD
    >>> MATH = Tag("math:INLINE")
    >>> MATH == Tag("math:INLINE")
    True
    >>> BOLD.is_builtin
    True

Thread Safety:
Tags are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

BUILTIN_NAMESPACE = "builtin:"


@dataclass(frozen=True, slots=True)
class Tag:
    """Opaque, value-equal, hashable node identifier.

    Attributes:
        name: Identifier string, e.g. ``"builtin:BOLD"`` or ``"MY_TAG"``

    """

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            msg = f"Tag name must be a non-empty string, got {self.name!r}"
            raise ValueError(msg)

    @property
    def is_builtin(self) -> bool:
        """Whether this tag is in the reserved builtin namespace."""
        return self.name.startswith(BUILTIN_NAMESPACE)

    def __str__(self) -> str:
        return self.name


BOLD = Tag("builtin:BOLD")
ITALICS = Tag("builtin:ITALICS")
LIST = Tag("builtin:LIST")
LIST_ITEM = Tag("builtin:LIST_ITEM")

__all__ = [
    "BOLD",
    "BUILTIN_NAMESPACE",
    "ITALICS",
    "LIST",
    "LIST_ITEM",
    "Tag",
]
