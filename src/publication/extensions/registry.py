"""Extension registry: ordered, validated extension lists.

Registration order is dispatch order, so the registry preserves it.
Tags are checked once here, at registration, instead of on every emit:
- a tag may be claimed by one registered extension only
- ``builtin:`` tags may only be claimed by builtin extensions

Thread Safety:
ExtensionRegistry is immutable after creation. Safe to share.
Use ExtensionRegistryBuilder for mutable construction.

Example:
    >>> builder = ExtensionRegistryBuilder()
    >>> builder.register(Lists("-")).register(Bold())
    >>> registry = builder.build()
    >>> [ext.name for ext in registry]
    ['lists', 'bold']
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from publication.errors import ExtensionError
from publication.extensions import is_builtin_extension
from publication.extensions.protocol import Extension
from publication.tags import Tag
from publication.utils.logger import get_logger

logger = get_logger(__name__)


class ExtensionRegistry:
    """Immutable, ordered collection of extensions.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_extensions", "_by_tag")

    def __init__(
        self,
        extensions: tuple[Extension, ...],
        by_tag: dict[Tag, Extension],
    ) -> None:
        """Initialize registry with pre-built mappings.

        Use ExtensionRegistryBuilder to create instances.
        """
        self._extensions = extensions
        self._by_tag = by_tag

    @property
    def extensions(self) -> tuple[Extension, ...]:
        """Registered extensions in dispatch order."""
        return self._extensions

    @property
    def tags(self) -> frozenset[Tag]:
        """All tags claimed by registered extensions."""
        return frozenset(self._by_tag)

    def owner_of(self, tag: Tag) -> Extension | None:
        """Extension that claimed ``tag``, if any."""
        return self._by_tag.get(tag)

    def __iter__(self) -> Iterator[Extension]:
        return iter(self._extensions)

    def __len__(self) -> int:
        return len(self._extensions)

    def __repr__(self) -> str:
        names = ", ".join(ext.name for ext in self._extensions)
        return f"ExtensionRegistry([{names}])"


class ExtensionRegistryBuilder:
    """Mutable builder for ExtensionRegistry.

    Example:
        >>> builder = ExtensionRegistryBuilder()
        >>> builder.register(Bold())
        >>> registry = builder.build()
    """

    __slots__ = ("_extensions", "_by_tag")

    def __init__(self) -> None:
        self._extensions: list[Extension] = []
        self._by_tag: dict[Tag, Extension] = {}

    def register(self, extension: Extension) -> ExtensionRegistryBuilder:
        """Register an extension after all previously registered ones.

        Args:
            extension: Object implementing the Extension protocol

        Returns:
            Self for chaining

        Raises:
            TypeError: If the object does not implement the protocol
            ExtensionError: If one of its tags is reserved or already claimed
        """
        if not isinstance(extension, Extension):
            msg = f"{type(extension).__name__} does not implement the Extension protocol"
            raise TypeError(msg)

        builtin = is_builtin_extension(extension)
        claimed: dict[Tag, Extension] = {}
        for tag in extension.tags:
            if not isinstance(tag, Tag):
                raise ExtensionError(extension.name, f"tag {tag!r} is not a Tag")
            if tag.is_builtin and not builtin:
                raise ExtensionError(
                    extension.name,
                    f"tag '{tag}' is reserved for builtin extensions",
                )
            existing = self._by_tag.get(tag) or claimed.get(tag)
            if existing is not None:
                raise ExtensionError(
                    extension.name,
                    f"tag '{tag}' already registered by '{existing.name}'",
                )
            claimed[tag] = extension

        self._by_tag.update(claimed)
        self._extensions.append(extension)
        logger.debug("Registered extension %s (tags: %s)", extension.name, list(claimed))
        return self

    def register_all(self, extensions: Iterable[Extension]) -> ExtensionRegistryBuilder:
        """Register multiple extensions, in order."""
        for extension in extensions:
            self.register(extension)
        return self

    def build(self) -> ExtensionRegistry:
        """Build immutable registry from registered extensions."""
        return ExtensionRegistry(
            extensions=tuple(self._extensions),
            by_tag=dict(self._by_tag),
        )

    def __len__(self) -> int:
        return len(self._extensions)


def create_registry(
    *,
    enable_bold: bool = False,
    enable_italics: bool = False,
    list_bullet: str | None = None,
    extensions: Iterable[Extension] = (),
) -> ExtensionRegistry:
    """Build a registry from the standard options.

    Builtins are registered first (lists, bold, italics), followed by any
    custom ``extensions`` in the order given.

    Args:
        enable_bold: Register ``*text*`` emphasis
        enable_italics: Register ``/text/`` emphasis
        list_bullet: Register bulleted lists using this literal bullet
        extensions: Additional custom extensions

    Returns:
        Immutable ExtensionRegistry
    """
    from publication.extensions.emphasis import Bold, Italics
    from publication.extensions.lists import Lists

    builder = ExtensionRegistryBuilder()
    if list_bullet is not None:
        builder.register(Lists(list_bullet))
    if enable_bold:
        builder.register(Bold())
    if enable_italics:
        builder.register(Italics())
    builder.register_all(extensions)
    return builder.build()
