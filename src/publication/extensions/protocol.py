"""Extension protocol for pluggable Publication grammar.

Extensions are the only way to add syntax. Each one may implement any of
three capabilities; the others fall back to no-op defaults:

- ``parse_block``: consume a whole block at the cursor, or return None
- ``parse_element``: consume one inline element at the cursor, or return None
- ``sees_end_of_block``: pure predicate telling the element loop to stop.
  Only vote yes where one of your ``parse_block`` rules will consume input:
  the parser starts the next block at the same position, and if no block
  rule takes it the builtin paragraph comes out empty and parsing never
  advances.

The parser snapshots its cursor before every ``parse_block`` and
``parse_element`` trial and restores it when the trial returns None, so an
extension may read ahead freely before declining.

Thread Safety:
Extensions must be stateless across trials. The parser only rolls back its
own cursor; state an extension mutates during a failed trial is not undone.

Example:
    >>> from publication.nodes import ExtensionElement, Text
    >>> from publication.tags import Tag
    >>> DOLLARS = Tag("DOLLARS")
    >>>
    >>> class Dollars(Extension):
    ...     name = "dollars"
    ...     tags = (DOLLARS,)
    ...
    ...     def parse_element(self, parser):
    ...         if parser.peek_many(2) != "$$":
    ...             return None
    ...         parser.take_many(2)
    ...         content = []
    ...         while not parser.is_at_end() and parser.peek_many(2) != "$$":
    ...             content.append(parser.take())
    ...         parser.take_many(2)
    ...         return ExtensionElement(DOLLARS, Text("".join(content)))
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from publication.nodes import Block, Element
    from publication.parsing.protocols import ParserHost
    from publication.tags import Tag


@runtime_checkable
class Extension(Protocol):
    """Protocol for grammar extensions.

    Subclass it to inherit the no-op defaults and implement only the
    capabilities you need.

    Attributes:
        name: Identifier used in error messages (defaults to the class name)
        tags: Tags this extension's nodes carry. Validated at registration:
              unique across extensions, outside the ``builtin:`` namespace
              unless the extension is builtin.

    """

    tags: ClassVar[tuple[Tag, ...]] = ()

    @property
    def name(self) -> str:
        return type(self).__name__

    def parse_block(self, parser: ParserHost) -> Block | None:
        """Try to parse a block at the cursor. None means no match."""
        return None

    def parse_element(self, parser: ParserHost) -> Element | None:
        """Try to parse an inline element at the cursor. None means no match."""
        return None

    def sees_end_of_block(self, parser: ParserHost) -> bool:
        """Whether the current block must end at the cursor. Must not move it."""
        return False
