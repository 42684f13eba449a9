"""Bulleted list extension.

Syntax (with bullet ``"-"``):
    - first item
    - second item

Each bullet occurrence starts one item; consecutive items form one list:
``ExtensionBlocks(LIST, (ExtensionBlock(LIST_ITEM, ...), ...))``.

The bullet also ends the current block wherever it appears, so a
paragraph directly followed by a bullet line stops without needing a
blank line. A blank line between bullet lines starts a new list.

Thread Safety:
Lists holds only its immutable bullet string; safe to share.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from publication.extensions import register_extension
from publication.extensions.protocol import Extension
from publication.nodes import ExtensionBlock, ExtensionBlocks
from publication.tags import LIST, LIST_ITEM

if TYPE_CHECKING:
    from publication.parsing.protocols import ParserHost


@register_extension("lists")
class Lists(Extension):
    """Bulleted lists introduced by a literal bullet string.

    Args:
        bullet: Literal prefix marking an item, of any non-empty length
                (e.g. ``"-"``, ``"**"``, ``"=>"``)

    """

    name = "lists"
    tags = (LIST, LIST_ITEM)

    def __init__(self, bullet: str) -> None:
        if not bullet:
            msg = "List bullet must be a non-empty string"
            raise ValueError(msg)
        self.bullet = bullet

    def __repr__(self) -> str:
        return f"Lists(bullet={self.bullet!r})"

    def sees_bullet(self, parser: ParserHost) -> bool:
        return parser.peek_many(len(self.bullet)) == self.bullet

    def parse_block(self, parser: ParserHost) -> ExtensionBlocks | None:
        if not self.sees_bullet(parser):
            return None
        items = []
        while self.sees_bullet(parser):
            items.append(self._parse_item(parser))
        return ExtensionBlocks(LIST, tuple(items))

    def sees_end_of_block(self, parser: ParserHost) -> bool:
        return self.sees_bullet(parser)

    def _parse_item(self, parser: ParserHost) -> ExtensionBlock:
        parser.take_many(len(self.bullet))
        parser.skip_whitespace()
        return ExtensionBlock(LIST_ITEM, parser.parse_elements())
