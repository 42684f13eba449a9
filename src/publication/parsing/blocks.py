"""Block parsing for Publication.

Extensions get the first chance at every block, in registration order.
When none of them matches, the builtin paragraph grammar takes over.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from publication.errors import UnexpectedEndOfInput
from publication.nodes import Block, Paragraph

if TYPE_CHECKING:
    from publication.extensions.protocol import Extension


class BlockParsingMixin:
    """Mixin providing block dispatch and the builtin paragraph.

    Required Host Attributes:
        - _pos: int
        - _source_file: str | None
        - _extensions: tuple[Extension, ...]

    Required Host Methods:
        - is_at_end(), location() (CursorMixin)
        - parse_elements() (ElementParsingMixin)

    """

    __slots__ = ()

    _pos: int
    _source_file: str | None
    _extensions: tuple[Extension, ...]

    def parse_block(self) -> Block:
        """Parse one block at the cursor.

        Raises:
            UnexpectedEndOfInput: No extension matched and nothing is left
                to build a paragraph from
        """
        for ext in self._extensions:
            saved = self._pos
            block = ext.parse_block(self)
            if block is not None:
                return block
            self._pos = saved
        return self.parse_paragraph()

    def parse_paragraph(self) -> Paragraph:
        """Parse a builtin paragraph block."""
        if self.is_at_end():
            loc = self.location()
            raise UnexpectedEndOfInput(loc.lineno, loc.col_offset, self._source_file)
        return Paragraph(self.parse_elements())
