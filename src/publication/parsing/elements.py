"""Element (inline) parsing for Publication.

The element loop is shared by builtin paragraphs and by extensions that
need inline content inside their own blocks (list items, for example).

Text grammar:
- ``#`` starts a comment that runs to the end of the line
- Any run of whitespace, newlines included, becomes one pending space
- A pending space is only written out when more text or an element
  follows, so blocks never start or end with a space

End of block:
- A newline followed by another newline or by end of input
- End of input
- Any registered extension voting "end of block here"
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from publication.nodes import Element, Text

if TYPE_CHECKING:
    from publication.extensions.protocol import Extension


class ElementParsingMixin:
    """Mixin providing the shared element loop.

    Required Host Attributes:
        - _source: str
        - _pos: int
        - _extensions: tuple[Extension, ...]

    Required Host Methods (CursorMixin):
        - peek(), take(), is_at_end(), skip_comment()

    """

    __slots__ = ()

    _source: str
    _pos: int
    _extensions: tuple[Extension, ...]

    def sees_end_of_block(self) -> bool:
        """Check whether the current block ends at the cursor.

        Pure: never moves the cursor. Any extension voting yes wins over
        the builtin rule.
        """
        source = self._source
        pos = self._pos
        if pos >= len(source):
            return True
        if source[pos] == "\n" and (pos + 1 >= len(source) or source[pos + 1] == "\n"):
            return True
        return any(ext.sees_end_of_block(self) for ext in self._extensions)

    def parse_elements(self) -> tuple[Element, ...]:
        """Parse elements until the end of the current block.

        Returns:
            Tuple of Text and ExtensionElement nodes, adjacent text merged

        """
        elements: list[Element] = []
        text: list[str] = []
        pending_space = False

        while not self.sees_end_of_block():
            element = self._try_extension_element()
            if element is not None:
                if pending_space and (text or elements):
                    text.append(" ")
                pending_space = False
                if text:
                    elements.append(Text("".join(text)))
                    text.clear()
                elements.append(element)
                continue

            char = self.take()
            if char == "#":
                self.skip_comment(consume_newline=False)
            elif char.isspace():
                pending_space = True
            else:
                if pending_space and (text or elements):
                    text.append(" ")
                pending_space = False
                text.append(char)

        if text:
            elements.append(Text("".join(text)))
        return tuple(elements)

    def _try_extension_element(self) -> Element | None:
        """Offer the cursor position to each extension, in registration order.

        The cursor is restored exactly after every declined trial, so the
        next extension (or the builtin text grammar) sees untouched input.
        """
        for ext in self._extensions:
            saved = self._pos
            element = ext.parse_element(self)
            if element is not None:
                return element
            self._pos = saved
        return None
