"""Inline emphasis extensions: bold and italics.

Syntax:
``*text*`` → ExtensionElement(BOLD, Text("text"))
``/text/`` → ExtensionElement(ITALICS, Text("text"))

The content is a flat text run: no nested elements. Whitespace inside
it coalesces and ``#`` comments are dropped, as in plain text. If the
block ends before the closing delimiter the trial declines, and the
parser's rollback leaves the opening delimiter to be read as text.

Thread Safety:
These extensions are stateless and thread-safe.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from publication.extensions import register_extension
from publication.extensions.protocol import Extension
from publication.nodes import ExtensionElement, Text
from publication.tags import BOLD, ITALICS, Tag

if TYPE_CHECKING:
    from publication.parsing.protocols import ParserHost


class DelimitedEmphasis(Extension):
    """Text run enclosed by a single-character delimiter."""

    delimiter: ClassVar[str]
    tag: ClassVar[Tag]

    def parse_element(self, parser: ParserHost) -> ExtensionElement | None:
        if parser.peek() != self.delimiter:
            return None
        parser.take()

        text: list[str] = []
        pending_space = False
        while True:
            if parser.sees_end_of_block():
                return None
            char = parser.take()
            if char == self.delimiter:
                return ExtensionElement(self.tag, Text("".join(text)))
            if char == "#":
                parser.skip_comment(consume_newline=False)
            elif char.isspace():
                pending_space = True
            else:
                if pending_space and text:
                    text.append(" ")
                pending_space = False
                text.append(char)


@register_extension("bold")
class Bold(DelimitedEmphasis):
    """``*strong*`` emphasis."""

    name = "bold"
    delimiter = "*"
    tag = BOLD
    tags = (BOLD,)


@register_extension("italics")
class Italics(DelimitedEmphasis):
    """``/slanted/`` emphasis."""

    name = "italics"
    delimiter = "/"
    tag = ITALICS
    tags = (ITALICS,)
